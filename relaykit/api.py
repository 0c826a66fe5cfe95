"""
Using the API
=============

The :class:`API` ties together the schema, the data layer and the resolvers.
Resolvers can be attached directly on the API or grouped in a
:class:`Resolver` and included later::

    import relaykit

    api = relaykit.API(
        schema=relaykit.load_schema(),
        data=relaykit.Database(),
    )

    @api.query("viewer")
    async def viewer(_root, info):
        return info.context.data.get_viewer()

    results = await api.call("query { viewer { id } }")

Most applications should use :func:`relaykit.build_api` which also installs
the node resolvers and the bundled resolver groups.
"""

import asyncio
import collections
import functools
import inspect
import logging
import typing

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLError,
    GraphQLField,
    GraphQLFieldMap,
    GraphQLObjectType,
    GraphQLSchema,
    execute,
    parse,
    validate,
    validate_schema,
)

from .config import Config
from .context import Context
from .database import Database
from .errors import ResolverRegistrationError, SchemaValidationError
from .schema import TypeDefs, build_and_extend_schema

if typing.TYPE_CHECKING:  # pragma: no cover
    from .node import NodeRegistry

LOG = logging.getLogger(__name__)


class ParseResults(typing.NamedTuple):
    document_ast: DocumentNode
    errors: typing.List[GraphQLError] = []


class Resolver:
    """
    Group of resolvers that can be included in an API. This keeps
    each feature in its own module::

        people = relaykit.Resolver()

        @people.mutation("createPerson")
        async def create_person(_root, info, input):
            ...

        api.include_resolver(people)
    """

    registry: typing.DefaultDict[str, typing.Dict[str, typing.Callable]]

    def __init__(self):
        self.registry = collections.defaultdict(dict)

    def query(self, field_name: typing.Optional[str] = None) -> typing.Any:
        return self.resolver("Query", field_name)

    def mutation(self, field_name: typing.Optional[str] = None) -> typing.Any:
        return self.resolver("Mutation", field_name)

    def resolver(
        self, type_name: str, field_name: typing.Optional[str] = None
    ) -> typing.Any:
        """Field Resolver

        Add a field resolver for a given type, by default it will use the
        name of the function as the `field_name` to be resolved.

        :param type_name: Parent object type name that is being resolved.
        :param field_name: Field name to resolve, by default the function name will be used.
        """

        def decorator(function):
            _name = field_name or function.__name__
            self.registry[type_name][_name] = function
            return function

        return decorator


class API:
    """
    Executable GraphQL schema bound to a data layer. Resolvers are attached
    to fields of the schema and every call gets a fresh context.

    :param schema: GraphQL schema as a str, document or list of either.
    :param data: Data layer that resolvers read from `info.context.data`.
    :param config: Application settings, added to the context.
    :param context: Context class to hold shared state, added to GraphQLResolveInfo object.
    :param middleware: List of middleware to enable.
    :param root_value: Root value passed to the top level resolvers.
    :param logger: Logger used when formatting errors.
    :param level: Log level used when formatting errors.
    :param kwargs: Any extra kwargs passed directly to graphql.execute function.
    """

    schema: GraphQLSchema
    data: Database
    config: Config
    logger: logging.Logger
    level: int
    nodes: typing.Optional["NodeRegistry"]

    def __init__(
        self,
        schema: typing.Union[TypeDefs, typing.Iterable[TypeDefs]],
        data: Database,
        config: typing.Optional[Config] = None,
        context: typing.Optional[typing.Type[Context]] = None,
        middleware: typing.Optional[typing.List[typing.Any]] = None,
        root_value: typing.Any = None,
        logger: typing.Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        **kwargs,
    ):
        self.data = data
        self.config = config or Config()
        self._context = context or Context
        self.middleware = middleware or []
        self._root_value = root_value
        self.logger = logger or LOG
        self.level = level
        self._kwargs = kwargs
        self.nodes = None
        self.schema = self._build_schema(schema)

    def _build_schema(
        self, schema: typing.Union[TypeDefs, typing.Iterable[TypeDefs]]
    ) -> GraphQLSchema:
        type_defs = [schema] if isinstance(schema, (str, DocumentNode)) else schema
        built = build_and_extend_schema(type_defs)

        schema_validation_errors = validate_schema(built)
        if schema_validation_errors:
            raise SchemaValidationError(f"Invalid schema: {schema_validation_errors}")

        return built

    def query(self, field_name: typing.Optional[str] = None) -> typing.Any:
        """Query Resolver

        Short cut to add a resolver for a query::

            @api.query("viewer")
            async def viewer(parent, info):
                return info.context.data.get_viewer()

        :param field_name: Field name to resolve, by default the function name will be used.
        """
        return self.resolver("Query", field_name)

    def mutation(self, field_name: typing.Optional[str] = None) -> typing.Any:
        """Mutation Resolver

        Short cut to add a resolver for a mutation.

        :param field_name: Field name to resolve, by default the function name will be used.
        """
        return self.resolver("Mutation", field_name)

    def resolver(
        self, type_name: str, field_name: typing.Optional[str] = None
    ) -> typing.Any:
        """Field Resolver

        Add a field resolver for a given type, by default it will use the
        name of the function as the `field_name` to be resolved.

        :param type_name: Parent object type name that is being resolved.
        :param field_name: Field name to resolve, by default the function name will be used.
        """

        def decorator(function):
            _name = field_name or function.__name__
            field_def = self._validate_field(type_name=type_name, field_name=_name)
            field_def.resolve = function
            return function

        return decorator

    def include_resolver(self, resolver: Resolver):
        """Include a set of resolvers

        This is used to break up a larger application into different modules.
        """
        for type_name, value in resolver.registry.items():
            for field_name, resolve_fn in value.items():
                field_def = self._validate_field(type_name, field_name)
                field_def.resolve = resolve_fn

    def _validate_field(self, type_name: str, field_name: str) -> GraphQLField:
        object_type = self.schema.get_type(type_name)
        if not isinstance(object_type, GraphQLObjectType):
            raise ResolverRegistrationError(
                f"Invalid type '{type_name}' in resolver decorator"
            )

        field_map = typing.cast(GraphQLFieldMap, object_type.fields)
        field_definition = field_map.get(field_name)
        if not field_definition:
            raise ResolverRegistrationError(
                f"Invalid field '{type_name}.{field_name}' in resolver decorator"
            )

        return field_definition

    def get_context(self, request: typing.Any = None) -> Context:
        return self._context(
            data=self.data, request=request, config=self.config, nodes=self.nodes
        )

    @functools.lru_cache(maxsize=128)
    def _validate(self, document: DocumentNode) -> typing.List[GraphQLError]:
        """Validate the document against the schema and store results in lru_cache."""
        return validate(self.schema, document)

    @functools.lru_cache(maxsize=128)
    def _parse_document(self, document: str) -> ParseResults:
        """Parse and store the document in lru_cache."""
        try:
            document_ast = parse(document)
            return ParseResults(document_ast, [])
        except GraphQLError as err:
            return ParseResults(DocumentNode(), [err])

    async def call(
        self,
        document: typing.Union[DocumentNode, str],
        request: typing.Any = None,
        variables: typing.Optional[typing.Dict[str, typing.Any]] = None,
        operation_name: typing.Optional[str] = None,
    ) -> ExecutionResult:
        """Preform a query against the schema.

        This is meant to be called in an asyncio.loop, if you are using a
        web framework that is synchronous use the `call_sync` method.
        """
        if isinstance(document, str):
            document, errors = self._parse_document(document)
            if errors:
                return ExecutionResult(data=None, errors=errors)

        if validation_errors := self._validate(document):
            return ExecutionResult(data=None, errors=validation_errors)

        context = self.get_context(request)
        result = execute(
            schema=self.schema,
            document=document,
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
            middleware=self.middleware,
            root_value=self._root_value,
            **self._kwargs,
        )
        if inspect.isawaitable(result):
            return await result
        return typing.cast(ExecutionResult, result)

    def call_sync(
        self,
        document: typing.Union[DocumentNode, str],
        request: typing.Any = None,
        variables: typing.Optional[typing.Dict[str, typing.Any]] = None,
        operation_name: typing.Optional[str] = None,
    ) -> ExecutionResult:
        return asyncio.run(self.call(document, request, variables, operation_name))

"""
Object Identification
=====================

Relay clients refetch any object through a single `node(id: ID!)` field.
To make that work every object type that implements the `Node` interface
exposes an opaque global id, and the server needs two lookups:

* global id -> record, used by `Query.node`
* record -> GraphQL type name, used by `Node.resolve_type`

Both directions are answered by one table of :class:`NodeType` rows so a
type can not be registered for one direction and forgotten in the other::

    registry = NodeRegistry(
        [
            NodeType("User", User, db.get_user),
            NodeType("Widget", Widget, db.get_widget),
        ]
    )

    global_id = registry.to_global_id("User", "1")
    assert registry.resolve_by_id(global_id) == db.get_user("1")
    assert registry.resolve_type_tag(db.get_user("1")) == "User"

The encoding itself comes from `graphql_relay`.
"""

import logging
import typing

from graphql import (
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLSchema,
    is_object_type,
)
from graphql_relay import ResolvedGlobalId, from_global_id, to_global_id

from .errors import SchemaConfigurationError

if typing.TYPE_CHECKING:  # pragma: no cover
    from .api import API

LOG = logging.getLogger(__name__)

NODE_INTERFACE = "Node"

Lookup = typing.Callable[[str], typing.Any]


def decode_global_id(global_id: str) -> ResolvedGlobalId:
    """Decode a global id, malformed input decodes to an empty type."""
    try:
        return from_global_id(global_id)
    except (TypeError, ValueError):
        return ResolvedGlobalId("", "")


class NodeType(typing.NamedTuple):
    """A registered node type.

    :param name: GraphQL object type name, also the tag stored in the global id.
    :param record_type: Python class of the records returned by `lookup`.
    :param lookup: Accessor that returns the record for a local id or None.
    """

    name: str
    record_type: type
    lookup: Lookup


class NodeRegistry:
    """Closed set of node types."""

    _by_name: typing.Dict[str, NodeType]
    _by_class: typing.Dict[type, NodeType]

    def __init__(self, node_types: typing.Iterable[NodeType]):
        self._by_name = {}
        self._by_class = {}
        for node_type in node_types:
            if node_type.name in self._by_name:
                raise SchemaConfigurationError(
                    f"Node type '{node_type.name}' is registered more than once"
                )
            if node_type.record_type in self._by_class:
                existing = self._by_class[node_type.record_type]
                raise SchemaConfigurationError(
                    f"Record class {node_type.record_type.__name__} is registered "
                    f"for both '{existing.name}' and '{node_type.name}'"
                )
            self._by_name[node_type.name] = node_type
            self._by_class[node_type.record_type] = node_type

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> typing.Iterator[NodeType]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    @property
    def names(self) -> typing.Set[str]:
        return set(self._by_name)

    def to_global_id(self, name: str, local_id: typing.Union[str, int]) -> str:
        return to_global_id(name, local_id)

    def from_global_id(self, global_id: str) -> ResolvedGlobalId:
        return decode_global_id(global_id)

    def resolve_by_id(self, global_id: str) -> typing.Any:
        """Return the record for a global id or None.

        Unknown types, malformed ids and missing records all come back as
        None, a node that no longer exists is a normal answer.
        """
        resolved = self.from_global_id(global_id)
        node_type = self._by_name.get(resolved.type)
        if node_type is None:
            LOG.debug(f"Global id {global_id!r} has unknown type {resolved.type!r}")
            return None

        record = node_type.lookup(resolved.id)
        if record is None:
            LOG.debug(f"No {node_type.name} found for id {resolved.id!r}")
        return record

    def resolve_type_tag(self, record: typing.Any) -> typing.Optional[str]:
        """Return the GraphQL type name for a record or None if unregistered."""
        node_type = self._by_class.get(type(record))
        if node_type is not None:
            return node_type.name

        for node_type in self._by_name.values():
            if isinstance(record, node_type.record_type):
                return node_type.name

        LOG.error(
            f"Record of class {type(record).__name__} does not match any "
            f"registered node type: {sorted(self._by_name)}"
        )
        return None

    def global_id_of(self, record: typing.Any) -> typing.Optional[str]:
        name = self.resolve_type_tag(record)
        if name is None:
            return None
        return self.to_global_id(name, record.id)

    def validate(self, schema: GraphQLSchema) -> None:
        """Check that the registry and the schema agree on the node types.

        Raises SchemaConfigurationError listing every mismatch.
        """
        node_interface = schema.get_type(NODE_INTERFACE)
        if not isinstance(node_interface, GraphQLInterfaceType):
            raise SchemaConfigurationError(
                f"Schema does not define a '{NODE_INTERFACE}' interface"
            )

        implementations = {
            object_type.name
            for object_type in schema.get_implementations(node_interface).objects
        }

        problems = []
        for name in sorted(implementations - self.names):
            problems.append(f"'{name}' implements {NODE_INTERFACE} but is not registered")
        for name in sorted(self.names - implementations):
            if is_object_type(schema.get_type(name)):
                reason = f"does not implement {NODE_INTERFACE}"
            else:
                reason = "is not an object type in the schema"
            problems.append(f"'{name}' is registered but {reason}")

        if problems:
            raise SchemaConfigurationError(
                "Node registry does not match schema: " + "; ".join(problems)
            )

    def install(self, api: "API") -> None:
        """Attach the identity resolvers to an API.

        Sets `Node.resolve_type`, the global `id` field on every registered
        type and the root `Query.node` field.
        """
        schema = api.schema
        self.validate(schema)
        api.nodes = self

        node_interface = typing.cast(
            GraphQLInterfaceType, schema.get_type(NODE_INTERFACE)
        )
        node_interface.resolve_type = self._resolve_type

        for node_type in self:
            object_type = typing.cast(
                GraphQLObjectType, schema.get_type(node_type.name)
            )
            id_field = object_type.fields["id"]
            id_field.resolve = self._global_id_resolver(node_type.name)

        api.resolver("Query", "node")(self._resolve_node)

    def _resolve_type(self, record, info, abstract_type) -> typing.Optional[str]:
        return self.resolve_type_tag(record)

    async def _resolve_node(self, _root, info, id: str) -> typing.Any:
        return self.resolve_by_id(id)

    def _global_id_resolver(self, name: str):
        def resolve_global_id(record, info) -> str:
            return self.to_global_id(name, record.id)

        return resolve_global_id

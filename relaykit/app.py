"""
Application
===========

:func:`build_api` is the one place the schema gets assembled. Everything it
needs is passed in, so tests can build as many independent APIs as they
like::

    api = build_api(database=Database(seed=False))

:func:`create_app` wraps an API in a Starlette application.
"""

import logging
import typing

from starlette.applications import Starlette

from .api import API
from .config import Config
from .database import Database, Person, User, Widget
from .handlers import GraphQLHandler
from .middleware import DebugMiddleware
from .node import NodeRegistry, NodeType
from .resolvers import people, viewer
from .schema import TypeDefs, load_schema

LOG = logging.getLogger(__name__)


def default_node_types(database: Database) -> typing.List[NodeType]:
    return [
        NodeType("User", User, database.get_user),
        NodeType("Widget", Widget, database.get_widget),
        NodeType("Person", Person, database.get_person),
    ]


def build_api(
    database: typing.Optional[Database] = None,
    node_types: typing.Optional[typing.Iterable[NodeType]] = None,
    config: typing.Optional[Config] = None,
    schema: typing.Optional[typing.Iterable[TypeDefs]] = None,
    middleware: typing.Optional[typing.List[typing.Any]] = None,
) -> API:
    """Build the API for the starter schema.

    :param database: Data layer, a freshly seeded `Database` by default.
    :param node_types: Node types for object identification, by default
        `User`, `Widget` and `Person` backed by the database accessors.
    :param config: Application settings.
    :param schema: Schema documents, the bundled `schema.graphql` by default.
    :param middleware: Extra graphql middleware.
    """
    database = database or Database()
    config = config or Config()
    middleware = list(middleware or [])
    if config.debug and not any(isinstance(m, DebugMiddleware) for m in middleware):
        middleware.append(DebugMiddleware())

    api = API(
        schema=schema or load_schema(),
        data=database,
        config=config,
        middleware=middleware,
        level=logging.ERROR,
    )

    if node_types is None:
        node_types = default_node_types(database)

    registry = NodeRegistry(node_types)
    registry.install(api)
    api.include_resolver(viewer)
    api.include_resolver(people)

    LOG.debug(f"Built API with node types: {sorted(registry.names)}")
    return api


def create_app(
    api: typing.Optional[API] = None,
    config: typing.Optional[Config] = None,
) -> Starlette:
    config = config or (api.config if api else Config())
    api = api or build_api(config=config)
    handler = GraphQLHandler(api, path=config.graphql_path)
    return Starlette(debug=config.debug, routes=handler.routes())

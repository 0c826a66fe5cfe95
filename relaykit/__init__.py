from .api import API, Resolver
from .app import build_api, create_app
from .config import BaseConfig, Config
from .connection import connection_from_list
from .context import Context, ResolveInfo
from .database import Database, Person, User, Widget
from .errors import (
    ResolverRegistrationError,
    SchemaConfigurationError,
    SchemaValidationError,
    format_errors,
)
from .node import NodeRegistry, NodeType
from .schema import build_and_extend_schema, concat_documents, load_schema
from .utils import gql

__all__ = [
    "API",
    "BaseConfig",
    "Config",
    "Context",
    "Database",
    "NodeRegistry",
    "NodeType",
    "Person",
    "ResolveInfo",
    "Resolver",
    "ResolverRegistrationError",
    "SchemaConfigurationError",
    "SchemaValidationError",
    "User",
    "Widget",
    "build_and_extend_schema",
    "build_api",
    "concat_documents",
    "connection_from_list",
    "create_app",
    "format_errors",
    "gql",
    "load_schema",
]

__VERSION__ = "0.1.0"

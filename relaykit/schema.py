"""
Schema Utilities
----------------
"""

import logging
import pathlib
import typing

from graphql import (
    DocumentNode,
    GraphQLSchema,
    build_ast_schema,
    concat_ast,
    parse,
)

LOG = logging.getLogger(__name__)

SCHEMA_PATH = pathlib.Path(__file__).parent / "schema.graphql"

TypeDefs = typing.Union[str, DocumentNode]


def maybe_parse(type_def: TypeDefs) -> DocumentNode:
    if isinstance(type_def, str):
        return parse(type_def)
    return type_def


def concat_documents(type_defs: typing.Iterable[TypeDefs]) -> DocumentNode:
    document_list = [maybe_parse(type_def) for type_def in type_defs]

    return concat_ast(document_list)


def build_and_extend_schema(type_defs: typing.Iterable[TypeDefs]) -> GraphQLSchema:
    """
    Build and Extend Schema

    Documents are concatenated before building, so a later document can
    extend a type from an earlier one::

        extend type Person {
            nickname: String
        }

    :param type_defs: list of schema or document nodes
    """
    return build_ast_schema(concat_documents(type_defs))


def load_schema(
    path: typing.Union[str, pathlib.Path] = SCHEMA_PATH,
) -> typing.List[DocumentNode]:
    """Parse a schema file, by default the one bundled with this package."""
    path = pathlib.Path(path)
    LOG.debug(f"Loading schema from file: {path}")
    return [parse(path.read_text())]

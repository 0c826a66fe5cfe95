import argparse
import json
import logging
import pathlib
import sys

import uvicorn
from graphql import print_schema

from .app import build_api, create_app
from .config import Config
from .errors import format_errors

LOG = logging.getLogger(__name__)
GRAPHQL_SUFFIXES = (".graphql", ".gql")

# create the top-level parser for global options
parser = argparse.ArgumentParser(
    prog="relaykit",
    description="Serve and query the relaykit GraphQL schema.",
)
parser.add_argument(
    "--debug",
    "-d",
    action="store_true",
    help="Display debug information and log every field resolution.",
)

# Sub Commands parser
subparsers = parser.add_subparsers(dest="command")  # type: ignore

serve_parser = subparsers.add_parser(
    "serve",
    help="Run the GraphQL server with uvicorn.",
)
serve_parser.add_argument(
    "--host",
    help="Interface to bind, defaults to RELAYKIT_HOST.",
    default=None,
)
serve_parser.add_argument(
    "--port",
    help="Port to bind, defaults to RELAYKIT_PORT.",
    type=int,
    default=None,
)

subparsers.add_parser(
    "schema",
    help="Print the schema in SDL format.",
)

query_parser = subparsers.add_parser(
    "query",
    help="Execute a query against a freshly seeded database and print the result.",
)
query_parser.add_argument(
    "document",
    help="GraphQL document or a path to a .graphql file containing one.",
)
query_parser.add_argument(
    "--variables",
    help="JSON encoded variables for the operation.",
    default=None,
)
query_parser.add_argument(
    "--operation-name",
    "--operation_name",
    help="Name of the operation to run when the document has several.",
    default=None,
)


def read_document(document: str) -> str:
    if document.endswith(GRAPHQL_SUFFIXES):
        return pathlib.Path(document).read_text()
    return document


def run_serve(config: Config, host: str | None, port: int | None) -> None:
    app = create_app(config=config)
    uvicorn.run(
        app,
        host=host or config.host,
        port=port or config.port,
        log_level="debug" if config.debug else "info",
    )


def run_schema(config: Config) -> str:
    api = build_api(config=config)
    output = print_schema(api.schema)
    print(output)
    return output


def run_query(
    config: Config,
    document: str,
    variables: str | None,
    operation_name: str | None,
) -> dict:
    api = build_api(config=config)
    results = api.call_sync(
        read_document(document),
        variables=json.loads(variables) if variables else None,
        operation_name=operation_name,
    )
    output = {
        "data": results.data,
        "errors": format_errors(results.errors, LOG, logging.ERROR),
    }
    print(json.dumps(output, indent=2))
    return output


def main():
    argv = sys.argv[1:] or ["--help"]
    options = parser.parse_args(argv)

    config = Config()
    config.debug = options.debug or config.debug
    level = logging.DEBUG if config.debug else logging.INFO
    sys.tracebacklimit = 99 if config.debug else -1
    logging.basicConfig(level=level)

    if options.command == "serve":
        run_serve(config, options.host, options.port)
    elif options.command == "schema":
        run_schema(config)
    elif options.command == "query":
        run_query(
            config,
            options.document,
            options.variables,
            options.operation_name,
        )
    else:
        parser.print_help()

import json
import logging
import typing

from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import BaseRoute, Route

from ..api import API
from ..errors import format_errors

logger = logging.getLogger(__name__)


class GraphQLHandler:
    def __init__(self, graph: API, path: str = "/graphql"):
        """
        Starlette handler that serves a GraphQL endpoint over HTTP.

        Args:
            graph: API instance to execute operations against
            path: Path to serve the GraphQL endpoint
        """
        self.graph = graph
        self.path = path

    async def handle_request(self, request: Request) -> Response:
        if request.method not in ("POST", "GET"):
            return JSONResponse(
                {"errors": [{"message": "Method not allowed"}]}, status_code=405
            )

        try:
            variables: typing.Any = None
            if request.method == "GET":
                query = request.query_params.get("query")
                variables_params = request.query_params.get("variables")
                operation_name = request.query_params.get("operationName")

                if variables_params:
                    variables = json.loads(variables_params)
            else:
                body = await request.json()
                if not isinstance(body, dict):
                    return JSONResponse(
                        {"errors": [{"message": "Invalid JSON"}]}, status_code=400
                    )
                query = body.get("query")
                variables = body.get("variables")
                operation_name = body.get("operationName")

        except json.JSONDecodeError:
            return JSONResponse(
                {"errors": [{"message": "Invalid JSON"}]}, status_code=400
            )

        if variables is not None and not isinstance(variables, dict):
            return JSONResponse(
                {"errors": [{"message": "Variables must be a JSON object"}]},
                status_code=400,
            )

        if not query:
            return JSONResponse(
                {"errors": [{"message": "No GraphQL query found in the request"}]},
                status_code=400,
            )

        logger.debug(f"Executing operation {operation_name!r}")
        result = await self.graph.call(
            document=query,
            variables=variables,
            operation_name=operation_name,
            request=request,
        )

        return JSONResponse(
            {
                "data": result.data,
                "errors": format_errors(
                    result.errors, self.graph.logger, self.graph.level
                ),
                "extensions": result.extensions,
            }
        )

    def routes(self) -> typing.List[BaseRoute]:
        """Return the list of routes to be added to a Starlette application."""
        return [
            Route(
                self.path,
                self.handle_request,
                # Allow all methods so we can respond with an error
                methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
            ),
        ]

"""
Context is how you can share information between resolvers. For every
request the API creates a context instance with the request, the settings
and the data layer as attributes. This is added to the GraphQLResolveInfo
and passed as the second argument to resolvers.

Example Resolver::

    async def viewer(_root, info: ResolveInfo[Context]) -> User:
        return info.context.data.get_viewer()

Context Reference
-----------------
"""

import typing

from graphql import GraphQLResolveInfo
from starlette.requests import Request

from .config import Config
from .database import Database

if typing.TYPE_CHECKING:  # pragma: no cover
    from .node import NodeRegistry

C = typing.TypeVar("C")


class ResolveInfo(typing.Generic[C], GraphQLResolveInfo):
    """
    This class is strictly to help with type checking. You can use
    this as the `info` arg in a resolver to assist with type hints
    and code completion.
    """

    context: C


def make_request(state: typing.Any = None) -> Request:
    """Generate a fake request to satisfy the contract."""
    return Request(scope={"type": "http", "headers": [], "state": state or {}})


class Context:
    """Default Context Base

    Holds the request, settings, data layer and node registry for a
    single request.
    """

    request: Request
    config: Config
    data: Database
    nodes: typing.Optional["NodeRegistry"]

    def __init__(
        self,
        *,
        data: Database,
        request: typing.Optional[Request] = None,
        config: typing.Optional[Config] = None,
        nodes: typing.Optional["NodeRegistry"] = None,
    ):
        self.data = data
        self.request = request or make_request()
        self.config = config or Config()
        self.nodes = nodes

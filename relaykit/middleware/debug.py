"""
Debug Middleware
================

Logs every field resolution with its arguments, the result and the time it
took. By default this will use logging.debug and the
`relaykit.middleware.debug` logger, you can override that when you setup
the middleware::

    from relaykit import build_api
    from relaykit.middleware import DebugMiddleware

    api = build_api(middleware=[DebugMiddleware(logger=my_logger)])

`build_api` adds it automatically when `RELAYKIT_DEBUG` is enabled.
"""

import inspect
import logging
import time
import typing

from graphql import GraphQLResolveInfo


class DebugMiddleware:
    def __init__(self, logger: typing.Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("relaykit.middleware.debug")

    async def resolve(
        self,
        next_fn: typing.Callable[..., typing.Any],
        parent_object: typing.Any,
        info: GraphQLResolveInfo,
        **kwargs,
    ):
        path = f"{info.parent_type.name}.{info.field_name}"
        if kwargs:
            self.logger.debug(f"Resolving {path}({kwargs!r}) as {info.return_type}")
        else:
            self.logger.debug(f"Resolving {path} as {info.return_type}")

        start_time = time.perf_counter()

        results = next_fn(parent_object, info, **kwargs)
        if inspect.isawaitable(results):
            results = await results

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self.logger.debug(f"Resolved {path} in {elapsed_ms:.3f}ms: {results!r}")

        return results

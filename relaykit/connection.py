import logging
import typing

from graphql_relay import Connection, connection_from_array
from typing_extensions import TypedDict

LOG = logging.getLogger(__name__)


class ConnectionArgs(TypedDict, total=False):
    first: typing.Optional[int]
    after: typing.Optional[str]
    last: typing.Optional[int]
    before: typing.Optional[str]


def limit_page_size(
    args: ConnectionArgs,
    default_page_size: typing.Optional[int] = None,
    max_page_size: typing.Optional[int] = None,
) -> ConnectionArgs:
    """Apply the configured page size defaults to connection arguments.

    When neither `first` nor `last` is requested the default page size is
    used as `first`, a default of None returns every item. Requested sizes
    are capped at `max_page_size`.
    """
    limited: ConnectionArgs = {
        "first": args.get("first"),
        "after": args.get("after"),
        "last": args.get("last"),
        "before": args.get("before"),
    }

    if limited["first"] is None and limited["last"] is None:
        limited["first"] = default_page_size

    if max_page_size is not None:
        for key in ("first", "last"):
            size = limited[key]  # type: ignore[literal-required]
            if size is not None and size > max_page_size:
                LOG.debug(f"Capping '{key}' of {size} at {max_page_size}")
                limited[key] = max_page_size  # type: ignore[literal-required]

    return limited


def connection_from_list(
    data: typing.Sequence[typing.Any],
    args: ConnectionArgs,
    default_page_size: typing.Optional[int] = None,
    max_page_size: typing.Optional[int] = None,
) -> Connection:
    """Slice a list into a Relay connection using cursor arguments."""
    return connection_from_array(
        data,
        limit_page_size(args, default_page_size, max_page_size),
    )

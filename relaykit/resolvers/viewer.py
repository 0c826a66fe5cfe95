import typing

from graphql_relay import Connection

from ..api import Resolver
from ..connection import ConnectionArgs, connection_from_list
from ..context import Context, ResolveInfo
from ..database import Person, User
from ..node import decode_global_id

viewer = Resolver()


def paginate(
    info: ResolveInfo[Context],
    data: typing.Sequence[typing.Any],
    args: ConnectionArgs,
) -> Connection:
    config = info.context.config
    return connection_from_list(
        data,
        args,
        default_page_size=config.default_page_size,
        max_page_size=config.max_page_size,
    )


@viewer.query("viewer")
async def resolve_viewer(_root, info: ResolveInfo[Context]) -> User:
    return info.context.data.get_viewer()


@viewer.resolver("User", "widgets")
async def user_widgets(
    _user: User, info: ResolveInfo[Context], **args: typing.Any
) -> Connection:
    return paginate(
        info,
        info.context.data.get_widgets(),
        typing.cast(ConnectionArgs, args),
    )


@viewer.resolver("User", "people")
async def user_people(
    _user: User, info: ResolveInfo[Context], **args: typing.Any
) -> Connection:
    return paginate(
        info,
        info.context.data.get_people(),
        typing.cast(ConnectionArgs, args),
    )


@viewer.resolver("User", "person")
async def user_person(
    _user: User, info: ResolveInfo[Context], id: str
) -> typing.Optional[Person]:
    resolved = decode_global_id(id)
    if resolved.type != "Person":
        return None
    return info.context.data.get_person(resolved.id)

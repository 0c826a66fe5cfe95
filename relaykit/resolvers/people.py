import logging
import typing

from ..api import Resolver
from ..context import Context, ResolveInfo
from ..database import Database, Person
from ..node import NodeRegistry, decode_global_id

LOG = logging.getLogger(__name__)

people = Resolver()


def update_friends(
    data: Database,
    global_id: str,
    friends: typing.Optional[typing.Sequence[str]],
) -> typing.Optional[Person]:
    """Replace the friends of the person with the given global id.

    There is no concurrency guard, the last write wins. Ids that do not
    decode to an existing Person return None.
    """
    resolved = decode_global_id(global_id)
    if resolved.type != "Person":
        LOG.debug(f"Global id {global_id!r} is not a Person id")
        return None

    return data.make_friends(resolved.id, friends)


@people.mutation("updateFriends")
async def resolve_update_friends(
    _root, info: ResolveInfo[Context], input: typing.Dict[str, typing.Any]
) -> typing.Dict[str, typing.Any]:
    person = update_friends(info.context.data, input["id"], input.get("friends"))
    return {
        "person": person,
        "clientMutationId": input.get("clientMutationId"),
    }


@people.mutation("createPerson")
async def resolve_create_person(
    _root,
    info: ResolveInfo[Context],
    input: typing.Optional[typing.Dict[str, typing.Any]] = None,
) -> typing.Optional[typing.Dict[str, typing.Any]]:
    if input is None:
        return None

    added = info.context.data.add_person(input["firstName"], input["lastName"])
    nodes = typing.cast(NodeRegistry, info.context.nodes)
    LOG.info(f"Created person {added.id}: {added.firstName} {added.lastName}")
    return {
        "id": nodes.global_id_of(added),
        "firstName": added.firstName,
        "lastName": added.lastName,
        "clientMutationId": input["clientMutationId"],
    }

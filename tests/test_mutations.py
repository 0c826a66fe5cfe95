from graphql_relay import from_global_id, to_global_id

import relaykit
from relaykit import API, Database
from relaykit.resolvers.people import update_friends

UPDATE_FRIENDS = relaykit.gql(
    """
    mutation UpdateFriends($input: UpdateFriendsInput!) {
        updateFriends(input: $input) {
            clientMutationId
            person {
                id
                firstName
                lastName
                friends
            }
        }
    }
    """
)

CREATE_PERSON = relaykit.gql(
    """
    mutation CreatePerson($input: CreatePersonInput) {
        createPerson(input: $input) {
            id
            firstName
            lastName
            clientMutationId
        }
    }
    """
)


def test_update_friends_replaces_list(database: Database, ada):
    global_id = to_global_id("Person", ada.id)

    person = update_friends(database, global_id, ["Babbage", "Turing"])

    assert person is not None
    assert person.friends == ["Babbage", "Turing"]
    assert person.firstName == "Ada"
    assert person.lastName == "Lovelace"
    assert database.get_person(ada.id).friends == ["Babbage", "Turing"]


def test_update_friends_last_write_wins(database: Database, ada):
    global_id = to_global_id("Person", ada.id)

    update_friends(database, global_id, ["Turing"])
    update_friends(database, global_id, ["Hopper"])

    assert database.get_person(ada.id).friends == ["Hopper"]


def test_update_friends_with_other_type(database: Database):
    assert update_friends(database, to_global_id("Widget", "0"), ["x"]) is None
    assert database.get_widget("0").name == "What's-it"


def test_update_friends_missing_person(database: Database):
    assert update_friends(database, to_global_id("Person", "999999"), []) is None


async def test_update_friends_mutation(api: API, ada):
    global_id = to_global_id("Person", ada.id)

    results = await api.call(
        UPDATE_FRIENDS,
        variables={
            "input": {
                "id": global_id,
                "friends": ["Babbage", "Turing"],
                "clientMutationId": "abc",
            }
        },
    )

    assert results.errors is None
    assert results.data == {
        "updateFriends": {
            "clientMutationId": "abc",
            "person": {
                "id": global_id,
                "firstName": "Ada",
                "lastName": "Lovelace",
                "friends": ["Babbage", "Turing"],
            },
        }
    }


async def test_update_friends_mutation_clears_friends(api: API, ada):
    results = await api.call(
        UPDATE_FRIENDS,
        variables={"input": {"id": to_global_id("Person", ada.id), "friends": None}},
    )

    assert results.errors is None
    assert results.data["updateFriends"]["person"]["friends"] == []
    assert results.data["updateFriends"]["clientMutationId"] is None


async def test_update_friends_mutation_unknown_person(api: API):
    results = await api.call(
        UPDATE_FRIENDS,
        variables={"input": {"id": to_global_id("Person", "999999"), "friends": []}},
    )

    assert results.errors is None
    assert results.data == {
        "updateFriends": {"clientMutationId": None, "person": None}
    }


async def test_create_person_mutation(api: API, database: Database):
    results = await api.call(
        CREATE_PERSON,
        variables={
            "input": {
                "firstName": "Katherine",
                "lastName": "Johnson",
                "clientMutationId": "create-1",
            }
        },
    )

    assert results.errors is None
    payload = results.data["createPerson"]
    assert payload["firstName"] == "Katherine"
    assert payload["lastName"] == "Johnson"
    assert payload["clientMutationId"] == "create-1"

    type_name, local_id = from_global_id(payload["id"])
    assert type_name == "Person"
    created = database.get_person(local_id)
    assert created.firstName == "Katherine"
    assert created.friends == []


async def test_create_person_mutation_without_input(api: API, database: Database):
    results = await api.call(CREATE_PERSON)

    assert results.errors is None
    assert results.data == {"createPerson": None}
    assert len(database.get_people()) == 3


async def test_create_person_requires_names(api: API):
    results = await api.call(
        CREATE_PERSON,
        variables={"input": {"firstName": "Solo", "clientMutationId": "x"}},
    )

    assert results.data is None
    assert results.errors is not None
    assert "lastName" in results.errors[0].message


async def test_create_person_id_comes_from_registry(
    api: API, database: Database, mocker
):
    global_id_of = mocker.spy(api.nodes, "global_id_of")

    results = await api.call(
        CREATE_PERSON,
        variables={
            "input": {
                "firstName": "Dorothy",
                "lastName": "Vaughan",
                "clientMutationId": "create-2",
            }
        },
    )

    assert results.errors is None
    created = database.get_people()[-1]
    global_id_of.assert_called_once_with(created)
    assert results.data["createPerson"]["id"] == api.nodes.global_id_of(created)
    assert api.nodes.resolve_by_id(results.data["createPerson"]["id"]) is created

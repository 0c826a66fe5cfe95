import json

import pytest
from graphql_relay import to_global_id
from starlette.testclient import TestClient

from relaykit import API, create_app


@pytest.fixture
def client(api: API) -> TestClient:
    return TestClient(create_app(api))


def test_post_query(client: TestClient):
    response = client.post(
        "/graphql",
        json={
            "query": "query Node($id: ID!) { node(id: $id) { id } }",
            "variables": {"id": to_global_id("User", "1")},
        },
    )
    assert response.status_code == 200
    assert response.json() == {
        "data": {"node": {"id": to_global_id("User", "1")}},
        "errors": None,
        "extensions": None,
    }


def test_get_query(client: TestClient):
    response = client.get(
        "/graphql",
        params={
            "query": "query Viewer { viewer { __typename } }",
            "operationName": "Viewer",
        },
    )
    assert response.status_code == 200
    assert response.json()["data"] == {"viewer": {"__typename": "User"}}


def test_get_query_with_variables(client: TestClient):
    response = client.get(
        "/graphql",
        params={
            "query": "query Node($id: ID!) { node(id: $id) { __typename } }",
            "variables": json.dumps({"id": to_global_id("Widget", "2")}),
        },
    )
    assert response.status_code == 200
    assert response.json()["data"] == {"node": {"__typename": "Widget"}}


def test_mutation_over_http(client: TestClient):
    response = client.post(
        "/graphql",
        json={
            "query": """
                mutation Create($input: CreatePersonInput) {
                    createPerson(input: $input) { firstName clientMutationId }
                }
            """,
            "variables": {
                "input": {
                    "firstName": "Ada",
                    "lastName": "Lovelace",
                    "clientMutationId": "1",
                }
            },
        },
    )
    assert response.status_code == 200
    assert response.json()["data"] == {
        "createPerson": {"firstName": "Ada", "clientMutationId": "1"}
    }


def test_validation_errors(client: TestClient):
    response = client.post("/graphql", json={"query": "{ missing }"})
    assert response.status_code == 200
    body = response.json()
    assert body["data"] is None
    assert body["errors"][0]["message"] == "Cannot query field 'missing' on type 'Query'."


def test_missing_query(client: TestClient):
    response = client.post("/graphql", json={"variables": {}})
    assert response.status_code == 400
    assert response.json() == {
        "errors": [{"message": "No GraphQL query found in the request"}]
    }


def test_invalid_json(client: TestClient):
    response = client.post(
        "/graphql",
        content="{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"errors": [{"message": "Invalid JSON"}]}


def test_json_that_is_not_an_object(client: TestClient):
    response = client.post("/graphql", json=["query"])
    assert response.status_code == 400


def test_invalid_variables_on_get(client: TestClient):
    response = client.get(
        "/graphql", params={"query": "{ viewer { id } }", "variables": "{bad"}
    )
    assert response.status_code == 400


def test_method_not_allowed(client: TestClient):
    response = client.put("/graphql", json={"query": "{ viewer { id } }"})
    assert response.status_code == 405


@pytest.mark.parametrize("variables", [[1], "id", 7, True])
def test_post_variables_must_be_an_object(client: TestClient, variables):
    response = client.post(
        "/graphql", json={"query": "{ viewer { id } }", "variables": variables}
    )
    assert response.status_code == 400
    assert response.json() == {
        "errors": [{"message": "Variables must be a JSON object"}]
    }


def test_get_variables_must_be_an_object(client: TestClient):
    response = client.get(
        "/graphql", params={"query": "{ viewer { id } }", "variables": "[1, 2]"}
    )
    assert response.status_code == 400
    assert response.json() == {
        "errors": [{"message": "Variables must be a JSON object"}]
    }

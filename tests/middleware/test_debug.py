import logging
from unittest import mock

from graphql_relay import to_global_id

from relaykit import Database, build_api
from relaykit.middleware import DebugMiddleware


async def test_debug_middleware(mocker, database: Database):
    mock_time = mocker.patch("time.perf_counter")
    mock_time.return_value = 0.00001

    logger = mock.Mock(spec=logging.Logger)
    api = build_api(database=database, middleware=[DebugMiddleware(logger=logger)])

    global_id = to_global_id("Widget", "0")
    results = await api.call(
        "query Widget($id: ID!) { node(id: $id) { ... on Widget { name } } }",
        variables={"id": global_id},
    )
    assert results.data == {"node": {"name": "What's-it"}}

    widget = database.get_widget("0")
    assert logger.debug.mock_calls == [
        mock.call(f"Resolving Query.node({{'id': '{global_id}'}}) as Node"),
        mock.call(f"Resolved Query.node in 0.000ms: {widget!r}"),
        mock.call("Resolving Widget.name as String"),
        mock.call("Resolved Widget.name in 0.000ms: \"What's-it\""),
    ]


def test_debug_enabled_by_config(database: Database, config):
    config.debug = True
    api = build_api(database=database, config=config)
    assert any(isinstance(m, DebugMiddleware) for m in api.middleware)


def test_debug_not_duplicated(database: Database, config):
    config.debug = True
    middleware = DebugMiddleware()
    api = build_api(database=database, config=config, middleware=[middleware])
    assert api.middleware == [middleware]

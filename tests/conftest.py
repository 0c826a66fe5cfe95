import logging
import pathlib

import pytest

from relaykit import API, Config, Database, build_api

LOG = logging.getLogger("relaykit.tests")

REPORTS = pathlib.Path(__file__).parent.parent / "reports"
REPORTS.mkdir(exist_ok=True)

logging.basicConfig(
    level=logging.DEBUG,
    filename=REPORTS / "test-report.log",
    filemode="w",
)


def pytest_runtest_setup(item):
    LOG.info("=======================================================")
    LOG.info(f"Running test: {item.name}")
    LOG.info("=======================================================")


@pytest.fixture
def config() -> Config:
    config = Config()
    config.debug = False
    config.default_page_size = None
    config.max_page_size = 100
    return config


@pytest.fixture
def database() -> Database:
    return Database()


@pytest.fixture
def api(database: Database, config: Config) -> API:
    return build_api(database=database, config=config)


@pytest.fixture
def ada(database: Database):
    person = database.add_person("Ada", "Lovelace")
    database.make_friends(person.id, ["Babbage"])
    return person

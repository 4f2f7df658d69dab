import pytest
from fastapi.testclient import TestClient

from library_graph_api.app.core.store import LibraryStore
from library_graph_api.app.graphql.schema import schema
from library_graph_api.app.main import create_app


@pytest.fixture
def store():
    # Fresh seeded store per test so mutations never leak between tests
    return LibraryStore.with_sample_data()


@pytest.fixture
def execute(store):
    def _execute(query, variables=None):
        return schema.execute_sync(query, variable_values=variables, context_value={"store": store})

    return _execute


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client

from fastapi.testclient import TestClient

from library_graph_api.app import main


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "authors": 3, "books": 8}


def test_graphql_query_over_http(client):
    response = client.post("/graphql", json={"query": "{ book(id: 4) { name author { name } } }"})
    assert response.status_code == 200
    assert response.json()["data"]["book"] == {
        "name": "The Fellowship of the Ring",
        "author": {"name": "J. R. R. Tolkien"},
    }


def test_graphql_mutation_with_variables(client):
    payload = {
        "query": "mutation Add($name: String!, $authorId: Int!) { addBook(name: $name, authorId: $authorId) { id } }",
        "variables": {"name": "The Black Prism", "authorId": 3},
    }
    response = client.post("/graphql", json=payload)
    assert response.status_code == 200
    assert response.json()["data"]["addBook"] == {"id": 9}
    assert client.get("/api/v1/health").json()["books"] == 9


def test_not_found_is_reported_per_field(client):
    response = client.post(
        "/graphql",
        json={"query": "{ author(id: 1) { name } } "},
    )
    assert response.json()["data"]["author"] == {"name": "J. K. Rowling"}

    response = client.post("/graphql", json={"query": "mutation { deleteAuthor(id: 9) { id } }"})
    body = response.json()
    assert body["data"] == {"deleteAuthor": None}
    assert body["errors"][0]["message"] == "Author not found"
    assert body["errors"][0]["extensions"] == {"code": "NOT_FOUND", "id": 9}


def test_store_is_shared_by_requests(client, store):
    client.post("/graphql", json={"query": "mutation { deleteBook(id: 1) { id } }"})
    assert store.books.find_by_id(1) is None


def test_app_without_sample_data_starts_empty(monkeypatch):
    monkeypatch.setattr(main.settings, "seed_sample_data", False)
    with TestClient(main.create_app()) as client:
        assert client.get("/api/v1/health").json() == {"status": "ok", "authors": 0, "books": 0}
        response = client.post("/graphql", json={"query": "{ books { id } authors { id } }"})
        assert response.json()["data"] == {"books": [], "authors": []}


def test_graphiql_served_to_browsers(monkeypatch):
    monkeypatch.setattr(main.settings, "graphiql", True)
    with TestClient(main.create_app()) as client:
        response = client.get("/graphql", headers={"Accept": "text/html"})
    assert response.status_code == 200
    assert "graphiql" in response.text.lower()


def test_graphiql_disabled(monkeypatch):
    monkeypatch.setattr(main.settings, "graphiql", False)
    with TestClient(main.create_app()) as client:
        response = client.get("/graphql", headers={"Accept": "text/html"})
        assert "graphiql" not in response.text.lower()
        # Queries keep working without the explorer
        query = client.post("/graphql", json={"query": "{ book(id: 1) { id } }"})
        assert query.json()["data"] == {"book": {"id": 1}}

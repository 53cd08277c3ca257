"""Tests for the GraphQL HTTP endpoint."""


def query(client, document, **extra):
    return client.post("/gql", json={"query": document, **extra})


class TestScenarioSeeded:
    def test_get_user(self, client):
        response = query(client, '{ getUser(id: "2") { id name } }')
        assert response.status_code == 200
        assert response.json() == {"data": {"getUser": {"id": "2", "name": "Bob"}}}

    def test_get_user_absent(self, client):
        response = query(client, '{ getUser(id: "3") { id name } }')
        assert response.status_code == 200
        assert response.json() == {"data": {"getUser": None}}

    def test_get_users_in_seed_order(self, client):
        response = query(client, "{ getUsers { id name } }")
        assert response.json() == {
            "data": {"getUsers": [{"id": "1", "name": "Alice"}, {"id": "2", "name": "Bob"}]}
        }

    def test_variables_and_operation_name(self, client):
        response = query(
            client,
            "query Lookup($id: String!) { getUser(id: $id) { name } }",
            variables={"id": "1"},
            operationName="Lookup",
        )
        assert response.json() == {"data": {"getUser": {"name": "Alice"}}}


class TestScenarioEmpty:
    def test_get_users(self, empty_client):
        response = query(empty_client, "{ getUsers { id } }")
        assert response.json() == {"data": {"getUsers": []}}

    def test_get_user(self, empty_client):
        response = query(empty_client, '{ getUser(id: "anything") { id } }')
        assert response.json() == {"data": {"getUser": None}}


class TestErrors:
    def test_syntax_error(self, client):
        response = query(client, "{ getUsers { id ")
        assert response.status_code == 200
        body = response.json()
        assert body["data"] is None
        assert body["errors"]

    def test_unknown_field(self, client):
        response = query(client, "{ getUsers { password } }")
        body = response.json()
        assert "password" in body["errors"][0]["message"]

    def test_mutation_not_supported(self, client):
        response = query(client, 'mutation { getUser(id: "1") { id } }')
        assert response.json()["errors"]

    def test_missing_query_field(self, client):
        response = client.post("/gql", json={"variables": {}})
        assert response.status_code == 422

    def test_body_not_json(self, client):
        response = client.post("/gql", content="{ getUsers { id } }", headers={"Content-Type": "application/json"})
        assert response.status_code == 422


def test_schema_sdl(client):
    response = client.get("/gql/schema")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "getUsers: [User!]!" in response.text


"""API tests for the /cities routes."""
import pytest


@pytest.fixture(params=["client", "in_memory_client"])
def api(request):
    """Run a test once per repository wiring."""
    return request.getfixturevalue(request.param)


class TestListCities:

    def test_empty_collection(self, api):
        response = api.get("/cities")

        assert response.status_code == 200
        assert response.json() == {"links": [], "content": []}

    def test_collection_items_have_no_self_link(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        body = api.get("/cities").json()

        assert len(body["content"]) == 1
        item = body["content"][0]
        assert item["id"] == "city"
        assert item["desc"] == "description"
        assert item["loc"] == {"longitude": 1.0, "latitude": -1.0}
        assert item["links"] == []


class TestGetCity:

    def test_missing_city_is_404(self, api):
        response = api.get("/cities/invalid")
        assert response.status_code == 404

    def test_existing_city_uses_short_aliases_and_self_link(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.get("/cities/city")

        assert response.status_code == 200
        assert response.json() == {
            "id": "city",
            "name": "cityname",
            "desc": "description",
            "loc": {"longitude": 1.0, "latitude": -1.0},
            "links": [{"rel": "self", "href": "http://testserver/cities/city"}],
        }

    def test_self_link_quotes_id(self, api, sample_city_payload):
        api.post("/cities", json={**sample_city_payload, "id": "new york"})

        body = api.get("/cities/new%20york").json()

        assert body["links"][0]["href"] == "http://testserver/cities/new%20york"

    def test_id_with_slash_is_reachable_at_its_location(self, api, sample_city_payload):
        created = api.post("/cities", json={**sample_city_payload, "id": "a/b"})
        location = created.headers["location"]

        assert created.status_code == 201
        assert location == "http://testserver/cities/a%2Fb"

        fetched = api.get(location)
        assert fetched.status_code == 200
        assert fetched.json()["id"] == "a/b"

        updated = api.put(location, json={"name": "renamed"})
        assert updated.status_code == 200
        assert updated.json()["name"] == "renamed"

        assert api.delete(location).status_code == 204
        assert api.get(location).status_code == 404


class TestCreateCity:

    def test_create_returns_201_with_location(self, api, sample_city_payload):
        response = api.post("/cities", json=sample_city_payload)

        assert response.status_code == 201
        assert response.headers["location"] == "http://testserver/cities/city"
        body = response.json()
        assert body["name"] == "cityname"
        assert body["links"] == [{"rel": "self", "href": "http://testserver/cities/city"}]

    def test_create_without_description(self, api, sample_city_payload):
        del sample_city_payload["description"]

        response = api.post("/cities", json=sample_city_payload)

        assert response.status_code == 201
        assert response.json()["desc"] is None

    def test_create_existing_id_overwrites(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)
        response = api.post("/cities", json={**sample_city_payload, "name": "renamed"})

        assert response.status_code == 201
        content = api.get("/cities").json()["content"]
        assert [item["name"] for item in content] == ["renamed"]

    @pytest.mark.parametrize("change", [
        {"id": ""},
        {"id": "   "},
        {"name": ""},
        {"location": {"longitude": 181.0, "latitude": 0.0}},
        {"location": {"longitude": 0.0}},
        {"location": None},
    ])
    def test_invalid_input_is_400(self, api, sample_city_payload, change):
        response = api.post("/cities", json={**sample_city_payload, **change})

        assert response.status_code == 400
        assert api.get("/cities").json()["content"] == []

    def test_malformed_json_is_400(self, api):
        response = api.post(
            "/cities",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["field"] == "body"


class TestUpdateCity:

    def test_update_replaces_supplied_fields(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.put("/cities/city", json={
            "name": "new name",
            "description": "new description",
            "location": {"longitude": -1.0, "latitude": -1.0},
        })

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "new name"
        assert body["desc"] == "new description"
        assert body["loc"] == {"longitude": -1.0, "latitude": -1.0}
        assert body["links"] == [{"rel": "self", "href": "http://testserver/cities/city"}]

    def test_null_and_missing_fields_keep_stored_values(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.put("/cities/city", json={"name": None, "location": None})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "cityname"
        assert body["desc"] == "description"
        assert body["loc"] == {"longitude": 1.0, "latitude": -1.0}

    def test_empty_description_clears_it(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.put("/cities/city", json={"description": ""})

        assert response.status_code == 200
        assert response.json()["desc"] == ""
        assert api.get("/cities/city").json()["desc"] == ""

    def test_empty_body_is_empty_patch(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.put("/cities/city")

        assert response.status_code == 200
        assert response.json()["name"] == "cityname"

    def test_missing_city_is_404_and_nothing_written(self, api):
        response = api.put("/cities/missing", json={"name": "x"})

        assert response.status_code == 404
        assert api.get("/cities").json()["content"] == []

    def test_empty_name_is_400(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.put("/cities/city", json={"name": ""})

        assert response.status_code == 400
        assert api.get("/cities/city").json()["name"] == "cityname"


class TestDeleteCity:

    def test_delete_existing_city(self, api, sample_city_payload):
        api.post("/cities", json=sample_city_payload)

        response = api.delete("/cities/city")

        assert response.status_code == 204
        assert api.get("/cities/city").status_code == 404

    def test_delete_missing_city_is_204(self, api):
        assert api.delete("/cities/missing").status_code == 204
        assert api.delete("/cities/missing").status_code == 204


class TestIndexAndHealth:

    def test_index_page(self, in_memory_client):
        response = in_memory_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "/cities" in response.text

    def test_simple_health(self, in_memory_client):
        assert in_memory_client.get("/health").json() == {"status": "ok"}

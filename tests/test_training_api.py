"""
API tests for /api/training.
"""

from bson import ObjectId


INTRO = {"title": "Intro", "type": "video", "url": "https://x.test/a", "language": "en"}


def create_content(client, user, **overrides):
    response = client.post("/api/training", json={**INTRO, **overrides}, headers=user["headers"])
    assert response.status_code == 201, response.json()
    return response.json()["data"]["content"]


class TestCreate:

    def test_entrepreneur_creates_and_gets_name(self, client, entrepreneur):
        response = client.post("/api/training", json=INTRO, headers=entrepreneur["headers"])

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Training content created successfully"
        content = body["data"]["content"]
        assert content["created_by_name"] == "Asha Rao"
        assert {k: content[k] for k in INTRO} == INTRO
        assert "description" not in content

    def test_admin_may_create(self, client, admin):
        assert client.post("/api/training", json=INTRO, headers=admin["headers"]).status_code == 201

    def test_plain_user_forbidden(self, client, db, member):
        response = client.post("/api/training", json=INTRO, headers=member["headers"])
        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Insufficient permissions"}
        assert db["training_content"].docs == []

    def test_role_checked_before_validation(self, client, member):
        response = client.post("/api/training", json={}, headers=member["headers"])
        assert response.status_code == 403

    def test_bad_url_and_type(self, client, entrepreneur):
        response = client.post(
            "/api/training", json={**INTRO, "type": "audio", "url": "x.test"}, headers=entrepreneur["headers"]
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [e.split('"')[1] for e in errors] == ["type", "url"]

    def test_description_length_bound(self, client, entrepreneur):
        response = client.post(
            "/api/training", json={**INTRO, "description": "x" * 1001}, headers=entrepreneur["headers"]
        )
        assert response.status_code == 400


class TestRead:

    def test_get_uses_content_key(self, client, entrepreneur):
        content = create_content(client, entrepreneur, description="A short course for beginners")
        body = client.get(f"/api/training/{content['id']}").json()
        assert body["data"]["content"]["description"] == "A short course for beginners"

    def test_not_found_message(self, client):
        response = client.get(f"/api/training/{ObjectId()}")
        assert response.json()["message"] == "Training content not found"

    def test_list_filters_type_exactly(self, client, entrepreneur):
        create_content(client, entrepreneur, type="video")
        create_content(client, entrepreneur, type="pdf", language="hi")
        create_content(client, entrepreneur, type="pdf", language="en")

        body = client.get("/api/training", params={"type": "pdf"}).json()
        assert {c["type"] for c in body["data"]["trainingContent"]} == {"pdf"}
        assert body["data"]["pagination"]["totalItems"] == 2

    def test_by_type_route_with_language(self, client, entrepreneur):
        create_content(client, entrepreneur, type="pdf", language="hi")
        create_content(client, entrepreneur, type="pdf", language="en")
        create_content(client, entrepreneur, type="video", language="en")

        body = client.get("/api/training/type/pdf", params={"language": "en"}).json()
        [item] = body["data"]["trainingContent"]
        assert (item["type"], item["language"]) == ("pdf", "en")
        assert body["data"]["pagination"]["totalItems"] == 1


class TestMutations:

    def test_other_entrepreneur_cannot_update(self, client, entrepreneur, other_entrepreneur):
        content = create_content(client, entrepreneur)
        response = client.put(
            f"/api/training/{content['id']}", json={**INTRO, "title": "Taken"}, headers=other_entrepreneur["headers"]
        )
        assert response.status_code == 403
        assert response.json()["message"] == "You can only update your own training content"

    def test_plain_user_cannot_update_even_missing_record(self, client, member):
        response = client.put(f"/api/training/{ObjectId()}", json=INTRO, headers=member["headers"])
        assert response.status_code == 403

    def test_owner_deletes(self, client, entrepreneur):
        content = create_content(client, entrepreneur)
        response = client.delete(f"/api/training/{content['id']}", headers=entrepreneur["headers"])
        assert response.json() == {"success": True, "message": "Training content deleted successfully"}

    def test_other_entrepreneur_cannot_delete(self, client, db, entrepreneur, other_entrepreneur):
        content = create_content(client, entrepreneur)
        response = client.delete(f"/api/training/{content['id']}", headers=other_entrepreneur["headers"])
        assert response.status_code == 403
        assert response.json()["message"] == "You can only delete your own training content"
        assert len(db["training_content"].docs) == 1

    def test_delete_missing_record_is_404_for_non_owner(self, client, other_entrepreneur):
        response = client.delete(f"/api/training/{ObjectId()}", headers=other_entrepreneur["headers"])
        assert response.status_code == 404
        assert response.json()["message"] == "Training content not found"

    def test_null_description_rejected(self, client, db, entrepreneur):
        content = create_content(client, entrepreneur, description="A long original description")
        response = client.put(
            f"/api/training/{content['id']}", json={**INTRO, "description": None}, headers=entrepreneur["headers"]
        )
        assert response.status_code == 400
        assert response.json()["errors"][0].startswith('"description"')
        [stored] = db["training_content"].docs
        assert stored["description"] == "A long original description"

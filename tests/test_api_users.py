from fastapi import status


def test_get_default_user(client, user):
    response = client.get(f"/api/user/{user.id}")
    assert response.status_code == 200
    data = response.json()
    assert data == {"id": user.id, "username": "user1", "totalLeaveDays": 15.0, "usedLeaveDays": 0.0}


def test_unknown_user_is_404(client):
    response = client.get("/api/user/999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "NOT_FOUND"
    assert body["message"] == "User not found"


def test_create_user(client):
    response = client.post("/api/user", json={"username": "traveller", "totalLeaveDays": 20})
    assert response.status_code == 200
    assert response.json()["totalLeaveDays"] == 20


def test_create_duplicate_user(client):
    response = client.post("/api/user", json={"username": "user1"})
    assert response.status_code == status.HTTP_409_CONFLICT


def test_patch_ledger(client, user):
    response = client.patch(f"/api/user/{user.id}", json={"totalLeaveDays": 18, "usedLeaveDays": 20})
    assert response.status_code == 200
    data = response.json()
    assert data["totalLeaveDays"] == 18
    assert data["usedLeaveDays"] == 20


def test_patch_rejects_negative(client, user):
    response = client.patch(f"/api/user/{user.id}", json={"totalLeaveDays": -1})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]["errors"][0]["field"] == "totalLeaveDays"


def test_balance(client, user):
    client.post("/api/vacation-plans", json={
        "userId": user.id, "title": "연차 (6월 4일(화))",
        "startDate": "2024-06-04", "endDate": "2024-06-04", "leaveDaysUsed": 1,
    })
    response = client.get(f"/api/user/{user.id}/balance")
    assert response.status_code == 200
    data = response.json()
    assert data["remainingLeaveDays"] == 14
    assert data["plannedLeaveDays"] == 1
    assert data["planCount"] == 1


class TestCustomHolidays:
    def test_lifecycle(self, client, user):
        created = client.post("/api/custom-holidays", json={
            "userId": user.id, "date": "2024-06-04", "name": "창립기념일",
        })
        assert created.status_code == 200
        holiday_id = created.json()["id"]

        listed = client.get(f"/api/user/{user.id}/custom-holidays").json()
        assert [h["name"] for h in listed] == ["창립기념일"]

        assert client.delete(f"/api/custom-holidays/{holiday_id}").json() == {"success": True}
        assert client.delete(f"/api/custom-holidays/{holiday_id}").status_code == 200
        assert client.get(f"/api/user/{user.id}/custom-holidays").json() == []

    def test_bad_date(self, client, user):
        response = client.post("/api/custom-holidays", json={
            "userId": user.id, "date": "2024-02-30", "name": "x",
        })
        assert response.status_code == 400

    def test_unknown_user(self, client):
        response = client.post("/api/custom-holidays", json={
            "userId": 77, "date": "2024-06-04", "name": "x",
        })
        assert response.status_code == 404


class TestDestinations:
    def test_lifecycle(self, client, user):
        created = client.post("/api/destinations", json={"userId": user.id, "countryCode": "jp"})
        assert created.status_code == 200
        assert created.json()["countryCode"] == "JP"
        assert created.json()["countryName"] == "일본"

        duplicate = client.post("/api/destinations", json={"userId": user.id, "countryCode": "JP"})
        assert duplicate.status_code == 409

        assert client.delete(f"/api/user/{user.id}/destinations/jp").json() == {"success": True}
        assert client.get(f"/api/user/{user.id}/destinations").json() == []

    def test_unknown_country_needs_name(self, client, user):
        response = client.post("/api/destinations", json={"userId": user.id, "countryCode": "ZZ"})
        assert response.status_code == 400
        named = client.post("/api/destinations", json={
            "userId": user.id, "countryCode": "ZZ", "countryName": "Nowhere",
        })
        assert named.status_code == 200

    def test_bad_country_code(self, client, user):
        response = client.post("/api/destinations", json={"userId": user.id, "countryCode": "JPN"})
        assert response.status_code == 400


def test_patch_rejects_null(client, user):
    response = client.patch(f"/api/user/{user.id}", json={"totalLeaveDays": None})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/api/user/{user.id}").json()["totalLeaveDays"] == 15

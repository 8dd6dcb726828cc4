from fastapi import status


def test_month_view(client, user):
    response = client.get(f"/api/user/{user.id}/calendar/2024/6")
    assert response.status_code == 200
    data = response.json()
    assert data["label"] == "2024년 6월"
    assert len(data["days"]) == 42
    memorial = next(d for d in data["days"] if d["date"] == "2024-06-06")
    assert memorial["isWorkable"] is False
    assert memorial["holidays"][0]["source"] == "home"


def test_month_out_of_range(client, user):
    assert client.get(f"/api/user/{user.id}/calendar/2024/13").status_code == status.HTTP_400_BAD_REQUEST


def test_day_holidays(client, user):
    client.post("/api/destinations", json={"userId": user.id, "countryCode": "JP"})
    response = client.get(f"/api/user/{user.id}/calendar/holidays/2024-05-06")
    assert response.status_code == 200
    data = response.json()
    assert data["isWorkable"] is False
    assert [h["source"] for h in data["holidays"]] == ["home", "destination"]


def test_selection_creates_plan(client, user):
    response = client.post(f"/api/user/{user.id}/calendar/selection", json={
        "anchor": "2024-06-03", "current": "2024-06-07",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["action"] == "created"
    # 6/6 is 현충일
    assert data["plan"]["leaveDaysUsed"] == 4
    assert data["plan"]["title"] == "휴가 (6월 3일(월) ~ 6월 7일(금))"


def test_single_day_selection_needs_leave_type(client, user):
    response = client.post(f"/api/user/{user.id}/calendar/selection", json={"anchor": "2024-06-04"})
    assert response.status_code == 400
    assert response.json()["code"] == "LEAVE_TYPE_REQUIRED"

    response = client.post(f"/api/user/{user.id}/calendar/selection", json={
        "anchor": "2024-06-04", "leaveType": "quarter",
    })
    assert response.json()["plan"]["leaveDaysUsed"] == 0.25


def test_press_on_plan_deletes_it(client, user):
    created = client.post(f"/api/user/{user.id}/calendar/selection", json={
        "anchor": "2024-06-04", "leaveType": "full",
    }).json()
    response = client.post(f"/api/user/{user.id}/calendar/selection", json={"anchor": "2024-06-04"})
    assert response.json()["action"] == "deleted"
    assert response.json()["plan"]["id"] == created["plan"]["id"]
    assert client.get(f"/api/user/{user.id}/vacation-plans").json() == []


def test_overlapping_selection_conflicts(client, user):
    client.post(f"/api/user/{user.id}/calendar/selection", json={"anchor": "2024-06-05", "leaveType": "full"})
    response = client.post(f"/api/user/{user.id}/calendar/selection", json={
        "anchor": "2024-06-03", "current": "2024-06-07",
    })
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["code"] == "PLAN_OVERLAP"


def test_preview(client, user):
    response = client.post(f"/api/user/{user.id}/calendar/preview", json={
        "anchor": "2024-06-07", "current": "2024-06-10",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["dates"] == ["2024-06-07", "2024-06-10"]
    assert data["leaveDaysUsed"] == 2
    assert client.get(f"/api/user/{user.id}/vacation-plans").json() == []


def test_recommendations(client, user):
    response = client.get(f"/api/user/{user.id}/recommendations/2024", params={"maxLeaveDays": 2, "limit": 3})
    assert response.status_code == 200
    data = response.json()
    assert 0 < len(data) <= 3
    assert all(r["leaveDaysUsed"] <= 2 for r in data)
    assert {"name", "startDate", "endDate", "totalDays", "score"} <= set(data[0])


def test_preview_at_end_of_calendar(client, user):
    response = client.post(f"/api/user/{user.id}/calendar/preview", json={
        "anchor": "9999-12-30", "current": "9999-12-31",
    })
    assert response.status_code == 200
    assert response.json()["dates"] == ["9999-12-30", "9999-12-31"]


def test_selection_span_is_bounded(client, user):
    for path in ("preview", "selection"):
        response = client.post(f"/api/user/{user.id}/calendar/{path}", json={
            "anchor": "2024-06-03", "current": "2400-06-03",
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "VALIDATION_ERROR"
    assert client.get(f"/api/user/{user.id}/vacation-plans").json() == []


def test_selection_of_a_full_year_is_allowed(client, user):
    response = client.post(f"/api/user/{user.id}/calendar/preview", json={
        "anchor": "2024-01-01", "current": "2024-12-31",
    })
    assert response.status_code == 200

from fastapi.testclient import TestClient


def test_read_display_settings_returns_seeded_defaults(client: TestClient) -> None:
    response = client.get("/api/settings/display")

    assert response.status_code == 200
    data = response.json()
    assert data["orientation"] == "horizontal"
    assert data["background_color"] == "#FFF8E1"
    assert data["rates_display_duration_seconds"] == 15
    assert data["refresh_interval"] == 30


def test_read_display_settings_is_empty_object_without_rows(empty_client: TestClient) -> None:
    response = empty_client.get("/api/settings/display")

    assert response.status_code == 200
    assert response.json() == {}


def test_create_display_settings_fills_missing_fields(empty_client: TestClient) -> None:
    response = empty_client.post(
        "/api/settings/display", json={"orientation": "vertical", "show_media": False}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["orientation"] == "vertical"
    assert data["show_media"] is False
    assert data["text_color"] == "#212529"
    assert data["rate_number_font_size"] == "text-4xl"


def test_update_without_rows_creates_from_defaults(empty_client: TestClient) -> None:
    response = empty_client.put("/api/settings/display", json={"refresh_interval": 60})

    assert response.status_code == 200
    data = response.json()
    assert data["refresh_interval"] == 60
    assert data["rates_display_duration_seconds"] == 15
    assert empty_client.get("/api/settings/display").json()["refresh_interval"] == 60


def test_update_with_id_edits_newest_row(client: TestClient) -> None:
    current = client.get("/api/settings/display").json()

    response = client.put(
        f"/api/settings/display/{current['id']}",
        json={"background_color": "#000000", "rates_display_duration_seconds": 20},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == current["id"]
    assert data["background_color"] == "#000000"
    assert data["rates_display_duration_seconds"] == 20
    assert data["orientation"] == current["orientation"]


def test_update_rejects_bad_colour(client: TestClient) -> None:
    response = client.put("/api/settings/display", json={"text_color": "red"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid settings data"

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from agriwaste.config.mock_db import MemoryStore


def _report(**overrides):
    body = {"type": "稻草", "city": "南投市", "quantity": 120, "name": "王小明", "phone": "0912-345-678"}
    body.update(overrides)
    return body


def test_submit_report_stores_one_document_with_server_time(client: TestClient, store: MemoryStore) -> None:
    before = datetime.now(timezone.utc)
    resp = client.post("/api/report", json=_report())

    assert resp.status_code == 200
    assert resp.json() == {"message": "回報完成，感謝您!"}

    stored = store.list_reports()
    assert len(stored) == 1
    assert stored[0]["type"] == "稻草"
    assert stored[0]["quantity"] == 120
    assert stored[0]["time"] >= before


def test_submit_report_ignores_client_time(client: TestClient, store: MemoryStore) -> None:
    before = datetime.now(timezone.utc)
    resp = client.post("/api/report", json=_report(time="2000-01-01T00:00:00Z"))

    assert resp.status_code == 200
    assert store.list_reports()[0]["time"] >= before


def test_submit_report_accepts_numeric_string_quantity(client: TestClient, store: MemoryStore) -> None:
    resp = client.post("/api/report", json=_report(quantity="35.5"))

    assert resp.status_code == 200
    assert store.list_reports()[0]["quantity"] == 35.5


def test_submit_report_validation(client: TestClient, store: MemoryStore) -> None:
    missing_type = client.post("/api/report", json=_report(type=""))
    bad_quantity = client.post("/api/report", json=_report(quantity="lots"))
    negative = client.post("/api/report", json=_report(quantity=-1))

    for resp in (missing_type, bad_quantity, negative):
        assert resp.status_code == 400
        assert resp.json()["message"] == "請求參數錯誤"
        assert resp.json()["errors"]
    assert store.list_reports() == []


def test_submit_report_write_failure(broken_client: TestClient) -> None:
    resp = broken_client.post("/api/report", json=_report())

    assert resp.status_code == 500
    assert resp.json() == {"message": "資料庫寫入失敗"}


def test_list_reports(client: TestClient) -> None:
    client.post("/api/report", json=_report())
    client.post("/api/report", json=_report(type="菇包", quantity=8))

    resp = client.get("/api/reports")

    assert resp.status_code == 200
    data = resp.json()
    assert [item["type"] for item in data] == ["稻草", "菇包"]
    assert all(item["id"] for item in data)
    assert all(item["time"] for item in data)


def test_list_reports_failure(broken_client: TestClient) -> None:
    resp = broken_client.get("/api/reports")

    assert resp.status_code == 500
    assert "message" in resp.json()

from fastapi.testclient import TestClient

from agriwaste.config.mock_db import MemoryStore
from agriwaste.core.settings import Settings
from agriwaste.main import create_app


class CountingStore(MemoryStore):
    def __init__(self):
        super().__init__()
        self.nearest_calls = 0

    def nearest_organization(self, *args, **kwargs):
        self.nearest_calls += 1
        return super().nearest_organization(*args, **kwargs)


def test_match_returns_seeded_straw_center(client: TestClient) -> None:
    client.get("/api/seed-orgs")

    resp = client.get("/api/match", params={"lat": "23.8390", "lng": "120.6840", "type": "稻草"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "中興資源中心"
    assert body["location"]["coordinates"] == [120.6845, 23.8385]


def test_match_without_type_picks_closest(client: TestClient) -> None:
    client.get("/api/seed-orgs")

    resp = client.get("/api/match", params={"lat": 23.8300, "lng": 120.6620})

    assert resp.json()["name"] == "示範再生工坊"


def test_match_type_filter_is_exact(client: TestClient) -> None:
    client.get("/api/seed-orgs")

    mushroom = client.get("/api/match", params={"lat": "23.8390", "lng": "120.6840", "type": "菇包"})
    tea = client.get("/api/match", params={"lat": "23.8390", "lng": "120.6840", "type": "茶渣"})

    assert mushroom.json()["name"] == "示範再生工坊"
    assert tea.json() == {"message": "無附近媒合業者"}


def test_match_empty_type_is_unconstrained(client: TestClient) -> None:
    client.get("/api/seed-orgs")

    resp = client.get("/api/match?lat=23.8390&lng=120.6840&type=")

    assert resp.json()["name"] == "中興資源中心"


def test_match_far_away_returns_sentinel(client: TestClient) -> None:
    client.get("/api/seed-orgs")

    # Taipei is well over 30 km from Nantou
    resp = client.get("/api/match", params={"lat": 25.0330, "lng": 121.5654})

    assert resp.status_code == 200
    assert resp.json() == {"message": "無附近媒合業者"}


def test_match_radius_comes_from_settings(store: MemoryStore) -> None:
    narrow = TestClient(create_app(settings=Settings(USE_MOCK_DB=True, MATCH_MAX_DISTANCE_METERS=50), store=store))
    narrow.get("/api/seed-orgs")

    # ~75 m from 中興資源中心
    resp = narrow.get("/api/match", params={"lat": "23.8390", "lng": "120.6840"})

    assert resp.json() == {"message": "無附近媒合業者"}


def test_match_missing_coordinates_is_400_without_query(settings: Settings) -> None:
    store = CountingStore()
    client = TestClient(create_app(settings=settings, store=store))

    for params in ({"lat": "23.8"}, {"lng": "120.6"}, {}, {"lat": "", "lng": "120.6"}):
        resp = client.get("/api/match", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"message": "缺少經緯度參數"}
    assert store.nearest_calls == 0


def test_match_malformed_coordinates_is_400(settings: Settings) -> None:
    store = CountingStore()
    client = TestClient(create_app(settings=settings, store=store))

    for params in ({"lat": "abc", "lng": "120.6"}, {"lat": "nan", "lng": "120.6"}, {"lat": "95", "lng": "120.6"}):
        resp = client.get("/api/match", params=params)
        assert resp.status_code == 400
        assert resp.json()["message"] == "請求參數錯誤"
        assert resp.json()["errors"]
    assert store.nearest_calls == 0


def test_match_query_failure(broken_client: TestClient) -> None:
    resp = broken_client.get("/api/match", params={"lat": "23.8390", "lng": "120.6840"})

    assert resp.status_code == 500
    assert resp.json() == {"message": "媒合失敗"}

from agriwaste.config.mock_db import MemoryStore


def _point(lat: float, lng: float) -> dict:
    return {"type": "Point", "coordinates": [lng, lat]}


def _store(*orgs: dict) -> MemoryStore:
    store = MemoryStore()
    store.connect()
    store.insert_organizations(orgs)
    return store


def test_nearest_ranks_by_distance() -> None:
    store = _store(
        {"name": "far", "type": "稻草", "location": _point(23.90, 120.70)},
        {"name": "near", "type": "稻草", "location": _point(23.84, 120.685)},
    )

    found = store.nearest_organization(lng=120.684, lat=23.839, max_distance_meters=30000)

    assert found["name"] == "near"


def test_nearest_ties_go_to_first_inserted() -> None:
    store = _store(
        {"name": "first", "location": _point(23.84, 120.68)},
        {"name": "second", "location": _point(23.84, 120.68)},
    )

    assert store.nearest_organization(lng=120.68, lat=23.84, max_distance_meters=10)["name"] == "first"


def test_nearest_respects_radius_and_type() -> None:
    store = _store(
        {"name": "straw", "type": "稻草", "location": _point(23.84, 120.68)},
        {"name": "no location", "type": "菇包"},
    )

    assert store.nearest_organization(lng=121.56, lat=25.03, max_distance_meters=30000) is None
    assert store.nearest_organization(lng=120.68, lat=23.84, max_distance_meters=30000, org_type="菇包") is None
    assert store.nearest_organization(lng=120.68, lat=23.84, max_distance_meters=30000, org_type="稻草")["name"] == "straw"


def test_returned_documents_are_copies() -> None:
    store = _store({"name": "A", "type": "稻草", "city": "南投市"})

    store.find_organizations()[0]["name"] = "changed"

    assert store.find_organizations({"type": "稻草"})[0]["name"] == "A"


def test_distinct_skips_missing_fields() -> None:
    store = _store({"type": "稻草"}, {"type": "稻草"}, {"name": "no type"}, {"type": "茶渣"})

    assert store.distinct_organization_values("type") == ["稻草", "茶渣"]


def test_reports_get_identifiers() -> None:
    store = MemoryStore()

    saved = store.insert_report({"type": "菇包"})

    assert saved["_id"]
    assert store.list_reports() == [saved]

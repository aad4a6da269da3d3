import pytest

from farm_registry.data import farmers_repository
from farm_registry.data.farmers_repository import FarmerNotFoundError
from farm_registry.models.domain import FarmerRecord
from farm_registry.schemas.farmers import FarmerPayload
from farm_registry.services import farmers as farmer_service
from farm_registry.services.registry import FarmerRegistry


class FakeStore:
    """In-memory stand-in for the farmers table and image bucket."""

    def __init__(self, documents=None, images=None) -> None:
        self.documents = {doc["id"]: dict(doc) for doc in documents or []}
        self.images = images or {}
        self._next = 1

    def fetch(self):
        return list(self.documents.values())

    def insert(self, document):
        farmer_id = f"new-{self._next}"
        self._next += 1
        stored = {**document, "id": farmer_id, "createdAt": "2024-06-01T00:00:00+00:00"}
        self.documents[farmer_id] = stored
        return stored

    def update(self, farmer_id, document):
        if farmer_id not in self.documents:
            raise FarmerNotFoundError(farmer_id)
        self.documents[farmer_id] = {**self.documents[farmer_id], **document}
        return self.documents[farmer_id]

    def delete(self, farmer_id):
        if self.documents.pop(farmer_id, None) is None:
            raise FarmerNotFoundError(farmer_id)

    def delete_images(self, farmer_id):
        return len(self.images.pop(farmer_id, []))


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    fake = FakeStore(
        documents=[{"id": "a", "name": "김철수", "phone": "010-1234-5678"}, {"id": "b", "name": "이영희"}],
        images={"a": ["a/1.jpg", "a/2.jpg"]},
    )
    monkeypatch.setattr(farmers_repository, "insert_farmer_document", fake.insert)
    monkeypatch.setattr(farmers_repository, "update_farmer_document", fake.update)
    monkeypatch.setattr(farmers_repository, "delete_farmer_document", fake.delete)
    monkeypatch.setattr(farmers_repository, "delete_farmer_images", fake.delete_images)
    return fake


@pytest.fixture
def registry(store: FakeStore) -> FarmerRegistry:
    registry = FarmerRegistry(fetch=store.fetch)
    registry.refresh()
    return registry


def test_create_assigns_equipment_ids_and_refreshes(store, registry) -> None:
    payload = FarmerPayload(name=" 박민수 ", phone="01055556666", equipments=[{"type": "tractor"}])

    record = farmer_service.create_farmer(payload, registry=registry)

    assert record.id == "new-1"
    assert record.name == "박민수"
    assert record.equipments[0].id
    assert record.equipments[0].id != "new-1-0"
    assert registry.find("new-1") is not None


def test_update_unknown_farmer_raises(store, registry) -> None:
    with pytest.raises(FarmerNotFoundError):
        farmer_service.update_farmer("missing", FarmerPayload(name="누구"), registry=registry)


def test_update_rewrites_document(store, registry) -> None:
    record = farmer_service.update_farmer("b", FarmerPayload(name="이영희", canReceiveMail=True), registry=registry)

    assert record.can_receive_mail is True
    assert registry.find("b").can_receive_mail is True


def test_delete_removes_images(store, registry) -> None:
    removed = farmer_service.delete_farmer("a", registry=registry)

    assert removed == 2
    assert registry.find("a") is None


def test_bulk_delete_reports_failures(store, registry) -> None:
    result = farmer_service.delete_farmers(["a", "missing", "a", "b"], registry=registry)

    assert result.deleted == ["a", "b"]
    assert result.failed == ["missing"]
    assert result.images_removed == 2
    assert registry.records() == ()


def test_refresh_failure_after_write_is_not_raised(store) -> None:
    def broken_fetch():
        raise ConnectionError("down")

    registry = FarmerRegistry(fetch=broken_fetch)

    record = farmer_service.create_farmer(FarmerPayload(name="최"), registry=registry)

    assert record.name == "최"


def test_find_duplicates_by_name_or_phone() -> None:
    records = [
        FarmerRecord(id="1", name="김철수", phone="010-1234-5678"),
        FarmerRecord(id="2", name="이영희", phone="01099998888"),
        FarmerRecord(id="3", name="박민수"),
    ]

    assert [r.id for r in farmer_service.find_duplicates(records, name=" 김철수 ")] == ["1"]
    assert [r.id for r in farmer_service.find_duplicates(records, phone="010-9999-8888")] == ["2"]
    assert [r.id for r in farmer_service.find_duplicates(records, name="김철수", phone="01099998888")] == ["1", "2"]
    assert farmer_service.find_duplicates(records) == []


def test_payload_validation() -> None:
    with pytest.raises(ValueError):
        FarmerPayload(name="   ")
    with pytest.raises(ValueError):
        FarmerPayload(name="김", phone="123")
    with pytest.raises(ValueError):
        FarmerPayload(name="김", farmingTypes={"spaceFarming": True})
    with pytest.raises(ValueError):
        FarmerPayload(name="김", equipments=[{"desiredPrice": "협의"}])

    payload = FarmerPayload(name="김", equipments=[{"desiredPrice": "1,500,000"}])
    assert payload.equipments[0].desiredPrice == "1500000"


def test_get_farmer_prefers_snapshot(store, registry, monkeypatch: pytest.MonkeyPatch) -> None:
    def get_document(farmer_id):
        raise AssertionError("store should not be queried")

    monkeypatch.setattr(farmers_repository, "get_farmer_document", get_document)

    assert farmer_service.get_farmer("a", registry=registry).name == "김철수"


def test_get_farmer_unknown_raises(store, registry, monkeypatch: pytest.MonkeyPatch) -> None:
    def get_document(farmer_id):
        raise FarmerNotFoundError(farmer_id)

    monkeypatch.setattr(farmers_repository, "get_farmer_document", get_document)

    with pytest.raises(FarmerNotFoundError):
        farmer_service.get_farmer("zzz", registry=registry)


def test_bulk_delete_survives_store_errors(store, registry, monkeypatch: pytest.MonkeyPatch) -> None:
    def flaky_delete(farmer_id):
        if farmer_id == "b":
            raise ConnectionError("store unreachable")
        store.delete(farmer_id)

    monkeypatch.setattr(farmers_repository, "delete_farmer_document", flaky_delete)

    result = farmer_service.delete_farmers(["a", "b"], registry=registry)

    assert result.deleted == ["a"]
    assert result.failed == ["b"]
    assert sorted(store.documents) == ["b"]
    assert [record.id for record in registry.snapshot()] == ["b"]


def test_payload_codes_come_from_catalog() -> None:
    with pytest.raises(ValueError):
        FarmerPayload(name="김", equipments=[{"saleType": "rental"}])
    with pytest.raises(ValueError):
        FarmerPayload(name="김", equipments=[{"saleStatus": "sold"}])
    with pytest.raises(ValueError):
        FarmerPayload(name="김", equipments=[{"attachments": [{"type": "plough"}]}])

    payload = FarmerPayload(
        name="김",
        phone="010-1234-5678",
        equipments=[{"saleType": "used", "saleStatus": "reserved", "attachments": [{"type": "frontWheel"}]}],
    )
    equipment = payload.equipments[0]
    assert equipment.saleType == "used"
    assert equipment.saleStatus == "reserved"
    assert equipment.attachments[0].type == "frontWheel"

from datetime import datetime, timezone

from farm_registry.models.domain import FarmerRecord, FarmingTypes
from farm_registry.services.filters import FilterCriteria, matches
from farm_registry.services.normalizer import (
    normalize_documents,
    normalize_farmer,
    normalize_sale_status,
)


def test_missing_farming_types_default_to_false() -> None:
    record = normalize_farmer({"id": "f1", "name": "김농부"})

    assert record.farming_types == FarmingTypes()
    assert matches(record, FilterCriteria(farming_type=""))
    assert not matches(record, FilterCriteria(farming_type="waterPaddy"))


def test_empty_document_is_fully_defaulted() -> None:
    record = normalize_farmer({})

    assert record.id == ""
    assert record.name == ""
    assert record.equipments == ()
    assert record.can_receive_mail is False
    assert record.rating == 0
    assert len(record.main_crop) == 7
    assert all(not selection.selected for selection in record.main_crop)
    assert record.created_at is None


def test_non_mapping_document_is_defaulted() -> None:
    assert normalize_farmer(None).id == ""
    assert normalize_farmer(["not", "a", "document"]).equipments == ()


def test_numeric_fields_become_text() -> None:
    record = normalize_farmer(
        {
            "id": 42,
            "phone": 1012345678,
            "equipments": [{"type": "tractor", "horsepower": 45.0, "year": 2019, "usageHours": 1200}],
        }
    )

    assert record.id == "42"
    assert record.phone == "1012345678"
    equipment = record.equipments[0]
    assert equipment.horsepower == "45"
    assert equipment.year == "2019"
    assert equipment.usage_hours == "1200"


def test_only_true_counts_as_flag() -> None:
    record = normalize_farmer(
        {
            "canReceiveMail": "true",
            "farmingTypes": {"waterPaddy": 1, "orchard": True, "livestock": "yes"},
        }
    )

    assert record.can_receive_mail is False
    assert record.farming_types.active_codes() == ("orchard",)


def test_paddy_farming_alias_maps_to_water_paddy() -> None:
    record = normalize_farmer({"farmingTypes": {"paddyFarming": True}})

    assert record.farming_types.water_paddy is True


def test_main_crop_categories_and_details() -> None:
    record = normalize_farmer(
        {
            "mainCrop": {
                "foodCrops": True,
                "foodCropsDetails": ["rice", "barley"],
                "fruits": False,
                "fruitsDetails": ["apple"],
            }
        }
    )

    food = record.crop("foodCrops")
    fruits = record.crop("fruits")
    assert food.selected is True
    assert food.details == ("rice", "barley")
    assert fruits.selected is False
    assert fruits.details == ()


def test_legacy_crop_flags_select_their_category() -> None:
    record = normalize_farmer({"mainCrop": {"rice": True, "hanwoo": True, "persimmon": False}})

    assert record.crop("foodCrops").selected is True
    assert record.crop("foodCrops").details == ("rice",)
    assert record.crop("livestock").details == ("cattle",)
    assert record.crop("fruits").selected is False


def test_equipment_defaults_and_generated_id() -> None:
    record = normalize_farmer({"id": "f1", "equipments": [{"type": "tractor"}, "garbage", {"id": "e9"}]})

    assert [equipment.id for equipment in record.equipments] == ["f1-0", "e9"]
    tractor = record.equipments[0]
    assert tractor.sale_status == "available"
    assert tractor.sale_type is None
    assert tractor.attachments == ()


def test_equipment_condition_falls_back_to_rating() -> None:
    record = normalize_farmer({"equipments": [{"rating": 4}, {"condition": "9"}, {"condition": -3}]})

    assert [equipment.condition for equipment in record.equipments] == [4, 5, 0]


def test_unknown_sale_type_is_dropped() -> None:
    record = normalize_farmer({"equipments": [{"saleType": "used"}, {"saleType": "rental"}]})

    assert [equipment.sale_type for equipment in record.equipments] == ["used", None]


def test_legacy_attachment_mapping_keeps_filled_entries() -> None:
    record = normalize_farmer(
        {
            "equipments": [
                {
                    "attachments": {
                        "loader": {"manufacturer": "hanil", "model": "HL-500"},
                        "rotary": {"manufacturer": ""},
                        "cutter": "old value",
                    }
                }
            ]
        }
    )

    attachments = record.equipments[0].attachments
    assert len(attachments) == 1
    assert attachments[0].type == "loader"
    assert attachments[0].model == "HL-500"


def test_attachment_list_is_read_in_order() -> None:
    record = normalize_farmer(
        {
            "equipments": [
                {
                    "attachments": [
                        {"type": "rotary", "manufacturer": "woongjin", "rating": 3},
                        {"type": "frontWheel", "images": ["a.jpg", "", 7]},
                    ]
                }
            ]
        }
    )

    rotary, wheel = record.equipments[0].attachments
    assert rotary.condition == 3
    assert wheel.images == ("a.jpg",)


def test_sale_status_aliases() -> None:
    assert normalize_sale_status("거래완료") == "completed"
    assert normalize_sale_status("sold") == "completed"
    assert normalize_sale_status("예약중") == "reserved"
    assert normalize_sale_status("searching") == "available"
    assert normalize_sale_status("mystery") == "available"
    assert normalize_sale_status(None) == "available"


def test_timestamps_accept_iso_and_second_mappings() -> None:
    record = normalize_farmer(
        {
            "createdAt": "2024-03-01T09:00:00Z",
            "updatedAt": {"seconds": 1709283600, "nanoseconds": 0},
        }
    )

    assert record.created_at == datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    assert record.updated_at == datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def test_updated_at_never_precedes_created_at() -> None:
    record = normalize_farmer({"createdAt": "2024-05-01T00:00:00+00:00", "updatedAt": "2023-01-01T00:00:00"})

    assert record.updated_at == record.created_at


def test_invalid_timestamp_is_none() -> None:
    record = normalize_farmer({"createdAt": "yesterday"})

    assert record.created_at is None
    assert record.updated_at is None


def test_batch_keeps_order_and_substitutes_defaults(monkeypatch) -> None:
    from farm_registry.services import normalizer

    original = normalizer.normalize_farmer

    def flaky(document):
        if document.get("id") == "bad":
            raise ValueError("boom")
        return original(document)

    monkeypatch.setattr(normalizer, "normalize_farmer", flaky)

    records = normalize_documents([{"id": "a", "name": "A"}, {"id": "bad", "name": "B"}, {"id": "c"}])

    assert [record.id for record in records] == ["a", "bad", "c"]
    assert records[1] == FarmerRecord(id="bad")


def test_documents_without_id_get_unique_ids() -> None:
    records = normalize_documents(["not a document", {"name": "무명"}, None, {"id": "c"}])

    assert [record.id for record in records] == ["unknown-0", "unknown-1", "unknown-2", "c"]
    assert records[1].name == "무명"

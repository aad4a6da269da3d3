from datetime import datetime, timezone

import pytest

from farm_registry.models.domain import CropSelection, EquipmentRecord, FarmerRecord, FarmingTypes
from farm_registry.services.filters import FilterCriteria, filter_farmers, sort_by_created_desc


def _farmer(fid: str, **overrides) -> FarmerRecord:
    values = {
        "name": f"농부{fid}",
        "phone": "010-0000-0000",
        "jibun_address": "전라남도 영암군 영암읍 회문리 1",
        "road_address": "전라남도 영암군 영암읍 군청로 1",
    }
    values.update(overrides)
    return FarmerRecord(id=fid, **values)


@pytest.fixture
def records() -> list[FarmerRecord]:
    return [
        _farmer(
            "1",
            name="김철수",
            phone="010-1234-5678",
            business_name="철수농장",
            can_receive_mail=True,
            farming_types=FarmingTypes(water_paddy=True),
            main_crop=(CropSelection(category="foodCrops", selected=True, details=("rice",)),),
            equipments=(
                EquipmentRecord(id="e1", type="tractor", manufacturer="DAEDONG", sale_type="used", trade_type="sale"),
            ),
        ),
        _farmer(
            "2",
            name="이영희",
            jibun_address="전라남도 나주시 금천면 원곡리 22",
            road_address="전라남도 나주시 금천면 영산포로 9",
            farming_types=FarmingTypes(orchard=True),
            equipments=(EquipmentRecord(id="e2", type="combine", manufacturer="KUBOTA", sale_type="new"),),
        ),
        _farmer(
            "3",
            name="박민수",
            jibun_address="",
            road_address="전라남도 영암군 삼호읍 대불로 5",
            can_receive_mail=True,
        ),
    ]


def _ids(records: list[FarmerRecord]) -> list[str]:
    return [record.id for record in records]


def test_default_criteria_keep_everything(records) -> None:
    assert filter_farmers(records, FilterCriteria()) == records


def test_search_is_case_insensitive_and_trimmed(records) -> None:
    assert _ids(filter_farmers(records, FilterCriteria(search_term="  철수농장 "))) == ["1"]
    assert _ids(filter_farmers(records, FilterCriteria(search_term="5678"))) == ["1"]
    assert _ids(filter_farmers(records, FilterCriteria(search_term="대불로"))) == ["3"]


def test_search_matches_ascii_case_insensitively() -> None:
    record = _farmer("x", business_name="Green Farm")

    assert filter_farmers([record], FilterCriteria(search_term="green")) == [record]


def test_city_matches_jibun_or_road_address(records) -> None:
    assert _ids(filter_farmers(records, FilterCriteria(city="영암군"))) == ["1", "3"]
    assert _ids(filter_farmers(records, FilterCriteria(city="영암군", district="삼호읍"))) == ["3"]


def test_village_only_checks_jibun_address(records) -> None:
    assert _ids(filter_farmers(records, FilterCriteria(city="나주시", village="원곡리"))) == ["2"]
    assert filter_farmers(records, FilterCriteria(village="대불로")) == []


def test_farming_type_and_main_crop(records) -> None:
    assert _ids(filter_farmers(records, FilterCriteria(farming_type="orchard"))) == ["2"]
    assert _ids(filter_farmers(records, FilterCriteria(main_crop="foodCrops"))) == ["1"]
    assert filter_farmers(records, FilterCriteria(farming_type="unknownType")) == []


def test_mail_option(records) -> None:
    assert _ids(filter_farmers(records, FilterCriteria(mail_option="yes"))) == ["1", "3"]
    assert _ids(filter_farmers(records, FilterCriteria(mail_option="no"))) == ["2"]
    assert len(filter_farmers(records, FilterCriteria(mail_option="all"))) == 3


def test_equipment_criteria_need_one_matching_machine(records) -> None:
    assert _ids(filter_farmers(records, FilterCriteria(sale_type="new"))) == ["2"]
    assert _ids(filter_farmers(records, FilterCriteria(trade_type="sale"))) == ["1"]
    assert _ids(filter_farmers(records, FilterCriteria(equipment_type="combine"))) == ["2"]
    assert _ids(filter_farmers(records, FilterCriteria(manufacturer="DAEDONG"))) == ["1"]
    assert filter_farmers(records, FilterCriteria(equipment_type="tractor", manufacturer="KUBOTA")) == []


def test_result_is_ordered_subset(records) -> None:
    criteria = FilterCriteria(mail_option="yes", search_term="영암")
    result = filter_farmers(records, criteria)

    assert all(record in records for record in result)
    positions = [records.index(record) for record in result]
    assert positions == sorted(positions)


def test_filter_is_idempotent(records) -> None:
    criteria = FilterCriteria(city="영암군", mail_option="yes")
    once = filter_farmers(records, criteria)

    assert filter_farmers(once, criteria) == once


def test_sort_newest_first_with_undated_last() -> None:
    old = _farmer("old", created_at=datetime(2023, 1, 1, tzinfo=timezone.utc))
    new = _farmer("new", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    undated = _farmer("undated")

    assert _ids(sort_by_created_desc([undated, old, new])) == ["new", "old", "undated"]

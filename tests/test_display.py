from farm_registry.models.domain import AttachmentRecord, CropSelection, EquipmentRecord, FarmingTypes
from farm_registry.services.display import (
    attachment_summary,
    equipment_summary,
    farming_types_display,
    format_phone_number,
    main_crop_display,
    sale_status_label,
    sale_type_label,
)


def test_format_phone_number() -> None:
    assert format_phone_number("01012345678") == "010-1234-5678"
    assert format_phone_number("0612345678") == "061-234-5678"
    assert format_phone_number("15881234") == "1588-1234"
    assert format_phone_number("010-1234-5678") == "010-1234-5678"
    assert format_phone_number("12345") == "12345"
    assert format_phone_number("") == ""


def test_farming_types_display() -> None:
    assert farming_types_display(FarmingTypes(water_paddy=True, orchard=True)) == "수도작, 과수원"
    assert farming_types_display(FarmingTypes()) == "없음"


def test_main_crop_display_lists_details() -> None:
    crops = (
        CropSelection(category="foodCrops", selected=True, details=("rice", "barley")),
        CropSelection(category="fruits", selected=True),
        CropSelection(category="flowers", selected=False, details=("rose",)),
    )

    assert main_crop_display(crops) == "식량작물(벼, 보리), 과수"
    assert main_crop_display(()) == "없음"


def test_equipment_and_attachment_summaries() -> None:
    equipments = (
        EquipmentRecord(id="1", type="tractor", manufacturer="DAEDONG"),
        EquipmentRecord(id="2", type="rice_transplanter", manufacturer="UNLISTED"),
    )
    attachments = (
        AttachmentRecord(type="loader", manufacturer="hanil", model="HL-500"),
        AttachmentRecord(type="rearWheel"),
    )

    assert equipment_summary(equipments) == "트랙터(대동), 이앙기(UNLISTED)"
    assert attachment_summary(attachments) == "로더: 한일 HL-500, 후륜:"


def test_trade_labels() -> None:
    assert sale_type_label("used") == "중고"
    assert sale_type_label(None) == ""
    assert sale_status_label("completed") == "거래완료"

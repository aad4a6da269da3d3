"""Excel workbook export for the farmer list and the trade board."""

from __future__ import annotations

from io import BytesIO
from typing import Any, Iterable, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ...models.domain import FarmerRecord
from ..display import (
    attachment_summary,
    equipment_summary,
    equipment_type_label,
    farming_types_display,
    format_phone_number,
    main_crop_display,
    manufacturer_label,
    sale_status_label,
    sale_type_label,
    trade_type_label,
)
from ..trade import TradeListing

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

FARMER_SHEET_TITLE = "농민목록"
TRADE_SHEET_TITLE = "농기계 매매"

# (header, column width)
FARMER_COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 20),
    ("이름", 10),
    ("상호", 15),
    ("연령대", 10),
    ("전화번호", 15),
    ("우편번호", 10),
    ("지번주소", 30),
    ("도로명주소", 30),
    ("상세주소", 20),
    ("우편수취가능여부", 15),
    ("영농형태", 15),
    ("주작물", 20),
    ("보유농기계", 40),
    ("농민정보메모", 50),
)

TRADE_COLUMNS: tuple[tuple[str, int], ...] = (
    ("이름", 10),
    ("연락처", 15),
    ("주소", 30),
    ("기종", 10),
    ("제조사", 10),
    ("모델명", 15),
    ("마력", 10),
    ("연식", 10),
    ("사용시간", 10),
    ("부착물", 30),
    ("판매유형", 10),
    ("매매유형", 10),
    ("희망가격", 15),
    ("상태", 10),
)

_HEADER_FONT = Font(bold=True)
_HEADER_FILL = PatternFill(fill_type="solid", start_color="FFE2EFDA", end_color="FFE2EFDA")


def farmer_row(farmer: FarmerRecord) -> list[Any]:
    return [
        farmer.id,
        farmer.name,
        farmer.business_name,
        farmer.age_group,
        format_phone_number(farmer.phone),
        farmer.zip_code,
        farmer.jibun_address,
        farmer.road_address,
        farmer.address_detail,
        "가능" if farmer.can_receive_mail else "불가능",
        farming_types_display(farmer.farming_types),
        main_crop_display(farmer.main_crop),
        equipment_summary(farmer.equipments),
        farmer.memo,
    ]


def trade_row(listing: TradeListing) -> list[Any]:
    farmer, equipment = listing.farmer, listing.equipment
    return [
        farmer.name,
        format_phone_number(farmer.phone),
        farmer.jibun_address or farmer.road_address,
        equipment_type_label(equipment.type),
        manufacturer_label(equipment.manufacturer),
        equipment.model,
        equipment.horsepower,
        equipment.year,
        equipment.usage_hours,
        attachment_summary(equipment.attachments),
        sale_type_label(equipment.sale_type),
        trade_type_label(equipment.trade_type),
        equipment.desired_price,
        sale_status_label(equipment.sale_status),
    ]


def build_farmer_workbook(records: Iterable[FarmerRecord]) -> bytes:
    return _build_workbook(FARMER_SHEET_TITLE, FARMER_COLUMNS, (farmer_row(record) for record in records))


def build_trade_workbook(listings: Iterable[TradeListing]) -> bytes:
    return _build_workbook(TRADE_SHEET_TITLE, TRADE_COLUMNS, (trade_row(listing) for listing in listings))


def _build_workbook(
    title: str,
    columns: Sequence[tuple[str, int]],
    rows: Iterable[list[Any]],
) -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = title

    worksheet.append([header for header, _ in columns])
    for cell in worksheet[1]:
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")

    for index, (_, width) in enumerate(columns, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width

    for row in rows:
        worksheet.append([_cell_value(value) for value in row])
        for cell in worksheet[worksheet.max_row]:
            # user text starting with "=" must stay text, never a formula
            if cell.data_type == "f":
                cell.data_type = "s"
    worksheet.freeze_panes = "A2"

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def _cell_value(value: Any) -> Any:
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value

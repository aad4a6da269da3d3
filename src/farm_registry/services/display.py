"""Korean display strings for registry values."""

from __future__ import annotations

import re
from typing import Iterable

from ..models.catalog import (
    ATTACHMENT_MANUFACTURERS,
    ATTACHMENT_TYPES,
    CROP_DETAILS,
    EQUIPMENT_TYPES,
    FARMING_TYPES,
    MAIN_CROP_CATEGORIES,
    MANUFACTURERS,
    SALE_STATUSES,
    SALE_TYPES,
    TRADE_TYPES,
)
from ..models.domain import AttachmentRecord, CropSelection, EquipmentRecord, FarmingTypes

NONE_LABEL = "없음"

_NON_DIGITS = re.compile(r"[^0-9]")


def format_phone_number(phone: str) -> str:
    """Hyphenate 8, 10 and 11 digit numbers; anything else is returned as given."""

    digits = _NON_DIGITS.sub("", phone or "")
    if len(digits) == 11:
        return f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
    if len(digits) == 8:
        return f"{digits[:4]}-{digits[4:]}"
    return phone


def phone_digits(phone: str) -> str:
    return _NON_DIGITS.sub("", phone or "")


def farming_types_display(farming_types: FarmingTypes) -> str:
    labels = [FARMING_TYPES.label(code) for code in farming_types.active_codes()]
    return ", ".join(labels) or NONE_LABEL


def main_crop_display(main_crop: Iterable[CropSelection]) -> str:
    parts = []
    for selection in main_crop:
        if not selection.selected:
            continue
        label = MAIN_CROP_CATEGORIES.label(selection.category)
        details = CROP_DETAILS.get(selection.category)
        if selection.details:
            names = [details.label(code) if details else code for code in selection.details]
            label = f"{label}({', '.join(names)})"
        parts.append(label)
    return ", ".join(parts) or NONE_LABEL


def equipment_type_label(code: str) -> str:
    return EQUIPMENT_TYPES.label(code)


def manufacturer_label(code: str) -> str:
    return MANUFACTURERS.label(code)


def sale_type_label(code: str | None) -> str:
    return SALE_TYPES.label(code) if code else ""


def trade_type_label(code: str) -> str:
    return TRADE_TYPES.label(code) if code else ""


def sale_status_label(code: str) -> str:
    return SALE_STATUSES.label(code)


def equipment_summary(equipments: Iterable[EquipmentRecord]) -> str:
    return ", ".join(
        f"{equipment_type_label(item.type)}({manufacturer_label(item.manufacturer)})" for item in equipments
    )


def attachment_summary(attachments: Iterable[AttachmentRecord]) -> str:
    parts = []
    for attachment in attachments:
        makers = ATTACHMENT_MANUFACTURERS.get(attachment.type)
        maker = makers.label(attachment.manufacturer) if makers else attachment.manufacturer
        text = " ".join(value for value in (maker, attachment.model) if value)
        parts.append(f"{ATTACHMENT_TYPES.label(attachment.type)}: {text}".rstrip())
    return ", ".join(parts)

"""Conversion of stored farmer documents into normalized records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional

from ..models.catalog import ATTACHMENT_TYPES, LEGACY_CROP_CATEGORIES, MAIN_CROP_CATEGORIES, SALE_TYPES
from ..models.domain import (
    AttachmentRecord,
    CropSelection,
    EquipmentRecord,
    FarmerRecord,
    FarmingTypes,
)
from ..models.raw import RawAttachmentDocument, RawEquipmentDocument, RawFarmerDocument

DEFAULT_SALE_STATUS = "available"

# Includes the labels written by the old trade-status migration.
_SALE_STATUS_ALIASES = {
    "available": "available",
    "searching": "available",
    "가능": "available",
    "거래가능": "available",
    "판매가능": "available",
    "구매가능": "available",
    "reserved": "reserved",
    "예약중": "reserved",
    "completed": "completed",
    "sold": "completed",
    "완료": "completed",
    "거래완료": "completed",
    "판매완료": "completed",
    "구매완료": "completed",
}


def normalize_documents(documents: Iterable[Any]) -> list[FarmerRecord]:
    """Normalize a batch of documents, keeping input order.

    Documents without an id are given ``unknown-<index>`` so ids stay unique.
    """

    records: list[FarmerRecord] = []
    for index, document in enumerate(documents):
        try:
            record = normalize_farmer(document)
        except Exception as exc:
            fallback_id = _document_id(document, index)
            logging.warning(f"Failed to normalize farmer document '{fallback_id}', using defaults: {exc}")
            record = FarmerRecord(id=fallback_id)
        if not record.id:
            record = replace(record, id=_document_id(document, index))
        records.append(record)
    return records


def normalize_farmer(raw: RawFarmerDocument | Mapping[str, Any] | None) -> FarmerRecord:
    """Map a stored document of any vintage to a fully defaulted record."""

    document: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    farmer_id = _text(document.get("id"))

    equipments = []
    for index, item in enumerate(_items(document.get("equipments"))):
        if isinstance(item, Mapping):
            equipments.append(_normalize_equipment(item, farmer_id, index))

    created_at = _timestamp(document.get("createdAt"))
    updated_at = _timestamp(document.get("updatedAt"))
    if created_at is not None and (updated_at is None or updated_at < created_at):
        updated_at = created_at

    return FarmerRecord(
        id=farmer_id,
        name=_text(document.get("name")),
        phone=_text(document.get("phone")),
        business_name=_text(document.get("businessName")),
        zip_code=_text(document.get("zipCode")),
        road_address=_text(document.get("roadAddress")),
        jibun_address=_text(document.get("jibunAddress")),
        address_detail=_text(document.get("addressDetail")),
        can_receive_mail=_flag(document.get("canReceiveMail")),
        age_group=_text(document.get("ageGroup")),
        memo=_text(document.get("memo")),
        farmer_images=_strings(document.get("farmerImages")),
        farming_types=_normalize_farming_types(document.get("farmingTypes")),
        main_crop=_normalize_main_crop(document.get("mainCrop")),
        equipments=tuple(equipments),
        rating=_score(document.get("rating")),
        created_at=created_at,
        updated_at=updated_at,
    )


def normalize_sale_status(value: Any) -> str:
    if isinstance(value, str):
        return _SALE_STATUS_ALIASES.get(value.strip(), DEFAULT_SALE_STATUS)
    return DEFAULT_SALE_STATUS


def _normalize_equipment(raw: RawEquipmentDocument | Mapping[str, Any], farmer_id: str, index: int) -> EquipmentRecord:
    condition = raw.get("condition")
    if condition in (None, ""):
        condition = raw.get("rating")
    sale_type = raw.get("saleType")

    return EquipmentRecord(
        id=_text(raw.get("id")) or f"{farmer_id}-{index}",
        type=_text(raw.get("type")),
        manufacturer=_text(raw.get("manufacturer")),
        model=_text(raw.get("model")),
        horsepower=_text(raw.get("horsepower")),
        year=_text(raw.get("year")),
        usage_hours=_text(raw.get("usageHours")),
        condition=_score(condition),
        sale_type=sale_type if sale_type in SALE_TYPES else None,
        trade_type=_text(raw.get("tradeType")),
        desired_price=_text(raw.get("desiredPrice")),
        sale_status=normalize_sale_status(raw.get("saleStatus")),
        memo=_text(raw.get("memo")),
        images=_strings(raw.get("images")),
        attachments=_normalize_attachments(raw.get("attachments")),
    )


def _normalize_attachments(value: Any) -> tuple[AttachmentRecord, ...]:
    if isinstance(value, Mapping):
        # Legacy layout: {"loader": {...}, "rotary": {...}, "cutter": "..."}
        records = []
        for code in ATTACHMENT_TYPES.codes():
            entry = value.get(code)
            if isinstance(entry, Mapping) and _has_content(entry):
                records.append(_normalize_attachment(entry, code))
        return tuple(records)

    records = []
    for entry in _items(value):
        if isinstance(entry, Mapping):
            records.append(_normalize_attachment(entry, _text(entry.get("type"))))
    return tuple(records)


def _normalize_attachment(raw: RawAttachmentDocument | Mapping[str, Any], attachment_type: str) -> AttachmentRecord:
    condition = raw.get("condition")
    if condition in (None, ""):
        condition = raw.get("rating")
    return AttachmentRecord(
        type=attachment_type,
        manufacturer=_text(raw.get("manufacturer")),
        model=_text(raw.get("model")),
        condition=_score(condition),
        memo=_text(raw.get("memo")),
        images=_strings(raw.get("images")),
    )


def _has_content(entry: Mapping[str, Any]) -> bool:
    for key in ("manufacturer", "model", "memo"):
        if _text(entry.get(key)):
            return True
    return bool(_strings(entry.get("images"))) or _score(entry.get("condition")) > 0


def _normalize_farming_types(value: Any) -> FarmingTypes:
    if not isinstance(value, Mapping):
        return FarmingTypes()
    return FarmingTypes(
        water_paddy=_flag(value.get("waterPaddy")) or _flag(value.get("paddyFarming")),
        field_farming=_flag(value.get("fieldFarming")),
        orchard=_flag(value.get("orchard")),
        livestock=_flag(value.get("livestock")),
        forage_crop=_flag(value.get("forageCrop")),
    )


def _normalize_main_crop(value: Any) -> tuple[CropSelection, ...]:
    categories = MAIN_CROP_CATEGORIES.codes()
    if not isinstance(value, Mapping):
        return tuple(CropSelection(category=code) for code in categories)

    selected = {code: _flag(value.get(code)) for code in categories}
    details = {code: list(_strings(value.get(f"{code}Details"))) for code in categories}

    for legacy_key, (category, crop) in LEGACY_CROP_CATEGORIES.items():
        if _flag(value.get(legacy_key)):
            selected[category] = True
            if crop not in details[category]:
                details[category].append(crop)

    return tuple(
        CropSelection(
            category=code,
            selected=selected[code],
            details=tuple(details[code]) if selected[code] else (),
        )
        for code in categories
    )


def _document_id(document: Any, index: int) -> str:
    if isinstance(document, Mapping):
        identifier = _text(document.get("id"))
        if identifier:
            return identifier
    return f"unknown-{index}"


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return ""


def _flag(value: Any) -> bool:
    return value is True


def _score(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        if isinstance(value, (int, float)):
            number = int(value)
        elif isinstance(value, str):
            number = int(float(value.strip()))
        else:
            return 0
    except (ValueError, OverflowError):
        return 0
    return max(0, min(5, number))


def _items(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _strings(value: Any) -> tuple[str, ...]:
    return tuple(item for item in _items(value) if isinstance(item, str) and item)


def _timestamp(value: Any) -> Optional[datetime]:
    parsed: Optional[datetime] = None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    elif isinstance(value, Mapping) and isinstance(value.get("seconds"), (int, float)):
        try:
            parsed = datetime.fromtimestamp(value["seconds"], tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if parsed is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

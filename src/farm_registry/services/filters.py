"""Multi-criteria filtering over the in-memory farmer registry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Sequence

from ..models.domain import FarmerRecord

ALL = "all"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Immutable filter state; empty strings and ``"all"`` leave a criterion unset."""

    search_term: str = ""
    city: str = ""
    district: str = ""
    village: str = ""
    farming_type: str = ""
    main_crop: str = ""
    mail_option: str = ALL
    sale_type: str = ALL
    trade_type: str = ALL
    equipment_type: str = ""
    manufacturer: str = ""


def filter_farmers(records: Iterable[FarmerRecord], criteria: FilterCriteria) -> list[FarmerRecord]:
    """Return the records passing every active criterion, in input order."""

    return [record for record in records if matches(record, criteria)]


def matches(record: FarmerRecord, criteria: FilterCriteria) -> bool:
    term = criteria.search_term.strip().lower()
    if term and term not in _search_text(record):
        return False

    if not _matches_region(record, criteria):
        return False

    if criteria.farming_type and not record.farming_types.flag(criteria.farming_type):
        return False

    if criteria.main_crop:
        selection = record.crop(criteria.main_crop)
        if selection is None or not selection.selected:
            return False

    if criteria.mail_option == "yes" and not record.can_receive_mail:
        return False
    if criteria.mail_option == "no" and record.can_receive_mail:
        return False

    if _is_set(criteria.sale_type) and not any(
        equipment.sale_type == criteria.sale_type for equipment in record.equipments
    ):
        return False

    if _is_set(criteria.trade_type) and not any(
        equipment.trade_type == criteria.trade_type for equipment in record.equipments
    ):
        return False

    if criteria.equipment_type and not any(
        equipment.type == criteria.equipment_type for equipment in record.equipments
    ):
        return False

    if criteria.manufacturer and not any(
        equipment.manufacturer == criteria.manufacturer for equipment in record.equipments
    ):
        return False

    return True


def sort_by_created_desc(records: Sequence[FarmerRecord]) -> list[FarmerRecord]:
    """Newest first; records without a creation time keep their order at the end."""

    return sorted(records, key=lambda record: record.created_at or _EPOCH, reverse=True)


def _search_text(record: FarmerRecord) -> str:
    fields = (
        record.name,
        record.phone,
        record.business_name,
        record.jibun_address,
        record.road_address,
    )
    return " ".join(fields).lower()


def _matches_region(record: FarmerRecord, criteria: FilterCriteria) -> bool:
    wanted = [value for value in (criteria.city, criteria.district, criteria.village) if value]
    if not wanted:
        return True

    if criteria.village:
        haystacks = (record.jibun_address,)
    else:
        haystacks = (record.jibun_address, record.road_address)

    return all(any(value in haystack for haystack in haystacks) for value in wanted)


def _is_set(value: str) -> bool:
    return bool(value) and value != ALL

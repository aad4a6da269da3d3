"""Buy/sell board built from equipment marked for trade."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.domain import EquipmentRecord, FarmerRecord

ALL = "all"


@dataclass(frozen=True, slots=True)
class TradeListing:
    farmer: FarmerRecord
    equipment: EquipmentRecord


@dataclass(frozen=True, slots=True)
class TradeCriteria:
    trade_type: str = ALL
    sale_status: str = ALL
    equipment_type: str = ""
    manufacturer: str = ""
    min_price: Optional[int] = None
    max_price: Optional[int] = None


def parse_price(value: str) -> Optional[int]:
    """Parse a price string such as ``"12,500,000"``; returns None when unparseable."""

    text = (value or "").replace(",", "").strip()
    if not text:
        return None
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None


def list_trade_listings(records: Iterable[FarmerRecord], criteria: TradeCriteria) -> list[TradeListing]:
    listings: list[TradeListing] = []
    for farmer in records:
        for equipment in farmer.equipments:
            if not equipment.trade_type:
                continue
            if _matches(equipment, criteria):
                listings.append(TradeListing(farmer=farmer, equipment=equipment))
    return listings


def _matches(equipment: EquipmentRecord, criteria: TradeCriteria) -> bool:
    if criteria.trade_type and criteria.trade_type != ALL and equipment.trade_type != criteria.trade_type:
        return False
    if criteria.sale_status and criteria.sale_status != ALL and equipment.sale_status != criteria.sale_status:
        return False
    if criteria.equipment_type and equipment.type != criteria.equipment_type:
        return False
    if criteria.manufacturer and equipment.manufacturer != criteria.manufacturer:
        return False

    if criteria.min_price is not None or criteria.max_price is not None:
        price = parse_price(equipment.desired_price)
        if price is None:
            return False
        if criteria.min_price is not None and price < criteria.min_price:
            return False
        if criteria.max_price is not None and price > criteria.max_price:
            return False

    return True

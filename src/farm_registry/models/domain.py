"""Domain models for normalized farmer and equipment records."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .catalog import FARMING_TYPES, MAIN_CROP_CATEGORIES


@dataclass(frozen=True, slots=True)
class RegionTokens:
    """Administrative regions derived from a lot-number address."""

    city: Optional[str] = None
    district: Optional[str] = None
    village: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AttachmentRecord:
    """An implement mounted on a piece of equipment (loader, rotary, wheels)."""

    type: str
    manufacturer: str = ""
    model: str = ""
    condition: int = 0
    memo: str = ""
    images: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class EquipmentRecord:
    """A machine owned by a farmer, including its trade-board state."""

    id: str
    type: str = ""
    manufacturer: str = ""
    model: str = ""
    horsepower: str = ""
    year: str = ""
    usage_hours: str = ""
    condition: int = 0
    sale_type: Optional[str] = None
    trade_type: str = ""
    desired_price: str = ""
    sale_status: str = "available"
    memo: str = ""
    images: tuple[str, ...] = ()
    attachments: tuple[AttachmentRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class FarmingTypes:
    water_paddy: bool = False
    field_farming: bool = False
    orchard: bool = False
    livestock: bool = False
    forage_crop: bool = False

    def flag(self, code: str) -> bool:
        """Return the flag for a farming-type code; unknown codes are unset."""
        attribute = _FARMING_TYPE_ATTRIBUTES.get(code)
        return bool(attribute and getattr(self, attribute))

    def active_codes(self) -> tuple[str, ...]:
        return tuple(code for code in FARMING_TYPES.codes() if self.flag(code))


_FARMING_TYPE_ATTRIBUTES = {
    "waterPaddy": "water_paddy",
    "fieldFarming": "field_farming",
    "orchard": "orchard",
    "livestock": "livestock",
    "forageCrop": "forage_crop",
}


@dataclass(frozen=True, slots=True)
class CropSelection:
    """One main-crop category with the detail crops chosen under it."""

    category: str
    selected: bool = False
    details: tuple[str, ...] = ()


def _empty_main_crop() -> tuple[CropSelection, ...]:
    return tuple(CropSelection(category=code) for code in MAIN_CROP_CATEGORIES.codes())


@dataclass(frozen=True, slots=True)
class FarmerRecord:
    """Represents a registered farmer with owned equipment."""

    id: str
    name: str = ""
    phone: str = ""
    business_name: str = ""
    zip_code: str = ""
    road_address: str = ""
    jibun_address: str = ""
    address_detail: str = ""
    can_receive_mail: bool = False
    age_group: str = ""
    memo: str = ""
    farmer_images: tuple[str, ...] = ()
    farming_types: FarmingTypes = field(default_factory=FarmingTypes)
    main_crop: tuple[CropSelection, ...] = field(default_factory=_empty_main_crop)
    equipments: tuple[EquipmentRecord, ...] = ()
    rating: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def crop(self, category: str) -> Optional[CropSelection]:
        for selection in self.main_crop:
            if selection.category == category:
                return selection
        return None

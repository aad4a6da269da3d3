"""Pydantic request/response models for farmer endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.catalog import ATTACHMENT_TYPES, FARMING_TYPES, SALE_STATUSES, SALE_TYPES, CodeTable
from ..models.domain import AttachmentRecord, EquipmentRecord, FarmerRecord
from ..services.address import parse_address
from ..services.display import phone_digits


def _require_code(value: str, table: CodeTable) -> str:
    if value not in table:
        raise ValueError(f"unknown {table.name} code: {value}")
    return value


class AttachmentPayload(BaseModel):
    type: str
    manufacturer: str = ""
    model: str = ""
    condition: int = Field(default=0, ge=0, le=5)
    memo: str = ""
    images: List[str] = Field(default_factory=list)

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        return _require_code(value, ATTACHMENT_TYPES)


class EquipmentPayload(BaseModel):
    id: Optional[str] = None
    type: str = ""
    manufacturer: str = ""
    model: str = ""
    horsepower: str = ""
    year: str = ""
    usageHours: str = ""
    condition: int = Field(default=0, ge=0, le=5)
    saleType: Optional[str] = None
    tradeType: str = ""
    desiredPrice: str = ""
    saleStatus: str = "available"
    memo: str = ""
    images: List[str] = Field(default_factory=list)
    attachments: List[AttachmentPayload] = Field(default_factory=list)

    @field_validator("desiredPrice")
    @classmethod
    def validate_desired_price(cls, value: str) -> str:
        cleaned = value.replace(",", "").strip()
        if cleaned and not cleaned.isdigit():
            raise ValueError("desiredPrice must be a number")
        return cleaned

    @field_validator("saleType")
    @classmethod
    def validate_sale_type(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _require_code(value, SALE_TYPES)

    @field_validator("saleStatus")
    @classmethod
    def validate_sale_status(cls, value: str) -> str:
        return _require_code(value, SALE_STATUSES)


class FarmerPayload(BaseModel):
    """Body of create/update requests, stored as the farmer document."""

    name: str = Field(..., description="Farmer name.")
    phone: str = ""
    businessName: str = ""
    zipCode: str = ""
    roadAddress: str = ""
    jibunAddress: str = ""
    addressDetail: str = ""
    canReceiveMail: bool = False
    ageGroup: str = ""
    memo: str = ""
    farmerImages: List[str] = Field(default_factory=list)
    farmingTypes: dict[str, bool] = Field(default_factory=dict)
    mainCrop: dict[str, Any] = Field(default_factory=dict)
    equipments: List[EquipmentPayload] = Field(default_factory=list)
    rating: int = Field(default=0, ge=0, le=5)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        value = value.strip()
        digits = phone_digits(value)
        if value and not 8 <= len(digits) <= 11:
            raise ValueError("phone must contain 8 to 11 digits")
        return value

    @field_validator("farmingTypes")
    @classmethod
    def validate_farming_types(cls, value: dict[str, bool]) -> dict[str, bool]:
        unknown = [code for code in value if code not in FARMING_TYPES]
        if unknown:
            raise ValueError(f"unknown farming types: {', '.join(unknown)}")
        return value


class AttachmentModel(BaseModel):
    type: str
    manufacturer: str
    model: str
    condition: int
    memo: str
    images: List[str]


class EquipmentModel(BaseModel):
    id: str
    type: str
    manufacturer: str
    model: str
    horsepower: str
    year: str
    usageHours: str
    condition: int
    saleType: Optional[str] = None
    tradeType: str
    desiredPrice: str
    saleStatus: str
    memo: str
    images: List[str]
    attachments: List[AttachmentModel]


class CropSelectionModel(BaseModel):
    category: str
    selected: bool
    details: List[str]


class RegionModel(BaseModel):
    city: str | None = None
    district: str | None = None
    village: str | None = None


class FarmerModel(BaseModel):
    id: str
    name: str
    phone: str
    businessName: str
    zipCode: str
    roadAddress: str
    jibunAddress: str
    addressDetail: str
    canReceiveMail: bool
    ageGroup: str
    memo: str
    farmerImages: List[str]
    farmingTypes: dict[str, bool]
    mainCrop: List[CropSelectionModel]
    equipments: List[EquipmentModel]
    rating: int
    createdAt: datetime | None = None
    updatedAt: datetime | None = None
    region: RegionModel


class PageWindowModel(BaseModel):
    pages: List[int]
    prevGroupPage: int
    nextGroupPage: int


class FarmerListResponse(BaseModel):
    items: List[FarmerModel]
    page: int
    pageSize: int
    totalPages: int
    totalItems: int
    registryTotal: int
    pageWindow: PageWindowModel


class DuplicateCheckResponse(BaseModel):
    duplicate: bool
    items: List[FarmerModel]


class BulkDeleteRequest(BaseModel):
    ids: List[str] = Field(..., min_length=1)


class BulkDeleteResponse(BaseModel):
    deleted: List[str]
    failed: List[str]
    imagesRemoved: int


class RegionOptionsResponse(BaseModel):
    cities: List[str]
    districtsByCity: dict[str, List[str]]
    villagesByDistrict: dict[str, dict[str, List[str]]]


def attachment_to_model(attachment: AttachmentRecord) -> AttachmentModel:
    return AttachmentModel(
        type=attachment.type,
        manufacturer=attachment.manufacturer,
        model=attachment.model,
        condition=attachment.condition,
        memo=attachment.memo,
        images=list(attachment.images),
    )


def equipment_to_model(equipment: EquipmentRecord) -> EquipmentModel:
    return EquipmentModel(
        id=equipment.id,
        type=equipment.type,
        manufacturer=equipment.manufacturer,
        model=equipment.model,
        horsepower=equipment.horsepower,
        year=equipment.year,
        usageHours=equipment.usage_hours,
        condition=equipment.condition,
        saleType=equipment.sale_type,
        tradeType=equipment.trade_type,
        desiredPrice=equipment.desired_price,
        saleStatus=equipment.sale_status,
        memo=equipment.memo,
        images=list(equipment.images),
        attachments=[attachment_to_model(item) for item in equipment.attachments],
    )


def farmer_to_model(record: FarmerRecord) -> FarmerModel:
    tokens = parse_address(record.jibun_address)
    return FarmerModel(
        id=record.id,
        name=record.name,
        phone=record.phone,
        businessName=record.business_name,
        zipCode=record.zip_code,
        roadAddress=record.road_address,
        jibunAddress=record.jibun_address,
        addressDetail=record.address_detail,
        canReceiveMail=record.can_receive_mail,
        ageGroup=record.age_group,
        memo=record.memo,
        farmerImages=list(record.farmer_images),
        farmingTypes={code: record.farming_types.flag(code) for code in FARMING_TYPES.codes()},
        mainCrop=[
            CropSelectionModel(category=item.category, selected=item.selected, details=list(item.details))
            for item in record.main_crop
        ],
        equipments=[equipment_to_model(item) for item in record.equipments],
        rating=record.rating,
        createdAt=record.created_at,
        updatedAt=record.updated_at,
        region=RegionModel(city=tokens.city, district=tokens.district, village=tokens.village),
    )

"""Shapes of farmer documents as they are stored, before normalization.

Every key is optional and values are untrusted: older documents use legacy
layouts (per-crop flags, attachments keyed by type, Korean status labels).
Only ``services.normalizer`` reads these.
"""

from typing import Any, TypedDict


class RawAttachmentDocument(TypedDict, total=False):
    type: Any
    manufacturer: Any
    model: Any
    condition: Any
    rating: Any
    memo: Any
    images: Any


class RawEquipmentDocument(TypedDict, total=False):
    id: Any
    type: Any
    manufacturer: Any
    model: Any
    horsepower: Any
    year: Any
    usageHours: Any
    condition: Any
    rating: Any
    saleType: Any
    tradeType: Any
    desiredPrice: Any
    saleStatus: Any
    memo: Any
    images: Any
    attachments: Any


class RawFarmerDocument(TypedDict, total=False):
    id: Any
    name: Any
    phone: Any
    businessName: Any
    zipCode: Any
    roadAddress: Any
    jibunAddress: Any
    addressDetail: Any
    canReceiveMail: Any
    ageGroup: Any
    memo: Any
    farmerImages: Any
    farmingTypes: Any
    mainCrop: Any
    equipments: Any
    rating: Any
    createdAt: Any
    updatedAt: Any

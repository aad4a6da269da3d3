"""Trade board API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from ..services.trade import TradeListing
from .farmers import EquipmentModel, equipment_to_model


class TradeFarmerModel(BaseModel):
    id: str
    name: str
    phone: str
    address: str


class TradeListingModel(BaseModel):
    farmer: TradeFarmerModel
    equipment: EquipmentModel


class TradeListResponse(BaseModel):
    items: List[TradeListingModel]
    total: int


def listing_to_model(listing: TradeListing) -> TradeListingModel:
    farmer = listing.farmer
    return TradeListingModel(
        farmer=TradeFarmerModel(
            id=farmer.id,
            name=farmer.name,
            phone=farmer.phone,
            address=farmer.jibun_address or farmer.road_address,
        ),
        equipment=equipment_to_model(listing.equipment),
    )

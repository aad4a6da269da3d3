"""Equipment trade board endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...models.domain import FarmerRecord
from ...schemas.trade import TradeListResponse, listing_to_model
from ...services.export import build_trade_workbook
from ...services.trade import ALL, TradeCriteria, list_trade_listings
from ..dependencies import load_records, xlsx_response

router = APIRouter(prefix="/trade", tags=["trade"])


def trade_criteria(
    trade_type: str = Query(default=ALL),
    sale_status: str = Query(default=ALL),
    equipment_type: str = Query(default=""),
    manufacturer: str = Query(default=""),
    min_price: Optional[int] = Query(default=None, ge=0),
    max_price: Optional[int] = Query(default=None, ge=0),
) -> TradeCriteria:
    return TradeCriteria(
        trade_type=trade_type,
        sale_status=sale_status,
        equipment_type=equipment_type,
        manufacturer=manufacturer,
        min_price=min_price,
        max_price=max_price,
    )


@router.get("", response_model=TradeListResponse, status_code=status.HTTP_200_OK)
def list_trade(
    criteria: TradeCriteria = Depends(trade_criteria),
    records: tuple[FarmerRecord, ...] = Depends(load_records),
) -> TradeListResponse:
    listings = list_trade_listings(records, criteria)
    return TradeListResponse(items=[listing_to_model(listing) for listing in listings], total=len(listings))


@router.get("/export")
def export_trade(
    criteria: TradeCriteria = Depends(trade_criteria),
    records: tuple[FarmerRecord, ...] = Depends(load_records),
) -> Response:
    return xlsx_response(build_trade_workbook(list_trade_listings(records, criteria)), "농기계_매매.xlsx")

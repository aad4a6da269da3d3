"""Shared FastAPI dependencies."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import HTTPException, Query, Response, status

from ..models.domain import FarmerRecord
from ..services.export import XLSX_MEDIA_TYPE
from ..services.filters import ALL, FilterCriteria
from ..services.registry import RegistryLoadError, get_registry


def load_records() -> tuple[FarmerRecord, ...]:
    """Current registry snapshot; a failed load surfaces as 503."""

    try:
        return get_registry().records()
    except RegistryLoadError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not load registry.",
        ) from exc


def filter_criteria(
    search: str = Query(default="", description="Name, phone, business name or address fragment"),
    city: str = Query(default="", description="City (시/군) contained in the address"),
    district: str = Query(default="", description="Township (읍/면/동) contained in the address"),
    village: str = Query(default="", description="Village (리) contained in the lot-number address"),
    farming_type: str = Query(default=""),
    main_crop: str = Query(default=""),
    mail_option: str = Query(default=ALL, pattern="^(all|yes|no)$"),
    sale_type: str = Query(default=ALL),
    trade_type: str = Query(default=ALL),
    equipment_type: str = Query(default=""),
    manufacturer: str = Query(default=""),
) -> FilterCriteria:
    return FilterCriteria(
        search_term=search,
        city=city,
        district=district,
        village=village,
        farming_type=farming_type,
        main_crop=main_crop,
        mail_option=mail_option,
        sale_type=sale_type,
        trade_type=trade_type,
        equipment_type=equipment_type,
        manufacturer=manufacturer,
    )


def xlsx_response(payload: bytes, filename: str) -> Response:
    """Attachment response for a generated workbook; the UTF-8 filename goes in ``filename*``."""

    disposition = f"attachment; filename=\"export.xlsx\"; filename*=UTF-8''{quote(filename)}"
    return Response(content=payload, media_type=XLSX_MEDIA_TYPE, headers={"Content-Disposition": disposition})

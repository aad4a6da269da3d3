"""Farmer registry endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...config import settings
from ...data.farmers_repository import FarmerNotFoundError, StoreNotConfiguredError
from ...models.domain import FarmerRecord
from ...schemas.farmers import (
    BulkDeleteRequest,
    BulkDeleteResponse,
    DuplicateCheckResponse,
    FarmerListResponse,
    FarmerModel,
    FarmerPayload,
    PageWindowModel,
    RegionOptionsResponse,
    farmer_to_model,
)
from ...services import farmers as farmer_service
from ...services.export import build_farmer_workbook
from ...services.filters import FilterCriteria, filter_farmers
from ...services.geo import collect_region_options
from ...services.pagination import page_window, paginate
from ...services.registry import RegistryLoadError
from ..dependencies import filter_criteria, load_records, xlsx_response

router = APIRouter(prefix="/farmers", tags=["farmers"])


@router.get("", response_model=FarmerListResponse, status_code=status.HTTP_200_OK)
def list_farmers(
    criteria: FilterCriteria = Depends(filter_criteria),
    page: int = Query(default=1, description="1-based page; out-of-range values are clamped"),
    page_size: int | None = Query(default=None, ge=1, le=100),
    records: tuple[FarmerRecord, ...] = Depends(load_records),
) -> FarmerListResponse:
    filtered = filter_farmers(records, criteria)
    result = paginate(filtered, page_size or settings.page_size, page)
    window = page_window(result.page, result.total_pages, settings.page_window)
    return FarmerListResponse(
        items=[farmer_to_model(record) for record in result.items],
        page=result.page,
        pageSize=page_size or settings.page_size,
        totalPages=result.total_pages,
        totalItems=result.total_items,
        registryTotal=len(records),
        pageWindow=PageWindowModel(
            pages=list(window.pages),
            prevGroupPage=window.prev_group_page,
            nextGroupPage=window.next_group_page,
        ),
    )


@router.get("/regions", response_model=RegionOptionsResponse, status_code=status.HTTP_200_OK)
def list_region_options(records: tuple[FarmerRecord, ...] = Depends(load_records)) -> RegionOptionsResponse:
    return RegionOptionsResponse(**collect_region_options(records))


@router.get("/duplicates", response_model=DuplicateCheckResponse, status_code=status.HTTP_200_OK)
def check_duplicates(
    name: str = Query(default=""),
    phone: str = Query(default=""),
    records: tuple[FarmerRecord, ...] = Depends(load_records),
) -> DuplicateCheckResponse:
    matches = farmer_service.find_duplicates(records, name=name, phone=phone)
    return DuplicateCheckResponse(duplicate=bool(matches), items=[farmer_to_model(record) for record in matches])


@router.get("/export")
def export_farmers(
    criteria: FilterCriteria = Depends(filter_criteria),
    records: tuple[FarmerRecord, ...] = Depends(load_records),
) -> Response:
    payload = build_farmer_workbook(filter_farmers(records, criteria))
    return xlsx_response(payload, "농민목록.xlsx")


@router.post("/bulk-delete", response_model=BulkDeleteResponse, status_code=status.HTTP_200_OK)
def bulk_delete_farmers(request: BulkDeleteRequest) -> BulkDeleteResponse:
    try:
        result = farmer_service.delete_farmers(request.ids)
    except StoreNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return BulkDeleteResponse(deleted=result.deleted, failed=result.failed, imagesRemoved=result.images_removed)


@router.get("/{farmer_id}", response_model=FarmerModel, status_code=status.HTTP_200_OK)
def get_farmer(farmer_id: str) -> FarmerModel:
    try:
        record = farmer_service.get_farmer(farmer_id)
    except RegistryLoadError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Could not load registry.") from exc
    except FarmerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except StoreNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return farmer_to_model(record)


@router.post("", response_model=FarmerModel, status_code=status.HTTP_201_CREATED)
def create_farmer(payload: FarmerPayload) -> FarmerModel:
    try:
        record = farmer_service.create_farmer(payload)
    except StoreNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return farmer_to_model(record)


@router.put("/{farmer_id}", response_model=FarmerModel, status_code=status.HTTP_200_OK)
def update_farmer(farmer_id: str, payload: FarmerPayload) -> FarmerModel:
    try:
        record = farmer_service.update_farmer(farmer_id, payload)
    except FarmerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except StoreNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return farmer_to_model(record)


@router.delete("/{farmer_id}", status_code=status.HTTP_200_OK)
def delete_farmer(farmer_id: str) -> dict:
    try:
        removed = farmer_service.delete_farmer(farmer_id)
    except FarmerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except StoreNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return {"id": farmer_id, "deleted": True, "imagesRemoved": removed}

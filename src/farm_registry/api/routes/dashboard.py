"""Dashboard statistics and the regional distribution chart."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from ...models.domain import FarmerRecord
from ...schemas.dashboard import (
    RegionChartResponse,
    RegionSeriesModel,
    RegistryStatsResponse,
)
from ...services.geo import ALL_CITIES, aggregate_by_region, compute_registry_stats
from ..dependencies import load_records

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=RegistryStatsResponse, status_code=status.HTTP_200_OK)
def get_registry_stats(records: tuple[FarmerRecord, ...] = Depends(load_records)) -> RegistryStatsResponse:
    return RegistryStatsResponse(**compute_registry_stats(records))


@router.get("/regions", response_model=RegionChartResponse, status_code=status.HTTP_200_OK)
def get_region_chart(
    city: str = Query(default=ALL_CITIES, description="'all' for the city view, or a city name for its townships"),
    records: tuple[FarmerRecord, ...] = Depends(load_records),
) -> RegionChartResponse:
    aggregate = aggregate_by_region(records, selected_city=city)
    return RegionChartResponse(
        selectedCity=city,
        labels=list(aggregate.labels),
        series=RegionSeriesModel(
            customers=list(aggregate.customers),
            equipment=list(aggregate.equipment),
        ),
        yAxisMax=aggregate.y_axis_max,
        tickStep=aggregate.tick_step,
    )

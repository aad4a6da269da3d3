"""Dashboard API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class TopCityModel(BaseModel):
    name: str
    ratio: float
    farmers: int


class RegistryStatsResponse(BaseModel):
    totalFarmers: int
    totalEquipment: int
    mailableFarmers: int
    locatedFarmers: int
    unlocatedPercentage: float
    citiesDetected: int
    topCities: list[TopCityModel]


class RegionSeriesModel(BaseModel):
    customers: List[int]
    equipment: List[int]


class RegionChartResponse(BaseModel):
    selectedCity: str
    labels: List[str]
    series: RegionSeriesModel
    yAxisMax: int
    tickStep: int

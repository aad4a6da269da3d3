"""Regional analytics over the farmer registry."""

from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from ..models.catalog import PROVINCE_CITIES
from ..models.domain import FarmerRecord
from .address import parse_address

ALL_CITIES = "all"
Y_AXIS_HEADROOM = 1.2
Y_AXIS_TICKS = 8


@dataclass(frozen=True, slots=True)
class RegionAggregate:
    """Chart dataset: one label per region with two parallel count series."""

    labels: tuple[str, ...]
    customers: tuple[int, ...]
    equipment: tuple[int, ...]
    y_axis_max: int
    tick_step: int


def aggregate_by_region(
    records: Iterable[FarmerRecord],
    selected_city: str = ALL_CITIES,
    cities: Sequence[str] = PROVINCE_CITIES,
) -> RegionAggregate:
    """Count farmers and their equipment per city, or per district of one city."""

    customer_counts: Dict[str, int] = {}
    equipment_counts: Dict[str, int] = {}
    city_level = not selected_city or selected_city == ALL_CITIES

    if city_level:
        for city in cities:
            customer_counts[city] = 0
            equipment_counts[city] = 0

    for record in records:
        tokens = parse_address(record.jibun_address)
        if tokens.city is None:
            logging.debug(f"Excluding farmer '{record.id}' from regional counts: no city in address")
            continue

        if city_level:
            key = tokens.city
        else:
            if tokens.city != selected_city or tokens.district is None:
                continue
            key = tokens.district

        customer_counts[key] = customer_counts.get(key, 0) + 1
        equipment_counts[key] = equipment_counts.get(key, 0) + len(record.equipments)

    ranked = sorted(customer_counts, key=lambda label: -customer_counts[label])
    customers = tuple(customer_counts[label] for label in ranked)
    equipment = tuple(equipment_counts[label] for label in ranked)

    peak = max(customers + equipment, default=0)
    y_axis_max = math.ceil(peak * Y_AXIS_HEADROOM)
    tick_step = math.ceil(y_axis_max / Y_AXIS_TICKS)

    return RegionAggregate(
        labels=tuple(ranked),
        customers=customers,
        equipment=equipment,
        y_axis_max=y_axis_max,
        tick_step=tick_step,
    )


def compute_registry_stats(records: Sequence[FarmerRecord], top_n: int = 3) -> dict:
    total_farmers = len(records)
    total_equipment = sum(len(record.equipments) for record in records)

    city_counts: Counter[str] = Counter()
    for record in records:
        city = parse_address(record.jibun_address).city
        if city:
            city_counts[city] += 1

    located_total = sum(city_counts.values())
    unlocated_total = total_farmers - located_total
    unlocated_percentage = 0.0
    if total_farmers:
        unlocated_percentage = round((unlocated_total / total_farmers) * 100, 1)

    top_cities: List[dict] = []
    if located_total:
        for city, count in city_counts.most_common(top_n):
            ratio = round(count / located_total, 2)
            top_cities.append({"name": city, "ratio": ratio, "farmers": count})

    return {
        "totalFarmers": total_farmers,
        "totalEquipment": total_equipment,
        "mailableFarmers": sum(1 for record in records if record.can_receive_mail),
        "locatedFarmers": located_total,
        "unlocatedPercentage": unlocated_percentage,
        "citiesDetected": len(city_counts),
        "topCities": top_cities,
    }


def collect_region_options(records: Iterable[FarmerRecord]) -> dict:
    """Return the cities, districts and villages observed in the registry.

    Township names repeat across cities, so villages are keyed by city, then district.
    """

    cities: set[str] = set()
    districts_by_city: Dict[str, set[str]] = defaultdict(set)
    villages_by_district: Dict[str, Dict[str, set[str]]] = defaultdict(lambda: defaultdict(set))

    for record in records:
        tokens = parse_address(record.jibun_address)
        if tokens.city is None:
            continue
        cities.add(tokens.city)
        if tokens.district:
            districts_by_city[tokens.city].add(tokens.district)
            if tokens.village:
                villages_by_district[tokens.city][tokens.district].add(tokens.village)

    return {
        "cities": sorted(cities),
        "districtsByCity": {city: sorted(values) for city, values in sorted(districts_by_city.items())},
        "villagesByDistrict": {
            city: {district: sorted(values) for district, values in sorted(districts.items())}
            for city, districts in sorted(villages_by_district.items())
        },
    }

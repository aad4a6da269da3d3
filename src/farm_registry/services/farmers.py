"""Registry writes and duplicate detection."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from ..data import farmers_repository
from ..models.domain import FarmerRecord
from ..schemas.farmers import FarmerPayload
from .display import phone_digits
from .normalizer import normalize_farmer
from .registry import FarmerRegistry, RegistryLoadError, get_registry


@dataclass(slots=True)
class BulkDeleteResult:
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    images_removed: int = 0


def payload_to_document(payload: FarmerPayload) -> dict[str, Any]:
    """Serialize a validated payload, giving new equipment a stable id."""

    document = payload.model_dump(mode="json")
    for equipment in document.get("equipments", []):
        if not equipment.get("id"):
            equipment["id"] = str(uuid.uuid4())
    return document


def get_farmer(farmer_id: str, registry: Optional[FarmerRegistry] = None) -> FarmerRecord:
    """Look up a farmer in the snapshot, falling back to the store for records written elsewhere."""

    record = (registry or get_registry()).find(farmer_id)
    if record is not None:
        return record
    return normalize_farmer(farmers_repository.get_farmer_document(farmer_id))


def create_farmer(payload: FarmerPayload, registry: Optional[FarmerRegistry] = None) -> FarmerRecord:
    stored = farmers_repository.insert_farmer_document(payload_to_document(payload))
    _refresh(registry)
    return normalize_farmer(stored)


def update_farmer(
    farmer_id: str,
    payload: FarmerPayload,
    registry: Optional[FarmerRegistry] = None,
) -> FarmerRecord:
    stored = farmers_repository.update_farmer_document(farmer_id, payload_to_document(payload))
    _refresh(registry)
    return normalize_farmer(stored)


def delete_farmer(farmer_id: str, registry: Optional[FarmerRegistry] = None) -> int:
    """Delete one farmer, then its stored images. Returns the number of images removed."""

    farmers_repository.delete_farmer_document(farmer_id)
    removed = farmers_repository.delete_farmer_images(farmer_id)
    _refresh(registry)
    return removed


def delete_farmers(farmer_ids: Sequence[str], registry: Optional[FarmerRegistry] = None) -> BulkDeleteResult:
    """Delete each id independently; ids the store rejects are reported in ``failed``."""

    result = BulkDeleteResult()
    try:
        for farmer_id in dict.fromkeys(farmer_ids):
            try:
                farmers_repository.delete_farmer_document(farmer_id)
            except farmers_repository.FarmerNotFoundError:
                logging.warning(f"Bulk delete skipped unknown farmer '{farmer_id}'")
                result.failed.append(farmer_id)
                continue
            except farmers_repository.StoreNotConfiguredError:
                raise
            except Exception as exc:
                logging.error(f"Bulk delete failed for farmer '{farmer_id}': {exc}")
                result.failed.append(farmer_id)
                continue
            result.deleted.append(farmer_id)
            result.images_removed += farmers_repository.delete_farmer_images(farmer_id)
    finally:
        if result.deleted:
            _refresh(registry)
    return result


def find_duplicates(records: Iterable[FarmerRecord], name: str = "", phone: str = "") -> list[FarmerRecord]:
    """Records sharing the trimmed name or the phone digits of a new registration."""

    name_key = (name or "").strip()
    digits = phone_digits(phone)
    if not name_key and not digits:
        return []

    duplicates = []
    for record in records:
        if name_key and record.name.strip() == name_key:
            duplicates.append(record)
        elif digits and phone_digits(record.phone) == digits:
            duplicates.append(record)
    return duplicates


def _refresh(registry: Optional[FarmerRegistry]) -> None:
    try:
        (registry or get_registry()).refresh()
    except RegistryLoadError as exc:
        logging.warning(f"Registry refresh after write failed; serving previous snapshot: {exc}")

"""Data access helpers for farmer documents and their stored images."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from ..config import settings
from ..db.supabase import farmers_table, get_supabase_client, images_bucket

FETCH_BATCH_SIZE = 1000


class StoreNotConfiguredError(RuntimeError):
    """Raised when the document store has no credentials configured."""


class FarmerNotFoundError(LookupError):
    def __init__(self, farmer_id: str) -> None:
        super().__init__(f"Farmer not found: {farmer_id}")
        self.farmer_id = farmer_id


def _client():
    client = get_supabase_client()
    if client is None:
        raise StoreNotConfiguredError(
            "Supabase not configured. Set FARM_SUPABASE_URL and FARM_SUPABASE_KEY environment variables."
        )
    return client


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def fetch_farmer_documents() -> list[dict[str, Any]]:
    """Fetch every farmer document, newest first."""

    table = farmers_table(_client())
    documents: list[dict[str, Any]] = []
    start = 0
    while True:
        response = (
            table.select("*")
            .order("createdAt", desc=True)
            .range(start, start + FETCH_BATCH_SIZE - 1)
            .execute()
        )
        batch = response.data or []
        documents.extend(batch)
        if len(batch) < FETCH_BATCH_SIZE:
            break
        start += FETCH_BATCH_SIZE
    logging.info(f"Fetched {len(documents)} farmer documents from '{settings.farmers_table}'")
    return documents


def get_farmer_document(farmer_id: str) -> dict[str, Any]:
    response = (
        farmers_table(_client()).select("*").eq("id", farmer_id).limit(1).execute()
    )
    rows = response.data or []
    if not rows:
        raise FarmerNotFoundError(farmer_id)
    return rows[0]


def insert_farmer_document(document: dict[str, Any]) -> dict[str, Any]:
    timestamp = _now()
    payload = {**document, "createdAt": timestamp, "updatedAt": timestamp}
    payload.pop("id", None)
    response = farmers_table(_client()).insert(payload).execute()
    rows = response.data or []
    return rows[0] if rows else payload


def update_farmer_document(farmer_id: str, document: dict[str, Any]) -> dict[str, Any]:
    payload = {key: value for key, value in document.items() if key not in ("id", "createdAt")}
    payload["updatedAt"] = _now()
    response = (
        farmers_table(_client()).update(payload).eq("id", farmer_id).execute()
    )
    rows = response.data or []
    if not rows:
        raise FarmerNotFoundError(farmer_id)
    return rows[0]


def delete_farmer_document(farmer_id: str) -> None:
    response = farmers_table(_client()).delete().eq("id", farmer_id).execute()
    if not (response.data or []):
        raise FarmerNotFoundError(farmer_id)


def delete_farmer_images(farmer_id: str) -> int:
    """Remove stored images under '<farmer id>/'; failures are logged, not raised."""

    client: Optional[Any] = get_supabase_client()
    if client is None:
        return 0
    bucket = images_bucket(client)
    try:
        entries = bucket.list(farmer_id) or []
        paths = [f"{farmer_id}/{entry['name']}" for entry in entries if entry.get("name")]
        if paths:
            bucket.remove(paths)
        return len(paths)
    except Exception as exc:
        logging.warning(f"Failed to delete images for farmer '{farmer_id}': {exc}")
        return 0


def check_store() -> dict[str, Any]:
    """Report store configuration and reachability for health checks."""

    client = get_supabase_client()
    if client is None:
        return {
            "configured": False,
            "connected": False,
            "message": "Supabase not configured. Set FARM_SUPABASE_URL and FARM_SUPABASE_KEY environment variables.",
        }
    try:
        response = farmers_table(client).select("id", count="exact").limit(1).execute()
        return {
            "configured": True,
            "connected": True,
            "farmers_count": response.count or 0,
            "message": "Database connected.",
        }
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }

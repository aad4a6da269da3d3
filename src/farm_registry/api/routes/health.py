"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.farmers_repository import check_store
from ...services.registry import get_registry

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check store connection and whether a registry snapshot is loaded."""
    report = check_store()
    report["registry_loaded"] = get_registry().loaded
    return report

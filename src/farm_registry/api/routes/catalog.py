"""Code tables and region lists for client selects."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...models.catalog import catalog_payload

router = APIRouter(tags=["catalog"])


@router.get("/catalog", status_code=status.HTTP_200_OK)
def get_catalog() -> dict:
    return catalog_payload()

"""Supabase client plus handles for the farmers table and image bucket."""

import logging
from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from ..config import settings


@lru_cache()
def get_supabase_client() -> Client | None:
    """Get the cached Supabase client, or None when credentials are missing.

    Creating the client does not contact the server; the first query does.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logging.warning("Supabase credentials not configured (missing FARM_SUPABASE_URL or FARM_SUPABASE_KEY)")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logging.error(f"Failed to create Supabase client for {settings.supabase_url}: {e}")
        return None


def farmers_table(client: Client) -> Any:
    return client.table(settings.farmers_table)


def images_bucket(client: Client) -> Any:
    """Storage bucket whose objects live under '<farmer id>/'."""
    return client.storage.from_(settings.images_bucket)

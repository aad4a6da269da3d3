"""Database clients and utilities."""

from .supabase import farmers_table, get_supabase_client, images_bucket

__all__ = ["farmers_table", "get_supabase_client", "images_bucket"]

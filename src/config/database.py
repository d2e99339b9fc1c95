"""
Database client singletons.

The style assistant only reads the catalog, so a single async Supabase
client is created on first use and shared by every request.
"""

import asyncio
from typing import Optional

from supabase import AsyncClient, acreate_client

from config.settings import get_settings


class SupabaseClientError(Exception):
    """Raised when Supabase client cannot be created."""
    pass


_client: Optional[AsyncClient] = None
_client_lock = asyncio.Lock()


async def get_supabase_client() -> AsyncClient:
    """
    Get the singleton async Supabase client instance.

    Returns:
        AsyncClient: The Supabase client instance

    Raises:
        SupabaseClientError: If credentials are missing or the client cannot be created
    """
    global _client
    if _client is not None:
        return _client

    async with _client_lock:
        if _client is None:
            settings = get_settings()
            if not settings.supabase_url or not settings.supabase_service_key:
                raise SupabaseClientError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")
            try:
                _client = await acreate_client(settings.supabase_url, settings.supabase_service_key)
            except Exception as e:
                raise SupabaseClientError(f"Failed to create Supabase client: {e}") from e
    return _client


async def get_supabase_client_optional() -> Optional[AsyncClient]:
    """
    Get the Supabase client, returning None if it cannot be created.

    Useful for graceful degradation when Supabase is not configured.
    """
    try:
        return await get_supabase_client()
    except SupabaseClientError:
        return None

"""Supabase client singleton (service role, used for tables, storage and auth admin)"""
from typing import Optional

from supabase import Client, ClientOptions, create_client  # type: ignore

from cim import config

_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton"""
    global _supabase_client

    if _supabase_client is None:
        if not config.SUPABASE_URL or not config.SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        options = ClientOptions(
            postgrest_client_timeout=config.SUPABASE_TIMEOUT_SECONDS,
            storage_client_timeout=int(config.SUPABASE_TIMEOUT_SECONDS),
        )
        _supabase_client = create_client(
            config.SUPABASE_URL,
            config.SUPABASE_SERVICE_ROLE_KEY,
            options=options,
        )

    return _supabase_client


def reset_supabase_client():
    """Drop the cached client so the next call builds a new one"""
    global _supabase_client
    _supabase_client = None

"""Database access (Supabase)."""

from tavvy_pros.db.client import get_service_client

__all__ = ["get_service_client"]

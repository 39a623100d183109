"""
Tavvy Pros - Supabase Client.

Process-wide service client, created on first use. Modules that talk to the
database take a client as an argument; only the composition root (web app,
CLI) calls this.
"""

from supabase import Client, create_client

from tavvy_pros.config import settings

# Singleton client instance
_service_client: Client | None = None


def get_service_client() -> Client:
    """
    Get the service-role Supabase client.

    Bypasses row level security; callers scope every query by user_id.
    """
    global _service_client

    if _service_client is None:
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client

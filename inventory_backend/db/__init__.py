"""
Database access for the inventory backend.

All table access goes through a supabase Client that the caller creates
and passes in. There is no module-level client.

DO NOT define table schemas, migrations, or RLS policies here.
"""

from .client import create_supabase_client

__all__ = ["create_supabase_client"]

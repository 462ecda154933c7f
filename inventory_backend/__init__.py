"""
Inventory Backend.

Data-access layer for the inventory / employee-management app. All durable
state lives in Supabase; this package only translates domain calls into
PostgREST queries.
"""

__version__ = "0.1.0"

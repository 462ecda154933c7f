"""
Table names and fixed setting keys used by the data-access layer.

Table names must match the Supabase schema exactly.
"""

EMPLOYEES_TABLE = "employees"
ITEMS_TABLE = "items"
HISTORY_TABLE = "history"
TASKS_TABLE = "tasks"
SETTINGS_TABLE = "settings"

# settings.setting_key values
SETTING_KEYS = {
    'LOW_STOCK_THRESHOLD': 'LOW_STOCK_THRESHOLD',
}

TASK_ID_PREFIX = "TASK"

# Fixed login failure message; never reveals whether email or PIN was wrong
LOGIN_FAILED = "LOGIN_FAILED"

DELETE_SUCCESS = {"success": True}

# BackendError.code for network failures (no PostgREST error code available)
TRANSPORT_ERROR = "TRANSPORT_ERROR"

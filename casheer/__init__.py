"""Budget planning models and validation, JSON:API message types, and SQLite storage helpers."""

__version__ = "0.1.0"

__all__ = [
    "api_common",
    "api_debts",
    "api_entries",
    "api_expenses",
    "errors",
    "models",
    "store",
    "validation",
]
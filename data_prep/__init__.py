"""
Data preparation — record lookups, CSV loaders, input validation.
"""

from .lookup import (
    InMemoryLookup,
    RecordLookup,
    RecordNotFoundError,
    fetch_optional,
    fetch_required,
)
from .loader import load_businesses_csv, load_strategies_csv
from .validators import ValidationResult, validate_inputs

__all__ = [
    "InMemoryLookup",
    "RecordLookup",
    "RecordNotFoundError",
    "fetch_optional",
    "fetch_required",
    "load_businesses_csv",
    "load_strategies_csv",
    "ValidationResult",
    "validate_inputs",
]

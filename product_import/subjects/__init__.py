"""Subjects the observers of a product import work with."""

from .bunch_subject import BunchSubject
from .callback_mappings import (
    DEFAULT_CALLBACK_MAPPINGS,
    DEFAULT_FRONTEND_INPUT_CALLBACK_MAPPINGS,
    resolve_callback_mappings,
)
from .date_format import to_strptime_format
from .row_context import RowContext

__all__ = [
    "BunchSubject",
    "DEFAULT_CALLBACK_MAPPINGS",
    "DEFAULT_FRONTEND_INPUT_CALLBACK_MAPPINGS",
    "resolve_callback_mappings",
    "to_strptime_format",
    "RowContext",
]

"""Attribute callbacks of the product import."""

from .base_callback import BaseCallback, MappingCallback
from .registry import BUILTIN_CALLBACKS, CallbackRegistry

__all__ = ["BaseCallback", "MappingCallback", "BUILTIN_CALLBACKS", "CallbackRegistry"]

"""Resolution of callback ids to callback classes."""

from __future__ import annotations

import importlib
import logging
from typing import Dict, Iterable, List, Optional, Type

from product_import.core.exceptions import CallbackNotFoundException

from .base_callback import BaseCallback
from .bundle_callbacks import BundlePriceViewCallback, BundleShipmentTypeCallback, BundleTypeCallback
from .product_callbacks import (
    BooleanCallback,
    MultiselectCallback,
    SelectCallback,
    TaxClassCallback,
    VisibilityCallback,
)

logger = logging.getLogger(__name__)

BUILTIN_CALLBACKS: Dict[str, Type[BaseCallback]] = {
    "visibility": VisibilityCallback,
    "tax_class": TaxClassCallback,
    "select": SelectCallback,
    "multiselect": MultiselectCallback,
    "boolean": BooleanCallback,
    "bundle_type": BundleTypeCallback,
    "bundle_price_view": BundlePriceViewCallback,
    "bundle_shipment_type": BundleShipmentTypeCallback,
}


class CallbackRegistry:
    """
    Maps callback ids to callback classes.

    Ids that are not registered are imported as dotted paths, either
    ``package.module:ClassName`` or ``package.module.ClassName``.
    """

    def __init__(self, callbacks: Optional[Dict[str, Type[BaseCallback]]] = None) -> None:
        self._callbacks: Dict[str, Type[BaseCallback]] = dict(BUILTIN_CALLBACKS if callbacks is None else callbacks)

    def register(self, callback_id: str, callback_class: Type[BaseCallback]) -> None:
        if callback_id in self._callbacks:
            logger.warning("Callback '%s' already registered; replacing it with %s", callback_id, callback_class)
        self._callbacks[callback_id] = callback_class

    def ids(self) -> List[str]:
        return list(self._callbacks)

    def resolve(self, callback_id: str) -> Type[BaseCallback]:
        callback_class = self._callbacks.get(callback_id)
        if callback_class is None:
            callback_class = self._import(callback_id)
            self._callbacks[callback_id] = callback_class
        return callback_class

    def create_all(self, callback_ids: Iterable[str], subject) -> List[BaseCallback]:
        return [self.resolve(callback_id)(subject) for callback_id in callback_ids]

    def _import(self, callback_id: str) -> Type[BaseCallback]:
        if ":" in callback_id:
            module_name, _, class_name = callback_id.partition(":")
        else:
            module_name, _, class_name = callback_id.rpartition(".")
        if not module_name or not class_name:
            raise CallbackNotFoundException(callback_id, "neither registered nor a dotted path")

        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise CallbackNotFoundException(callback_id, str(exc)) from exc

        callback_class = getattr(module, class_name, None)
        if not isinstance(callback_class, type) or not issubclass(callback_class, BaseCallback):
            raise CallbackNotFoundException(callback_id, f"{class_name} is not a BaseCallback subclass")
        return callback_class

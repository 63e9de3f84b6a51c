"""
Subject handling the business logic to persist the products of one bunch.
"""
from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple, Union

from product_import.callbacks.base_callback import BaseCallback
from product_import.callbacks.registry import CallbackRegistry
from product_import.config.config_schema import ImportConfiguration
from product_import.core.exceptions import (
    DateParseException,
    ExceptionFactory,
    InvalidNumberException,
    InvalidVisibilityException,
)
from product_import.core.interfaces import Record
from product_import.models.enums import BackendType, DeleteStrategy, VisibilityKey
from product_import.services.interfaces.product_processor_interface import IProductProcessor

from .callback_mappings import CallbackMappingsView, resolve_callback_mappings
from .date_format import to_strptime_format
from .row_context import RowContext

logger = logging.getLogger(__name__)

# format datetime values are persisted with
TARGET_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# largest decimal exponent a value may have per cast type
MAX_EXPONENTS = {BackendType.FLOAT: 308, BackendType.INT: 18}
INT_MIN, INT_MAX = -2 ** 63, 2 ** 63 - 1


class BunchSubject:
    """
    Facade the observers of a bunch work with.

    Resolves the callbacks of the attributes once per bunch, casts raw CSV
    values by backend type, keeps track of the category IDs of the actual
    product and forwards all load, persist and delete operations to the
    product processor.
    """

    # backend type => (persist method, load method)
    backend_types: Mapping[BackendType, Tuple[str, str]] = MappingProxyType({
        BackendType.DATETIME: ("persist_product_datetime_attribute", "load_product_datetime_attribute"),
        BackendType.DECIMAL: ("persist_product_decimal_attribute", "load_product_decimal_attribute"),
        BackendType.INT: ("persist_product_int_attribute", "load_product_int_attribute"),
        BackendType.TEXT: ("persist_product_text_attribute", "load_product_text_attribute"),
        BackendType.VARCHAR: ("persist_product_varchar_attribute", "load_product_varchar_attribute"),
    })

    # table column => (CSV column, cast type)
    header_stock_mappings: Mapping[str, Tuple[str, BackendType]] = MappingProxyType({
        "qty": ("qty", BackendType.FLOAT),
        "min_qty": ("out_of_stock_qty", BackendType.FLOAT),
        "use_config_min_qty": ("use_config_min_qty", BackendType.INT),
        "is_qty_decimal": ("is_qty_decimal", BackendType.INT),
        "backorders": ("allow_backorders", BackendType.INT),
        "use_config_backorders": ("use_config_backorders", BackendType.INT),
        "min_sale_qty": ("min_cart_qty", BackendType.FLOAT),
        "use_config_min_sale_qty": ("use_config_min_sale_qty", BackendType.INT),
        "max_sale_qty": ("max_cart_qty", BackendType.FLOAT),
        "use_config_max_sale_qty": ("use_config_max_sale_qty", BackendType.INT),
        "is_in_stock": ("is_in_stock", BackendType.INT),
        "notify_stock_qty": ("notify_on_stock_below", BackendType.FLOAT),
        "use_config_notify_stock_qty": ("use_config_notify_stock_qty", BackendType.INT),
        "manage_stock": ("manage_stock", BackendType.INT),
        "use_config_manage_stock": ("use_config_manage_stock", BackendType.INT),
        "use_config_qty_increments": ("use_config_qty_increments", BackendType.INT),
        "qty_increments": ("qty_increments", BackendType.FLOAT),
        "use_config_enable_qty_inc": ("use_config_enable_qty_inc", BackendType.INT),
        "enable_qty_increments": ("enable_qty_increments", BackendType.INT),
        "is_decimal_divided": ("is_decimal_divided", BackendType.INT),
    })

    available_visibilities: Mapping[str, VisibilityKey] = MappingProxyType({
        "Not Visible Individually": VisibilityKey.VISIBILITY_NOT_VISIBLE,
        "Catalog": VisibilityKey.VISIBILITY_IN_CATALOG,
        "Search": VisibilityKey.VISIBILITY_IN_SEARCH,
        "Catalog, Search": VisibilityKey.VISIBILITY_BOTH,
    })

    def __init__(
        self,
        processor: IProductProcessor,
        configuration: ImportConfiguration,
        context: Optional[RowContext] = None,
        callback_registry: Optional[CallbackRegistry] = None,
    ):
        self._processor = processor
        self._configuration = configuration
        self._context = context or RowContext()
        self._callback_registry = callback_registry or CallbackRegistry()

        self._callback_mappings: CallbackMappingsView = MappingProxyType({})
        self._callbacks: Dict[str, List[BaseCallback]] = {}
        self._attribute_set: Dict[str, Any] = {}
        self._product_category_ids: Dict[Any, Set[int]] = {}

    def set_up(self) -> None:
        """
        Initializes the callback mappings for exactly one bunch.

        Has to be invoked before the first row is processed. Every call
        resolves the mappings from scratch, so invoking it again with the
        same configuration and attributes gives the same mappings.
        """
        self._callback_mappings = resolve_callback_mappings(
            self.get_eav_attribute_by_is_user_defined(),
            self._configuration.get_callbacks(),
        )
        self._callbacks = {}
        logger.debug("Resolved callback mappings for %d attributes", len(self._callback_mappings))

    # Row context and configuration

    @property
    def context(self) -> RowContext:
        return self._context

    def get_processor(self) -> IProductProcessor:
        return self._processor

    def get_configuration(self) -> ImportConfiguration:
        return self._configuration

    def get_filename(self) -> Optional[str]:
        return self._context.filename

    def get_line_number(self) -> Optional[int]:
        return self._context.line_number

    def get_last_entity_id(self) -> Optional[int]:
        return self._context.last_entity_id

    def get_row_store_id(self) -> int:
        return self._context.store_id

    def get_source_date_format(self) -> str:
        return self._configuration.get_source_date_format()

    def get_multiple_value_delimiter(self) -> str:
        return self._configuration.multiple_value_delimiter

    # Callbacks

    def get_callback_mappings(self) -> CallbackMappingsView:
        return self._callback_mappings

    def get_callbacks_by_type(self, attribute_code: str) -> List[BaseCallback]:
        """Returns the callback instances of the attribute, in execution order"""
        if attribute_code not in self._callbacks:
            self._callbacks[attribute_code] = self._callback_registry.create_all(
                self._callback_mappings.get(attribute_code, ()), self
            )
        return list(self._callbacks[attribute_code])

    def handle_callbacks(self, attribute_code: str, attribute_value: Any) -> Any:
        """Pipes the value through the callbacks of the attribute"""
        for callback in self.get_callbacks_by_type(attribute_code):
            attribute_value = callback(attribute_code, attribute_value)
        return attribute_value

    # Attribute set

    def set_attribute_set(self, attribute_set: Dict[str, Any]) -> None:
        self._attribute_set = attribute_set

    def get_attribute_set(self) -> Dict[str, Any]:
        return self._attribute_set

    # Mappings

    def get_header_stock_mappings(self) -> Mapping[str, Tuple[str, BackendType]]:
        return self.header_stock_mappings

    def get_backend_types(self) -> Mapping[BackendType, Tuple[str, str]]:
        return self.backend_types

    def cast_value_by_backend_type(self, backend_type: Union[BackendType, str], value: Any) -> Any:
        """
        Casts the passed value based on the backend type information.

        Args:
            backend_type: The backend type to cast to
            value: The raw value from the CSV file

        Returns:
            'YYYY-MM-DD HH:MM:SS' for datetime, a float or an int for the numeric
            types, the untouched value for all other backend types

        Raises:
            DateParseException: The value doesn't match the source date format
            InvalidNumberException: Non numeric value and strict numeric casts
            ValidationException: Unknown backend type
        """
        try:
            backend_type = BackendType(backend_type)
        except ValueError:
            raise ExceptionFactory.unknown_backend_type(backend_type)

        if backend_type is BackendType.DATETIME:
            return self._cast_datetime(value)
        if backend_type is BackendType.FLOAT:
            return self._cast_float(value)
        if backend_type is BackendType.INT:
            return self._cast_int(value)

        # we don't need to cast strings
        return value

    def get_visibility_id_by_value(self, visibility: str) -> VisibilityKey:
        try:
            return self.available_visibilities[visibility]
        except (KeyError, TypeError):
            raise InvalidVisibilityException(visibility, self.get_filename(), self.get_line_number())

    # Category IDs

    def add_product_category_id(self, category_id: int) -> None:
        """Adds the category ID to the categories of the actual product"""
        self._product_category_ids.setdefault(self.get_last_entity_id(), set()).add(category_id)

    def get_product_category_ids(self) -> Set[int]:
        """Returns the category IDs of the actual product"""
        return set(self._product_category_ids.get(self.get_last_entity_id(), ()))

    # Lookups

    def get_eav_attribute_option_value_by_option_value_and_store_id(self, value: Any, store_id: int) -> Optional[Record]:
        return self._processor.get_eav_attribute_option_value_by_option_value_and_store_id(value, store_id)

    def get_eav_attribute_by_is_user_defined(self, is_user_defined: int = 1) -> List[Record]:
        return self._processor.get_eav_attribute_by_is_user_defined(is_user_defined)

    def get_url_rewrites_by_entity_type_and_entity_id(self, entity_type: str, entity_id: int) -> List[Record]:
        return self._processor.get_url_rewrites_by_entity_type_and_entity_id(entity_type, entity_id)

    def get_tax_class_by_tax_class_name(self, tax_class_name: str) -> Optional[Record]:
        return self._processor.get_tax_class_by_tax_class_name(tax_class_name)

    # Loads

    def load_product(self, sku: str) -> Optional[Record]:
        return self._processor.load_product(sku)

    def load_product_website(self, product_id: int, website_id: int) -> Optional[Record]:
        return self._processor.load_product_website(product_id, website_id)

    def load_category_product(self, category_id: int, product_id: int) -> Optional[Record]:
        return self._processor.load_category_product(category_id, product_id)

    def load_stock_status(self, product_id: int, website_id: int, stock_id: int) -> Optional[Record]:
        return self._processor.load_stock_status(product_id, website_id, stock_id)

    def load_stock_item(self, product_id: int, website_id: int, stock_id: int) -> Optional[Record]:
        return self._processor.load_stock_item(product_id, website_id, stock_id)

    def load_product_datetime_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._processor.load_product_datetime_attribute(entity_id, attribute_id, store_id)

    def load_product_decimal_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._processor.load_product_decimal_attribute(entity_id, attribute_id, store_id)

    def load_product_int_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._processor.load_product_int_attribute(entity_id, attribute_id, store_id)

    def load_product_text_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._processor.load_product_text_attribute(entity_id, attribute_id, store_id)

    def load_product_varchar_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._processor.load_product_varchar_attribute(entity_id, attribute_id, store_id)

    def load_url_rewrite_product_category(self, product_id: int, category_id: int) -> Optional[Record]:
        return self._processor.load_url_rewrite_product_category(product_id, category_id)

    # Persists

    def persist_product(self, product: Record) -> int:
        """Persists the product data and returns the entity ID"""
        return self._processor.persist_product(product)

    def persist_product_varchar_attribute(self, attribute: Record) -> None:
        self._processor.persist_product_varchar_attribute(attribute)

    def persist_product_int_attribute(self, attribute: Record) -> None:
        self._processor.persist_product_int_attribute(attribute)

    def persist_product_decimal_attribute(self, attribute: Record) -> None:
        self._processor.persist_product_decimal_attribute(attribute)

    def persist_product_datetime_attribute(self, attribute: Record) -> None:
        self._processor.persist_product_datetime_attribute(attribute)

    def persist_product_text_attribute(self, attribute: Record) -> None:
        self._processor.persist_product_text_attribute(attribute)

    def persist_product_website(self, product_website: Record) -> None:
        self._processor.persist_product_website(product_website)

    def persist_category_product(self, category_product: Record) -> None:
        self._processor.persist_category_product(category_product)

    def persist_stock_item(self, stock_item: Record) -> None:
        self._processor.persist_stock_item(stock_item)

    def persist_stock_status(self, stock_status: Record) -> None:
        self._processor.persist_stock_status(stock_status)

    def persist_url_rewrite(self, row: Record) -> int:
        """Persists the URL rewrite and returns its ID"""
        return self._processor.persist_url_rewrite(row)

    def persist_url_rewrite_product_category(self, row: Record) -> None:
        self._processor.persist_url_rewrite_product_category(row)

    # Deletes

    def delete_product(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self._processor.delete_product(row, strategy)

    def delete_url_rewrite(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self._processor.delete_url_rewrite(row, strategy)

    def delete_stock_item(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self._processor.delete_stock_item(row, strategy)

    def delete_stock_status(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self._processor.delete_stock_status(row, strategy)

    def delete_product_website(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self._processor.delete_product_website(row, strategy)

    def delete_category_product(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self._processor.delete_category_product(row, strategy)

    # Casting helpers

    def _cast_datetime(self, value: Any) -> str:
        source_date_format = self.get_source_date_format()
        if not isinstance(value, str):
            raise DateParseException(value, source_date_format, self.get_filename(), self.get_line_number())

        try:
            parsed = datetime.strptime(value, to_strptime_format(source_date_format))
        except ValueError:
            raise DateParseException(value, source_date_format, self.get_filename(), self.get_line_number())
        return parsed.strftime(TARGET_DATE_FORMAT)

    def _cast_float(self, value: Any) -> float:
        if isinstance(value, float) and math.isfinite(value):
            return value
        if isinstance(value, int) and not isinstance(value, bool) and INT_MIN <= value <= INT_MAX:
            return float(value)

        number = float(self._parse_number(value, BackendType.FLOAT))
        if not math.isfinite(number):
            return float(self._out_of_range(value, BackendType.FLOAT))
        return number

    def _cast_int(self, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            number = value
        else:
            parsed = self._parse_number(value, BackendType.INT)
            # |value| < 1, huge negative exponents are never expanded
            number = 0 if parsed.adjusted() < 0 else int(parsed)

        if not INT_MIN <= number <= INT_MAX:
            return int(self._out_of_range(value, BackendType.INT))
        return number

    def _parse_number(self, value: Any, backend_type: BackendType) -> Decimal:
        """
        Strict casts accept complete numbers only ('12.5', ' -3 ', '1e3'),
        lenient ones take the leading number ('12.5kg' => 12.5) and fall back
        to 0. Exponents beyond the range of the cast type are never expanded.
        """
        text = "" if value is None else str(value).strip()
        strict = self._configuration.strict_numeric_cast
        match = NUMBER.fullmatch(text) if strict else NUMBER.match(text)
        if match is None:
            return self._out_of_range(value, backend_type)

        number = Decimal(match.group())
        if not number:
            return Decimal(0)
        if number.adjusted() > MAX_EXPONENTS[backend_type]:
            return self._out_of_range(value, backend_type)
        return number

    def _out_of_range(self, value: Any, backend_type: BackendType) -> Decimal:
        """Raises for strict casts, 0 for lenient ones"""
        if self._configuration.strict_numeric_cast:
            raise InvalidNumberException(value, backend_type.value, self.get_filename(), self.get_line_number())
        return Decimal(0)

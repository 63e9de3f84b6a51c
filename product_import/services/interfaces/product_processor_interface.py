"""
Interface for the Product Processor (DIP)

The subjects of the import only talk to the catalog through this
interface, which makes it the seam tests mock.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from product_import.core.interfaces import Record
from product_import.models.enums import DeleteStrategy


class IProductProcessor(ABC):
    """Load, persist and delete operations for the product entities"""

    # Lookups

    @abstractmethod
    def get_eav_attribute_option_value_by_option_value_and_store_id(self, value: Any, store_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def get_eav_attribute_by_is_user_defined(self, is_user_defined: int = 1) -> List[Record]:
        pass

    @abstractmethod
    def get_url_rewrites_by_entity_type_and_entity_id(self, entity_type: str, entity_id: int) -> List[Record]:
        pass

    @abstractmethod
    def get_tax_class_by_tax_class_name(self, tax_class_name: str) -> Optional[Record]:
        pass

    # Loads

    @abstractmethod
    def load_product(self, sku: str) -> Optional[Record]:
        pass

    @abstractmethod
    def load_product_website(self, product_id: int, website_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_category_product(self, category_id: int, product_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_stock_status(self, product_id: int, website_id: int, stock_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_stock_item(self, product_id: int, website_id: int, stock_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_product_datetime_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_product_decimal_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_product_int_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_product_text_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_product_varchar_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        pass

    @abstractmethod
    def load_url_rewrite_product_category(self, product_id: int, category_id: int) -> Optional[Record]:
        pass

    # Persists

    @abstractmethod
    def persist_product(self, product: Record) -> int:
        """Persists the product and returns its entity ID"""
        pass

    @abstractmethod
    def persist_product_varchar_attribute(self, attribute: Record) -> None:
        pass

    @abstractmethod
    def persist_product_int_attribute(self, attribute: Record) -> None:
        pass

    @abstractmethod
    def persist_product_decimal_attribute(self, attribute: Record) -> None:
        pass

    @abstractmethod
    def persist_product_datetime_attribute(self, attribute: Record) -> None:
        pass

    @abstractmethod
    def persist_product_text_attribute(self, attribute: Record) -> None:
        pass

    @abstractmethod
    def persist_product_website(self, product_website: Record) -> None:
        pass

    @abstractmethod
    def persist_category_product(self, category_product: Record) -> None:
        pass

    @abstractmethod
    def persist_stock_item(self, stock_item: Record) -> None:
        pass

    @abstractmethod
    def persist_stock_status(self, stock_status: Record) -> None:
        pass

    @abstractmethod
    def persist_url_rewrite(self, row: Record) -> int:
        """Persists the URL rewrite and returns its ID"""
        pass

    @abstractmethod
    def persist_url_rewrite_product_category(self, row: Record) -> None:
        pass

    # Deletes

    @abstractmethod
    def delete_product(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        pass

    @abstractmethod
    def delete_url_rewrite(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        pass

    @abstractmethod
    def delete_stock_item(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        pass

    @abstractmethod
    def delete_stock_status(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        pass

    @abstractmethod
    def delete_product_website(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        pass

    @abstractmethod
    def delete_category_product(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        pass

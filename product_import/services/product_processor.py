"""
Product Processor

Composes one repository per entity kind behind IProductProcessor.
Errors raised by the repositories are propagated unchanged.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from product_import.core.interfaces import Record
from product_import.models.enums import BackendType, DeleteStrategy
from product_import.repository.category_product_repository import CategoryProductRepository
from product_import.repository.eav_attribute_repository import (
    EavAttributeRepository, EavAttributeOptionValueRepository
)
from product_import.repository.interfaces.category_product_repository_interface import ICategoryProductRepository
from product_import.repository.interfaces.eav_attribute_repository_interface import (
    IEavAttributeRepository, IEavAttributeOptionValueRepository
)
from product_import.repository.interfaces.product_attribute_repository_interface import IProductAttributeRepository
from product_import.repository.interfaces.product_repository_interface import IProductRepository
from product_import.repository.interfaces.product_website_repository_interface import IProductWebsiteRepository
from product_import.repository.interfaces.stock_repository_interface import (
    IStockItemRepository, IStockStatusRepository
)
from product_import.repository.interfaces.tax_class_repository_interface import ITaxClassRepository
from product_import.repository.interfaces.url_rewrite_repository_interface import (
    IUrlRewriteRepository, IUrlRewriteProductCategoryRepository
)
from product_import.repository.product_attribute_repository import ATTRIBUTE_MODELS, ProductAttributeRepository
from product_import.repository.product_repository import ProductRepository
from product_import.repository.product_website_repository import ProductWebsiteRepository
from product_import.repository.stock_repository import StockItemRepository, StockStatusRepository
from product_import.repository.tax_class_repository import TaxClassRepository
from product_import.repository.url_rewrite_repository import (
    UrlRewriteRepository, UrlRewriteProductCategoryRepository
)
from product_import.services.interfaces.product_processor_interface import IProductProcessor

logger = logging.getLogger(__name__)


class ProductProcessor(IProductProcessor):
    """Entity processor for the product import"""

    def __init__(
        self,
        product_repository: IProductRepository,
        product_attribute_repositories: Dict[BackendType, IProductAttributeRepository],
        stock_item_repository: IStockItemRepository,
        stock_status_repository: IStockStatusRepository,
        product_website_repository: IProductWebsiteRepository,
        category_product_repository: ICategoryProductRepository,
        url_rewrite_repository: IUrlRewriteRepository,
        url_rewrite_product_category_repository: IUrlRewriteProductCategoryRepository,
        eav_attribute_repository: IEavAttributeRepository,
        eav_attribute_option_value_repository: IEavAttributeOptionValueRepository,
        tax_class_repository: ITaxClassRepository,
    ):
        self.product_repository = product_repository
        self.product_attribute_repositories = dict(product_attribute_repositories)
        self.stock_item_repository = stock_item_repository
        self.stock_status_repository = stock_status_repository
        self.product_website_repository = product_website_repository
        self.category_product_repository = category_product_repository
        self.url_rewrite_repository = url_rewrite_repository
        self.url_rewrite_product_category_repository = url_rewrite_product_category_repository
        self.eav_attribute_repository = eav_attribute_repository
        self.eav_attribute_option_value_repository = eav_attribute_option_value_repository
        self.tax_class_repository = tax_class_repository

    @classmethod
    def from_session(cls, session: Session) -> "ProductProcessor":
        """Creates the processor with the SQLAlchemy repositories bound to the session"""
        return cls(
            product_repository=ProductRepository(session),
            product_attribute_repositories={
                backend_type: ProductAttributeRepository(session, backend_type)
                for backend_type in ATTRIBUTE_MODELS
            },
            stock_item_repository=StockItemRepository(session),
            stock_status_repository=StockStatusRepository(session),
            product_website_repository=ProductWebsiteRepository(session),
            category_product_repository=CategoryProductRepository(session),
            url_rewrite_repository=UrlRewriteRepository(session),
            url_rewrite_product_category_repository=UrlRewriteProductCategoryRepository(session),
            eav_attribute_repository=EavAttributeRepository(session),
            eav_attribute_option_value_repository=EavAttributeOptionValueRepository(session),
            tax_class_repository=TaxClassRepository(session),
        )

    def _attribute_repository(self, backend_type: BackendType) -> IProductAttributeRepository:
        return self.product_attribute_repositories[backend_type]

    # Lookups

    def get_eav_attribute_option_value_by_option_value_and_store_id(self, value: Any, store_id: int) -> Optional[Record]:
        return self.eav_attribute_option_value_repository.load_by_option_value_and_store_id(value, store_id)

    def get_eav_attribute_by_is_user_defined(self, is_user_defined: int = 1) -> List[Record]:
        return self.eav_attribute_repository.find_all_by_is_user_defined(is_user_defined)

    def get_url_rewrites_by_entity_type_and_entity_id(self, entity_type: str, entity_id: int) -> List[Record]:
        return self.url_rewrite_repository.find_all_by_entity_type_and_entity_id(entity_type, entity_id)

    def get_tax_class_by_tax_class_name(self, tax_class_name: str) -> Optional[Record]:
        return self.tax_class_repository.load_by_class_name(tax_class_name)

    # Loads

    def load_product(self, sku: str) -> Optional[Record]:
        return self.product_repository.load_by_sku(sku)

    def load_product_website(self, product_id: int, website_id: int) -> Optional[Record]:
        return self.product_website_repository.load_by_product_id_and_website_id(product_id, website_id)

    def load_category_product(self, category_id: int, product_id: int) -> Optional[Record]:
        return self.category_product_repository.load_by_category_id_and_product_id(category_id, product_id)

    def load_stock_status(self, product_id: int, website_id: int, stock_id: int) -> Optional[Record]:
        return self.stock_status_repository.load_by_product_id_and_website_id_and_stock_id(
            product_id, website_id, stock_id
        )

    def load_stock_item(self, product_id: int, website_id: int, stock_id: int) -> Optional[Record]:
        return self.stock_item_repository.load_by_product_id_and_website_id_and_stock_id(
            product_id, website_id, stock_id
        )

    def load_product_datetime_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._attribute_repository(BackendType.DATETIME).load_by_entity_id_and_attribute_id_and_store_id(
            entity_id, attribute_id, store_id
        )

    def load_product_decimal_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._attribute_repository(BackendType.DECIMAL).load_by_entity_id_and_attribute_id_and_store_id(
            entity_id, attribute_id, store_id
        )

    def load_product_int_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._attribute_repository(BackendType.INT).load_by_entity_id_and_attribute_id_and_store_id(
            entity_id, attribute_id, store_id
        )

    def load_product_text_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._attribute_repository(BackendType.TEXT).load_by_entity_id_and_attribute_id_and_store_id(
            entity_id, attribute_id, store_id
        )

    def load_product_varchar_attribute(self, entity_id: int, attribute_id: int, store_id: int) -> Optional[Record]:
        return self._attribute_repository(BackendType.VARCHAR).load_by_entity_id_and_attribute_id_and_store_id(
            entity_id, attribute_id, store_id
        )

    def load_url_rewrite_product_category(self, product_id: int, category_id: int) -> Optional[Record]:
        return self.url_rewrite_product_category_repository.load_by_product_id_and_category_id(
            product_id, category_id
        )

    # Persists

    def persist_product(self, product: Record) -> int:
        entity_id = self.product_repository.persist(product)
        logger.debug("Persisted product %s with entity ID %s", product.get("sku"), entity_id)
        return entity_id

    def persist_product_varchar_attribute(self, attribute: Record) -> None:
        self._attribute_repository(BackendType.VARCHAR).persist(attribute)

    def persist_product_int_attribute(self, attribute: Record) -> None:
        self._attribute_repository(BackendType.INT).persist(attribute)

    def persist_product_decimal_attribute(self, attribute: Record) -> None:
        self._attribute_repository(BackendType.DECIMAL).persist(attribute)

    def persist_product_datetime_attribute(self, attribute: Record) -> None:
        self._attribute_repository(BackendType.DATETIME).persist(attribute)

    def persist_product_text_attribute(self, attribute: Record) -> None:
        self._attribute_repository(BackendType.TEXT).persist(attribute)

    def persist_product_website(self, product_website: Record) -> None:
        self.product_website_repository.persist(product_website)

    def persist_category_product(self, category_product: Record) -> None:
        self.category_product_repository.persist(category_product)

    def persist_stock_item(self, stock_item: Record) -> None:
        self.stock_item_repository.persist(stock_item)

    def persist_stock_status(self, stock_status: Record) -> None:
        self.stock_status_repository.persist(stock_status)

    def persist_url_rewrite(self, row: Record) -> int:
        return self.url_rewrite_repository.persist(row)

    def persist_url_rewrite_product_category(self, row: Record) -> None:
        self.url_rewrite_product_category_repository.persist(row)

    # Deletes

    def delete_product(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self.product_repository.delete(row, strategy)

    def delete_url_rewrite(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self.url_rewrite_repository.delete(row, strategy)

    def delete_stock_item(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self.stock_item_repository.delete(row, strategy)

    def delete_stock_status(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self.stock_status_repository.delete(row, strategy)

    def delete_product_website(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self.product_website_repository.delete(row, strategy)

    def delete_category_product(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        self.category_product_repository.delete(row, strategy)

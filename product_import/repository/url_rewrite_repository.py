"""
URL rewrite repositories
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.interfaces import Record
from product_import.models.enums import DeleteStrategy, MemberNames
from product_import.models.url_rewrite import UrlRewrite, UrlRewriteProductCategory
from product_import.repository.interfaces.url_rewrite_repository_interface import (
    IUrlRewriteRepository, IUrlRewriteProductCategoryRepository
)

# entity type of the rewrites created for products
PRODUCT_ENTITY_TYPE = "product"


class UrlRewriteRepository(BaseRepository, IUrlRewriteRepository):

    delete_keys = {
        None: [MemberNames.ENTITY_TYPE, MemberNames.ENTITY_ID],
        DeleteStrategy.BY_SKU: [],
        DeleteStrategy.BY_ENTITY_ID: [MemberNames.URL_REWRITE_ID],
    }

    def __init__(self, session: Session):
        super().__init__(session, UrlRewrite)

    def find_all_by_entity_type_and_entity_id(self, entity_type: str, entity_id: int) -> List[Record]:
        return self._load_all(entity_type=entity_type, entity_id=entity_id)

    def _product_scope(self) -> list:
        return [UrlRewrite.entity_type == PRODUCT_ENTITY_TYPE]

    def _product_id_column(self):
        return UrlRewrite.entity_id


class UrlRewriteProductCategoryRepository(BaseRepository, IUrlRewriteProductCategoryRepository):

    delete_keys = {
        None: [MemberNames.URL_REWRITE_ID],
        DeleteStrategy.BY_SKU: [],
    }

    def __init__(self, session: Session):
        super().__init__(session, UrlRewriteProductCategory)

    def load_by_product_id_and_category_id(self, product_id: int, category_id: int) -> Optional[Record]:
        return self._load_one(product_id=product_id, category_id=category_id)

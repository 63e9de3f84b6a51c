"""
Category Product Repository
"""
from typing import Optional

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.interfaces import Record
from product_import.models.category_product import CategoryProduct
from product_import.models.enums import DeleteStrategy, MemberNames
from product_import.repository.interfaces.category_product_repository_interface import ICategoryProductRepository


class CategoryProductRepository(BaseRepository, ICategoryProductRepository):

    delete_keys = {
        None: [MemberNames.PRODUCT_ID],
        DeleteStrategy.BY_SKU: [],
        DeleteStrategy.BY_ENTITY_ID: [MemberNames.ENTITY_ID],
    }

    def __init__(self, session: Session):
        super().__init__(session, CategoryProduct)

    def persist(self, record: Record):
        if record.get(MemberNames.ENTITY_ID) is None:
            existing = self.load_by_category_id_and_product_id(
                record.get(MemberNames.CATEGORY_ID), record.get(MemberNames.PRODUCT_ID)
            )
            if existing is not None:
                record = {**record, MemberNames.ENTITY_ID: existing[MemberNames.ENTITY_ID]}
        return super().persist(record)

    def load_by_category_id_and_product_id(self, category_id: int, product_id: int) -> Optional[Record]:
        return self._load_one(category_id=category_id, product_id=product_id)

"""
Product Repository
"""
from typing import Optional

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.interfaces import Record
from product_import.models.enums import DeleteStrategy, MemberNames
from product_import.models.product import Product
from product_import.repository.interfaces.product_repository_interface import IProductRepository


class ProductRepository(BaseRepository, IProductRepository):
    """Persists the rows of catalog_product_entity"""

    delete_keys = {
        None: [MemberNames.SKU],
        DeleteStrategy.BY_SKU: [MemberNames.SKU],
        DeleteStrategy.BY_ENTITY_ID: [MemberNames.ENTITY_ID],
    }

    def __init__(self, session: Session):
        super().__init__(session, Product)

    def persist(self, record: Record) -> int:
        if record.get(MemberNames.ENTITY_ID) is None and record.get(MemberNames.SKU):
            existing = self.load_by_sku(record[MemberNames.SKU])
            if existing is not None:
                record = {**record, MemberNames.ENTITY_ID: existing[MemberNames.ENTITY_ID]}
        return super().persist(record)

    def load_by_sku(self, sku: str) -> Optional[Record]:
        return self._load_one(sku=sku)

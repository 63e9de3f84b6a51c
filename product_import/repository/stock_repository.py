"""
Stock item and stock status repositories
"""
from typing import Optional

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.interfaces import Record
from product_import.models.enums import DeleteStrategy, MemberNames
from product_import.models.stock import StockItem, StockStatus
from product_import.repository.interfaces.stock_repository_interface import (
    IStockItemRepository, IStockStatusRepository
)


class StockItemRepository(BaseRepository, IStockItemRepository):

    delete_keys = {
        None: [MemberNames.PRODUCT_ID],
        DeleteStrategy.BY_SKU: [],
        DeleteStrategy.BY_ENTITY_ID: [MemberNames.ITEM_ID],
    }

    def __init__(self, session: Session):
        super().__init__(session, StockItem)

    def persist(self, record: Record):
        # the import doesn't know the item_id, the natural key identifies the row
        if record.get(MemberNames.ITEM_ID) is None:
            existing = self.load_by_product_id_and_website_id_and_stock_id(
                record.get(MemberNames.PRODUCT_ID),
                record.get(MemberNames.WEBSITE_ID, 0),
                record.get(MemberNames.STOCK_ID, 1),
            )
            if existing is not None:
                record = {**record, MemberNames.ITEM_ID: existing[MemberNames.ITEM_ID]}
        return super().persist(record)

    def load_by_product_id_and_website_id_and_stock_id(
        self, product_id: int, website_id: int, stock_id: int
    ) -> Optional[Record]:
        return self._load_one(product_id=product_id, website_id=website_id, stock_id=stock_id)


class StockStatusRepository(BaseRepository, IStockStatusRepository):

    delete_keys = {
        None: [MemberNames.PRODUCT_ID],
        DeleteStrategy.BY_SKU: [],
    }

    def __init__(self, session: Session):
        super().__init__(session, StockStatus)

    def load_by_product_id_and_website_id_and_stock_id(
        self, product_id: int, website_id: int, stock_id: int
    ) -> Optional[Record]:
        return self._load_one(product_id=product_id, website_id=website_id, stock_id=stock_id)

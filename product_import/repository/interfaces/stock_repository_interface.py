"""
Interfaces for the Stock Repositories (ISP)
"""
from abc import abstractmethod
from typing import Optional

from product_import.core.interfaces import IRecordRepository, Record


class IStockItemRepository(IRecordRepository):
    """Interface for the stock item repository"""

    @abstractmethod
    def load_by_product_id_and_website_id_and_stock_id(
        self, product_id: int, website_id: int, stock_id: int
    ) -> Optional[Record]:
        pass


class IStockStatusRepository(IRecordRepository):
    """Interface for the stock status repository"""

    @abstractmethod
    def load_by_product_id_and_website_id_and_stock_id(
        self, product_id: int, website_id: int, stock_id: int
    ) -> Optional[Record]:
        pass

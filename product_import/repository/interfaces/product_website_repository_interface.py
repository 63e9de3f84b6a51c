"""
Interface for the Product Website Repository (ISP)
"""
from abc import abstractmethod
from typing import Optional

from product_import.core.interfaces import IRecordRepository, Record


class IProductWebsiteRepository(IRecordRepository):
    """Interface for the product website relation repository"""

    @abstractmethod
    def load_by_product_id_and_website_id(self, product_id: int, website_id: int) -> Optional[Record]:
        pass

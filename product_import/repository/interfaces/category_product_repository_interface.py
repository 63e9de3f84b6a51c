"""
Interface for the Category Product Repository (ISP)
"""
from abc import abstractmethod
from typing import Optional

from product_import.core.interfaces import IRecordRepository, Record


class ICategoryProductRepository(IRecordRepository):
    """Interface for the category product relation repository"""

    @abstractmethod
    def load_by_category_id_and_product_id(self, category_id: int, product_id: int) -> Optional[Record]:
        pass

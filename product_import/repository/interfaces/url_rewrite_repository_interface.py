"""
Interfaces for the URL rewrite repositories (ISP)
"""
from abc import abstractmethod
from typing import List, Optional

from product_import.core.interfaces import IRecordRepository, Record


class IUrlRewriteRepository(IRecordRepository):
    """Interface for the URL rewrite repository"""

    @abstractmethod
    def find_all_by_entity_type_and_entity_id(self, entity_type: str, entity_id: int) -> List[Record]:
        pass


class IUrlRewriteProductCategoryRepository(IRecordRepository):
    """Interface for the URL rewrite product => category relation repository"""

    @abstractmethod
    def load_by_product_id_and_category_id(self, product_id: int, category_id: int) -> Optional[Record]:
        pass

"""
Interfaces for the read only EAV lookups (ISP)
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from product_import.core.interfaces import Record


class IEavAttributeRepository(ABC):
    """Interface for the EAV attribute metadata lookups"""

    @abstractmethod
    def find_all_by_is_user_defined(self, is_user_defined: int = 1) -> List[Record]:
        pass


class IEavAttributeOptionValueRepository(ABC):
    """Interface for the EAV attribute option label lookups"""

    @abstractmethod
    def load_by_option_value_and_store_id(self, value: Any, store_id: int) -> Optional[Record]:
        pass

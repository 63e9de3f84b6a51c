"""
Interface for the Tax Class Repository (ISP)
"""
from abc import ABC, abstractmethod
from typing import Optional

from product_import.core.interfaces import Record


class ITaxClassRepository(ABC):
    """Interface for the tax class lookups"""

    @abstractmethod
    def load_by_class_name(self, class_name: str) -> Optional[Record]:
        pass

"""
Tax Class Repository
"""
from typing import Optional

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.interfaces import Record
from product_import.models.tax_class import TaxClass
from product_import.repository.interfaces.tax_class_repository_interface import ITaxClassRepository


class TaxClassRepository(BaseRepository, ITaxClassRepository):

    def __init__(self, session: Session):
        super().__init__(session, TaxClass)

    def load_by_class_name(self, class_name: str) -> Optional[Record]:
        return self._load_one(class_name=class_name, class_type="PRODUCT")

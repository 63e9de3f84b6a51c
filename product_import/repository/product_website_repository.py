"""
Product Website Repository
"""
from typing import Optional

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.interfaces import Record
from product_import.models.enums import DeleteStrategy, MemberNames
from product_import.models.product_website import ProductWebsite
from product_import.repository.interfaces.product_website_repository_interface import IProductWebsiteRepository


class ProductWebsiteRepository(BaseRepository, IProductWebsiteRepository):

    delete_keys = {
        None: [MemberNames.PRODUCT_ID],
        DeleteStrategy.BY_SKU: [],
    }

    def __init__(self, session: Session):
        super().__init__(session, ProductWebsite)

    def load_by_product_id_and_website_id(self, product_id: int, website_id: int) -> Optional[Record]:
        return self._load_one(product_id=product_id, website_id=website_id)

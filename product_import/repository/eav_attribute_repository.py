"""
Read only EAV attribute repositories
"""
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.exceptions import InfrastructureException
from product_import.core.interfaces import Record
from product_import.models.eav_attribute import EavAttribute, EavAttributeOptionValue
from product_import.repository.interfaces.eav_attribute_repository_interface import (
    IEavAttributeRepository, IEavAttributeOptionValueRepository
)


class EavAttributeRepository(BaseRepository, IEavAttributeRepository):

    def __init__(self, session: Session):
        super().__init__(session, EavAttribute)

    def find_all_by_is_user_defined(self, is_user_defined: int = 1) -> List[Record]:
        try:
            statement = (
                select(EavAttribute)
                .where(EavAttribute.is_user_defined == is_user_defined)
                .order_by(EavAttribute.attribute_id)
            )
            return [self._to_record(entity) for entity in self._session.execute(statement).scalars()]
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving user defined attributes: {str(e)}")


class EavAttributeOptionValueRepository(BaseRepository, IEavAttributeOptionValueRepository):

    def __init__(self, session: Session):
        super().__init__(session, EavAttributeOptionValue)

    def load_by_option_value_and_store_id(self, value: Any, store_id: int) -> Optional[Record]:
        return self._load_one(value=value, store_id=store_id)

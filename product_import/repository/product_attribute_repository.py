"""
Repositories for the typed EAV value tables
"""
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Type

from sqlalchemy.orm import Session

from product_import.core.base_repository import BaseRepository
from product_import.core.exceptions import ExceptionFactory, ValidationException
from product_import.core.interfaces import Record
from product_import.models.enums import BackendType, DeleteStrategy, MemberNames
from product_import.models.product_attribute import (
    ProductDatetime, ProductDecimal, ProductInt, ProductText, ProductVarchar
)
from product_import.repository.interfaces.product_attribute_repository_interface import IProductAttributeRepository

# format values of the datetime table are written with, see BunchSubject.cast_value_by_backend_type()
DATETIME_STORAGE_FORMAT = "%Y-%m-%d %H:%M:%S"

ATTRIBUTE_MODELS: Dict[BackendType, Type[Any]] = {
    BackendType.DATETIME: ProductDatetime,
    BackendType.DECIMAL: ProductDecimal,
    BackendType.INT: ProductInt,
    BackendType.TEXT: ProductText,
    BackendType.VARCHAR: ProductVarchar,
}


class ProductAttributeRepository(BaseRepository, IProductAttributeRepository):
    """
    Persists the values of one backend type.

    One instance is created per backend type, e.g.
    ``ProductAttributeRepository(session, BackendType.INT)``.
    """

    delete_keys = {
        None: [MemberNames.VALUE_ID],
        DeleteStrategy.BY_SKU: [],
        DeleteStrategy.BY_ENTITY_ID: [MemberNames.ENTITY_ID],
    }

    def __init__(self, session: Session, backend_type: BackendType):
        backend_type = BackendType(backend_type)
        if backend_type not in ATTRIBUTE_MODELS:
            raise ExceptionFactory.unknown_backend_type(backend_type.value)
        self._backend_type = backend_type
        super().__init__(session, ATTRIBUTE_MODELS[backend_type])

    @property
    def backend_type(self) -> BackendType:
        return self._backend_type

    def persist(self, record: Record):
        if record.get(MemberNames.VALUE_ID) is None:
            existing = self.load_by_entity_id_and_attribute_id_and_store_id(
                record.get(MemberNames.ENTITY_ID),
                record.get(MemberNames.ATTRIBUTE_ID),
                record.get(MemberNames.STORE_ID, 0),
            )
            if existing is not None:
                record = {**record, MemberNames.VALUE_ID: existing[MemberNames.VALUE_ID]}
        return super().persist(record)

    def load_by_entity_id_and_attribute_id_and_store_id(
        self, entity_id: int, attribute_id: int, store_id: int
    ) -> Optional[Record]:
        return self._load_one(entity_id=entity_id, attribute_id=attribute_id, store_id=store_id)

    def _coerce_value(self, column: str, value: Any) -> Any:
        if column != "value" or value is None:
            return value
        if value == "":
            return None

        try:
            if self._backend_type is BackendType.DATETIME and isinstance(value, str):
                return datetime.strptime(value, DATETIME_STORAGE_FORMAT)
            if self._backend_type is BackendType.DECIMAL and not isinstance(value, Decimal):
                return Decimal(str(value))
            if self._backend_type is BackendType.INT and not isinstance(value, int):
                return int(value)
        except (ValueError, InvalidOperation):
            raise ValidationException(
                f"Can't store {value!r} in the {self._backend_type.value} value table",
                details={"backend_type": self._backend_type.value, "value": value}
            )
        return value

    def _product_id_column(self):
        return self._model_class.entity_id

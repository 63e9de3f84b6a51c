"""
Base repository for the catalog tables
"""
import logging
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import inspect, select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_import.core.exceptions import ExceptionFactory, InfrastructureException
from product_import.core.interfaces import IRecordRepository, Record
from product_import.models.enums import DeleteStrategy, MemberNames
from product_import.models.product import Product

logger = logging.getLogger(__name__)


class BaseRepository(IRecordRepository):
    """
    Common persist/load/delete implementation working on plain dict records.

    Subclasses declare the model and which column each delete strategy
    matches on; ``None`` in ``delete_keys`` is the default strategy.
    """

    delete_keys: Dict[Optional[DeleteStrategy], List[str]] = {}

    def __init__(self, session: Session, model_class: Type[Any]):
        self._session = session
        self._model_class = model_class
        mapper = inspect(model_class)
        # column name -> mapped attribute key, e.g. 'metadata' -> 'metadata_'
        self._columns = {attr.columns[0].name: attr.key for attr in mapper.column_attrs}
        self._primary_key = [column.name for column in mapper.primary_key]

    @property
    def entity_name(self) -> str:
        return self._model_class.__name__

    def persist(self, record: Record) -> Any:
        """Updates the row when the record carries an existing primary key, inserts it otherwise"""
        values = self._column_values(record)
        try:
            entity = self._find_by_primary_key(record)
            if entity is None:
                entity = self._model_class()
                self._session.add(entity)
            for key, value in values.items():
                setattr(entity, key, value)
            self._session.flush()
            return self._primary_key_value(entity)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error persisting {self.entity_name}: {str(e)}")

    def delete(self, row: Record, strategy: Optional[DeleteStrategy] = None) -> None:
        if strategy is not None and not isinstance(strategy, DeleteStrategy):
            try:
                strategy = DeleteStrategy(strategy)
            except ValueError:
                raise ExceptionFactory.unsupported_delete_strategy(self.entity_name, strategy)
        if strategy not in self.delete_keys:
            raise ExceptionFactory.unsupported_delete_strategy(self.entity_name, strategy)

        try:
            if strategy is DeleteStrategy.BY_SKU and MemberNames.SKU not in self._columns:
                statement = delete(self._model_class).where(
                    self._product_id_column().in_(self._product_ids_by_sku(row[MemberNames.SKU])),
                    *self._product_scope()
                )
            else:
                statement = delete(self._model_class)
                for column in self.delete_keys[strategy]:
                    statement = statement.where(getattr(self._model_class, self._columns[column]) == row[column])
            result = self._session.execute(statement.execution_options(synchronize_session="fetch"))
            logger.debug("Deleted %s %s row(s) (strategy %s)", result.rowcount, self.entity_name, strategy)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error deleting {self.entity_name}: {str(e)}")

    def _load_one(self, **filters) -> Optional[Record]:
        try:
            statement = select(self._model_class).filter_by(**filters)
            entity = self._session.execute(statement).scalars().first()
            return self._to_record(entity) if entity is not None else None
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self.entity_name}: {str(e)}")

    def _load_all(self, **filters) -> List[Record]:
        try:
            statement = select(self._model_class).filter_by(**filters)
            return [self._to_record(entity) for entity in self._session.execute(statement).scalars()]
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self.entity_name} list: {str(e)}")

    def _to_record(self, entity: Any) -> Record:
        return {column: getattr(entity, key) for column, key in self._columns.items()}

    def _column_values(self, record: Record) -> Dict[str, Any]:
        values = {}
        for column, value in record.items():
            key = self._columns.get(column)
            if key is None:
                # rows built from the CSV carry more members than the table has columns
                continue
            values[key] = self._coerce_value(column, value)
        return values

    def _coerce_value(self, column: str, value: Any) -> Any:
        """Hook to convert raw record values into what the column type expects"""
        return value

    def _find_by_primary_key(self, record: Record) -> Optional[Any]:
        if any(record.get(column) is None for column in self._primary_key):
            return None
        identity = tuple(record[column] for column in self._primary_key)
        return self._session.get(self._model_class, identity if len(identity) > 1 else identity[0])

    def _primary_key_value(self, entity: Any) -> Any:
        values = [getattr(entity, self._columns[column]) for column in self._primary_key]
        return values[0] if len(values) == 1 else tuple(values)

    def _product_scope(self) -> list:
        """Extra conditions restricting a delete by SKU to product rows"""
        return []

    def _product_id_column(self):
        return getattr(self._model_class, MemberNames.PRODUCT_ID)

    def _product_ids_by_sku(self, sku: str):
        return select(Product.entity_id).where(Product.sku == sku)

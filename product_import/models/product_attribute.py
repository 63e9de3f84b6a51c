from sqlalchemy import Integer, Column, String, Text, DateTime, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import declared_attr

from product_import.database import Base


class ProductAttributeMixin:
    """
        Columns shared by the typed EAV value tables.

        One row holds the value of one attribute of one product in one store;
        the (entity_id, attribute_id, store_id) triple is unique.
    """

    value_id = Column(Integer, primary_key=True, index=True)
    attribute_id = Column(Integer, nullable=False, index=True)
    store_id = Column(Integer, nullable=False, default=0, index=True)

    @declared_attr
    def entity_id(cls):
        return Column(
            Integer,
            ForeignKey("catalog_product_entity.entity_id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )

    @declared_attr
    def __table_args__(cls):
        return (UniqueConstraint("entity_id", "attribute_id", "store_id"),)


class ProductDatetime(ProductAttributeMixin, Base):
    __tablename__ = "catalog_product_entity_datetime"

    value = Column(DateTime, default=None)


class ProductDecimal(ProductAttributeMixin, Base):
    __tablename__ = "catalog_product_entity_decimal"

    value = Column(Numeric(20, 6), default=None)


class ProductInt(ProductAttributeMixin, Base):
    __tablename__ = "catalog_product_entity_int"

    value = Column(Integer, default=None)


class ProductText(ProductAttributeMixin, Base):
    __tablename__ = "catalog_product_entity_text"

    value = Column(Text, default=None)


class ProductVarchar(ProductAttributeMixin, Base):
    __tablename__ = "catalog_product_entity_varchar"

    value = Column(String(255), default=None)

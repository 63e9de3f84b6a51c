from sqlalchemy import Integer, Column, String, SmallInteger, DateTime, func

from product_import.database import Base


class Product(Base):
    """
        SQLAlchemy model for the 'catalog_product_entity' table.

        Holds the static columns of a product; every other attribute lives in
        one of the typed EAV value tables (see product_attribute.py).

        Attributes:
            entity_id (Column): Primary key, returned by persist_product.
            attribute_set_id (Column): Attribute set the product has been created with.
            type_id (Column): Product type (simple, configurable, bundle, ...).
            sku (Column): Unique stock keeping unit, the natural key of the import.
    """
    __tablename__ = "catalog_product_entity"

    entity_id = Column(Integer, primary_key=True, index=True)
    attribute_set_id = Column(Integer, default=0, index=True)
    type_id = Column(String(32), default="simple", index=True)
    sku = Column(String(64), nullable=False, unique=True, index=True)
    has_options = Column(SmallInteger, default=0)
    required_options = Column(SmallInteger, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

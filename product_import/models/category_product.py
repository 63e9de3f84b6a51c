from sqlalchemy import Integer, Column, ForeignKey, UniqueConstraint

from product_import.database import Base


class CategoryProduct(Base):
    """SQLAlchemy model for the 'catalog_category_product' relation table."""
    __tablename__ = "catalog_category_product"
    __table_args__ = (UniqueConstraint("category_id", "product_id"),)

    entity_id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("catalog_product_entity.entity_id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, default=0)

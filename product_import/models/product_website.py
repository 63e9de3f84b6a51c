from sqlalchemy import Integer, Column, ForeignKey

from product_import.database import Base


class ProductWebsite(Base):
    """SQLAlchemy model for the 'catalog_product_website' relation table."""
    __tablename__ = "catalog_product_website"

    product_id = Column(Integer, ForeignKey("catalog_product_entity.entity_id", ondelete="CASCADE"), primary_key=True)
    website_id = Column(Integer, primary_key=True)

from sqlalchemy import Integer, Column, String, SmallInteger, Text, ForeignKey

from product_import.database import Base


class UrlRewrite(Base):
    """
        SQLAlchemy model for the 'url_rewrite' table.

        Attributes:
            entity_type (Column): Type of the rewritten entity, 'product' for this import.
            entity_id (Column): ID of the rewritten entity.
            request_path (Column): The public URL path.
            target_path (Column): The internal path the request is rewritten to.
            redirect_type (Column): 0 for a rewrite, 301/302 for redirects.
    """
    __tablename__ = "url_rewrite"

    url_rewrite_id = Column(Integer, primary_key=True, index=True)
    entity_type = Column(String(32), nullable=False, index=True)
    entity_id = Column(Integer, nullable=False, index=True)
    request_path = Column(String(255))
    target_path = Column(String(255))
    redirect_type = Column(SmallInteger, default=0)
    store_id = Column(Integer, nullable=False, default=0)
    description = Column(String(255), default=None)
    is_autogenerated = Column(SmallInteger, default=0)
    metadata_ = Column("metadata", Text, default=None)


class UrlRewriteProductCategory(Base):
    """SQLAlchemy model for the 'catalog_url_rewrite_product_category' relation table."""
    __tablename__ = "catalog_url_rewrite_product_category"

    url_rewrite_id = Column(Integer, ForeignKey("url_rewrite.url_rewrite_id", ondelete="CASCADE"), primary_key=True)
    category_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False, index=True)

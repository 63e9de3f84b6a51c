from sqlalchemy import Integer, Column, Float, SmallInteger, ForeignKey, UniqueConstraint

from product_import.database import Base


class StockItem(Base):
    """
        SQLAlchemy model for the 'cataloginventory_stock_item' table.

        The columns match the keys of BunchSubject.get_header_stock_mappings(),
        so a stock item row built from the CSV can be persisted as it is.
    """
    __tablename__ = "cataloginventory_stock_item"
    __table_args__ = (UniqueConstraint("product_id", "website_id", "stock_id"),)

    item_id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("catalog_product_entity.entity_id", ondelete="CASCADE"), nullable=False, index=True)
    website_id = Column(Integer, nullable=False, default=0)
    stock_id = Column(Integer, nullable=False, default=1)
    qty = Column(Float, default=0.0)
    min_qty = Column(Float, default=0.0)
    use_config_min_qty = Column(SmallInteger, default=1)
    is_qty_decimal = Column(SmallInteger, default=0)
    backorders = Column(SmallInteger, default=0)
    use_config_backorders = Column(SmallInteger, default=1)
    min_sale_qty = Column(Float, default=1.0)
    use_config_min_sale_qty = Column(SmallInteger, default=1)
    max_sale_qty = Column(Float, default=0.0)
    use_config_max_sale_qty = Column(SmallInteger, default=1)
    is_in_stock = Column(SmallInteger, default=0)
    notify_stock_qty = Column(Float, default=None)
    use_config_notify_stock_qty = Column(SmallInteger, default=1)
    manage_stock = Column(SmallInteger, default=0)
    use_config_manage_stock = Column(SmallInteger, default=1)
    use_config_qty_increments = Column(SmallInteger, default=1)
    qty_increments = Column(Float, default=0.0)
    use_config_enable_qty_inc = Column(SmallInteger, default=1)
    enable_qty_increments = Column(SmallInteger, default=0)
    is_decimal_divided = Column(SmallInteger, default=0)


class StockStatus(Base):
    """
        SQLAlchemy model for the 'cataloginventory_stock_status' table,
        keyed by (product_id, website_id, stock_id).
    """
    __tablename__ = "cataloginventory_stock_status"

    product_id = Column(Integer, ForeignKey("catalog_product_entity.entity_id", ondelete="CASCADE"), primary_key=True)
    website_id = Column(Integer, primary_key=True, default=0)
    stock_id = Column(Integer, primary_key=True, default=1)
    qty = Column(Float, default=0.0)
    stock_status = Column(SmallInteger, default=0)

from sqlalchemy import Integer, Column, String

from product_import.database import Base


class TaxClass(Base):
    """SQLAlchemy model for the 'tax_class' table, class_type is PRODUCT or CUSTOMER."""
    __tablename__ = "tax_class"

    class_id = Column(Integer, primary_key=True, index=True)
    class_name = Column(String(255), nullable=False)
    class_type = Column(String(8), nullable=False, default="PRODUCT")

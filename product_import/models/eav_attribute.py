from sqlalchemy import Integer, Column, String, SmallInteger, ForeignKey

from product_import.database import Base


class EavAttribute(Base):
    """
        SQLAlchemy model for the 'eav_attribute' table.

        Attributes:
            attribute_code (Column): Code the CSV column and the callback mappings refer to.
            backend_type (Column): Selects the value table (datetime, decimal, int, text, varchar).
            frontend_input (Column): Input widget, selects the default callback of user defined attributes.
            is_user_defined (Column): 1 for attributes created by the shop owner.
    """
    __tablename__ = "eav_attribute"

    attribute_id = Column(Integer, primary_key=True, index=True)
    entity_type_id = Column(Integer, nullable=False, default=4)
    attribute_code = Column(String(255), nullable=False, index=True)
    backend_type = Column(String(8), nullable=False, default="static")
    frontend_input = Column(String(50), default=None)
    frontend_label = Column(String(255), default=None)
    is_required = Column(SmallInteger, default=0)
    is_user_defined = Column(SmallInteger, default=0, index=True)
    default_value = Column(String(255), default=None)


class EavAttributeOption(Base):
    __tablename__ = "eav_attribute_option"

    option_id = Column(Integer, primary_key=True, index=True)
    attribute_id = Column(Integer, ForeignKey("eav_attribute.attribute_id", ondelete="CASCADE"), nullable=False, index=True)
    sort_order = Column(Integer, default=0)


class EavAttributeOptionValue(Base):
    __tablename__ = "eav_attribute_option_value"

    value_id = Column(Integer, primary_key=True, index=True)
    option_id = Column(Integer, ForeignKey("eav_attribute_option.option_id", ondelete="CASCADE"), nullable=False, index=True)
    store_id = Column(Integer, nullable=False, default=0)
    value = Column(String(255), default=None)

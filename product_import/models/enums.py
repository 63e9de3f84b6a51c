"""
Enumerations shared by models, repositories and subjects
"""
from enum import Enum, IntEnum


class BackendType(str, Enum):
    """Storage representation of an EAV attribute value"""
    STATIC = "static"
    DATETIME = "datetime"
    DECIMAL = "decimal"
    FLOAT = "float"
    INT = "int"
    TEXT = "text"
    VARCHAR = "varchar"


class VisibilityKey(IntEnum):
    """Catalog visibility codes as stored in the int attribute table"""
    VISIBILITY_NOT_VISIBLE = 1
    VISIBILITY_IN_CATALOG = 2
    VISIBILITY_IN_SEARCH = 3
    VISIBILITY_BOTH = 4


class DeleteStrategy(str, Enum):
    """
    Selects the key a delete operation matches on.

    ``None`` passed instead of a strategy means the entity's default key.
    """
    BY_SKU = "by_sku"
    BY_ENTITY_ID = "by_entity_id"


class MemberNames:
    """Column and row member names used across the import"""
    ENTITY_ID = "entity_id"
    SKU = "sku"
    PRODUCT_ID = "product_id"
    CATEGORY_ID = "category_id"
    WEBSITE_ID = "website_id"
    STOCK_ID = "stock_id"
    STORE_ID = "store_id"
    ATTRIBUTE_ID = "attribute_id"
    ATTRIBUTE_CODE = "attribute_code"
    ATTRIBUTE_SET_ID = "attribute_set_id"
    FRONTEND_INPUT = "frontend_input"
    BACKEND_TYPE = "backend_type"
    IS_USER_DEFINED = "is_user_defined"
    VALUE_ID = "value_id"
    OPTION_ID = "option_id"
    ITEM_ID = "item_id"
    URL_REWRITE_ID = "url_rewrite_id"
    ENTITY_TYPE = "entity_type"
    CLASS_ID = "class_id"
    CLASS_NAME = "class_name"

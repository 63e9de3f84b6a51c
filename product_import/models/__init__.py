from .product import Product
from .product_attribute import ProductDatetime, ProductDecimal, ProductInt, ProductText, ProductVarchar
from .stock import StockItem, StockStatus
from .product_website import ProductWebsite
from .category_product import CategoryProduct
from .url_rewrite import UrlRewrite, UrlRewriteProductCategory
from .eav_attribute import EavAttribute, EavAttributeOption, EavAttributeOptionValue
from .tax_class import TaxClass
from .enums import BackendType, VisibilityKey, DeleteStrategy, MemberNames

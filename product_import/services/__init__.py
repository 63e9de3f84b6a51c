from .product_processor import ProductProcessor
from .interfaces.product_processor_interface import IProductProcessor

__all__ = ["ProductProcessor", "IProductProcessor"]

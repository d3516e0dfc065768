"""
Product module.

Owns inventory decisions. Reacts to OrderPlaced events published by the order
module and answers with InventoryReserved or InventoryFailed. Must never
import from the `order` package; only `shared` is allowed.
"""

from product.inventory_policy import InventoryPolicy
from product.inventory_service import InventoryService
from product.service import ProductService

__all__ = [
    "InventoryPolicy",
    "InventoryService",
    "ProductService",
]

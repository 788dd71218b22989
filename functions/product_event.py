from enum import Enum
from typing import TypedDict


class ProductEventType(str, Enum):
    CREATED = "PRODUCT_CREATED"
    UPDATED = "PRODUCT_UPDATED"
    DELETED = "PRODUCT_DELETED"

    def __str__(self) -> str:
        return self.value


class ProductEvent(TypedDict):
    """Payload the admin function sends to the products events function."""
    email: str
    productId: str
    productCode: str
    productPrice: float
    requestId: str
    eventType: ProductEventType

"""
Products module exceptions.
"""
from shared.exceptions import ConflictError, NotFoundError, ValidationError


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id):
        super().__init__(
            entity_name='Product',
            entity_id=product_id,
            message="Product not found",
            code="PRODUCT_NOT_FOUND",
        )
        self.product_id = product_id


class EmptyProductUpdateError(ValidationError):
    """Raised when an update request carries no fields."""

    def __init__(self):
        super().__init__(
            message="Request body cannot be empty",
            code="EMPTY_UPDATE",
        )


class ProductHasStockError(ConflictError):
    """Raised when deleting a product that items or documents still refer to."""

    def __init__(self, product_id, item_count: int):
        super().__init__(
            f"Cannot delete a product with {item_count} item(s) or purchase/sale lines",
            rule='delete_requires_no_stock',
            code='PRODUCT_HAS_STOCK',
        )
        self.product_id = product_id
        self.item_count = item_count

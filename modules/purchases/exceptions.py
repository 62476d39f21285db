"""
Purchases module exceptions.
"""
from shared.exceptions import ConflictError, NotFoundError, ValidationError


class PurchaseNotFoundError(NotFoundError):
    """Raised when a purchase is not found."""

    def __init__(self, purchase_id):
        super().__init__(
            entity_name='Purchase',
            entity_id=purchase_id,
            message="Purchase not found",
            code='PURCHASE_NOT_FOUND',
        )
        self.purchase_id = purchase_id


class InvalidPurchaseProductsError(ValidationError):
    """Raised when purchase lines name products that do not exist."""

    def __init__(self, product_ids):
        super().__init__(
            "One or more product_ids are invalid",
            field='lines',
            code='INVALID_PRODUCTS',
        )
        self.product_ids = product_ids

    def extra(self) -> dict:
        return {**super().extra(), 'product_ids': self.product_ids}


class SerialAllocationError(ConflictError):
    """Raised when no free serial could be claimed for a received unit."""

    def __init__(self, base: str):
        super().__init__(
            f"Could not allocate a unique serial from \"{base}\"",
            rule='unique_serial',
            code='SERIAL_ALLOCATION_FAILED',
        )
        self.base = base

"""
Sales module exceptions.
"""
from shared.exceptions import NotFoundError, ValidationError


class SaleNotFoundError(NotFoundError):
    """Raised when a sale is not found."""

    def __init__(self, sale_id):
        super().__init__(
            entity_name='Sale',
            entity_id=sale_id,
            message="Sale not found",
            code='SALE_NOT_FOUND',
        )
        self.sale_id = sale_id


class DuplicateSaleItemError(ValidationError):
    """Raised when a sale lists the same item twice."""

    def __init__(self, item_ids):
        super().__init__(
            "Each item can appear only once per sale",
            field='lines',
            code='DUPLICATE_SALE_ITEM',
        )
        self.item_ids = item_ids

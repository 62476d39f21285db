"""
Items module exceptions.
"""
from shared.exceptions import ConflictError, NotFoundError, ValidationError


class ItemNotFoundError(NotFoundError):
    """Raised when one or more items are not found."""

    def __init__(self, item_id):
        if isinstance(item_id, (list, tuple)):
            message = f"Item(s) not found: {', '.join(str(i) for i in item_id)}"
        else:
            message = "Item not found"
        super().__init__(
            entity_name='Item',
            entity_id=item_id,
            message=message,
            code='ITEM_NOT_FOUND',
        )
        self.item_id = item_id


class DuplicateSerialError(ConflictError):
    """Raised when a serial is already taken by another item."""

    def __init__(self, serial: str):
        super().__init__(
            "Item with this serial already exists",
            rule='unique_serial',
            code='DUPLICATE_SERIAL',
        )
        self.serial = serial


class EmptyItemUpdateError(ValidationError):
    """Raised when an update request carries no fields."""

    def __init__(self):
        super().__init__(
            message="No updates provided",
            code='EMPTY_UPDATE',
        )


class SoldPriceRequiredError(ValidationError):
    """Raised when an item is marked SOLD without a sale price."""

    def __init__(self):
        super().__init__(
            message="sold_price_toman is required when marking an item as SOLD",
            field='sold_price_toman',
            code='SOLD_PRICE_REQUIRED',
        )


class ItemAlreadySoldError(ConflictError):
    """Raised when selling an item that is already sold."""

    def __init__(self, serial: str):
        super().__init__(
            f"Item {serial} is already sold",
            rule='sell_once',
            code='ITEM_ALREADY_SOLD',
        )
        self.serial = serial


class ItemInUseError(ConflictError):
    """Raised when removing items that a sale still refers to."""

    def __init__(self, item_ids):
        super().__init__(
            "Items that belong to a sale cannot be removed",
            rule='item_on_sale',
            code='ITEM_ON_SALE',
        )
        self.item_ids = item_ids

"""
Items module service layer.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from modules.products.exceptions import ProductNotFoundError
from modules.products.models import ProductModel
from shared.exceptions import ValidationError

from .exceptions import (
    DuplicateSerialError,
    EmptyItemUpdateError,
    ItemNotFoundError,
    SoldPriceRequiredError,
)
from .filters import ItemFilter
from .models import InventoryMovementModel, ItemModel

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
SELLABLE_LIMIT = 20

ITEM_FIELDS = (
    'product_id',
    'serial',
    'condition',
    'status',
    'acquired_at',
    'purchase_toman',
    'fees_toman',
    'refurb_toman',
    'location',
    'listed_channel',
    'listed_price_toman',
    'listed_at',
    'sold_at',
    'sold_price_toman',
    'sale_channel',
    'buyer_name',
    'notes',
    'images',
)


class ItemService:
    """
    Stock item business logic service.
    """

    def get_item(self, item_id: int) -> ItemModel:
        """Get item by ID or raise ItemNotFoundError."""
        try:
            return ItemModel.objects.select_related('product', 'product__category').get(pk=item_id)
        except ItemModel.DoesNotExist:
            raise ItemNotFoundError(item_id)

    def list_items(
        self,
        filters: Dict[str, Any] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """Filtered, paginated item list, newest first."""
        page_size = min(page_size, MAX_PAGE_SIZE)
        queryset = ItemModel.objects.select_related('product').order_by('-created_at', '-id')
        filterset = ItemFilter(filters or {}, queryset=queryset)
        if not filterset.is_valid():
            field, errors = next(iter(filterset.errors.items()))
            raise ValidationError(f"Invalid filter '{field}': {errors[0]}", field=field)
        queryset = filterset.qs

        total = queryset.count()
        offset = (page - 1) * page_size
        return {
            'items': list(queryset[offset:offset + page_size]),
            'total': total,
            'page': page,
            'page_size': page_size,
            'total_pages': math.ceil(total / page_size) if total else 0,
        }

    def get_sellable_items(self, search: Optional[str] = None, limit: int = SELLABLE_LIMIT) -> List[ItemModel]:
        """Items that can go on a sale, newest first."""
        queryset = ItemModel.objects.select_related('product').filter(
            status__in=ItemModel.SELLABLE_STATUSES
        )
        search = (search or '').strip()
        if search:
            queryset = queryset.filter(
                Q(serial__icontains=search) |
                Q(product__name__icontains=search) |
                Q(product__brand__icontains=search) |
                Q(product__model__icontains=search)
            )
        return list(queryset.order_by('-created_at', '-id')[:limit])

    def get_movements(self, item_id: int) -> List[InventoryMovementModel]:
        """Movements of an item, newest first."""
        item = self.get_item(item_id)
        return list(item.movements.all())

    @transaction.atomic
    def create_item(self, product_id: int, serial: str, purchase_toman: int, **fields) -> ItemModel:
        """
        Create an item and record its PURCHASE_IN movement.

        Raises:
            ProductNotFoundError: product_id does not exist
            SoldPriceRequiredError: created as SOLD without a sale price
            DuplicateSerialError: serial is taken
        """
        self._ensure_product_exists(product_id)

        values = {key: value for key, value in fields.items() if key in ITEM_FIELDS and value is not None}
        item = ItemModel(product_id=product_id, serial=serial, purchase_toman=purchase_toman, **values)

        if item.status == ItemModel.STATUS_SOLD:
            if item.sold_price_toman is None:
                raise SoldPriceRequiredError()
            if item.sold_at is None:
                item.sold_at = timezone.now()
        if item.status == ItemModel.STATUS_LISTED and item.listed_at is None:
            item.listed_at = timezone.now()

        self._save_with_unique_serial(item)
        self.record_movement(item, InventoryMovementModel.MOVEMENT_PURCHASE_IN)

        logger.info(f"Created item: {item.serial} ({item.id})")
        return self.get_item(item.id)

    @transaction.atomic
    def update_item(self, item_id: int, **changes) -> ItemModel:
        """
        Update the given item fields; None clears optional ones.

        Moving to SOLD needs a sale price (sent or already stored), stamps
        ``sold_at`` when missing and records a SALE_OUT movement.
        """
        if not changes:
            raise EmptyItemUpdateError()

        try:
            item = ItemModel.objects.select_for_update().get(pk=item_id)
        except ItemModel.DoesNotExist:
            raise ItemNotFoundError(item_id)

        if 'product_id' in changes:
            self._ensure_product_exists(changes['product_id'])

        previous_status = item.status
        for key, value in changes.items():
            if key not in ITEM_FIELDS:
                continue
            if key in ('fees_toman', 'refurb_toman') and value is None:
                value = 0
            if key == 'images' and value is None:
                value = []
            setattr(item, key, value)

        became_sold = item.status == ItemModel.STATUS_SOLD and previous_status != ItemModel.STATUS_SOLD
        if became_sold:
            if item.sold_price_toman is None:
                raise SoldPriceRequiredError()
            if item.sold_at is None:
                item.sold_at = timezone.now()
        if item.status == ItemModel.STATUS_LISTED and item.listed_at is None:
            item.listed_at = timezone.now()

        if 'serial' in changes:
            self._save_with_unique_serial(item)
        else:
            item.save()

        if became_sold:
            self.record_movement(item, InventoryMovementModel.MOVEMENT_SALE_OUT)

        logger.info(f"Updated item: {item.id}")
        return self.get_item(item.id)

    @transaction.atomic
    def add_movement(
        self,
        item_id: int,
        movement: str,
        qty: int = 1,
        reference: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> InventoryMovementModel:
        """Append a movement to an existing item."""
        item = self.get_item(item_id)
        return self.record_movement(item, movement, qty=qty, reference=reference, notes=notes)

    def record_movement(
        self,
        item: ItemModel,
        movement: str,
        qty: int = 1,
        reference: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> InventoryMovementModel:
        """Write a movement row; callers provide the transaction."""
        record = InventoryMovementModel.objects.create(
            item=item,
            movement=movement,
            qty=qty,
            reference=reference,
            notes=notes,
        )
        logger.debug(f"Recorded {movement} x {qty} for item {item.id}")
        return record

    def _save_with_unique_serial(self, item: ItemModel) -> None:
        duplicate = ItemModel.objects.filter(serial=item.serial)
        if item.pk is not None:
            duplicate = duplicate.exclude(pk=item.pk)
        if duplicate.exists():
            raise DuplicateSerialError(item.serial)

        # Another request may claim the serial between the check and the write
        try:
            with transaction.atomic():
                item.save()
        except IntegrityError:
            raise DuplicateSerialError(item.serial)

    def _ensure_product_exists(self, product_id: int) -> None:
        if not ProductModel.objects.filter(pk=product_id).exists():
            raise ProductNotFoundError(product_id)

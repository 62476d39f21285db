"""
Sales module service layer.
"""
import logging
from typing import Any, Dict, List, Optional

from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone

from modules.items.exceptions import ItemAlreadySoldError, ItemNotFoundError
from modules.items.models import InventoryMovementModel, ItemModel
from modules.items.services import ItemService

from .exceptions import DuplicateSaleItemError, SaleNotFoundError
from .models import SaleLineModel, SaleModel

logger = logging.getLogger(__name__)

RECENT_SALES_LIMIT = 20


class SaleService:
    """
    Sale business logic service.
    """

    def __init__(self):
        self.item_service = ItemService()

    def get_sale(self, sale_id: int) -> SaleModel:
        """Get sale with its lines or raise SaleNotFoundError."""
        try:
            return SaleModel.objects.prefetch_related('lines__item', 'lines__product').get(pk=sale_id)
        except SaleModel.DoesNotExist:
            raise SaleNotFoundError(sale_id)

    def list_sales(self, limit: int = RECENT_SALES_LIMIT) -> List[SaleModel]:
        """Latest sales with line and fulfilment counts."""
        return list(
            SaleModel.objects.annotate(
                total_items=Count('lines'),
                fulfilled_items=Count('lines', filter=Q(lines__item__status=ItemModel.STATUS_SOLD)),
            ).order_by('-ordered_at', '-id')[:limit]
        )

    @transaction.atomic
    def create_sale(
        self,
        customer_name: str,
        channel: str,
        lines: List[Dict[str, Any]],
        reference: Optional[str] = None,
        ordered_at=None,
    ) -> SaleModel:
        """
        Sell the listed items in one document.

        Every item becomes SOLD at its line price and gets a SALE_OUT
        movement. Nothing is written when any item is missing, repeated
        or already sold.

        Args:
            customer_name: Buyer recorded on each item
            channel: Sale channel recorded on each item
            lines: Dicts with ``item_id`` and ``unit_toman``
            reference: Optional invoice or order number
            ordered_at: Sale time; now when omitted
        """
        item_ids = [line['item_id'] for line in lines]
        duplicates = sorted({item_id for item_id in item_ids if item_ids.count(item_id) > 1})
        if duplicates:
            raise DuplicateSaleItemError(duplicates)

        items = {
            item.id: item
            for item in ItemModel.objects.select_for_update().filter(pk__in=item_ids)
        }
        missing = [item_id for item_id in item_ids if item_id not in items]
        if missing:
            raise ItemNotFoundError(missing)

        for item_id in item_ids:
            if items[item_id].status == ItemModel.STATUS_SOLD:
                raise ItemAlreadySoldError(items[item_id].serial)

        sold_at = timezone.now()
        sale = SaleModel.objects.create(
            customer_name=customer_name,
            channel=channel,
            reference=reference,
            ordered_at=ordered_at or sold_at,
            total_toman=sum(line['unit_toman'] for line in lines),
        )

        for line in lines:
            item = items[line['item_id']]
            SaleLineModel.objects.create(
                sale=sale,
                item=item,
                product_id=item.product_id,
                unit_toman=line['unit_toman'],
            )

            item.status = ItemModel.STATUS_SOLD
            item.sold_at = sold_at
            item.sold_price_toman = line['unit_toman']
            item.sale_channel = channel
            item.buyer_name = customer_name
            item.save(update_fields=[
                'status', 'sold_at', 'sold_price_toman', 'sale_channel', 'buyer_name', 'updated_at',
            ])
            self.item_service.record_movement(
                item,
                InventoryMovementModel.MOVEMENT_SALE_OUT,
                reference=reference or f"SALE-{sale.id}",
            )

        logger.info(f"Created sale {sale.id}: {len(lines)} item(s), total {sale.total_toman}")
        return self.get_sale(sale.id)

    @transaction.atomic
    def delete_sale(self, sale_id: int) -> bool:
        """
        Delete a sale and put its items back on the shelf.

        The items return to LISTED with their sale fields cleared, and
        their SALE_OUT movements are removed.
        """
        sale = self.get_sale(sale_id)
        item_ids = [line.item_id for line in sale.lines.all()]

        ItemModel.objects.filter(pk__in=item_ids).update(
            status=ItemModel.STATUS_LISTED,
            sold_at=None,
            sold_price_toman=None,
            sale_channel=None,
            buyer_name=None,
            updated_at=timezone.now(),
        )
        InventoryMovementModel.objects.filter(
            item_id__in=item_ids,
            movement=InventoryMovementModel.MOVEMENT_SALE_OUT,
        ).delete()
        sale.delete()

        logger.info(f"Deleted sale {sale_id}; {len(item_ids)} item(s) relisted")
        return True

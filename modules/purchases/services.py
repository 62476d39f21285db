"""
Purchases module service layer.
"""
import logging
from datetime import timezone as dt_timezone
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import Count, IntegerField, OuterRef, Subquery, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from modules.items.exceptions import ItemInUseError
from modules.items.models import InventoryMovementModel, ItemModel
from modules.items.services import ItemService
from modules.products.models import ProductModel

from .exceptions import InvalidPurchaseProductsError, PurchaseNotFoundError, SerialAllocationError
from .models import PurchaseLineModel, PurchaseModel

logger = logging.getLogger(__name__)

RECENT_PURCHASES_LIMIT = 20
SERIAL_PREFIX = 'CX'
SERIAL_ATTEMPTS = 8


def build_serial_base(moment=None) -> str:
    """Stock code for received units, ``CX-YYMMDD-HHMMSS`` in UTC."""
    moment = moment or timezone.now()
    return f"{SERIAL_PREFIX}-{moment.astimezone(dt_timezone.utc):%y%m%d-%H%M%S}"


def split_fees(fees_toman: int, quantity: int) -> List[int]:
    """Even share of a line's fees per unit; the remainder goes to the first unit."""
    share, remainder = divmod(fees_toman, quantity)
    return [share + remainder if index == 0 else share for index in range(quantity)]


class PurchaseService:
    """
    Purchase business logic service.
    """

    def __init__(self):
        self.item_service = ItemService()

    def get_purchase(self, purchase_id: int) -> PurchaseModel:
        """Get purchase with its lines or raise PurchaseNotFoundError."""
        try:
            return PurchaseModel.objects.prefetch_related(
                'lines__product', 'lines__created_items'
            ).get(pk=purchase_id)
        except PurchaseModel.DoesNotExist:
            raise PurchaseNotFoundError(purchase_id)

    def list_purchases(self, limit: int = RECENT_PURCHASES_LIMIT) -> List[PurchaseModel]:
        """Latest purchases with ordered and received unit counts."""
        received = (
            ItemModel.objects.filter(purchase_line__purchase=OuterRef('pk'))
            .order_by()
            .values('purchase_line__purchase')
            .annotate(count=Count('id'))
            .values('count')
        )
        return list(
            PurchaseModel.objects.annotate(
                total_items=Coalesce(Sum('lines__quantity'), 0, output_field=IntegerField()),
                received_items=Coalesce(
                    Subquery(received, output_field=IntegerField()), 0, output_field=IntegerField()
                ),
            ).order_by('-ordered_at', '-id')[:limit]
        )

    @transaction.atomic
    def create_purchase(
        self,
        supplier_name: str,
        lines: List[Dict[str, Any]],
        reference: Optional[str] = None,
        channel: Optional[str] = None,
        ordered_at=None,
    ) -> PurchaseModel:
        """
        Record a purchase order; stock arrives later through receive_purchase.

        Raises:
            InvalidPurchaseProductsError: a line names an unknown product
        """
        product_ids = {line['product_id'] for line in lines}
        known = set(ProductModel.objects.filter(pk__in=product_ids).values_list('id', flat=True))
        if known != product_ids:
            raise InvalidPurchaseProductsError(sorted(product_ids - known))

        total = sum(
            line['quantity'] * line['unit_toman'] + line.get('fees_toman', 0)
            for line in lines
        )
        purchase = PurchaseModel.objects.create(
            supplier_name=supplier_name,
            reference=reference,
            channel=channel,
            ordered_at=ordered_at or timezone.now(),
            total_toman=total,
        )
        PurchaseLineModel.objects.bulk_create([
            PurchaseLineModel(
                purchase=purchase,
                product_id=line['product_id'],
                quantity=line['quantity'],
                unit_toman=line['unit_toman'],
                fees_toman=line.get('fees_toman', 0),
            )
            for line in lines
        ])

        logger.info(f"Created purchase {purchase.id}: {len(lines)} line(s), total {total}")
        return self.get_purchase(purchase.id)

    @transaction.atomic
    def receive_purchase(self, purchase_id: int) -> Dict[str, Any]:
        """
        Turn every ordered unit into a NEW, IN_STOCK item.

        Each unit costs its line's unit price plus its share of the line
        fees and gets a PURCHASE_IN movement. A purchase is received once;
        later calls return ``already_received`` without creating items.

        Returns:
            Dict with the purchase, ``already_received`` and ``created_items``
        """
        try:
            purchase = PurchaseModel.objects.select_for_update().get(pk=purchase_id)
        except PurchaseModel.DoesNotExist:
            raise PurchaseNotFoundError(purchase_id)

        if ItemModel.objects.filter(purchase_line__purchase=purchase).exists():
            logger.info(f"Purchase {purchase_id} already received")
            return {
                'purchase': self.get_purchase(purchase_id),
                'already_received': True,
                'created_items': [],
            }

        reference = purchase.reference or str(purchase.id)
        serial_base = build_serial_base()
        created = []
        sequence = 0
        for line in purchase.lines.all():
            for fees in split_fees(line.fees_toman, line.quantity):
                item, sequence = self._create_received_item(line, fees, serial_base, sequence)
                self.item_service.record_movement(
                    item,
                    InventoryMovementModel.MOVEMENT_PURCHASE_IN,
                    reference=reference,
                )
                created.append(item)

        logger.info(f"Received purchase {purchase_id}: {len(created)} item(s)")
        return {
            'purchase': self.get_purchase(purchase_id),
            'already_received': False,
            'created_items': created,
        }

    @transaction.atomic
    def delete_purchase(self, purchase_id: int) -> bool:
        """
        Delete a purchase with the items it produced and their movements.

        Raises:
            ItemInUseError: a received item has since been put on a sale
        """
        purchase = self.get_purchase(purchase_id)
        items = ItemModel.objects.filter(purchase_line__purchase=purchase)

        on_sale = list(items.filter(sale_lines__isnull=False).values_list('id', flat=True).distinct())
        if on_sale:
            raise ItemInUseError(on_sale)

        removed, _ = items.delete()
        purchase.delete()

        logger.info(f"Deleted purchase {purchase_id} ({removed} row(s) removed with it)")
        return True

    def _create_received_item(self, line: PurchaseLineModel, fees: int, base: str, sequence: int):
        """Create one unit under the next free serial; returns the item and the next sequence."""
        for _ in range(SERIAL_ATTEMPTS):
            serial = base if sequence == 0 else f"{base}-{sequence:02d}"
            sequence += 1
            if ItemModel.objects.filter(serial=serial).exists():
                continue
            try:
                with transaction.atomic():
                    item = ItemModel.objects.create(
                        product_id=line.product_id,
                        purchase_line=line,
                        serial=serial,
                        condition=ItemModel.CONDITION_NEW,
                        status=ItemModel.STATUS_IN_STOCK,
                        purchase_toman=line.unit_toman,
                        fees_toman=fees,
                    )
            except IntegrityError:
                continue
            return item, sequence
        raise SerialAllocationError(base)

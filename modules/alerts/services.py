"""
Stock alerts: items that have sat too long or sold too cheaply.
"""
import logging
from datetime import timedelta
from typing import Any, Dict

from django.conf import settings
from django.db.models import BigIntegerField, ExpressionWrapper, F, FloatField
from django.db.models.functions import Cast
from django.utils import timezone

from modules.items.models import ItemModel

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
MAX_LIMIT = 20

ACTIVE_STATUSES = (
    ItemModel.STATUS_IN_STOCK,
    ItemModel.STATUS_LISTED,
    ItemModel.STATUS_RESERVED,
)


def product_label(product) -> str:
    """Brand, name and model joined by spaces."""
    parts = [product.brand, product.name, product.model]
    return ' '.join(part for part in parts if part).strip() or product.name


def days_between(earlier, now) -> int:
    """Whole calendar days from ``earlier`` to ``now``, never negative."""
    return max(0, (timezone.localdate(now) - timezone.localdate(earlier)).days)


class AlertService:
    """
    Alert summary over the stock.

    Thresholds come from ``settings.INVENTORY_ALERTS`` unless passed in.
    """

    def __init__(self, aging_days: int = None, stale_listing_days: int = None, minimum_margin_percent: float = None):
        rules = settings.INVENTORY_ALERTS
        self.aging_days = aging_days if aging_days is not None else rules['AGING_DAYS']
        self.stale_listing_days = (
            stale_listing_days if stale_listing_days is not None else rules['STALE_LISTING_DAYS']
        )
        self.minimum_margin_percent = (
            minimum_margin_percent if minimum_margin_percent is not None else rules['MINIMUM_MARGIN_PERCENT']
        )

    def get_summary(self, limit: int = DEFAULT_LIMIT) -> Dict[str, Any]:
        """
        Aging stock, stale listings and low-margin sales.

        Each section carries the full match count and at most ``limit``
        items, worst first. ``limit`` is clamped to 1..20.
        """
        limit = max(1, min(limit, MAX_LIMIT))
        now = timezone.now()

        aging = ItemModel.objects.select_related('product').filter(
            status__in=ACTIVE_STATUSES,
            acquired_at__lte=now - timedelta(days=self.aging_days),
        ).order_by('acquired_at', 'id')

        stale = ItemModel.objects.select_related('product').filter(
            status=ItemModel.STATUS_LISTED,
            listed_at__isnull=False,
            listed_at__lte=now - timedelta(days=self.stale_listing_days),
        ).order_by('listed_at', 'id')

        low_margin = self._low_margin_queryset()

        summary = {
            'aging': {
                'count': aging.count(),
                'threshold_days': self.aging_days,
                'items': [
                    {**self._base_row(item), 'acquired_at': item.acquired_at,
                     'days_in_stock': days_between(item.acquired_at, now)}
                    for item in aging[:limit]
                ],
            },
            'stale': {
                'count': stale.count(),
                'threshold_days': self.stale_listing_days,
                'items': [
                    {**self._base_row(item), 'listed_at': item.listed_at,
                     'days_listed': days_between(item.listed_at, now)}
                    for item in stale[:limit]
                ],
            },
            'margin': {
                'count': low_margin.count(),
                'threshold_percent': self.minimum_margin_percent,
                'items': [
                    {**self._base_row(item), 'sold_at': item.sold_at,
                     'margin_toman': item.margin_toman,
                     'margin_percent': item.margin_ratio * 100}
                    for item in low_margin[:limit]
                ],
            },
        }
        logger.debug(
            f"Alert summary: {summary['aging']['count']} aging, "
            f"{summary['stale']['count']} stale, {summary['margin']['count']} low margin"
        )
        return summary

    def _low_margin_queryset(self):
        # margin_ratio is (sold - cost) / sold
        return ItemModel.objects.select_related('product').filter(
            status=ItemModel.STATUS_SOLD,
            sold_price_toman__gt=0,
        ).annotate(
            margin_toman=ExpressionWrapper(
                F('sold_price_toman') - F('purchase_toman') - F('fees_toman') - F('refurb_toman'),
                output_field=BigIntegerField(),
            ),
        ).annotate(
            margin_ratio=ExpressionWrapper(
                Cast('margin_toman', FloatField()) / Cast('sold_price_toman', FloatField()),
                output_field=FloatField(),
            ),
        ).filter(
            margin_ratio__lt=self.minimum_margin_percent / 100,
        ).order_by('margin_ratio', 'id')

    def _base_row(self, item: ItemModel) -> Dict[str, Any]:
        return {
            'id': item.id,
            'product_name': product_label(item.product),
            'serial': item.serial,
            'status': item.status,
            'listed_price_toman': item.listed_price_toman,
            'listed_channel': item.listed_channel,
            'sale_channel': item.sale_channel,
            'sold_price_toman': item.sold_price_toman,
            'cost_toman': item.total_cost,
        }

"""
Purchases module Django ORM models.
"""
from django.db import models
from django.utils import timezone

from modules.items.models import CHANNEL_CHOICES


class PurchaseModel(models.Model):
    """Purchase order from a supplier."""

    supplier_name = models.CharField(
        max_length=200,
        verbose_name='Supplier name'
    )
    reference = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name='Reference',
        help_text='Supplier invoice or order number'
    )
    channel = models.CharField(
        max_length=20,
        choices=CHANNEL_CHOICES,
        null=True,
        blank=True,
        verbose_name='Channel'
    )
    ordered_at = models.DateTimeField(
        default=timezone.now,
        verbose_name='Ordered at'
    )
    total_toman = models.PositiveBigIntegerField(
        default=0,
        verbose_name='Total',
        help_text='Sum of quantity x unit price plus fees, Toman'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    class Meta:
        db_table = 'purchases'
        verbose_name = 'Purchase'
        verbose_name_plural = 'Purchases'
        ordering = ['-ordered_at', '-id']

    def __str__(self):
        return self.reference or f"Purchase {self.id}"


class PurchaseLineModel(models.Model):
    """Purchase line: quantity of one product at a unit price."""

    purchase = models.ForeignKey(
        PurchaseModel,
        on_delete=models.CASCADE,
        related_name='lines',
        verbose_name='Purchase'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='purchase_lines',
        verbose_name='Product'
    )
    quantity = models.PositiveIntegerField(
        verbose_name='Quantity'
    )
    unit_toman = models.PositiveBigIntegerField(
        verbose_name='Unit price',
        help_text='Toman'
    )
    fees_toman = models.PositiveBigIntegerField(
        default=0,
        verbose_name='Fees',
        help_text='Line fees spread over the received units, Toman'
    )

    class Meta:
        db_table = 'purchase_lines'
        verbose_name = 'Purchase Line'
        verbose_name_plural = 'Purchase Lines'
        ordering = ['id']

    def __str__(self):
        return f"Purchase {self.purchase_id} - Product {self.product_id} x {self.quantity}"

    @property
    def line_total(self) -> int:
        return self.quantity * self.unit_toman + self.fees_toman

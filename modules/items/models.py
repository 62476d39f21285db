"""
Items module Django ORM models.
"""
from django.db import models
from django.utils import timezone

from .calc import profit, total_cost

CHANNEL_DIRECT = 'DIRECT'
CHANNEL_ONLINE = 'ONLINE'
CHANNEL_WHOLESALE = 'WHOLESALE'
CHANNEL_OTHER = 'OTHER'

CHANNEL_CHOICES = [
    (CHANNEL_DIRECT, 'Direct'),
    (CHANNEL_ONLINE, 'Online'),
    (CHANNEL_WHOLESALE, 'Wholesale'),
    (CHANNEL_OTHER, 'Other'),
]


class ItemModel(models.Model):
    """A single serialized unit of a product held in stock."""

    CONDITION_NEW = 'NEW'
    CONDITION_USED = 'USED'
    CONDITION_FOR_PARTS = 'FOR_PARTS'

    CONDITION_CHOICES = [
        (CONDITION_NEW, 'New'),
        (CONDITION_USED, 'Used'),
        (CONDITION_FOR_PARTS, 'For parts'),
    ]

    STATUS_IN_STOCK = 'IN_STOCK'
    STATUS_LISTED = 'LISTED'
    STATUS_RESERVED = 'RESERVED'
    STATUS_REPAIR = 'REPAIR'
    STATUS_SOLD = 'SOLD'

    STATUS_CHOICES = [
        (STATUS_IN_STOCK, 'In stock'),
        (STATUS_LISTED, 'Listed'),
        (STATUS_RESERVED, 'Reserved'),
        (STATUS_REPAIR, 'Repair'),
        (STATUS_SOLD, 'Sold'),
    ]

    SELLABLE_STATUSES = (STATUS_IN_STOCK, STATUS_LISTED)

    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='items',
        verbose_name='Product'
    )
    serial = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Serial',
        help_text='Serial number or internal stock code'
    )
    condition = models.CharField(
        max_length=20,
        choices=CONDITION_CHOICES,
        default=CONDITION_USED,
        verbose_name='Condition'
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_IN_STOCK,
        db_index=True,
        verbose_name='Status'
    )
    acquired_at = models.DateTimeField(
        default=timezone.now,
        verbose_name='Acquired at'
    )
    purchase_toman = models.PositiveBigIntegerField(
        verbose_name='Purchase price',
        help_text='Toman'
    )
    fees_toman = models.PositiveBigIntegerField(
        default=0,
        verbose_name='Fees',
        help_text='Toman'
    )
    refurb_toman = models.PositiveBigIntegerField(
        default=0,
        verbose_name='Refurbishment cost',
        help_text='Toman'
    )
    location = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        verbose_name='Location'
    )
    listed_channel = models.CharField(
        max_length=20,
        choices=CHANNEL_CHOICES,
        null=True,
        blank=True,
        verbose_name='Listed channel'
    )
    listed_price_toman = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name='Listed price',
        help_text='Toman'
    )
    listed_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Listed at'
    )
    sold_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Sold at'
    )
    sold_price_toman = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name='Sold price',
        help_text='Toman'
    )
    sale_channel = models.CharField(
        max_length=20,
        choices=CHANNEL_CHOICES,
        null=True,
        blank=True,
        verbose_name='Sale channel'
    )
    buyer_name = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name='Buyer name'
    )
    notes = models.TextField(
        null=True,
        blank=True,
        verbose_name='Notes'
    )
    images = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Image URLs'
    )
    purchase_line = models.ForeignKey(
        'purchases.PurchaseLineModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_items',
        verbose_name='Purchase line',
        help_text='Set when the item was received from a purchase'
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
        db_table = 'items'
        verbose_name = 'Item'
        verbose_name_plural = 'Items'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['product', 'status'], name='items_product_status_idx'),
            models.Index(fields=['status', 'acquired_at'], name='items_status_acquired_idx'),
        ]

    def __str__(self):
        return f"{self.serial} ({self.status})"

    @property
    def total_cost(self) -> int:
        return total_cost(self.purchase_toman, self.fees_toman, self.refurb_toman)

    @property
    def profit(self) -> int:
        return profit(self.sold_price_toman, self.purchase_toman, self.fees_toman, self.refurb_toman)


class InventoryMovementModel(models.Model):
    """Stock movement recorded against an item."""

    MOVEMENT_PURCHASE_IN = 'PURCHASE_IN'
    MOVEMENT_SALE_OUT = 'SALE_OUT'
    MOVEMENT_ADJUSTMENT = 'ADJUSTMENT'

    MOVEMENT_CHOICES = [
        (MOVEMENT_PURCHASE_IN, 'Purchase in'),
        (MOVEMENT_SALE_OUT, 'Sale out'),
        (MOVEMENT_ADJUSTMENT, 'Adjustment'),
    ]

    item = models.ForeignKey(
        ItemModel,
        on_delete=models.CASCADE,
        related_name='movements',
        verbose_name='Item'
    )
    movement = models.CharField(
        max_length=20,
        choices=MOVEMENT_CHOICES,
        verbose_name='Movement type'
    )
    qty = models.PositiveIntegerField(
        default=1,
        verbose_name='Quantity'
    )
    reference = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name='Reference',
        help_text='Sale or purchase reference'
    )
    notes = models.TextField(
        null=True,
        blank=True,
        verbose_name='Notes'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )

    class Meta:
        db_table = 'inventory_movements'
        verbose_name = 'Inventory Movement'
        verbose_name_plural = 'Inventory Movements'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['item', 'movement'], name='movements_item_type_idx'),
        ]

    def __str__(self):
        return f"{self.movement} x {self.qty} - Item {self.item_id}"

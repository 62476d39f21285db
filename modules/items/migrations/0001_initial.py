from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone

CHANNEL_CHOICES = [('DIRECT', 'Direct'), ('ONLINE', 'Online'), ('WHOLESALE', 'Wholesale'), ('OTHER', 'Other')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
        ('purchases', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ItemModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('serial', models.CharField(help_text='Serial number or internal stock code', max_length=100, unique=True, verbose_name='Serial')),
                ('condition', models.CharField(choices=[('NEW', 'New'), ('USED', 'Used'), ('FOR_PARTS', 'For parts')], default='USED', max_length=20, verbose_name='Condition')),
                ('status', models.CharField(choices=[('IN_STOCK', 'In stock'), ('LISTED', 'Listed'), ('RESERVED', 'Reserved'), ('REPAIR', 'Repair'), ('SOLD', 'Sold')], db_index=True, default='IN_STOCK', max_length=20, verbose_name='Status')),
                ('acquired_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Acquired at')),
                ('purchase_toman', models.PositiveBigIntegerField(help_text='Toman', verbose_name='Purchase price')),
                ('fees_toman', models.PositiveBigIntegerField(default=0, help_text='Toman', verbose_name='Fees')),
                ('refurb_toman', models.PositiveBigIntegerField(default=0, help_text='Toman', verbose_name='Refurbishment cost')),
                ('location', models.CharField(blank=True, max_length=100, null=True, verbose_name='Location')),
                ('listed_channel', models.CharField(blank=True, choices=CHANNEL_CHOICES, max_length=20, null=True, verbose_name='Listed channel')),
                ('listed_price_toman', models.PositiveBigIntegerField(blank=True, help_text='Toman', null=True, verbose_name='Listed price')),
                ('listed_at', models.DateTimeField(blank=True, null=True, verbose_name='Listed at')),
                ('sold_at', models.DateTimeField(blank=True, null=True, verbose_name='Sold at')),
                ('sold_price_toman', models.PositiveBigIntegerField(blank=True, help_text='Toman', null=True, verbose_name='Sold price')),
                ('sale_channel', models.CharField(blank=True, choices=CHANNEL_CHOICES, max_length=20, null=True, verbose_name='Sale channel')),
                ('buyer_name', models.CharField(blank=True, max_length=200, null=True, verbose_name='Buyer name')),
                ('notes', models.TextField(blank=True, null=True, verbose_name='Notes')),
                ('images', models.JSONField(blank=True, default=list, verbose_name='Image URLs')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='items', to='products.productmodel', verbose_name='Product')),
                ('purchase_line', models.ForeignKey(blank=True, help_text='Set when the item was received from a purchase', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_items', to='purchases.purchaselinemodel', verbose_name='Purchase line')),
            ],
            options={
                'verbose_name': 'Item',
                'verbose_name_plural': 'Items',
                'db_table': 'items',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['product', 'status'], name='items_product_status_idx'),
                    models.Index(fields=['status', 'acquired_at'], name='items_status_acquired_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='InventoryMovementModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('movement', models.CharField(choices=[('PURCHASE_IN', 'Purchase in'), ('SALE_OUT', 'Sale out'), ('ADJUSTMENT', 'Adjustment')], max_length=20, verbose_name='Movement type')),
                ('qty', models.PositiveIntegerField(default=1, verbose_name='Quantity')),
                ('reference', models.CharField(blank=True, help_text='Sale or purchase reference', max_length=200, null=True, verbose_name='Reference')),
                ('notes', models.TextField(blank=True, null=True, verbose_name='Notes')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='movements', to='items.itemmodel', verbose_name='Item')),
            ],
            options={
                'verbose_name': 'Inventory Movement',
                'verbose_name_plural': 'Inventory Movements',
                'db_table': 'inventory_movements',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['item', 'movement'], name='movements_item_type_idx')],
            },
        ),
    ]

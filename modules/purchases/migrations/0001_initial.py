from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PurchaseModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('supplier_name', models.CharField(max_length=200, verbose_name='Supplier name')),
                ('reference', models.CharField(blank=True, help_text='Supplier invoice or order number', max_length=200, null=True, verbose_name='Reference')),
                ('channel', models.CharField(blank=True, choices=[('DIRECT', 'Direct'), ('ONLINE', 'Online'), ('WHOLESALE', 'Wholesale'), ('OTHER', 'Other')], max_length=20, null=True, verbose_name='Channel')),
                ('ordered_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Ordered at')),
                ('total_toman', models.PositiveBigIntegerField(default=0, help_text='Sum of quantity x unit price plus fees, Toman', verbose_name='Total')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
            ],
            options={
                'verbose_name': 'Purchase',
                'verbose_name_plural': 'Purchases',
                'db_table': 'purchases',
                'ordering': ['-ordered_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='PurchaseLineModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(verbose_name='Quantity')),
                ('unit_toman', models.PositiveBigIntegerField(help_text='Toman', verbose_name='Unit price')),
                ('fees_toman', models.PositiveBigIntegerField(default=0, help_text='Line fees spread over the received units, Toman', verbose_name='Fees')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='purchase_lines', to='products.productmodel', verbose_name='Product')),
                ('purchase', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lines', to='purchases.purchasemodel', verbose_name='Purchase')),
            ],
            options={
                'verbose_name': 'Purchase Line',
                'verbose_name_plural': 'Purchase Lines',
                'db_table': 'purchase_lines',
                'ordering': ['id'],
            },
        ),
    ]

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('items', '0001_initial'),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SaleModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('customer_name', models.CharField(max_length=200, verbose_name='Customer name')),
                ('channel', models.CharField(choices=[('DIRECT', 'Direct'), ('ONLINE', 'Online'), ('WHOLESALE', 'Wholesale'), ('OTHER', 'Other')], max_length=20, verbose_name='Channel')),
                ('reference', models.CharField(blank=True, help_text='Invoice or order number', max_length=200, null=True, verbose_name='Reference')),
                ('ordered_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Ordered at')),
                ('total_toman', models.PositiveBigIntegerField(default=0, help_text='Sum of line prices, Toman', verbose_name='Total')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
            ],
            options={
                'verbose_name': 'Sale',
                'verbose_name_plural': 'Sales',
                'db_table': 'sales',
                'ordering': ['-ordered_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='SaleLineModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('unit_toman', models.PositiveBigIntegerField(help_text='Toman', verbose_name='Unit price')),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='sale_lines', to='items.itemmodel', verbose_name='Item')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='sale_lines', to='products.productmodel', verbose_name='Product')),
                ('sale', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lines', to='sales.salemodel', verbose_name='Sale')),
            ],
            options={
                'verbose_name': 'Sale Line',
                'verbose_name_plural': 'Sale Lines',
                'db_table': 'sale_lines',
                'ordering': ['id'],
            },
        ),
    ]

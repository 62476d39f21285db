from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CategoryModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=100, verbose_name='Name')),
                ('slug', models.SlugField(max_length=120, unique=True, verbose_name='Slug')),
                ('path', models.CharField(blank=True, db_index=True, default='', help_text='Ancestor slugs joined by "/", root first', max_length=1000, verbose_name='Path')),
                ('sort_order', models.IntegerField(default=0, help_text='Ordering among siblings', verbose_name='Sort order')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('parent', models.ForeignKey(blank=True, help_text='Null for root categories', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='children', to='categories.categorymodel', verbose_name='Parent category')),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'db_table': 'categories',
                'ordering': ['sort_order', 'name'],
                'indexes': [models.Index(fields=['parent', 'sort_order'], name='categories_parent_sort_idx')],
            },
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('categories', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='categorymodel',
            name='path',
            field=models.TextField(blank=True, default='', help_text='Ancestor slugs joined by "/", root first', verbose_name='Path'),
        ),
    ]

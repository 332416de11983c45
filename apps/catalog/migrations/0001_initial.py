# Generated manually for catalog app

import uuid
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('emoji', models.CharField(blank=True, max_length=16)),
                ('color', models.CharField(default='#6B7280', max_length=7, validators=[django.core.validators.RegexValidator(message='Color must be a hex value like #F59E0B', regex='^#[0-9A-Fa-f]{6}$')])),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'products',
                'ordering': ['name'],
            },
        ),
    ]

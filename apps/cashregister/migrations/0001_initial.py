# Generated manually for cashregister app

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CashRegisterDay',
            fields=[
                ('business_date', models.DateField(primary_key=True, serialize=False)),
                ('cash_sales', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('cash_payments', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('total_cash', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('credit_sales', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('cost_of_goods_sold', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('is_closed', models.BooleanField(default=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'cash_register_days',
                'ordering': ['-business_date'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('cash_sales__gte', 0), ('cash_payments__gte', 0), ('credit_sales__gte', 0), ('cost_of_goods_sold__gte', 0)), name='cash_day_totals_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CashOut',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('expected_cash', models.DecimalField(decimal_places=2, max_digits=12)),
                ('counted_cash', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('variance', models.DecimalField(decimal_places=2, max_digits=12)),
                ('amount_withdrawn', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('next_day_float', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('day', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='cash_out', to='cashregister.cashregisterday')),
            ],
            options={
                'db_table': 'cash_outs',
                'ordering': ['-created_at'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount_withdrawn__lte', models.F('counted_cash'))), name='cash_out_withdrawal_within_count'),
                ],
            },
        ),
    ]

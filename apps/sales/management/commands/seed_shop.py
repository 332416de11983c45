"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py seed_shop [--clear]

This creates:
- The operator account (operator / operator123)
- 4 products with production batches
- 3 customers, two of them with credit purchases
- Cash and credit sales for today
- One payment
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.cashregister.models import CashOut, CashRegisterDay
from apps.catalog.models import Product
from apps.catalog.services import create_product
from apps.configuration.services import load_business_config
from apps.core.dates import business_today
from apps.customers.models import Customer, Payment
from apps.customers.services import create_customer, record_payment, set_promised_payment_date
from apps.inventory.models import InventoryRecord, ProductionBatch
from apps.inventory.services import register_batch
from apps.sales.models import Sale
from apps.sales.services import process_sale


PRODUCTS = [
    # name, emoji, color, batches as (total_cost, units_produced)
    ('Japonés', '🥜', '#F59E0B', [(Decimal('100'), 20), (Decimal('126'), 18)]),
    ('Enchilado', '🌶️', '#EF4444', [(Decimal('90'), 19)]),
    ('Salado', '🧂', '#6B7280', [(Decimal('80'), 20)]),
    ('Garapiñado', '🍯', '#EAB308', [(Decimal('110'), 17)]),
]

CUSTOMERS = [
    ('Doña Lupita', '5512345678', 'Tienda de la esquina'),
    ('Memo', '5587654321', ''),
    ('Profe Chuy', '', 'Paga los viernes'),
]


class Command(BaseCommand):
    help = 'Create sample shop data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing ledger data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        self.create_operator()
        products = self.create_products()
        customers = self.create_customers()
        self.create_sales(products, customers)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Operator account:')
        self.stdout.write('  operator / operator123')

    def clear_data(self):
        """Clear all ledger data from the database."""
        CashOut.objects.all().delete()
        CashRegisterDay.objects.all().delete()
        Sale.objects.all().delete()
        Payment.objects.all().delete()
        Customer.objects.all().delete()
        ProductionBatch.objects.all().delete()
        InventoryRecord.objects.all().delete()
        Product.objects.all().delete()

    def create_operator(self):
        User = get_user_model()
        if not User.objects.filter(username='operator').exists():
            User.objects.create_user(username='operator', password='operator123')
            self.stdout.write('  Created operator account')

    def create_products(self):
        self.stdout.write('  Creating products and batches...')
        products = {}
        for name, emoji, color, batches in PRODUCTS:
            product = create_product(name=name, emoji=emoji, color=color)
            for total_cost, units in batches:
                register_batch(product_id=product.id, total_cost=total_cost, units_produced=units)
            products[name] = product
        return products

    def create_customers(self):
        self.stdout.write('  Creating customers...')
        return {
            name: create_customer(name=name, phone=phone, notes=notes)
            for name, phone, notes in CUSTOMERS
        }

    def create_sales(self, products, customers):
        self.stdout.write('  Creating sales and payments...')
        config = load_business_config()

        for name, quantity in [('Japonés', 3), ('Salado', 2), ('Enchilado', 1)]:
            process_sale(
                product_id=products[name].id,
                quantity=quantity,
                payment_mode='cash',
                config=config,
            )

        lupita = customers['Doña Lupita']
        memo = customers['Memo']
        process_sale(
            product_id=products['Japonés'].id,
            quantity=4,
            payment_mode='credit',
            config=config,
            customer_id=lupita.id,
        )
        process_sale(
            product_id=products['Garapiñado'].id,
            quantity=2,
            payment_mode='credit',
            config=config,
            customer_id=memo.id,
            override_price=Decimal('12.00'),
        )

        record_payment(customer_id=lupita.id, amount=Decimal('15'), notes='Abono')
        set_promised_payment_date(
            customer_id=memo.id,
            promised_date=business_today() - timedelta(days=2),
        )

"""
Tests for the customer directory, debt ledger and account statements.
"""

import pytest
from datetime import timedelta
from decimal import Decimal

from apps.cashregister.services import close_day, get_day
from apps.configuration.services import load_business_config
from apps.core.dates import business_today
from apps.core.exceptions import (
    DayClosedError,
    ExceedsBalanceError,
    HasOutstandingBalanceError,
    InvalidInputError,
    NotFoundError,
)
from apps.customers.models import Customer, Payment
from apps.customers.services import (
    create_customer,
    update_customer,
    delete_customer,
    set_promised_payment_date,
    charge_debt,
    record_payment,
    reconcile_balance,
    total_outstanding,
    list_payments,
    list_debtors,
    get_account_statement,
)
from apps.sales.services import process_sale


@pytest.mark.django_db
class TestCustomerDirectory:
    """Tests for create, update and delete."""

    def test_create_customer(self):
        customer = create_customer(name='  Memo  ', phone=' 551 ')

        assert customer.name == 'Memo'
        assert customer.phone == '551'
        assert customer.balance == Decimal('0.00')

    def test_create_requires_name(self):
        with pytest.raises(InvalidInputError):
            create_customer(name='')

    def test_update_customer(self, customer):
        updated = update_customer(customer_id=customer.id, notes='Vive en la esquina')

        assert updated.notes == 'Vive en la esquina'
        assert updated.name == 'Don Pepe'

    def test_delete_customer_without_debt(self, customer):
        delete_customer(customer_id=customer.id)

        assert not Customer.objects.filter(id=customer.id).exists()

    def test_delete_customer_with_debt_rejected(self, debtor):
        with pytest.raises(HasOutstandingBalanceError):
            delete_customer(customer_id=debtor.id)

        assert Customer.objects.filter(id=debtor.id).exists()

    def test_deleted_customer_keeps_payment_history(self, debtor):
        record_payment(customer_id=debtor.id, amount=Decimal('50'))

        delete_customer(customer_id=debtor.id)

        payment = Payment.objects.get()
        assert payment.customer is None
        assert payment.customer_name == 'Doña Lupita'

    def test_set_and_clear_promise(self, debtor):
        promised = business_today() + timedelta(days=3)

        assert set_promised_payment_date(
            customer_id=debtor.id, promised_date=promised
        ).promised_payment_date == promised
        assert set_promised_payment_date(
            customer_id=debtor.id, promised_date=None
        ).promised_payment_date is None

    def test_unknown_customer(self, db):
        with pytest.raises(NotFoundError):
            delete_customer(customer_id='00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
class TestDebtLedger:
    """Tests for charge_debt() and record_payment()."""

    def test_charge_debt(self, customer):
        charge_debt(customer_id=customer.id, amount=Decimal('12.50'))
        customer = charge_debt(customer_id=customer.id, amount=Decimal('7.50'))

        assert customer.balance == Decimal('20.00')

    def test_payment_then_overpayment(self, debtor):
        record_payment(customer_id=debtor.id, amount=Decimal('30'))
        debtor.refresh_from_db()
        assert debtor.balance == Decimal('20.00')

        with pytest.raises(ExceedsBalanceError) as excinfo:
            record_payment(customer_id=debtor.id, amount=Decimal('30'))

        assert excinfo.value.balance == Decimal('20.00')
        debtor.refresh_from_db()
        assert debtor.balance == Decimal('20.00')
        assert Payment.objects.count() == 1

    def test_payment_of_full_balance(self, debtor):
        record_payment(customer_id=debtor.id, amount=Decimal('50'))

        debtor.refresh_from_db()
        assert debtor.balance == Decimal('0.00')

    @pytest.mark.parametrize('amount', [Decimal('0'), Decimal('-5')])
    def test_non_positive_payment_rejected(self, debtor, amount):
        with pytest.raises(InvalidInputError):
            record_payment(customer_id=debtor.id, amount=amount)

    def test_payment_posts_to_cash_register(self, debtor):
        payment = record_payment(customer_id=debtor.id, amount=Decimal('30'), notes='Abono')

        day = get_day()
        assert day.cash_payments == Decimal('30.00')
        assert day.total_cash == Decimal('30.00')
        assert payment.business_date == day.business_date

    def test_payment_on_closed_day_rejected(self, debtor):
        close_day(counted_cash=Decimal('0'), amount_withdrawn=Decimal('0'))

        with pytest.raises(DayClosedError):
            record_payment(customer_id=debtor.id, amount=Decimal('10'))

        debtor.refresh_from_db()
        assert debtor.balance == Decimal('50.00')
        assert not Payment.objects.exists()

    def test_total_outstanding(self, debtor, customer):
        charge_debt(customer_id=customer.id, amount=Decimal('15.25'))

        assert total_outstanding() == Decimal('65.25')

    def test_list_payments_newest_first(self, debtor):
        first = record_payment(customer_id=debtor.id, amount=Decimal('10'))
        second = record_payment(customer_id=debtor.id, amount=Decimal('5'))

        assert [p.id for p in list_payments(customer_id=debtor.id)] == [second.id, first.id]


@pytest.mark.django_db
class TestDebtors:
    """Tests for list_debtors()."""

    def test_overdue_first_then_by_balance(self, db):
        today = business_today()
        big = Customer.objects.create(name='Big', balance=Decimal('200'))
        small_overdue = Customer.objects.create(
            name='Late', balance=Decimal('10'), promised_payment_date=today - timedelta(days=2)
        )
        medium = Customer.objects.create(
            name='Medium', balance=Decimal('80'), promised_payment_date=today + timedelta(days=1)
        )
        Customer.objects.create(name='Paid up')

        debtors = list_debtors(today)

        assert [c.id for c in debtors] == [small_overdue.id, big.id, medium.id]
        assert debtors[0].is_overdue is True
        assert debtors[0].days_overdue == 2
        assert debtors[1].days_overdue is None

    def test_promise_due_today_is_not_overdue(self, debtor):
        today = business_today()
        set_promised_payment_date(customer_id=debtor.id, promised_date=today)

        assert list_debtors(today)[0].is_overdue is False


@pytest.mark.django_db
class TestReconcileAndStatement:
    """Tests for reconcile_balance() and get_account_statement()."""

    def _credit_sale(self, product, customer, quantity):
        return process_sale(
            product_id=product.id,
            quantity=quantity,
            payment_mode='credit',
            config=load_business_config(),
            customer_id=customer.id,
        )

    def test_reconcile_repairs_drifted_balance(self, customer, stocked_product):
        self._credit_sale(stocked_product, customer, 3)
        record_payment(customer_id=customer.id, amount=Decimal('10'))
        Customer.objects.filter(id=customer.id).update(balance=Decimal('99.99'))

        customer = reconcile_balance(customer_id=customer.id)

        assert customer.balance == Decimal('20.00')

    def test_statement_running_balance_newest_first(self, customer, stocked_product):
        self._credit_sale(stocked_product, customer, 2)
        record_payment(customer_id=customer.id, amount=Decimal('5'))
        self._credit_sale(stocked_product, customer, 1)

        lines = get_account_statement(customer_id=customer.id)

        assert [line.kind for line in lines] == ['charge', 'payment', 'charge']
        assert [line.running_balance for line in lines] == [
            Decimal('25.00'), Decimal('15.00'), Decimal('20.00')
        ]
        assert lines[-1].description == 'Sale: 2x Cacahuate Japonés'

    def test_statement_for_customer_without_history(self, customer):
        assert get_account_statement(customer_id=customer.id) == []

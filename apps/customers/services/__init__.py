"""
Customers app services layer.

Balance changes lock the customer row; payments also post to the cash
register in the same transaction.
"""

from .customer_management import (
    get_customer,
    list_customers,
    create_customer,
    update_customer,
    set_promised_payment_date,
    delete_customer,
)
from .debt_ledger import (
    charge_debt,
    record_payment,
    reconcile_balance,
    total_outstanding,
    list_payments,
    list_debtors,
)
from .statements import StatementLine, get_account_statement


__all__ = [
    # Directory
    'get_customer',
    'list_customers',
    'create_customer',
    'update_customer',
    'set_promised_payment_date',
    'delete_customer',

    # Debt ledger
    'charge_debt',
    'record_payment',
    'reconcile_balance',
    'total_outstanding',
    'list_payments',
    'list_debtors',

    # Statements
    'StatementLine',
    'get_account_statement',
]

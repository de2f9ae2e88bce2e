from django.db import models


class Currency(models.TextChoices):
    USD = 'USD', 'US Dollar'
    INR = 'INR', 'Indian Rupee'


# All rates are expressed relative to this currency
BASE_CURRENCY = Currency.USD

CURRENCY_SYMBOLS = {
    Currency.USD: '$',
    Currency.INR: '₹',
}


def currency_symbol(code):
    """Return the display symbol for a currency code, or the code itself."""
    return CURRENCY_SYMBOLS.get(code, code)

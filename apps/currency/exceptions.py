"""
Domain exceptions for currency app.

Exception Hierarchy:
    CurrencyServiceError (base)
    ├── RateFetchError
    └── UnsupportedCurrencyError

RateFetchError never reaches API clients: the converter catches it and
falls back to the static rate table.
"""


class CurrencyServiceError(Exception):
    """Base exception for currency service errors."""
    pass


class RateFetchError(CurrencyServiceError):
    """Raised when the exchange rate API cannot be read."""
    pass


class UnsupportedCurrencyError(CurrencyServiceError):
    """Raised when a conversion involves an unknown currency code."""
    pass

"""
Currency Services Module
=========================

This module provides currency conversion backed by a time-windowed cache of
exchange rates.

Classes:
    RateCache: Holds the last fetched rate table and its fetch time.
    ExchangeRateClient: Reads USD-relative rates from the exchange rate API.
    CurrencyConverter: Converts amounts, refreshing rates when stale.

Example:
    Converting a subscription amount for display::

        from apps.currency.services import get_converter

        converter = get_converter()
        amount_inr = converter.convert(Decimal('9.99'), 'USD', 'INR')

Note:
    Conversions never fail because of the network. If the API cannot be
    read, the fallback table from ``settings.EXCHANGE_RATE_FALLBACK`` is
    used for that call and the next call tries the API again.
"""

import logging
import time
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

import requests
from django.conf import settings

from .currencies import Currency, BASE_CURRENCY
from .exceptions import RateFetchError, UnsupportedCurrencyError

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


class RateCache:
    """
    In-memory cache for one exchange rate table.

    The table is considered fresh while its age is strictly less than
    ``ttl_seconds``. Timestamps come from the caller so that tests can
    drive the clock.
    """

    def __init__(self, ttl_seconds=3600):
        self.ttl_seconds = ttl_seconds
        self._table = None
        self._fetched_at = None

    def get(self, now):
        """Return the cached table, or None if empty or stale."""
        if self._table is None:
            return None
        if now - self._fetched_at >= self.ttl_seconds:
            return None
        return self._table

    def put(self, table, now):
        self._table = dict(table)
        self._fetched_at = now

    def clear(self):
        self._table = None
        self._fetched_at = None

    @property
    def fetched_at(self):
        return self._fetched_at


class ExchangeRateClient:
    """
    HTTP client for the exchange rate API.

    The API answers ``GET <url>`` with a JSON object whose ``rates`` key
    maps currency codes to their rate against USD, e.g.::

        {"base": "USD", "rates": {"USD": 1, "INR": 83.12, ...}}
    """

    def __init__(self, url, timeout=5):
        self.url = url
        self.timeout = timeout

    def fetch(self):
        """
        Fetch a fresh rate table for every supported currency.

        Returns:
            dict: Currency code -> Decimal rate relative to USD.
            USD is always exactly 1.

        Raises:
            RateFetchError: On transport errors, HTTP errors, or a
                response that doesn't contain every supported currency.
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise RateFetchError(f"Exchange rate request failed: {e}") from e
        except ValueError as e:
            raise RateFetchError("Exchange rate response is not valid JSON") from e

        rates = data.get('rates') if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise RateFetchError("Exchange rate response has no 'rates' mapping")

        table = {BASE_CURRENCY.value: Decimal('1')}
        for code in Currency.values:
            if code == BASE_CURRENCY:
                continue
            try:
                rate = Decimal(str(rates[code]))
            except KeyError:
                raise RateFetchError(f"Exchange rate for {code} missing from response")
            except (InvalidOperation, TypeError, ValueError):
                raise RateFetchError(f"Exchange rate for {code} is not a number")
            # json accepts NaN and Infinity
            if not rate.is_finite() or rate <= 0:
                raise RateFetchError(f"Exchange rate for {code} must be a finite positive number")
            table[code] = rate

        return table


class CurrencyConverter:
    """
    Converts amounts between supported currencies.

    Rates are fetched lazily and reused for the cache window. Two
    conversions that start before either fetch completes may both fetch;
    the second simply overwrites the cache with an equivalent table.

    Args:
        client (ExchangeRateClient): Source of fresh rate tables.
        cache (RateCache): Holder of the last good table.
        fallback_rates (dict): Table used when the client fails.
        clock (callable): Returns the current time in seconds.
    """

    def __init__(self, client, cache, fallback_rates, clock=time.monotonic):
        self.client = client
        self.cache = cache
        self.fallback_rates = {code: Decimal(str(rate)) for code, rate in fallback_rates.items()}
        self.clock = clock

    def get_rates(self):
        """
        Return the current rate table.

        Returns:
            tuple: ``(table, source)`` where source is one of
            ``'cache'``, ``'live'`` or ``'fallback'``.
        """
        now = self.clock()
        table = self.cache.get(now)
        if table is not None:
            return table, 'cache'

        try:
            table = self.client.fetch()
        except RateFetchError as e:
            logger.warning("Failed to fetch exchange rates, using fallback table: %s", e)
            return dict(self.fallback_rates), 'fallback'

        self.cache.put(table, now)
        logger.info("Exchange rates refreshed: %s", table)
        return table, 'live'

    def convert(self, amount, from_currency, to_currency):
        """
        Convert an amount from one currency to another.

        Args:
            amount (Decimal): Amount in ``from_currency``.
            from_currency (str): Source currency code.
            to_currency (str): Target currency code.

        Returns:
            Decimal: Converted amount rounded to 2 decimal places. When both
            currencies are the same, ``amount`` is returned untouched and no
            rates are fetched.

        Raises:
            UnsupportedCurrencyError: If either code is not supported.
        """
        if from_currency == to_currency:
            return amount

        for code in (from_currency, to_currency):
            if code not in Currency.values:
                raise UnsupportedCurrencyError(f"Unsupported currency: {code}")

        rates, _ = self.get_rates()
        amount = Decimal(str(amount))

        usd_amount = amount if from_currency == BASE_CURRENCY else amount / rates[from_currency]
        converted = usd_amount if to_currency == BASE_CURRENCY else usd_amount * rates[to_currency]

        return converted.quantize(CENT, rounding=ROUND_HALF_UP)


_converter = None


def get_converter():
    """Return the process-wide converter, building it from settings on first use."""
    global _converter
    if _converter is None:
        _converter = CurrencyConverter(
            client=ExchangeRateClient(
                url=settings.EXCHANGE_RATE_API_URL,
                timeout=settings.EXCHANGE_RATE_TIMEOUT,
            ),
            cache=RateCache(ttl_seconds=settings.EXCHANGE_RATE_CACHE_SECONDS),
            fallback_rates=settings.EXCHANGE_RATE_FALLBACK,
        )
    return _converter


def reset_converter():
    """Drop the process-wide converter so the next call rebuilds it."""
    global _converter
    _converter = None

"""
Split allocation service.

Divides a fraction of a subscription's amount (by default one half: the
owner covers their own half) evenly among friends, to the cent.

The algorithm works in Decimal so the shares always reconcile exactly:
    1. ``split_total = round(total * fraction, 2)``
    2. ``base = round(split_total / n, 2)``
    3. Every participant gets ``base``
    4. ``remainder = split_total - base * n`` (a whole number of cents,
       possibly negative) is added to the last share

Example:
    100.00 split among 3 friends::

        >>> SplitAllocator().allocate(Decimal('100.00'), 3)
        {'shares': [Decimal('16.67'), Decimal('16.67'), Decimal('16.66')],
         'is_valid': True, 'error': None}
"""

from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings

CENT = Decimal('0.01')


def _to_cents(value):
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _as_decimal(value):
    # Floats go through str() so 0.1 stays 0.1
    return value if isinstance(value, Decimal) else Decimal(str(value))


class SplitAllocator:
    """
    Even split of a subscription amount among participants.

    Args:
        fraction (Decimal, optional): Portion of the total that is divided
            among participants. Defaults to
            ``settings.SUBSCRIPTION_SPLIT_FRACTION``.
        tolerance (Decimal, optional): Allowed difference used by
            ``is_balanced``. Defaults to
            ``settings.SUBSCRIPTION_SPLIT_TOLERANCE``.

    Raises:
        ValueError: If fraction is not in (0, 1].
    """

    def __init__(self, fraction=None, tolerance=None):
        if fraction is None:
            fraction = settings.SUBSCRIPTION_SPLIT_FRACTION
        if tolerance is None:
            tolerance = settings.SUBSCRIPTION_SPLIT_TOLERANCE

        self.fraction = _as_decimal(fraction)
        self.tolerance = _as_decimal(tolerance)

        if not (Decimal('0') < self.fraction <= Decimal('1')):
            raise ValueError(f"Split fraction must be in (0, 1], got {self.fraction}")

    def split_total(self, total):
        """Amount that participants cover together, rounded to the cent."""
        return _to_cents(_as_decimal(total) * self.fraction)

    def allocate(self, total, participant_count):
        """
        Compute one share per participant.

        Invalid input never raises; the result carries the reason instead.

        Args:
            total (Decimal): Full subscription amount.
            participant_count (int): Number of friends sharing the cost.

        Returns:
            dict: A dictionary containing:
                - shares (list[Decimal]): One amount per participant.
                - is_valid (bool): False when the input was rejected.
                - error (str | None): Human-readable reason when invalid.
        """
        if participant_count <= 0:
            return {
                'shares': [],
                'is_valid': False,
                'error': 'Number of participants must be greater than 0',
            }

        total = _as_decimal(total)
        if total <= 0:
            return {
                'shares': [],
                'is_valid': False,
                'error': 'Total amount must be greater than 0',
            }

        split_total = self.split_total(total)
        base_share = _to_cents(split_total / participant_count)
        shares = [base_share] * participant_count

        remainder = split_total - base_share * participant_count
        if remainder:
            shares[-1] = shares[-1] + remainder

        return {
            'shares': shares,
            'is_valid': True,
            'error': None,
        }

    def is_balanced(self, total, shares):
        """
        Check that (possibly hand-edited) shares add up to the split amount.

        Shares are compared against the unrounded ``total * fraction``, so
        4.99 balances a 9.99 total whose true half is 4.995.

        Returns:
            bool: False for an empty share list.
        """
        if not shares:
            return False

        actual = sum((_as_decimal(share) for share in shares), Decimal('0'))
        expected = _as_decimal(total) * self.fraction
        return abs(actual - expected) <= self.tolerance

    @staticmethod
    def reset():
        """Empty allocation for when no subscription is selected."""
        return {
            'shares': [],
            'is_valid': True,
            'error': None,
        }

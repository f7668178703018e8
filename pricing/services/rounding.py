from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import logging

from pricing.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

# Every monetary amount has exactly two fractional digits
CENTS = Decimal('0.01')


def to_decimal(value):
    """Convert int, str, float or Decimal to Decimal (floats go through str)."""
    if isinstance(value, bool):
        logger.warning(f"Rejected amount {value!r}: not a number")
        raise InvalidInputError('Amount must be a number, got %(value)r', params={'value': value})
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except InvalidOperation:
            logger.warning(f"Rejected amount {value!r}: not a valid number")
            raise InvalidInputError('Amount %(value)r is not a valid number', params={'value': value})
    if not value.is_finite():
        logger.warning(f"Rejected amount {value!r}: not finite")
        raise InvalidInputError('Amount %(value)r is not a finite number', params={'value': value})
    return value


def round_money(value):
    """Round to cents using ROUND_HALF_UP (0.005 -> 0.01)."""
    amount = to_decimal(value)
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context can hold at cent precision
        logger.warning(f"Rejected amount {amount}: too large to round to cents")
        raise InvalidInputError(
            'Amount %(value)s is too large to price',
            params={'value': amount},
        )

"""
Discount rules for lesson invoices.

A discount is a plain value: its kind plus the percentage it takes off (and,
for bulk purchases, the price it has to reach first). Discounts are applied
in the order the caller lists them, each one working on the price left over
by the previous one. Because the bulk-purchase check looks at that running
price, moving it before or after another discount can change the total.
"""

from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Iterable, Optional

from django.db import models

from pricing.conf import PricingConfig, get_pricing_config
from pricing.exceptions import InvalidInputError
from .rounding import round_money, to_decimal

logger = logging.getLogger(__name__)

HUNDRED = Decimal('100')


class DiscountKind(models.TextChoices):
    FIRST_PURCHASE = 'first_purchase', 'First purchase'
    BULK_PURCHASE = 'bulk_purchase', 'Bulk purchase'
    SEASONAL = 'seasonal', 'Seasonal discount'
    FAMILY = 'family', 'Family discount'


def _parse_kind(kind):
    try:
        return DiscountKind(kind)
    except ValueError:
        logger.warning(f"Rejected unknown discount kind {kind!r}")
        raise InvalidInputError('Unknown discount kind %(kind)r', params={'kind': kind})


def percentage_off(price: Decimal, percentage: Decimal) -> Decimal:
    """Take ``percentage`` percent off ``price``. Not rounded."""
    return price - price * (percentage / HUNDRED)


@dataclass(frozen=True)
class Discount:
    kind: DiscountKind
    percentage: Decimal
    threshold: Optional[Decimal] = None

    def __post_init__(self):
        # Frozen, so normalise through object.__setattr__
        object.__setattr__(self, 'kind', _parse_kind(self.kind))
        object.__setattr__(self, 'percentage', to_decimal(self.percentage))
        if self.threshold is not None:
            object.__setattr__(self, 'threshold', to_decimal(self.threshold))

        if not 0 <= self.percentage <= HUNDRED:
            logger.warning(f"Rejected {self.kind.label} percentage {self.percentage}: outside 0-100")
            raise InvalidInputError(
                'Discount percentage must be between 0 and 100, got %(percentage)s',
                params={'percentage': self.percentage},
            )
        if self.kind == DiscountKind.BULK_PURCHASE and self.threshold is None:
            logger.warning("Rejected bulk purchase discount: no threshold")
            raise InvalidInputError('Bulk purchase discount needs a threshold')

    def applies_to(self, price: Decimal) -> bool:
        if self.threshold is None:
            return True
        return price >= self.threshold

    def apply(self, price) -> Decimal:
        price = to_decimal(price)
        if not self.applies_to(price):
            return price
        return percentage_off(price, self.percentage)

    @classmethod
    def first_purchase(cls, config: Optional[PricingConfig] = None):
        config = config or get_pricing_config()
        return cls(DiscountKind.FIRST_PURCHASE, config.first_purchase_percent)

    @classmethod
    def bulk_purchase(cls, config: Optional[PricingConfig] = None):
        config = config or get_pricing_config()
        return cls(
            DiscountKind.BULK_PURCHASE,
            config.bulk_purchase_percent,
            threshold=config.bulk_purchase_threshold,
        )

    @classmethod
    def seasonal(cls, config: Optional[PricingConfig] = None):
        config = config or get_pricing_config()
        return cls(DiscountKind.SEASONAL, config.seasonal_percent)

    @classmethod
    def family(cls, config: Optional[PricingConfig] = None):
        config = config or get_pricing_config()
        return cls(DiscountKind.FAMILY, config.family_percent)

    @classmethod
    def for_kind(cls, kind, config: Optional[PricingConfig] = None):
        """Build a discount from a DiscountKind or its string value."""
        kind = _parse_kind(kind)
        builders = {
            DiscountKind.FIRST_PURCHASE: cls.first_purchase,
            DiscountKind.BULK_PURCHASE: cls.bulk_purchase,
            DiscountKind.SEASONAL: cls.seasonal,
            DiscountKind.FAMILY: cls.family,
        }
        return builders[kind](config)


def apply_discounts(price, discounts: Iterable[Discount]) -> Decimal:
    """
    Apply ``discounts`` to ``price`` one after another, then round once.

    Intermediate prices keep full precision; only the final result is
    rounded to cents. No discounts means the price comes back rounded.
    """
    current = to_decimal(price)
    for discount in discounts:
        discounted = discount.apply(current)
        logger.debug(f"{discount.kind.label}: {current} -> {discounted}")
        current = discounted
    return round_money(current)

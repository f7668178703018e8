"""
Invoice pricing for single lessons, lesson packages and exams.

Each invoice is an immutable value: build it with its quantities, then ask
for ``undiscounted_price()`` or ``total_price()`` as often as needed. All
results are Decimal amounts rounded to cents.
"""

from dataclasses import dataclass, field
from decimal import Decimal
import logging
from typing import Tuple

from pricing.conf import PricingConfig, get_pricing_config
from pricing.exceptions import InvalidInputError
from .discounts import Discount, apply_discounts
from .rounding import round_money, to_decimal

logger = logging.getLogger(__name__)

HUNDRED = Decimal('100')


def _check_count(name, value):
    # bool is an int subclass, but True lessons is not a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning(f"Rejected {name}={value!r}: not a whole number")
        raise InvalidInputError(
            '%(name)s must be a whole number, got %(value)r',
            params={'name': name, 'value': value},
        )
    if value < 0:
        logger.warning(f"Rejected {name}={value}: negative")
        raise InvalidInputError(
            '%(name)s cannot be negative, got %(value)s',
            params={'name': name, 'value': value},
        )
    return value


def _check_amount(name, value):
    amount = to_decimal(value)
    if amount < 0:
        logger.warning(f"Rejected {name}={amount}: negative")
        raise InvalidInputError(
            '%(name)s cannot be negative, got %(value)s',
            params={'name': name, 'value': amount},
        )
    return amount


def _check_discounts(discounts, config=None):
    """Snapshot the discount list, building Discount values from kind names."""
    checked = []
    for item in discounts:
        if isinstance(item, Discount):
            checked.append(item)
        elif isinstance(item, str):
            checked.append(Discount.for_kind(item, config))
        else:
            logger.warning(f"Rejected discount {item!r}: not a Discount or discount kind")
            raise InvalidInputError(
                'Discounts must be Discount values or discount kinds, got %(value)r',
                params={'value': item},
            )
    return tuple(checked)


def base_price(quantity, unit_price) -> Decimal:
    """Price before discounts: ``unit_price * quantity`` rounded to cents."""
    quantity = _check_count('quantity', quantity)
    unit_price = _check_amount('unit_price', unit_price)
    return round_money(unit_price * quantity)


@dataclass(frozen=True)
class Package:
    """A bundle of lessons priced at the configured per-lesson rate."""

    lesson_count: int
    config: PricingConfig = field(default_factory=get_pricing_config, repr=False)

    def __post_init__(self):
        _check_count('lesson_count', self.lesson_count)

    def unit_price(self) -> Decimal:
        return round_money(self.config.lesson_rate * self.lesson_count)


@dataclass(frozen=True)
class LessonInvoice:
    product_name = 'Single lessons'

    unit_price: Decimal
    quantity: int
    discounts: Tuple[Discount, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'unit_price', _check_amount('unit_price', self.unit_price))
        object.__setattr__(self, 'discounts', _check_discounts(self.discounts))
        _check_count('quantity', self.quantity)

    def undiscounted_price(self) -> Decimal:
        return base_price(self.quantity, self.unit_price)

    def total_price(self) -> Decimal:
        total = apply_discounts(self.undiscounted_price(), self.discounts)
        logger.debug(f"{self.product_name}: {self.quantity} x {self.unit_price} -> {total}")
        return total


@dataclass(frozen=True)
class LessonPackageInvoice:
    product_name = 'Lesson package'

    package: Package
    package_count: int
    discounts: Tuple[Discount, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'discounts', _check_discounts(self.discounts))
        _check_count('package_count', self.package_count)

    @property
    def unit_price(self) -> Decimal:
        return self.package.unit_price()

    def undiscounted_price(self) -> Decimal:
        return base_price(self.package_count, self.unit_price)

    def total_price(self) -> Decimal:
        total = apply_discounts(self.undiscounted_price(), self.discounts)
        logger.debug(
            f"{self.product_name}: {self.package_count} x {self.package.lesson_count} lessons -> {total}"
        )
        return total


@dataclass(frozen=True)
class ExamInvoice:
    """
    Exam bookings. Exams are never discounted; during busy periods (long
    waiting lists) every exam carries the configured surcharge instead.
    """

    product_name = 'Exam'

    exam_count: int
    is_busy_period: bool = False
    # Accepted so callers can pass the same arguments to every invoice; ignored
    discounts: Tuple[Discount, ...] = ()
    config: PricingConfig = field(default_factory=get_pricing_config, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'discounts', _check_discounts(self.discounts, self.config))
        _check_count('exam_count', self.exam_count)
        if not isinstance(self.is_busy_period, bool):
            logger.warning(f"Rejected is_busy_period={self.is_busy_period!r}: not a bool")
            raise InvalidInputError(
                'is_busy_period must be True or False, got %(value)r',
                params={'value': self.is_busy_period},
            )
        if self.discounts:
            logger.debug(f"Ignoring {len(self.discounts)} discount(s) on exam invoice")

    def surcharge_multiplier(self) -> Decimal:
        if not self.is_busy_period:
            return Decimal('1')
        return 1 + self.config.exam_surcharge_percent / HUNDRED

    def undiscounted_price(self) -> Decimal:
        return round_money(self.config.exam_price * self.exam_count * self.surcharge_multiplier())

    def total_price(self) -> Decimal:
        total = self.undiscounted_price()
        logger.debug(f"{self.product_name}: {self.exam_count} (busy={self.is_busy_period}) -> {total}")
        return total

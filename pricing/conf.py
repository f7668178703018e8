"""
Pricing configuration.

Rates and discount percentages come from the PRICING dict in Django settings,
overlaid on the defaults below. Components take an optional ``config``
argument so tests can price with different rates.
"""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


DEFAULTS = {
    'LESSON_RATE': '55.00',
    'EXAM_PRICE': '150.00',
    'EXAM_SURCHARGE_PERCENT': '10',
    'FIRST_PURCHASE_PERCENT': '3',
    'BULK_PURCHASE_PERCENT': '5',
    'BULK_PURCHASE_THRESHOLD': '500.00',
    'SEASONAL_PERCENT': '10',
    'FAMILY_PERCENT': '15',
}


@dataclass(frozen=True)
class PricingConfig:
    lesson_rate: Decimal
    exam_price: Decimal
    exam_surcharge_percent: Decimal
    first_purchase_percent: Decimal
    bulk_purchase_percent: Decimal
    bulk_purchase_threshold: Decimal
    seasonal_percent: Decimal
    family_percent: Decimal

    @classmethod
    def from_dict(cls, values):
        """Build a config from a PRICING-style dict, filling gaps from DEFAULTS."""
        unknown = set(values) - set(DEFAULTS)
        if unknown:
            raise ImproperlyConfigured(f"Unknown PRICING keys: {', '.join(sorted(unknown))}")

        merged = {**DEFAULTS, **values}
        kwargs = {}
        for field in fields(cls):
            key = field.name.upper()
            raw = merged[key]
            try:
                value = Decimal(str(raw))
            except InvalidOperation:
                raise ImproperlyConfigured(f"PRICING['{key}'] must be a decimal number, got {raw!r}")
            if not value.is_finite() or value < 0:
                raise ImproperlyConfigured(f"PRICING['{key}'] must be a non-negative number, got {raw!r}")
            kwargs[field.name] = value
        return cls(**kwargs)


def get_pricing_config():
    """Read the current PRICING setting. Not cached, so settings overrides apply."""
    return PricingConfig.from_dict(getattr(settings, 'PRICING', {}))

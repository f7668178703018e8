"""
Shared test fixtures and configuration for pytest.

This file is automatically loaded by pytest and provides fixtures
available to all test files.
"""

import pytest
from decimal import Decimal

from pricing.conf import PricingConfig
from pricing.services import Discount


@pytest.fixture
def pricing_config():
    """The standard academy rates, independent of the settings module."""
    return PricingConfig.from_dict({})


@pytest.fixture
def standard_discounts(pricing_config):
    """First purchase, then bulk purchase, then family discount."""
    return [
        Discount.first_purchase(pricing_config),
        Discount.bulk_purchase(pricing_config),
        Discount.family(pricing_config),
    ]


@pytest.fixture
def discounted_rates():
    """Config double with a cheaper lesson rate and a lower bulk threshold."""
    return PricingConfig.from_dict({
        "LESSON_RATE": "40.00",
        "EXAM_PRICE": "100.00",
        "EXAM_SURCHARGE_PERCENT": "25",
        "BULK_PURCHASE_THRESHOLD": Decimal("100.00"),
    })

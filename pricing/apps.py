import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


# Loads configuration for the pricing app when project is run
class PricingAppConfig(AppConfig):
    name = "pricing"
    verbose_name = "Lesson pricing"

    def ready(self):
        # Fail at startup on a broken PRICING setting instead of on first invoice
        from pricing.conf import get_pricing_config

        config = get_pricing_config()
        logger.debug(f"Pricing loaded: lesson rate {config.lesson_rate}, exam price {config.exam_price}")

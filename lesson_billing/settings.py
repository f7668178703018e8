"""
Django settings for the lesson_billing project.

Only the pricing app is installed; the project has no database, views or
URLs. Pricing constants live in the PRICING dict below and are read through
pricing.conf.get_pricing_config().
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-lesson-billing-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'pricing',
]

DATABASES = {}

USE_TZ = True

# Pricing constants (strings so they parse exactly into Decimal)
PRICING = {
    'LESSON_RATE': '55.00',
    'EXAM_PRICE': '150.00',
    'EXAM_SURCHARGE_PERCENT': '10',
    'FIRST_PURCHASE_PERCENT': '3',
    'BULK_PURCHASE_PERCENT': '5',
    'BULK_PURCHASE_THRESHOLD': '500.00',
    'SEASONAL_PERCENT': '10',
    'FAMILY_PERCENT': '15',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'pricing': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': True,
        },
    },
}

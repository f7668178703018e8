"""
Management command that prices a sample set of invoices and prints the totals.

Prices a single-lesson invoice, a lesson-package invoice and an exam invoice
with the given quantities and discounts, so rate or discount changes in
settings can be checked by hand.

Usage:
    python manage.py price_invoices
    python manage.py price_invoices --lessons 4 --discount seasonal --discount bulk_purchase
"""
import argparse

from django.core.management.base import BaseCommand, CommandError

from pricing.conf import get_pricing_config
from pricing.exceptions import InvalidInputError
from pricing.services import (
    Discount,
    DiscountKind,
    ExamInvoice,
    LessonInvoice,
    LessonPackageInvoice,
    Package,
)

DEFAULT_DISCOUNTS = [
    DiscountKind.FIRST_PURCHASE.value,
    DiscountKind.BULK_PURCHASE.value,
    DiscountKind.FAMILY.value,
]


class Command(BaseCommand):
    help = 'Print lesson, package and exam invoice prices with and without discounts'

    def add_arguments(self, parser):
        parser.add_argument('--lesson-price', default='55',
                            help='Price of a single lesson (default: 55)')
        parser.add_argument('--lessons', type=int, default=10,
                            help='Number of single lessons (default: 10)')
        parser.add_argument('--package-size', type=int, default=10,
                            help='Lessons per package (default: 10)')
        parser.add_argument('--packages', type=int, default=2,
                            help='Number of packages (default: 2)')
        parser.add_argument('--exams', type=int, default=3,
                            help='Number of exams (default: 3)')
        parser.add_argument('--busy', action=argparse.BooleanOptionalAction, default=True,
                            help='Apply the busy-period exam surcharge (default: on)')
        parser.add_argument('--discount', action='append', dest='discounts',
                            choices=DiscountKind.values, metavar='KIND',
                            help=f'Discount to apply, in order; repeatable. '
                                 f'One of: {", ".join(DiscountKind.values)}')

    def handle(self, *args, **options):
        kinds = options['discounts'] or DEFAULT_DISCOUNTS

        try:
            config = get_pricing_config()
            discounts = [Discount.for_kind(kind, config) for kind in kinds]

            lesson_invoice = LessonInvoice(options['lesson_price'], options['lessons'], discounts)
            package = Package(options['package_size'], config=config)
            package_invoice = LessonPackageInvoice(package, options['packages'], discounts)
            exam_invoice = ExamInvoice(options['exams'], options['busy'], config=config)

            rows = [
                (f'{lesson_invoice.product_name} price without discount', lesson_invoice.undiscounted_price()),
                (f'{lesson_invoice.product_name} price with discount', lesson_invoice.total_price()),
                (f'{package_invoice.product_name} price without discount', package_invoice.undiscounted_price()),
                (f'{package_invoice.product_name} price with discount', package_invoice.total_price()),
                (f'{exam_invoice.product_name} price', exam_invoice.total_price()),
            ]
        except InvalidInputError as e:
            raise CommandError(' '.join(e.messages))

        self.stdout.write(self.style.MIGRATE_HEADING('Invoice prices'))
        self.stdout.write(f"Discounts (in order): {', '.join(DiscountKind(kind).label for kind in kinds)}")
        self.stdout.write('')
        for label, amount in rows:
            self.stdout.write(f'{label}: {amount}')

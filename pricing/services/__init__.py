from .rounding import round_money, to_decimal
from .discounts import Discount, DiscountKind, apply_discounts, percentage_off
from .invoices import (
    ExamInvoice,
    LessonInvoice,
    LessonPackageInvoice,
    Package,
    base_price,
)

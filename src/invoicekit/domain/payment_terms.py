"""Payment terms and due-date derivation."""

from datetime import date, datetime, UTC
from enum import Enum
from typing import Optional, Union

from dateutil.relativedelta import relativedelta


class PaymentTerms(str, Enum):
    """Supported payment terms."""

    DUE_ON_RECEIPT = "DUE_ON_RECEIPT"
    NET_15 = "NET_15"
    NET_30 = "NET_30"
    NET_45 = "NET_45"
    NET_60 = "NET_60"


PAYMENT_TERM_DAYS = {
    PaymentTerms.DUE_ON_RECEIPT: 0,
    PaymentTerms.NET_15: 15,
    PaymentTerms.NET_30: 30,
    PaymentTerms.NET_45: 45,
    PaymentTerms.NET_60: 60,
}

# Unrecognized terms are treated as NET_30
DEFAULT_TERM_DAYS = PAYMENT_TERM_DAYS[PaymentTerms.NET_30]


def payment_term_days(payment_terms: Union[PaymentTerms, str, None]) -> int:
    """Return the day offset for payment terms.

    Args:
        payment_terms: PaymentTerms member or its string token

    Returns:
        Number of days until payment is due
    """
    try:
        return PAYMENT_TERM_DAYS[PaymentTerms(payment_terms)]
    except ValueError:
        return DEFAULT_TERM_DAYS


def get_due_date(
    payment_terms: Union[PaymentTerms, str, None],
    created_at: Optional[Union[datetime, date]] = None,
) -> Union[datetime, date]:
    """Derive the due date from payment terms.

    Days are added on the calendar, so a timezone-aware ``created_at`` keeps
    its time of day even when a daylight-saving transition falls in between.

    Args:
        payment_terms: PaymentTerms member or string token
        created_at: Invoice creation time (defaults to now, UTC)

    Returns:
        Due date of the same type as ``created_at``
    """
    if created_at is None:
        created_at = datetime.now(UTC)
    return created_at + relativedelta(days=payment_term_days(payment_terms))

"""
Credit application rules.

A credit's first installment may fall at most 3 months after today, and a
credit is only visible to the customer that owns it.
"""
import logging
from datetime import date
from uuid import UUID

from dateutil.relativedelta import relativedelta
from django.utils import timezone

from credit_system.exceptions import BusinessException
from credit_system.models import Credit
from credit_system.services import customer as customer_service

logger = logging.getLogger(__name__)

MAX_MONTHS_TO_FIRST_INSTALLMENT = 3


def latest_first_installment(today: date = None) -> date:
    return (today or timezone.localdate()) + relativedelta(months=MAX_MONTHS_TO_FIRST_INSTALLMENT)


def validate_day_first_installment(day_first_installment: date) -> None:
    if day_first_installment > latest_first_installment():
        raise BusinessException("Invalid Date")


def save(credit: Credit) -> Credit:
    """Validate the installment date, bind the owning customer and persist."""
    validate_day_first_installment(credit.day_first_installment)
    credit.customer = customer_service.find_by_id(credit.customer_id)
    credit.save()
    logger.info("Credit %s saved for customer %s", credit.credit_code, credit.customer_id)
    return credit


def find_all_by_customer(customer_id: int):
    return list(Credit.objects.filter(customer_id=customer_id).order_by('id'))


def find_by_credit_code(customer_id: int, credit_code: UUID) -> Credit:
    credit = Credit.objects.select_related('customer').filter(credit_code=credit_code).first()
    if credit is None:
        raise BusinessException(f"Creditcode {credit_code} not found")
    if credit.customer_id != customer_id:
        logger.warning(
            "Customer %s asked for credit %s owned by customer %s",
            customer_id, credit_code, credit.customer_id,
        )
        raise ValueError("Contact admin")
    return credit

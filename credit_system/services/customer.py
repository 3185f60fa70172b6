"""
Customer persistence and lookup.
"""
import logging

from django.db import transaction

from credit_system.exceptions import BusinessException
from credit_system.models import MAX_ID, Customer

logger = logging.getLogger(__name__)


def save(customer: Customer) -> Customer:
    # Savepoint so a unique violation on cpf/email leaves the outer transaction usable.
    with transaction.atomic():
        customer.save()
    logger.info("Customer %s saved", customer.pk)
    return customer


def find_by_id(customer_id: int) -> Customer:
    if not 0 < customer_id <= MAX_ID:
        raise BusinessException(f"Id {customer_id} not found")
    try:
        return Customer.objects.get(pk=customer_id)
    except Customer.DoesNotExist:
        raise BusinessException(f"Id {customer_id} not found")


def delete(customer_id: int) -> None:
    customer = find_by_id(customer_id)
    customer.delete()
    logger.info("Customer %s deleted", customer_id)

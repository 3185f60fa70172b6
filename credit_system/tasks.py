import logging
from decimal import Decimal

import pandas as pd
from celery import shared_task
from django.contrib.auth.hashers import make_password

from .models import Customer
from .validators import format_cpf, is_valid_cpf

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('first_name', 'last_name', 'cpf', 'email', 'income')


def _cell(row, column, default=''):
    value = row.get(column, default)
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    return str(value).strip()


@shared_task
def ingest_customers_from_excel(file_path: str) -> dict:
    """Read a customer spreadsheet and upsert rows into Customer, keyed by CPF."""
    try:
        df = pd.read_excel(file_path)
    except Exception as e:
        logger.exception("Failed to read customer Excel: %s", file_path)
        return {'ok': False, 'error': str(e), 'created': 0, 'updated': 0}

    # Normalize column names: lowercase, strip, replace spaces with underscore
    df.columns = [
        str(c).strip().lower().replace(' ', '_') if isinstance(c, str) else c
        for c in df.columns
    ]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.error("Customer Excel %s is missing columns %s", file_path, missing)
        return {'ok': False, 'error': f"Missing columns: {', '.join(missing)}", 'created': 0, 'updated': 0}

    created = updated = skipped = 0
    for _, row in df.iterrows():
        try:
            cpf = _cell(row, 'cpf')
            if not is_valid_cpf(cpf):
                raise ValueError(f"invalid CPF {cpf!r}")
            cpf = format_cpf(cpf)
            defaults = {
                'first_name': _cell(row, 'first_name') or 'Unknown',
                'last_name': _cell(row, 'last_name') or 'Unknown',
                'email': _cell(row, 'email'),
                'income': Decimal(_cell(row, 'income', '0')),
                'zip_code': _cell(row, 'zip_code'),
                'street': _cell(row, 'street'),
            }
            password = _cell(row, 'password')
            if password:
                defaults['password'] = make_password(password)
            _, was_created = Customer.objects.update_or_create(cpf=cpf, defaults=defaults)
            if was_created:
                created += 1
            else:
                updated += 1
        except Exception as e:
            logger.warning("Skip row %s: %s", row.to_dict(), e)
            skipped += 1
            continue
    logger.info(
        "Customer ingestion from %s: %d created, %d updated, %d skipped",
        file_path, created, updated, skipped,
    )
    return {'ok': True, 'created': created, 'updated': updated, 'skipped': skipped}

import re

from rest_framework import serializers


def cpf_digits(value: str) -> list:
    return [int(c) for c in re.sub(r'\D', '', value or '')]


def _check_digit(digits) -> int:
    weight = len(digits) + 1
    total = sum(d * w for d, w in zip(digits, range(weight, 1, -1)))
    digit = 11 - (total % 11)
    return 0 if digit >= 10 else digit


def is_valid_cpf(value: str) -> bool:
    """
    Brazilian CPF check: 11 digits, punctuation optional, the last two being
    mod-11 check digits over the preceding ones. All-equal digits are rejected.
    """
    if value is None or not re.fullmatch(r'\d{3}\.?\d{3}\.?\d{3}-?\d{2}', value.strip()):
        return False
    digits = cpf_digits(value)
    if len(set(digits)) == 1:
        return False
    return _check_digit(digits[:9]) == digits[9] and _check_digit(digits[:10]) == digits[10]


def format_cpf(value: str) -> str:
    """Canonical storage form: XXX.XXX.XXX-XX."""
    raw = "".join(str(d) for d in cpf_digits(value))
    return f"{raw[:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:]}"


def validate_cpf(value: str) -> str:
    if not is_valid_cpf(value):
        raise serializers.ValidationError('Invalid CPF')
    return format_cpf(value)

import uuid
from typing import NamedTuple

from django.db import models

# Largest value a BigAutoField primary key can hold.
MAX_ID = 2 ** 63 - 1


class Address(NamedTuple):
    zip_code: str
    street: str


class Status(models.TextChoices):
    IN_PROGRESS = 'IN_PROGRESS'
    APPROVED = 'APPROVED'
    REJECT = 'REJECT'


class Customer(models.Model):
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    cpf = models.CharField(max_length=14, unique=True)
    email = models.EmailField(max_length=254, unique=True)
    password = models.CharField(max_length=128)
    income = models.DecimalField(max_digits=15, decimal_places=2)
    zip_code = models.CharField(max_length=20)
    street = models.CharField(max_length=255)

    class Meta:
        db_table = 'credit_system_customer'

    @property
    def address(self):
        return Address(self.zip_code, self.street)


class Credit(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name='credits')
    credit_code = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    credit_value = models.DecimalField(max_digits=15, decimal_places=2)
    day_first_installment = models.DateField()
    number_of_installments = models.IntegerField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.IN_PROGRESS)

    class Meta:
        db_table = 'credit_system_credit'

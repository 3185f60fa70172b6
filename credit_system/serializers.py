from decimal import Decimal

from django.contrib.auth.hashers import make_password
from django.utils import timezone
from rest_framework import serializers

from .models import MAX_ID, Credit, Customer
from .services import credit as credit_service
from .services import customer as customer_service
from . import validators

MAX_INSTALLMENTS = 48


class CustomerSerializer(serializers.Serializer):
    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100)
    cpf = serializers.CharField(max_length=14)
    income = serializers.DecimalField(max_digits=15, decimal_places=2, min_value=Decimal('0'))
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, max_length=128)
    zipCode = serializers.CharField(source='zip_code', max_length=20)
    street = serializers.CharField(max_length=255)

    def validate_cpf(self, value):
        return validators.validate_cpf(value)

    def create(self, validated_data):
        validated_data['password'] = make_password(validated_data['password'])
        return customer_service.save(Customer(**validated_data))


class CustomerUpdateSerializer(serializers.Serializer):
    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100)
    income = serializers.DecimalField(max_digits=15, decimal_places=2, min_value=Decimal('0'))
    zipCode = serializers.CharField(source='zip_code', max_length=20)
    street = serializers.CharField(max_length=255)

    def update(self, instance, validated_data):
        for field, value in validated_data.items():
            setattr(instance, field, value)
        return customer_service.save(instance)


class CustomerViewSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')
    income = serializers.DecimalField(max_digits=15, decimal_places=2, coerce_to_string=False)
    zipCode = serializers.CharField(source='zip_code')

    class Meta:
        model = Customer
        fields = ['id', 'firstName', 'lastName', 'cpf', 'income', 'email', 'zipCode', 'street']


class CreditSerializer(serializers.Serializer):
    creditValue = serializers.DecimalField(
        source='credit_value', max_digits=15, decimal_places=2, min_value=Decimal('0.01')
    )
    dayFirstOfInstallment = serializers.DateField(source='day_first_installment')
    numberOfInstallments = serializers.IntegerField(
        source='number_of_installments', min_value=1, max_value=MAX_INSTALLMENTS
    )
    customerId = serializers.IntegerField(source='customer_id', min_value=1, max_value=MAX_ID)

    def validate_dayFirstOfInstallment(self, value):
        if value <= timezone.localdate():
            raise serializers.ValidationError('Date must be in the future')
        return value

    def create(self, validated_data):
        return credit_service.save(Credit(**validated_data))


class CreditViewSerializer(serializers.ModelSerializer):
    creditCode = serializers.UUIDField(source='credit_code', read_only=True)
    creditValue = serializers.DecimalField(
        source='credit_value', max_digits=15, decimal_places=2, coerce_to_string=False, read_only=True
    )
    numberOfInstallment = serializers.IntegerField(source='number_of_installments', read_only=True)
    emailCustomer = serializers.EmailField(source='customer.email', read_only=True)
    incomeCustomer = serializers.DecimalField(
        source='customer.income', max_digits=15, decimal_places=2, coerce_to_string=False, read_only=True
    )

    class Meta:
        model = Credit
        fields = [
            'creditCode', 'creditValue', 'numberOfInstallment', 'status',
            'emailCustomer', 'incomeCustomer',
        ]


class CreditViewListSerializer(serializers.ModelSerializer):
    creditCode = serializers.UUIDField(source='credit_code', read_only=True)
    creditValue = serializers.DecimalField(
        source='credit_value', max_digits=15, decimal_places=2, coerce_to_string=False, read_only=True
    )
    numberOfInstallments = serializers.IntegerField(source='number_of_installments', read_only=True)

    class Meta:
        model = Credit
        fields = ['creditCode', 'creditValue', 'numberOfInstallments']


class CustomerIdQuerySerializer(serializers.Serializer):
    customerId = serializers.IntegerField(min_value=1, max_value=MAX_ID)

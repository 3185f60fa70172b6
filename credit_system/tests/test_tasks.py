"""Tests for customer spreadsheet ingestion."""
from decimal import Decimal
from io import StringIO
from unittest import mock

import pandas as pd
from django.contrib.auth.hashers import check_password
from django.core.management import call_command
from django.test import TestCase

from credit_system.models import Customer
from credit_system.tasks import ingest_customers_from_excel


def customer_frame(rows):
    return pd.DataFrame(
        rows,
        columns=['First Name', 'Last Name', 'CPF', 'Email', 'Password', 'Income', 'Zip Code', 'Street'],
    )


class IngestCustomersTests(TestCase):
    def test_creates_and_updates_customers_by_cpf(self):
        Customer.objects.create(
            first_name='Old', last_name='Name', cpf='322.862.690-33', email='old@gmail.com',
            password='x', income=Decimal('1'), zip_code='1', street='s',
        )
        df = customer_frame([
            ['New', 'Name', '322.862.690-33', 'email@gmail.com', '12345', 1000.0, '12345', 'street'],
            ['Other', 'Person', '529.982.247-25', 'other@gmail.com', 'secret', 2500.5, '54321', 'avenue'],
        ])
        with mock.patch('credit_system.tasks.pd.read_excel', return_value=df):
            result = ingest_customers_from_excel('customers.xlsx')

        self.assertEqual(result, {'ok': True, 'created': 1, 'updated': 1, 'skipped': 0})
        updated = Customer.objects.get(cpf='322.862.690-33')
        self.assertEqual(updated.first_name, 'New')
        self.assertEqual(updated.email, 'email@gmail.com')
        created = Customer.objects.get(cpf='529.982.247-25')
        self.assertEqual(created.income, Decimal('2500.50'))
        self.assertTrue(check_password('secret', created.password))

    def test_raw_digit_cpf_updates_existing_formatted_customer(self):
        Customer.objects.create(
            first_name='Old', last_name='Name', cpf='322.862.690-33', email='old@gmail.com',
            password='x', income=Decimal('1'), zip_code='1', street='s',
        )
        df = customer_frame([
            ['New', 'Name', '32286269033', 'new@gmail.com', 'pw', 10, '1', 's'],
        ])
        with mock.patch('credit_system.tasks.pd.read_excel', return_value=df):
            result = ingest_customers_from_excel('customers.xlsx')

        self.assertEqual(result['updated'], 1)
        self.assertEqual(result['created'], 0)
        self.assertEqual(Customer.objects.count(), 1)
        self.assertEqual(Customer.objects.get().first_name, 'New')

    def test_skips_rows_with_invalid_cpf(self):
        df = customer_frame([
            ['Bad', 'Row', '123.456.789-00', 'bad@gmail.com', 'x', 10, '1', 's'],
        ])
        with mock.patch('credit_system.tasks.pd.read_excel', return_value=df):
            result = ingest_customers_from_excel('customers.xlsx')

        self.assertEqual(result['skipped'], 1)
        self.assertEqual(result['created'], 0)
        self.assertFalse(Customer.objects.exists())

    def test_missing_columns_is_reported(self):
        df = pd.DataFrame([['A', 'B']], columns=['first_name', 'last_name'])
        with mock.patch('credit_system.tasks.pd.read_excel', return_value=df):
            result = ingest_customers_from_excel('customers.xlsx')

        self.assertFalse(result['ok'])
        self.assertIn('cpf', result['error'])

    def test_unreadable_file_returns_error(self):
        with mock.patch('credit_system.tasks.pd.read_excel', side_effect=FileNotFoundError('nope')):
            result = ingest_customers_from_excel('missing.xlsx')

        self.assertEqual(result, {'ok': False, 'error': 'nope', 'created': 0, 'updated': 0})

    def test_management_command_runs_synchronously(self):
        df = customer_frame([
            ['Cmd', 'User', '28475934625', 'cmd@gmail.com', 'pw', 100, '1', 's'],
        ])
        out = StringIO()
        with mock.patch('credit_system.tasks.pd.read_excel', return_value=df):
            call_command('ingest_customers', '--sync', '--path', 'customers.xlsx', stdout=out)

        self.assertIn('Done.', out.getvalue())
        self.assertTrue(Customer.objects.filter(cpf='284.759.346-25').exists())

    def test_management_command_enqueues_task(self):
        out = StringIO()
        with mock.patch('credit_system.management.commands.ingest_customers.ingest_customers_from_excel') as task:
            call_command('ingest_customers', '--path', 'customers.xlsx', stdout=out)

        task.delay.assert_called_once_with('customers.xlsx')
        self.assertIn('Task enqueued', out.getvalue())

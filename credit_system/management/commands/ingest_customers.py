import os

from django.conf import settings
from django.core.management.base import BaseCommand

from credit_system.tasks import ingest_customers_from_excel


class Command(BaseCommand):
    help = 'Enqueue a Celery task to ingest customers from an Excel spreadsheet'

    def add_arguments(self, parser):
        parser.add_argument(
            '--path',
            help='Spreadsheet to ingest (defaults to settings.CUSTOMER_DATA_PATH)',
        )
        parser.add_argument(
            '--sync',
            action='store_true',
            help='Run ingestion synchronously instead of via Celery',
        )

    def handle(self, *args, **options):
        customer_path = options['path'] or getattr(settings, 'CUSTOMER_DATA_PATH', None) or os.path.join(
            settings.BASE_DIR, 'data', 'customer_data.xlsx'
        )

        if not os.path.isfile(customer_path):
            self.stdout.write(self.style.WARNING(
                f'Customer file not found: {customer_path}. Place customer_data.xlsx in data/ and retry.'
            ))

        if options['sync']:
            self.stdout.write('Running ingestion synchronously...')
            result = ingest_customers_from_excel(customer_path)
            self.stdout.write(f'Customers: {result}')
            self.stdout.write(self.style.SUCCESS('Done.'))
            return

        self.stdout.write('Enqueueing Celery task...')
        ingest_customers_from_excel.delay(customer_path)
        self.stdout.write(self.style.SUCCESS(
            'Task enqueued. Ensure Celery worker is running to process it.'
        ))

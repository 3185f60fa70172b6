# Generated manually for credit_system

from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('cpf', models.CharField(max_length=14, unique=True)),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('password', models.CharField(max_length=128)),
                ('income', models.DecimalField(decimal_places=2, max_digits=15)),
                ('zip_code', models.CharField(max_length=20)),
                ('street', models.CharField(max_length=255)),
            ],
            options={
                'db_table': 'credit_system_customer',
            },
        ),
        migrations.CreateModel(
            name='Credit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('credit_code', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('credit_value', models.DecimalField(decimal_places=2, max_digits=15)),
                ('day_first_installment', models.DateField()),
                ('number_of_installments', models.IntegerField()),
                ('status', models.CharField(choices=[('IN_PROGRESS', 'In Progress'), ('APPROVED', 'Approved'), ('REJECT', 'Reject')], default='IN_PROGRESS', max_length=20)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='credits', to='credit_system.customer')),
            ],
            options={
                'db_table': 'credit_system_credit',
            },
        ),
    ]

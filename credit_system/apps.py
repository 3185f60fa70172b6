from django.apps import AppConfig


class CreditSystemConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'credit_system'

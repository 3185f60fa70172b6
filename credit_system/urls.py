from django.urls import path

from . import views

urlpatterns = [
    path('customers', views.CustomerListView.as_view(), name='customer-list'),
    path('customers/<int:customer_id>', views.CustomerDetailView.as_view(), name='customer-detail'),
    path('credits', views.CreditListView.as_view(), name='credit-list'),
    path('credits/<uuid:credit_code>', views.CreditDetailView.as_view(), name='credit-detail'),
]

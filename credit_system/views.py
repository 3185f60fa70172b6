from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import (
    CreditSerializer,
    CreditViewListSerializer,
    CreditViewSerializer,
    CustomerIdQuerySerializer,
    CustomerSerializer,
    CustomerUpdateSerializer,
    CustomerViewSerializer,
)
from .services import credit as credit_service
from .services import customer as customer_service


def customer_id_param(request) -> int:
    serializer = CustomerIdQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data['customerId']


class CustomerListView(APIView):
    def post(self, request):
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = serializer.save()
        return Response(CustomerViewSerializer(customer).data, status=status.HTTP_201_CREATED)

    def patch(self, request):
        customer = customer_service.find_by_id(customer_id_param(request))
        serializer = CustomerUpdateSerializer(customer, data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = serializer.save()
        return Response(CustomerViewSerializer(customer).data, status=status.HTTP_200_OK)


class CustomerDetailView(APIView):
    def get(self, request, customer_id):
        customer = customer_service.find_by_id(customer_id)
        return Response(CustomerViewSerializer(customer).data, status=status.HTTP_200_OK)

    def delete(self, request, customer_id):
        customer_service.delete(customer_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CreditListView(APIView):
    def post(self, request):
        serializer = CreditSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        credit = serializer.save()
        return Response(CreditViewSerializer(credit).data, status=status.HTTP_201_CREATED)

    def get(self, request):
        credits = credit_service.find_all_by_customer(customer_id_param(request))
        serializer = CreditViewListSerializer(credits, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


class CreditDetailView(APIView):
    def get(self, request, credit_code):
        credit = credit_service.find_by_credit_code(customer_id_param(request), credit_code)
        return Response(CreditViewSerializer(credit).data, status=status.HTTP_200_OK)

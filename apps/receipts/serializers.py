from decimal import Decimal

from rest_framework import serializers
from .models import Receipt


class ReceiptSerializer(serializers.ModelSerializer):
    """
    Stored receipt as returned by the API.

    Money fields are integer cents; taxRate is basis points.
    """

    userId = serializers.UUIDField(source='user_id', read_only=True)
    customerName = serializers.CharField(source='customer_name', read_only=True)
    customerEmail = serializers.EmailField(source='customer_email', read_only=True)
    billingAddress = serializers.CharField(source='billing_address', read_only=True)
    productName = serializers.CharField(source='product_name', read_only=True)
    productImageUrl = serializers.CharField(source='product_image_url', read_only=True)
    productPrice = serializers.IntegerField(source='product_price', read_only=True)
    taxRate = serializers.IntegerField(source='tax_rate', read_only=True)
    orderNumber = serializers.CharField(source='order_number', read_only=True)
    emailSent = serializers.BooleanField(source='email_sent', read_only=True)
    emailSentAt = serializers.DateTimeField(source='email_sent_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Receipt
        fields = [
            'id',
            'userId',
            'customerName',
            'customerEmail',
            'billingAddress',
            'productName',
            'productImageUrl',
            'productPrice',
            'quantity',
            'taxRate',
            'shipping',
            'subtotal',
            'tax',
            'total',
            'orderNumber',
            'emailSent',
            'emailSentAt',
            'createdAt',
        ]
        read_only_fields = fields


class ReceiptCreateSerializer(serializers.Serializer):
    """
    Receipt form input.

    Prices are decimals in dollars and the tax rate is a percentage; they
    are converted to cents and basis points by the service layer.
    """

    customerName = serializers.CharField(max_length=255)
    customerEmail = serializers.EmailField(max_length=255)
    billingAddress = serializers.CharField()
    productName = serializers.CharField(max_length=255)
    productImageUrl = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    productPrice = serializers.DecimalField(
        max_digits=9,
        decimal_places=2,
        min_value=Decimal('0.01'),
    )
    quantity = serializers.IntegerField(min_value=1, max_value=10000)
    taxRate = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('100'),
    )
    shipping = serializers.DecimalField(
        max_digits=9,
        decimal_places=2,
        min_value=Decimal('0'),
    )


class ReceiptCreateResponseSerializer(serializers.Serializer):
    receipt = ReceiptSerializer()
    emailSent = serializers.BooleanField()
    message = serializers.CharField()

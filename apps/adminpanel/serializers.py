from rest_framework import serializers
from apps.accounts.serializers import UserSerializer
from apps.receipts.serializers import ReceiptSerializer
from .services.credit_management import MIN_CREDIT_GRANT, MAX_CREDIT_GRANT


class AdminLoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class AdminTokenSerializer(serializers.Serializer):
    token = serializers.CharField()
    expiresIn = serializers.IntegerField(help_text="Token lifetime in seconds")
    username = serializers.CharField()


class AdminStatusSerializer(serializers.Serializer):
    isAdmin = serializers.BooleanField()
    username = serializers.CharField(allow_null=True)


class PanelUserSerializer(UserSerializer):
    """User as listed in the admin panel."""

    isActive = serializers.BooleanField(source='is_active', read_only=True)
    lastLogin = serializers.DateTimeField(source='last_login', read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['isActive', 'lastLogin']
        read_only_fields = fields


class PanelReceiptSerializer(ReceiptSerializer):
    """Receipt as listed in the admin panel, with its owner's email."""

    userEmail = serializers.EmailField(source='user.email', read_only=True)

    class Meta(ReceiptSerializer.Meta):
        fields = ReceiptSerializer.Meta.fields + ['userEmail']
        read_only_fields = fields


class AddCreditsSerializer(serializers.Serializer):
    userId = serializers.UUIDField()
    credits = serializers.IntegerField(min_value=MIN_CREDIT_GRANT, max_value=MAX_CREDIT_GRANT)


class PanelStatsSerializer(serializers.Serializer):
    totalUsers = serializers.IntegerField()
    totalReceipts = serializers.IntegerField()
    failedDeliveries = serializers.IntegerField()
    creditsOutstanding = serializers.IntegerField()

from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User
from .services import update_profile


class UserSerializer(serializers.ModelSerializer):
    """User profile including the credit balance."""

    firstName = serializers.CharField(source='first_name', max_length=150, required=False, allow_blank=True)
    lastName = serializers.CharField(source='last_name', max_length=150, required=False, allow_blank=True)
    profileImageUrl = serializers.URLField(source='profile_image_url', max_length=500, required=False, allow_blank=True)
    totalReceiptsSent = serializers.IntegerField(source='total_receipts_sent', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'firstName',
            'lastName',
            'profileImageUrl',
            'credits',
            'totalReceiptsSent',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id', 'email', 'credits']

    def update(self, instance, validated_data):
        return update_profile(user=instance, **validated_data)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    passwordConfirm = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    firstName = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    lastName = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['passwordConfirm']:
            raise serializers.ValidationError({
                'passwordConfirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )

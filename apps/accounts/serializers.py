from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """User profile serializer."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'full_name',
            'username',
            'bio',
            'website',
            'location',
            'avatar_url',
            'preferred_currency',
            'created_at',
            'updated_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'display_name', 'created_at', 'updated_at', 'last_login']

    def get_display_name(self, obj):
        return obj.get_display_name()


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Validate profile edits (all fields optional)."""

    class Meta:
        model = User
        fields = [
            'full_name',
            'username',
            'bio',
            'website',
            'location',
            'avatar_url',
            'preferred_currency',
        ]
        extra_kwargs = {field: {'required': False} for field in fields}


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Serializer for user registration."""

    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    class Meta:
        model = User
        fields = ['email', 'password', 'password_confirm', 'full_name']

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
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


class DeleteAccountSerializer(serializers.Serializer):
    """Confirm account deletion with the current password."""

    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'},
        help_text="Current password for confirmation"
    )
    confirm = serializers.BooleanField(help_text="Must be true to confirm deletion")

    def validate_confirm(self, value):
        if not value:
            raise serializers.ValidationError('Confirmation required')
        return value

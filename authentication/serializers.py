from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import User


def required_messages(label):
    return {
        'required': f'{label} is required',
        'blank': f'{label} is required',
        'null': f'{label} is required',
    }


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField(
        max_length=255,
        error_messages={**required_messages('Email'), 'invalid': 'Email format is invalid'}
    )
    password = serializers.CharField(
        write_only=True, trim_whitespace=False, error_messages=required_messages('Password')
    )
    password_confirm = serializers.CharField(write_only=True, required=False, trim_whitespace=False)
    first_name = serializers.CharField(max_length=100, error_messages=required_messages('First name'))
    last_name = serializers.CharField(max_length=100, error_messages=required_messages('Last name'))

    def validate_email(self, value):
        return value.lower()

    def validate_password(self, value):
        try:
            password_validation.validate_password(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(list(exc.messages))
        return value

    def validate(self, data):
        confirm = data.pop('password_confirm', None)
        if confirm is not None and confirm != data.get('password'):
            raise serializers.ValidationError({'password_confirm': "Passwords don't match"})
        return data


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(error_messages=required_messages('Email'))
    password = serializers.CharField(trim_whitespace=False, error_messages=required_messages('Password'))

    def validate_email(self, value):
        return value.strip().lower()


class UserSerializer(serializers.ModelSerializer):
    full_name = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = ('id', 'email', 'first_name', 'last_name', 'full_name', 'is_active', 'created_at')
        read_only_fields = fields

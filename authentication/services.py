import logging

from django.db import IntegrityError, transaction

from timetracker_backend.results import KIND_UNAUTHORIZED, ServiceResult

from .models import User
from .serializers import LoginSerializer, RegisterSerializer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid email or password'


def register_user(data):
    """Validate and create a new active user account."""
    serializer = RegisterSerializer(data=data)
    if not serializer.is_valid():
        return ServiceResult.validation_failure(serializer.errors)

    validated = serializer.validated_data
    if User.objects.filter(email__iexact=validated['email']).exists():
        logger.warning("Registration rejected, email already exists: %s", validated['email'])
        return ServiceResult.failure('Email already exists')

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=validated['email'],
                password=validated['password'],
                first_name=validated['first_name'],
                last_name=validated['last_name'],
            )
    except IntegrityError:
        return ServiceResult.failure('Email already exists')

    logger.info("Registered user %s", user.email)
    return ServiceResult.ok(user, 'User registered successfully')


def login_user(data):
    """Check credentials. Establishing the session is left to the caller."""
    serializer = LoginSerializer(data=data)
    if not serializer.is_valid():
        return ServiceResult.validation_failure(serializer.errors)

    email = serializer.validated_data['email']
    password = serializer.validated_data['password']

    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        logger.warning("Login failed for unknown email %s", email)
        return ServiceResult.failure(INVALID_CREDENTIALS, kind=KIND_UNAUTHORIZED)

    if not user.check_password(password):
        logger.warning("Login failed for %s: wrong password", email)
        return ServiceResult.failure(INVALID_CREDENTIALS, kind=KIND_UNAUTHORIZED)

    if not user.is_active:
        logger.warning("Login refused for inactive account %s", email)
        return ServiceResult.failure('Account is inactive', kind=KIND_UNAUTHORIZED)

    return ServiceResult.ok(user, 'Login successful')

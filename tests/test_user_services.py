import pytest

from authentication.models import User
from authentication.services import INVALID_CREDENTIALS, login_user, register_user
from authentication.validators import PASSWORD_RULES_MESSAGE
from timetracker_backend.results import KIND_BUSINESS_RULE, KIND_UNAUTHORIZED, KIND_VALIDATION

from .conftest import STRONG_PASSWORD

pytestmark = pytest.mark.django_db


def registration(**overrides):
    data = {
        'email': 'Carol@Example.com',
        'password': STRONG_PASSWORD,
        'first_name': 'Carol',
        'last_name': 'White',
    }
    data.update(overrides)
    return data


class TestRegister:

    def test_register_user(self):
        result = register_user(registration())

        assert result.success
        assert result.message == 'User registered successfully'
        user = User.objects.get(email='carol@example.com')
        assert user.is_active
        assert user.full_name == 'Carol White'
        assert user.check_password(STRONG_PASSWORD)
        assert user.password != STRONG_PASSWORD

    def test_duplicate_email_ignores_case(self, user):
        result = register_user(registration(email='ALICE@example.com'))

        assert not result.success
        assert result.kind == KIND_BUSINESS_RULE
        assert result.error == 'Email already exists'

    @pytest.mark.parametrize('password', ['alllowercase1!', 'ALLUPPER1!', 'NoDigits!!', 'NoSpecial12'])
    def test_weak_password(self, password):
        result = register_user(registration(password=password))

        assert result.kind == KIND_VALIDATION
        assert PASSWORD_RULES_MESSAGE in result.validation_errors['password']

    def test_short_password(self):
        result = register_user(registration(password='Ab1!'))
        assert result.kind == KIND_VALIDATION
        assert 'password' in result.validation_errors

    def test_invalid_email(self):
        result = register_user(registration(email='not-an-email'))
        assert result.validation_errors['email'] == ['Email format is invalid']

    def test_required_fields(self):
        result = register_user({})

        assert result.validation_errors['email'] == ['Email is required']
        assert result.validation_errors['password'] == ['Password is required']
        assert result.validation_errors['first_name'] == ['First name is required']
        assert result.validation_errors['last_name'] == ['Last name is required']

    def test_password_confirmation_mismatch(self):
        result = register_user(registration(password_confirm='Different1!'))
        assert result.validation_errors['password_confirm'] == ["Passwords don't match"]


class TestLogin:

    def test_login(self, user):
        result = login_user({'email': ' Alice@Example.com ', 'password': STRONG_PASSWORD})

        assert result.success
        assert result.data == user
        assert result.message == 'Login successful'

    def test_wrong_password(self, user):
        result = login_user({'email': user.email, 'password': 'Wrong1!pass'})

        assert result.kind == KIND_UNAUTHORIZED
        assert result.error == INVALID_CREDENTIALS

    def test_unknown_email(self, db):
        result = login_user({'email': 'nobody@example.com', 'password': STRONG_PASSWORD})
        assert result.error == INVALID_CREDENTIALS

    def test_inactive_account(self, user):
        user.is_active = False
        user.save()

        result = login_user({'email': user.email, 'password': STRONG_PASSWORD})

        assert result.kind == KIND_UNAUTHORIZED
        assert result.error == 'Account is inactive'

    def test_missing_credentials(self, db):
        result = login_user({})
        assert result.kind == KIND_VALIDATION
        assert result.validation_errors['email'] == ['Email is required']

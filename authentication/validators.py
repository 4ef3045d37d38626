from django.core.exceptions import ValidationError

PASSWORD_RULES_MESSAGE = (
    'Password must be at least 8 characters, contain uppercase, lowercase, '
    'number, and special character'
)


class PasswordComplexityValidator:
    """Require upper and lower case letters, a digit and a special character"""

    def validate(self, password, user=None):
        if not (
            any(ch.isupper() for ch in password)
            and any(ch.islower() for ch in password)
            and any(ch.isdigit() for ch in password)
            and any(not ch.isalnum() for ch in password)
        ):
            raise ValidationError(PASSWORD_RULES_MESSAGE, code='password_too_simple')

    def get_help_text(self):
        return PASSWORD_RULES_MESSAGE

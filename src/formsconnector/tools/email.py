"""Email related tools."""

from django.core.exceptions import ValidationError
from django.core.validators import validate_email


def is_valid_email(email) -> bool:
    """
    Check an email address syntax.

    Addresses on a dotless domain (``user@localhost``) are rejected although
    Django's validator accepts them: they cannot be delivered by a mailing
    service.
    """
    if not email or not isinstance(email, str):
        return False
    try:
        validate_email(email)
    except ValidationError:
        return False
    return "." in email.rpartition("@")[2]

# =============================================================================
# core/models/user.py - User Entity
# =============================================================================
# A registered user. Users author reviews and approve other users' reviews.
# The review workflow only relies on the identity.
# =============================================================================

from pydantic import Field, field_validator

from .base import DomainModel


class User(DomainModel):
    """
    A registered user of the application.

    Example:
        {
            "id": 1,
            "login_name": "jane_doe",
            "email_address": "jane.doe@uni-heidelberg.de",
            "first_name": "Jane",
            "last_name": "Doe"
        }
    """

    # Unique handle used to log in
    login_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        pattern=r"^[\w.-]+$",
        description="Unique login name (letters, digits, '_', '.', '-')"
    )

    email_address: str = Field(
        ...,
        max_length=255,
        description="Unique email address"
    )

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Given name"
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Family name"
    )

    @field_validator("email_address")
    @classmethod
    def _check_email(cls, value: str) -> str:
        local, sep, domain = value.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError(f"Invalid email address: {value}")
        return value

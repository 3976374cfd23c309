"""Contact details shared by clients and agencies."""

from __future__ import annotations

# Standard library imports
from typing import Any

from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result
from .base import ValueObject
from .email import Email
from .phone_number import PhoneNumber


class ContactInfo(ValueObject):
    """Immutable pair of email address and phone number."""

    __slots__ = ("_email", "_phone_number")

    def __init__(self, email: Email, phone_number: PhoneNumber) -> None:
        errors = self.validate(email, phone_number)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="ContactInfo")
        self._email = email
        self._phone_number = phone_number

    @staticmethod
    def validate(email: Email | None, phone_number: PhoneNumber | None) -> list[str]:
        errors = []
        if email is None:
            errors.append("Email не может быть пустым")
        if phone_number is None:
            errors.append("Номер телефона не может быть пустым")
        return errors

    @classmethod
    def create(cls, email: Email | None, phone_number: PhoneNumber | None) -> Result[ContactInfo]:
        """Combine already validated email and phone objects."""
        return Result.from_errors(
            cls.validate(email, phone_number),
            lambda: cls(email, phone_number),  # type: ignore[arg-type]
        )

    @classmethod
    def from_strings(cls, email: str, phone_number: str) -> Result[ContactInfo]:
        """Validate raw email and phone strings together, collecting both sets of errors."""
        email_result = Email.create(email)
        phone_result = PhoneNumber.create(phone_number)
        return Result.from_errors(
            email_result.errors + phone_result.errors,
            lambda: cls(email_result.value, phone_result.value),
        )

    @property
    def email(self) -> Email:
        return self._email

    @property
    def phone_number(self) -> PhoneNumber:
        return self._phone_number

    def _components(self) -> tuple[Any, ...]:
        return (self._email, self._phone_number)

    def __str__(self) -> str:
        return f"Email: {self._email}, Телефон: {self._phone_number}"

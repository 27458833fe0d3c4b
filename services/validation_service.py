# -*- coding: utf-8 -*-
"""
Surveyor form validation.

Pure, synchronous checks run on the whole form before each submission.
Results map field name -> message; an empty dict means the form is valid.
"""

import re
from datetime import date
from typing import Any, Dict, Optional

from services.translation_manager import tr
from utils.datetime_utils import parse_date
from utils.logger import get_logger

logger = get_logger(__name__)

FormErrors = Dict[str, str]


class ValidationService:
    """Service for surveyor form validation."""

    EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

    # Optional leading '+', then 10 to 15 digits (whitespace stripped first)
    PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")

    USERNAME_MIN_LENGTH = 3
    PASSWORD_MIN_LENGTH = 8

    # Fields that only exist on the creation form
    CREATE_ONLY_FIELDS = ("username", "password", "cin", "license_number")

    def validate_create(self, values: Dict[str, Any], today: Optional[date] = None) -> FormErrors:
        """Validate the creation form."""
        return self._validate(values, is_create=True, today=today)

    def validate_update(self, values: Dict[str, Any], today: Optional[date] = None) -> FormErrors:
        """Validate the edit form (username, password, cin and license are not editable)."""
        return self._validate(values, is_create=False, today=today)

    def _validate(self, values: Dict[str, Any], is_create: bool, today: Optional[date]) -> FormErrors:
        errors: FormErrors = {}
        today = today or date.today()

        if is_create:
            self._check_username(values.get("username"), errors)

        self._check_email(values.get("email"), errors)

        if is_create:
            self._check_password(values.get("password"), errors)

        self._check_phone(values.get("phone_number"), errors)
        self._check_required(values, "first_name", errors)
        self._check_required(values, "last_name", errors)
        self._check_birthday(values.get("birthday"), today, errors)

        if is_create:
            self._check_required(values, "cin", errors)

        self._check_city(values.get("city_id"), errors)

        if is_create:
            self._check_required(values, "license_number", errors)

        self._check_required(values, "specialization", errors)

        if errors:
            logger.debug(f"Form validation failed on: {sorted(errors)}")
        return errors

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or not str(value).strip()

    def _check_required(self, values: Dict[str, Any], name: str, errors: FormErrors):
        if self._is_blank(values.get(name)):
            errors[name] = tr(f"validation.{name}.required")

    def _check_username(self, username: Any, errors: FormErrors):
        if self._is_blank(username):
            errors["username"] = tr("validation.username.required")
        elif len(str(username)) < self.USERNAME_MIN_LENGTH:
            errors["username"] = tr("validation.username.min_length", min=self.USERNAME_MIN_LENGTH)

    def _check_email(self, email: Any, errors: FormErrors):
        if self._is_blank(email):
            errors["email"] = tr("validation.email.required")
        elif not self.EMAIL_PATTERN.fullmatch(str(email)):
            errors["email"] = tr("validation.email.format")

    def _check_password(self, password: Any, errors: FormErrors):
        if self._is_blank(password):
            errors["password"] = tr("validation.password.required")
        elif len(str(password)) < self.PASSWORD_MIN_LENGTH:
            errors["password"] = tr("validation.password.min_length", min=self.PASSWORD_MIN_LENGTH)

    def _check_phone(self, phone: Any, errors: FormErrors):
        if self._is_blank(phone):
            errors["phone_number"] = tr("validation.phone_number.required")
            return
        compact = re.sub(r"\s", "", str(phone))
        if not self.PHONE_PATTERN.fullmatch(compact):
            errors["phone_number"] = tr("validation.phone_number.format")

    def _check_birthday(self, birthday: Any, today: date, errors: FormErrors):
        if birthday is None or (isinstance(birthday, str) and not birthday.strip()):
            errors["birthday"] = tr("validation.birthday.required")
            return
        parsed = parse_date(birthday)
        if parsed is None:
            errors["birthday"] = tr("validation.birthday.invalid")
        elif parsed >= today:
            errors["birthday"] = tr("validation.birthday.past")

    def _check_city(self, city_id: Any, errors: FormErrors):
        try:
            valid = not isinstance(city_id, bool) and int(city_id) > 0
        except (TypeError, ValueError):
            valid = False
        if not valid:
            errors["city_id"] = tr("validation.city_id.required")


_validator = ValidationService()


def validate_create(values: Dict[str, Any], today: Optional[date] = None) -> FormErrors:
    return _validator.validate_create(values, today)


def validate_update(values: Dict[str, Any], today: Optional[date] = None) -> FormErrors:
    return _validator.validate_update(values, today)

# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Session
    "error.session.missing": "Missing authentication token",

    # API / transport
    "error.api.connection": "Connection error. Please check your network connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.unauthorized": "Session expired, please log in again",
    "error.api.forbidden": "Access to this resource is forbidden",
    "error.api.not_found": "Resource not found",
    "error.api.server": "Server error, please try again later",
    "error.api.http_status": "HTTP error: {status}",
    "error.api.invalid_response": "Invalid server response",
    "error.api.invalid_format": "Invalid data format",
    "error.api.load_failed": "Failed to load data",
    "error.api.load_generic": "An error occurred while loading",
    "error.api.generic": "An error occurred",

    # Surveyors
    "error.surveyor.not_found": "Surveyor not found",
    "error.surveyor.data_missing": "Surveyor data missing",
    "error.surveyor.delete_blocked": (
        "This surveyor has {clients} client(s) and {staff} technician(s) assigned. "
        "Reassign them before deleting."
    ),
    "error.cities.load_failed": "Unable to load cities",
    "error.form.invalid": "Please fix the form errors",
    "error.form.invalid_payload": "Invalid form data",
    "error.list.superseded": "Superseded by a newer request",

    "surveyor.created": "Surveyor created successfully",
    "surveyor.updated": "Surveyor updated successfully",
    "surveyor.activated": "Surveyor activated successfully",
    "surveyor.deactivated": "Surveyor deactivated successfully",
    "surveyor.deleted": "Surveyor deleted successfully",

    # Form validation
    "validation.username.required": "Username is required",
    "validation.username.min_length": "Username must be at least {min} characters",
    "validation.email.required": "Email is required",
    "validation.email.format": "Invalid email format",
    "validation.password.required": "Password is required",
    "validation.password.min_length": "Password must be at least {min} characters",
    "validation.phone_number.required": "Phone number is required",
    "validation.phone_number.format": "Invalid phone number format",
    "validation.first_name.required": "First name is required",
    "validation.last_name.required": "Last name is required",
    "validation.birthday.required": "Birthday is required",
    "validation.birthday.invalid": "Invalid birthday",
    "validation.birthday.past": "Birthday must be in the past",
    "validation.cin.required": "National ID (CIN) is required",
    "validation.city_id.required": "City is required",
    "validation.license_number.required": "License number is required",
    "validation.specialization.required": "Specialization is required",
}

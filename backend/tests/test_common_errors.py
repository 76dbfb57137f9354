# -*- coding: utf-8 -*-
"""
Test suite for backend/app/common/errors.py and notifications.py
"""
from supabase import AuthApiError, PostgrestAPIError, StorageException

from app.common.errors import ErrorKind, OperationError, error_message, to_operation_error
from app.common.notifications import UNEXPECTED_ERROR_TITLE, Notifier
from app.common.schemas import NotificationVariant, OperationResult


def test_auth_error_is_service_error_with_verbatim_message():
    exc = AuthApiError("Invalid login credentials", 400, "invalid_credentials")

    error = to_operation_error(exc)

    assert error.kind == ErrorKind.SERVICE_ERROR
    assert error.message == "Invalid login credentials"
    assert error.__cause__ is exc


def test_postgrest_error_is_service_error():
    exc = PostgrestAPIError({
        "message": 'duplicate key value violates unique constraint "blog_posts_pkey"',
        "code": "23505",
        "hint": None,
        "details": None,
    })

    error = to_operation_error(exc)

    assert error.kind == ErrorKind.SERVICE_ERROR
    assert error.message == 'duplicate key value violates unique constraint "blog_posts_pkey"'


def test_storage_error_with_payload_argument():
    exc = StorageException({"statusCode": 409, "error": "Duplicate", "message": "The resource already exists"})

    error = to_operation_error(exc)

    assert error.kind == ErrorKind.SERVICE_ERROR
    assert error.message == "The resource already exists"


def test_other_exceptions_are_unexpected():
    error = to_operation_error(ConnectionError("Connection refused"))

    assert error.kind == ErrorKind.UNEXPECTED
    assert error.message == "Connection refused"
    assert error.details["exception"] == "ConnectionError"


def test_operation_error_passes_through():
    original = OperationError.validation("Please fill in all fields.")
    assert to_operation_error(original) is original


def test_error_message_falls_back_to_class_name():
    assert error_message(RuntimeError()) == "RuntimeError"


def test_notifier_validation_error_keeps_title():
    notifier = Notifier()

    notifier.error("Error creating blog post", OperationError.validation("Please fill in all fields."))

    [notification] = notifier.drain()
    assert notification.title == "Error creating blog post"
    assert notification.description == "Please fill in all fields."
    assert notification.variant == NotificationVariant.DESTRUCTIVE


def test_notifier_unexpected_error_uses_generic_title():
    notifier = Notifier()

    notifier.error("Error loading blog posts", to_operation_error(TimeoutError("read timed out")))

    [notification] = notifier.drain()
    assert notification.title == UNEXPECTED_ERROR_TITLE
    assert notification.description == "read timed out"


def test_notifier_drain_empties_queue():
    notifier = Notifier()
    notifier.notify("Keywords suggested!")

    assert len(notifier.pending) == 1
    assert len(notifier.drain()) == 1
    assert notifier.drain() == []


def test_operation_result_failure_payload():
    result = OperationResult.failure(OperationError.service("bucket not found"))

    assert result.ok is False
    assert result.error.kind == ErrorKind.SERVICE_ERROR
    assert result.error.message == "bucket not found"

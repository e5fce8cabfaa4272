"""Tests for domain exceptions (error_code, message, details)."""

from storefront_admin.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    StorefrontAdminException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = StorefrontAdminException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "StorefrontAdminException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = StorefrontAdminException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Unknown category", field="category")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "category"}
    assert ValidationException("Invalid").details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_role() -> None:
    exc = AuthorizationException(role="admin")
    assert exc.message == "Permission denied: admin role required"
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"role": "admin"}


def test_authorization_exception_without_role() -> None:
    exc = AuthorizationException()
    assert exc.message == "Permission denied"
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("catalog_item", "p1")
    assert exc.message == "catalog_item not found: p1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"

"""Tests for custom exception hierarchy."""

from danji_care.exceptions import (
    ConfigurationError,
    DanjiCareError,
    EntityNotFoundError,
    GeolocationError,
    InvalidEntityStateError,
    InvalidMonthDayError,
    PhotoReadError,
    StorageError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_danji_care_error_is_exception(self) -> None:
        assert isinstance(DanjiCareError("test"), Exception)

    def test_subclasses_are_danji_care_errors(self) -> None:
        for cls in (
            EntityNotFoundError,
            InvalidEntityStateError,
            ValidationError,
            ConfigurationError,
            StorageError,
            PhotoReadError,
            GeolocationError,
        ):
            assert isinstance(cls("test"), DanjiCareError)

    def test_invalid_month_day_is_validation_and_value_error(self) -> None:
        err = InvalidMonthDayError("13-45")
        assert isinstance(err, ValidationError)
        assert isinstance(err, ValueError)
        assert isinstance(err, DanjiCareError)

    def test_exception_message(self) -> None:
        err = EntityNotFoundError("Customer cust-001 not found")
        assert str(err) == "Customer cust-001 not found"

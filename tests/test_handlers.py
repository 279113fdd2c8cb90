from rest_framework.exceptions import ErrorDetail

from core.handlers import _flatten_errors


def test_field_messages():
    detail = {"link": [ErrorDetail("Enter a valid URL.", code="invalid")]}

    assert _flatten_errors(detail) == [{"path": ["link"], "message": "Enter a valid URL."}]


def test_nested_item_errors_keep_their_index():
    detail = {"tags": {1: [ErrorDetail("This field may not be blank.", code="blank")]}}

    assert _flatten_errors(detail) == [
        {"path": ["tags", 1], "message": "This field may not be blank."}
    ]


def test_non_field_errors_sit_at_the_root():
    detail = {"non_field_errors": [ErrorDetail("Bad payload", code="invalid")]}

    assert _flatten_errors(detail) == [{"path": [], "message": "Bad payload"}]

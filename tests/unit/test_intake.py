"""
Unit tests for withdrawal submission validation
"""

import pytest

from withdraw_receipts.core.errors import ErrorCode, IntakeValidationError
from withdraw_receipts.services.intake import (
    NormalizedSubmission,
    WithdrawSubmission,
    validate_submission,
)


def submission(**fields) -> WithdrawSubmission:
    return WithdrawSubmission.model_validate(fields)


class TestWithdrawSubmission:
    """Boundary defaults and coercion of the raw request body"""

    def test_defaults(self):
        raw = submission()
        assert raw.chain == "unknown"
        assert raw.address == ""
        assert raw.amount == ""
        assert raw.public_code == ""
        assert raw.requirement_confirmed is False

    def test_camel_case_and_snake_case_names(self):
        camel = submission(publicCode="ABC", requirementConfirmed=True)
        snake = submission(public_code="ABC", requirement_confirmed=True)
        assert camel.public_code == snake.public_code == "ABC"
        assert camel.requirement_confirmed is snake.requirement_confirmed is True

    def test_null_string_field_becomes_empty(self):
        assert submission(chain=None).chain == ""

    def test_numeric_amount_kept_as_text(self):
        assert submission(amount=2.5).amount == "2.5"
        assert submission(amount=10).amount == "10"

    @pytest.mark.parametrize("value", ["true", 1, "yes", None, False])
    def test_requirement_confirmed_is_strict(self, value):
        assert submission(requirementConfirmed=value).requirement_confirmed is False

    def test_unknown_fields_ignored(self):
        raw = submission(address="1ABC", note="hello")
        assert raw.address == "1ABC"


class TestValidateSubmission:
    """Presence checks, in order"""

    def test_valid_submission(self, valid_payload):
        result = validate_submission(submission(**valid_payload))
        assert result == NormalizedSubmission(
            chain="bitcoin",
            address="1ABC",
            amount="2.5",
            public_code="XYZ",
            requirement_confirmed=True,
        )

    def test_empty_submission_fails_on_address(self):
        # chain defaults to "unknown", so address is the first real failure
        with pytest.raises(IntakeValidationError) as exc_info:
            validate_submission(submission())
        assert exc_info.value.code == ErrorCode.MISSING_ADDRESS
        assert exc_info.value.message == "Missing address"

    @pytest.mark.parametrize(
        "field,code,message",
        [
            ("chain", ErrorCode.MISSING_CHAIN, "Missing chain"),
            ("address", ErrorCode.MISSING_ADDRESS, "Missing address"),
            ("amount", ErrorCode.MISSING_AMOUNT, "Missing amount"),
            ("publicCode", ErrorCode.MISSING_PUBLIC_CODE, "Missing publicCode"),
        ],
    )
    def test_missing_field(self, valid_payload, field, code, message):
        valid_payload[field] = ""
        with pytest.raises(IntakeValidationError) as exc_info:
            validate_submission(submission(**valid_payload))
        assert exc_info.value.code == code
        assert exc_info.value.message == message

    def test_first_failure_wins(self):
        with pytest.raises(IntakeValidationError) as exc_info:
            validate_submission(submission(chain="", address="", amount="", publicCode=""))
        assert exc_info.value.message == "Missing chain"

    @pytest.mark.parametrize("value", [False, None, "true"])
    def test_requirement_not_confirmed(self, valid_payload, value):
        valid_payload["requirementConfirmed"] = value
        with pytest.raises(IntakeValidationError) as exc_info:
            validate_submission(submission(**valid_payload))
        assert exc_info.value.code == ErrorCode.REQUIREMENT_NOT_CONFIRMED
        assert exc_info.value.message == "Requirement not confirmed"

    def test_requirement_absent(self, valid_payload):
        del valid_payload["requirementConfirmed"]
        with pytest.raises(IntakeValidationError) as exc_info:
            validate_submission(submission(**valid_payload))
        assert exc_info.value.message == "Requirement not confirmed"

    def test_presence_checks_before_requirement(self, valid_payload):
        valid_payload["amount"] = ""
        valid_payload["requirementConfirmed"] = False
        with pytest.raises(IntakeValidationError) as exc_info:
            validate_submission(submission(**valid_payload))
        assert exc_info.value.message == "Missing amount"

    def test_whitespace_counts_as_present(self, valid_payload):
        valid_payload["publicCode"] = "   "
        assert validate_submission(submission(**valid_payload)).public_code == "   "

"""
Intake validation for withdrawal submissions.

A submission arrives as a loosely-typed JSON object. WithdrawSubmission applies
the boundary defaults; validate_submission runs the presence checks in a fixed
order and returns the normalized fields, or raises IntakeValidationError for
the first check that fails.
"""

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from withdraw_receipts.core.errors import ErrorCode, ErrorMessage, IntakeValidationError


class WithdrawSubmission(BaseModel):
    """Raw withdrawal request body, every field optional"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    chain: str = Field(default="unknown", description="Target network identifier")
    address: str = Field(default="", description="Destination address")
    amount: str = Field(default="", description="Requested amount, kept as text")
    public_code: str = Field(default="", alias="publicCode", description="Submitter supplied code")
    requirement_confirmed: bool = Field(
        default=False,
        alias="requirementConfirmed",
        description="Submitter attests the balance requirement",
    )

    @field_validator("chain", "address", "amount", "public_code", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # explicit null counts as missing; numbers are kept as their text
        if value is None or value is False:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @field_validator("requirement_confirmed", mode="before")
    @classmethod
    def _strict_true(cls, value: Any) -> bool:
        return value is True


class NormalizedSubmission(NamedTuple):
    chain: str
    address: str
    amount: str
    public_code: str
    requirement_confirmed: bool


_PRESENCE_CHECKS = (
    ("chain", ErrorCode.MISSING_CHAIN, ErrorMessage.MISSING_CHAIN),
    ("address", ErrorCode.MISSING_ADDRESS, ErrorMessage.MISSING_ADDRESS),
    ("amount", ErrorCode.MISSING_AMOUNT, ErrorMessage.MISSING_AMOUNT),
    ("public_code", ErrorCode.MISSING_PUBLIC_CODE, ErrorMessage.MISSING_PUBLIC_CODE),
)


def validate_submission(submission: WithdrawSubmission) -> NormalizedSubmission:
    """
    Validate a submission and return its normalized fields.

    Checks run in order chain, address, amount, publicCode, requirementConfirmed
    and the first failure is raised.
    """
    for field_name, code, message in _PRESENCE_CHECKS:
        if not getattr(submission, field_name):
            raise IntakeValidationError(code, message)

    if submission.requirement_confirmed is not True:
        raise IntakeValidationError(
            ErrorCode.REQUIREMENT_NOT_CONFIRMED,
            ErrorMessage.REQUIREMENT_NOT_CONFIRMED,
        )

    return NormalizedSubmission(
        chain=submission.chain,
        address=submission.address,
        amount=submission.amount,
        public_code=submission.public_code,
        requirement_confirmed=True,
    )

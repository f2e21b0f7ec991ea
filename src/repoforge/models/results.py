"""Outcomes of validation and provisioning."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

REPOSITORY_FIELD = "repository"


class ValidationOutcome(BaseModel):
    """Result of checking the user's input, attached to one field."""

    valid: bool = True
    field: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls):
        return cls()

    @classmethod
    def error(cls, field, message):
        return cls(valid=False, field=field, message=message)


class ProvisionResult(BaseModel):
    """Terminal result of a provisioning attempt."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    succeeded: bool = Field(..., description="Whether provisioning completed")
    clone_url: Optional[str] = Field(default=None, description="Canonical clone URL")
    message: Optional[str] = Field(default=None, description="User-visible message")
    cause: Optional[BaseException] = Field(
        default=None, exclude=True, description="Underlying error, if any"
    )

    @classmethod
    def success(cls, clone_url, message=None):
        return cls(succeeded=True, clone_url=clone_url, message=message)

    @classmethod
    def failure(cls, message, cause=None, clone_url=None):
        return cls(succeeded=False, message=message, cause=cause, clone_url=clone_url)

from typing import Any

from pydantic import BaseModel, Field, field_validator


class SendEmailDTO(BaseModel):
    """DTO for the near-completion email."""

    user_email: str = Field(..., min_length=1, max_length=320)
    percent: int | None = Field(None, ge=1, le=100)

    @field_validator("user_email", mode="after")
    @classmethod
    def strip_user_email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_email cannot be blank")
        return v


class SendEmailResponseDTO(BaseModel):
    success: bool
    data: dict[str, Any] = Field(default_factory=dict)

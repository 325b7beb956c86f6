"""Request and response DTOs for the locker session endpoints."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class StartWorkDTO(BaseModel):
    """DTO for starting a cleaning cycle."""

    user_email: str = Field(..., min_length=1, max_length=320)
    recommended_time_min: int = Field(..., gt=0)
    locker_id: str | None = Field(None, max_length=32)
    shoe_type: str = Field("", max_length=100)
    temperature: int | float | str | None = None
    humidity: int | float | str | None = None

    @field_validator("user_email", mode="after")
    @classmethod
    def strip_user_email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_email cannot be blank")
        return v


class StartWorkResponseDTO(BaseModel):
    message: str
    log_id: str
    start_time: str
    finish_time: str
    sheets_update: dict[str, Any] = Field(default_factory=dict)


class UpdateStatusResponseDTO(BaseModel):
    message: str
    updated_count: int = 0


class PickupShoesDTO(BaseModel):
    """DTO for recording a pickup."""

    user_email: str = Field(..., min_length=1, max_length=320)

    @field_validator("user_email", mode="after")
    @classmethod
    def strip_user_email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_email cannot be blank")
        return v


class PickupShoesResponseDTO(BaseModel):
    message: str
    status: str
    finish_time: str | None = None
    pickup_time: str | None = None

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TimeUnit(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @classmethod
    def parse(cls, raw: str) -> "TimeUnit":
        return cls(raw.strip().lower())

    @property
    def wire_label(self) -> str:
        return WIRE_LABELS[self]


WIRE_LABELS: dict[TimeUnit, str] = {
    TimeUnit.SECONDS: "SECONDS",
    TimeUnit.MINUTES: "MINUTES",
    TimeUnit.HOURS: "HOURS",
    TimeUnit.DAYS: "DAYS",
}


class ExchangeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str = Field(..., alias="refreshToken", description="Operator refresh token")
    unit: str = Field(..., description="Upper-case time unit label")
    value: int = Field(..., description="How long the new access token should be valid for")


class ExchangeSuccessResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    person_id: str = Field(..., alias="personId", description="Person the token was issued to")
    access_token: str = Field(..., alias="accessToken", description="Long duration access token")
    refresh_token: str = Field(..., alias="refreshToken", description="Refresh token")


class ExchangeErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error_type: str = Field(..., alias="type")
    error_class: str = Field(..., alias="class")
    error_code: int = Field(..., alias="errorCode")
    error_id: str = Field(..., alias="errorId")
    timestamp_millis: int = Field(..., alias="timestampMillis")

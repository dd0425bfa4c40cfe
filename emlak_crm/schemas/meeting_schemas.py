from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from emlak_crm.models.base import as_utc


class MeetingCreate(BaseModel):
    """Schema for creating a meeting"""

    title: str | None = Field(None, max_length=255)
    start_time: datetime
    notes: str | None = Field(None, max_length=2000)
    reminder_minutes: int | None = Field(None, ge=1, le=10080)
    tenant_id: int | None = Field(None, gt=0)
    property_id: int | None = Field(None, gt=0)
    owner_id: int | None = Field(None, gt=0)


class MeetingUpdate(BaseModel):
    """Schema for updating a meeting"""

    title: str | None = Field(None, max_length=255)
    start_time: datetime | None = None
    notes: str | None = Field(None, max_length=2000)
    reminder_minutes: int | None = Field(None, ge=1, le=10080)
    tenant_id: int | None = Field(None, gt=0)
    property_id: int | None = Field(None, gt=0)
    owner_id: int | None = Field(None, gt=0)


class MeetingResponse(BaseModel):
    """Schema for meeting response"""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    title: str | None
    start_time: datetime
    notes: str | None
    reminder_minutes: int | None
    tenant_id: int | None
    property_id: int | None
    owner_id: int | None
    created_at: datetime
    updated_at: datetime

    @field_validator("start_time")
    @classmethod
    def start_time_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class MeetingListResponse(BaseModel):
    """Schema for list of meetings"""

    meetings: list[MeetingResponse]
    total: int


class MeetingReminderResponse(BaseModel):
    """A meeting that is due for a reminder"""

    model_config = {"from_attributes": True}

    tag: str
    meeting_id: int
    title: str
    body: str
    start_time: datetime
    minutes_until: int


class MeetingReminderListResponse(BaseModel):
    reminders: list[MeetingReminderResponse]
    total: int

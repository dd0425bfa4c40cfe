from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from emlak_crm.database import get_db
from emlak_crm.dependencies import get_current_user
from emlak_crm.models.user import User
from emlak_crm.services.meeting_service import MeetingService
from emlak_crm.schemas.meeting_schemas import (
    MeetingCreate,
    MeetingUpdate,
    MeetingResponse,
    MeetingListResponse,
    MeetingReminderResponse,
    MeetingReminderListResponse,
)

router = APIRouter()


@router.post("/", response_model=MeetingResponse, status_code=status.HTTP_201_CREATED)
async def create_meeting(
    data: MeetingCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Schedule a meeting, optionally linked to a tenant, property or owner"""
    service = MeetingService(db)
    meeting = service.create_meeting(data, user)
    return meeting


@router.get("/", response_model=MeetingListResponse)
async def list_meetings(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get all meetings ordered by start time"""
    service = MeetingService(db)
    meetings = service.get_user_meetings(user)
    return MeetingListResponse(meetings=meetings, total=len(meetings))


@router.get("/range", response_model=MeetingListResponse)
async def list_meetings_in_range(
    start: datetime = Query(...),
    end: datetime = Query(...),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    service = MeetingService(db)
    meetings = service.get_meetings_in_range(user, start, end)
    return MeetingListResponse(meetings=meetings, total=len(meetings))


@router.get("/upcoming", response_model=MeetingListResponse)
async def list_upcoming_meetings(
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Next meetings from now on"""
    service = MeetingService(db)
    meetings = service.get_upcoming_meetings(user, limit=limit)
    return MeetingListResponse(meetings=meetings, total=len(meetings))


@router.get("/reminders", response_model=MeetingReminderListResponse)
async def list_due_reminders(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Meetings whose reminder window is open right now"""
    service = MeetingService(db)
    reminders = [MeetingReminderResponse.model_validate(n) for n in service.get_due_reminders(user)]
    return MeetingReminderListResponse(reminders=reminders, total=len(reminders))


@router.get("/{meeting_id}", response_model=MeetingResponse)
async def get_meeting(
    meeting_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    service = MeetingService(db)
    meeting = service.get_meeting(meeting_id, user)
    return meeting


@router.patch("/{meeting_id}", response_model=MeetingResponse)
async def update_meeting(
    meeting_id: int,
    data: MeetingUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update meeting details"""
    service = MeetingService(db)
    meeting = service.update_meeting(meeting_id, data, user)
    return meeting


@router.delete("/{meeting_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meeting(
    meeting_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    service = MeetingService(db)
    service.delete_meeting(meeting_id, user)
    return None

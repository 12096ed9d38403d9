"""
Pydantic schemas for API requests and responses.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from mythdetector.models import (
    EMPTY_STORY_MESSAGE,
    DiscoveryRecord,
    ReferenceEntry,
    UploadHistoryEntry,
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    timestamp: datetime


class RegisterRequest(BaseModel):
    """POST /api/auth/register request body."""
    email: str = Field(default="")
    password: str = Field(default="")
    confirm_password: str = Field(default="")


class LoginRequest(BaseModel):
    """POST /api/auth/login request body."""
    email: str = Field(default="")
    password: str = Field(default="")


class SessionResponse(BaseModel):
    """Issued session token."""
    token: str
    email: str
    display_name: str
    login_time: datetime


class DiscoveryResponse(BaseModel):
    """A mythological discovery."""
    subject_label: str
    confidence: float
    encyclopedia_summary: Optional[str]
    summary_display: str
    domain_description: str
    narrative: Optional[str] = None
    story_status: str = "none"
    message: Optional[str] = None
    source_image_ref: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: DiscoveryRecord) -> "DiscoveryResponse":
        return cls(
            subject_label=record.subject_label,
            confidence=record.confidence,
            encyclopedia_summary=record.encyclopedia_summary,
            summary_display=record.summary_display,
            domain_description=record.domain_description,
            narrative=record.narrative,
            story_status=record.story_status,
            message=EMPTY_STORY_MESSAGE if record.story_status == "empty" else None,
            source_image_ref=record.source_image_ref,
            created_at=record.created_at,
        )


class NarrativeRequest(BaseModel):
    """POST /api/discoveries/current/narrative request body."""
    twist: str = Field(default="", max_length=500)


class ReferenceEntryResponse(BaseModel):
    """A myth library entry."""
    name: str
    culture: str
    description: str
    related_names: List[str]
    provenance: str

    @classmethod
    def from_entry(cls, entry: ReferenceEntry) -> "ReferenceEntryResponse":
        return cls(**entry.to_dict())


class MythSearchResponse(BaseModel):
    query: str
    culture: str
    total: int
    myths: List[ReferenceEntryResponse]


class HistoryEntryResponse(BaseModel):
    subject_label: str
    timestamp: str
    identity: Optional[str]

    @classmethod
    def from_entry(cls, entry: UploadHistoryEntry) -> "HistoryEntryResponse":
        return cls(
            subject_label=entry.subject_label,
            timestamp=entry.timestamp,
            identity=entry.attributed_identity,
        )


class HistoryResponse(BaseModel):
    total: int
    entries: List[HistoryEntryResponse]

"""
Discovery domain models.

DiscoveryRecord - one image in, one mythological discovery out.
UploadHistoryEntry - append-only attribution of a successful discovery.
ReferenceEntry - one resolved mythological figure from the myth library.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple


NO_SUMMARY_MESSAGE = "No Wikipedia data found."
EMPTY_STORY_MESSAGE = "The model returned an empty story. Try a different twist!"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_label(label: str) -> str:
    """Lookup form of a label: stripped and lowercased."""
    return label.strip().lower()


@dataclass(frozen=True)
class DiscoveryRecord:
    """
    Result of the discovery pipeline for a single image.

    Only ever created after tagging succeeded, so subject_label is always
    non-empty. The narrative is the only field that changes afterwards and
    is replaced wholesale by with_narrative().
    """
    subject_label: str
    confidence: float
    encyclopedia_summary: Optional[str]
    domain_description: str
    source_image_ref: str
    narrative: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow, compare=False)

    def __post_init__(self):
        if not self.subject_label or not self.subject_label.strip():
            raise ValueError("DiscoveryRecord requires a non-empty subject_label")

    @property
    def lookup_key(self) -> str:
        return normalize_label(self.subject_label)

    @property
    def has_summary(self) -> bool:
        return self.encyclopedia_summary is not None

    @property
    def summary_display(self) -> str:
        return self.encyclopedia_summary if self.has_summary else NO_SUMMARY_MESSAGE

    @property
    def story_status(self) -> str:
        """'none' before any request, 'empty' if the model gave nothing back."""
        if self.narrative is None:
            return "none"
        return "ready" if self.narrative.strip() else "empty"

    def with_narrative(self, narrative: str) -> "DiscoveryRecord":
        return replace(self, narrative=narrative)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject_label": self.subject_label,
            "confidence": self.confidence,
            "encyclopedia_summary": self.encyclopedia_summary,
            "summary_display": self.summary_display,
            "domain_description": self.domain_description,
            "narrative": self.narrative,
            "story_status": self.story_status,
            "source_image_ref": self.source_image_ref,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class UploadHistoryEntry:
    """Upload history entry."""
    subject_label: str
    timestamp: str
    attributed_identity: Optional[str]


class Provenance(str, Enum):
    """Which tier answered a reference lookup."""
    LOCAL = "Local"
    REMOTE = "Remote"
    FALLBACK = "Fallback"


@dataclass(frozen=True)
class ReferenceEntry:
    """A mythological figure from the myth library."""
    name: str
    culture: str
    description: str
    related_names: Tuple[str, ...] = ()
    provenance: Provenance = Provenance.LOCAL

    @property
    def is_fallback(self) -> bool:
        return self.provenance is Provenance.FALLBACK

    @classmethod
    def fallback(cls, name: str) -> "ReferenceEntry":
        return cls(
            name=name,
            culture="Unknown",
            description=f'No data found for "{name}".',
            related_names=(),
            provenance=Provenance.FALLBACK,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "culture": self.culture,
            "description": self.description,
            "related_names": list(self.related_names),
            "provenance": self.provenance.value,
        }

"""
Discovery orchestrator.

Turns one image into one DiscoveryRecord:

    tag (fatal on failure) -> {encyclopedia, knowledge base} -> assemble

The two enrichment branches run concurrently and are both awaited before
assembly. Neither can fail the pipeline: the encyclopedia client degrades
to an absent summary and the knowledge base lookup is total.

The orchestrator does not track supersession. Callers that submit a new
image while an older analyze() is in flight must discard the stale result
themselves (see orchestration.slots).
"""
import asyncio
import hashlib
import logging
from datetime import datetime
from typing import Callable, Optional

from mythdetector.knowledge import mythology
from mythdetector.models import DiscoveryRecord, utcnow
from mythdetector.providers.base import (
    BaseEncyclopediaProvider,
    BaseNarrativeProvider,
    BaseTaggingProvider,
)
from mythdetector.providers.exceptions import RemoteServiceError
from .enums import PipelineStage, PipelineState, can_transition
from .errors import NoObjectIdentifiedError, PipelineError
from .history import HistorySink

logger = logging.getLogger(__name__)


def image_ref(image: bytes) -> str:
    """Opaque, deterministic handle for an uploaded image."""
    return hashlib.sha256(image).hexdigest()


class _PipelineRun:
    """State tracking for one analyze() call (logging only)."""

    def __init__(self, ref: str):
        self.ref = ref[:12]
        self.state = PipelineState.IDLE

    def advance(self, target: PipelineState) -> None:
        if not can_transition(self.state, target):
            raise RuntimeError(f"Invalid pipeline transition {self.state.value} -> {target.value}")
        logger.debug(f"[PIPELINE] {self.ref}: {self.state.value} -> {target.value}")
        self.state = target


class DiscoveryOrchestrator:
    """Coordinates tagging, enrichment and narrative generation."""

    def __init__(
        self,
        tagger: BaseTaggingProvider,
        encyclopedia: BaseEncyclopediaProvider,
        narrator: BaseNarrativeProvider,
        history_sink: Optional[HistorySink] = None,
        max_labels: int = 5,
        clock: Callable[[], datetime] = utcnow,
    ):
        if max_labels < 1:
            raise ValueError("max_labels must be at least 1")
        self.tagger = tagger
        self.encyclopedia = encyclopedia
        self.narrator = narrator
        self.history_sink = history_sink
        self.max_labels = max_labels
        self._clock = clock

    async def analyze(
        self,
        image: bytes,
        identity: Optional[str] = None,
        content_type: str = "image/jpeg",
    ) -> DiscoveryRecord:
        """
        Run the discovery pipeline for one image.

        Raises:
            PipelineError: tagging failed or found nothing; no record exists
        """
        ref = image_ref(image)
        run = _PipelineRun(ref)

        run.advance(PipelineState.TAGGING)
        try:
            tags = await self.tagger.identify(image, self.max_labels, content_type=content_type)
        except RemoteServiceError as e:
            run.advance(PipelineState.TAGGING_FAILED)
            logger.error(f"[PIPELINE] {run.ref}: tagging failed ({e.kind.value}): {e}")
            raise PipelineError(PipelineStage.TAGGING, e) from e

        tags = [t for t in tags if t.label and t.label.strip()]
        if not tags:
            run.advance(PipelineState.TAGGING_FAILED)
            logger.info(f"[PIPELINE] {run.ref}: no object identified")
            raise PipelineError(PipelineStage.TAGGING, NoObjectIdentifiedError())

        top = tags[0]
        run.advance(PipelineState.TAGGED)
        logger.info(f"[PIPELINE] {run.ref}: identified '{top.label}' ({top.confidence:.1f})")

        run.advance(PipelineState.ENRICHING)
        summary, description = await asyncio.gather(
            self._summarize(top.label),
            self._describe(top.label),
        )

        record = DiscoveryRecord(
            subject_label=top.label,
            confidence=top.confidence,
            encyclopedia_summary=summary,
            domain_description=description,
            source_image_ref=ref,
            created_at=self._clock(),
        )
        run.advance(PipelineState.ASSEMBLED)
        logger.info(
            f"[PIPELINE] {run.ref}: assembled '{record.subject_label}' "
            f"(summary={'yes' if record.has_summary else 'absent'})"
        )

        await self._notify_history(record, identity)
        return record

    async def append_narrative(self, record: DiscoveryRecord, twist: str) -> DiscoveryRecord:
        """
        Generate a story for an assembled record.

        Returns a new record whose narrative replaces any previous one. On
        GenerationError the passed record is left as it was.
        """
        story = await self.narrator.weave(record.subject_label, twist)
        return record.with_narrative(story)

    async def _summarize(self, label: str) -> Optional[str]:
        try:
            return await self.encyclopedia.summarize(label)
        except Exception as e:
            logger.warning(f"[PIPELINE] Encyclopedia lookup for '{label}' failed unexpectedly: {e}")
            return None

    async def _describe(self, label: str) -> str:
        return mythology.lookup(label)

    async def _notify_history(self, record: DiscoveryRecord, identity: Optional[str]) -> None:
        if self.history_sink is None:
            return
        timestamp = self._clock().isoformat()
        try:
            # Sinks may block on disk
            await asyncio.to_thread(self.history_sink.record, record.subject_label, identity, timestamp)
        except Exception:
            logger.exception(f"[PIPELINE] History recording failed for '{record.subject_label}'")

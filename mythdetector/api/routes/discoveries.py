"""
Discovery endpoints - upload an image, read the result, weave a story.

Each identity has one current discovery. A new upload replaces it; if an
older upload finishes after a newer one was submitted, its result is
dropped.
"""
import logging

from fastapi import APIRouter, Depends, File, UploadFile

from mythdetector.auth import SessionContext, require_session
from mythdetector.config import config
from mythdetector.orchestration import DiscoveryOrchestrator, DiscoverySlots
from ..dependencies import get_discovery_slots, get_orchestrator
from ..exceptions import ConflictError, NotFoundError, PayloadTooLargeError, ValidationError
from ..schemas import DiscoveryResponse, NarrativeRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/discoveries", tags=["Discoveries"])


@router.post("", response_model=DiscoveryResponse)
async def create_discovery(
    image: UploadFile = File(...),
    session: SessionContext = Depends(require_session),
    orchestrator: DiscoveryOrchestrator = Depends(get_orchestrator),
    slots: DiscoverySlots = Depends(get_discovery_slots),
) -> DiscoveryResponse:
    """
    Identify the object in an uploaded image and enrich it.

    Format support is left to the tagging service; only the declared media
    type and size are checked here.
    """
    content_type = image.content_type or ""
    if not content_type.startswith("image/"):
        raise ValidationError("File must be an image", detail=f"content_type={content_type or 'unknown'}")

    content = await image.read()
    if not content:
        raise ValidationError("Uploaded image is empty")
    if len(content) > config.max_upload_mb * 1024 * 1024:
        raise PayloadTooLargeError(config.max_upload_mb)

    token = slots.begin(session.identity)
    logger.info(f"[DISCOVERY] {session.identity}: request {token}, {len(content)} bytes")

    record = await orchestrator.analyze(content, identity=session.identity, content_type=content_type)

    if not slots.commit(session.identity, token, record):
        raise ConflictError("A newer image was submitted while this one was being analyzed")

    return DiscoveryResponse.from_record(record)


@router.get("/current", response_model=DiscoveryResponse)
async def get_current_discovery(
    session: SessionContext = Depends(require_session),
    slots: DiscoverySlots = Depends(get_discovery_slots),
) -> DiscoveryResponse:
    record = slots.get(session.identity)
    if record is None:
        raise NotFoundError("Discovery", "current")
    return DiscoveryResponse.from_record(record)


@router.post("/current/narrative", response_model=DiscoveryResponse)
async def weave_narrative(
    body: NarrativeRequest,
    session: SessionContext = Depends(require_session),
    orchestrator: DiscoveryOrchestrator = Depends(get_orchestrator),
    slots: DiscoverySlots = Depends(get_discovery_slots),
) -> DiscoveryResponse:
    """Generate a story for the current discovery, replacing any previous one."""
    record = slots.get(session.identity)
    if record is None:
        raise NotFoundError("Discovery", "current")

    try:
        updated = await orchestrator.append_narrative(record, body.twist)
    except ValueError as e:
        raise ValidationError("Please enter a twist for the myth", detail=str(e))

    if not slots.replace(session.identity, record, updated):
        raise ConflictError("The discovery changed while the story was being written")

    return DiscoveryResponse.from_record(updated)

"""
Orchestration Module.

The discovery pipeline: image -> tag -> {encyclopedia, knowledge base} ->
DiscoveryRecord, plus the decoupled narrative step and history hook.

Usage:
    from mythdetector.orchestration import DiscoveryOrchestrator
    record = await orchestrator.analyze(image_bytes, identity="user@example.com")
    record = await orchestrator.append_narrative(record, "it was found on the moon")
"""
from .enums import PipelineStage, PipelineState
from .errors import PipelineError, NoObjectIdentifiedError
from .history import (
    HistorySink,
    BaseHistoryRepository,
    InMemoryHistoryRepository,
    get_history_repository,
    reset_history_repository,
)
from .discovery import DiscoveryOrchestrator, image_ref
from .slots import DiscoverySlots

__all__ = [
    # Enums
    "PipelineStage",
    "PipelineState",

    # Errors
    "PipelineError",
    "NoObjectIdentifiedError",

    # History
    "HistorySink",
    "BaseHistoryRepository",
    "InMemoryHistoryRepository",
    "get_history_repository",
    "reset_history_repository",

    # Pipeline
    "DiscoveryOrchestrator",
    "DiscoverySlots",
    "image_ref",
]

"""
Discovery pipeline enumerations.
"""
from enum import Enum


class PipelineStage(str, Enum):
    """Stage of the discovery pipeline that produced a fatal error. Only tagging can."""
    TAGGING = "tagging"


class PipelineState(str, Enum):
    """
    States of a single analyze() call.

    IDLE -> TAGGING -> TAGGING_FAILED (terminal)
                    -> TAGGED -> ENRICHING -> ASSEMBLED
    """
    IDLE = "idle"
    TAGGING = "tagging"
    TAGGING_FAILED = "tagging_failed"
    TAGGED = "tagged"
    ENRICHING = "enriching"
    ASSEMBLED = "assembled"


_TRANSITIONS = {
    PipelineState.IDLE: {PipelineState.TAGGING},
    PipelineState.TAGGING: {PipelineState.TAGGING_FAILED, PipelineState.TAGGED},
    PipelineState.TAGGED: {PipelineState.ENRICHING},
    PipelineState.ENRICHING: {PipelineState.ASSEMBLED},
}


def can_transition(current: PipelineState, target: PipelineState) -> bool:
    return target in _TRANSITIONS.get(current, set())

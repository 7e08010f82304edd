from .control_dto import (
    ModeChangeRequest,
    ModeResponse,
    QuestionRequest,
    NavigationTargetRequest,
    NavigationTargetResponse,
    CommandRequest,
    CommandResponse,
    CycleResponse,
    StatusResponse,
)

__all__ = [
    "ModeChangeRequest",
    "ModeResponse",
    "QuestionRequest",
    "NavigationTargetRequest",
    "NavigationTargetResponse",
    "CommandRequest",
    "CommandResponse",
    "CycleResponse",
    "StatusResponse",
]

from typing import Optional
from pydantic import BaseModel, Field

from ...domain.models.modes import CycleKind, CycleReport, OperatingMode


class ModeChangeRequest(BaseModel):
    """DTO for switching the operating mode"""
    mode: OperatingMode


class ModeResponse(BaseModel):
    """DTO for the active mode after a switch"""
    mode: OperatingMode
    confirmation: str


class QuestionRequest(BaseModel):
    """DTO for an on-demand question about the current view"""
    question: str = Field(..., min_length=1, max_length=500)


class NavigationTargetRequest(BaseModel):
    """DTO for setting the object navigation guides toward"""
    target: str = Field(..., min_length=1, max_length=100)


class NavigationTargetResponse(BaseModel):
    target: str


class CommandRequest(BaseModel):
    """DTO for a transcribed voice command"""
    utterance: str = Field(..., min_length=1, max_length=500)


class CommandResponse(BaseModel):
    command: str


class CycleResponse(BaseModel):
    """DTO for the outcome of one capture cycle"""
    kind: CycleKind
    mode: OperatingMode
    executed: bool
    announced_text: Optional[str] = None
    detections: int = 0
    error: Optional[str] = None

    @classmethod
    def from_report(cls, report: CycleReport) -> "CycleResponse":
        return cls(
            kind=report.kind,
            mode=report.mode,
            executed=report.executed,
            announced_text=report.announced_text,
            detections=report.detections,
            error=report.error,
        )


class StatusResponse(BaseModel):
    """DTO for orchestrator status"""
    mode: OperatingMode
    is_processing: bool
    is_running: bool
    cloud_available: bool
    detector_available: bool
    navigation_target: str
    capture_interval_ms: int

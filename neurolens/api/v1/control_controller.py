# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.control_dto import (
    CommandRequest,
    CommandResponse,
    CycleResponse,
    ModeChangeRequest,
    ModeResponse,
    NavigationTargetRequest,
    NavigationTargetResponse,
    QuestionRequest,
    StatusResponse,
)
from ...application.orchestrator import CaptureOrchestrator
from ...core.exceptions import NeuroLensError
from ...domain.constants.phrases import Phrases
from ...di.container import get_container


router = APIRouter(tags=["control"])


def _orchestrator() -> CaptureOrchestrator:
    return get_container().get(CaptureOrchestrator)


@router.post("/capture", response_model=CycleResponse)
async def capture() -> CycleResponse:
    """
    Run one spoken cycle for the active mode (the "tap anywhere" action).

    Returns:
        CycleResponse; executed is false when a cycle was already in flight
    """
    orchestrator = _orchestrator()
    try:
        report = await orchestrator.trigger_vocal()
    except NeuroLensError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exception.user_message
        )
    return CycleResponse.from_report(report)


@router.put("/mode", response_model=ModeResponse)
async def change_mode(request: ModeChangeRequest) -> ModeResponse:
    """
    Switch the operating mode; the confirmation is announced immediately

    Args:
        request: Target mode
    """
    orchestrator = _orchestrator()
    mode = orchestrator.switch_mode(request.mode)
    return ModeResponse(mode=mode, confirmation=Phrases.MODE_CONFIRMATIONS[mode])


@router.post("/ask", response_model=CycleResponse)
async def ask(request: QuestionRequest) -> CycleResponse:
    orchestrator = _orchestrator()
    try:
        report = await orchestrator.ask(request.question)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except NeuroLensError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exception.user_message
        )
    return CycleResponse.from_report(report)


@router.put("/navigation-target", response_model=NavigationTargetResponse)
async def set_navigation_target(request: NavigationTargetRequest) -> NavigationTargetResponse:
    orchestrator = _orchestrator()
    try:
        target = orchestrator.set_navigation_target(request.target)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    return NavigationTargetResponse(target=target)


@router.post("/command", response_model=CommandResponse)
async def command(request: CommandRequest) -> CommandResponse:
    """
    Dispatch a transcribed voice command

    Args:
        request: Utterance as recognized by the speech front end

    Returns:
        CommandResponse with the parsed command name
    """
    orchestrator = _orchestrator()
    try:
        parsed = await orchestrator.handle_command(request.utterance)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    return CommandResponse(command=parsed.value)


@router.get("/status", response_model=StatusResponse)
async def get_status() -> StatusResponse:
    orchestrator = _orchestrator()
    return StatusResponse(
        mode=orchestrator.mode,
        is_processing=orchestrator.is_processing,
        is_running=orchestrator.is_running,
        cloud_available=orchestrator.chain.cloud_available(),
        detector_available=orchestrator.detector.is_available(),
        navigation_target=orchestrator.navigation_target,
        capture_interval_ms=orchestrator.capture_interval_ms,
    )

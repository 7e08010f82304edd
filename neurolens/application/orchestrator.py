"""
Capture Orchestrator
--------------------

Drives one perception-to-narration cycle at a time:

    capture -> detect -> classify -> narrate -> announce

Two kinds of trigger feed it:
- trigger_silent(): the periodic timer (Scene mode only); haptics, no speech
- trigger_vocal(): a user request; full pipeline including narration

The single-flight guard (is_processing) is checked and set before the first
await, so a trigger that arrives mid-cycle is dropped rather than queued. The
guard is released on every exit path. Mode and guard are plain fields of the
instance; nothing here is module-global.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ..core.exceptions import CaptureError, InferenceError, NarrationUnavailableError, NeuroLensError
from ..domain.constants.haptic_patterns import Direction, HapticPattern
from ..domain.constants.phrases import Phrases
from ..domain.models.detection import Detection
from ..domain.models.modes import CycleKind, CycleReport, OperatingMode
from ..processing.data_input.camera_source import CaptureDevice
from ..processing.data_input.data_models import FramePacket
from ..processing.detections.detector import Detector
from ..processing.scene.classifier import SceneClassifier
from ..processing.text.recognizer import StubTextRecognizer, TextRecognizer, organize_text_for_reading
from .narration.chain import NarrationFallbackChain
from .output_sequencer import OutputSequencer
from .voice_commands import VoiceCommand, extract_target, parse_command

logger = logging.getLogger(__name__)

# Horizontal band (normalized box centre) treated as straight ahead.
FORWARD_BAND = (0.4, 0.6)

CycleBody = Callable[[CycleKind, OperatingMode], Awaitable[CycleReport]]


def direction_of(detection: Detection) -> Direction:
    """Left / forward / right from the horizontal centre of the box."""
    box = detection.bounding_box
    centre = box.x + box.width / 2
    if centre < FORWARD_BAND[0]:
        return Direction.LEFT
    if centre > FORWARD_BAND[1]:
        return Direction.RIGHT
    return Direction.FORWARD


class CaptureOrchestrator:
    """
    Owns the operating mode, the single-flight guard and the periodic loop.

    Collaborators are injected so tests can drive every stage with fakes.
    """

    def __init__(
        self,
        camera: CaptureDevice,
        detector: Detector,
        chain: NarrationFallbackChain,
        sequencer: OutputSequencer,
        text_recognizer: Optional[TextRecognizer] = None,
        capture_interval_ms: int = 2000,
        navigation_target: str = "door",
        mode: OperatingMode = OperatingMode.SCENE,
    ):
        if capture_interval_ms <= 0:
            raise ValueError("capture_interval_ms must be positive")
        self.camera = camera
        self.detector = detector
        self.chain = chain
        self.sequencer = sequencer
        self.text_recognizer = text_recognizer or StubTextRecognizer()
        self.capture_interval_ms = capture_interval_ms
        self.navigation_target = navigation_target
        self.mode = OperatingMode(mode)
        self.is_processing = False
        self._loop_task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    # -------------------------------------------------------------------------
    # Triggers
    # -------------------------------------------------------------------------

    async def trigger_silent(self) -> CycleReport:
        """Periodic cycle: detection and haptics only, Scene mode only."""
        if self.mode is not OperatingMode.SCENE:
            return CycleReport(kind=CycleKind.SILENT, mode=self.mode, executed=False)
        return await self._guarded(CycleKind.SILENT, self._mode_cycle)

    async def trigger_vocal(self) -> CycleReport:
        """On-demand cycle for the active mode, spoken."""
        return await self._guarded(CycleKind.VOCAL, self._mode_cycle)

    async def ask(self, question: str) -> CycleReport:
        """Answer a question about the current view."""
        if not question or not question.strip():
            raise ValueError("Question must not be empty")

        async def body(kind: CycleKind, mode: OperatingMode) -> CycleReport:
            packet = await self.camera.capture_frame()
            detections, fallback = await self._detect(packet, kind, mode)
            if fallback is not None:
                return fallback
            summary = SceneClassifier.summarize(detections, packet.frame, packet.captured_at_epoch_millis)
            result = await self.chain.answer_question(question.strip(), summary)
            await self.sequencer.announce(result.text, priority=True)
            return CycleReport(
                kind=kind, mode=mode, executed=True, announced_text=result.text, detections=len(detections)
            )

        return await self._guarded(CycleKind.VOCAL, body)

    # -------------------------------------------------------------------------
    # Mode and target
    # -------------------------------------------------------------------------

    def switch_mode(self, mode: Union[OperatingMode, str]) -> OperatingMode:
        """
        Change the active mode and hand the confirmation to the sequencer.

        Synchronous: the confirmation is submitted to the voice channel before
        this returns, so it starts speaking ahead of the next cycle. Later
        priority speech still interrupts it like any other utterance.
        In-flight cycles are not waited for.

        Raises:
            ValueError: unknown mode name
        """
        if not isinstance(mode, OperatingMode):
            mode = OperatingMode(str(mode).strip().lower())
        previous = self.mode
        self.mode = mode
        logger.info(f"Mode switched: {previous.value} -> {mode.value}")
        self.sequencer.announce_nowait(Phrases.MODE_CONFIRMATIONS[mode], HapticPattern.SUCCESS, priority=True)
        return mode

    def set_navigation_target(self, target: str) -> str:
        target = (target or "").strip().lower()
        if not target:
            raise ValueError("Navigation target must not be empty")
        self.navigation_target = target
        logger.info(f"Navigation target set to '{target}'")
        return target

    # -------------------------------------------------------------------------
    # Periodic loop
    # -------------------------------------------------------------------------

    async def start(self) -> None:
        """Speak the ready message and start the periodic capture loop."""
        if self.is_running:
            return
        suffix = Phrases.READY_CLOUD_SUFFIX if self.chain.cloud_available() else ""
        await self.sequencer.announce(Phrases.READY.format(suffix=suffix), HapticPattern.SUCCESS, priority=True)
        self._loop_task = asyncio.create_task(self._periodic_loop())
        logger.info(f"Capture loop started (interval={self.capture_interval_ms}ms)")

    async def stop(self) -> None:
        task = self._loop_task
        self._loop_task = None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        await self.sequencer.stop()
        logger.info("Capture loop stopped")

    async def _periodic_loop(self) -> None:
        interval = self.capture_interval_ms / 1000.0
        while True:
            await asyncio.sleep(interval)
            if self.mode is OperatingMode.SCENE and not self.is_processing:
                await self.trigger_silent()

    # -------------------------------------------------------------------------
    # Voice commands
    # -------------------------------------------------------------------------

    async def handle_command(self, utterance: str) -> VoiceCommand:
        command = parse_command(utterance)
        logger.info(f"Voice command '{utterance}' -> {command.value}")

        if command is VoiceCommand.DESCRIBE_SCENE:
            await self.trigger_vocal()
        elif command is VoiceCommand.READ_TEXT:
            self.switch_mode(OperatingMode.TEXT)
        elif command in (VoiceCommand.FIND_OBJECT, VoiceCommand.NAVIGATE):
            target = extract_target(utterance)
            if target:
                self.set_navigation_target(target)
            self.switch_mode(OperatingMode.NAVIGATE)
        elif command is VoiceCommand.HELP:
            await self.sequencer.announce(Phrases.HELP, priority=True)
        elif command is VoiceCommand.SETTINGS:
            await self.sequencer.announce(Phrases.SETTINGS, priority=True)
        else:
            await self.sequencer.announce(Phrases.UNKNOWN_COMMAND, priority=True)
        return command

    # -------------------------------------------------------------------------
    # Cycle plumbing
    # -------------------------------------------------------------------------

    async def _guarded(self, kind: CycleKind, body: CycleBody) -> CycleReport:
        mode = self.mode
        if self.is_processing:
            logger.debug(f"Cycle in flight; dropping {kind.value} trigger")
            return CycleReport(kind=kind, mode=mode, executed=False)
        self.is_processing = True

        try:
            return await body(kind, mode)
        except CaptureError as exc:
            logger.warning(f"Capture failed: {exc.message}")
            return await self._report_failure(kind, mode, exc.message, exc.user_message)
        except NeuroLensError as exc:
            logger.warning(f"{type(exc).__name__} during {kind.value} cycle: {exc.message}")
            return await self._report_failure(kind, mode, exc.message, exc.user_message)
        except Exception as exc:
            logger.error(f"Unexpected error during {kind.value} cycle: {exc}", exc_info=True)
            return await self._report_failure(kind, mode, str(exc), Phrases.ANALYSIS_FAILED)
        finally:
            self.is_processing = False

    async def _report_failure(
        self,
        kind: CycleKind,
        mode: OperatingMode,
        error: str,
        spoken: str,
    ) -> CycleReport:
        if kind is CycleKind.SILENT:
            return CycleReport(kind=kind, mode=mode, executed=True, error=error)
        await self.sequencer.announce(spoken, HapticPattern.ERROR, priority=True)
        return CycleReport(kind=kind, mode=mode, executed=True, announced_text=spoken, error=error)

    async def _mode_cycle(self, kind: CycleKind, mode: OperatingMode) -> CycleReport:
        packet = await self.camera.capture_frame()
        if mode is OperatingMode.TEXT:
            return await self._text_cycle(packet, kind, mode)
        return await self._scene_cycle(packet, kind, mode)

    # -------------------------------------------------------------------------
    # Per-mode cycles
    # -------------------------------------------------------------------------

    async def _scene_cycle(self, packet: FramePacket, kind: CycleKind, mode: OperatingMode) -> CycleReport:
        detections, fallback = await self._detect(packet, kind, mode)
        if fallback is not None:
            return fallback

        if detections:
            await self.sequencer.haptic(HapticPattern.OBJECT_DETECTED)
        if kind is CycleKind.SILENT:
            logger.debug(f"Silent cycle: {len(detections)} detections")
            return CycleReport(kind=kind, mode=mode, executed=True, detections=len(detections))

        summary = SceneClassifier.summarize(detections, packet.frame, packet.captured_at_epoch_millis)
        description = await self.chain.describe_scene(summary)
        await self.sequencer.announce(description.text, priority=True)
        announced = description.text

        if mode is OperatingMode.NAVIGATE:
            guidance = await self.chain.guide_navigation(self.navigation_target, detections)
            await self.sequencer.announce(guidance.text, HapticPattern.NAVIGATION_CUE)
            announced = guidance.text
            await self._cue_target(detections)

        return CycleReport(
            kind=kind, mode=mode, executed=True, announced_text=announced, detections=len(detections)
        )

    async def _text_cycle(self, packet: FramePacket, kind: CycleKind, mode: OperatingMode) -> CycleReport:
        found = await self.text_recognizer.recognize_text(packet.frame)
        organized = organize_text_for_reading(found) if found else ""

        if organized:
            await self.sequencer.haptic(HapticPattern.TEXT_FOUND)
            if kind is CycleKind.SILENT:
                return CycleReport(kind=kind, mode=mode, executed=True, detections=len(found))
            text = Phrases.TEXT_FOUND.format(text=organized)
        elif kind is CycleKind.SILENT:
            return CycleReport(kind=kind, mode=mode, executed=True)
        else:
            text = Phrases.NO_TEXT

        await self.sequencer.announce(text, priority=True)
        return CycleReport(kind=kind, mode=mode, executed=True, announced_text=text, detections=len(found))

    async def _cue_target(self, detections: List[Detection]) -> None:
        target = self.navigation_target.lower()
        matches = [d for d in detections if d.label.lower() == target]
        if not matches:
            return
        best = max(matches, key=lambda d: d.confidence)
        direction = direction_of(best)
        if best.estimated_distance_meters is None:
            await self.sequencer.cue_direction(direction)
            return
        # Queued after the guidance sentence
        await self.sequencer.announce_navigation(
            direction, best.label, best.estimated_distance_meters, priority=False
        )
        await self.sequencer.cue_distance(best.estimated_distance_meters)

    # -------------------------------------------------------------------------
    # Detector unavailable
    # -------------------------------------------------------------------------

    async def _detect(
        self, packet: FramePacket, kind: CycleKind, mode: OperatingMode
    ) -> Tuple[Optional[List[Detection]], Optional[CycleReport]]:
        """
        Run the detector; on InferenceError fall back to cloud image analysis.

        Returns:
            (detections, None) on success, or (None, report) when the fallback
            already spoke for this cycle

        Raises:
            InferenceError: silent cycles never fall back
        """
        try:
            return await self.detector.detect(packet.frame), None
        except InferenceError as exc:
            if kind is CycleKind.SILENT:
                raise
            logger.warning(f"Local detection unavailable: {exc.message}")
            spoken = await self._describe_without_detector(packet)
            return None, CycleReport(kind=kind, mode=mode, executed=True, announced_text=spoken, error=exc.message)

    async def _describe_without_detector(self, packet: FramePacket) -> str:
        if not self.chain.cloud_available():
            await self.sequencer.announce(Phrases.VISION_UNAVAILABLE, priority=True)
            return Phrases.VISION_UNAVAILABLE

        await self.sequencer.haptic(HapticPattern.SUCCESS)
        try:
            result = await self.chain.describe_image(packet.frame)
        except NarrationUnavailableError as exc:
            logger.error(f"Cloud image analysis failed: {exc.message}")
            await self.sequencer.announce(exc.user_message, priority=True)
            return exc.user_message

        await self.sequencer.announce(result.text, priority=True)
        return result.text

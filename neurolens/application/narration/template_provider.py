"""Local template provider. Deterministic and on-device; it cannot fail."""

from __future__ import annotations

import math
import time
from typing import Mapping, Optional, Sequence

from ...domain.models.detection import Detection
from ...domain.models.narration import NarrationKind, NarrationRequest, NarrationResult, NarrationSource
from ...domain.models.scene import SceneSummary
from .base import NarrationProvider

LOCAL_CONFIDENCE: Mapping[NarrationKind, float] = {
    NarrationKind.SCENE: 0.85,
    NarrationKind.NAVIGATION: 0.80,
    NarrationKind.QUESTION: 0.75,
}

CLOSE_DISTANCE_METERS = 2.0
UNKNOWN_DISTANCE_METERS = 10.0
UNKNOWN_NAVIGATION_DISTANCE_METERS = 5.0


def _distance(detection: Detection, default: float) -> float:
    if detection.estimated_distance_meters is None:
        return default
    return detection.estimated_distance_meters


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def describe_scene(summary: SceneSummary, detected_text: Optional[str] = None) -> str:
    scene = summary.scene_type.value
    lighting = summary.lighting.value

    if not summary.objects:
        text = (
            f"You appear to be in a {scene} area with {lighting} lighting. "
            "No specific objects detected nearby."
        )
    else:
        close = [d.label for d in summary.objects if _distance(d, UNKNOWN_DISTANCE_METERS) < CLOSE_DISTANCE_METERS]
        far = [d.label for d in summary.objects if _distance(d, UNKNOWN_DISTANCE_METERS) >= CLOSE_DISTANCE_METERS]

        parts = [f"You're in a {scene} area with {lighting} lighting."]
        if close:
            parts.append(f"Close to you: {', '.join(close)}.")
        if far:
            parts.append(f"Further away: {', '.join(far)}.")
        text = " ".join(parts)

    if detected_text:
        text += f' Visible text: "{detected_text}".'
    return text


def guide_navigation(target: str, detections: Sequence[Detection]) -> str:
    wanted = target.lower().strip()
    match = next((d for d in detections if wanted and wanted in d.label.lower()), None)
    if match is not None:
        meters = _round_half_up(_distance(match, UNKNOWN_NAVIGATION_DISTANCE_METERS))
        return f"{target} is approximately {meters} meters ahead of you."
    return f"I don't see a {target} in the current view. Try looking around."


def answer_question(question: str, summary: SceneSummary) -> str:
    lowered = question.lower()
    scene = summary.scene_type.value
    count = len(summary.objects)

    if "what" in lowered or "see" in lowered:
        if not summary.objects:
            return f"I can't see any objects in this {scene} area."
        return f"I can see {', '.join(summary.labels)} in this {scene} area."
    if "where" in lowered:
        return f"You're in a {scene} area."
    if "how many" in lowered:
        return f"I can see {count} objects."
    return f"I see {count} objects in this {scene} area."


class TemplateNarrationProvider(NarrationProvider):
    """
    Last provider in every chain.

    Pure string formatting: it is always available and never raises for the
    kinds it supports. It cannot narrate raw images.
    """

    name = "template"
    source = NarrationSource.LOCAL
    kinds = frozenset(LOCAL_CONFIDENCE)

    async def try_generate(
        self,
        request: NarrationRequest,
        *,
        timeout_seconds: float = 8.0,
    ) -> NarrationResult:
        t0 = time.monotonic()

        if request.kind == NarrationKind.NAVIGATION:
            text = guide_navigation(request.target, request.detections)
        elif request.kind == NarrationKind.QUESTION:
            text = answer_question(request.question, request.summary)
        else:
            text = describe_scene(request.summary, request.detected_text)

        return NarrationResult(
            text=text,
            confidence=LOCAL_CONFIDENCE.get(request.kind, LOCAL_CONFIDENCE[NarrationKind.SCENE]),
            source=self.source,
            latency_millis=int(round((time.monotonic() - t0) * 1000)),
        )

"""Prompt construction for the cloud narration provider."""

from typing import Optional, Sequence

from ...domain.models.detection import Detection
from ...domain.models.scene import SceneSummary


def _distance(detection: Detection, unknown: str = "?") -> str:
    if detection.estimated_distance_meters is None:
        return unknown
    return f"{detection.estimated_distance_meters:.1f}"


def _visible_text_line(detected_text: Optional[str]) -> str:
    return f'- Visible text: "{detected_text}"\n' if detected_text else ""


def scene_prompt(summary: SceneSummary, detected_text: Optional[str] = None) -> str:
    objects = ", ".join(
        f"{d.label} ({_distance(d)}m away, {round(d.confidence * 100)}% confident)"
        for d in summary.objects
    ) or "none"
    return (
        "You are an AI assistant helping a visually impaired person understand their surroundings.\n\n"
        "Scene Analysis:\n"
        f"- Location type: {summary.scene_type.value}\n"
        f"- Lighting: {summary.lighting.value}\n"
        f"- Detected objects: {objects}\n"
        f"{_visible_text_line(detected_text)}\n"
        "Provide a natural, conversational description of this scene in 2-3 sentences. Focus on:\n"
        "1. Overall environment and atmosphere\n"
        "2. Key objects and their spatial relationships\n"
        "3. Any important details for navigation or safety\n\n"
        "Be concise, helpful, and conversational. Speak directly to the user."
    )


def navigation_prompt(target: str, detections: Sequence[Detection], user_intent: str = "") -> str:
    visible = "\n".join(
        f"- {d.label} at approximately {_distance(d, 'unknown')} meters ({round(d.confidence * 100)}% confident)"
        for d in detections
    ) or "- nothing detected"
    return (
        "You are an AI assistant helping a visually impaired person navigate.\n\n"
        f"User's goal: {user_intent or f'find the {target}'}\n"
        f"Target object: {target}\n\n"
        "Currently visible objects:\n"
        f"{visible}\n\n"
        "Provide clear, concise navigation instructions. Be specific about direction and distance. "
        "Keep it under 30 words."
    )


def question_prompt(question: str, summary: SceneSummary, detected_text: Optional[str] = None) -> str:
    objects = ", ".join(f"{d.label} ({_distance(d)}m away)" for d in summary.objects) or "none"
    return (
        "You are helping a visually impaired person understand their surroundings.\n\n"
        "Scene information:\n"
        f"- Type: {summary.scene_type.value}\n"
        f"- Lighting: {summary.lighting.value}\n"
        f"- Visible objects: {objects}\n"
        f"{_visible_text_line(detected_text)}\n"
        f'User\'s question: "{question}"\n\n'
        "Provide a helpful, concise answer (under 40 words). Be specific and actionable."
    )


IMAGE_PROMPT = (
    "You are assisting a visually impaired person. Analyze this image and provide:\n\n"
    "1. A brief, natural description of the scene (2-3 sentences)\n"
    "2. Important objects and their approximate locations (left, right, center, near, far)\n"
    "3. Any text visible in the image\n"
    "4. Potential hazards or obstacles\n"
    "5. Helpful navigation cues\n\n"
    "Keep your response conversational and under 100 words. "
    "Focus on what's most important for navigation and safety."
)

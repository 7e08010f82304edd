"""
NeuroLens root package.

This package contains the perception-to-narration orchestrator: frame capture,
local object detection, scene classification, the cloud/local narration
fallback chain, the voice and haptic output channels, and a small FastAPI
control surface (main.py) that drives them.
"""

"""
API layer for NeuroLens.

Exposes the control endpoints under /api/v1/control (capture, mode, ask,
navigation target, voice command, status).
"""

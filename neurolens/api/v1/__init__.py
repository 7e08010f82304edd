from .control_controller import router as control_router


__all__ = ["control_router"]

from .core import capture_statements, resolve_event_target, run_capture

__all__ = ["capture_statements", "resolve_event_target", "run_capture"]

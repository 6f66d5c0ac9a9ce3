from .store import SessionState, SessionStore  # noqa: F401

__all__ = ["SessionState", "SessionStore"]

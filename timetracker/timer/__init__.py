"""Timer package."""

from .session import TimerSession, SessionSnapshot
from .correction import TimeCorrector, NoCorrection

__all__ = [
    "TimerSession",
    "SessionSnapshot",
    "TimeCorrector",
    "NoCorrection",
]

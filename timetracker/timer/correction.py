"""Manual time-adjustment seam for ``TimerSession.correct``.

No adjustment is implemented yet: ``NoCorrection`` accepts any call and
leaves the session untouched.  A real corrector receives the session and
whatever arguments the caller passed to ``correct``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .session import TimerSession


class TimeCorrector(Protocol):
    def correct(self, session: TimerSession, *args: Any, **kwargs: Any) -> None:
        ...


class NoCorrection:
    """Default corrector: performs no state change."""

    def correct(self, session: TimerSession, *args: Any, **kwargs: Any) -> None:
        return None

"""
Transient success / error banners
Only one banner is active at a time; it expires after a fixed delay
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

ERROR = "error"
SUCCESS = "success"


@dataclass(frozen=True)
class Banner:
    kind: str
    message: str
    shown_at: float


class Notifier:
    """
    Holds the active banner. Posting a new banner replaces the previous one,
    so when several problems are reported in a row only the last stays visible.
    """

    def __init__(self, duration: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.clock = clock
        self.history: List[Banner] = []
        self._active: Optional[Banner] = None

    def error(self, message: str) -> Banner:
        return self._show(ERROR, message)

    def success(self, message: str) -> Banner:
        return self._show(SUCCESS, message)

    def clear(self):
        self._active = None

    def current(self) -> Optional[Banner]:
        """Return the active banner, or None once it has expired"""
        banner = self._active
        if banner is None:
            return None

        if self.clock() - banner.shown_at >= self.duration:
            # Expiry only ever removes the banner that is still active
            if self._active is banner:
                self._active = None
            return None

        return banner

    def _show(self, kind: str, message: str) -> Banner:
        banner = Banner(kind=kind, message=message, shown_at=self.clock())
        self._active = banner
        self.history.append(banner)
        logger.debug("Banner (%s): %s", kind, message)
        return banner

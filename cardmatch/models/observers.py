"""Change notification for game observers.

Observers are zero-argument callbacks. They are told *that* the game
changed and read whatever state they need themselves. Notification is
synchronous and single-threaded: a callback must not submit a new turn
request while it is being notified.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


@dataclass(frozen=True)
class ObserverHandle:
    """Token returned on registration, used to unregister later."""

    handle_id: int


class ObserverRegistry:
    """Ordered collection of observer callbacks."""

    def __init__(self) -> None:
        self._observers: dict[ObserverHandle, Observer] = {}
        self._ids = itertools.count(1)
        self._notifying = False

    @property
    def is_notifying(self) -> bool:
        """True while callbacks are being invoked."""
        return self._notifying

    def register(self, observer: Observer) -> ObserverHandle:
        """Add an observer. The same callback may be registered twice."""
        handle = ObserverHandle(next(self._ids))
        self._observers[handle] = observer
        return handle

    def unregister(self, handle: ObserverHandle) -> bool:
        """Remove an observer.

        Returns:
            True if the handle was registered.
        """
        return self._observers.pop(handle, None) is not None

    def notify(self) -> None:
        """Invoke every observer in registration order.

        A failing observer is logged and does not stop the others.
        """
        self._notifying = True
        try:
            for observer in list(self._observers.values()):
                try:
                    observer()
                except Exception:
                    logger.exception(f"Observer {observer!r} failed")
        finally:
            self._notifying = False

    def __len__(self) -> int:
        return len(self._observers)

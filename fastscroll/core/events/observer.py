from loguru import logger
from typing import Callable, List


class Signal:
    """
    Synchronous observer used for change notifications.

    Subscribers are called in connection order on the emitting thread.
    A failing subscriber is logged and skipped so the remaining ones
    still receive the notification.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable):
        """Connect a callback. Connecting the same callback twice is a no-op."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        """Disconnect a callback if it is connected."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def disconnect_all(self):
        self._subscribers.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, *args, **kwargs):
        """Deliver arguments to every subscriber."""
        # Iterate over a copy: a subscriber may disconnect itself.
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")

    def emit_while(self, is_current: Callable[[], bool], *args, **kwargs):
        """
        Deliver arguments while ``is_current()`` holds.

        Checked before each subscriber; once it fails the remaining
        subscribers are skipped, so a payload superseded by a nested or
        concurrent emit is not delivered after its successor.
        """
        for sub in list(self._subscribers):
            if not is_current():
                logger.debug(f"Signal '{self.name}' dropped a superseded emit")
                return
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")

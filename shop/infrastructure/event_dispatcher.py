# shop/infrastructure/event_dispatcher.py
import logging
import threading
from contextlib import nullcontext

from shop.domain.events import Event
from shop.domain.interfaces import EventHandler


class EventDispatcher:
    """Routes events to the handlers registered for their ``event_type``.

    Handlers run synchronously, in registration order. The first handler that
    raises stops the notification and the exception reaches the caller.
    With ``thread_safe=True`` registry access and the notify loop are
    serialized through a re-entrant lock.
    """

    def __init__(
        self, logger: logging.Logger | None = None, thread_safe: bool = False
    ) -> None:
        self.handlers: dict[str, list[EventHandler]] = {}
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock() if thread_safe else nullcontext()

    @property
    def event_handlers(self) -> dict[str, list[EventHandler]]:
        return self.handlers

    def register(self, event_type: str, handler: EventHandler) -> None:
        if not event_type:
            raise ValueError("Event type must be a non-empty string")
        with self._lock:
            self.handlers.setdefault(event_type, []).append(handler)
        self.logger.debug(
            f"Registered {type(handler).__name__} for {event_type}"
        )

    def unregister(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            handlers = self.handlers.get(event_type)
            if handlers is None:
                return
            # identity match: equal-but-distinct handlers stay registered
            for index, registered in enumerate(handlers):
                if registered is handler:
                    del handlers[index]
                    self.logger.debug(
                        f"Unregistered {type(handler).__name__} from {event_type}"
                    )
                    return

    def unregister_all(self) -> None:
        with self._lock:
            self.handlers.clear()
        self.logger.debug("Unregistered all event handlers")

    def notify(self, event: Event) -> None:
        event_type = event.event_type
        with self._lock:
            handlers = tuple(self.handlers.get(event_type, ()))
            self.logger.debug(
                f"Notifying {len(handlers)} handler(s) of {event_type}"
            )
            for handler in handlers:
                try:
                    handler.handle(event)
                except Exception:
                    self.logger.error(
                        f"{type(handler).__name__} failed handling {event_type}",
                        exc_info=True,
                    )
                    raise

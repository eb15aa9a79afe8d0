"""Ordered message channel between a controller and its rendering surface."""

import logging
from typing import Callable, List, Optional, Union

from .messages import ControllerMessage, Message, ViewMessage, parse_message


logger = logging.getLogger(__name__)

Listener = Callable[[Message], None]


class Subscription:
    """Handle returned by the channel; dispose() detaches the listener."""

    def __init__(self, listeners: List[Listener], listener: Listener):
        self._listeners = listeners
        self._listener = listener
        self.disposed = False

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


class MessageChannel:
    """
    Two-way channel carrying panel messages.
    Delivery is synchronous and in posting order. Raw dicts are parsed
    first; anything that does not parse is dropped.
    """

    def __init__(self):
        self._to_controller: List[Listener] = []
        self._to_view: List[Listener] = []
        self.disposed = False

    def on_controller_message(self, listener: Callable[[ControllerMessage], None]) -> Subscription:
        """Subscribe to messages travelling view -> controller."""
        return self._subscribe(self._to_controller, listener)

    def on_view_message(self, listener: Callable[[ViewMessage], None]) -> Subscription:
        """Subscribe to messages travelling controller -> view."""
        return self._subscribe(self._to_view, listener)

    def post_to_controller(self, message: Union[Message, dict]) -> None:
        self._deliver(self._to_controller, message, "controller")

    def post_to_view(self, message: Union[Message, dict]) -> None:
        self._deliver(self._to_view, message, "view")

    def dispose(self) -> None:
        """Detach every listener; later posts are dropped."""
        self.disposed = True
        self._to_controller.clear()
        self._to_view.clear()

    def _subscribe(self, listeners: List[Listener], listener: Listener) -> Subscription:
        if self.disposed:
            raise RuntimeError("Channel is disposed")
        listeners.append(listener)
        return Subscription(listeners, listener)

    def _deliver(self, listeners: List[Listener], message: Union[Message, dict], target: str) -> None:
        if self.disposed:
            logger.debug("Dropping message to disposed %s: %r", target, message)
            return

        parsed: Optional[Message] = parse_message(message) if isinstance(message, dict) else message
        if parsed is None:
            return

        logger.debug("-> %s: %s", target, parsed.command)
        # Listeners may unsubscribe while being notified
        for listener in list(listeners):
            listener(parsed)

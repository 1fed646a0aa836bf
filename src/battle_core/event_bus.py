"""
Battle event bus

Synchronous publish/subscribe channel between the engine and whatever
presents the battle (logs, UIs, recorders). The bus is owned explicitly: the
engine takes one in its constructor and there is no process-wide instance,
so a fresh bus (or `reset()`) at the start of a session guarantees stale
subscribers never fire.

Events are advisory. Nothing in the engine reads them back, and a failing
subscriber is logged and skipped without affecting the battle or the other
subscribers.
"""

import logging
import time
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict, Field

from src.battle_core.enums import BattleEventType

logger = logging.getLogger(__name__)

WILDCARD = "*"

EventKey = Union[BattleEventType, str]


class BattleEvent(BaseModel):
    """Event envelope. Type-specific payload fields are stored as extras."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: BattleEventType
    timestamp: float = Field(default_factory=time.time)

    @property
    def data(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


EventHandler = Callable[[BattleEvent], None]


def create_event(event_type: BattleEventType, **fields: Any) -> BattleEvent:
    return BattleEvent(type=event_type, **fields)


class EventBus:
    """
    Pub-sub for BattleEvents.

    Subscribers are keyed by event type, or "*" for every event. Delivery is
    synchronous and in subscription order.
    """

    def __init__(self) -> None:
        self._subscriptions: list[tuple[str, EventHandler]] = []

    @staticmethod
    def _key(event_type: EventKey) -> str:
        return event_type.value if isinstance(event_type, BattleEventType) else event_type

    def subscribe(self, event_type: EventKey, handler: EventHandler) -> Callable[[], None]:
        """
        Register a handler.

        Args:
            event_type: A BattleEventType, its string tag, or "*" for all events
            handler: Called with each matching BattleEvent

        Returns:
            A zero-argument callable that removes this subscription
        """
        key = self._key(event_type)
        if key != WILDCARD:
            BattleEventType(key)  # unknown tags fail here rather than never firing
        entry = (key, handler)
        self._subscriptions.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscriptions:
                self._subscriptions.remove(entry)

        return unsubscribe

    def unsubscribe(self, event_type: EventKey, handler: EventHandler) -> None:
        key = self._key(event_type)
        self._subscriptions = [(k, h) for k, h in self._subscriptions if not (k == key and h is handler)]

    def publish(self, event: BattleEvent) -> None:
        key = event.type.value
        targets = [handler for k, handler in self._subscriptions if k == key or k == WILDCARD]
        for handler in targets:
            try:
                handler(event)
            except Exception:
                logger.exception("Event subscriber failed on '%s'", key)

    def emit(self, event_type: BattleEventType, **fields: Any) -> BattleEvent:
        """Build and publish an event in one step."""
        event = create_event(event_type, **fields)
        self.publish(event)
        return event

    def reset(self) -> None:
        """Drop every subscription."""
        self._subscriptions.clear()

    def subscriber_count(self, event_type: EventKey | None = None) -> int:
        if event_type is None:
            return len(self._subscriptions)
        key = self._key(event_type)
        return sum(1 for k, _ in self._subscriptions if k == key)

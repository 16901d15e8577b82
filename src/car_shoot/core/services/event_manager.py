"""
event_manager.py
----------------
Event-driven notifications for round and combat outcomes.
Lets the frontend and tests observe the simulation without coupling to it.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from car_shoot.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class EnemyDestroyedEvent(BaseEvent):
    """Dispatched when an enemy's health reaches zero or an area kill hits it."""
    label: str
    archetype: str
    cause: str  # "projectile" or "power_up"


@dataclass(frozen=True)
class PowerUpTriggeredEvent(BaseEvent):
    """Dispatched when a projectile detonates the power-up."""
    enemies_destroyed: int


@dataclass(frozen=True)
class RoundOverEvent(BaseEvent):
    """Dispatched once when the last enemy of a round is gone."""
    score: int
    high_score: int


@dataclass(frozen=True)
class RoundRestartedEvent(BaseEvent):
    """Dispatched when restart input starts a new round."""
    pass


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop the others.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(
                    f"Error in event callback {callback_name}: {e}",
                    category="event_manager"
                )

    def clear_all(self) -> None:
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())

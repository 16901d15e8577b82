"""
collision_detector.py
---------------------
Rectangle-overlap contact tracking for collidable sprites.

Produces the BEGIN/END CollisionEvents that the simulation drains each tick.
Only pair transitions are reported: BEGIN when two colliders start
overlapping, END when they separate. Pairs whose sprites disappeared or
stopped being collidable are dropped without an END event.
"""

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.systems.collision.collision_manager import CollisionEvent, CollisionPhase


class CollisionDetector:
    """Tracks overlapping collider pairs across frames."""

    def __init__(self):
        self._contacts = set()  # {(label_a, label_b)} with label_a < label_b

    def detect(self, sprites) -> list:
        """
        Compare current overlaps against last frame's.

        Args:
            sprites: SpriteRegistry (or any iterable source with .values()).

        Returns:
            list[CollisionEvent] for this frame, BEGIN events sorted by pair.
        """
        colliders = [s for s in sprites.values() if s.collision]
        rects = [(s.label, s.get_rect()) for s in colliders]
        live = {label for label, _ in rects}

        current = set()
        for i, (label_a, rect_a) in enumerate(rects):
            for label_b, rect_b in rects[i + 1:]:
                if rect_a.colliderect(rect_b):
                    current.add((label_a, label_b) if label_a < label_b else (label_b, label_a))

        events = [CollisionEvent(a, b, CollisionPhase.BEGIN) for a, b in sorted(current - self._contacts)]
        for a, b in sorted(self._contacts - current):
            if a in live and b in live:
                events.append(CollisionEvent(a, b, CollisionPhase.END))

        if events:
            DebugLogger.trace(f"{len(events)} collision event(s)", category="collision")

        self._contacts = current
        return events

    def reset(self) -> None:
        self._contacts.clear()

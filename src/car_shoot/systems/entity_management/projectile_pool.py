"""
projectile_pool.py
------------------
Free-list of reusable projectile labels.

Responsibilities
----------------
- Hand out a label per shot while the magazine is not empty.
- Take labels back when their projectile is destroyed.
- Keep `available + in flight == magazine size` at all times.
"""

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.debug.invariants import violation
from car_shoot.core.runtime.game_settings import ProjectileSettings


class ProjectilePool:
    """Magazine of labels "marble1".."marbleK"."""

    def __init__(self, magazine_size: int = ProjectileSettings.MAGAZINE_SIZE,
                 prefix: str = ProjectileSettings.LABEL_PREFIX):
        if magazine_size < 1:
            raise ValueError(f"Magazine size must be positive, got {magazine_size}")
        self.magazine_size = magazine_size
        self.all_labels = frozenset(f"{prefix}{i}" for i in range(1, magazine_size + 1))
        # pop() takes from the end, so the lowest label fires first
        self._available = [f"{prefix}{i}" for i in range(magazine_size, 0, -1)]

    def acquire(self):
        """Pop a free label, or None when the magazine is empty."""
        if not self._available:
            DebugLogger.trace("Magazine empty, shot ignored", category="projectile")
            return None
        return self._available.pop()

    def release(self, label: str) -> None:
        """Return a label whose projectile was destroyed."""
        if label not in self.all_labels:
            raise violation(f"'{label}' is not a projectile label", category="projectile")
        if label in self._available:
            raise violation(f"Projectile '{label}' released twice", category="projectile")
        self._available.append(label)
        DebugLogger.trace(f"Projectile '{label}' back in magazine", category="projectile")

    @property
    def available(self) -> int:
        return len(self._available)

    def __len__(self) -> int:
        return len(self._available)

    def __contains__(self, label) -> bool:
        return label in self._available

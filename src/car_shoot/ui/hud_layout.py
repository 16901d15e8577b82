"""
hud_layout.py
-------------
Loads HUD text placement from YAML.

Every label the game displays has a built-in spec from TextLayout; entries in
`config/ui/hud.yaml` override them. Unknown labels and malformed entries are
skipped with a warning.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from car_shoot.core.debug.debug_logger import DebugLogger
from car_shoot.core.runtime.game_settings import TextLayout

UI_CONFIG_ROOT = Path(__file__).resolve().parent.parent / "config" / "ui"


@dataclass(frozen=True)
class TextSpec:
    label: str
    position: Tuple[float, float]
    fmt: str
    font_size: int = TextLayout.FONT_SIZE

    def render(self, value) -> str:
        return self.fmt.format(value)


DEFAULT_SPECS = {
    spec.label: spec for spec in (
        TextSpec(*TextLayout.CARS_LEFT),
        TextSpec(*TextLayout.SCORE),
        TextSpec(*TextLayout.HIGH_SCORE),
        TextSpec(*TextLayout.GAME_OVER, font_size=TextLayout.GAME_OVER_FONT_SIZE),
    )
}

# Texts shown for the whole session, in display order
HUD_LABELS = (TextLayout.CARS_LEFT[0], TextLayout.SCORE[0], TextLayout.HIGH_SCORE[0])
GAME_OVER_LABEL = TextLayout.GAME_OVER[0]


class HudLayout:
    """Label -> TextSpec lookup with built-in defaults."""

    def __init__(self, overrides: Optional[Dict[str, TextSpec]] = None):
        self.specs = dict(DEFAULT_SPECS)
        if overrides:
            self.specs.update(overrides)

    def __getitem__(self, label: str) -> TextSpec:
        return self.specs[label]

    @classmethod
    def load(cls, filename: str = "hud.yaml", base_path=UI_CONFIG_ROOT) -> "HudLayout":
        """
        Load overrides from a YAML file.

        Args:
            filename: File name relative to `base_path`
            base_path: Directory holding UI configs

        Returns:
            HudLayout; the built-in layout if the file is missing or unreadable.
        """
        full_path = Path(base_path) / filename

        try:
            with open(full_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            DebugLogger.warn(f"HUD layout not loaded from {full_path}: {e}", category="loading")
            return cls()

        if not isinstance(config, dict):
            DebugLogger.warn(f"HUD layout {full_path.name} is not a mapping", category="loading")
            return cls()

        overrides = {}
        for label, entry in config.items():
            spec = _parse_entry(label, entry)
            if spec is not None:
                overrides[label] = spec

        DebugLogger.system(f"Loaded {len(overrides)} HUD text spec(s)", category="loading")
        return cls(overrides)


def _parse_entry(label, entry) -> Optional[TextSpec]:
    default = DEFAULT_SPECS.get(label)
    if default is None:
        DebugLogger.warn(f"Unknown HUD text '{label}'", category="loading")
        return None
    if not isinstance(entry, dict):
        DebugLogger.warn(f"HUD text '{label}' is not a mapping", category="loading")
        return None

    try:
        x, y = entry.get("position", default.position)
        spec = TextSpec(
            label=label,
            position=(float(x), float(y)),
            fmt=str(entry.get("format", default.fmt)),
            font_size=int(entry.get("font_size", default.font_size)),
        )
        # Formats receive one positional value
        spec.render(0)
        return spec
    except (TypeError, ValueError, KeyError, IndexError) as e:
        DebugLogger.warn(f"HUD text '{label}' is malformed: {e}", category="loading")
        return None

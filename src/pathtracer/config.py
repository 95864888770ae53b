# config.py
import os
from dataclasses import dataclass, replace
from typing import Optional

# Named quality settings: samples per pixel and the bounce limit.
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 8},
    "preview": {"samples": 32, "bounces": 20},
    "final": {"samples": 200, "bounces": 50},
}

DEFAULT_QUALITY = "preview"

@dataclass(frozen=True)
class RenderSettings:
    """
    Everything the renderer needs besides the scene and the camera.

    workers=None uses one process per CPU; workers=1 renders in-process.
    """
    width: int = 400
    height: int = 225
    samples_per_pixel: int = QUALITY_LEVELS[DEFAULT_QUALITY]["samples"]
    max_depth: int = QUALITY_LEVELS[DEFAULT_QUALITY]["bounces"]
    workers: Optional[int] = 1
    seed: int = 0
    gamma: float = 2.0
    tone_map: bool = False
    progress: bool = True

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.gamma <= 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def worker_count(self) -> int:
        if self.workers is None:
            return os.cpu_count() or 1
        return self.workers

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        if quality not in QUALITY_LEVELS:
            raise ValueError(
                f"Unknown quality '{quality}', expected one of {sorted(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        settings = cls(samples_per_pixel=level["samples"], max_depth=level["bounces"])
        return replace(settings, **overrides)

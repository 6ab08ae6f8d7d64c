# renderer/settings.py
from dataclasses import dataclass, replace
from typing import Optional

# Width, samples and bounce depth for each named quality level.
QUALITY_LEVELS = {
    "interactive": {"image_width": 200, "samples_per_pixel": 1, "max_depth": 4},
    "balanced": {"image_width": 384, "samples_per_pixel": 16, "max_depth": 20},
    "high_quality": {"image_width": 1200, "samples_per_pixel": 100, "max_depth": 50},
}

@dataclass(frozen=True)
class RenderSettings:
    """
    Output size and sampling parameters for one render.

    Attributes:
        image_width: Width of the output image in pixels.
        aspect_ratio: Width divided by height.
        samples_per_pixel: Camera rays averaged per pixel.
        max_depth: Maximum number of bounces per path.
        seed: Seed for the random source, or None for a random seed.
    """
    image_width: int = 384
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 16
    max_depth: int = 50
    seed: Optional[int] = None

    def __post_init__(self):
        if self.image_width <= 0:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """
        Settings for a named quality level; keyword overrides that are None
        are ignored.
        """
        if name not in QUALITY_LEVELS:
            valid = ", ".join(sorted(QUALITY_LEVELS))
            raise ValueError(f"Unknown quality level '{name}' (expected one of {valid})")
        settings = cls(**QUALITY_LEVELS[name])
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(settings, **changes)

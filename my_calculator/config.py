import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from my_calculator.functions import AngleMode

logger = logging.getLogger(__name__)

ENV_PREFIX = "MY_CALCULATOR_"
DEFAULT_MAX_DEPTH = 100
# a nesting level costs the parser up to six Python frames (a function call)
MAX_DEPTH_LIMIT = 128
DEFAULT_PRECISION = 10


@dataclass(frozen=True)
class Settings:
    angle_mode: AngleMode = AngleMode.Degrees
    max_depth: int = DEFAULT_MAX_DEPTH
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
        if not 0 <= self.precision <= 17:
            raise ValueError(f"precision must be between 0 and 17, got {self.precision}")

    def replace(self, **changes) -> "Settings":
        return dataclasses.replace(self, **changes)


def read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``MY_CALCULATOR_*`` environment variables."""
    if environ is None:
        environ = os.environ
    raw_mode = environ.get(ENV_PREFIX + "ANGLE_MODE") or AngleMode.Degrees.value
    try:
        angle_mode = AngleMode(raw_mode.lower())
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}ANGLE_MODE must be one of "
            f"{', '.join(mode.value for mode in AngleMode)}, got {raw_mode!r}"
        ) from None
    settings = Settings(
        angle_mode=angle_mode,
        max_depth=read_int(environ, "MAX_DEPTH", DEFAULT_MAX_DEPTH),
        precision=read_int(environ, "PRECISION", DEFAULT_PRECISION),
    )
    logger.debug("loaded settings %s", settings)
    return settings

"""Environment configuration: parameter tables, bounds and JSON loading."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from polebench.dynamics.params import PhysicsConstants, PoleParams
from polebench.utils.ranges import BoundedRange

SUPPORTED_POLE_COUNTS = (1, 2)

TWELVE_DEGREES = 12.0 / 180.0 * math.pi
FIFTEEN_DEGREES = 15.0 / 180.0 * math.pi

# name -> (x draw half-width, theta draw half-width)
INIT_PRESETS: dict[str, tuple[float, float]] = {
    "narrow": (0.2, 0.2),
}


class ConfigurationError(ValueError):
    """Raised when an environment is configured with unsupported values."""


@dataclass(frozen=True)
class Bounds:
    """Termination and actuation bounds.

    Attributes:
        track: Allowed cart positions (m).
        angle: Allowed pole angles (rad), shared by every pole.
        action: Allowed force magnitudes (N).
    """

    track: BoundedRange = field(default_factory=lambda: BoundedRange(-2.4, 2.4))
    angle: BoundedRange = field(
        default_factory=lambda: BoundedRange.symmetric(TWELVE_DEGREES)
    )
    action: BoundedRange = field(default_factory=lambda: BoundedRange(-10.0, 10.0))


@dataclass(frozen=True)
class PoleTable:
    """Everything the dynamics need for a given pole count."""

    poles: tuple[PoleParams, ...]
    constants: PhysicsConstants
    bounds: Bounds


@dataclass
class EnvConfig:
    """User-facing environment options.

    Attributes:
        nb_poles: Number of poles on the cart (1 or 2).
        random_init: Draw a near-upright random start instead of all zeros.
        init_preset: Name of the random start ranges, see ``INIT_PRESETS``.
        seed: Seed for the environment's random generator.
    """

    nb_poles: int = 1
    random_init: bool = False
    init_preset: str = "narrow"
    seed: int | None = None

    def __post_init__(self) -> None:
        validate_nb_poles(self.nb_poles)
        if self.init_preset not in INIT_PRESETS:
            raise ConfigurationError(
                f"Unknown init preset {self.init_preset!r}; "
                f"expected one of {sorted(INIT_PRESETS)}"
            )


def validate_nb_poles(nb_poles: Any) -> int:
    """Return *nb_poles* if it is a supported pole count, else raise."""
    if (
        not isinstance(nb_poles, int)
        or isinstance(nb_poles, bool)
        or nb_poles not in SUPPORTED_POLE_COUNTS
    ):
        raise ConfigurationError(
            f"nb_poles must be one of {SUPPORTED_POLE_COUNTS}, got {nb_poles!r}"
        )
    return nb_poles


def build_pole_table(nb_poles: int) -> PoleTable:
    """Return the parameter table for *nb_poles* poles."""
    nb_poles = validate_nb_poles(nb_poles)
    if nb_poles == 2:
        return PoleTable(
            poles=(
                PoleParams(length=0.5, mass=0.1, mup=0.000002),
                PoleParams(length=0.05, mass=0.01, mup=0.000002),
            ),
            constants=PhysicsConstants(track_friction=0.0005),
            bounds=Bounds(angle=BoundedRange.symmetric(FIFTEEN_DEGREES)),
        )
    return PoleTable(
        poles=(PoleParams(length=0.5, mass=0.1),),
        constants=PhysicsConstants(track_friction=0.0),
        bounds=Bounds(angle=BoundedRange.symmetric(TWELVE_DEGREES)),
    )


def init_ranges(preset: str) -> tuple[BoundedRange, BoundedRange]:
    """Return ``(x_range, theta_range)`` used for random starts."""
    try:
        x_half, theta_half = INIT_PRESETS[preset]
    except KeyError:
        raise ConfigurationError(f"Unknown init preset {preset!r}") from None
    return BoundedRange.symmetric(x_half), BoundedRange.symmetric(theta_half)


def check_init_ranges(
    x_range: BoundedRange, theta_range: BoundedRange, bounds: Bounds
) -> None:
    """Raise unless random starts lie strictly inside the termination bounds."""
    if not x_range.strictly_within(bounds.track):
        raise ConfigurationError(
            f"Start position range {x_range} is not inside track {bounds.track}"
        )
    if not theta_range.strictly_within(bounds.angle):
        raise ConfigurationError(
            f"Start angle range {theta_range} is not inside angle bound {bounds.angle}"
        )


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _dict_to_config(d: dict) -> EnvConfig:
    unknown = set(d) - {"nb_poles", "random_init", "init_preset", "seed"}
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")
    return EnvConfig(**d)


def load_config(
    path: str | Path, overrides: dict[str, Any] | None = None
) -> EnvConfig:
    """Load an :class:`EnvConfig` from a JSON file.

    Args:
        path: JSON file holding any subset of the ``EnvConfig`` fields.
        overrides: Values merged on top of the file contents.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigurationError: On unknown keys or unsupported values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    with open(path) as f:
        base = json.load(f)

    merged = _deep_merge(base, overrides) if overrides else base
    return _dict_to_config(merged)

"""Variogram model parameters.

Classes
-------
ModelKind
    Elementary variogram model families.
VariogramParameters
    Nugget, sill and range of a single-structure model.
Structure
    One nested structure (contribution and range, no nugget).
NestedModel
    Nugget plus an ordered sum of structures.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ModelKind(enum.Enum):
    """Elementary variogram model families."""

    GAUSSIAN = "gaussian"
    SPHERICAL = "spherical"
    EXPONENTIAL = "exponential"
    PENTASPHERICAL = "pentaspherical"

    @classmethod
    def from_label(cls, label: str | ModelKind) -> ModelKind:
        """Resolve a select-box label to a model kind.

        Accepts English names in any case and their Portuguese
        equivalents (``"Esférico"``, ``"Gaussiano"``, ...).

        Raises:
            ValueError: If *label* names no known model.
        """
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower()
        kind = _LABELS.get(key)
        if kind is None:
            raise ValueError(
                f"Unknown variogram model: {label!r}.  "
                f"Available: {[k.value for k in cls]}"
            )
        return kind

    @property
    def label(self) -> str:
        return self.value.capitalize()


_LABELS = {
    "gaussian": ModelKind.GAUSSIAN,
    "gaussiano": ModelKind.GAUSSIAN,
    "spherical": ModelKind.SPHERICAL,
    "esférico": ModelKind.SPHERICAL,
    "esferico": ModelKind.SPHERICAL,
    "exponential": ModelKind.EXPONENTIAL,
    "exponencial": ModelKind.EXPONENTIAL,
    "pentaspherical": ModelKind.PENTASPHERICAL,
    "pentaesférico": ModelKind.PENTASPHERICAL,
    "pentaesferico": ModelKind.PENTASPHERICAL,
}


@dataclass(frozen=True)
class VariogramParameters:
    """Parameters of a single-structure variogram model.

    Args:
        kind: Model family.
        nugget: Nugget effect C₀ (≥ 0).
        sill: Total sill C₀ + C (≥ nugget).
        range: Practical range *a* (> 0).

    Raises:
        ValueError: If the parameters describe a degenerate model.
    """

    kind: ModelKind = ModelKind.SPHERICAL
    nugget: float = 0.0
    sill: float = 1.0
    range: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ModelKind.from_label(self.kind))
        if self.nugget < 0:
            raise ValueError(f"nugget must be non-negative, got {self.nugget}")
        if self.sill < self.nugget:
            raise ValueError(
                f"sill ({self.sill}) must not be below nugget ({self.nugget})"
            )
        if self.range <= 0:
            raise ValueError(f"range must be positive, got {self.range}")

    @property
    def contribution(self) -> float:
        """Sill contribution C = sill − nugget."""
        return self.sill - self.nugget


@dataclass(frozen=True)
class Structure:
    """One elementary structure of a nested model.

    Args:
        kind: Model family.
        contribution: Sill contribution of this structure (≥ 0).
        range: Practical range (> 0).
    """

    kind: ModelKind = ModelKind.SPHERICAL
    contribution: float = 1.0
    range: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ModelKind.from_label(self.kind))
        if self.contribution < 0:
            raise ValueError(
                f"contribution must be non-negative, got {self.contribution}"
            )
        if self.range <= 0:
            raise ValueError(f"range must be positive, got {self.range}")

    def as_parameters(self) -> VariogramParameters:
        """The structure as a nugget-free single model."""
        return VariogramParameters(
            kind=self.kind,
            nugget=0.0,
            sill=self.contribution,
            range=self.range,
        )


@dataclass(frozen=True)
class NestedModel:
    """Nugget effect plus a sum of elementary structures.

    γ(h) = C₀ + Σ γᵢ(h) for h > 0, and γ(0) = 0.

    Args:
        nugget: Nugget effect C₀.
        structures: Ordered structures, usually two or three.
    """

    nugget: float = 0.0
    structures: tuple[Structure, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.nugget < 0:
            raise ValueError(f"nugget must be non-negative, got {self.nugget}")
        object.__setattr__(self, "structures", tuple(self.structures))

    @property
    def sill(self) -> float:
        """Total sill C₀ + C₁ + … + Cₙ."""
        return self.nugget + sum(s.contribution for s in self.structures)

    @property
    def range(self) -> float:
        """Largest range among the structures (0 for a pure nugget)."""
        return max((s.range for s in self.structures), default=0.0)

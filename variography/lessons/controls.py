"""Widget controls for the interactive lessons.

Controls are plain dataclasses describing a slider, checkbox or select
box with its example default.  :meth:`to_widget` turns one into an
ipywidgets widget, and :func:`bind` re-runs a render function whenever
any of its widgets changes.

The ranges and defaults are presentation choices for the example
datasets, not limits on the underlying models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

import numpy as np


def _require_ipywidgets() -> Any:
    try:
        import ipywidgets
    except ImportError as exc:
        raise ImportError(
            "ipywidgets is required for interactive lessons.  "
            "Install with: pip install ipywidgets"
        ) from exc
    return ipywidgets


@dataclass(frozen=True)
class Slider:
    """Numeric slider over ``start, start + step, …, stop``."""

    start: float
    stop: float
    step: float
    default: float
    description: str = ""

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.stop < self.start:
            raise ValueError(
                f"stop ({self.stop}) is below start ({self.start})"
            )
        if not self.start <= self.default <= self.stop:
            raise ValueError(
                f"default {self.default} outside [{self.start}, {self.stop}]"
            )

    @property
    def is_integer(self) -> bool:
        return all(
            float(v).is_integer()
            for v in (self.start, self.stop, self.step, self.default)
        )

    def values(self) -> np.ndarray:
        """Every value the slider can take."""
        n = int(np.floor((self.stop - self.start) / self.step + 1e-9)) + 1
        return np.round(self.start + self.step * np.arange(n), 10)

    def to_widget(self) -> Any:
        widgets = _require_ipywidgets()
        cls = widgets.IntSlider if self.is_integer else widgets.FloatSlider
        cast = int if self.is_integer else float
        return cls(
            min=cast(self.start),
            max=cast(self.stop),
            step=cast(self.step),
            value=cast(self.default),
            description=self.description,
            continuous_update=False,
        )


@dataclass(frozen=True)
class Checkbox:
    """Boolean checkbox."""

    default: bool = False
    description: str = ""

    def values(self) -> list[bool]:
        return [False, True]

    def to_widget(self) -> Any:
        widgets = _require_ipywidgets()
        return widgets.Checkbox(value=self.default, description=self.description)


@dataclass(frozen=True)
class Select:
    """Select box over a fixed list of string options."""

    options: Sequence[str]
    default: str
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(self.options))
        if self.default not in self.options:
            raise ValueError(
                f"default {self.default!r} not in options {list(self.options)}"
            )

    def values(self) -> list[str]:
        return list(self.options)

    def to_widget(self) -> Any:
        widgets = _require_ipywidgets()
        return widgets.Dropdown(
            options=list(self.options),
            value=self.default,
            description=self.description,
        )


Control = Slider | Checkbox | Select


def defaults(controls: dict[str, Control]) -> dict[str, Any]:
    """Default value of every control, keyed by parameter name."""
    return {name: c.default for name, c in controls.items()}


def bind(render: Callable[..., Any], **controls: Control) -> Any:
    """Bind *render* to widgets built from *controls*.

    Each keyword names a parameter of *render*.  The returned
    :class:`ipywidgets.interactive` calls *render* with the current
    widget values every time one of them changes.

    Raises:
        ImportError: If ipywidgets is not installed.
    """
    widgets = _require_ipywidgets()
    return widgets.interactive(
        render, **{name: c.to_widget() for name, c in controls.items()}
    )

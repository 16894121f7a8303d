"""Project filter parameters onto the inputs expected by the renderers.

Two views are derived from a parameter set:

* the composable descriptor, an ordered chain of standard filter operations that a
  stackable pipeline (CSS ``filter``, ``QGraphicsEffect`` chains, ...) can apply
  cheaply;
* the raw descriptor, the parameter bag consumed by the per-pixel renderer for the
  effects that cannot be expressed as such a chain.

``tint`` and ``sharpness`` appear in both views.  The chain carries a cheap
approximation (hue rotation and a contrast boost) while the per-pixel renderer is
free to apply the precise effect, so the duplication must stay.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

# (parameter key, operation name) in chain order.
COMPOSABLE_OPERATIONS = (
    ("brightness", "brightness"),
    ("contrast", "contrast"),
    ("saturation", "saturate"),
    ("sepia", "sepia"),
    ("grayscale", "grayscale"),
)

RAW_KEYS = (
    "lightness",
    "vibrance",
    "warmth",
    "tint",
    "highlights",
    "shadows",
    "lightRange",
    "darkRange",
    "curve",
    "posterize",
    "dispersion",
    "denoise",
    "clarity",
    "fade",
    "noise",
    "grain",
    "sharpness",
    "vignette",
)
"""Keys forwarded verbatim to the per-pixel renderer."""

SHARPNESS_CONTRAST_DIVISOR = 10


@dataclass(frozen=True)
class FilterOperation:
    """One step of the composable filter chain."""

    name: str
    amount: float
    unit: str = "%"

    def css(self) -> str:
        """Return the operation as a CSS filter function, e.g. ``sepia(20%)``."""

        return f"{self.name}({_format_number(self.amount)}{self.unit})"


def _format_number(value: float) -> str:
    # Integral floats print without a trailing ``.0`` so ``103.0`` renders as ``103``.
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def composable_descriptor(parameters: Mapping[str, float]) -> list[FilterOperation]:
    """Return the ordered filter chain for *parameters*.

    The five base operations are always present.  A contrast boost of
    ``100 + sharpness / 10`` percent follows when ``sharpness`` is positive, and a
    hue rotation of ``tint`` degrees closes the chain when ``tint`` is non-zero.
    """

    chain = [FilterOperation(name, parameters[key]) for key, name in COMPOSABLE_OPERATIONS]

    sharpness = parameters["sharpness"]
    if sharpness > 0:
        chain.append(FilterOperation("contrast", 100 + sharpness / SHARPNESS_CONTRAST_DIVISOR))

    tint = parameters["tint"]
    if tint != 0:
        chain.append(FilterOperation("hue-rotate", tint, "deg"))

    return chain


def raw_descriptor(parameters: Mapping[str, float]) -> dict[str, float]:
    """Return the parameters applied by the per-pixel renderer, copied verbatim."""

    return {key: parameters[key] for key in RAW_KEYS}


def filter_style(parameters: Mapping[str, float]) -> str:
    """Return the composable chain as a single CSS ``filter`` value."""

    return " ".join(operation.css() for operation in composable_descriptor(parameters))


__all__ = [
    "COMPOSABLE_OPERATIONS",
    "FilterOperation",
    "RAW_KEYS",
    "composable_descriptor",
    "filter_style",
    "raw_descriptor",
]

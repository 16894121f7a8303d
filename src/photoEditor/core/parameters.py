"""Canonical filter parameters and the live parameter set."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from numbers import Real
from types import MappingProxyType

from ..errors import InvalidParameterKey, InvalidParameterValue

_LOGGER = logging.getLogger(__name__)

# The order matches the rendering pipeline: the first five keys feed the composable
# filter chain, the rest are handed to the per-pixel renderer.  Persisted gallery
# entries and history snapshots iterate in the same order.
FILTER_KEYS = (
    "brightness",
    "contrast",
    "saturation",
    "sepia",
    "grayscale",
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

# Percentage style controls rest at 100, additive effects rest at 0.
FILTER_DEFAULTS: Mapping[str, float] = MappingProxyType(
    {
        "brightness": 100,
        "contrast": 100,
        "saturation": 100,
        "sepia": 0,
        "grayscale": 0,
        "lightness": 100,
        "vibrance": 100,
        "warmth": 100,
        "tint": 0,
        "highlights": 100,
        "shadows": 100,
        "lightRange": 100,
        "darkRange": 100,
        "curve": 100,
        "posterize": 0,
        "dispersion": 0,
        "denoise": 0,
        "clarity": 0,
        "fade": 0,
        "noise": 0,
        "grain": 0,
        "sharpness": 0,
        "vignette": 0,
    }
)
"""Neutral value for every filter key."""


def validate_key(key: object) -> str:
    """Return *key* when it names a known filter, raise otherwise."""

    if not isinstance(key, str) or key not in FILTER_DEFAULTS:
        raise InvalidParameterKey(key)
    return key


def validate_value(key: str, value: object) -> float:
    """Return *value* unchanged when it is a real number.

    No range check is applied; the slider widgets and the renderer clamp.
    """

    # ``bool`` is a ``Real`` subclass but never a meaningful slider position.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterValue(key, value)
    return value  # type: ignore[return-value]


class ParameterSet(Mapping[str, float]):
    """Ordered mapping holding a value for every key in :data:`FILTER_KEYS`.

    The set is never partial: construction fills missing keys with their defaults
    and :meth:`update` refuses keys outside the closed enumeration.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, float] | None = None) -> None:
        self._values: dict[str, float] = dict(FILTER_DEFAULTS)
        if values:
            for key, value in values.items():
                name = validate_key(key)
                self._values[name] = validate_value(name, value)

    @classmethod
    def from_mapping(cls, values: Mapping[str, float] | None) -> ParameterSet:
        """Build a set from *values*, filling gaps with defaults."""

        return cls(values)

    # ------------------------------------------------------------------
    # Mapping protocol
    def __getitem__(self, key: str) -> float:
        try:
            return self._values[key]
        except KeyError:
            raise InvalidParameterKey(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(FILTER_KEYS)

    def __len__(self) -> int:
        return len(FILTER_KEYS)

    def __repr__(self) -> str:
        changed = {key: value for key, value in self.items() if value != FILTER_DEFAULTS[key]}
        return f"{type(self).__name__}({changed!r})"

    # ------------------------------------------------------------------
    def update(self, key: str, value: float) -> ParameterSet:
        """Replace the value stored for *key* and return ``self``."""

        name = validate_key(key)
        self._values[name] = validate_value(name, value)
        _LOGGER.debug("filter %s set to %r", name, value)
        return self

    def reset(self) -> ParameterSet:
        """Restore every key to its default and return ``self``."""

        self._values = dict(FILTER_DEFAULTS)
        return self

    def assign(self, values: Mapping[str, float]) -> ParameterSet:
        """Overwrite the whole set with a copy of *values*."""

        replacement = ParameterSet(values)
        self._values = replacement._values
        return self

    def values_dict(self) -> dict[str, float]:
        """Return a plain ``dict`` copy in canonical key order."""

        return {key: self._values[key] for key in FILTER_KEYS}

    def copy(self) -> ParameterSet:
        """Return an independent copy of the set."""

        return ParameterSet(self._values)

    def is_default(self) -> bool:
        """Return ``True`` when every key holds its neutral value."""

        return all(self._values[key] == FILTER_DEFAULTS[key] for key in FILTER_KEYS)


__all__ = [
    "FILTER_DEFAULTS",
    "FILTER_KEYS",
    "ParameterSet",
    "validate_key",
    "validate_value",
]

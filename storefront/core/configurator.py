"""Attribute Configurator — cyclic selection over blade options plus a clamped length.

Invariants:
    - Current selection stored as an explicit index per attribute, never found by value
    - advance/retreat always land inside the option domain; n advances return to start
    - Length always sits on the [min, max, step] grid — out-of-range input snaps, never rejected
    - Unknown attribute raises UnknownAttributeError and leaves state unchanged
    - derive_display_category never raises

Design Decisions:
    - Stored index over value-equality lookup: duplicate option values stay distinguishable
    - Decimal grid arithmetic: 0.5 cm steps stay exact (no float drift after many snaps)
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Mapping, Sequence

from storefront.core.domain_types import BladeAttribute, DisplayCategory
from storefront.core.errors import OptionIndexError, UnknownAttributeError


_DISPLAY_CATEGORIES: dict[str, DisplayCategory] = {
    "chef": DisplayCategory.KITCHEN,
    "dagger": DisplayCategory.TACTICAL,
    "tanto": DisplayCategory.TACTICAL,
    "hunting": DisplayCategory.OUTDOOR,
    "bowie": DisplayCategory.OUTDOOR,
}


def display_category_for(blade_type: object) -> DisplayCategory:
    """Case-insensitive blade type -> display token. Unknown values degrade to CLASSIC."""
    if not isinstance(blade_type, str):
        return DisplayCategory.CLASSIC
    return _DISPLAY_CATEGORIES.get(blade_type.strip().lower(), DisplayCategory.CLASSIC)


def to_decimal(value: object) -> Decimal:
    """Parse a numeric input. Raises ValueError for non-numeric or non-finite values."""
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Not a number: {value!r}") from None
    if not number.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return number


@dataclass(frozen=True)
class LengthGrid:
    """Valid blade lengths: minimum + k * step, never above maximum."""
    minimum: Decimal
    maximum: Decimal
    step: Decimal
    default: Decimal

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError("Length step must be positive")
        if self.minimum > self.maximum:
            raise ValueError("Length minimum must not exceed maximum")

    def snap(self, value: object) -> Decimal:
        """Clamp into range, then round half up to the nearest grid point."""
        number = to_decimal(value)
        clamped = min(max(number, self.minimum), self.maximum)
        steps = ((clamped - self.minimum) / self.step).quantize(
            Decimal(1), rounding=ROUND_HALF_UP,
        )
        snapped = self.minimum + steps * self.step
        if snapped > self.maximum:
            snapped -= self.step
        return snapped


@dataclass(frozen=True)
class ConfigurableSpec:
    """Immutable snapshot of a blade configuration."""
    wood: str
    tang: str
    blade_type: str
    steel: str
    length: Decimal

    def as_dict(self) -> dict:
        return {
            BladeAttribute.WOOD.value: self.wood,
            BladeAttribute.TANG.value: self.tang,
            BladeAttribute.BLADE_TYPE.value: self.blade_type,
            BladeAttribute.STEEL.value: self.steel,
            "length": str(self.length),
        }

    @property
    def signature(self) -> str:
        """Stable slug identifying this exact configuration."""
        parts = [self.wood, self.tang, self.blade_type, self.steel, str(self.length)]
        return "-".join(p.strip().lower().replace(" ", "_") for p in parts)


class AttributeConfigurator:
    """Per-session blade configuration. Single writer of its ConfigurableSpec."""

    def __init__(
        self,
        options: Mapping[BladeAttribute, Sequence[str]],
        length_grid: LengthGrid,
    ):
        missing = [a.value for a in BladeAttribute if a not in options]
        if missing:
            raise ValueError(f"Missing option domains: {missing}")
        for attribute, domain in options.items():
            if not domain:
                raise ValueError(f"Option domain for '{attribute.value}' is empty")
        self._options: dict[BladeAttribute, tuple[str, ...]] = {
            attribute: tuple(domain) for attribute, domain in options.items()
        }
        self._indices: dict[BladeAttribute, int] = {a: 0 for a in self._options}
        self._grid = length_grid
        self._length = length_grid.snap(length_grid.default)

    # --- Queries ---------------------------------------------------------------

    @property
    def length_grid(self) -> LengthGrid:
        return self._grid

    @property
    def length(self) -> Decimal:
        return self._length

    def options(self, attribute: BladeAttribute | str) -> tuple[str, ...]:
        return self._options[self._resolve(attribute)]

    def index_of(self, attribute: BladeAttribute | str) -> int:
        return self._indices[self._resolve(attribute)]

    def selected(self, attribute: BladeAttribute | str) -> str:
        key = self._resolve(attribute)
        return self._options[key][self._indices[key]]

    def derive_display_category(self) -> DisplayCategory:
        return display_category_for(self.selected(BladeAttribute.BLADE_TYPE))

    def snapshot(self) -> ConfigurableSpec:
        return ConfigurableSpec(
            wood=self.selected(BladeAttribute.WOOD),
            tang=self.selected(BladeAttribute.TANG),
            blade_type=self.selected(BladeAttribute.BLADE_TYPE),
            steel=self.selected(BladeAttribute.STEEL),
            length=self._length,
        )

    # --- Mutations -------------------------------------------------------------

    def advance(self, attribute: BladeAttribute | str) -> str:
        """Select the next option, wrapping to the first after the last."""
        key = self._resolve(attribute)
        n = len(self._options[key])
        self._indices[key] = (self._indices[key] + 1) % n
        return self._options[key][self._indices[key]]

    def retreat(self, attribute: BladeAttribute | str) -> str:
        """Select the previous option, wrapping to the last before the first."""
        key = self._resolve(attribute)
        n = len(self._options[key])
        self._indices[key] = (self._indices[key] - 1 + n) % n
        return self._options[key][self._indices[key]]

    def select(self, attribute: BladeAttribute | str, index: int) -> str:
        """Jump to an explicit position in the option list."""
        key = self._resolve(attribute)
        n = len(self._options[key])
        if not 0 <= index < n:
            raise OptionIndexError(key.value, index, n)
        self._indices[key] = index
        return self._options[key][index]

    def set_length(self, value: object) -> Decimal:
        self._length = self._grid.snap(value)
        return self._length

    def reset(self) -> None:
        """Back to the first option of every attribute and the default length."""
        self._indices = {a: 0 for a in self._options}
        self._length = self._grid.snap(self._grid.default)

    def _resolve(self, attribute: BladeAttribute | str) -> BladeAttribute:
        if isinstance(attribute, BladeAttribute):
            key = attribute
        else:
            try:
                key = BladeAttribute(attribute)
            except ValueError:
                raise UnknownAttributeError(str(attribute)) from None
        if key not in self._options:
            raise UnknownAttributeError(key.value)
        return key

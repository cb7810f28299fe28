"""Line domain model."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from transit_enabler.domain.models.product import UNKNOWN_CODE, Product, product_order
from transit_enabler.domain.models.style import Style


class LineAttr(Enum):
    """Additional properties of a line."""

    CIRCLE_CLOCKWISE = "circle_clockwise"
    CIRCLE_ANTICLOCKWISE = "circle_anticlockwise"
    SERVICE_REPLACEMENT = "service_replacement"
    LINE_AIRPORT = "line_airport"
    WHEEL_CHAIR_ACCESS = "wheel_chair_access"
    BICYCLE_CARRIAGE = "bicycle_carriage"


@total_ordering
@dataclass(frozen=True, eq=False)
class Line:
    """A public transport line.

    Identity (equality, hashing and ordering) is ``(network, product, label)``;
    every other field is metadata.
    """

    id: str | None = None
    network: str | None = None
    product: Product | None = None
    label: str | None = None
    name: str | None = None
    style: Style | None = None
    attrs: frozenset[LineAttr] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        """Freeze the attribute set."""
        if self.attrs is not None and not isinstance(self.attrs, frozenset):
            object.__setattr__(self, "attrs", frozenset(self.attrs))

    def product_code(self) -> str:
        """Code of the product, or ``UNKNOWN_CODE`` if the line has none."""
        return self.product.code if self.product is not None else UNKNOWN_CODE

    def has_attr(self, attr: LineAttr) -> bool:
        return self.attrs is not None and attr in self.attrs

    def _identity(self) -> tuple[str | None, Product | None, str | None]:
        return self.network, self.product, self.label

    def _sort_key(self) -> tuple[bool, str, bool, int, bool, str]:
        # network and label sort absent-first, product sorts absent-last
        return (
            self.network is not None,
            self.network or "",
            self.product is None,
            product_order(self.product) if self.product is not None else 0,
            self.label is not None,
            self.label or "",
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Line):
            return NotImplemented
        return self._identity() == other._identity()

    def __lt__(self, other: "Line") -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        parts = [p for p in (self.network, self.product_code() + (self.label or "")) if p]
        return "Line(" + ",".join(parts) + ")"


# Placeholders for legs that are not public transport rides. They carry no identity
# fields, so they compare equal to each other; tell them apart with ``is``.
FOOTWAY = Line()
TRANSFER = Line()
SECURE_CONNECTION = Line()
DO_NOT_CHANGE = Line()

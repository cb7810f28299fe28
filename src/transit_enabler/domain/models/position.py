"""Position domain model."""

from dataclasses import dataclass

MAX_SECTION_LENGTH = 3


@dataclass(frozen=True)
class Position:
    """Platform position of a stop, e.g. track "12" with section "A-C"."""

    name: str
    section: str | None = None

    def __post_init__(self) -> None:
        """Validate the section length."""
        if self.section is not None and len(self.section) > MAX_SECTION_LENGTH:
            raise ValueError(f"section too long: {self.section}")

    def __str__(self) -> str:
        return self.name + (self.section or "")

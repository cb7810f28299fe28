"""Product (mode of transport) domain model."""

from collections.abc import Iterable
from enum import Enum

# Returned by Line.product_code() for lines without a product. Never a valid input code.
UNKNOWN_CODE = "?"


class Product(Enum):
    """Classification of public transport by mode, each with a one-letter code."""

    HIGH_SPEED_TRAIN = "I"
    REGIONAL_TRAIN = "R"
    SUBURBAN_TRAIN = "S"
    SUBWAY = "U"
    TRAM = "T"
    BUS = "B"
    FERRY = "F"
    CABLECAR = "C"
    ON_DEMAND = "P"

    @property
    def code(self) -> str:
        """One-letter code of this product."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Product":
        """Parse a single product code.

        Raises:
            ValueError: If the code is not one of the known product codes.
        """
        for product in cls:
            if product.value == code:
                return product
        raise ValueError(f"unknown product code: {code!r}")

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> frozenset["Product"]:
        """Parse a string (or any iterable) of product codes into a set."""
        return frozenset(cls.from_code(code) for code in codes)

    @classmethod
    def to_codes(cls, products: Iterable["Product"]) -> str:
        """Render products as a code string in declaration order."""
        wanted = set(products)
        return "".join(product.code for product in cls if product in wanted)


ALL: tuple[Product, ...] = tuple(Product)


def product_order(product: Product) -> int:
    """Sort key placing products in declaration order."""
    return ALL.index(product)

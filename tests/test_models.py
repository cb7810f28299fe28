"""Tests for the value models: points, positions, products, styles and lines."""

import pytest

from transit_enabler.domain.models import Line, LineAttr, Point, Position, Product, Shape, Style
from transit_enabler.domain.models import line as line_module
from transit_enabler.domain.models import style


def test_point_fixed_point_conversions() -> None:
    """Given a point from 1e6 integers, when reading it back, then the integers round-trip."""
    point = Point.from_1e6(48137154, 11576124)

    assert point.lat == pytest.approx(48.137154)
    assert point.lon == pytest.approx(11.576124)
    assert point.lat_as_1e6 == 48137154
    assert point.lon_as_1e6 == 11576124
    assert point.lat_as_1e5 == 4813715
    assert point.lon_as_1e5 == 1157612


def test_point_equality_and_string() -> None:
    """Given two points with the same coordinates, when comparing, then they are equal."""
    assert Point.from_double(52.5, 13.4) == Point(52.5, 13.4)
    assert hash(Point.from_1e5(5250000, 1340000)) == hash(Point(52.5, 13.4))
    assert str(Point(52.5, 13.4)) == "52.5000000/13.4000000"


def test_position_with_section() -> None:
    """Given a platform with a section, when rendering, then name and section are joined."""
    assert str(Position("12", "A-C")) == "12A-C"
    assert str(Position("3")) == "3"


def test_position_rejects_long_section() -> None:
    """Given a section longer than three characters, when constructing, then it fails."""
    with pytest.raises(ValueError, match="section too long"):
        Position("1", "ABCD")


def test_product_codes() -> None:
    """Given product codes, when parsing and rendering, then declaration order is kept."""
    products = Product.from_codes("BUS")

    assert products == {Product.BUS, Product.SUBWAY, Product.SUBURBAN_TRAIN}
    assert Product.to_codes(products) == "SUB"
    assert Product.from_code("I") is Product.HIGH_SPEED_TRAIN
    assert Product.ON_DEMAND.code == "P"


def test_product_rejects_unknown_code() -> None:
    """Given an unknown code, when parsing, then ValueError is raised."""
    with pytest.raises(ValueError, match="unknown product code"):
        Product.from_code("X")
    with pytest.raises(ValueError):
        Product.from_code("?")


@pytest.mark.parametrize(
    ("name", "color"),
    [
        ("acacia", style.rgb(205, 200, 63)),
        ("lilac", style.rgb(197, 163, 202)),
        ("mint", style.rgb(121, 187, 146)),
        ("ochre", style.rgb(223, 176, 57)),
        ("orange", style.rgb(222, 139, 83)),
        ("ranunculus", style.rgb(242, 201, 49)),
        ("rose", style.rgb(223, 154, 177)),
        ("vinca", style.rgb(137, 199, 214)),
    ],
)
def test_light_backgrounds_get_black_text(name: str, color: int) -> None:
    """Given a light line color, when deriving the foreground, then it is black."""
    assert style.derive_foreground_color(color) == style.BLACK, name


@pytest.mark.parametrize(
    ("name", "color"),
    [
        ("azure", style.rgb(33, 110, 180)),
        ("brown", style.rgb(141, 101, 56)),
        ("iris", style.rgb(103, 50, 142)),
        ("parme", style.rgb(187, 77, 152)),
        ("sapin", style.rgb(50, 142, 91)),
    ],
)
def test_dark_backgrounds_get_white_text(name: str, color: int) -> None:
    """Given a dark line color, when deriving the foreground, then it is white."""
    assert style.derive_foreground_color(color) == style.WHITE, name


def test_parse_color() -> None:
    """Given color literals, when parsing, then six digits become opaque and eight are ARGB."""
    assert style.parse_color("#ff0000") == style.RED
    assert style.parse_color("#00FF00") == style.GREEN
    assert style.parse_color("#11223344") == 0x11223344
    assert style.parse_color("#00000000") == style.TRANSPARENT
    assert style.parse_color("#000000") == 0xFF000000


def test_opaque_colors_survive_hex_rendering() -> None:
    """Given opaque colors across the RGB range, when rendering and parsing back, then they are unchanged."""
    levels = range(0, 256, 17)
    for r in levels:
        for g in levels:
            for b in levels:
                color = style.rgb(r, g, b)
                assert style.parse_color(style.to_hex_string(color)) == color


@pytest.mark.parametrize(
    "literal", ["ff0000", "#", "#fff", "#12345", "#1234567", "#gg0000", "#11111z", ""]
)
def test_parse_color_rejects_malformed(literal: str) -> None:
    """Given a malformed color literal, when parsing, then ValueError is raised."""
    with pytest.raises(ValueError, match="Unknown color"):
        style.parse_color(literal)


def test_color_components_and_hex() -> None:
    """Given a packed color, when splitting it, then components and hex agree."""
    color = style.argb(0x80, 0x12, 0x34, 0x56)

    assert (style.alpha(color), style.red(color), style.green(color), style.blue(color)) == (
        0x80,
        0x12,
        0x34,
        0x56,
    )
    assert style.to_hex_string(color) == "#80123456"
    assert style.to_hex_string(style.rgb(0x12, 0x34, 0x56)) == "#123456"


def test_style_border() -> None:
    """Given styles with and without border color, when asking, then has_border reflects it."""
    plain = Style(style.RED, style.WHITE)
    bordered = Style(style.RED, style.WHITE, shape=Shape.CIRCLE, border_color=style.BLACK)

    assert plain.shape is Shape.ROUNDED
    assert not plain.has_border()
    assert bordered.has_border()


def test_line_identity_ignores_metadata() -> None:
    """Given lines differing only in metadata, when comparing, then they are equal."""
    a = Line(id="1", network="mvv", product=Product.SUBWAY, label="U3", name="U-Bahn 3")
    b = Line(
        id="2",
        network="mvv",
        product=Product.SUBWAY,
        label="U3",
        style=Style(style.rgb(236, 103, 7), style.WHITE),
        attrs={LineAttr.WHEEL_CHAIR_ACCESS},
    )

    assert a == b
    assert hash(a) == hash(b)
    assert a != Line(network="mvv", product=Product.SUBWAY, label="U6")
    assert b.has_attr(LineAttr.WHEEL_CHAIR_ACCESS)
    assert not a.has_attr(LineAttr.WHEEL_CHAIR_ACCESS)
    assert isinstance(b.attrs, frozenset)


def test_line_ordering() -> None:
    """Given lines, when sorting, then network and label go absent-first and product absent-last."""
    no_network = Line(product=Product.BUS, label="100")
    bus = Line(network="bvg", product=Product.BUS, label="100")
    subway = Line(network="bvg", product=Product.SUBWAY, label="U2")
    no_product = Line(network="bvg", label="X")
    no_label = Line(network="bvg", product=Product.BUS)

    assert sorted([no_product, bus, no_label, subway, no_network]) == [
        no_network,
        subway,
        no_label,
        bus,
        no_product,
    ]


def test_line_product_code() -> None:
    """Given lines with and without product, when asking the code, then '?' marks the absence."""
    assert Line(product=Product.TRAM, label="17").product_code() == "T"
    assert Line(label="17").product_code() == "?"


def test_line_placeholders_are_distinct_singletons() -> None:
    """Given the placeholder lines, when checking identity, then each is its own object."""
    placeholders = [
        line_module.FOOTWAY,
        line_module.TRANSFER,
        line_module.SECURE_CONNECTION,
        line_module.DO_NOT_CHANGE,
    ]

    assert len({id(placeholder) for placeholder in placeholders}) == 4
    assert line_module.FOOTWAY is not line_module.TRANSFER
    assert line_module.FOOTWAY.product_code() == "?"

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from .entity import AttributeReader, Point, SchObject
from .errors import Diagnostic
from .record import Record, parse_leading_int

logger = logging.getLogger(__name__)

SHEET_SIZES: tuple[tuple[int, int], ...] = (
    (1150, 760),
    (1550, 1110),
    (2230, 1570),
    (3150, 2230),
    (4460, 3150),
    (950, 750),
    (1500, 950),
    (2000, 1500),
    (3200, 2000),
    (4200, 3200),
    (1100, 850),
    (1400, 850),
    (1700, 1100),
    (990, 790),
    (1540, 990),
    (2060, 1560),
    (3260, 2060),
    (4280, 3280),
)
POWER_PORT_STYLES: tuple[str, ...] = (
    "DEFAULT",
    "ARROW",
    "BAR",
    "WAVE",
    "POWER_GND",
    "SIGNAL_GND",
    "EARTH",
    "GOST_ARROW",
    "GOST_POWER_GND",
    "GOST_EARTH",
    "GOST_BAR",
)
PIN_DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
_PORT_STYLE_ORIENTATIONS = {"3": 0, "7": 1}
_WHITE = 16777215


def _scaled(value: int | None, factor: int) -> int | None:
    return None if value is None else factor * value


def _box_transparency(reader: AttributeReader) -> bool:
    # Raw text: the common fields already report a malformed display mode.
    display_mode = parse_leading_int(reader.text("ownerpartdisplaymode", "-1"))
    return (
        reader.text("issolid", "F") != "T" or reader.text("transparent", "F") == "T"
    ) and (display_mode is None or display_mode < 1)


@dataclass(eq=False)
class Component(SchObject):
    KIND: ClassVar[int] = 1
    NAME: ClassVar[str] = "Component"

    library_reference: str | None = None
    design_item_id: str | None = None
    description: str = ""
    current_part_id: int | None = -1
    display_mode: int | None = -1
    part_count: int | None = 1
    dnp: bool = False

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "library_reference": reader.text("libreference"),
            "design_item_id": reader.text("designitemid"),
            "description": reader.localized("componentdescription"),
            "current_part_id": reader.integer("currentpartid", -1),
            "display_mode": reader.integer("displaymode", -1),
            "part_count": reader.integer("partcount", 1),
        }


@dataclass(eq=False)
class Pin(SchObject):
    KIND: ClassVar[int] = 2
    NAME: ClassVar[str] = "Pin"

    x: int | None = None
    y: int | None = None
    length: int | None = None
    conglomerate: int | None = 0
    name: str = ""
    designator: str = ""
    # Observed values are 0, 5, 16 and 21; only the raw value is kept.
    name_orientation: int | None = 0

    @property
    def orientation(self) -> int:
        return (self.conglomerate or 0) & 0x3

    @property
    def angle(self) -> int:
        return 90 * self.orientation

    @property
    def direction(self) -> tuple[int, int]:
        return PIN_DIRECTIONS[self.orientation]

    @property
    def show_name(self) -> bool:
        return (self.conglomerate or 0) & 0x8 == 0x8

    @property
    def show_designator(self) -> bool:
        return (self.conglomerate or 0) & 0x10 == 0x10

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "length": reader.integer("pinlength"),
            "conglomerate": reader.integer("pinconglomerate", 0),
            "name": reader.localized("name"),
            "designator": reader.text("designator", ""),
            "name_orientation": reader.integer("pinname_positionconglomerate", 0),
        }


@dataclass(eq=False)
class IEEESymbol(SchObject):
    KIND: ClassVar[int] = 3
    NAME: ClassVar[str] = "IEEE Symbol"


@dataclass(eq=False)
class Label(SchObject):
    KIND: ClassVar[int] = 4
    NAME: ClassVar[str] = "Label"

    text: str | None = None
    hidden: bool = False
    color: str = "000000"
    x: int | None = None
    y: int | None = None
    orientation: int | None = 0
    justification: int | None = 0
    font_id: int | None = -1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "text": reader.text("text"),
            "hidden": reader.flag("ishidden"),
            "color": reader.color("color"),
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "orientation": reader.integer("orientation", 0),
            "justification": reader.integer("justification", 0),
            "font_id": reader.integer("fontid", -1),
        }


@dataclass(eq=False)
class Bezier(SchObject):
    KIND: ClassVar[int] = 5
    NAME: ClassVar[str] = "Bezier"


@dataclass(eq=False)
class Polyline(SchObject):
    KIND: ClassVar[int] = 6
    NAME: ClassVar[str] = "Polyline"

    points: list[Point] = field(default_factory=list)
    width: int | None = 1
    color: str = "000000"
    start_shape: int | None = 0
    end_shape: int | None = 0
    shape_size: int | None = 0
    # 0 solid, 1 dashed, 2 dotted, 3 dash-dotted
    line_style: int | None = 0

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "points": reader.points(),
            "width": reader.integer("linewidth", 1),
            "color": reader.color("color"),
            "start_shape": reader.integer("startlineshape", 0),
            "end_shape": reader.integer("endlineshape", 0),
            "shape_size": reader.integer("lineshapesize", 0),
            "line_style": reader.integer("linestyle", 0),
        }


@dataclass(eq=False)
class Polygon(SchObject):
    KIND: ClassVar[int] = 7
    NAME: ClassVar[str] = "Polygon"

    points: list[Point] = field(default_factory=list)
    width: int | None = 0
    line_color: str = "000000"
    fill_color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "points": reader.points(),
            "width": reader.integer("linewidth", 0),
            "line_color": reader.color("color"),
            "fill_color": reader.color("areacolor"),
        }


@dataclass(eq=False)
class Ellipse(SchObject):
    KIND: ClassVar[int] = 8
    NAME: ClassVar[str] = "Ellipse"

    x: int | None = None
    y: int | None = None
    radius_x: int | None = None
    radius_y: int | None = None
    width: int | None = 1
    line_color: str = "000000"
    fill_color: str = "000000"
    transparent: bool = True

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        radius_x = reader.integer("radius")
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "radius_x": radius_x,
            "radius_y": reader.integer("secondaryradius", radius_x),
            "width": reader.integer("linewidth", 1),
            "line_color": reader.color("color"),
            "fill_color": reader.color("areacolor"),
            "transparent": not reader.flag("issolid"),
        }


@dataclass(eq=False)
class Piechart(SchObject):
    KIND: ClassVar[int] = 9
    NAME: ClassVar[str] = "Piechart"


@dataclass(eq=False)
class _Box(SchObject):
    left: int | None = None
    right: int | None = None
    top: int | None = None
    bottom: int | None = None
    line_color: str = "000000"
    fill_color: str = "000000"
    transparent: bool = True

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "left": reader.integer("location_x"),
            "right": reader.integer("corner_x"),
            "top": reader.integer("corner_y"),
            "bottom": reader.integer("location_y"),
            "line_color": reader.color("color"),
            "fill_color": reader.color("areacolor"),
            "transparent": _box_transparency(reader),
        }


@dataclass(eq=False)
class RoundedRectangle(_Box):
    KIND: ClassVar[int] = 10
    NAME: ClassVar[str] = "Rounded Rectangle"

    rx: int | None = None
    ry: int | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            **super()._decode(reader),
            "rx": reader.integer("cornerxradius"),
            "ry": reader.integer("corneryradius"),
        }


@dataclass(eq=False)
class EllipticalArc(SchObject):
    KIND: ClassVar[int] = 11
    NAME: ClassVar[str] = "Elliptical Arc"

    x: int | None = None
    y: int | None = None
    radius: int | None = None
    secondary_radius: int | None = None
    start_angle: float | None = 0.0
    end_angle: float | None = 360.0
    width: int | None = 1
    color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "radius": reader.integer("radius"),
            "secondary_radius": reader.integer("secondaryradius"),
            "start_angle": reader.number("startangle", 0.0),
            "end_angle": reader.number("endangle", 360.0),
            "width": reader.integer("linewidth", 1),
            "color": reader.color("color"),
        }


@dataclass(eq=False)
class Arc(SchObject):
    KIND: ClassVar[int] = 12
    NAME: ClassVar[str] = "Arc"

    x: int | None = None
    y: int | None = None
    radius: int | None = None
    start_angle: float | None = 0.0
    end_angle: float | None = 360.0
    width: int | None = 1
    color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "radius": reader.integer("radius"),
            "start_angle": reader.number("startangle", 0.0),
            "end_angle": reader.number("endangle", 360.0),
            "width": reader.integer("linewidth", 1),
            "color": reader.color("color"),
        }


@dataclass(eq=False)
class Line(SchObject):
    KIND: ClassVar[int] = 13
    NAME: ClassVar[str] = "Line"

    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None
    width: int | None = 1
    color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x1": reader.fixed("location_x"),
            "y1": reader.fixed("location_y"),
            "x2": reader.fixed("corner_x"),
            "y2": reader.fixed("corner_y"),
            "width": reader.integer("linewidth", 1),
            "color": reader.color("color"),
        }


@dataclass(eq=False)
class Rectangle(_Box):
    KIND: ClassVar[int] = 14
    NAME: ClassVar[str] = "Rectangle"


@dataclass(eq=False)
class SheetSymbol(SchObject):
    KIND: ClassVar[int] = 15
    NAME: ClassVar[str] = "Sheet Symbol"

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    fill_color: str = "000000"
    line_color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "width": reader.integer("xsize"),
            "height": reader.integer("ysize"),
            "fill_color": reader.color("areacolor"),
            "line_color": reader.color("color"),
        }


@dataclass(eq=False)
class SheetEntry(SchObject):
    KIND: ClassVar[int] = 16
    NAME: ClassVar[str] = "Sheet Entry"

    # Distance from the symbol's top edge, already scaled by 10.
    from_top: int | None = None
    iotype: int | None = None
    font_id: int | None = None
    side: int | None = 0
    style: int | None = None
    color: str = "000000"
    text_color: str = "000000"
    fill_color: str = "000000"
    name: str | None = None
    arrow_kind: str | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "from_top": _scaled(reader.integer("distancefromtop"), 10),
            "iotype": reader.integer("iotype"),
            "font_id": reader.integer("textfontid"),
            "side": reader.integer("side", 0),
            "style": reader.integer("style"),
            "color": reader.color("color"),
            "text_color": reader.color("textcolor"),
            "fill_color": reader.color("areacolor"),
            "name": reader.text("name"),
            "arrow_kind": reader.text("arrowkind"),
        }


@dataclass(eq=False)
class PowerPort(SchObject):
    KIND: ClassVar[int] = 17
    NAME: ClassVar[str] = "Power Port"

    x: int | None = None
    y: int | None = None
    color: str = "000000"
    show_text: bool = False
    text: str = ""
    style: int | None = 0
    orientation: int | None = -1
    justification: int | None = 1
    is_off_sheet_connector: bool = False

    @property
    def style_name(self) -> str:
        if self.style is None or not 0 <= self.style < len(POWER_PORT_STYLES):
            return "UNKNOWN"
        return POWER_PORT_STYLES[self.style]

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        orientation = reader.integer("orientation", 0)
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "color": reader.color("color"),
            "show_text": reader.flag("shownetname"),
            "text": reader.localized("text"),
            "style": reader.integer("style", 0),
            "orientation": None if orientation is None else orientation - 1,
            "justification": reader.integer("justification", 1),
            "is_off_sheet_connector": reader.flag("iscrosssheetconnector"),
        }


@dataclass(eq=False)
class Port(SchObject):
    KIND: ClassVar[int] = 18
    NAME: ClassVar[str] = "Port"

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    border_color: str = "000000"
    fill_color: str = "ffffff"
    color: str = "000000"
    text: str = ""
    iotype: int | None = 0
    orientation: int | None = 0

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "width": reader.integer("width"),
            "height": reader.integer("height"),
            "border_color": reader.color("color"),
            "fill_color": reader.color("areacolor", _WHITE),
            "color": reader.color("textcolor"),
            "text": reader.text("name", ""),
            "iotype": reader.integer("iotype", 0),
            "orientation": _PORT_STYLE_ORIENTATIONS.get(reader.text("style", "3")),
        }


@dataclass(eq=False)
class NoERC(SchObject):
    KIND: ClassVar[int] = 22
    NAME: ClassVar[str] = "No ERC"

    x: int | None = None
    y: int | None = None
    color: str = "000000"
    orientation: int | None = 0
    symbol: str | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "color": reader.color("color"),
            "orientation": reader.integer("orientation", 0),
            "symbol": reader.text("symbol"),
        }


@dataclass(eq=False)
class NetLabel(SchObject):
    KIND: ClassVar[int] = 25
    NAME: ClassVar[str] = "Net Label"

    x: int | None = None
    y: int | None = None
    color: str = "000000"
    text: str = ""
    orientation: int | None = 0
    justification: int | None = 0
    font_id: int | None = 1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "color": reader.color("color"),
            "text": reader.localized("text"),
            "orientation": reader.integer("orientation", 0),
            "justification": reader.integer("justification", 0),
            "font_id": reader.integer("font_id", 1),
        }


@dataclass(eq=False)
class Bus(SchObject):
    KIND: ClassVar[int] = 26
    NAME: ClassVar[str] = "Bus"

    points: list[Point] = field(default_factory=list)
    color: str = "000000"
    # Stored line width scaled by 3.
    width: int | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "points": reader.points(),
            "color": reader.color("color"),
            "width": _scaled(reader.integer("linewidth"), 3),
        }


@dataclass(eq=False)
class Wire(SchObject):
    KIND: ClassVar[int] = 27
    NAME: ClassVar[str] = "Wire"

    points: list[Point] = field(default_factory=list)
    color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {"points": reader.points(), "color": reader.color("color")}


@dataclass(eq=False)
class TextFrame(SchObject):
    KIND: ClassVar[int] = 28
    NAME: ClassVar[str] = "Text Frame"

    left: int | None = None
    bottom: int | None = None
    right: int | None = None
    top: int | None = None
    border_color: str = "000000"
    text_color: str = "000000"
    fill_color: str = "ffffff"
    text: str = ""
    orientation: int | None = 0
    alignment: int | None = 0
    show_border: bool = False
    transparent: bool = True
    text_margin: int | None = 2
    word_wrap: bool = False
    font_id: int | None = -1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "left": reader.integer("location_x"),
            "bottom": reader.integer("location_y"),
            "right": reader.integer("corner_x"),
            "top": reader.integer("corner_y"),
            "border_color": reader.color("color"),
            "text_color": reader.color("textcolor"),
            "fill_color": reader.color("areacolor", _WHITE),
            "text": reader.localized("text"),
            "orientation": reader.integer("orientation", 0),
            "alignment": reader.integer("alignment", 0),
            "show_border": reader.flag("showborder"),
            # Only an explicit "F" makes a frame opaque.
            "transparent": reader.text("issolid", "") != "F",
            "text_margin": reader.integer("textmargin", 2),
            "word_wrap": reader.flag("wordwrap"),
            "font_id": reader.integer("fontid", -1),
        }


@dataclass(eq=False)
class Junction(SchObject):
    KIND: ClassVar[int] = 29
    NAME: ClassVar[str] = "Junction"

    x: int | None = None
    y: int | None = None
    color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "color": reader.color("color"),
        }


@dataclass(eq=False)
class Image(SchObject):
    KIND: ClassVar[int] = 30
    NAME: ClassVar[str] = "Image"

    x: int | None = None
    y: int | None = None
    corner_x: int | None = None
    corner_y: int | None = None
    corner_x_frac: int | None = 0
    corner_y_frac: int | None = 0
    keep_aspect: bool = False
    embedded: bool = False
    filename: str | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "corner_x": reader.integer("corner_x"),
            "corner_y": reader.integer("corner_y"),
            "corner_x_frac": reader.integer("corner_x_frac", 0),
            "corner_y_frac": reader.integer("corner_y_frac", 0),
            "keep_aspect": reader.flag("keepaspect"),
            "embedded": reader.flag("embedimage"),
            "filename": reader.text("filename"),
        }


@dataclass(frozen=True)
class Font:
    name: str
    size: int | None = 12
    bold: bool = False
    italics: bool = False


@dataclass(eq=False)
class Sheet(SchObject):
    KIND: ClassVar[int] = 31
    NAME: ClassVar[str] = "Sheet"

    grid_size: int | None = 10
    show_grid: bool = True
    area_color: str = "000000"
    width: int | None = None
    height: int | None = None
    fonts: dict[int, Font] = field(default_factory=dict)

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        if reader.flag("usecustomsheet"):
            width = reader.integer("customx")
            height = reader.integer("customy")
        else:
            width = height = None
            style = reader.integer("sheetstyle", 0)
            if style is not None and 0 <= style < len(SHEET_SIZES):
                width, height = SHEET_SIZES[style]
            else:
                reader.diagnostics.append(
                    Diagnostic("unknown-sheet-style", f"sheet style {style} has no paper size", reader.record_index)
                )

        fonts: dict[int, Font] = {}
        idx = 1
        while f"fontname{idx}" in reader.attributes:
            fonts[idx] = Font(
                name=reader.attributes[f"fontname{idx}"],
                size=reader.integer(f"size{idx}", 12),
                bold=reader.flag(f"bold{idx}"),
                italics=reader.flag(f"italics{idx}"),
            )
            idx += 1

        return {
            "grid_size": reader.integer("visiblegridsize", 10),
            "show_grid": reader.text("visiblegridon", "") != "F",
            "area_color": reader.color("areacolor"),
            "width": width,
            "height": height,
            "fonts": fonts,
        }


@dataclass(eq=False)
class _SheetText(SchObject):
    x: int | None = 0
    y: int | None = 0
    color: str = "000000"
    text: str = ""
    font_id: int | None = 1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x", 0),
            "y": reader.integer("location_y", 0),
            "color": reader.color("color"),
            "text": reader.localized("text"),
            "font_id": reader.integer("fontid", 1),
        }


@dataclass(eq=False)
class SheetName(_SheetText):
    KIND: ClassVar[int] = 32
    NAME: ClassVar[str] = "Sheet Name"


@dataclass(eq=False)
class SheetFilename(_SheetText):
    KIND: ClassVar[int] = 33
    NAME: ClassVar[str] = "Sheet Filename"


@dataclass(eq=False)
class Designator(SchObject):
    KIND: ClassVar[int] = 34
    NAME: ClassVar[str] = "Designator"

    x: int | None = 0
    y: int | None = 0
    color: str = "000000"
    hidden: bool = False
    text: str = ""
    mirrored: bool = False
    orientation: int | None = 0
    font_id: int | None = 1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x", 0),
            "y": reader.integer("location_y", 0),
            "color": reader.color("color"),
            "hidden": reader.flag("ishidden"),
            "text": reader.localized("text"),
            "mirrored": reader.flag("ismirrored"),
            "orientation": reader.integer("orientation", 0),
            "font_id": reader.integer("font_id", 1),
        }


@dataclass(eq=False)
class BusEntry(SchObject):
    KIND: ClassVar[int] = 37
    NAME: ClassVar[str] = "Bus Entry"

    x1: int | None = None
    y1: int | None = None
    x2: int | None = None
    y2: int | None = None
    width: int | None = 1
    color: str = "000000"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        # y1/y2 are taken from corner/location in that order.
        return {
            "x1": reader.integer("location_x"),
            "x2": reader.integer("corner_x"),
            "y1": reader.integer("corner_y"),
            "y2": reader.integer("location_y"),
            "width": reader.integer("linewidth", 1),
            "color": reader.color("color"),
        }


@dataclass(eq=False)
class TemplateFile(SchObject):
    KIND: ClassVar[int] = 39
    NAME: ClassVar[str] = "Template File"


@dataclass(eq=False)
class Parameter(SchObject):
    KIND: ClassVar[int] = 41
    NAME: ClassVar[str] = "Parameter"

    x: int | None = 0
    y: int | None = 0
    changed: bool = False
    color: str = "000000"
    name: str = ""
    text: str = ""
    hidden: bool = False
    mirrored: bool = False
    orientation: int | None = 0
    font_id: int | None = 1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        name = reader.text("name", "")
        return {
            "x": reader.integer("location_x", 0),
            "y": reader.integer("location_y", 0),
            "color": reader.color("color"),
            "name": name,
            "text": reader.localized("text"),
            "hidden": reader.flag("ishidden") or name == "HiddenNetName",
            "mirrored": reader.flag("ismirrored"),
            "orientation": reader.integer("orientation", 0),
            "font_id": reader.integer("font_id", 1),
        }


@dataclass(eq=False)
class WarningSign(SchObject):
    KIND: ClassVar[int] = 43
    NAME: ClassVar[str] = "Warning Sign"


@dataclass(eq=False)
class ImplementationList(SchObject):
    KIND: ClassVar[int] = 44
    NAME: ClassVar[str] = "Implementation List"


@dataclass(eq=False)
class Implementation(SchObject):
    KIND: ClassVar[int] = 45
    NAME: ClassVar[str] = "Implementation"

    is_current: bool = False
    description: str | None = None
    model_name: str | None = None
    model_type: str | None = None

    @property
    def is_footprint(self) -> bool:
        return self.model_type == "PCBLIB"

    @property
    def is_sim(self) -> bool:
        return self.model_type == "SIM"

    @property
    def is_signal_integrity(self) -> bool:
        return self.model_type == "SI"

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "is_current": reader.flag("iscurrent"),
            "description": reader.text("description"),
            "model_name": reader.text("modelname"),
            "model_type": reader.text("modeltype"),
        }


@dataclass(eq=False)
class ImplementationPinAssociation(SchObject):
    KIND: ClassVar[int] = 46
    NAME: ClassVar[str] = "Implementation Pin Association"


@dataclass(eq=False)
class ImplementationPin(SchObject):
    KIND: ClassVar[int] = 47
    NAME: ClassVar[str] = "Implementation Pin"

    pin_name: str | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {"pin_name": reader.text("desintf")}


@dataclass(eq=False)
class ImplementationParameterList(SchObject):
    KIND: ClassVar[int] = 48
    NAME: ClassVar[str] = "Implementation Parameter List"


@dataclass(eq=False)
class Harness(SchObject):
    KIND: ClassVar[int] = 215
    NAME: ClassVar[str] = "Harness"

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    line_width: int | None = None
    side: int | None = 0
    color: str = "000000"
    area_color: str = "000000"
    position: int | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "width": reader.integer("xsize"),
            "height": reader.integer("ysize"),
            "line_width": reader.integer("linewidth"),
            "side": reader.integer("harnessconnectorside", 0),
            "color": reader.color("color"),
            "area_color": reader.color("areacolor"),
            "position": reader.integer("primaryconnectionposition"),
        }


@dataclass(eq=False)
class HarnessPin(SchObject):
    KIND: ClassVar[int] = 216
    NAME: ClassVar[str] = "Harness Pin"

    side: int | None = None
    from_top: float | None = 0.0
    color: str = "000000"
    area_color: str = "000000"
    text_color: str = "000000"
    font_id: int | None = -1
    text_style: str | None = None
    name: str | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        from_top = reader.integer("distancefromtop", 0)
        fraction = reader.integer("distancefromtop_frac1", 0)
        return {
            "side": reader.integer("side"),
            "from_top": None if from_top is None else 10 * from_top + (fraction or 0) / 100_000,
            "color": reader.color("color"),
            "area_color": reader.color("areacolor"),
            "text_color": reader.color("textcolor"),
            "font_id": reader.integer("textfontid", -1),
            "text_style": reader.text("textstyle"),
            "name": reader.text("name"),
        }


@dataclass(eq=False)
class HarnessLabel(SchObject):
    KIND: ClassVar[int] = 217
    NAME: ClassVar[str] = "Harness Label"

    x: int | None = None
    y: int | None = None
    text: str | None = None
    color: str = "000000"
    font_id: int | None = -1

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "x": reader.integer("location_x"),
            "y": reader.integer("location_y"),
            "text": reader.text("text"),
            "color": reader.color("color"),
            "font_id": reader.integer("fontid", -1),
        }


@dataclass(eq=False)
class HarnessWire(SchObject):
    KIND: ClassVar[int] = 218
    NAME: ClassVar[str] = "Harness Wire"

    points: list[Point] = field(default_factory=list)
    color: str = "000000"
    width: int | None = None

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {
            "points": reader.points(),
            "color": reader.color("color"),
            "width": reader.integer("linewidth"),
        }


OBJECT_CLASSES: tuple[type[SchObject], ...] = (
    Component,
    Pin,
    IEEESymbol,
    Label,
    Bezier,
    Polyline,
    Polygon,
    Ellipse,
    Piechart,
    RoundedRectangle,
    EllipticalArc,
    Arc,
    Line,
    Rectangle,
    SheetSymbol,
    SheetEntry,
    PowerPort,
    Port,
    NoERC,
    NetLabel,
    Bus,
    Wire,
    TextFrame,
    Junction,
    Image,
    Sheet,
    SheetName,
    SheetFilename,
    Designator,
    BusEntry,
    TemplateFile,
    Parameter,
    WarningSign,
    ImplementationList,
    Implementation,
    ImplementationPinAssociation,
    ImplementationPin,
    ImplementationParameterList,
    Harness,
    HarnessPin,
    HarnessLabel,
    HarnessWire,
)

OBJECT_TYPES: Mapping[int, type[SchObject]] = MappingProxyType({cls.KIND: cls for cls in OBJECT_CLASSES})


def decode_object(record: Record, diagnostics: list[Diagnostic]) -> SchObject:
    object_type = OBJECT_TYPES.get(record.kind)
    if object_type is not None:
        return object_type.from_record(record, diagnostics)
    message = f"record kind {record.kind} has no decoder"
    logger.warning(message)
    diagnostics.append(Diagnostic("unknown-kind", message, record.index))
    obj = SchObject.from_record(record, diagnostics)
    obj.is_unknown_type = True
    return obj

"""Core board model: points, nets, pins, components and the board container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

EMPTY_STRING = ""
BOARD_COMPONENT_PREFIX = "c_"
BOARD_PIN_PREFIX = "p_"
BOARD_NET_PREFIX = "n_"
BOARD_ELEMENT_NAME_LENGTH = 127


class BoardSide(IntEnum):
    """Side of the board an element sits on."""

    TOP = 0
    BOTTOM = 1
    BOTH = 2


class PinType(IntEnum):
    """Kind of contact a pin represents."""

    UNKNOWN = 0
    NOT_CONNECTED = 1
    COMPONENT = 2
    VIA = 3
    TEST_PAD = 4


class MountType(IntEnum):
    """How a component is attached to the board."""

    UNKNOWN = 0
    SMD = 1
    DIP = 2


class ComponentType(IntEnum):
    """Broad classification of a component."""

    UNKNOWN = 0
    DUMMY = 1
    CONNECTOR = 2
    IC = 3
    RESISTOR = 4
    CAPACITOR = 5
    DIODE = 6
    TRANSISTOR = 7
    CRYSTAL = 8
    JELLY_BEAN = 9


class BoardType(IntEnum):
    """Format family a board was loaded from."""

    UNKNOWN = 0x00
    BRD = 0x01
    BDV = 0x02


def is_prefix(prefix: str, base: str) -> bool:
    """Return True if ``prefix`` is a prefix of ``base``."""
    return base.startswith(prefix)


@dataclass
class Point:
    """A position on the board, relative to its top left corner."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)


@dataclass(eq=False)
class BoardElement:
    """Anything located on the board."""

    board_side: BoardSide = BoardSide.BOTH

    def unique_id(self) -> str:
        """String uniquely identifying this element on the board."""
        raise NotImplementedError(f"{type(self).__name__} has no unique id")


@dataclass(eq=False)
class Net(BoardElement):
    """A shared potential between multiple pins."""

    number: int = 0
    name: str = ""
    is_ground: bool = False
    pins: list[Pin] = field(default_factory=list, repr=False)

    def unique_id(self) -> str:
        return BOARD_NET_PREFIX + self.name

    def searchable_string_details(self) -> list[str]:
        """Pin names of the net, plus pin numbers where they differ from the name."""
        details: list[str] = []
        for pin in self.pins:
            details.append(pin.name)
            if pin.number != pin.name:
                details.append(pin.number)
        return details


@dataclass(eq=False)
class Pin(BoardElement):
    """Any observable contact: component pins, vias, test pads."""

    type: PinType = PinType.UNKNOWN
    number: str = ""
    name: str = ""
    position: Point = field(default_factory=Point)
    diameter: float = 0.0
    net: Optional[Net] = field(default=None, repr=False)
    component: Optional[Component] = field(default=None, repr=False)

    def unique_id(self) -> str:
        return BOARD_PIN_PREFIX + self.number


@dataclass(eq=False)
class Component(BoardElement):
    """A component on the board owning a set of pins."""

    mount_type: MountType = MountType.UNKNOWN
    component_type: ComponentType = ComponentType.UNKNOWN
    name: str = ""
    mfgcode: str = ""
    pins: list[Pin] = field(default_factory=list, repr=False)
    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)

    def mount_type_str(self) -> str:
        """Mount type as a readable string."""
        if self.mount_type == MountType.SMD:
            return "SMD"
        if self.mount_type == MountType.DIP:
            return "DIP"
        return "UNKNOWN"

    def is_dummy(self) -> bool:
        """True if the component does not represent a physical part."""
        return self.component_type == ComponentType.DUMMY

    def unique_id(self) -> str:
        return BOARD_COMPONENT_PREFIX + self.name

    def searchable_string_details(self) -> list[str]:
        """Extra strings a search may match against."""
        return [self.mfgcode]


class Board:
    """Container of the nets, components, pins and outline of a board."""

    def __init__(self) -> None:
        self.nets: list[Net] = []
        self.components: list[Component] = []
        self.pins: list[Pin] = []
        self.outline_points: list[Point] = []
        self.outline_segments: list[tuple[Point, Point]] = []

    def board_type(self) -> BoardType:
        """Format family of this board."""
        return BoardType.UNKNOWN
"""Board model built from a parsed board file."""

from __future__ import annotations

from typing import Any, Iterable

from .board import (
    Board,
    BoardSide,
    BoardType,
    Component,
    ComponentType,
    MountType,
    Net,
    Pin,
    PinType,
    Point,
    is_prefix,
)


def _side(value: Any) -> BoardSide:
    if value == BoardSide.TOP:
        return BoardSide.TOP
    if value == BoardSide.BOTTOM:
        return BoardSide.BOTTOM
    return BoardSide.BOTH


class BRDBoard(Board):
    """Board assembled from a parsed board file.

    ``board_file`` is any object with these sequences:

    * ``format``: outline points with ``x`` and ``y``;
    * ``outline_segments``: pairs of such points;
    * ``nails``: records with ``net``, ``probe`` and ``side``;
    * ``parts``: records with ``name``, ``mfgcode``, ``p1``, ``p2``,
      ``mounting_side`` (a :class:`BoardSide`) and ``part_type``
      (:class:`MountType.SMD` for surface mount, anything else is through-hole);
    * ``pins``: records with ``part`` (1-based index into ``parts``), ``snum``
      and ``name`` (either may be ``None``), ``pos``, ``side``, ``net`` and
      ``radius``.
    """

    NET_UNCONNECTED_PREFIX = "UNCONNECTED"
    COMPONENT_DUMMY_NAME = "..."

    def __init__(self, board_file: Any) -> None:
        super().__init__()
        self.file = board_file

        self.outline_points = [Point(p.x, p.y) for p in board_file.format]
        self.outline_segments = [
            (Point(a.x, a.y), Point(b.x, b.y)) for a, b in board_file.outline_segments
        ]

        net_map = self._nets_from_nails(board_file.nails)
        components = [self._component_from_part(part) for part in board_file.parts]

        dummy = Component(name=self.COMPONENT_DUMMY_NAME, component_type=ComponentType.DUMMY)
        self._populate_pins(board_file.pins, components, dummy, net_map)

        kept = [comp for comp in components if not comp.is_dummy()]
        kept.append(dummy)
        self.components = sorted(kept, key=lambda comp: comp.name)

        for name in sorted(net_map):
            net = net_map[name]
            net.is_ground = net.name in ("GND", "GROUND")
            self.nets.append(net)

    def board_type(self) -> BoardType:
        return BoardType.BRD

    def _nets_from_nails(self, nails: Iterable[Any]) -> dict[str, Net]:
        unconnected = Net(name=self.NET_UNCONNECTED_PREFIX, is_ground=False)
        net_map = {unconnected.name: unconnected}
        for nail in nails:
            name = str(nail.net)
            if is_prefix(self.NET_UNCONNECTED_PREFIX, name):
                continue
            side = BoardSide.TOP if nail.side == BoardSide.TOP else BoardSide.BOTTOM
            net_map[name] = Net(name=name, number=nail.probe, board_side=side)
        return net_map

    def _component_from_part(self, part: Any) -> Component:
        comp = Component(
            name=str(part.name),
            mfgcode=part.mfgcode,
            p1=Point(part.p1.x, part.p1.y),
            p2=Point(part.p2.x, part.p2.y),
            board_side=_side(part.mounting_side),
            mount_type=MountType.SMD if part.part_type == MountType.SMD else MountType.DIP,
        )
        if is_prefix(self.COMPONENT_DUMMY_NAME, comp.name):
            comp.component_type = ComponentType.DUMMY
        return comp

    def _populate_pins(
        self,
        brd_pins: Iterable[Any],
        components: list[Component],
        dummy: Component,
        net_map: dict[str, Net],
    ) -> None:
        pin_idx = 0
        part_idx = 1
        for brd_pin in brd_pins:
            if not 1 <= brd_pin.part <= len(components):
                raise ValueError(f"pin refers to unknown part {brd_pin.part}")
            comp = components[brd_pin.part - 1]

            pin = Pin()
            if comp.is_dummy():
                pin.type = PinType.TEST_PAD
                pin.component = dummy
                dummy.pins.append(pin)
            else:
                pin.type = PinType.COMPONENT
                pin.component = comp
                comp.pins.append(pin)

            pin_idx += 1
            if brd_pin.part != part_idx:
                part_idx = brd_pin.part
                pin_idx = 1

            snum = getattr(brd_pin, "snum", None)
            pin.number = str(snum) if snum else str(pin_idx)
            name = getattr(brd_pin, "name", None)
            pin.name = str(name) if name else pin.number

            pin.position = Point(brd_pin.pos.x, brd_pin.pos.y)
            pin.board_side = _side(brd_pin.side)
            pin.net = self._net_for_pin(pin, str(brd_pin.net or ""), net_map)
            pin.diameter = float(brd_pin.radius)

            pin.net.pins.append(pin)
            self.pins.append(pin)

    def _net_for_pin(self, pin: Pin, net_name: str, net_map: dict[str, Net]) -> Net:
        existing = net_map.get(net_name)
        if existing is not None:
            return existing
        if not net_name or is_prefix(self.NET_UNCONNECTED_PREFIX, net_name):
            pin.type = PinType.NOT_CONNECTED
            return net_map[self.NET_UNCONNECTED_PREFIX]
        net = Net(name=net_name, board_side=pin.board_side)
        net_map[net_name] = net
        return net
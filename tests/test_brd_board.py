from types import SimpleNamespace

import pytest

from pcbboard.board import BoardSide, BoardType, ComponentType, MountType, PinType
from pcbboard.brd_board import BRDBoard


def pt(x, y):
    return SimpleNamespace(x=x, y=y)


def part(name, mfgcode="", side=BoardSide.TOP, part_type=MountType.SMD):
    return SimpleNamespace(
        name=name, mfgcode=mfgcode, p1=pt(0, 0), p2=pt(1, 1),
        mounting_side=side, part_type=part_type,
    )


def pin(part_no, net, snum=None, name=None, pos=(0, 0), side=BoardSide.TOP, radius=0.5):
    return SimpleNamespace(
        part=part_no, net=net, snum=snum, name=name,
        pos=pt(*pos), side=side, radius=radius,
    )


def nail(net, probe, side=BoardSide.TOP):
    return SimpleNamespace(net=net, probe=probe, side=side)


def brd_file(parts=(), pins=(), nails=(), fmt=(), segments=()):
    return SimpleNamespace(
        parts=list(parts), pins=list(pins), nails=list(nails),
        format=list(fmt), outline_segments=list(segments),
    )


@pytest.fixture
def board():
    f = brd_file(
        parts=[
            part("U1", "LM358", BoardSide.BOTTOM, MountType.DIP),
            part("R1", "RES10K", BoardSide.TOP, MountType.SMD),
            part("...", "", BoardSide.BOTH),
        ],
        pins=[
            pin(1, "VCC", pos=(1, 2)),
            pin(1, "UNCONNECTED_5"),
            pin(1, ""),
            pin(1, "NEWNET", snum="A1", name="BALL", side=BoardSide.BOTTOM),
            pin(2, "GND"),
            pin(2, "VCC"),
            pin(3, "TP1", side=BoardSide.BOTH),
        ],
        nails=[
            nail("GND", 3, BoardSide.TOP),
            nail("VCC", 4, BoardSide.BOTTOM),
            nail("UNCONNECTED_9", 7),
        ],
        fmt=[pt(0, 0), pt(10, 0), pt(10, 5)],
        segments=[(pt(0, 0), pt(10, 0))],
    )
    return BRDBoard(f)


def net_by_name(board, name):
    return next(n for n in board.nets if n.name == name)


def comp_by_name(board, name):
    return next(c for c in board.components if c.name == name)


def test_board_type(board):
    assert board.board_type() == BoardType.BRD


def test_nets_sorted_and_unique(board):
    names = [n.name for n in board.nets]
    assert names == sorted(names)
    assert set(names) == {"GND", "VCC", "NEWNET", "TP1", "UNCONNECTED"}


def test_ground_flag(board):
    assert net_by_name(board, "GND").is_ground is True
    assert net_by_name(board, "VCC").is_ground is False


def test_nail_nets_keep_probe_and_side(board):
    gnd = net_by_name(board, "GND")
    vcc = net_by_name(board, "VCC")
    assert gnd.number == 3 and gnd.board_side == BoardSide.TOP
    assert vcc.number == 4 and vcc.board_side == BoardSide.BOTTOM


def test_unconnected_pins_share_special_net(board):
    nc = net_by_name(board, "UNCONNECTED")
    assert len(nc.pins) == 2
    assert all(p.type == PinType.NOT_CONNECTED for p in nc.pins)
    assert all(p.net is nc for p in nc.pins)


def test_new_net_from_pin_takes_pin_side(board):
    net = net_by_name(board, "NEWNET")
    assert net.board_side == BoardSide.BOTTOM
    assert [p.number for p in net.pins] == ["A1"]


def test_pin_numbering_resets_per_part(board):
    numbers = [p.number for p in board.pins]
    assert numbers == ["1", "2", "3", "A1", "1", "2", "1"]


def test_pin_name_falls_back_to_number(board):
    names = [p.name for p in board.pins]
    assert names == ["1", "2", "3", "BALL", "1", "2", "1"]


def test_dummy_components_collapsed(board):
    names = [c.name for c in board.components]
    assert names == sorted(names)
    assert names.count("...") == 1
    dummy = comp_by_name(board, "...")
    assert dummy.is_dummy()
    assert dummy.component_type == ComponentType.DUMMY
    assert len(dummy.pins) == 1
    assert dummy.pins[0].type == PinType.TEST_PAD
    assert dummy.pins[0].component is dummy


def test_component_attributes(board):
    u1 = comp_by_name(board, "U1")
    r1 = comp_by_name(board, "R1")
    assert u1.board_side == BoardSide.BOTTOM and u1.mount_type_str() == "DIP"
    assert r1.board_side == BoardSide.TOP and r1.mount_type_str() == "SMD"
    assert u1.mfgcode == "LM358"
    assert len(u1.pins) == 4 and len(r1.pins) == 2
    assert all(p.component is u1 for p in u1.pins)


def test_pins_registered_on_their_nets(board):
    assert sum(len(n.pins) for n in board.nets) == len(board.pins)
    for p in board.pins:
        assert p in p.net.pins


def test_pin_position_side_and_diameter(board):
    first = board.pins[0]
    assert (first.position.x, first.position.y) == (1.0, 2.0)
    assert first.diameter == 0.5
    assert board.pins[-1].board_side == BoardSide.BOTH


def test_outline(board):
    assert [(p.x, p.y) for p in board.outline_points] == [(0, 0), (10, 0), (10, 5)]
    assert len(board.outline_segments) == 1
    a, b = board.outline_segments[0]
    assert (a.x, a.y, b.x, b.y) == (0, 0, 10, 0)


def test_unconnected_nail_is_skipped():
    b = BRDBoard(brd_file(nails=[nail("UNCONNECTED_1", 1)]))
    assert [n.name for n in b.nets] == ["UNCONNECTED"]
    assert [c.name for c in b.components] == ["..."]


def test_pin_with_unknown_part_raises():
    f = brd_file(parts=[part("R1")], pins=[pin(2, "GND")])
    with pytest.raises(ValueError):
        BRDBoard(f)


def test_empty_board():
    b = BRDBoard(brd_file())
    assert b.pins == []
    assert b.outline_points == [] and b.outline_segments == []
    assert len(b.components) == 1 and b.components[0].is_dummy()
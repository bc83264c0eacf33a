# pcbboard

`pcbboard` holds a printed circuit board layout in memory. You pass in the
records of a board file that has already been parsed. It returns the board's
components, pins and nets, linked to one another, along with the board
outline.

## Installation

```
pip install pcbboard
```

To run the tests, install the test extra and then run pytest:

```
pip install "pcbboard[test]"
pytest
```

## The model (`pcbboard.board`)

- `Point(x, y)`: a position on the board. Both coordinates are stored as floats.
- `Net`: a shared electrical potential.
  - Fields: `name`, `number`, `is_ground`, `board_side` and `pins`.
- `Pin`: a contact.
  - Fields: `type`, `number`, `name`, `position`, `diameter`, `board_side`, `net` and `component`.
- `Component`: a part on the board.
  - Fields: `name`, `mfgcode`, `mount_type`, `component_type`, `board_side`, `p1`, `p2` and `pins`.
- `BoardElement`: the common base of `Net`, `Pin` and `Component`.
- `Board`: a container with these lists: `nets`, `components`, `pins`, `outline_points` and `outline_segments`.
  - Its `board_type()` returns `BoardType.UNKNOWN`.

The enumerations are:

- `BoardSide`: `TOP`, `BOTTOM`, `BOTH`
- `PinType`: `UNKNOWN`, `NOT_CONNECTED`, `COMPONENT`, `VIA`, `TEST_PAD`
- `MountType`: `UNKNOWN`, `SMD`, `DIP`
- `ComponentType`: `UNKNOWN`, `DUMMY`, `CONNECTOR`, `IC`, and others
- `BoardType`: `UNKNOWN`, `BRD`, `BDV`

Each concrete element has a `unique_id()`. On a bare `BoardElement`, calling it
raises `NotImplementedError`.

| Element   | Prefix | Example  |
|-----------|--------|----------|
| Component | `c_`   | `c_U1`   |
| Pin       | `p_`   | `p_3`    |
| Net       | `n_`   | `n_GND`  |

`Component` has three more methods:

- `mount_type_str()` returns `"SMD"`, `"DIP"` or `"UNKNOWN"`.
- `is_dummy()` tells whether the component is a placeholder rather than a physical part.
- `searchable_string_details()` returns `[mfgcode]`.

`Net.searchable_string_details()` returns the name of each of its pins. It also
returns a pin's number whenever that number differs from the pin's name.

`is_prefix(prefix, base)` checks whether `base` starts with `prefix`.

## Building a board (`pcbboard.brd_board`)

`BRDBoard(board_file)` takes any object that has the following attributes:

- `format`: outline points, each with `x` and `y`
- `outline_segments`: pairs of such points
- `nails`: records with `net`, `probe` and `side`
- `parts`: records with these fields:
  - `name` and `mfgcode`
  - `p1` and `p2`
  - `mounting_side`, a `BoardSide`
  - `part_type`. `MountType.SMD` means surface mount; any other value means through-hole.
- `pins`: records with these fields:
  - `part`, the 1-based index into `parts`
  - `snum` and `name`, either of which may be `None`
  - `pos`, `side`, `net` and `radius`

```python
from types import SimpleNamespace as NS

from pcbboard.board import BoardSide, MountType
from pcbboard.brd_board import BRDBoard

parsed = NS(
    format=[NS(x=0, y=0), NS(x=100, y=0), NS(x=100, y=50)],
    outline_segments=[],
    nails=[NS(net="GND", probe=1, side=BoardSide.TOP)],
    parts=[
        NS(name="R1", mfgcode="RES-10K", p1=NS(x=10, y=10), p2=NS(x=20, y=10),
           mounting_side=BoardSide.TOP, part_type=MountType.SMD),
    ],
    pins=[
        NS(part=1, snum=None, name=None, pos=NS(x=10, y=10),
           side=BoardSide.TOP, net="GND", radius=0.5),
        NS(part=1, snum=None, name=None, pos=NS(x=20, y=10),
           side=BoardSide.TOP, net="VCC", radius=0.5),
    ],
)

board = BRDBoard(parsed)
print([c.name for c in board.components])   # ['...', 'R1']
print([n.name for n in board.nets])         # ['GND', 'UNCONNECTED', 'VCC']
print([p.number for p in board.pins])       # ['1', '2']
print(board.board_type())                   # BoardType.BRD
```

The board is assembled by these rules:

- **Nets from nails.** Each nail creates a net that carries the nail's probe number.
  - The net's side is `TOP` when the nail is on top. Otherwise it is `BOTTOM`.
  - Nails whose net starts with `UNCONNECTED` are skipped.
- **Unconnected pins.** There is always one `UNCONNECTED` net. A pin is placed on it and typed `PinType.NOT_CONNECTED` in either case:
  - its net name is empty, or
  - its net name starts with `UNCONNECTED` and is not already a known net.
- **New nets.** Any other net name that is not yet known creates a new net, which takes the side of the pin.
- **Test pads.** Parts whose names start with `...` are left out of `components`.
  - Their pins become `PinType.TEST_PAD` pins on one dummy component named `...`.
  - The dummy component is always present.
- **Pin numbers and names.**
  - A pin with no `snum` is numbered by its 1-based position in the run of consecutive pins that belong to its part.
  - A pin with no `name` takes its number as its name.
- **Ordering.** Nets and components are both sorted by name.
- **Ground.** Nets named `GND` or `GROUND` are flagged `is_ground`.
- **Bad part index.** A pin whose `part` index is out of range raises `ValueError`.

## What this package does not do

The package contains no reader for board file formats. It accepts records that
have already been parsed. It also does no drawing, provides no viewer and has
no command-line program.
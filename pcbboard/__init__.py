"""In-memory model of printed circuit board layouts: components, pins, nets and outlines."""

__version__ = "0.1.0"
__all__ = ["board", "brd_board"]
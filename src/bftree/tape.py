from __future__ import annotations

from typing import List

import numpy as np

from .errors import TapeBoundsError

DEFAULT_TAPE_SIZE = 30000
CELL_BITS = 32
CELL_MAX = (1 << CELL_BITS) - 1


class Tape:
    """
    Fixed-length tape of unsigned 32-bit cells plus a data pointer.

    Cell values wrap modulo 2**32. The pointer does not wrap: stepping off
    either end raises TapeBoundsError and leaves the pointer where it was.
    """

    def __init__(self, size: int = DEFAULT_TAPE_SIZE):
        if size < 1:
            raise ValueError(f"Tape size must be positive, got {size}")
        self.size = size
        self.cells = np.zeros(size, dtype=np.uint32)
        self.pointer = 0

    def reset(self) -> None:
        self.cells.fill(0)
        self.pointer = 0

    def inc_ptr(self) -> None:
        if self.pointer + 1 >= self.size:
            raise TapeBoundsError(
                message=f"Pointer moved past the end of the tape (size {self.size})",
                pointer=self.pointer + 1,
                size=self.size,
            )
        self.pointer += 1

    def dec_ptr(self) -> None:
        if self.pointer == 0:
            raise TapeBoundsError(
                message="Pointer moved before the start of the tape",
                pointer=-1,
                size=self.size,
            )
        self.pointer -= 1

    def inc_val(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) + 1) & CELL_MAX

    def dec_val(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) - 1) & CELL_MAX

    def set(self, value: int) -> None:
        self.cells[self.pointer] = int(value) & CELL_MAX

    def get(self) -> int:
        return int(self.cells[self.pointer])

    def snapshot(self, count: int) -> List[int]:
        return [int(v) for v in self.cells[:count]]

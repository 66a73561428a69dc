from .errors import CursorOutOfBounds


DEFAULT_TAPE_SIZE = 30000


class Tape:
    """Fixed-length array of byte cells plus the cursor into it.

    Cells wrap modulo 256. Moving the cursor outside `[0, size)` raises
    `CursorOutOfBounds` and leaves the cursor where it was.
    """
    def __init__(self, size: int = DEFAULT_TAPE_SIZE):
        if size < 1:
            raise ValueError(f"tape size must be at least 1, got {size}")
        self.cells = bytearray(size)
        self.cursor = 0
        self.high_water = 0  # furthest cell the cursor has visited

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def value(self) -> int:
        return self.cells[self.cursor]

    @value.setter
    def value(self, byte: int):
        self.cells[self.cursor] = byte & 0xFF

    def increment(self):
        self.cells[self.cursor] = (self.cells[self.cursor] + 1) & 0xFF

    def decrement(self):
        self.cells[self.cursor] = (self.cells[self.cursor] - 1) & 0xFF

    def move(self, delta: int):
        target = self.cursor + delta
        if not 0 <= target < len(self.cells):
            raise CursorOutOfBounds(target, len(self.cells))
        self.cursor = target
        if target > self.high_water:
            self.high_water = target

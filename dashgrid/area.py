"""
Area Algebra Module.

An Area is an immutable set of cells over a fixed rows x columns grid, backed by
a flat boolean mask (one entry per cell, row-major). Areas are only ever built
from rectangles or from other Areas through set operations; they are never
modified in place.

Cells are 1-based (x, y) pairs: x is the column, y is the row.
"""
from typing import Iterable, Iterator, Tuple
import numpy as np

Cell = Tuple[int, int]

# --- Index Mapping ---

def index_from_cell(rows: int, columns: int, x: int, y: int) -> int:
    """Returns the flat offset of cell (x, y)."""
    return (y - 1) * columns + x - 1

def cell_from_index(rows: int, columns: int, index: int) -> Cell:
    """Returns the (x, y) cell stored at a flat offset. Inverse of index_from_cell."""
    return index % columns + 1, index // columns + 1

def values_from_rectangle(rows: int, columns: int, x: int = 1, y: int = 1, dx: int = 1, dy: int = 1) -> np.ndarray:
    """
    Builds the flat mask of a rectangle anchored at (x, y) spanning dx columns
    and dy rows. Parts of the rectangle lying outside the grid are dropped.
    """
    col = np.arange(rows * columns) % columns + 1
    row = np.arange(rows * columns) // columns + 1
    return (row >= y) & (row < y + dy) & (col >= x) & (col < x + dx)


class Area:
    """
    Immutable set of grid cells supporting intersection, union, complement and
    inclusion tests. Two Areas are equal iff they share the same grid size and
    the same mask.
    """
    __slots__ = ('rows', 'columns', '_mask')

    def __init__(self, rows: int, columns: int, mask: np.ndarray):
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != (rows * columns,):
            raise ValueError(f"Mask of shape {mask.shape} does not fit a {rows}x{columns} grid.")
        mask = mask.copy()
        mask.flags.writeable = False
        self.rows = rows
        self.columns = columns
        self._mask = mask

    # --- Constructors ---

    @classmethod
    def from_rectangle(cls, rows: int, columns: int, x: int = 1, y: int = 1, dx: int = 1, dy: int = 1) -> "Area":
        return cls(rows, columns, values_from_rectangle(rows, columns, x, y, dx, dy))

    @classmethod
    def from_values(cls, rows: int, columns: int, values: Iterable[int]) -> "Area":
        """Builds an Area from a flat sequence of 0/1 values."""
        return cls(rows, columns, np.fromiter((v == 1 for v in values), dtype=bool))

    @classmethod
    def empty(cls, rows: int, columns: int) -> "Area":
        return cls(rows, columns, np.zeros(rows * columns, dtype=bool))

    # --- Inspection ---

    @property
    def values(self) -> Tuple[int, ...]:
        """The mask as a tuple of 0/1 integers."""
        return tuple(int(v) for v in self._mask)

    @property
    def mask(self) -> np.ndarray:
        """Read-only view of the underlying boolean mask."""
        return self._mask

    def __len__(self) -> int:
        return int(np.count_nonzero(self._mask))

    def __iter__(self) -> Iterator[Cell]:
        # A fresh generator on each call, so an Area can be iterated many times.
        for index in np.flatnonzero(self._mask):
            yield cell_from_index(self.rows, self.columns, int(index))

    def __contains__(self, cell: Cell) -> bool:
        x, y = cell
        if not (1 <= x <= self.columns and 1 <= y <= self.rows):
            return False
        return bool(self._mask[index_from_cell(self.rows, self.columns, x, y)])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return (self.rows, self.columns) == (other.rows, other.columns) and np.array_equal(self._mask, other._mask)

    def __hash__(self) -> int:
        return hash((self.rows, self.columns, self._mask.tobytes()))

    def __repr__(self) -> str:
        return f"Area({self.rows}x{self.columns}, cells={list(self)})"

    # --- Algebra ---

    def _check_universe(self, other: "Area"):
        if (self.rows, self.columns) != (other.rows, other.columns):
            raise ValueError(
                f"Cannot combine a {self.rows}x{self.columns} area with a {other.rows}x{other.columns} area."
            )

    def intersection(self, other: "Area") -> "Area":
        self._check_universe(other)
        return Area(self.rows, self.columns, self._mask & other._mask)

    def union(self, other: "Area") -> "Area":
        self._check_universe(other)
        return Area(self.rows, self.columns, self._mask | other._mask)

    def complement(self) -> "Area":
        return Area(self.rows, self.columns, ~self._mask)

    def includes(self, other: "Area") -> bool:
        """True if every cell of `other` also belongs to this area."""
        return len(self.intersection(other)) == len(other)

    def is_included(self, other: "Area") -> bool:
        return other.includes(self)

    __and__ = intersection
    __or__ = union
    __invert__ = complement

    def debug(self) -> str:
        """Renders the mask as text, one line per grid row."""
        lines = []
        for y in range(1, self.rows + 1):
            start = index_from_cell(self.rows, self.columns, 1, y)
            lines.append(' '.join(str(int(v)) for v in self._mask[start:start + self.columns]))
        return '\n'.join(lines)

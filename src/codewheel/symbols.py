"""Symbol table — the code strings printed on the wheel's cells.

Cells are numbered from 1.  A cell in band *row* under middle section
*column* has index ``row * columns + column + 1``; the table stores the
codes in that order.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence


class SymbolLookupError(LookupError):
    """A computed cell index falls outside the symbol table."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Cell index {index} is outside the symbol table (1..{size})"
        )
        self.index = index
        self.size = size


class SymbolTable(Sequence[str]):
    """Read-only, 1-based lookup over an ordered list of codes.

    >>> table = SymbolTable(["ALPHA", "BRAVO"])
    >>> table.lookup(2)
    'BRAVO'
    """

    def __init__(self, codes: Iterable[str], columns: int = 24) -> None:
        if columns < 1:
            raise ValueError("columns must be >= 1")
        self._codes: tuple[str, ...] = tuple(codes)
        for position, code in enumerate(self._codes, start=1):
            if not isinstance(code, str):
                raise TypeError(
                    f"Code for cell {position} must be str, got {type(code).__name__}"
                )
        self.columns = columns

    @classmethod
    def numbered(cls, rows: int, columns: int = 24, width: int = 2) -> "SymbolTable":
        """Table whose codes are the zero-padded cell numbers themselves."""
        if rows < 0:
            raise ValueError("rows must be >= 0")
        return cls(
            (str(i).zfill(width) for i in range(1, rows * columns + 1)),
            columns=columns,
        )

    # ── sequence protocol ───────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._codes)

    def __getitem__(self, item):
        return self._codes[item]

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __repr__(self) -> str:
        return f"SymbolTable(size={len(self)}, columns={self.columns})"

    # ── cell access ─────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        """Number of complete bands in the table."""
        return len(self._codes) // self.columns

    def lookup(self, index: int) -> str:
        """Return the code of 1-based cell *index*.

        Raise :class:`SymbolLookupError` when the index is outside the
        table; no placeholder is ever substituted.
        """
        if index < 1 or index > len(self._codes):
            raise SymbolLookupError(index, len(self._codes))
        return self._codes[index - 1]

    def get(self, index: int, default: Optional[str] = None) -> Optional[str]:
        try:
            return self.lookup(index)
        except SymbolLookupError:
            return default

    def cell(self, row: int, column: int) -> str:
        """Return the code at (*row*, *column*) of the grid."""
        if not 0 <= column < self.columns:
            raise ValueError(f"column must be in [0, {self.columns})")
        return self.lookup(row * self.columns + column + 1)

    def require(self, max_index: int) -> None:
        """Raise :class:`SymbolLookupError` unless cell *max_index* exists."""
        if max_index > len(self._codes):
            raise SymbolLookupError(max_index, len(self._codes))

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        return {"columns": self.columns, "codes": list(self._codes)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SymbolTable":
        return cls(data["codes"], columns=int(data.get("columns", 24)))


def validate_codes(codes: Sequence[str]) -> List[str]:
    """Return human-readable problems with a list of codes."""
    errors: List[str] = []
    for position, code in enumerate(codes, start=1):
        if not isinstance(code, str):
            errors.append(f"Cell {position} is not a string")
        elif not code.strip():
            errors.append(f"Cell {position} is blank")
    return errors

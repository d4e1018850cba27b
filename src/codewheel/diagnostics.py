from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Tuple

from .symbols import SymbolTable
from .visibility import DEFAULT_GEOMETRY, WheelGeometry, resolve_visible


def visibility_table(
    geometry: WheelGeometry = DEFAULT_GEOMETRY,
    symbols: Optional[SymbolTable] = None,
) -> Dict[Tuple[int, int], List[int]]:
    """Visible cell indices for every (outer, middle) section pair."""
    if symbols is None:
        symbols = SymbolTable.numbered(geometry.band_count, geometry.middle_sections)
    table: Dict[Tuple[int, int], List[int]] = {}
    for outer in range(geometry.outer_sections):
        for middle in range(geometry.middle_sections):
            table[(outer, middle)] = resolve_visible(outer, middle, symbols, geometry).indices
    return table


def visibility_counts(table: Dict[Tuple[int, int], List[int]]) -> Dict[int, int]:
    """How many section pairs expose each number of cells."""
    return dict(sorted(Counter(len(cells) for cells in table.values()).items()))


def cell_coverage(table: Dict[Tuple[int, int], List[int]]) -> Dict[int, int]:
    """How many section pairs expose each cell index."""
    return dict(sorted(Counter(i for cells in table.values() for i in cells).items()))


def diagnostics_report(geometry: WheelGeometry = DEFAULT_GEOMETRY) -> dict:
    """Summary of the visibility rules over the whole section space."""
    table = visibility_table(geometry)
    coverage = cell_coverage(table)
    all_cells = set(range(1, geometry.max_index + 1))
    return {
        "pairs": len(table),
        "expected_visible": geometry.expected_visible,
        "visible_counts": visibility_counts(table),
        "max_index": geometry.max_index,
        "cells_exposed": len(coverage),
        "cells_never_exposed": sorted(all_cells - set(coverage)),
    }

"""Read comma-delimited sheet exports into rectangular-ish grids."""

import csv
import io

from ..errors import MalformedGrid


Grid = list[list[str]]


def read_grid(text: str, skip_empty_rows: bool = True) -> Grid:
    """
    Parse CSV text into a list of rows.

    Args:
        text: Raw CSV export
        skip_empty_rows: Drop rows whose cells are all blank. Positional
            grids (lobbies) must keep them so row offsets stay valid.

    Returns:
        List of rows, each a list of cell strings (rows may be ragged)

    Raises:
        MalformedGrid: If the text is empty or not parseable as CSV
    """
    if text is None or not text.strip():
        raise MalformedGrid("Sheet export is empty")

    try:
        rows = list(csv.reader(io.StringIO(text, newline="")))
    except csv.Error as e:
        raise MalformedGrid(f"Sheet export is not valid CSV: {e}") from e

    if skip_empty_rows:
        rows = [row for row in rows if any(cell.strip() for cell in row)]
    return rows


def cell(grid: Grid, row: int, col: int) -> str:
    """Trimmed cell value, or "" when the address is outside the grid."""
    if row < 0 or col < 0 or row >= len(grid):
        return ""
    values = grid[row]
    if col >= len(values):
        return ""
    return (values[col] or "").strip()

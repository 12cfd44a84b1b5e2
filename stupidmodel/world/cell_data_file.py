"""Reader for habitat cell data files.

A cell data file is plain text.  Any leading header lines are ignored;
every data line holds ``x y production_rate`` separated by whitespace
(tabs in files exported from spreadsheets).
"""

from __future__ import annotations

from pathlib import Path

from stupidmodel.common.cell_data import CellData


def _is_data_line(tokens: list[str]) -> bool:
    if not tokens:
        return False
    try:
        int(tokens[0])
    except ValueError:
        return False
    return True


def load_cell_data(path: str | Path) -> list[CellData]:
    """Parse a cell data file.

    Args:
        path: Path to the file.

    Returns:
        One CellData per data line, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a data line does not hold exactly ``x y rate``.
    """
    path = Path(path)
    cells: list[CellData] = []
    with path.open("r") as f:
        for lineno, line in enumerate(f, start=1):
            tokens = line.split()
            if not _is_data_line(tokens):
                continue
            if len(tokens) != 3:
                msg = f"{path}:{lineno}: expected 'x y production_rate', got {line.strip()!r}"
                raise ValueError(msg)
            try:
                cells.append(
                    CellData(
                        x=int(tokens[0]),
                        y=int(tokens[1]),
                        production_rate=float(tokens[2]),
                    ),
                )
            except ValueError as exc:
                msg = f"{path}:{lineno}: {exc}"
                raise ValueError(msg) from exc
    return cells

import threading
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.worksheet.worksheet import Worksheet

from asciisheet.errors import SaveError, SheetCreationError
from asciisheet.glyphs import GlyphTable
from asciisheet.luminance import quantize

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Longest sheet title Excel will open
MAX_SHEET_NAME = 31

# Every one- and two-letter column name: A..Z, AA..ZZ
MAX_COLUMNS = 26 + 26 * 26


def column_name(index: int) -> str:
    """Zero-based column index to its letter name (0 -> A, 25 -> Z, 26 -> AA)."""
    if not 0 <= index < MAX_COLUMNS:
        raise ValueError(f"column index {index} outside 0..{MAX_COLUMNS - 1}")
    name = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        name = LETTERS[rem] + name
    return name


def cell_address(x: int, y: int) -> str:
    return f"{column_name(x)}{y + 1}"


def column_width_units(pixels: float) -> float:
    points_per_inch = 72.0
    pixels_per_point = 0.125
    return pixels / pixels_per_point / points_per_inch


def row_height_points(pixels: float) -> float:
    points_per_inch = 72.0
    inches_per_pixel = 1 / 96.0
    return pixels * inches_per_pixel * points_per_inch


def hex_colour(rgb) -> str:
    r, g, b = (int(c) for c in rgb)
    return f"{r:02X}{g:02X}{b:02X}"


def create_workbook(sheet_name: str) -> tuple[Workbook, Worksheet]:
    if len(sheet_name) > MAX_SHEET_NAME:
        raise SheetCreationError(
            f"error creating sheet {sheet_name!r}: title is longer than {MAX_SHEET_NAME} characters"
        )
    workbook = Workbook()
    sheet = workbook.active
    try:
        sheet.title = sheet_name
    except ValueError as e:
        raise SheetCreationError(f"error creating sheet {sheet_name!r}: {e}") from e
    workbook.active = sheet
    return workbook, sheet


def save_workbook(workbook: Workbook, path: str | Path) -> Path:
    path = Path(path)
    try:
        workbook.save(path)
    except OSError as e:
        raise SaveError(path, str(e)) from e
    return path


class GridWriter:
    """Writes one styled cell per pixel into a worksheet.

    openpyxl worksheets are not thread-safe, so every mutation goes through
    ``self._lock``. Text and colour are computed outside the lock.
    """

    def __init__(self, sheet: Worksheet, table: GlyphTable, cell_width: float, cell_height: float):
        self.sheet = sheet
        self.table = table
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.cells_written = 0
        self._lock = threading.Lock()

    def size_grid(self, width: int, height: int) -> None:
        col_width = column_width_units(self.cell_width)
        row_height = row_height_points(self.cell_height)
        with self._lock:
            for x in range(width):
                self.sheet.column_dimensions[column_name(x)].width = col_width
            for y in range(height):
                self.sheet.row_dimensions[y + 1].height = row_height

    def styled_value(self, rgb) -> tuple[str, str]:
        """Cell text and RRGGBB font colour for one pixel."""
        index = quantize(rgb, len(self.table))
        return self.table.cell_text(index), hex_colour(rgb)

    def write_pixel(self, x: int, y: int, rgb) -> None:
        address = cell_address(x, y)
        text, colour = self.styled_value(rgb)
        with self._lock:
            cell = self.sheet[address]
            cell.value = text
            cell.font = Font(color=colour)
            self.cells_written += 1

    def write_row(self, y: int, pixels) -> None:
        for x, rgb in enumerate(pixels):
            self.write_pixel(x, y, rgb)

import pytest
from openpyxl import load_workbook
from PIL import Image

from asciisheet.config import RenderConfig
from asciisheet.converter import convert_image, image_to_workbook, render_rows
from asciisheet.errors import GridSizeError, LoadError, RenderError
from asciisheet.glyphs import GlyphTable
from asciisheet.image import open_and_resize


def written_cells(sheet):
    return [cell for row in sheet.iter_rows() for cell in row if cell.value is not None]


def test_checker_scenario(checker_path, tmp_path):
    config = RenderConfig(scale=1.0)
    out = convert_image(checker_path, tmp_path / "checker_ascii.xlsx", config)
    sheet = load_workbook(out)["Sheet1"]

    assert len(written_cells(sheet)) == 4
    for address in ("A1", "A2"):
        assert sheet[address].value == "@@@@@@@@@@@@@"
        assert sheet[address].font.color.rgb.endswith("000000")
    for address in ("B1", "B2"):
        assert sheet[address].value == "."
        assert sheet[address].font.color.rgb.endswith("FFFFFF")


def test_solid_image_every_cell_identical(solid_path):
    workbook, bitmap = image_to_workbook(solid_path, RenderConfig(scale=1.0))
    cells = written_cells(workbook["Sheet1"])
    assert len(cells) == 7 * 5
    assert {cell.value for cell in cells} == {"#####"}
    assert {cell.font.color.rgb[-6:] for cell in cells} == {"C8285A"}


def test_grid_dimensions_follow_scale(tmp_path):
    path = tmp_path / "big.png"
    Image.new("RGB", (30, 12), (90, 90, 90)).save(path)
    workbook, bitmap = image_to_workbook(path, RenderConfig(scale=0.5))
    sheet = workbook["Sheet1"]
    assert (bitmap.width, bitmap.height) == (15, 6)
    assert (sheet.max_column, sheet.max_row) == (15, 6)


def test_custom_sheet_name_and_table(checker_path):
    config = RenderConfig(table=GlyphTable("XO", (2, 0)), sheet_name="Art", scale=1.0)
    workbook, _ = image_to_workbook(checker_path, config)
    sheet = workbook["Art"]
    assert sheet["A1"].value == "XX"
    assert sheet["B2"].value == "O"


def test_single_worker_gives_same_result(checker_path):
    workbook, _ = image_to_workbook(checker_path, RenderConfig(scale=1.0, workers=1))
    assert len(written_cells(workbook["Sheet1"])) == 4


def test_too_wide_image_rejected(tmp_path):
    path = tmp_path / "wide.png"
    Image.new("RGB", (703, 1)).save(path)
    with pytest.raises(GridSizeError, match="702 columns"):
        image_to_workbook(path, RenderConfig(scale=1.0))


def test_missing_image(tmp_path):
    with pytest.raises(LoadError):
        image_to_workbook(tmp_path / "gone.png", RenderConfig())


class ExplodingWriter:
    def __init__(self, bad_row):
        self.bad_row = bad_row
        self.rows = []

    def write_row(self, y, pixels):
        if y == self.bad_row:
            raise IndexError("bucket index 12 outside glyph table of size 9")
        self.rows.append(y)


def test_render_rows_waits_for_all_rows_then_raises(solid_path):
    bitmap = open_and_resize(solid_path, 1.0)
    writer = ExplodingWriter(bad_row=2)
    with pytest.raises(RenderError, match="row 3 failed: bucket index 12"):
        render_rows(bitmap, writer)
    assert sorted(writer.rows) == [0, 1, 3, 4]


def test_render_rows_visits_every_row(solid_path):
    bitmap = open_and_resize(solid_path, 1.0)
    writer = ExplodingWriter(bad_row=None)
    render_rows(bitmap, writer, workers=3)
    assert sorted(writer.rows) == list(range(5))


def test_width_checked_before_resizing(tmp_path, monkeypatch):
    path = tmp_path / "small.png"
    Image.new("RGB", (10, 2)).save(path)
    sizes = []
    original = Image.Image.resize

    def recording_resize(self, size, *args, **kwargs):
        sizes.append(size)
        return original(self, size, *args, **kwargs)

    monkeypatch.setattr(Image.Image, "resize", recording_resize)
    with pytest.raises(GridSizeError, match="8000"):
        image_to_workbook(path, RenderConfig(scale=800.0))
    assert sizes == []


def test_infinite_scale_rejected_by_config():
    with pytest.raises(ValueError, match="finite"):
        RenderConfig(scale=float("inf"))

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from openpyxl import Workbook

from asciisheet.config import RenderConfig
from asciisheet.errors import GridSizeError, RenderError
from asciisheet.image import Bitmap, load_image, resize_image, scaled_size
from asciisheet.sheet import MAX_COLUMNS, GridWriter, create_workbook, save_workbook

log = logging.getLogger(__name__)


def render_rows(bitmap: Bitmap, writer: GridWriter, workers: int | None = None) -> None:
    """Fill the sheet with one worker task per image row.

    Returns once every row has finished. The first row that failed is
    re-raised as a RenderError.
    """

    def render_row(y: int) -> None:
        writer.write_row(y, bitmap.row(y))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [(y, pool.submit(render_row, y)) for y in range(bitmap.height)]

    for y, future in futures:
        exc = future.exception()
        if exc is not None:
            raise RenderError(f"row {y + 1} failed: {exc}") from exc


def image_to_workbook(image_path: str | Path, config: RenderConfig) -> tuple[Workbook, Bitmap]:
    image = load_image(image_path)
    width, _ = scaled_size(image.width, image.height, config.scale)
    if width > MAX_COLUMNS:
        raise GridSizeError(
            f"{image_path}: resized width {width} exceeds {MAX_COLUMNS} columns, use a smaller scale"
        )
    bitmap = Bitmap.from_image(resize_image(image, config.scale))
    log.debug("%s resized to %dx%d", image_path, bitmap.width, bitmap.height)

    workbook, sheet = create_workbook(config.sheet_name)
    writer = GridWriter(sheet, config.table, config.cell_width, config.cell_height)
    writer.size_grid(bitmap.width, bitmap.height)
    render_rows(bitmap, writer, workers=config.workers)
    return workbook, bitmap


def convert_image(image_path: str | Path, output_path: str | Path, config: RenderConfig) -> Path:
    workbook, _ = image_to_workbook(image_path, config)
    path = save_workbook(workbook, output_path)
    log.info("Excel file saved: %s", path)
    return path

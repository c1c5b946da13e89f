import logging
from dataclasses import dataclass, field
from pathlib import Path

from asciisheet.config import RenderConfig
from asciisheet.converter import convert_image
from asciisheet.errors import AsciiSheetError

log = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg"}
OUTPUT_SUFFIX = "_ascii.xlsx"


@dataclass
class BatchResult:
    converted: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)


def has_image_extension(path: str | Path) -> bool:
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def find_images(input_dir: str | Path) -> list[Path]:
    """Image files directly inside ``input_dir``, sorted by name."""
    images = []
    for path in sorted(Path(input_dir).iterdir()):
        if path.is_dir():
            continue
        if not has_image_extension(path):
            log.debug("Skipping non-image file %s", path)
            continue
        images.append(path)
    return images


def output_path_for(image_path: str | Path, output_dir: str | Path) -> Path:
    return Path(output_dir) / f"{Path(image_path).stem}{OUTPUT_SUFFIX}"


def convert_folder(input_dir: str | Path, output_dir: str | Path, config: RenderConfig) -> BatchResult:
    """Convert every image in ``input_dir``; a failing image is logged and skipped."""
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input folder does not exist: {input_dir}")
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result = BatchResult()
    for image_path in find_images(input_dir):
        try:
            result.converted.append(convert_image(image_path, output_path_for(image_path, output_dir), config))
        except AsciiSheetError as e:
            log.error("%s", e)
            result.failed.append(image_path)

    log.info("Done: %d converted, %d failed", len(result.converted), len(result.failed))
    return result

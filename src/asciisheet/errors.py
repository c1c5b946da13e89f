class AsciiSheetError(Exception):
    """Base class for failures that skip one image without stopping a batch."""


class LoadError(AsciiSheetError):
    def __init__(self, path, reason: str):
        super().__init__(f"error loading image {path}: {reason}")
        self.path = path


class SheetCreationError(AsciiSheetError):
    pass


class SaveError(AsciiSheetError):
    def __init__(self, path, reason: str):
        super().__init__(f"error saving Excel file {path}: {reason}")
        self.path = path


class GridSizeError(AsciiSheetError):
    pass


class RenderError(AsciiSheetError):
    pass


class GlyphTableError(AsciiSheetError, ValueError):
    pass

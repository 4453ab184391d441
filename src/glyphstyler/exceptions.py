"""Exception hierarchy for Glyphstyler."""


class GlyphStylerError(Exception):
    """Base exception for all Glyphstyler errors."""

    pass


class FontError(GlyphStylerError):
    """Errors related to font loading or saving."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class OutlineError(GlyphStylerError):
    """Errors in outline data."""

    pass


class MalformedOutlineError(OutlineError):
    """A command is missing a field its type requires, or is unknown."""

    def __init__(self, command_index: int, reason: str) -> None:
        self.command_index = command_index
        self.reason = reason
        super().__init__(f"Malformed outline at command {command_index}: {reason}")


class PathSyntaxError(OutlineError):
    """Path syntax string could not be parsed."""

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid path syntax at token {position}: {reason}")


class BatchError(GlyphStylerError):
    """Errors raised while applying a transform across a glyph collection."""

    def __init__(self, glyph_index: int, reason: str) -> None:
        self.glyph_index = glyph_index
        self.reason = reason
        super().__init__(reason)


class GlyphTransformError(BatchError):
    """The transform raised while processing a glyph."""

    def __init__(self, glyph_index: int, reason: str) -> None:
        super().__init__(glyph_index, f"Transform failed for glyph {glyph_index}: {reason}")
        self.reason = reason


class WriteBackError(BatchError):
    """The glyph collection rejected an updated outline."""

    def __init__(self, glyph_index: int, reason: str) -> None:
        super().__init__(glyph_index, f"Write-back failed for glyph {glyph_index}: {reason}")
        self.reason = reason


class UnknownStyleError(GlyphStylerError):
    """Requested style preset does not exist."""

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(f"Unknown style '{style}'")

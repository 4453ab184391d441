"""Name table metadata for fonts.

Reads and writes the human-facing name table entries (family, designer,
license, ...) and renames a styled font so it can coexist with the
original when both are installed.
"""

from fontTools.ttLib import TTFont
from pydantic import BaseModel, Field

# Name table IDs
NAME_ID_COPYRIGHT = 0
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULL_NAME = 4
NAME_ID_VERSION = 5
NAME_ID_POSTSCRIPT = 6
NAME_ID_MANUFACTURER = 8
NAME_ID_DESIGNER = 9
NAME_ID_DESCRIPTION = 10
NAME_ID_LICENSE = 13
NAME_ID_TYPOGRAPHIC_FAMILY = 16

# Windows Unicode BMP, English (US)
WINDOWS_ENGLISH = (3, 1, 0x409)
# Macintosh Roman, English
MAC_ENGLISH = (1, 0, 0)


class FontMetadata(BaseModel):
    """Editable name table fields. Empty strings mean "not set"."""

    font_family: str = Field(default="", description="Family name (ID 1)")
    font_subfamily: str = Field(default="", description="Subfamily name (ID 2)")
    full_name: str = Field(default="", description="Full font name (ID 4)")
    version: str = Field(default="", description="Version string (ID 5)")
    copyright: str = Field(default="", description="Copyright notice (ID 0)")
    manufacturer: str = Field(default="", description="Manufacturer (ID 8)")
    designer: str = Field(default="", description="Designer (ID 9)")
    description: str = Field(default="", description="Description (ID 10)")
    license: str = Field(default="", description="License description (ID 13)")


METADATA_NAME_IDS: dict[str, int] = {
    "font_family": NAME_ID_FAMILY,
    "font_subfamily": NAME_ID_SUBFAMILY,
    "full_name": NAME_ID_FULL_NAME,
    "version": NAME_ID_VERSION,
    "copyright": NAME_ID_COPYRIGHT,
    "manufacturer": NAME_ID_MANUFACTURER,
    "designer": NAME_ID_DESIGNER,
    "description": NAME_ID_DESCRIPTION,
    "license": NAME_ID_LICENSE,
}


def read_metadata(font: TTFont) -> FontMetadata:
    """Read name table fields, preferring English records.

    Falls back to the first decodable record for each name ID; missing
    entries read as empty strings.
    """
    if "name" not in font:
        return FontMetadata()

    name_table = font["name"]
    values: dict[str, str] = {}
    for field_name, name_id in METADATA_NAME_IDS.items():
        values[field_name] = name_table.getDebugName(name_id) or ""  # type: ignore[attr-defined]
    return FontMetadata(**values)


def write_metadata(font: TTFont, metadata: FontMetadata) -> None:
    """Write non-empty metadata fields to the name table.

    Every field is written as a Windows English record. Existing Macintosh
    English records for the same ID are updated too, so both platforms
    agree.

    Args:
        font: The fonttools TTFont object to modify
        metadata: Fields to write; empty fields are left as they are
    """
    name_table = font["name"]

    for field_name, name_id in METADATA_NAME_IDS.items():
        value: str = getattr(metadata, field_name)
        if not value:
            continue

        name_table.setName(value, name_id, *WINDOWS_ENGLISH)  # type: ignore[attr-defined]
        if name_table.getName(name_id, *MAC_ENGLISH) is not None:  # type: ignore[attr-defined]
            name_table.setName(value, name_id, *MAC_ENGLISH)  # type: ignore[attr-defined]


def add_style_suffix(font: TTFont, suffix: str) -> None:
    """Update font name table entries with a style suffix.

    Modifies the font's name table so the styled font can coexist
    with the original when installed on the same system.

    Args:
        font: The fonttools TTFont object to modify
        suffix: Suffix to add, e.g. " Bold"
    """
    name_table = font["name"]

    # Collect updates to apply (avoid modifying while iterating)
    updates: list[tuple[int, int, int, int, str]] = []

    for record in name_table.names:  # type: ignore[attr-defined]
        name_id = record.nameID

        try:
            original = record.toUnicode()
        except UnicodeDecodeError:
            continue

        new_name: str | None = None

        if name_id in (NAME_ID_FAMILY, NAME_ID_TYPOGRAPHIC_FAMILY):
            # "Roboto" -> "Roboto Bold"
            new_name = original + suffix

        elif name_id == NAME_ID_FULL_NAME:
            # "Roboto Regular" -> "Roboto Bold Regular"
            parts = original.rsplit(" ", 1)
            if len(parts) == 2:
                new_name = f"{parts[0]}{suffix} {parts[1]}"
            else:
                new_name = original + suffix

        elif name_id == NAME_ID_POSTSCRIPT:
            # "Roboto-Regular" -> "RobotoBold-Regular", no spaces allowed
            ps_suffix = suffix.replace(" ", "")
            if "-" in original:
                family, style = original.split("-", 1)
                new_name = f"{family}{ps_suffix}-{style}"
            else:
                new_name = original + ps_suffix

        if new_name is not None:
            updates.append(
                (name_id, record.platformID, record.platEncID, record.langID, new_name)
            )

    for name_id, platform_id, plat_enc_id, lang_id, new_name in updates:
        name_table.setName(new_name, name_id, platform_id, plat_enc_id, lang_id)  # type: ignore[attr-defined]

"""
Monospaced font variants, resolved to QFont through a lookup table.
"""
from enum import Enum

from PyQt5.QtGui import QFont


class MonospacedFont(Enum):
    COURIER = "courier"
    COURIER_BOLD = "courier-bold"
    COURIER_BOLD_OBLIQUE = "courier-bold-oblique"
    COURIER_OBLIQUE = "courier-oblique"
    COURIER_NEW = "courier-new"
    COURIER_NEW_BOLD = "courier-new-bold"
    COURIER_NEW_ITALIC = "courier-new-italic"
    COURIER_NEW_BOLD_ITALIC = "courier-new-bold-italic"
    MENLO = "menlo"
    MENLO_BOLD = "menlo-bold"
    MENLO_ITALIC = "menlo-italic"
    MENLO_BOLD_ITALIC = "menlo-bold-italic"

    def font(self, size: int) -> QFont:
        return resolve_font(self, size)


# variant -> (family, bold, italic)
_FONT_TABLE = {
    MonospacedFont.COURIER:                 ("Courier", False, False),
    MonospacedFont.COURIER_BOLD:            ("Courier", True, False),
    MonospacedFont.COURIER_BOLD_OBLIQUE:    ("Courier", True, True),
    MonospacedFont.COURIER_OBLIQUE:         ("Courier", False, True),
    MonospacedFont.COURIER_NEW:             ("Courier New", False, False),
    MonospacedFont.COURIER_NEW_BOLD:        ("Courier New", True, False),
    MonospacedFont.COURIER_NEW_ITALIC:      ("Courier New", False, True),
    MonospacedFont.COURIER_NEW_BOLD_ITALIC: ("Courier New", True, True),
    MonospacedFont.MENLO:                   ("Menlo", False, False),
    MonospacedFont.MENLO_BOLD:              ("Menlo", True, False),
    MonospacedFont.MENLO_ITALIC:            ("Menlo", False, True),
    MonospacedFont.MENLO_BOLD_ITALIC:       ("Menlo", True, True),
}


def font_spec(variant: MonospacedFont):
    """Return (family, bold, italic) for a variant."""
    return _FONT_TABLE[variant]


def resolve_font(variant: MonospacedFont, size: int) -> QFont:
    """
    Build a QFont for a variant. Qt substitutes another fixed-pitch family
    when the named one is not installed.
    """
    family, bold, italic = font_spec(variant)
    font = QFont(family)
    font.setStyleHint(QFont.Monospace)
    font.setFixedPitch(True)
    font.setPointSize(size)
    font.setBold(bold)
    font.setItalic(italic)
    return font

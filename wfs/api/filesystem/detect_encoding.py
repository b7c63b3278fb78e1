"""Detect the text encoding of file bytes from a byte-order mark."""

import codecs

# Longest marks first: the UTF-32-LE mark starts with the UTF-16-LE one.
_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

BOM_SNIFF_BYTES = 4


def detect_encoding(head: bytes, default: str) -> str:
    """Return the encoding announced by a BOM at the start of ``head``, else ``default``.

    The returned codecs consume the mark on decode and write one on encode,
    so content round-trips with its BOM.
    """
    for bom, encoding in _BOMS:
        if head.startswith(bom):
            return encoding
    return default

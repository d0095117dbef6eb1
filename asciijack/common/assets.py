"""
Loading of the ASCII-art card faces.

Each of the thirteen ranks has one plain-text file in the asset directory
(see `ASSET_FILE_NAMES`). A glyph must be rectangular, and every glyph must
share the height and width of the first one loaded.

>>> glyphs = load_glyphs("assets/")  # doctest: +SKIP
>>> glyphs.width, glyphs.height  # doctest: +SKIP
(11, 9)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Union

from asciijack.blackjack.constants import ASSET_FILE_NAMES, RANK_ORDER
from asciijack.common.card import Glyph, Rank
from asciijack.common.errors import (
    AssetAllocationError,
    AssetFormatError,
    AssetIOError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphSet:
    """
    The validated faces of all thirteen ranks.

    Attributes:
        width: Characters per glyph row, shared by every glyph
        height: Rows per glyph, shared by every glyph
        glyphs: Glyph for each rank
    """

    width: int
    height: int
    glyphs: Mapping[Rank, Glyph] = field(default_factory=dict)

    def __getitem__(self, rank: Rank) -> Glyph:
        return self.glyphs[rank]


def parse_glyph(text: str, source: Union[str, Path, None] = None) -> Glyph:
    """
    Turn the contents of one asset file into a glyph.

    Only line feeds end a row, and a carriage return right before one is
    dropped. A trailing newline on the last row is optional.

    :param text: The file contents
    :param source: Where the text came from, for error messages
    :raises AssetFormatError: If the text is empty or its rows differ in length
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    rows = tuple(line[:-1] if line.endswith("\r") else line for line in lines)
    if not rows:
        raise AssetFormatError("Card image is empty", source)

    width = len(rows[0])
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise AssetFormatError(
                f"Line {number} is {len(row)} characters wide, expected {width}",
                source,
            )
    return Glyph(rows)


def read_glyph(path: Path) -> Glyph:
    """
    Read and validate one glyph file.

    :raises AssetIOError: If the file is missing or unreadable
    :raises AssetFormatError: If the file is not valid UTF-8 or not rectangular
    :raises AssetAllocationError: If memory runs out while reading
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise AssetFormatError("Card image is not valid text", path) from exc
    except MemoryError as exc:
        raise AssetAllocationError("Out of memory reading card image", path) from exc
    except OSError as exc:
        raise AssetIOError(f"Cannot read card image: {exc.strerror}", path) from exc

    try:
        return parse_glyph(text, path)
    except MemoryError as exc:
        raise AssetAllocationError("Out of memory reading card image", path) from exc


def load_glyphs(asset_dir: Union[str, Path]) -> GlyphSet:
    """
    Load the faces of all thirteen ranks from a directory.

    :param asset_dir: Directory containing the rank files
    :return: A GlyphSet with one glyph per rank
    :raises AssetIOError: If the directory or any file cannot be read
    :raises AssetFormatError: If any glyph is malformed or the glyphs disagree
        on height or width
    :raises AssetAllocationError: If memory runs out while loading
    """
    directory = Path(asset_dir)
    if not directory.is_dir():
        raise AssetIOError("Asset directory does not exist", directory)

    glyphs: Dict[Rank, Glyph] = {}
    height = width = None

    for rank in RANK_ORDER:
        path = directory / ASSET_FILE_NAMES[rank]
        glyph = read_glyph(path)
        logger.debug(
            "Loaded %s glyph from %s (%dx%d)", rank.name, path, glyph.width, glyph.height
        )

        if height is None:
            height, width = glyph.height, glyph.width
        elif (glyph.height, glyph.width) != (height, width):
            raise AssetFormatError(
                f"Card image is {glyph.width}x{glyph.height}, "
                f"expected {width}x{height}",
                path,
            )
        glyphs[rank] = glyph

    logger.info("Loaded %d card images (%dx%d) from %s", len(glyphs), width, height, directory)
    return GlyphSet(width=width, height=height, glyphs=MappingProxyType(glyphs))

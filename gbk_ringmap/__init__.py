"""
gbk-ringmap: read GenBank feature tables for circular genome maps.

Public API surface:

- ``read(path, config=None)`` -- **recommended entry point**. Opens a
  GenBank file, parses its feature table and closes the file again,
  returning a ``GenomeFeatures`` record or ``None``.

- ``parse(stream, ...)`` -- Parse from an already open binary stream.
  The stream is left open; the caller owns it.

``None`` means the record carries no usable annotation: there is no
FEATURES table, or the table has no ``source`` feature with an
``/organism`` qualifier. I/O errors propagate as raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from gbk_ringmap.config import MapSettings, RingmapConfig, load_config
from gbk_ringmap.cursor import DEFAULT_BUFFER_SIZE, ByteCursor
from gbk_ringmap.exceptions import (
    ConfigurationError,
    ConfigValidationError,
    GbkRingmapError,
)
from gbk_ringmap.layout_registry import TableLayout, get_layout
from gbk_ringmap.location import FeatureLocation, parse_location
from gbk_ringmap.parsers.base import GenomeFeatures
from gbk_ringmap.parsers.feature_table import FeatureTableParser
from gbk_ringmap.qualifiers import extract_quoted

__all__ = [
    "read",
    "parse",
    "ByteCursor",
    "FeatureLocation",
    "GenomeFeatures",
    "FeatureTableParser",
    "MapSettings",
    "RingmapConfig",
    "TableLayout",
    "load_config",
    "parse_location",
    "extract_quoted",
    "GbkRingmapError",
    "ConfigurationError",
    "ConfigValidationError",
]

logger = logging.getLogger(__name__)


def parse(
    stream: BinaryIO,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    layout: TableLayout | None = None,
) -> GenomeFeatures | None:
    """Parse the feature table from an open binary stream.

    Args:
        stream: Readable binary stream positioned at or before a GenBank
            record. Not closed by this function.
        buffer_size: Bytes requested per buffer refill.
        layout: Column layout of the table. Defaults to ``genbank``.

    Returns:
        A ``GenomeFeatures`` record, or ``None`` if no annotation was found.

    Raises:
        ConfigurationError: If *buffer_size* is invalid or *stream* is
            not a readable binary stream.
    """
    cursor = ByteCursor(stream, buffer_size)
    return FeatureTableParser(layout).parse(cursor)


def read(
    path: str | Path,
    config: RingmapConfig | None = None,
) -> GenomeFeatures | None:
    """Read the feature table of a GenBank file.

    The file is opened for the duration of the parse and closed on every
    exit path.

    Args:
        path: Path to a GenBank flat file.
        config: Reader settings (buffer size, layout). Defaults apply
            when ``None``.

    Returns:
        A ``GenomeFeatures`` record, or ``None`` if no annotation was found.

    Raises:
        OSError: If the file cannot be opened or read.
        ConfigurationError: If the configured layout does not exist.

    Examples::

        features = gbk_ringmap.read("inputs/NC_000913.gb")
        if features is not None:
            print(features.organism, features.base_positions)
            df = features.to_frame()
    """
    config = config or RingmapConfig()
    layout = get_layout(config.reader.layout)
    logger.info("read() -- path=%s, layout=%s", path, layout.layout_name)

    with open(path, "rb") as f:
        return parse(f, buffer_size=config.reader.buffer_size, layout=layout)

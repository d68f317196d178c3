"""
Feature-table detection for GenBank flat files.

A GenBank record opens with a header block (LOCUS, DEFINITION,
REFERENCE, ...) that carries nothing the map needs. ``find_feature_table``
skips it line by line, looking only at the first few characters of each
line, until it reaches the line that opens the feature table::

    FEATURES             Location/Qualifiers

Lines are never revisited; a file without the header is consumed to the
end.
"""

from __future__ import annotations

import logging

from gbk_ringmap.cursor import ByteCursor

logger = logging.getLogger(__name__)

FEATURES_KEYWORD = "FEATURES"


def find_feature_table(cursor: ByteCursor, keyword: str = FEATURES_KEYWORD) -> bool:
    """Advance *cursor* to the line that starts with *keyword*.

    The comparison is case-sensitive and anchored at column 0.

    Returns:
        ``True`` with the cursor positioned just after the keyword on
        the header line, or ``False`` if the stream ended first.
    """
    width = len(keyword)
    lines_skipped = 0
    while True:
        if cursor.read_chars(width) == keyword:
            logger.debug("Found %s header after %d lines", keyword, lines_skipped)
            return True
        if not cursor.next_line():
            logger.debug("No %s header in %d lines", keyword, lines_skipped)
            return False
        lines_skipped += 1

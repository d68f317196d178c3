"""
Streaming parser for the GenBank FEATURES table.

Handles the part of a GenBank flat file that the ring map needs: the
``source`` feature (organism name and record length) and every ``gene``
feature (name and location).

Input structure (columns fixed by the ``TableLayout``)::

    FEATURES             Location/Qualifiers
         source          1..5000
                         /organism="Escherichia coli"
                         /mol_type="genomic DNA"
         gene            complement(10..200)
                         /gene="thrA"
    ORIGIN

Line classification is by indentation only:

- 0 spaces: the table has ended (``ORIGIN``, ``CONTIG``, ``//``).
- ``key_indent`` spaces: a feature key line; its location becomes the
  pending location for the qualifiers below it.
- ``qualifier_indent`` spaces: a qualifier of the pending feature.
- anything else (continuation lines of long qualifiers, blank lines):
  ignored.

Malformed locations and qualifier values never abort the parse; the
line just contributes nothing.
"""

from __future__ import annotations

import logging

from gbk_ringmap.cursor import ByteCursor
from gbk_ringmap.detect import find_feature_table
from gbk_ringmap.layout_registry import TableLayout, get_layout
from gbk_ringmap.location import FeatureLocation, parse_location
from gbk_ringmap.parsers.base import BaseParser, GenomeFeatures, GenomeFeaturesBuilder
from gbk_ringmap.qualifiers import GENE_QUALIFIER, ORGANISM_QUALIFIER, qualifier_value

logger = logging.getLogger(__name__)

SOURCE_KEY = "source"


class FeatureTableParser(BaseParser):
    """Single-pass parser for the FEATURES table of a GenBank record.

    Args:
        layout: Column positions of the table. Defaults to the bundled
            ``genbank`` layout.
    """

    def __init__(self, layout: TableLayout | None = None) -> None:
        self.layout = layout or get_layout()

    def parse(self, cursor: ByteCursor) -> GenomeFeatures | None:
        layout = self.layout
        if not find_feature_table(cursor, layout.header_keyword):
            logger.warning("No %s table found", layout.header_keyword)
            return None

        builder: GenomeFeaturesBuilder | None = None
        location: FeatureLocation | None = None
        in_source = False

        while cursor.next_line():
            indent = cursor.skip_consecutive(" ")

            if indent == 0:
                break

            if indent == layout.key_indent:
                window = cursor.read_chars(layout.window_length)
                location = None
                in_source = False
                if len(window) < layout.key_width:
                    continue
                location = parse_location(window[layout.key_width:])
                if location is None:
                    logger.debug("Skipping feature with unsupported location: %r", window.rstrip())
                    continue
                in_source = window.startswith(SOURCE_KEY)

            elif indent == layout.qualifier_indent and location is not None:
                window = cursor.read_chars(layout.window_length)
                if in_source and builder is None:
                    organism = qualifier_value(window, ORGANISM_QUALIFIER)
                    if organism:
                        builder = GenomeFeaturesBuilder(organism, location.end)
                        logger.debug(
                            "Organism '%s', %d bases", organism, location.end
                        )
                elif builder is not None:
                    gene = qualifier_value(window, GENE_QUALIFIER)
                    if gene is not None:
                        builder.add_gene(gene, location)

        if builder is None:
            logger.warning("Feature table has no source feature with an /organism qualifier")
            return None

        logger.info(
            "Parsed features for '%s': %d bases, %d genes",
            builder.organism, builder.base_positions, len(builder),
        )
        return builder.build()

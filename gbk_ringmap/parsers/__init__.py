"""
Parsers sub-package for gbk-ringmap.

Contains the parser that turns a GenBank feature table into a
``GenomeFeatures`` record.

Design:
- base.py defines the BaseParser ABC and the GenomeFeatures record.
- feature_table.py implements FeatureTableParser, the single-pass
  column state machine over a ByteCursor.

Column positions come from a TableLayout (layout_registry.py), so the
parser holds no hardcoded indentation.
"""

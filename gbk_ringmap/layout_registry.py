"""
Table layout loader for gbk-ringmap.

Loads layout YAML files from gbk_ringmap/layouts/ into ``TableLayout``
pydantic models. A layout pins down the fixed columns of a feature
table:

- header_keyword: the word that opens the table (``FEATURES``)
- line_length: the nominal maximum line width (80)
- key_indent: column where feature keys start (5)
- qualifier_indent: column where locations and qualifiers start (21)

The parser reads every column position from the layout, so a
wider-table variant is a new YAML file rather than a code change.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from gbk_ringmap.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"

DEFAULT_LAYOUT = "genbank"


class TableLayout(BaseModel):
    """Fixed column positions of a feature table, loaded from YAML."""

    layout_name: str
    description: str = ""
    header_keyword: str = Field("FEATURES", min_length=1)
    line_length: int = Field(80, gt=0)
    key_indent: int = Field(5, gt=0)
    qualifier_indent: int = Field(21, gt=0)

    @model_validator(mode="after")
    def _check_columns(self) -> TableLayout:
        if self.qualifier_indent <= self.key_indent:
            raise ValueError(
                f"qualifier_indent ({self.qualifier_indent}) must be greater "
                f"than key_indent ({self.key_indent})"
            )
        if self.line_length <= self.qualifier_indent:
            raise ValueError(
                f"line_length ({self.line_length}) must be greater "
                f"than qualifier_indent ({self.qualifier_indent})"
            )
        return self

    @property
    def key_width(self) -> int:
        """Width of the feature key column; the location starts right after it."""
        return self.qualifier_indent - self.key_indent

    @property
    def window_length(self) -> int:
        """Characters read from a key or qualifier line after its indentation."""
        return self.line_length - self.key_indent


def load_layout(path: Path) -> TableLayout:
    """Load a single layout YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Layout file does not contain a mapping: {path}")
    return TableLayout.model_validate(raw)


def load_all_layouts(layouts_dir: Path | None = None) -> dict[str, TableLayout]:
    """Load all layout YAML files, keyed by layout name.

    Files that fail to load are logged and skipped.

    Args:
        layouts_dir: Directory to scan for .yaml files. Defaults to
            the built-in layouts/ directory.
    """
    layouts_dir = layouts_dir or _LAYOUTS_DIR
    layouts: dict[str, TableLayout] = {}
    for yaml_path in sorted(layouts_dir.glob("*.yaml")):
        try:
            layout = load_layout(yaml_path)
        except Exception as e:
            logger.warning("Failed to load layout from %s: %s", yaml_path, e)
            continue
        layouts[layout.layout_name] = layout
        logger.debug("Loaded layout: %s from %s", layout.layout_name, yaml_path)
    logger.debug("Loaded %d layouts", len(layouts))
    return layouts


def get_layout(name: str = DEFAULT_LAYOUT, layouts_dir: Path | None = None) -> TableLayout:
    """Look up a layout by name.

    Raises:
        ConfigurationError: If no layout file defines *name*.
    """
    layouts = load_all_layouts(layouts_dir)
    try:
        return layouts[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown table layout '{name}'. Available layouts: {sorted(layouts)}"
        ) from None

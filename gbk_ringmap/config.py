"""
Configuration models and YAML I/O for gbk-ringmap.

This module defines the Pydantic models that map 1:1 to a ringmap
config YAML file, plus helpers for loading, saving and building the
default config.

Key models:
- RingmapConfig: Top-level config (reader + map).
- ReaderConfig: Refill buffer size and table layout name for parsing.
- MapSettings: Visual settings handed to a renderer together with the
  parsed ``GenomeFeatures`` (ring radii, colours, font sizes, offsets,
  tick-mark count).

Key functions:
- load_config(path) -> RingmapConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- default_config() -> RingmapConfig: All defaults.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from gbk_ringmap.cursor import DEFAULT_BUFFER_SIZE
from gbk_ringmap.exceptions import ConfigValidationError
from gbk_ringmap.layout_registry import DEFAULT_LAYOUT

logger = logging.getLogger(__name__)

_COLOUR_PATTERN = re.compile(r"#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


class ReaderConfig(BaseModel):
    """Settings for reading GenBank files."""

    buffer_size: int = Field(
        DEFAULT_BUFFER_SIZE, gt=0, description="Bytes requested per buffer refill"
    )
    layout: str = Field(
        DEFAULT_LAYOUT, description="Name of the table layout in gbk_ringmap/layouts/"
    )


class MapSettings(BaseModel):
    """Visual settings for drawing a circular genome map.

    Colours are ``#RRGGBB`` or ``#RRGGBBAA`` strings. Distances are in
    pixels on a 1024x1024 page.
    """

    label_colour: str = "#000000"
    label_font_family: str = "Helvetica"

    # Feature ring: one arc per gene, outside the ring for the forward
    # strand and inside it for the complement strand
    feature_ring_radius: int = Field(325, gt=0)
    feature_width: int = Field(25, ge=0)
    feature_label_font_size: int = Field(15, gt=0)
    feature_label_offset: int = Field(10, ge=0)
    feature_stroke_colour: str = "#461919"
    feature_fill_colour: str = "#46191964"

    # Marker ring: base-position tick marks
    marker_ring_radius: int = Field(150, gt=0)
    mark_count: int = Field(8, ge=0)
    mark_length: int = Field(10, ge=0)
    mark_label_font_size: int = Field(12, gt=0)
    mark_label_offset: int = Field(10, ge=0)

    organism_label_font_size: int = Field(17, gt=0)

    @field_validator(
        "label_colour", "feature_stroke_colour", "feature_fill_colour"
    )
    @classmethod
    def _check_colour(cls, value: str) -> str:
        if not _COLOUR_PATTERN.match(value):
            raise ValueError(
                f"Invalid colour '{value}': expected #RRGGBB or #RRGGBBAA"
            )
        return value.lower()

    @model_validator(mode="after")
    def _check_feature_ring(self) -> MapSettings:
        """Complement-strand arcs are drawn inside the ring and need room."""
        if self.feature_ring_radius <= self.feature_width:
            raise ValueError(
                f"feature_ring_radius ({self.feature_ring_radius}) must be "
                f"greater than feature_width ({self.feature_width})"
            )
        return self


class RingmapConfig(BaseModel):
    """Top-level configuration for gbk-ringmap."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    map: MapSettings = Field(default_factory=MapSettings)


def default_config() -> RingmapConfig:
    return RingmapConfig()


def load_config(path: str | Path) -> RingmapConfig:
    """Load and validate a ringmap config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return RingmapConfig.model_validate(raw)


def save_config(config: RingmapConfig, path: str | Path) -> None:
    """Serialize a RingmapConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# gbk-ringmap settings\n")
        f.write("#   reader: refill buffer size and feature-table layout name\n")
        f.write("#   map:    ring radii, colours, font sizes and tick marks for the renderer\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)

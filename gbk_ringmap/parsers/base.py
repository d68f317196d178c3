"""
Base parser protocol and result record for gbk-ringmap.

The contract for every parser is:

1. ``parse()`` takes a ``ByteCursor`` and returns either a
   ``GenomeFeatures`` record or ``None``.
2. ``None`` means "no annotation found" (no feature table, or no
   ``source`` feature with an ``/organism`` qualifier). It is not an
   error; malformed streams never turn into ``None`` through an
   exception path, and I/O errors propagate.

``GenomeFeatures`` is immutable. Parsers accumulate into a
``GenomeFeaturesBuilder`` and call ``build()`` once at the end.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import pandas as pd

from gbk_ringmap.cursor import ByteCursor
from gbk_ringmap.location import FeatureLocation

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["gene", "start", "end", "complement", "length"]


@dataclass(frozen=True)
class GenomeFeatures:
    """Annotation data read from one GenBank feature table.

    Attributes:
        organism: Value of the ``/organism`` qualifier on the ``source``
            feature.
        base_positions: Length of the record in bases, taken from the end
            coordinate of the ``source`` feature.
        locations: Read-only mapping of gene name -> location. When a
            gene name occurs more than once, the first location wins.
    """

    organism: str
    base_positions: int
    locations: Mapping[str, FeatureLocation] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not self.organism:
            raise ValueError("organism must be a non-empty string")
        if self.base_positions < 1:
            raise ValueError(
                f"base_positions must be positive, got {self.base_positions}"
            )
        if not isinstance(self.locations, MappingProxyType):
            object.__setattr__(
                self, "locations", MappingProxyType(dict(self.locations))
            )

    def within_bounds(self) -> dict[str, FeatureLocation]:
        """Locations that end inside the record, i.e. that fit on the ring."""
        return {
            gene: loc
            for gene, loc in self.locations.items()
            if loc.end <= self.base_positions
        }

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the gene locations, one row per gene."""
        rows = [
            (gene, loc.start, loc.end, loc.complement, loc.length)
            for gene, loc in self.locations.items()
        ]
        df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
        return df.astype({"start": "int64", "end": "int64", "complement": "bool", "length": "int64"})


class GenomeFeaturesBuilder:
    """Mutable accumulator used while a feature table is being read."""

    def __init__(self, organism: str, base_positions: int) -> None:
        self.organism = organism
        self.base_positions = base_positions
        self._locations: dict[str, FeatureLocation] = {}

    def add_gene(self, name: str, location: FeatureLocation) -> bool:
        """Record *name* at *location* unless the name is already known.

        Returns ``True`` if the gene was added.
        """
        if name in self:
            logger.debug(
                "Ignoring duplicate gene '%s' at %s (kept %s)",
                name, location, self._locations[name],
            )
            return False
        self._locations[name] = location
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def build(self) -> GenomeFeatures:
        return GenomeFeatures(
            organism=self.organism,
            base_positions=self.base_positions,
            locations=MappingProxyType(dict(self._locations)),
        )


class BaseParser(ABC):
    """Abstract base class for feature table parsers.

    Subclasses must implement parse(). The cursor is owned by the
    caller; parsers read from it but never close the underlying source.
    """

    @abstractmethod
    def parse(self, cursor: ByteCursor) -> GenomeFeatures | None:
        """Read annotation data from *cursor*.

        Returns:
            A ``GenomeFeatures`` record, or ``None`` if the stream has
            no usable feature table.
        """

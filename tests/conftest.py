"""
Shared test fixtures and sample records for gbk-ringmap tests.

Sample GenBank text is defined here as module-level constants so the
unit and integration tests parse exactly the same records. Column
positions follow the standard 80-column layout: keys at column 5,
locations and qualifiers at column 21.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- real GenBank files, used by smoke tests when present
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent.parent / "inputs"

ECOLI_GB = INPUT_DIR / "NC_000913.gb"


# ---------------------------------------------------------------------------
# Sample records
# ---------------------------------------------------------------------------
KEY = " " * 5
QUAL = " " * 21


def feature_line(key: str, location: str) -> str:
    """Build a key line: key at column 5, location at column 21."""
    return f"{KEY}{key:<16}{location}"


def qualifier_line(text: str) -> str:
    return f"{QUAL}{text}"


HEADER_LINES = [
    "LOCUS       NC_TEST                 5000 bp    DNA     circular BCT 01-JAN-2020",
    "DEFINITION  Escherichia coli test record.",
    "ACCESSION   NC_TEST",
    "FEATURES             Location/Qualifiers",
]

# Scenario A: one source feature and one gene
SCENARIO_A_LINES = HEADER_LINES + [
    feature_line("source", "1..5000"),
    qualifier_line('/organism="Escherichia coli"'),
    qualifier_line('/mol_type="genomic DNA"'),
    feature_line("gene", "10..200"),
    qualifier_line('/gene="thrA"'),
    "ORIGIN",
    "        1 agcttttcat tctgactgca acgggcaata tgtctctgtg tggattaaaa aaagagtgtc",
    "//",
]

# A richer record: complement strand, fuzzy ends, CDS keys, duplicate
# gene names, unsupported locations and wrapped qualifier values
RICH_LINES = HEADER_LINES + [
    feature_line("source", "1..5000"),
    qualifier_line('/organism="Escherichia coli str. K-12"'),
    qualifier_line('/db_xref="taxon:511145"'),
    feature_line("gene", "190..255"),
    qualifier_line('/gene="thrL"'),
    qualifier_line('/locus_tag="b0001"'),
    feature_line("CDS", "190..255"),
    qualifier_line('/gene="thrL"'),
    qualifier_line('/note="operon leader peptide; amino acid'),
    qualifier_line('biosynthesis"'),
    feature_line("gene", "complement(337..2799)"),
    qualifier_line('/gene="thrA"'),
    feature_line("gene", "<2801..>3733"),
    qualifier_line('/gene="thrB"'),
    feature_line("gene", "join(3734..4000,4100..4200)"),
    qualifier_line('/gene="thrC"'),
    feature_line("gene", "4300..4400"),
    qualifier_line('/gene="thrA"'),
    feature_line("gene", "4500..4900"),
    qualifier_line('/gene="yaaA"'),
    "ORIGIN",
    "//",
]

NO_FEATURES_LINES = [
    "LOCUS       NC_EMPTY                100 bp    DNA     linear   BCT 01-JAN-2020",
    "DEFINITION  A record without a feature table.",
    "ORIGIN",
    "        1 agcttttcat tctgactgca",
    "//",
]


def to_bytes(lines: list[str], newline: str = "\n") -> bytes:
    return (newline.join(lines) + newline).encode("ascii")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def stream_of():
    """Factory: list of lines -> in-memory binary stream."""

    def _make(lines: list[str], newline: str = "\n") -> io.BytesIO:
        return io.BytesIO(to_bytes(lines, newline))

    return _make


@pytest.fixture()
def genbank_file(tmp_path):
    """Factory: list of lines -> path of a GenBank file in tmp_path."""

    def _make(lines: list[str], name: str = "record.gb", newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes(to_bytes(lines, newline))
        return path

    return _make


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads files from disk)",
    )

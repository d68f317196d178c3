"""
Demo script: read a GenBank file and log what a ring map would show.

Usage:
    uv run python scripts/summarize_genbank.py inputs/NC_000913.gb
    uv run python scripts/summarize_genbank.py inputs/NC_000913.gb --config ringmap.yaml -v

Logs the organism, the record length and a table of gene locations.
Exit status is 1 when the file cannot be read and 2 when the file has
no usable feature table.
"""

from __future__ import annotations

import argparse
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

log = logging.getLogger("summarize_genbank")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import gbk_ringmap

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("input", help="GenBank flat file to read")
    parser.add_argument("--config", help="ringmap config YAML (reader + map settings)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every skipped line")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    config = gbk_ringmap.load_config(args.config) if args.config else None

    try:
        features = gbk_ringmap.read(args.input, config=config)
    except OSError as e:
        log.error("Error reading %s: %s", args.input, e)
        return 1

    if features is None:
        log.warning("No source feature with an organism found in %s", args.input)
        return 2

    log.info("=" * 70)
    log.info("Organism : %s", features.organism)
    log.info("Length   : %s bp", f"{features.base_positions:,}")
    log.info("Genes    : %d (%d within the record)",
             len(features.locations), len(features.within_bounds()))
    log.info("=" * 70)

    df = features.to_frame()
    if not df.empty:
        for line in df.to_string(index=False).splitlines():
            log.info("  %s", line)

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Qualifier value extraction.

GenBank qualifier values such as ``/gene="thrA"`` are taken as the text
between the first and the last double quote in the window. This is not
an escaping-aware string grammar: a doubled ``""`` inside the value is
kept verbatim and anything outside the outer quotes is ignored.
"""

from __future__ import annotations

ORGANISM_QUALIFIER = "/organism="
GENE_QUALIFIER = "/gene="

_QUOTE = '"'


def extract_quoted(window: str) -> str | None:
    """Return the text between the first and last ``"`` in *window*.

    Returns ``None`` if the window is shorter than two characters or
    does not contain an opening and a distinct closing quote.
    """
    if len(window) < 2:
        return None

    # The opening quote cannot be the final character
    opening = window.find(_QUOTE, 0, len(window) - 1)
    if opening == -1:
        return None

    closing = window.rfind(_QUOTE, opening + 1)
    if closing == -1:
        return None

    return window[opening + 1:closing]


def qualifier_value(window: str, qualifier: str) -> str | None:
    """Extract the quoted value of *qualifier* if *window* starts with it.

    ``qualifier`` includes the leading slash and trailing ``=``, e.g.
    ``"/gene="``. At least one character must follow it.
    """
    if len(window) <= len(qualifier) or not window.startswith(qualifier):
        return None
    return extract_quoted(window[len(qualifier):])

"""Regex scanners for component classes and design tokens in stylesheet text.

These are deliberately lightweight heuristics, not a CSS tokenizer:
    .card { ... }            -> ".card"
    .card:hover > .title     -> ".card"
      .nested { ... }        -> (not captured, not at column zero)
    color: var(--c-primary)  -> "--c-primary"
"""

from __future__ import annotations

import re

__all__ = ["extract_classes", "extract_tokens"]

# A class selector that begins a line: .name
_CLASS_RE = re.compile(
    r"""
    ^                   # start of a line (MULTILINE)
    \.[a-z]             # leading period and a lowercase letter
    [a-z0-9-]*          # rest of the class name
    """,
    re.MULTILINE | re.VERBOSE,
)

# A custom property name anywhere in the text: --name
_TOKEN_RE = re.compile(
    r"""
    --
    (?P<name>[a-z][a-z0-9-]*)
    """,
    re.VERBOSE,
)


def extract_classes(content: str) -> list[str]:
    """Return the sorted, unique top-level class selectors in *content*."""
    return sorted(set(_CLASS_RE.findall(content)))


def extract_tokens(content: str) -> list[str]:
    """Return the sorted, unique custom property names in *content*.

    Each name keeps exactly two leading hyphens, so declarations such as
    ``--c-primary: #000`` and references such as ``var(--c-primary)`` collapse
    into a single entry.
    """
    return sorted({f"--{match.group('name')}" for match in _TOKEN_RE.finditer(content)})

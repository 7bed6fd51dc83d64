"""Extraction orchestrator: composes the scanners and the categorizer."""

from __future__ import annotations

import logging

from elementary.model.result import MISSING_CSS_MESSAGE, ExtractionOptions, ExtractionResult
from elementary.stylesheet import categorize_tokens, extract_classes, extract_tokens

__all__ = ["extract_design_data"]

log = logging.getLogger(__name__)


def extract_design_data(options: ExtractionOptions) -> ExtractionResult:
    """Extract classes, and optionally tokens, from the supplied stylesheet text.

    Never raises. A missing ``css_content`` yields an error result. Tokens are
    extracted only when ``include_tokens`` is set and ``theme_content`` is
    non-empty; otherwise the token fields are left unset.
    """
    if not options.css_content:
        return ExtractionResult.failure(MISSING_CSS_MESSAGE)

    classes = tuple(extract_classes(options.css_content))
    log.debug("Extracted %d classes from %s", len(classes), options.css_file)

    if not (options.include_tokens and options.theme_content):
        if options.include_tokens:
            log.debug("No theme content for %s, skipping tokens", options.theme)
        return ExtractionResult(css_file=options.css_file, classes=classes)

    tokens = tuple(extract_tokens(options.theme_content))
    log.debug("Extracted %d tokens from theme %s", len(tokens), options.theme)
    return ExtractionResult(
        css_file=options.css_file,
        classes=classes,
        tokens=tokens,
        token_buckets=tuple(categorize_tokens(tokens).items()),
        theme=options.theme,
    )

"""Command interpretation entry point.

`interpret` is total: every input, however noisy, yields a `ParsedCommand`. Anything the rules
parser cannot understand becomes an `unknown` command instead of an exception.
"""

from __future__ import annotations

import logging

from src.intent.rules_parser import parse_command
from src.intent.schema import UNKNOWN_COMMAND, ParsedCommand

logger = logging.getLogger(__name__)


def interpret(utterance: str | None, language_tag: str | None) -> ParsedCommand:
    """Interpret one utterance in the given language (unknown tags fall back to English)."""

    try:
        return parse_command(utterance or "", language_tag)
    except ValueError as exc:
        # RulesParserError, or a pydantic ValidationError for a slot that breaks the schema.
        logger.debug("not understood reason=%s lang=%s", exc, language_tag)
        return UNKNOWN_COMMAND

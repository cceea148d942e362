"""Parsed command schema (Pydantic models).

This schema is the contract between the rules-based command interpreter and the dispatcher.
Every interpretation result is validated against these models before anything is dispatched.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Intent(StrEnum):
    """Closed set of actions a single utterance can express."""

    add_item = "add_item"
    remove_item = "remove_item"
    search = "search"
    unknown = "unknown"


class ParsedCommand(BaseModel):
    """A fully validated shopping command.

    `price` is a plain ceiling with no unit attached: currency markers are recognized by the
    interpreter only to be discarded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    intent: Intent
    item: str | None = None
    quantity: int = Field(default=1, ge=1)
    query: str | None = None
    price: float | None = Field(default=None, ge=0)
    brand: str | None = None

    @model_validator(mode="after")
    def validate_slots(self) -> ParsedCommand:
        """Enforce which slots each intent requires or forbids."""

        if self.intent in {Intent.add_item, Intent.remove_item}:
            if not self.item:
                raise ValueError(f"item is required for intent={self.intent}")

        if self.intent == Intent.search:
            if self.query is None:
                raise ValueError("query is required for intent=search")

        if self.intent == Intent.unknown:
            if any(v is not None for v in (self.item, self.query, self.price, self.brand)):
                raise ValueError("unknown intent must not carry slots")
            if self.quantity != 1:
                raise ValueError("unknown intent must keep the default quantity")

        return self


UNKNOWN_COMMAND = ParsedCommand(intent=Intent.unknown)

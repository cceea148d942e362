"""Map a parsed command to exactly one collaborator call.

Classification is finished before `dispatch` is called, and a failing collaborator never changes it:
errors are re-raised as `DispatchError` carrying the command that was being dispatched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.dispatch.actions import ActionValue, ShoppingActions
from src.intent.schema import Intent, ParsedCommand

logger = logging.getLogger(__name__)

NOT_UNDERSTOOD_MESSAGE = "Sorry, I couldn't understand that command."


class DispatchError(RuntimeError):
    """Raised when the collaborator call for a command fails."""

    def __init__(self, command: ParsedCommand, message: str) -> None:
        super().__init__(message)
        self.command = command


@dataclass(frozen=True)
class DispatchResult:
    """The command together with whatever its collaborator call returned."""

    command: ParsedCommand
    value: ActionValue = None


async def _call(command: ParsedCommand, actions: ShoppingActions) -> ActionValue:
    if command.intent == Intent.add_item:
        assert command.item is not None
        return await actions.add_item(command.item, command.quantity)

    if command.intent == Intent.remove_item:
        assert command.item is not None
        return await actions.remove_item(command.item)

    if command.intent == Intent.search:
        assert command.query is not None
        return await actions.search_items(command.query, command.price, command.brand)

    await actions.notify(NOT_UNDERSTOOD_MESSAGE)
    return None


async def dispatch(command: ParsedCommand, actions: ShoppingActions) -> DispatchResult:
    """Issue the single side-effecting call for `command`.

    `add_item -> add_item(item, quantity)`, `remove_item -> remove_item(item)`,
    `search -> search_items(query, price, brand)`, `unknown -> notify(...)` with no state change.

    Raises:
        DispatchError: If the collaborator call fails for any reason.
    """

    try:
        value = await _call(command, actions)
    except Exception as exc:  # noqa: BLE001 - reported, never reclassified
        raise DispatchError(command, f"{command.intent} failed: {exc}") from exc

    logger.debug("dispatched intent=%s", command.intent)
    return DispatchResult(command=command, value=value)

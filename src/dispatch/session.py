"""Per-session command handling.

Interpretation is pure and runs without any locking. Dispatch is serialized per session: at most one
state-changing call is in flight for a session, so a quick "remove X" can never overtake the
"add X" issued right before it.

Dispatches are never cancelled. When the caller's timeout expires the caller gets a `timed out`
outcome, the dispatch keeps running, and the session stays locked until it settles.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic

from src.dispatch.actions import ShoppingActions
from src.dispatch.dispatcher import DispatchError, DispatchResult, dispatch
from src.intent.parser import interpret
from src.intent.schema import ParsedCommand

logger = logging.getLogger(__name__)

TIMED_OUT = "timed out"


@dataclass(frozen=True)
class DispatchOutcome:
    """What happened to one utterance: its command and either a result or an error."""

    command: ParsedCommand
    result: DispatchResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CommandSession:
    """One user's (or chat's) stream of utterances."""

    def __init__(self, actions: ShoppingActions, *, timeout_s: float | None = None) -> None:
        self._actions = actions
        self._timeout_s = timeout_s
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        """Whether a dispatch for this session is still in flight."""

        return self._lock.locked()

    async def handle(self, utterance: str | None, language_tag: str | None) -> DispatchOutcome:
        """Interpret an utterance and dispatch it once the previous dispatch has settled."""

        command = interpret(utterance, language_tag)

        await self._lock.acquire()
        task = asyncio.ensure_future(dispatch(command, self._actions))
        task.add_done_callback(self._release)

        try:
            result = await asyncio.wait_for(asyncio.shield(task), timeout=self._timeout_s)
        except TimeoutError:
            logger.warning(
                "dispatch timed out intent=%s timeout_s=%s", command.intent, self._timeout_s
            )
            task.add_done_callback(_log_late_outcome)
            return DispatchOutcome(command=command, error=TIMED_OUT)
        except DispatchError as exc:
            logger.warning("dispatch failed intent=%s error=%s", command.intent, exc)
            return DispatchOutcome(command=command, error=str(exc))

        return DispatchOutcome(command=command, result=result)

    def _release(self, _task: asyncio.Future[DispatchResult]) -> None:
        self._lock.release()


def _log_late_outcome(task: asyncio.Future[DispatchResult]) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("late dispatch failed error=%s", exc)
    else:
        logger.info("late dispatch completed intent=%s", task.result().command.intent)


class SessionRegistry:
    """Lazily created sessions keyed by an opaque session id (e.g. a chat id).

    A session that has not been requested for `idle_ttl_s` seconds and has no dispatch in flight is
    dropped on the next lookup; a later message for that id simply gets a fresh session.
    """

    def __init__(
            self,
            factory: Callable[[str], CommandSession],
            *,
            idle_ttl_s: float = 3600.0,
            clock: Callable[[], float] = monotonic,
    ) -> None:
        self._factory = factory
        self._idle_ttl_s = idle_ttl_s
        self._clock = clock
        self._sessions: dict[str, CommandSession] = {}
        self._last_used: dict[str, float] = {}

    def get(self, session_id: str) -> CommandSession:
        now = self._clock()
        self._evict_idle(now)

        session = self._sessions.get(session_id)
        if session is None:
            session = self._factory(session_id)
            self._sessions[session_id] = session
        self._last_used[session_id] = now
        return session

    def _evict_idle(self, now: float) -> None:
        idle = [
            session_id
            for session_id, used_at in self._last_used.items()
            if now - used_at > self._idle_ttl_s and not self._sessions[session_id].busy
        ]
        for session_id in idle:
            del self._sessions[session_id]
            del self._last_used[session_id]
        if idle:
            logger.debug("evicted idle sessions=%d remaining=%d", len(idle), len(self._sessions))

    def __len__(self) -> int:
        return len(self._sessions)

"""
Action Dispatcher
Collects form state under the acting node and forwards it to the caller.
"""

import asyncio
import inspect
import threading
from collections.abc import Awaitable
from typing import Any, Callable

from core import get_logger, LogContext
from .elements import Element
from .models import ActionPayload

logger = get_logger(__name__)

ActionCallback = Callable[[str, dict[str, Any]], Any]


def collect_form_data(scope: Element) -> dict[str, str | bool]:
    """
    Read every named field under ``scope`` into one mapping.

    Checkboxes contribute their checked state, radios contribute the value
    of the checked member of their group, everything else contributes its
    current string value. Unnamed fields are skipped and a later field
    with the same name overwrites an earlier one.
    """
    data: dict[str, str | bool] = {}
    for element in scope.walk():
        if not element.is_field:
            continue
        name = str(element.attrs["name"])
        kind = element.attrs.get("type") if element.tag == "input" else None
        if kind == "checkbox":
            data[name] = bool(element.attrs.get("checked"))
        elif kind == "radio":
            if element.attrs.get("checked"):
                data[name] = str(element.attrs.get("value", ""))
        else:
            value = element.attrs.get("value")
            data[name] = "" if value is None else str(value)
    return data


class ActionDispatcher:
    """
    Invokes the action callback for one render pass.

    Callback failures are logged and swallowed. Awaitable results are not
    awaited inline: they run on the current event loop when one is
    running, otherwise on a daemon thread with its own loop.
    """

    def __init__(self, on_action: ActionCallback | None = None) -> None:
        self.on_action = on_action
        self._tasks: set[asyncio.Task] = set()
        self._threads: set[threading.Thread] = set()
        self._lock = threading.Lock()

    def dispatch(self, action_id: str, scope: Element, disabled: bool = False) -> bool:
        """
        Dispatch ``action_id`` with the form data found under ``scope``.

        Returns:
            True if the callback was invoked
        """
        if disabled:
            logger.debug("action_ignored_disabled", action=action_id)
            return False
        if self.on_action is None:
            return False

        payload = ActionPayload(action=action_id, data=collect_form_data(scope)).model_dump()

        with LogContext(action=action_id):
            try:
                result = self.on_action(action_id, payload)
            except Exception as e:
                logger.error("action_callback_failed", error=str(e), exc_info=True)
                return True

            logger.debug("action_dispatched", fields=sorted(payload["data"]))
            if inspect.isawaitable(result):
                self._schedule(action_id, result)
        return True

    def _schedule(self, action_id: str, awaitable: Awaitable[Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self._guard(action_id, awaitable))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            return

        thread = threading.Thread(
            target=self._run_detached,
            args=(action_id, awaitable),
            name=f"aiui-action-{action_id}",
            daemon=True,
        )
        with self._lock:
            self._threads.add(thread)
        thread.start()

    def _run_detached(self, action_id: str, awaitable: Awaitable[Any]) -> None:
        try:
            asyncio.run(self._guard(action_id, awaitable))
        finally:
            with self._lock:
                self._threads.discard(threading.current_thread())

    @staticmethod
    async def _guard(action_id: str, awaitable: Awaitable[Any]) -> None:
        try:
            await awaitable
        except Exception as e:
            logger.error("action_callback_failed", action=action_id, error=str(e), exc_info=True)

    @property
    def pending(self) -> int:
        """Asynchronous callbacks still in flight."""
        with self._lock:
            threads = len(self._threads)
        return len(self._tasks) + threads

    def wait(self, timeout: float | None = None) -> None:
        """Join callbacks running on background threads."""
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)

    async def drain(self) -> None:
        """Await callbacks scheduled on the running loop."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = ["ActionCallback", "ActionDispatcher", "collect_form_data"]

"""
Delegated page events.

Cards only carry ``data-action`` and ``data-project-id``; a single listener
posts ``{action, projectId, ...}`` here and the dispatcher routes it.
"""
from typing import Any, Callable, Dict, Mapping

from portfolio.client.context import PortfolioContext
from portfolio.utils.errors import ValidationFailedError

Handler = Callable[[PortfolioContext, Mapping[str, Any]], None]


class EventDispatcher:
    def __init__(self):
        self._handlers: Dict[str, Handler] = {}

    def register(self, action: str, handler: Handler) -> None:
        self._handlers[action] = handler

    def dispatch(self, context: PortfolioContext, event: Mapping[str, Any]) -> str:
        """Run the handler for ``event['action']`` and return the re-rendered cards."""
        action = event.get("action")
        handler = self._handlers.get(action)
        if handler is None:
            raise ValidationFailedError(f"Unknown action: {action}")
        handler(context, event)
        return context.render()


def _project_id(event: Mapping[str, Any]) -> int:
    raw = event.get("projectId", event.get("project_id"))
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationFailedError(f"Invalid project id: {raw!r}")


def handle_delete(context: PortfolioContext, event: Mapping[str, Any]) -> None:
    context.delete_project(_project_id(event))


def handle_filter(context: PortfolioContext, event: Mapping[str, Any]) -> None:
    context.apply_filter(event.get("category"))


def default_dispatcher() -> EventDispatcher:
    dispatcher = EventDispatcher()
    dispatcher.register("delete", handle_delete)
    dispatcher.register("filter", handle_filter)
    return dispatcher

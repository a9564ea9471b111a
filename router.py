"""Intent router for the SSML examples agent.

Maps each intent reported by the agent's classifier to a handler. Handlers
receive the request context and return a two segment reply that keeps the
conversation open.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Tuple

import catalog
import responses

log = logging.getLogger(__name__)


class Intent(str, Enum):
    """Intents the agent can send, keyed by their action identifier."""

    WELCOME = "input.welcome"
    TELL_EXAMPLE = "tell.example"
    UNKNOWN = "input.unknown"

    @classmethod
    def from_action(cls, action: Optional[str]) -> Optional["Intent"]:
        try:
            return cls(action)
        except ValueError:
            return None


@dataclass(frozen=True)
class RequestContext:
    intent: Intent
    element: Optional[str] = None


@dataclass(frozen=True)
class Reply:
    """Ordered segments spoken one after another."""

    segments: Tuple[str, ...]
    expect_user_response: bool = True


Handler = Callable[[RequestContext], Reply]


def _not_understood() -> Reply:
    return Reply((responses.did_not_understand(), responses.topic_list()))


def handle_welcome(context: RequestContext) -> Reply:
    return Reply((responses.welcome(), responses.topic_list()))


def handle_tell_example(context: RequestContext) -> Reply:
    element = (context.element or "").strip()
    if not element:
        return _not_understood()
    document = catalog.lookup(element)
    if document is None:
        log.info("No example for element %r", element)
        return _not_understood()
    return Reply((responses.lead_in(element), document))


def handle_unknown(context: RequestContext) -> Reply:
    return _not_understood()


DEFAULT_HANDLERS: Mapping[Intent, Handler] = {
    Intent.WELCOME: handle_welcome,
    Intent.TELL_EXAMPLE: handle_tell_example,
    Intent.UNKNOWN: handle_unknown,
}


class IntentRouter:
    def __init__(self, handlers: Optional[Mapping[Intent, Handler]] = None):
        self.handlers: Dict[Intent, Handler] = dict(
            DEFAULT_HANDLERS if handlers is None else handlers
        )
        missing = [intent.value for intent in Intent if intent not in self.handlers]
        if missing:
            raise ValueError(f"No handler registered for intents: {', '.join(missing)}")

    def register(self, intent: Intent, handler: Handler) -> None:
        """Replace the handler for ``intent``."""
        self.handlers[Intent(intent)] = handler

    def route(self, context: RequestContext) -> Reply:
        log.debug("Routing %s (element=%r)", context.intent.value, context.element)
        return self.handlers[context.intent](context)

"""Dialogflow webhook wire format.

Parses inbound fulfillment requests (v2 ``queryResult`` and legacy v1
``result`` payloads) into a :class:`router.RequestContext` and renders a
:class:`router.Reply` as an Actions on Google rich response in the same
protocol version.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ValidationError

from router import Intent, Reply, RequestContext
from ssml import is_ssml

ELEMENT_PARAMETER = "element"

V1 = "v1"
V2 = "v2"


class WebhookRequestError(ValueError):
    """Raised when a request does not carry a usable intent."""


class QueryResult(BaseModel):
    action: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


class WebhookRequest(BaseModel):
    """Fields of a fulfillment request the webhook reads; the rest is ignored."""

    queryResult: Optional[QueryResult] = None
    result: Optional[QueryResult] = None


def parse_request(payload: Any) -> Tuple[RequestContext, str]:
    """Extract the intent and ``element`` parameter from ``payload``.

    Returns the context together with the protocol version to answer in.
    """
    try:
        request = WebhookRequest.model_validate(payload)
    except ValidationError as exc:
        raise WebhookRequestError(f"Malformed webhook request: {exc.error_count()} invalid field(s)") from exc

    if request.queryResult is not None:
        query, version = request.queryResult, V2
    elif request.result is not None:
        query, version = request.result, V1
    else:
        raise WebhookRequestError("Request has neither queryResult nor result")

    if not query.action:
        raise WebhookRequestError("Request carries no action")
    intent = Intent.from_action(query.action)
    if intent is None:
        raise WebhookRequestError(f"Unrecognized action: {query.action}")

    element = (query.parameters or {}).get(ELEMENT_PARAMETER)
    if not isinstance(element, str):
        element = None
    return RequestContext(intent=intent, element=element), version


def simple_response(segment: str) -> Dict[str, Any]:
    key = "ssml" if is_ssml(segment) else "textToSpeech"
    return {"simpleResponse": {key: segment}}


def rich_response(reply: Reply) -> Dict[str, Any]:
    items: List[Dict[str, Any]] = [simple_response(s) for s in reply.segments]
    return {"items": items}


def render_response(reply: Reply, version: str = V2) -> Dict[str, Any]:
    """Render ``reply`` as a webhook response body for ``version``."""
    first = reply.segments[0] if reply.segments else ""
    google: Dict[str, Any] = {
        "expectUserResponse": reply.expect_user_response,
        "richResponse": rich_response(reply),
    }
    if version == V1:
        google["isSsml"] = is_ssml(first)
        google["noInputPrompts"] = []
        return {
            "speech": first,
            "displayText": first,
            "data": {"google": google},
            "contextOut": [],
        }
    return {"fulfillmentText": first, "payload": {"google": google}}

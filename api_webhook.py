"""Fulfillment webhook for the SSML examples agent.

Provides a FastAPI endpoint that accepts a Dialogflow webhook request, routes
its intent to a handler, and returns the reply as a rich response.
"""

import json
import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

import catalog
import config
from dialogflow import WebhookRequestError, parse_request, render_response
from router import IntentRouter


def create_app(logger: Optional[logging.Logger] = None,
               router: Optional[IntentRouter] = None,
               webhook_path: str = config.WEBHOOK_PATH) -> FastAPI:
    """Build the webhook app.

    ``logger`` receives request diagnostics at DEBUG level; pass a configured
    logger to see headers and bodies of incoming requests.
    """
    if logger is None:
        config.configure_logging()
    log = logger or logging.getLogger(__name__)
    intents = router or IntentRouter()
    app = FastAPI(title="SSML Examples Webhook")

    @app.post(webhook_path)
    async def ssml_examples(request: Request) -> Any:
        """Answer one conversational turn."""
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Request body must be JSON")
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Headers %s", json.dumps(dict(request.headers), indent=2))
            log.debug("Body %s", json.dumps(body, indent=2))
        try:
            context, version = parse_request(body)
        except WebhookRequestError as exc:
            log.warning("Rejected webhook request: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc))
        reply = intents.route(context)
        return JSONResponse(content=render_response(reply, version))

    @app.get("/topics")
    async def list_topics():
        return JSONResponse(content={"topics": list(catalog.topics())})

    return app


app = create_app()

# If running directly, start the server (use uvicorn)
if __name__ == "__main__":
    import uvicorn

    config.configure_logging()
    uvicorn.run(create_app(logging.getLogger("ssml_examples")), host=config.HOST, port=config.PORT)

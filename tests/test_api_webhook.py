"""Integration tests for the FastAPI webhook endpoint."""

import logging

from fastapi.testclient import TestClient

import catalog
import responses
from api_webhook import app, create_app

client = TestClient(app)


def _items(body):
    return [item["simpleResponse"] for item in body["payload"]["google"]["richResponse"]["items"]]


def test_welcome_returns_welcome_and_topic_list():
    response = client.post("/webhook", json={"queryResult": {"action": "input.welcome"}})
    assert response.status_code == 200
    body = response.json()
    assert body["payload"]["google"]["expectUserResponse"] is True
    assert _items(body) == [
        {"textToSpeech": responses.welcome()},
        {"textToSpeech": responses.topic_list()},
    ]


def test_tell_example_returns_document():
    payload = {"queryResult": {"action": "tell.example", "parameters": {"element": "emphasis"}}}
    response = client.post("/webhook", json=payload)
    assert response.status_code == 200
    assert _items(response.json()) == [
        {"textToSpeech": responses.lead_in("emphasis")},
        {"ssml": catalog.lookup("emphasis")},
    ]


def test_tell_example_without_element_matches_unknown():
    missing = client.post("/webhook", json={"queryResult": {"action": "tell.example", "parameters": {"element": ""}}})
    unknown = client.post("/webhook", json={"queryResult": {"action": "input.unknown"}})
    assert missing.status_code == unknown.status_code == 200
    assert missing.json() == unknown.json()
    assert _items(unknown.json())[0] == {"textToSpeech": responses.did_not_understand()}


def test_legacy_request_gets_legacy_response():
    payload = {"result": {"action": "tell.example", "parameters": {"element": "audio"}}}
    response = client.post("/webhook", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["speech"] == responses.lead_in("audio")
    assert body["data"]["google"]["isSsml"] is False
    items = body["data"]["google"]["richResponse"]["items"]
    assert items[1] == {"simpleResponse": {"ssml": catalog.lookup("audio")}}


def test_unrecognized_action_is_rejected():
    response = client.post("/webhook", json={"queryResult": {"action": "smalltalk.greetings"}})
    assert response.status_code == 400
    assert response.json()["detail"] == "Unrecognized action: smalltalk.greetings"


def test_invalid_json_is_rejected():
    response = client.post("/webhook", content=b"not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Request body must be JSON"


def test_topics_endpoint():
    response = client.get("/topics")
    assert response.status_code == 200
    assert response.json() == {"topics": list(catalog.topics())}


def test_injected_logger_receives_request_diagnostics(caplog):
    logger = logging.getLogger("tests.webhook")
    custom = TestClient(create_app(logger=logger, webhook_path="/fulfillment"))
    with caplog.at_level(logging.DEBUG, logger="tests.webhook"):
        response = custom.post("/fulfillment", json={"queryResult": {"action": "input.welcome"}})
    assert response.status_code == 200
    messages = [r.getMessage() for r in caplog.records if r.name == "tests.webhook"]
    assert any(m.startswith("Headers") for m in messages)
    assert any("input.welcome" in m for m in messages if m.startswith("Body"))


def test_default_logger_applies_configured_level(monkeypatch):
    calls = []
    monkeypatch.setattr("config.configure_logging", lambda *args: calls.append(args))
    create_app()
    assert calls == [()]
    create_app(logger=logging.getLogger("tests.webhook"))
    assert calls == [()]

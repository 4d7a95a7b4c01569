"""Shared fixtures: a fake requests transport and sample API payloads."""

import json
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests

from schemas import Run

BASE_URL = "https://api.openai.com/"


def make_response(status: int, body: Any = None, url: str = BASE_URL) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class FakeSession(requests.Session):
    """Session that answers from a route table instead of the network.

    Routes map ``(method, path)`` to a list of ``(status, body)`` replies;
    replies are consumed in order and the last one repeats.
    """

    def __init__(self, routes: Optional[Dict[Tuple[str, str], List[Tuple[int, Any]]]] = None):
        super().__init__()
        self.routes = routes or {}
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        replies = self.routes[(method, path)]
        status, body = replies.pop(0) if len(replies) > 1 else replies[0]
        return make_response(status, body, url)

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [
            url[len(BASE_URL):]
            for m, url, _ in self.calls
            if method is None or m == method
        ]


def assistant_json(assistant_id="asst_1", name="Cooper, an AI Assistant", **overrides):
    data = {
        "id": assistant_id,
        "object": "assistant",
        "created_at": 1700000000,
        "name": name,
        "description": "Assistant used in a fundraising scenario helping fundraisers to store visits",
        "model": "gpt-3.5-turbo-1106",
        "instructions": "Be helpful.",
        "tools": [],
        "file_ids": [],
        "metadata": {},
    }
    data.update(overrides)
    return data


def run_json(status="queued", run_id="run_1", thread_id="thread_1", **overrides):
    data = {
        "id": run_id,
        "object": "thread.run",
        "thread_id": thread_id,
        "assistant_id": "asst_1",
        "status": status,
        "required_action": None,
        "last_error": None,
    }
    data.update(overrides)
    return data


def message_json(role, text, message_id="msg_1", thread_id="thread_1"):
    return {
        "id": message_id,
        "object": "thread.message",
        "thread_id": thread_id,
        "role": role,
        "content": [{"type": "text", "text": {"value": text, "annotations": []}}],
        "assistant_id": "asst_1" if role == "assistant" else None,
        "run_id": "run_1" if role == "assistant" else None,
    }


def make_run(status, **overrides) -> Run:
    return Run.model_validate(run_json(status, **overrides))


@pytest.fixture
def fake_session():
    return FakeSession()

"""Tests for the thread lifecycle: message, run, rendering and cleanup."""

from unittest.mock import MagicMock

import pytest
import requests

from schemas import CreateThreadResult, Message
from services.openai_svc import OpenAIService
from services.run_poller import RunTimeoutError
from services.thread_manager import ThreadManager, pending_tool_calls, render_messages

from conftest import make_run, message_json

TOOL_CALL_ACTION = {
    "type": "submit_tool_outputs",
    "submit_tool_outputs": {
        "tool_calls": [
            {
                "id": "call_1",
                "type": "function",
                "function": {"name": "store_visit", "arguments": "{\"familyName\": \"Tipping\"}"},
            }
        ]
    },
}


@pytest.fixture
def service():
    service = MagicMock(spec=OpenAIService)
    service.create_thread.return_value = CreateThreadResult(id="thread_1")
    service.create_run.return_value = make_run("queued")
    service.list_messages.return_value = [
        Message.model_validate(message_json("assistant", "Visit stored.", "msg_2")),
        Message.model_validate(message_json("user", "Hi!")),
    ]
    return service


def make_manager(service, max_attempts=10):
    return ThreadManager(service, poll_interval=0, max_attempts=max_attempts, sleep=MagicMock())


def test_completed_run_lists_messages_once_and_deletes_thread(service):
    service.get_run.side_effect = [make_run("in_progress"), make_run("completed")]

    result = make_manager(service).run_conversation("asst_1", "Hi!")

    service.add_message.assert_called_once_with("thread_1", "Hi!")
    service.create_run.assert_called_once_with("thread_1", "asst_1")
    service.list_messages.assert_called_once_with("thread_1")
    service.delete_thread.assert_called_once_with("thread_1")
    assert result["status"] == "completed"
    assert result["lines"] == ["\t\tassistant: Visit stored.", "\t\tuser: Hi!"]


def test_requires_action_skips_listing_and_deletes_thread(service):
    service.get_run.side_effect = [make_run("requires_action", required_action=TOOL_CALL_ACTION)]

    result = make_manager(service).run_conversation("asst_1", "Hi!")

    service.list_messages.assert_not_called()
    service.delete_thread.assert_called_once_with("thread_1")
    assert result["lines"] == []
    assert result["status"] == "requires_action"


def test_failed_run_skips_listing_and_deletes_thread(service):
    service.get_run.side_effect = [
        make_run("failed", last_error={"code": "rate_limit_exceeded", "message": "slow down"})
    ]

    result = make_manager(service).run_conversation("asst_1", "Hi!")

    service.list_messages.assert_not_called()
    service.delete_thread.assert_called_once_with("thread_1")
    assert result["status"] == "failed"


def test_timeout_still_deletes_thread(service):
    service.get_run.return_value = make_run("in_progress")

    with pytest.raises(RunTimeoutError):
        make_manager(service, max_attempts=2).run_conversation("asst_1", "Hi!")

    assert service.get_run.call_count == 2
    service.delete_thread.assert_called_once_with("thread_1")


def test_failure_after_thread_creation_deletes_thread(service):
    service.create_run.side_effect = requests.HTTPError("500 Server Error")

    with pytest.raises(requests.HTTPError):
        make_manager(service).run_conversation("asst_1", "Hi!")

    service.delete_thread.assert_called_once_with("thread_1")


def test_thread_creation_failure_has_nothing_to_delete(service):
    service.create_thread.side_effect = requests.HTTPError("500 Server Error")

    with pytest.raises(requests.HTTPError):
        make_manager(service).run_conversation("asst_1", "Hi!")

    service.add_message.assert_not_called()
    service.delete_thread.assert_not_called()


def test_render_messages_keeps_server_order_and_skips_non_text():
    newest = Message.model_validate({
        "id": "msg_3",
        "thread_id": "thread_1",
        "role": "assistant",
        "content": [
            {"type": "image_file", "image_file": {"file_id": "file_1"}},
            {"type": "text", "text": {"value": "Second part", "annotations": []}},
        ],
    })
    older = Message.model_validate(message_json("user", "First"))

    assert render_messages([newest, older]) == [
        "\t\tassistant: Second part",
        "\t\tuser: First",
    ]


def test_pending_tool_calls():
    run = make_run("requires_action", required_action=TOOL_CALL_ACTION)

    calls = pending_tool_calls(run)

    assert [c.function.name for c in calls] == ["store_visit"]
    assert pending_tool_calls(make_run("completed")) == []

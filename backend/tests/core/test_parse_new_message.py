"""Form Parsing: 'message' required, 'username' defaults to anonymous."""

import pytest

from message_board.core.domain_types import DEFAULT_USERNAME, NewMessage
from message_board.core.errors import MissingFieldError
from message_board.core.parse_new_message import parse_new_message


def test_message_and_username():
    assert parse_new_message({"message": "hello", "username": "bob"}) == NewMessage(
        message="hello", username="bob",
    )


def test_username_defaults_to_anonymous():
    new_message = parse_new_message({"message": "hi"})
    assert new_message.username == DEFAULT_USERNAME == "anonymous"


def test_empty_values_kept():
    new_message = parse_new_message({"message": "", "username": ""})
    assert new_message.message == ""
    assert new_message.username == ""


def test_extra_fields_ignored():
    new_message = parse_new_message({"message": "m", "room": "lobby"})
    assert new_message == NewMessage(message="m")


@pytest.mark.parametrize("form", [{}, {"username": "bob"}, {"msg": "typo"}])
def test_missing_message_raises(form):
    with pytest.raises(MissingFieldError) as exc_info:
        parse_new_message(form)
    assert exc_info.value.field_name == "message"
    assert exc_info.value.to_response() == {"error": "Missing field message"}

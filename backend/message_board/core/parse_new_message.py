"""Form Parsing: pure conversion of decoded form fields into a NewMessage."""

from collections.abc import Mapping

from message_board.core.domain_types import DEFAULT_USERNAME, NewMessage
from message_board.core.errors import MissingFieldError


def parse_new_message(form: Mapping[str, str]) -> NewMessage:
    """Require 'message'; default 'username' to anonymous.

    Empty or whitespace-only values are accepted as-is.
    """
    message = form.get("message")
    if message is None:
        raise MissingFieldError("message")
    username = form.get("username")
    return NewMessage(
        message=message,
        username=DEFAULT_USERNAME if username is None else username,
    )

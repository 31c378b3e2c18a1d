"""Helpers for turning domain validation errors into report lines."""

from protean.exceptions import ValidationError


def first_message(exc: ValidationError) -> str:
    """Return the first message carried by a ValidationError.

    Domain methods raise errors shaped like ``{"quantity": ["Quantity must be positive"]}``;
    report lines only need the human-readable part.
    """
    messages = exc.messages
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, list | tuple):
                if value:
                    return str(value[0])
            elif value:
                return str(value)
    elif isinstance(messages, list | tuple) and messages:
        return str(messages[0])
    return str(exc)

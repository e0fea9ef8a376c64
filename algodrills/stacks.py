"""Stack exercises."""

from __future__ import annotations

_OPENERS = {")": "(", "}": "{", "]": "["}


def is_valid(s: str) -> bool:
    """Return True if every bracket is closed by its match in the right order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif char in _OPENERS:
            if not stack or stack.pop() != _OPENERS[char]:
                return False
    return not stack
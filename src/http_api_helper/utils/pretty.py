"""Rendering helpers for request/response log output."""

import json
from typing import Any, Iterable, Mapping

_INDENT = "     "
_WIDTH = 76


def to_pretty_string(data: Mapping[str, Any]) -> str:
    """Render a mapping as indented JSON.

    :param data: Mapping to render
    :type data: Mapping[str, Any]
    :return: JSON text indented with five spaces
    :rtype: str
    :raises TypeError: If a value is not JSON serializable
    """
    return json.dumps(dict(data), indent=_INDENT, ensure_ascii=False)


def frame(title: str, lines: Iterable[str]) -> str:
    """Draw a box-drawing frame around a title and free-form lines.

    Only the title row is padded; content lines are left open on the
    right so long URLs and bodies are not truncated.
    """
    bar = "═" * _WIDTH
    out = [
        "",
        f"╔{bar}╗",
        f"║ {title}".ljust(_WIDTH + 1) + "║",
        f"╠{bar}╣",
    ]
    out.extend(f"║ {line}" for line in lines)
    out.append(f"╚{bar}╝")
    return "\n".join(out)

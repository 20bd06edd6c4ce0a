"""Path pattern compilation.

Compiles route and mount paths like ``/users/:id`` into anchored
regexes, in the same textual form Express 4 produces. The tree walk
depends on that form to recover mount paths later.
"""

import re

# ":name", optionally preceded by a slash and followed by "?", or "*"
_TOKEN = re.compile(r"(/)?:(\w+)(\?)?|\*")


def _escape(literal: str) -> str:
    return re.escape(literal).replace("/", "\\/")


def compile_path(
    path: str,
    *,
    end: bool = True,
    strict: bool = False,
    sensitive: bool = False,
) -> tuple[re.Pattern[str], list[str]]:
    """Compile *path* into a matcher and its parameter names.

    ``end=True`` anchors the whole path (route layers). ``end=False``
    matches a prefix ending on a segment boundary (``use()`` layers)::

        compile_path("/api", end=False)[0].pattern  -> r"^\\/api\\/?(?=\\/|$)"
        compile_path("/users/:id")                  -> (r"^\\/users\\/(?:([^\\/]+?))\\/?$", ["id"])

    Unless *strict*, a trailing slash is optional. Matching ignores case
    unless *sensitive*. Wildcards are keyed by position (``"0"``, ...).
    """
    keys: list[str] = []
    parts: list[str] = []
    pos = 0

    for match in _TOKEN.finditer(path):
        parts.append(_escape(path[pos : match.start()]))
        pos = match.end()

        if match.group(0) == "*":
            keys.append(str(len(keys)))
            parts.append("(.*)")
            continue

        slash, name, optional = match.groups()
        keys.append(name)
        sep = "\\/" if slash else ""
        if optional:
            parts.append(f"(?:{sep}([^\\/]+?))?")
        else:
            parts.append(f"{sep}(?:([^\\/]+?))")

    parts.append(_escape(path[pos:]))
    source = "^" + "".join(parts)

    if not strict:
        source += "?" if path.endswith("/") else "\\/?"
    source += "$" if end else "(?=\\/|$)"

    flags = 0 if sensitive else re.IGNORECASE
    return re.compile(source, flags), keys

"""Path helpers for the tree walk.

Nested routers only keep the compiled regex they were mounted with, not
the literal path. ``literal_prefix_from`` recovers the literal from the
regex source; ``normalize`` cleans up the concatenated result.
"""

import re

# Zero-width segment delimiter appended to prefix (non-end) matchers,
# as it reads once backslashes are gone.
_DELIMITER = "?(?=/|$)"


def normalize(path: str) -> str:
    """Normalize a slash-separated path.

    Collapses repeated slashes and resolves ``.`` and ``..`` segments.
    A trailing slash is preserved. Absolute paths never climb above
    the root; relative paths keep leading ``..`` segments. An empty
    result is ``"."``.

    Examples::

        normalize("/api//users")  -> "/api/users"
        normalize("/api/../v2/")  -> "/v2/"
        normalize("")             -> "."
    """
    if not path:
        return "."

    absolute = path.startswith("/")
    trailing = path.endswith("/")

    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not absolute:
                parts.append(part)
            continue
        parts.append(part)

    result = "/".join(parts)
    if not result and not absolute:
        result = "."
    if trailing and result:
        result += "/"
    if absolute:
        result = "/" + result
    return result


def literal_prefix_from(pattern: re.Pattern[str] | str) -> str:
    """Reconstruct the literal mount path from a compiled mount matcher.

    Strips escape characters, then the segment delimiter lookahead, then
    every ``^`` (anchors and negated classes alike)::

        literal_prefix_from(r"^\\/api\\/?(?=\\/|$)")  -> "/api/"

    This is a heuristic, not a regex parser. Matchers built from
    parameterized or wildcard paths come back with capture groups in
    them, e.g. ``"/users/(?:([/]+?))/"``. The result is always a string
    and is never validated.
    """
    source = pattern if isinstance(pattern, str) else pattern.pattern
    return source.replace("\\", "").replace(_DELIMITER, "").replace("^", "")

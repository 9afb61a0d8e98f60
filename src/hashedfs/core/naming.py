"""Hashed filename rules.

A hashed path carries the digest token as an extra dot-suffix placed just
before the final extension::

    css/site.css  ->  css/site.<token>.css
    LICENSE       ->  LICENSE.<token>
"""


def ext(path: str) -> str:
    """Return the final extension of path, including the leading dot.

    Only the last path element is considered, so ``"a.d/b"`` has no
    extension. Returns ``""`` when there is none.
    """
    for i in range(len(path) - 1, -1, -1):
        if path[i] == "/":
            break
        if path[i] == ".":
            return path[i:]
    return ""


def build_hashed_name(path: str, token: str) -> str:
    """Insert token before the final extension of path."""
    suffix = ext(path)
    return f"{path[: len(path) - len(suffix)]}.{token}{suffix}"


def split_hashed_name(path: str) -> tuple[str, str] | None:
    """Split a hashed path into (plain path, candidate token).

    Returns None when path has no extension and so cannot carry a token.
    With a single extension the extension itself is taken as the token.
    """
    suffix = ext(path)
    if not suffix:
        return None
    rest = path[: len(path) - len(suffix)]
    token_ext = ext(rest)
    if not token_ext:
        return rest, suffix[1:]
    return rest[: len(rest) - len(token_ext)] + suffix, token_ext[1:]

import re
from functools import lru_cache

FRONT_TOKEN = "<front>"


@lru_cache(maxsize=512)
def _compile(pattern):
    # only * and ? are wildcards, everything else is literal
    regex = re.escape(pattern).replace(r"\*", ".*").replace(r"\?", ".")
    return re.compile(rf"{regex}\Z", re.DOTALL)


def match_path(path, patterns, front_page="/"):
    """
    True if ``path`` matches any of the newline separated ``patterns``.

    Shell-style wildcards (``*`` spans segments, ``?`` is one character),
    compared case-insensitively. ``<front>`` stands for ``front_page``.
    """
    if not path or not patterns:
        return False
    path = path.lower()
    for pattern in patterns.splitlines():
        pattern = pattern.strip()
        if not pattern:
            continue
        if pattern == FRONT_TOKEN:
            pattern = front_page
        if _compile(pattern.lower()).match(path):
            return True
    return False


def parse_id(value):
    """Non-negative integer id from ``value``, or None for anything else."""
    value = str(value) if value is not None else ""
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)

"""Type aliases and labelling helpers for error construction."""

from __future__ import annotations

import inspect
import linecache
import re
import sys
from typing import Callable, TypeAlias

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

ErrorFormatFn: TypeAlias = Callable[[str, str, "BaseException | None"], str]
"""(message, when, exception) -> formatted error string."""

ErrorFactory: TypeAlias = Callable[[str], BaseException]
"""Maps an error string to the exception raised by throw_if_err()."""

# ═══════════════════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════════════════

LAMBDA = "<lambda>"
CONDITION = "condition"

_LAMBDA_KEYWORD = re.compile(r"\blambda\b")


def describe(fn: object) -> str:
    """Readable label for a callable, used as the default ``when`` of try_* errors.

    Named functions render as their qualified name. Lambdas render as their
    source text when it is available, else as ``<lambda>``. A line holding
    several lambdas is ambiguous and also renders as ``<lambda>``.
    """
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        return type(fn).__name__
    if not name.endswith(LAMBDA):
        return name
    try:
        lines, _ = inspect.getsourcelines(fn)  # type: ignore[arg-type]
    except (OSError, TypeError):
        return name
    matches = list(_LAMBDA_KEYWORD.finditer(lines[0])) if lines else []
    if len(matches) != 1:
        return name
    return _cut(lines[0][matches[0].start():], body_only=True)


def call_argument(callee: str, depth: int = 2) -> str:
    """Source text of the first argument passed to ``callee`` by a caller frame.

    Best effort: reads the caller's current source line and extracts the text
    between ``callee(`` and the first top-level comma or closing parenthesis.
    Falls back to ``"condition"`` when the source is unavailable.

    Args:
        callee: Function or method name as written at the call site.
        depth: Frames to walk up from the function calling this helper.
    """
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return CONDITION
    line = linecache.getline(frame.f_code.co_filename, frame.f_lineno)
    start = line.find(f"{callee}(")
    if start < 0:
        return CONDITION
    return _cut(line[start + len(callee) + 1:], body_only=False) or CONDITION


def _cut(text: str, *, body_only: bool) -> str:
    """Cut source text at the first top-level ',', an unmatched closer or a comment.

    With ``body_only`` a comma only ends the text after the first top-level ':'
    (the parameters of a lambda are kept whole).
    """
    depth, in_body = 0, not body_only
    for i, ch in enumerate(text):
        if ch == ":" and depth == 0:
            in_body = True
        elif ch in "([{":
            depth += 1
        elif ch in ")]}":
            if depth == 0:
                return text[:i].strip()
            depth -= 1
        elif ch in "\n#" or (ch == "," and depth == 0 and in_body):
            return text[:i].strip()
    return text.strip()

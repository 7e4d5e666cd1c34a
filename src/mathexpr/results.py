"""
Results log and batch evaluation.

The core never writes files; callers that want a record of computed values
append them here as ``(<input>) = <result>`` lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from mathexpr.core.expression_lang import DEFAULT_MAX_DEPTH, parse_and_evaluate

logger = logging.getLogger(__name__)


def format_result(source: str, result: float) -> str:
    """Render one results log line (without the trailing newline)."""
    return f"({source}) = {result!r}"


class ResultsLog:
    """Append-only text log of evaluated expressions."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def append(self, source: str, result: float) -> None:
        """Append one result, creating the log and its directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(format_result(source, result) + "\n")
        logger.debug("Logged %r to %s", source, self.path)

    def read(self) -> list[str]:
        """Return logged lines, oldest first."""
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()


def iter_expressions(lines: Iterable[str]) -> Iterator[str]:
    """Yield stripped expression lines, skipping blanks and ``#`` comments."""
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            yield stripped


def evaluate_lines(
    lines: Iterable[str],
    max_depth: int = DEFAULT_MAX_DEPTH,
    log: ResultsLog | None = None,
) -> Iterator[tuple[str, float]]:
    """
    Evaluate expressions one per line.

    Each result is logged (when a log is given) before it is yielded. The
    first failing line raises and stops the batch; earlier results stay
    logged.

    Args:
        lines: Source lines, e.g. from a file
        max_depth: Maximum expression nesting depth
        log: Optional results log

    Yields:
        (expression, result) pairs in input order

    Raises:
        MathExprError: On the first line that fails to parse or evaluate
    """
    for source in iter_expressions(lines):
        result = parse_and_evaluate(source, max_depth=max_depth)
        if log is not None:
            log.append(source, result)
        yield source, result

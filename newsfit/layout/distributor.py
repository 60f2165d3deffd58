"""Split article body text across body columns."""

import math

PARAGRAPH_SEPARATOR = "\n\n"


def split_paragraphs(dateline: str, body: str) -> list[str]:
    """Dateline first, then the body's blank-line separated paragraphs."""
    return (dateline + PARAGRAPH_SEPARATOR + body).split(PARAGRAPH_SEPARATOR)


def distribute(dateline: str, body: str, column_count: int) -> list[str]:
    """Return one text per column, filling columns with equal paragraph blocks.

    Each column gets ``ceil(paragraphs / column_count)`` consecutive
    paragraphs; trailing columns may get fewer or none (empty string).
    """
    if column_count < 1:
        raise ValueError(f"column_count must be at least 1, got {column_count}")

    paragraphs = split_paragraphs(dateline, body)
    per_column = math.ceil(len(paragraphs) / column_count)

    columns = []
    for i in range(column_count):
        start = i * per_column
        end = min(start + per_column, len(paragraphs))
        columns.append(PARAGRAPH_SEPARATOR.join(paragraphs[start:end]))
    return columns

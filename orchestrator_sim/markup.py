from __future__ import annotations


def to_markdown(body: str | None) -> str:
    """Make every line of a bot/user message its own line in Markdown.

    Bullet lines (``- ``) already break on their own; any other line gets a
    hard break so headings like ``**Client Summary:**`` stay on their own row.
    """
    lines = [ln.strip() for ln in (body or "").strip().splitlines()]
    return "  \n".join(ln for ln in lines if ln)

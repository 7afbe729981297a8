from __future__ import annotations

from .counter import count_preset
from .models import CountResult
from .presets import parse_preset


def apply_query(result: CountResult, *, query: str = "all", with_count: int | None = None) -> CountResult:
    q = str(query or "all").strip().lower()
    if q == "all":
        return result
    if q == "most":
        return result.most()
    if q == "least":
        return result.least()
    if q == "count":
        if with_count is None:
            raise ValueError("query 'count' needs with_count")
        return result.find_by_count(int(with_count))
    raise ValueError("query must be one of: all|most|least|count")


def count_report(
    text: str,
    *,
    preset: str = "all",
    query: str = "all",
    with_count: int | None = None,
    char: str | None = None,
    top: int = 0,
) -> dict:
    p = parse_preset(preset)
    full = count_preset(text, p)
    view = apply_query(full, query=query, with_count=with_count)

    n = int(top)
    if n < 0:
        n = 0
    shown = view[:n] if n else view

    out: dict = {
        "preset": p,
        "query": str(query or "all").strip().lower(),
        "total": full.total,
        "distinct": len(full),
        "chars": [e.as_dict() for e in shown],
    }
    if with_count is not None:
        out["with_count"] = int(with_count)
    if char is not None:
        hit = view.find_by_char(char)
        out["char"] = char
        out["match"] = hit.as_dict() if hit is not None else None
    return out

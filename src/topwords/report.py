"""Rendering of ranking results."""

import json

from .ranking import RankingResult

OUTPUT_FORMATS = ("text", "json")


def format_notice(result: RankingResult) -> str:
    """Describe a truncated result, or return an empty string."""
    if not result.truncated:
        return ""
    return (
        f"There are fewer words than {result.requested}, "
        f"retrieving {result.returned} instead."
    )


def format_text(result: RankingResult) -> str:
    """Render entries as ``count:word`` pairs, counts padded to two digits.

    A notice line comes first when fewer words were available than
    requested.
    """
    ranked = " ".join(f"{count:02d}:{word}" for word, count in result.entries)
    notice = format_notice(result)
    if notice:
        return f"{notice}\n{ranked}" if ranked else notice
    return ranked


def format_json(result: RankingResult) -> str:
    """Render the result as an indented JSON document."""
    data = {
        "top_n": result.requested,
        "returned": result.returned,
        "truncated": result.truncated,
        "words": [{"word": w, "count": c} for w, c in result.entries],
    }
    return json.dumps(data, indent=2)


def format_report(result: RankingResult, fmt: str = "text") -> str:
    """Render a result in one of OUTPUT_FORMATS.

    Raises:
        ValueError: If the format is unknown.
    """
    if fmt == "text":
        return format_text(result)
    if fmt == "json":
        return format_json(result)
    raise ValueError(f"Unknown output format: {fmt} (expected one of {', '.join(OUTPUT_FORMATS)})")

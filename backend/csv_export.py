import re
from datetime import date, datetime, timezone
from typing import Optional, Sequence

from .schemas import KeywordAnalysis

CSV_HEADERS = (
    "Keyword",
    "Search Volume",
    "Competition Score (%)",
    "Trend Direction",
    "Video Count",
    "Average Views",
)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def generate_csv(rows: Sequence[KeywordAnalysis]) -> str:
    """Text fields are quoted, numbers are written bare; lines joined with a newline."""
    lines = [",".join(CSV_HEADERS)]
    for row in rows:
        lines.append(
            ",".join([
                _quote(row.keyword),
                str(row.searchVolume),
                str(row.competitionScore),
                _quote(row.trendDirection),
                str(row.videoCount),
                str(row.avgViews),
            ])
        )
    return "\n".join(lines)


def format_csv_filename(search_term: str, today: Optional[date] = None) -> str:
    clean = re.sub(r"[^a-zA-Z0-9\s]", "", search_term)
    clean = re.sub(r"\s+", "-", clean)
    day = (today or datetime.now(timezone.utc).date()).isoformat()
    return f"youtube-keywords-{clean}-{day}.csv"

"""
Tabular summaries of decoded events.
"""
from typing import Iterable

import pandas as pd

from ..dto.event import LogEvent

COLUMNS = [
    "timestamp", "level", "message_template", "message",
    "exception", "trace_id", "span_id", "property_count",
]


def events_to_frame(events: Iterable[LogEvent]) -> pd.DataFrame:
    rows = [
        {
            "timestamp": e.timestamp,
            "level": e.level.value,
            "message_template": e.message_template.text,
            "message": e.render_message(),
            "exception": str(e.exception) if e.exception is not None else None,
            "trace_id": e.trace_id_hex,
            "span_id": e.span_id_hex,
            "property_count": len(e.properties),
        }
        for e in events
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def level_distribution(df: pd.DataFrame) -> pd.Series:
    return df.groupby("level").size().sort_values(ascending=False)


def top_templates(df: pd.DataFrame, limit: int = 5) -> pd.Series:
    return df["message_template"].value_counts().head(limit)

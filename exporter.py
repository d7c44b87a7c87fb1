from __future__ import annotations

import sys
from csv import writer
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from core_models import StormSummary

COLUMNS = ["name", "max_speed_kmh", "year"]


def write_summaries_csv(out_path: str | Path, summaries: Sequence[StormSummary], year: int) -> None:
    path = Path(out_path)
    try:
        with path.open("w", newline="", encoding="utf-8") as fh:
            csv_writer = writer(fh)
            csv_writer.writerow(COLUMNS)
            for summary in summaries:
                row: List[str] = [summary.name, f"{summary.max_speed_kmh:.2f}", str(year)]
                csv_writer.writerow(row)
        print(f"Saved CSV: {path}", file=sys.stderr)
    except OSError as exc:
        print(f"[ERROR] Cannot write CSV to {path}: {exc}", file=sys.stderr)


def summaries_frame(summaries: Sequence[StormSummary], year: int) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "name": [s.name for s in summaries],
            "max_speed_kmh": [round(s.max_speed_kmh, 2) for s in summaries],
            "year": [year] * len(summaries),
        },
        columns=COLUMNS,
    )


def save_excel(out_path: str | Path, summaries: Sequence[StormSummary], year: int) -> None:
    path = Path(out_path)
    try:
        with pd.ExcelWriter(path) as xl_writer:
            summaries_frame(summaries, year).to_excel(xl_writer, sheet_name=str(year), index=False)
        print(f"Saved Excel: {path}", file=sys.stderr)
    except (OSError, ValueError) as exc:
        print(f"[ERROR] Failed to save Excel to {path}: {exc}", file=sys.stderr)

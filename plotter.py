from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
from adjustText import adjust_text

from core_models import StormSummary


class StormPlotter:
    '''Scatter of each storm's peak sustained wind, in file order.'''

    def __init__(self, year: int) -> None:
        self.year = year

    def plot(self, summaries: Sequence[StormSummary], out_path: str | Path) -> bool:
        if not summaries:
            print("NO HURRICANES TO PLOT", file=sys.stderr)
            return False

        x_vals = np.arange(1, len(summaries) + 1)
        y_vals = np.array([s.max_speed_kmh for s in summaries])
        labels = [s.name for s in summaries]

        fig, ax = plt.subplots(figsize=(10, 6))
        ax.scatter(x_vals, y_vals, s=60, c=y_vals, cmap="plasma",
                   edgecolors="black", linewidths=0.5)

        texts = []
        for x, y, label in zip(x_vals, y_vals, labels):
            texts.append(ax.text(x, y, label, fontsize=8, ha="left", va="center"))

        adjust_text(
            texts,
            ax=ax,
            arrowprops=dict(arrowstyle="-", color="gray", lw=0.5),
        )

        ax.set_xlabel("Storm (order in file)", fontsize=12)
        ax.set_ylabel("Max sustained wind (km/h)", fontsize=12)
        ax.set_title(f"Peak wind per hurricane, {self.year}", fontsize=14)
        ax.set_xticks(x_vals)
        ax.grid(True, linestyle="--", alpha=0.6)

        path = Path(out_path)
        try:
            fig.savefig(path, dpi=150, bbox_inches="tight")
            print(f"Saved plot: {path}", file=sys.stderr)
            return True
        except (OSError, ValueError) as exc:
            print(f"[ERROR] Could not save {path}: {exc}", file=sys.stderr)
            return False
        finally:
            plt.close(fig)

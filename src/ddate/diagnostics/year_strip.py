#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional

import ddate
from ddate.core.calendar import civil_day_of_year, holyday_kind
from ddate.core.constants import SEASON_DAYS, SEASONS, WEEKDAYS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ddate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ddate[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    marker: str
    size: float
    color: str = "0.1"


HOLYDAY_STYLES: Dict[str, Style] = {
    "apostle": Style("Apostle holyday", marker="*", size=90),
    "season": Style("Seasonal holyday", marker="D", size=40),
}

WEEKDAY_COLORS = ("#f4e3b2", "#c9e4ca", "#87bba2", "#55828b", "#e07a5f")


def weekday_grid():
    """5 x 73 integer array of weekday indices, row per season. Identical every year."""
    np = _need_numpy()
    grid = np.zeros((len(SEASONS), SEASON_DAYS), dtype=int)
    for s in range(len(SEASONS)):
        for k in range(SEASON_DAYS):
            n = s * SEASON_DAYS + k + 1
            grid[s, k] = (n - 1) % len(WEEKDAYS)
    return grid


def plot_year(year: int, *, out: Optional[str] = None, dpi: int = 150) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    grid = weekday_grid()
    yold = ddate.convert(ddate.CivilDate.of(year, 1)).yold

    fig, ax = plt.subplots(figsize=(14, 3.2))
    cmap = ListedColormap(WEEKDAY_COLORS)
    ax.imshow(grid, aspect="auto", cmap=cmap, vmin=-0.5, vmax=len(WEEKDAYS) - 0.5)

    leap = ddate.is_leap_year(year)
    marks: Dict[str, list] = {kind: [] for kind in HOLYDAY_STYLES}
    for s in range(len(SEASONS)):
        for k in range(1, SEASON_DAYS + 1):
            dd = ddate.convert(ddate.CivilDate(year, civil_day_of_year(s, k, leap=leap), leap))
            kind = holyday_kind(dd)
            if kind is not None:
                marks[kind].append((k - 1, s))
    for kind, st in HOLYDAY_STYLES.items():
        pts = np.asarray(marks[kind]).reshape(-1, 2)
        ax.scatter(pts[:, 0], pts[:, 1], marker=st.marker, s=st.size, color=st.color, label=st.label)

    ax.set_yticks(range(len(SEASONS)))
    ax.set_yticklabels(SEASONS)
    ax.set_xticks([0, 9, 19, 29, 39, 49, 59, 69])
    ax.set_xticklabels(["1", "10", "20", "30", "40", "50", "60", "70"])
    ax.set_xlabel("day of season")
    title = f"YOLD {yold} (civil {year})"
    if leap:
        title += "  -  St. Tib's Day between Chaos 59 and 60"
        ax.axvline(58.5, ymin=0.8, ymax=1.0, color="0.1", lw=1.5, ls="--")
    ax.set_title(title)
    handles = [plt.Rectangle((0, 0), 1, 1, color=c) for c in WEEKDAY_COLORS]
    leg1 = ax.legend(handles, WEEKDAYS, loc="upper left", bbox_to_anchor=(1.01, 1.0), fontsize=8)
    ax.add_artist(leg1)
    ax.legend(loc="lower left", bbox_to_anchor=(1.01, 0.0), fontsize=8)
    fig.tight_layout()

    if out:
        fig.savefig(out, dpi=dpi)
        plt.close(fig)
        print(f"Wrote {out}")
    else:
        plt.show()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot a Discordian year as a 5 x 73 weekday strip.")
    p.add_argument("--year", type=int, default=date.today().year, help="Civil year (default: current)")
    p.add_argument("--out", type=str, default=None, help="Save to this file instead of showing")
    p.add_argument("--dpi", type=int, default=150)
    args = p.parse_args(argv)

    plot_year(args.year, out=args.out, dpi=args.dpi)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

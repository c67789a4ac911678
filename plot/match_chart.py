from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import pandas as pd


def comparison_frame(summaries: List[Dict]) -> pd.DataFrame:
    """One row per algorithm run, indexed by algorithm name."""
    rows = [
        {
            "algorithm": s["algorithm"],
            "elapsed_us": s["elapsed_us"],
            "matched": s.get("matched", 0),
            "chunks": s.get("chunks", 0),
            "percentage": s.get("percentage", 0.0),
        }
        for s in summaries
        if s["algorithm"] != "exact"
    ]
    df = pd.DataFrame(rows, columns=["algorithm", "elapsed_us", "matched", "chunks", "percentage"])
    return df.set_index("algorithm")


def add_bar_labels(ax, values, fmt):
    for x, v in enumerate(values):
        ax.text(x, v, fmt.format(v), ha='center', va='bottom', fontsize=8)


def plot_comparison(summaries: List[Dict], output: Optional[str] = None, title: Optional[str] = None):
    df = comparison_frame(summaries)
    colors = plt.cm.tab10.colors[: len(df)]
    fig, (ax_time, ax_pct) = plt.subplots(1, 2, figsize=(11, 5))

    ax_time.bar(df.index, df["elapsed_us"], color=colors)
    add_bar_labels(ax_time, df["elapsed_us"].tolist(), "{:,}")
    ax_time.set_title("Elapsed Time")
    ax_time.set_ylabel("Microseconds")

    ax_pct.bar(df.index, df["percentage"], color=colors)
    add_bar_labels(ax_pct, df["percentage"].tolist(), "{:.2f}")
    ax_pct.set_title("Matched Chunks")
    ax_pct.set_ylabel("Matched / Total Chunks")

    chunk_size = next((s.get("chunk_size") for s in summaries if s.get("chunk_size")), None)
    fig.suptitle(title or (f"Chunk Matching, k={chunk_size}" if chunk_size else "Chunk Matching"))
    fig.tight_layout()
    if output:
        fig.savefig(output)
        plt.close(fig)
    else:
        plt.show()
    return fig

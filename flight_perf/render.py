from __future__ import annotations
import matplotlib.pyplot as plt
import numpy as np

from .domain import AggregateReport, AircraftLimits


def make_plot_figure(
    ias_samples: np.ndarray,
    report: AggregateReport,
    limits: AircraftLimits,
):
    samples = np.asarray(ias_samples, dtype=float)
    idx = np.arange(len(samples))

    fig, (ax_ias, ax_margin, ax_glide) = plt.subplots(
        nrows=3,
        ncols=1,
        figsize=(10, 9),
        gridspec_kw={"height_ratios": [1.4, 1.0, 0.8]},
    )

    # --- IAS history ---
    ax_ias.plot(idx, samples, linewidth=2.0, marker="o", markersize=3, label="IAS (kt)")
    if len(samples) > 0:
        mean = float(np.mean(samples))
        std = float(np.std(samples))
        ax_ias.axhline(mean, linestyle="--", linewidth=1.5, label="Mean")
        ax_ias.axhspan(mean - std, mean + std, alpha=0.15, color="grey", label="±1 std")
    ax_ias.axhline(limits.vso_kts, linestyle=":", linewidth=1.2, color="red", label="Vso")
    ax_ias.set_ylabel("IAS (kt)")
    ax_ias.set_xlabel("Sample (oldest → newest)")
    ax_ias.set_title(f"IAS history - gust factor {report.wind.gust_factor:.3f}")
    ax_ias.grid(True, alpha=0.2)
    ax_ias.legend(loc="upper right")

    # --- Envelope margins ---
    env = report.envelope
    names = ["Stall", "VMO", "MMO"]
    margins = [env.stall_margin_pct, env.vmo_margin_pct, env.mmo_margin_pct]
    colors = ["tab:red" if m == env.min_margin_pct else "tab:blue" for m in margins]
    ax_margin.barh(names, margins, color=colors)
    ax_margin.axvline(0.0, color="black", linewidth=1.0)
    ax_margin.set_xlabel("Margin (%)")
    ax_margin.set_title(f"Envelope - n = {env.load_factor:.2f}, corner {env.corner_speed_kts:.0f} kt")
    ax_margin.grid(True, axis="x", alpha=0.2)

    # --- Glide reach ---
    glide = report.glide
    ax_glide.barh(
        ["Still air", "Wind adjusted"],
        [glide.still_air_range_nm, glide.wind_adjusted_range_nm],
        color=["tab:green", "tab:olive"],
    )
    ax_glide.set_xlabel("Range (nm)")
    ax_glide.set_title(f"Glide {glide.glide_ratio:.0f}:1 at {glide.best_glide_speed_kts:.0f} kt")
    ax_glide.grid(True, axis="x", alpha=0.2)

    fig.suptitle(f"Flight performance - {limits.name}", y=0.995)
    fig.tight_layout(rect=(0.0, 0.0, 1.0, 0.98))
    return fig

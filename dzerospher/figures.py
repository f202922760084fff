"""Self-normalised D0 yields against normalised charged-particle multiplicity."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from .graphs import Graph
from .histogram import Histogram


@dataclass(frozen=True)
class _Reference:
    """Mean dNch/deta in |eta| < 0.8 for minimum bias and the FT0 classes (lowest first)."""

    minimum_bias: float
    minimum_bias_error: float
    classes: tuple[float, ...]
    class_errors: tuple[float, ...]


_REFERENCES = {
    "on": _Reference(
        4.3280,
        0.0003,
        (2.6348, 2.9456, 3.6674, 5.6913, 9.0967, 15.8879, 26.8715),
        (0.0002, 0.0003, 0.0003, 0.0007, 0.0012, 0.0021, 0.0054),
    ),
    "off": _Reference(
        5.0516,
        0.0004,
        (2.7440, 3.1318, 4.3060, 7.0154, 11.3114, 19.7527, 34.1083),
        (0.0002, 0.0003, 0.0004, 0.0008, 0.0016, 0.0026, 0.0068),
    ),
}

_SPECIES = ("prompt", "nonprompt")
_SHAPES = (("J", "Jetty"), ("I", "Isotropic"))
_PT_LABELS = (
    r"1 < $p_{T}$ < 2 GeV/c",
    r"2 < $p_{T}$ < 5 GeV/c",
    r"$p_{T}$ > 5 GeV/c",
)
_STYLE = {
    ("on", "J"): ("green", "v", True),
    ("on", "I"): ("magenta", "D", True),
    ("off", "J"): ("darkgreen", "v", False),
    ("off", "I"): ("darkmagenta", "d", False),
}

X_RANGE = (0.2, 7.0)
Y_RANGE = (0.5, 28.0)


def _names() -> list[str]:
    return [
        f"{species}_{shape}_{k}"
        for species in _SPECIES
        for shape, _ in _SHAPES
        for k in range(1, len(_PT_LABELS) + 1)
    ]


def normalised_multiplicity_graph(histogram: Histogram, cr) -> Graph:
    """Place each FT0 class at its dNch/deta over the minimum-bias value for that tune."""
    try:
        reference = _REFERENCES[cr]
    except KeyError:
        raise ValueError(f"CR must be 'on' or 'off', got {cr!r}") from None
    if histogram.nbins > len(reference.classes):
        raise ValueError(
            f"at most {len(reference.classes)} classes are known, got {histogram.nbins}"
        )
    mb_relative = reference.minimum_bias_error / reference.minimum_bias
    graph = Graph()
    for i, (value, error) in enumerate(
        zip(reference.classes[: histogram.nbins], reference.class_errors), start=1
    ):
        x = value / reference.minimum_bias
        xerr = x * math.sqrt((error / value) ** 2 + mb_relative ** 2)
        graph.add(x, histogram.bin_content(i), xerr, histogram.bin_error(i))
    return graph


def plot_self_normalised(
    on_yields: Mapping[str, Histogram], off_yields: Mapping[str, Histogram], output
) -> dict[tuple[str, str], Graph]:
    """Draw prompt (top) and non-prompt (bottom) yields in three pT ranges and save them.

    Returns the drawn graphs keyed by ``(cr, name)``.
    """
    samples = {"on": on_yields, "off": off_yields}
    for cr, yields in samples.items():
        missing = [name for name in _names() if name not in yields]
        if missing:
            raise ValueError(f"CR-{cr}: missing yields: {', '.join(missing)}")

    from matplotlib.figure import Figure

    figure = Figure(figsize=(16.0, 8.0))
    grid = figure.add_gridspec(
        2, 3, width_ratios=(0.36, 0.32, 0.32), height_ratios=(0.45, 0.55),
        wspace=0.0, hspace=0.0,
    )
    graphs: dict[tuple[str, str], Graph] = {}
    xlabel = r"$(dN_{ch}/d\eta)/\langle dN_{ch}/d\eta\rangle|_{|\eta|<0.8}$"
    ylabel = r"$(d^{2}N/dydp_{T})/\langle d^{2}N/dydp_{T}\rangle$"

    for row, species in enumerate(_SPECIES):
        for column in range(len(_PT_LABELS)):
            axes = figure.add_subplot(grid[row, column])
            axes.set_xlim(*X_RANGE)
            axes.set_ylim(*Y_RANGE)
            axes.tick_params(top=True, right=True, direction="in")
            if column == 0:
                axes.set_ylabel(ylabel)
            else:
                axes.tick_params(labelleft=False)
            if row == 1:
                axes.set_xlabel(xlabel)
            else:
                axes.tick_params(labelbottom=False)

            k = column + 1
            handles = {"on": [], "off": []}
            for cr, yields in samples.items():
                for shape, label in _SHAPES:
                    name = f"{species}_{shape}_{k}"
                    graph = normalised_multiplicity_graph(yields[name], cr)
                    graphs[(cr, name)] = graph
                    colour, marker, filled = _STYLE[(cr, shape)]
                    handle = axes.errorbar(
                        graph.x,
                        graph.y,
                        xerr=graph.ex,
                        yerr=graph.ey,
                        color=colour,
                        marker=marker,
                        markersize=9,
                        markerfacecolor=colour if filled else "none",
                        linestyle="-",
                        label=label,
                    )
                    handles[cr].append(handle)
            axes.plot(
                [X_RANGE[0], 7.0], [Y_RANGE[0], 7.0],
                color="black", linestyle="--", linewidth=2,
            )
            if row == 0:
                axes.text(0.05, 0.55, _PT_LABELS[column], transform=axes.transAxes)
                if column == 0:
                    axes.text(0.2, 0.75, r"Prompt $D^{0}$", transform=axes.transAxes)
                if column == 2:
                    axes.text(
                        0.1, 0.85, r"pp, $\sqrt{s}$ = 13.6 TeV (PYTHIA8)",
                        transform=axes.transAxes,
                    )
            else:
                if column == 0:
                    axes.text(0.18, 0.85, r"Non-prompt $D^{0}$", transform=axes.transAxes)
                elif column == 1:
                    axes.legend(
                        handles=handles["off"], title="CR-off",
                        loc="upper left", frameon=False,
                    )
                else:
                    axes.legend(
                        handles=handles["on"], title="CR-on",
                        loc="upper left", frameon=False,
                    )
    figure.savefig(output)
    return graphs
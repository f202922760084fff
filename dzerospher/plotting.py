"""Figures of the delta-phi spectra and the jetty/isotropic to minimum-bias ratios."""

from __future__ import annotations

import math
from typing import Mapping

from .deltaphi import NONPROMPT_NAME, PROMPT_NAME
from .graphs import Graph
from .histogram import Histogram

# (CR, MPI) settings compared in the delta-phi figure, in drawing order.
SETTINGS = (("on", "on"), ("on", "off"), ("off", "on"))

_DELTA_PHI_NAMES = {"prompt": PROMPT_NAME, "nonprompt": NONPROMPT_NAME}
_DELTA_PHI_STYLE = (
    ("darkcyan", "o"),
    ("mediumblue", "s"),
    ("darkmagenta", "v"),
)

_RPP_CLASS = 7
_RPP_STYLE = (("J", "Jetty", "darkgreen", "o"), ("I", "Isotropic", "magenta", "s"))

_SPECIES_LABEL = {"prompt": "Prompt $D^{0}$", "nonprompt": "Non-prompt $D^{0}$"}
_HEADER = r"pp, $\sqrt{s}$ = 13.6 TeV, PYTHIA 8, |y|<0.5"


def _check_species(species) -> None:
    if species not in _SPECIES_LABEL:
        raise ValueError(f"species must be 'prompt' or 'nonprompt', got {species!r}")


def histogram_points(histogram: Histogram) -> Graph:
    """Regular bins as points at their centres, half a bin wide, with the bin errors."""
    graph = Graph()
    for i in range(1, histogram.nbins + 1):
        graph.add(
            histogram.bin_center(i),
            histogram.bin_content(i),
            0.5 * histogram.bin_width(i),
            histogram.bin_error(i),
        )
    return graph


def _new_axes(size):
    from matplotlib.figure import Figure

    figure = Figure(figsize=size)
    axes = figure.add_subplot()
    axes.tick_params(top=True, right=True, direction="in")
    return figure, axes


def plot_delta_phi(spectra: Mapping, species, output) -> dict[tuple[str, str], Graph]:
    """Draw one species' delta-phi spectrum for each (CR, MPI) setting and save it.

    ``spectra`` maps ``(cr, mpi)`` to the named histograms of one sample.
    """
    _check_species(species)
    name = _DELTA_PHI_NAMES[species]
    missing = [f"CR-{cr}-MPI-{mpi}" for cr, mpi in SETTINGS if (cr, mpi) not in spectra]
    if missing:
        raise ValueError(f"missing settings: {', '.join(missing)}")
    absent = [f"CR-{cr}-MPI-{mpi}" for cr, mpi in SETTINGS if name not in spectra[(cr, mpi)]]
    if absent:
        raise ValueError(f"no {name!r} spectrum for: {', '.join(absent)}")

    figure, axes = _new_axes((7.5, 6.0))
    axes.set_xlim(-0.5 * math.pi, 1.5 * math.pi)
    axes.set_ylim(0.1, 0.45)
    axes.set_xlabel(r"$\Delta\phi$")
    axes.set_ylabel(r"$1/N_{pairs}(dN_{pairs}/d\Delta\phi)$")

    graphs: dict[tuple[str, str], Graph] = {}
    for (cr, mpi), (colour, marker) in zip(SETTINGS, _DELTA_PHI_STYLE):
        graph = histogram_points(spectra[(cr, mpi)][name])
        graphs[(cr, mpi)] = graph
        axes.errorbar(
            graph.x,
            graph.y,
            xerr=graph.ex,
            yerr=graph.ey,
            color=colour,
            marker=marker,
            markersize=8,
            linestyle="none",
            label=f"CR {cr}, MPI {mpi}",
        )

    if species == "prompt":
        axes.text(0.05, 0.92, _HEADER, transform=axes.transAxes)
        axes.text(0.05, 0.85, _SPECIES_LABEL[species], transform=axes.transAxes)
    else:
        axes.text(0.05, 0.92, _SPECIES_LABEL[species], transform=axes.transAxes)
        axes.legend(loc="center right", frameon=False)
    figure.savefig(output)
    return graphs


def plot_rpp(ratios: Mapping[str, Histogram], species, output) -> dict[str, Graph]:
    """Draw the minimum-bias jetty and isotropic ratios of one species and save it."""
    _check_species(species)
    names = {shape: f"{species}_{shape}_mult_{_RPP_CLASS}" for shape, *_ in _RPP_STYLE}
    missing = [name for name in names.values() if name not in ratios]
    if missing:
        raise ValueError(f"missing ratios: {', '.join(missing)}")

    figure, axes = _new_axes((8.0, 6.0))
    axes.set_xlim(0.9, 24.0)
    axes.set_ylim(0.5, 2.0)
    axes.set_xlabel(r"$p_{T}$ (GeV/c)")
    axes.set_ylabel(r"$Q_{pp}$")

    graphs: dict[str, Graph] = {}
    for shape, label, colour, marker in _RPP_STYLE:
        graph = histogram_points(ratios[names[shape]])
        graphs[names[shape]] = graph
        low = [y - e for y, e in zip(graph.y, graph.ey)]
        high = [y + e for y, e in zip(graph.y, graph.ey)]
        axes.fill_between(graph.x, low, high, color=colour, alpha=0.3, linewidth=0)
        axes.plot(
            graph.x,
            graph.y,
            color=colour,
            marker=marker,
            markersize=7,
            linestyle="-",
            label=label,
        )
    axes.plot([1.0, 24.0], [1.0, 1.0], color="black", linestyle="--", linewidth=2)

    if species == "prompt":
        axes.text(0.05, 0.92, _HEADER, transform=axes.transAxes)
        axes.text(0.05, 0.86, "Minimum Bias", transform=axes.transAxes)
    else:
        axes.text(0.05, 0.68, _SPECIES_LABEL[species], transform=axes.transAxes)
        axes.legend(loc="upper left", ncol=2, frameon=False)
    figure.savefig(output)
    return graphs
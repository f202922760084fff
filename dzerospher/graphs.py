"""Graphs of profile points and the mean-pT figure against normalised multiplicity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from .histogram import Profile

# Mean dNch/deta in |eta| < 0.8 for the FT0 classes (lowest first) and for
# minimum bias, with colour reconnection and MPI on.
MB_DNCH_DETA = 4.3280
MB_DNCH_DETA_ERROR = 0.0003
CLASS_DNCH_DETA = (2.6348, 2.9456, 3.6674, 5.6913, 9.0967, 15.8879, 26.8715)
CLASS_DNCH_DETA_ERROR = (0.0002, 0.0003, 0.0003, 0.0007, 0.0012, 0.0021, 0.0054)

_CURVES = (
    ("prompt_jetty", "red", "o", True),
    ("prompt_isotropic", "darkgreen", "s", True),
    ("nonprompt_jetty", "red", "o", False),
    ("nonprompt_isotropic", "darkgreen", "s", False),
)


@dataclass
class Graph:
    """Points with symmetric errors in x and y."""

    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    ex: list[float] = field(default_factory=list)
    ey: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not len(self.x) == len(self.y) == len(self.ex) == len(self.ey):
            raise ValueError("all coordinate lists must have the same length")

    def __len__(self) -> int:
        return len(self.x)

    def add(self, x, y, ex=0.0, ey=0.0) -> None:
        self.x.append(float(x))
        self.y.append(float(y))
        self.ex.append(float(ex))
        self.ey.append(float(ey))


def profile_to_graph(profile: Profile, scalex=1.0, scaley=1.0) -> Graph:
    """Bin centres and means of a profile, scaled, with no error along x."""
    graph = Graph()
    for i in range(1, profile.nbins + 1):
        graph.add(
            profile.bin_center(i) / scalex,
            profile.bin_content(i) / scaley,
            0.0,
            profile.bin_error(i) / scaley,
        )
    return graph


def mean_pt_graph(profile) -> Graph:
    """Place each class at its dNch/deta over the minimum-bias value."""
    if profile.nbins > len(CLASS_DNCH_DETA):
        raise ValueError(
            f"at most {len(CLASS_DNCH_DETA)} classes are known, got {profile.nbins}"
        )
    graph = Graph()
    mb_relative = MB_DNCH_DETA_ERROR / MB_DNCH_DETA
    for i, (value, error) in enumerate(
        zip(CLASS_DNCH_DETA[: profile.nbins], CLASS_DNCH_DETA_ERROR), start=1
    ):
        x = value / MB_DNCH_DETA
        xerr = x * math.sqrt((error / value) ** 2 + mb_relative ** 2)
        graph.add(x, profile.bin_content(i), xerr, profile.bin_error(i))
    return graph


def plot_mean_pt(profiles: Mapping[str, Profile], output) -> dict[str, Graph]:
    """Draw mean D0 pT against normalised multiplicity and save it to ``output``."""
    missing = [name for name, *_ in _CURVES if name not in profiles]
    if missing:
        raise ValueError(f"missing profiles: {', '.join(missing)}")

    from matplotlib.figure import Figure

    figure = Figure(figsize=(7.5, 6.0))
    axes = figure.add_subplot()
    axes.set_xlim(0.0, 7.0)
    axes.set_ylim(1.8, 3.0)
    axes.set_xlabel(r"$(dN_{ch}/d\eta)/\langle dN_{ch}/d\eta\rangle|_{|\eta|<0.8}$")
    axes.set_ylabel(r"$\langle p_{T}\rangle$")
    axes.tick_params(top=True, right=True, direction="in")

    graphs: dict[str, Graph] = {}
    for name, colour, marker, filled in _CURVES:
        graph = mean_pt_graph(profiles[name])
        graphs[name] = graph
        species, shape = name.split("_")
        axes.errorbar(
            graph.x,
            graph.y,
            xerr=graph.ex,
            yerr=graph.ey,
            color=colour,
            marker=marker,
            markersize=7,
            markerfacecolor=colour if filled else "none",
            linestyle="-",
            label=f"{'Prompt' if species == 'prompt' else 'Non-prompt'} {shape.capitalize()}",
        )
    axes.text(
        0.29,
        0.85,
        r"pp, $\sqrt{s}$ = 13.6 TeV, PYTHIA8, |y|<0.5",
        transform=axes.transAxes,
    )
    axes.legend(loc="lower right", ncol=2, frameon=False, fontsize="small")
    figure.savefig(output)
    return graphs
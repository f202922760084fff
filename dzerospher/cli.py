"""Command line for producing the D0 spherocity analysis outputs and figures."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .deltaphi import delta_phi_spectra
from .events import event_file, read_events
from .figures import plot_self_normalised
from .graphs import plot_mean_pt
from .histogram import load_objects, save_objects
from .meanpt import mean_pt_profiles
from .multiplicity import (
    CR_ON_FT0_EDGES,
    DEFAULT_FRACTION,
    FT0_EDGES,
    MIN_BIAS_PROFILE_NAME,
    PROFILE_NAME,
    format_summary,
    multiplicity_profiles,
)
from .plotting import SETTINGS, plot_delta_phi, plot_rpp
from .progress import progress_bar
from .rpp import rpp_ratios
from .selfnorm import cuts_for, self_normalised_yields
from .spherocity import find_quantiles, spherocity_distributions

PROGRESS_EVERY = 100000
QUANTILE_FRACTIONS = (0.2, 0.8)


def deltaphi_output(cr, mpi) -> str:
    return f"deltaphispectra_plot_CR{cr}_MPI{mpi}.json"


def selfnorm_output(cr) -> str:
    return f"D0SNyaxis_CR{cr}_.json"


RPP_OUTPUT = "D0_Rpp.json"
MEANPT_OUTPUT = "MeanpT_Yaxis.json"


def _events(args):
    """Load the sample for the chosen tune, reporting progress on stderr."""
    path = event_file(args.base_dir, args.cr, args.mpi)
    events = list(read_events(path))
    total = len(events)
    for index, event in enumerate(events):
        if total and index % PROGRESS_EVERY == 0:
            sys.stderr.write(progress_bar(index, total))
            sys.stderr.flush()
        yield event
    if total:
        sys.stderr.write(progress_bar(total, total) + "\n")


def _output(args, name) -> Path:
    directory = Path(args.output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / name


def _run_deltaphi(args) -> None:
    spectra = delta_phi_spectra(_events(args))
    save_objects(_output(args, deltaphi_output(args.cr, args.mpi)), spectra)


def _run_rpp(args) -> None:
    save_objects(_output(args, RPP_OUTPUT), rpp_ratios(_events(args)))


def _run_selfnorm(args) -> None:
    yields = self_normalised_yields(_events(args), cuts_for(args.cr))
    save_objects(_output(args, selfnorm_output(args.cr)), yields)


def _run_meanpt(args) -> None:
    save_objects(_output(args, MEANPT_OUTPUT), mean_pt_profiles(_events(args)))


def _run_multiplicity(args) -> None:
    edges = CR_ON_FT0_EDGES if args.class_edges == "on" else FT0_EDGES
    per_class, minimum_bias = multiplicity_profiles(_events(args), edges, args.fraction)
    sys.stdout.write(format_summary(per_class, minimum_bias))
    name = f"Xaxis89_FT0_0p8dNchdeta_{args.cr.capitalize()}{args.mpi.capitalize()}.json"
    save_objects(
        _output(args, name),
        {PROFILE_NAME: per_class, MIN_BIAS_PROFILE_NAME: minimum_bias},
    )


def _run_spherocity(args) -> None:
    histograms = spherocity_distributions(_events(args))
    print(int(histograms[0].integral()))
    for histogram in histograms:
        for fraction, found in zip(
            QUANTILE_FRACTIONS, find_quantiles(histogram, QUANTILE_FRACTIONS)
        ):
            if found is not None:
                count, center = found
                print(f" {fraction:g} perc = {count}\t{center:g}")


def _run_plot_deltaphi(args) -> None:
    directory = Path(args.input_dir)
    spectra = {
        (cr, mpi): load_objects(directory / deltaphi_output(cr, mpi))
        for cr, mpi in SETTINGS
    }
    plot_delta_phi(spectra, args.species, _output(args, f"D0_yieldVSphi_{args.species}.pdf"))


def _run_plot_rpp(args) -> None:
    ratios = load_objects(Path(args.input_dir) / RPP_OUTPUT)
    plot_rpp(ratios, args.species, _output(args, f"Rpp_{args.species}.pdf"))


def _run_plot_selfnorm(args) -> None:
    directory = Path(args.input_dir)
    on_yields = load_objects(directory / selfnorm_output("on"))
    off_yields = load_objects(directory / selfnorm_output("off"))
    plot_self_normalised(on_yields, off_yields, _output(args, "selfnormalised_offon.pdf"))


def _run_plot_meanpt(args) -> None:
    profiles = load_objects(Path(args.input_dir) / MEANPT_OUTPUT)
    plot_mean_pt(profiles, _output(args, "MeanpTD0_NormNch.pdf"))


def _analysis(subparsers, name, handler, cr, mpi, help_text):
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("--cr", choices=("on", "off"), default=cr)
    parser.add_argument("--mpi", choices=("on", "off"), default=mpi)
    parser.add_argument("--base-dir", default=".", help="directory of the event samples")
    parser.add_argument("--output-dir", default=".")
    parser.set_defaults(handler=handler)
    return parser


def _plot(subparsers, name, handler, help_text, species=False):
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("--input-dir", default=".")
    parser.add_argument("--output-dir", default=".")
    if species:
        parser.add_argument("--species", choices=("prompt", "nonprompt"), default="prompt")
    parser.set_defaults(handler=handler)
    return parser


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dzerospher", description="D0 meson spherocity analysis of simulated pp events."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _analysis(sub, "deltaphi", _run_deltaphi, "on", "off", "delta-phi spectra")
    _analysis(sub, "rpp", _run_rpp, "on", "on", "jetty/isotropic to all-event ratios")
    _analysis(sub, "selfnorm", _run_selfnorm, "on", "on", "self-normalised yields")
    _analysis(sub, "meanpt", _run_meanpt, "on", "on", "mean pT profiles")
    multiplicity = _analysis(
        sub, "multiplicity", _run_multiplicity, "off", "on", "dNch/deta per FT0 class"
    )
    multiplicity.add_argument("--class-edges", choices=("on", "off"), default="off")
    multiplicity.add_argument("--fraction", type=float, default=DEFAULT_FRACTION)
    _analysis(sub, "spherocity", _run_spherocity, "off", "on", "spherocity quantiles")
    _plot(sub, "plot-deltaphi", _run_plot_deltaphi, "delta-phi figure", species=True)
    _plot(sub, "plot-rpp", _run_plot_rpp, "ratio figure", species=True)
    _plot(sub, "plot-selfnorm", _run_plot_selfnorm, "self-normalised yield figure")
    _plot(sub, "plot-meanpt", _run_plot_meanpt, "mean pT figure")
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    try:
        args.handler(args)
    except (ValueError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
# dzerospher

Tools for studying prompt and non-prompt D0 mesons in simulated proton–proton
events, split by event shape (spherocity) and by forward multiplicity (FT0 class).

The package reads event files, fills histograms and profiles, writes the results
to JSON files, and turns those into PDF figures with matplotlib.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Event files

Events are stored one JSON object per line. `dzerospher.events.read_events`
yields `Event` objects from such a file and `write_events` writes them.
An `Event` holds its `tracks` (each a `Track` with `px`, `py`, `pz`, `energy`,
`tag` – 1 for prompt, 2 for non-prompt D0 – `charge` and `pt`) and event-level
values such as `ft0`, `spherocity`, `etamultpoint8s0`, `etamultpoint8`,
`pt_lead` and `phi_lead`. `event_file(base_dir, cr, mpi)` gives the path
`<base_dir>/CR-<cr>-MPI-<mpi>/pp-<cr>-<mpi>.jsonl` and raises `ValueError`
when both colour reconnection and MPI are `"off"`.

## What it computes

- `dzerospher.deltaphi.delta_phi_spectra` – azimuthal separation between the
  leading prompt / non-prompt D0 and the leading charged particle, wrapped into
  [-π/2, 3π/2] by `wrap_delta_phi` and normalised per pair and bin width.
- `dzerospher.rpp.rpp_ratios` – pT spectra of jetty and isotropic events divided
  by the spherocity-integrated spectrum, for seven FT0 classes and minimum bias.
- `dzerospher.selfnorm.self_normalised_yields` – self-normalised D0 yields per
  FT0 class in three pT ranges, with the class cuts from `cuts_for("on")` or
  `cuts_for("off")`.
- `dzerospher.meanpt.mean_pt_profiles` – mean D0 pT versus FT0 class for jetty
  and isotropic events.
- `dzerospher.multiplicity.multiplicity_profiles` – mean dNch/dη in |η| < 0.8
  per FT0 class and for minimum bias, from a leading fraction of the events;
  `format_summary` renders them as text.
- `dzerospher.spherocity.spherocity_distributions` and `find_quantiles` –
  spherocity distributions per FT0 class and the bins where the cumulative
  count reaches given fractions (20 % and 80 % by default).

`dzerospher.histogram.Histogram` and `dzerospher.histogram.Profile` are the
binned containers used throughout; `save_objects` and `load_objects` store and
read named collections of them as JSON. `dzerospher.progress.progress_bar`
returns a coloured terminal progress-bar string.

## Plots

`dzerospher.plotting.plot_delta_phi`, `dzerospher.plotting.plot_rpp`,
`dzerospher.graphs.plot_mean_pt` and `dzerospher.figures.plot_self_normalised`
draw the figures and save them to the given output path. The helpers
`histogram_points`, `profile_to_graph`, `mean_pt_graph` and
`normalised_multiplicity_graph` return the plotted points as `Graph` objects.

## Command line

```
dzerospher --help
```

Analysis commands, each taking `--cr`, `--mpi`, `--base-dir` and `--output-dir`:

- `deltaphi` – writes `deltaphispectra_plot_CR<cr>_MPI<mpi>.json`
- `rpp` – writes `D0_Rpp.json`
- `selfnorm` – writes `D0SNyaxis_CR<cr>_.json`
- `meanpt` – writes `MeanpT_Yaxis.json`
- `multiplicity` – prints the summary and writes the two profiles; also takes
  `--class-edges on|off` and `--fraction`
- `spherocity` – prints the quantiles of each spherocity distribution

Plot commands, each taking `--input-dir` and `--output-dir`:

- `plot-deltaphi --species prompt|nonprompt` – `D0_yieldVSphi_<species>.pdf`
- `plot-rpp --species prompt|nonprompt` – `Rpp_<species>.pdf`
- `plot-selfnorm` – `selfnormalised_offon.pdf`
- `plot-meanpt` – `MeanpTD0_NormNch.pdf`

Errors in input files or settings are reported on standard error and the
command exits with status 1.

## What it does not do

The package does not generate events; it only analyses samples already stored
as JSON-lines event files in the layout above. It reads no other event or
histogram formats.
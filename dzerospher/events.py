"""Event records of simulated collisions and their on-disk form."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

_SWITCHES = ("on", "off")


@dataclass
class Track:
    """A final-state particle; ``tag`` is 1 for prompt and 2 for non-prompt D0."""

    px: float
    py: float
    pz: float
    energy: float
    tag: int = 0
    charge: int = 0
    pt: float | None = None

    def __post_init__(self) -> None:
        if self.pt is None:
            self.pt = self.transverse_momentum()

    def rapidity(self) -> float:
        plus = self.energy + self.pz
        minus = self.energy - self.pz
        if minus == 0:
            return math.inf
        if plus == 0:
            return -math.inf
        return 0.5 * math.log(plus / minus)

    def transverse_momentum(self) -> float:
        return math.hypot(self.px, self.py)


@dataclass
class Event:
    """One collision with its tracks and event-level observables."""

    tracks: list[Track] = field(default_factory=list)
    ft0: int = 0
    spherocity: float = 0.0
    etamultpoint8s0: int = 0
    etamultpoint8: int = 0
    etamultone: int = 0
    rapmultpoint5: int = 0
    pt_lead: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)
    phi_lead: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)
    pt_hat: float = 0.0
    no_mpi: int = 0
    nspecies: int = 0

    @property
    def ntrack(self) -> int:
        return len(self.tracks)


def _event_from_dict(data: dict) -> Event:
    fields = dict(data)
    tracks = [Track(**track) for track in fields.pop("tracks", [])]
    for key in ("pt_lead", "phi_lead"):
        if key in fields:
            fields[key] = tuple(float(v) for v in fields[key])
    return Event(tracks=tracks, **fields)


def read_events(path) -> Iterator[Event]:
    """Yield the events of a file holding one JSON object per line."""
    with open(path, encoding="utf-8") as stream:
        for number, line in enumerate(stream, start=1):
            if not line.strip():
                continue
            try:
                yield _event_from_dict(json.loads(line))
            except (TypeError, ValueError, AttributeError) as error:
                raise ValueError(f"{path}:{number}: bad event record: {error}") from error


def write_events(path, events: Iterable[Event]) -> int:
    """Write events one per line and return how many were written."""
    count = 0
    with open(path, "w", encoding="utf-8") as stream:
        for event in events:
            stream.write(json.dumps(asdict(event)))
            stream.write("\n")
            count += 1
    return count


def event_file(base_dir, cr, mpi) -> Path:
    """Path of the event sample for a colour-reconnection / MPI setting."""
    if cr not in _SWITCHES or mpi not in _SWITCHES:
        raise ValueError(f"CR and MPI must each be 'on' or 'off', got {cr!r}, {mpi!r}")
    if cr == "off" and mpi == "off":
        raise ValueError("Can not run with both CR and MPI cases off")
    return Path(base_dir) / f"CR-{cr}-MPI-{mpi}" / f"pp-{cr}-{mpi}.jsonl"
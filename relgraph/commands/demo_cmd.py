"""Demo command - write a seeded synthetic record file."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from ..demo import generate
from ..loader import dump_records


def run_demo(*, profile: str = "entities", seed: int | None = None, out: Path | None = None) -> int:
    console = Console(stderr=True)

    records = generate(profile, seed=seed)
    data = records.to_dict()

    if out:
        dump_records(data, out)
        console.print(
            f"Wrote {len(records.sources)} source and {len(records.downstreams)} downstream records to {out}",
            style="green",
        )
    else:
        print(json.dumps(data, indent=2))
    return 0

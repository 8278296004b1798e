"""Link synthesis: per-record entity<->platform links plus aggregated platform bridges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..models import Link
from .normalize import NormalizedEntity

BRIDGE_THRESHOLD = 3


@dataclass
class Bridge:
    """Accumulated bridging count for one unordered platform pair."""

    source: str
    target: str
    count: int = 0

    @property
    def key(self) -> tuple[str, str]:
        return bridge_key(self.source, self.target)


def bridge_key(a: str, b: str) -> tuple[str, str]:
    return (a, b) if a <= b else (b, a)


def record_links(sources: Sequence[NormalizedEntity], downstreams: Sequence[NormalizedEntity]) -> list[Link]:
    """One link per contributing record; repeated entity/platform pairs are not merged."""
    links = [Link(source=e.key, target=e.platform, weight=e.weight, kind="source") for e in sources]
    links.extend(Link(source=e.platform, target=e.key, weight=e.weight, kind="downstream") for e in downstreams)
    return links


def aggregate_bridges(
    sources: Sequence[NormalizedEntity], downstreams: Sequence[NormalizedEntity]
) -> dict[tuple[str, str], Bridge]:
    """Count (source record, downstream record) pairs with equal display names on different platforms.

    Keyed by the sorted platform pair; the orientation of the first pair seen is
    kept for the emitted link.
    """
    by_name: dict[str, list[NormalizedEntity]] = {}
    for d in downstreams:
        by_name.setdefault(d.name, []).append(d)

    bridges: dict[tuple[str, str], Bridge] = {}
    for s in sources:
        for d in by_name.get(s.name, ()):
            if s.platform == d.platform:
                continue
            key = bridge_key(s.platform, d.platform)
            bridge = bridges.get(key)
            if bridge is None:
                bridge = bridges[key] = Bridge(source=s.platform, target=d.platform)
            bridge.count += 1
    return bridges


def bridge_links(bridges: dict[tuple[str, str], Bridge], *, threshold: int = BRIDGE_THRESHOLD) -> list[Link]:
    """Links for bridges whose count strictly exceeds `threshold`."""
    return [
        Link(
            source=b.source,
            target=b.target,
            weight=b.count,
            kind="bridge",
            label=f"{b.count} shared connections",
        )
        for b in bridges.values()
        if b.count > threshold
    ]


def synthesize_links(
    sources: Sequence[NormalizedEntity],
    downstreams: Sequence[NormalizedEntity],
    *,
    threshold: int = BRIDGE_THRESHOLD,
) -> list[Link]:
    links = record_links(sources, downstreams)
    links.extend(bridge_links(aggregate_bridges(sources, downstreams), threshold=threshold))
    return links

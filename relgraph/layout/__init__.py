"""Layout strategies sharing one contract."""

from ..config import BuildOptions
from ..models import LayoutMode
from .base import Jitter, LayoutResult, LayoutStrategy, NoJitter, Placement, symbol_size
from .column import ColumnLayout
from .traditional import TraditionalLayout
from .venn import VennLayout


def get_layout(mode: LayoutMode, options: BuildOptions | None = None) -> LayoutStrategy:
    """Return a fresh strategy instance for `mode`, sized from `options` where it applies."""
    if mode is LayoutMode.VENN:
        return VennLayout()
    if mode is LayoutMode.COLUMN:
        return ColumnLayout.from_bands(options.column) if options is not None else ColumnLayout()
    return TraditionalLayout()


__all__ = [
    "ColumnLayout",
    "Jitter",
    "LayoutResult",
    "LayoutStrategy",
    "NoJitter",
    "Placement",
    "TraditionalLayout",
    "VennLayout",
    "get_layout",
    "symbol_size",
]

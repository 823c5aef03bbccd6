"""Frame sequence discovery and path templating for VFX workflows."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["SeqKit"]


def __getattr__(name: str):
    if name == "SeqKit":
        from seqkit.api.processor import SeqKit

        return SeqKit
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["SeqKit"])

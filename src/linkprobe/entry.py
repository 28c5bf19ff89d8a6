"""Console script entry point with production wiring.

Lives at package level so that the composition root can be wired into the
adapters layer without the CLI importing composition itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``linkprobe`` with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]

"""CLI entry points.

Note: avoid importing submodules at import-time. This keeps
`python -m spinwheel.cli.<cmd>` free of `runpy` warnings.
"""

from __future__ import annotations


def simulate_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `spinwheel.cli.simulate.main`."""

    from .simulate import main

    return main(argv)


__all__ = ["simulate_main"]

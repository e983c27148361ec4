# src/montyhall/__main__.py
"""Command line entry point for the :mod:`montyhall` package.

When executed as ``python -m montyhall`` this module simply delegates to
:func:`montyhall.cli.main.main` which implements the full CLI logic.
"""

from __future__ import annotations

from montyhall.cli.main import main as cli_main


def main() -> None:
    """Invoke :func:`montyhall.cli.main.main`."""

    cli_main()


if __name__ == "__main__":  # pragma: no cover - direct execution path
    main()

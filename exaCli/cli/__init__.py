"""Console-script entry point for ``exa``."""
from __future__ import annotations


def main() -> None:  # pragma: no cover - thin wrapper
    from .__main__ import cli

    cli(prog_name="exa")

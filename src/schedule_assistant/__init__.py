"""Schedule Assistant application package."""

from __future__ import annotations


def main() -> int:
    from .cli import main as cli_main

    return cli_main()

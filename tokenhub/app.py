"""Streamlit entrypoint delegating to :mod:`tokenhub.Home` routing shell."""

from __future__ import annotations

from tokenhub.Home import main as _run_main


def main() -> None:
    """Render the TokenHub UI through the route-matching shell."""

    _run_main()


if __name__ == "__main__":
    main()

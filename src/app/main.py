"""
lakeviz App entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI. It defers
all UI composition to the app.ui package and exists solely to start Streamlit
programmatically or render directly when already running under Streamlit.

Usage:
    - Python execution (hands process to Streamlit):
        python -m app.main --data-dir data --default-visible 12

    - Streamlit direct:
        streamlit run src/app/main.py -- --data-dir data --default-visible 12
"""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

from app.ui import streamlit_app


def _build_parser(add_help: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lake water-quality dashboard", add_help=add_help)
    parser.add_argument(
        "--data-dir", default=None, help="Directory holding water*.json files (overrides config)."
    )
    parser.add_argument(
        "--default-visible",
        type=int,
        default=None,
        help="Number of series visible after loading (overrides config).",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO).")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the lakeviz UI.

    If already executing within a Streamlit server (environment variable
    STREAMLIT_SERVER_PORT is set), this function renders the app directly.
    Otherwise, it execs "python -m streamlit run <this_module>" to leverage
    Streamlit's reloader and argument parsing, passing through any supported
    options after "--".

    Args:
        argv (list[str] | None): Optional list of CLI arguments. If None,
            sys.argv[1:] is used.

    Examples:
        python -m app.main --data-dir data --default-visible 12
        streamlit run src/app/main.py -- --data-dir data
    """
    args = list(sys.argv[1:] if argv is None else argv)
    ns = _build_parser().parse_args(args)
    logging.basicConfig(level=str(ns.log_level).upper())

    if os.environ.get("STREAMLIT_SERVER_PORT"):
        streamlit_app(default_data_dir=ns.data_dir, default_visible=ns.default_visible)
        return

    app_path = Path(__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]

    passthrough: list[str] = []
    if ns.data_dir:
        passthrough += ["--data-dir", ns.data_dir]
    if ns.default_visible is not None:
        passthrough += ["--default-visible", str(int(ns.default_visible))]
    if ns.log_level:
        passthrough += ["--log-level", str(ns.log_level)]
    if passthrough:
        cmd += ["--"] + passthrough

    try:
        os.execv(sys.executable, cmd)
    except OSError:
        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    # Support: --data-dir, --default-visible after '--' when using `streamlit run`
    try:
        ns, _ = _build_parser(add_help=False).parse_known_args(sys.argv[1:])
        logging.basicConfig(level=str(ns.log_level).upper())
        streamlit_app(default_data_dir=ns.data_dir, default_visible=ns.default_visible)
    except SystemExit:
        streamlit_app()

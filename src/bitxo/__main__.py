"""Entry point for running BitXO via ``python -m bitxo``."""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

import uvicorn

from . import console


def main(argv: Optional[List[str]] = None) -> None:
    """Serve the web UI, or play in the terminal with ``console``."""

    parser = argparse.ArgumentParser(prog="bitxo")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("serve", "console"),
        default="serve",
        help="serve the FastAPI web UI (default) or play in the terminal",
    )
    args = parser.parse_args(argv)

    # Keep the terminal game quiet unless asked otherwise.
    default_level = "WARNING" if args.mode == "console" else "INFO"
    logging.basicConfig(
        level=os.environ.get("BITXO_LOG_LEVEL", default_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "console":
        console.run()
        return

    host = os.environ.get("BITXO_HOST", "0.0.0.0")
    port = int(os.environ.get("BITXO_PORT", "8000"))
    uvicorn.run("bitxo.ui:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging

CLIENT_LOGGER = "nacos_client"


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Library debug lines ("no new config") are only interesting with -v.
    logging.getLogger(CLIENT_LOGGER).setLevel(level)
    # httpx logs every request at INFO, which is one line per long poll; its
    # wire-level detail stays off even with -v.
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

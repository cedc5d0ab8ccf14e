"""
Plugin entry points.

``init`` is called once by the composition root with the host the plugin is
loaded into; every registration lives on that host, none on this module.
"""
from __future__ import annotations

import logging
from pathlib import Path

from host import Host

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
TEXT_DOMAIN = "plugin-name"

PLUGIN_FILE = Path(__file__).resolve()
PLUGIN_DIR = PLUGIN_FILE.parent
LANGUAGES_DIR = PLUGIN_DIR / "languages"


def init(host: Host) -> None:
    host.load_textdomain(TEXT_DOMAIN, LANGUAGES_DIR)

    host.add_action("init", register_post_types)
    logger.info("PLUGIN INIT: %s %s registered on host", TEXT_DOMAIN, VERSION)


def register_post_types() -> None:
    # Placeholder for custom post type registration.
    return None

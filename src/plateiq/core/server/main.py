"""Run the PlateIQ menu server: ``plateiq-server`` or ``python -m plateiq.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from plateiq.core.config.settings import Settings, get_settings
from plateiq.core.server.app import create_app

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def ensure_safe_bind(settings: Settings) -> None:
    """Refuse a non-loopback bind unless MENU_ALLOW_INSECURE_BIND is set.

    The server has no authentication layer, and profiles include lab results.
    """
    if settings.menu_allow_insecure_bind:
        return
    host = settings.menu_host
    if host == "localhost":
        return
    try:
        if ip_address(host).is_loopback:
            return
    except ValueError:
        pass
    raise RuntimeError(
        f"Refusing to bind the menu server to {host!r}: only loopback hosts are allowed "
        "without MENU_ALLOW_INSECURE_BIND=true."
    )


def run() -> None:
    """Start the menu MCP server over Streamable HTTP."""
    settings = get_settings()
    _configure_logging(settings.menu_log_level)
    ensure_safe_bind(settings)

    logger = logging.getLogger(__name__)
    server = create_app(settings_override=settings)
    logger.info("PlateIQ Menu listening on %s:%d", settings.menu_host, settings.menu_port)
    server.run(transport="streamable-http", host=settings.menu_host, port=settings.menu_port)


if __name__ == "__main__":
    run()

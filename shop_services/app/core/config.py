"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
each service starts without any configuration at all.  All three
services share the same settings; run them as separate processes and
set ``PORT`` per process when they share a host.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Shop Services"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  Console logging is always enabled.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Base URLs used by ``shop_client.ShopClient``.  Every service listens
    # on port 3000 by default, so the defaults only make sense when a
    # single service is running locally.
    cart_service_url: str = field(
        default_factory=lambda: os.getenv("CART_SERVICE_URL", "http://localhost:3000")
    )
    order_service_url: str = field(
        default_factory=lambda: os.getenv("ORDER_SERVICE_URL", "http://localhost:3000")
    )
    product_service_url: str = field(
        default_factory=lambda: os.getenv("PRODUCT_SERVICE_URL", "http://localhost:3000")
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module; tests build
# their own ``Settings()`` after patching the environment.
settings = Settings()

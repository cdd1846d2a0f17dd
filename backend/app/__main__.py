"""
Run the API with uvicorn.

Usage:
    python -m app          # products API (needs DATABASE_URL)
    python -m app hello    # no-database variant
"""
import sys

import uvicorn

from app.config import get_settings
from app.core.logging import setup_logging

APPS = {
    "products": "app.main:app",
    "hello": "app.hello:app",
}


def main(argv: list[str] | None = None) -> None:
    """Entry point for ``python -m app``."""
    args = sys.argv[1:] if argv is None else argv
    variant = args[0] if args else "products"
    if variant not in APPS:
        sys.exit(f"Unknown variant '{variant}', expected one of: {', '.join(APPS)}")

    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        APPS[variant],
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

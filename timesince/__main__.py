"""Entry point for timesince."""

import sys

from . import logging_bridge as log
from .config import HOME_ENV, find_data_dir, load_settings
from .errors import ConfigError

LOG_FILE_NAME = "timesince.log"


def main():
    """Main entry point."""
    from .app import TimeSinceApp

    data_dir = find_data_dir()
    if data_dir is None:
        print(f"Error: No .timesince directory found. Create one or set {HOME_ENV}.")
        sys.exit(1)

    try:
        settings = load_settings(data_dir)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    log.init(
        log_level=settings.log_level,
        log_file=settings.log_file or str(data_dir / LOG_FILE_NAME),
    )
    log.log(f"Starting timesince with data directory {data_dir}")

    app = TimeSinceApp(data_dir=data_dir, settings=settings)
    app.run()


if __name__ == "__main__":
    main()

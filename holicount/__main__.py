"""Main entry point for holicount."""

import logging
import os
import sys

from textual.logging import TextualHandler

from holicount.app import HolicountApp
from holicount.config import (
    DEFAULT_CONFIG_PATH,
    HOLIDAY_SOURCES,
    SOURCE_API,
    Config,
    parse_clock_time,
)
from holicount.errors import InvalidConfigError


def configure() -> None:
    """Interactive configuration setup."""
    # Using sys.stdout.write for interactive prompts is allowed
    sys.stdout.write("holicount Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    work_end = input("Work end time [18:00]: ") or "18:00"
    source = input(f"Holiday source {HOLIDAY_SOURCES} [{SOURCE_API}]: ") or SOURCE_API

    hour, minute = parse_clock_time(work_end)
    config = Config(holiday_source=source, work_end_hour=hour, work_end_minute=minute)
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def setup_logging() -> None:
    """Route log records to the Textual devtools console."""
    level = os.environ.get("HOLICOUNT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, handlers=[TextualHandler()])


def main() -> None:
    """Main entry point."""
    setup_logging()
    try:
        if len(sys.argv) > 1 and sys.argv[1] == "config":
            configure()
            return
        config = Config.resolve()
    except InvalidConfigError as e:
        sys.stderr.write(f"Invalid configuration: {e}\n")
        sys.exit(1)

    # Run the TUI
    app = HolicountApp(config=config)
    app.run()


if __name__ == "__main__":
    main()

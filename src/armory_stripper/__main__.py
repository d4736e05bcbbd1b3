"""
Main entry point for armory-stripper.
Usage: python -m armory_stripper [--game-path PATH] [--remove WeaponX.json ...]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .content import CleanupService, ContentParseError, ReferenceMode
from .settings import AppSettings, ConfigError, contains_eft_executable
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="armory-stripper",
        description="Strip weapons and orphaned attachments from the WTT-Armory mod database.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--game-path", type=Path, help="SPT game folder (contains EscapeFromTarkov.exe)")
    parser.add_argument(
        "--remove",
        action="append",
        metavar="FILE",
        help="Weapon file under Items/ to remove (repeatable, replaces the configured list)",
    )
    parser.add_argument(
        "--keep-weapons",
        action="store_true",
        help="Remove no weapons, only prune unused attachments",
    )
    parser.add_argument(
        "--strict-references",
        action="store_true",
        help="Count only exact JSON string values as references",
    )
    parser.add_argument("--no-atomic-writes", action="store_true", help="Overwrite files in place")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level")
    parser.add_argument("--profile", default="default", help="Settings profile name")
    parser.add_argument("--settings-file", type=Path, help="Use an INI settings file")
    parser.add_argument("--save", action="store_true", help="Persist the given options to settings")
    return parser


def resolve_game_path(args: argparse.Namespace, settings: AppSettings) -> Optional[Path]:
    """Explicit argument, then the current folder if it is a game install, then settings."""
    if args.game_path:
        return args.game_path
    current = Path.cwd()
    if contains_eft_executable(current):
        return current
    return settings.game_path


def resolve_weapons(args: argparse.Namespace, settings: AppSettings) -> List[str]:
    if args.keep_weapons:
        return []
    if args.remove:
        return list(args.remove)
    return settings.weapons_to_remove


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(profile=args.profile, settings_file=args.settings_file)
        setup_logging(settings, console_level=args.log_level)

        game_path = resolve_game_path(args, settings)
        weapons = resolve_weapons(args, settings)
        reference_mode = (
            ReferenceMode.STRUCTURAL if args.strict_references else ReferenceMode(settings.reference_mode)
        )
        atomic_writes = settings.atomic_writes and not args.no_atomic_writes

        validation = settings.validate(game_path, weapons)
        if validation.warnings:
            logger.warning("Configuration warnings detected:")
            for warning in validation.warnings:
                logger.warning(f"  {warning}")

        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        if args.save:
            settings.game_path = game_path
            settings.weapons_to_remove = weapons
            settings.reference_mode = reference_mode.value
            settings.atomic_writes = atomic_writes
            if args.log_level:
                settings.console_log_level = args.log_level
            logger.info(f"Settings saved to {settings.get_settings_file_path()}")

        logger.info(f"Starting armory-stripper {__version__}")
        service = CleanupService(
            game_path,
            weapons,
            reference_mode=reference_mode,
            atomic_writes=atomic_writes,
        )
        service.run()
        logger.info("Finished processing.")
        return 0

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except ContentParseError as e:
        logger.error(f"Parse error: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())

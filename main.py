import argparse
import sys
from typing import List, Optional
from app.logger import setup_logging, get_logger, parse_level
from app.app_controller import AppController
from app.config import LOG_FILE, LOG_LEVEL, MEMORY_MAX, MEMORY_MIN


def memory_amount(value: str) -> int:
    """
    argparse type for the --memory option.
    """
    try:
        memory = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid memory amount: {value!r}")
    if not MEMORY_MIN <= memory <= MEMORY_MAX:
        raise argparse.ArgumentTypeError(
            f"memory must be between {MEMORY_MIN} and {MEMORY_MAX} GB"
        )
    return memory


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Factions Launcher")
    parser.add_argument(
        "--settings-file", type=str, default=None, help="Settings file location"
    )
    parser.add_argument(
        "--template", type=str, default=None, help="Launch command template file"
    )
    parser.add_argument(
        "--username", type=str, default=None, help="Username to launch with"
    )
    parser.add_argument(
        "--memory", type=memory_amount, default=None, help="Memory allocation in GB"
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Launch immediately without showing the window",
    )
    parser.add_argument(
        "--log-level", type=str, default=LOG_LEVEL, help="Logging level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Application entry point.

    Sets up logging, creates the application controller and either shows
    the launcher window or launches directly, mapping failures to an exit code.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_args(argv)

    setup_logging(level=parse_level(args.log_level), log_file=LOG_FILE or None)
    logger = get_logger(__name__)

    logger.info("=" * 60)
    logger.info("Factions Launcher - Starting")
    logger.info("=" * 60)

    exit_code = 0

    try:
        controller = AppController(
            settings_file=args.settings_file, template_path=args.template
        )
        controller.initialize()

        if args.no_gui:
            exit_code = controller.launch_without_window(args.username, args.memory)
        else:
            # Blocking until the window closes
            controller.start_application(args.username, args.memory)
            exit_code = controller.exit_code

        logger.info("Application exited normally")

    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt (Ctrl+C)")
        exit_code = 0

    except Exception as e:
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        exit_code = 1

    finally:
        logger.info("=" * 60)
        logger.info(f"Factions Launcher - Exiting (code: {exit_code})")
        logger.info("=" * 60)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

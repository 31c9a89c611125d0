import sys
import argparse
import logging

PYTHON_VERSION_REQUIREMENT = (3, 9)

# Check Python version to give a helpful message.
# This must be done before importing SelectKit files because type hints can cause errors in old Python versions.
if not sys.version_info >= PYTHON_VERSION_REQUIREMENT:
    print(f"Error: SelectKit requires Python {'.'.join(str(x) for x in PYTHON_VERSION_REQUIREMENT)} or above. "
          f"You are using Python {'.'.join(str(x) for x in sys.version_info)}.")
    exit(1)

from SelectKit.WidgetConfig import WIDGET_CONFIG
from SelectKit.coredump import write_coredump
from SelectKit.frontends.inquirer_cli import main as cli_main


def main():
    parser = argparse.ArgumentParser(description="SelectKit interactive form")
    parser.add_argument(
        '--form',
        default=None,
        help="Path to a JSON form definition. Uses a built-in sample form if omitted."
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help=f"Logging level (default from config: {WIDGET_CONFIG.log_level})"
    )
    parser.add_argument(
        '--save-config',
        action='store_true',
        help="Write the current settings (including --log-level) to the config file and exit."
    )
    args = parser.parse_args()

    if args.log_level:
        WIDGET_CONFIG.log_level = args.log_level.upper()

    # Configure logging for the application
    logging.basicConfig(level=WIDGET_CONFIG.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    if args.save_config:
        WIDGET_CONFIG.save()
        logging.info(f"Settings written to {WIDGET_CONFIG.WRITE_LOCATION}")
        return

    try:
        cli_main(args.form)
    except KeyboardInterrupt:
        print("Cancelled.")
    except Exception as e:
        path = write_coredump(e)
        logging.error(f"Unexpected error, crash report written to {path}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()

import os
import sys
from typing import Callable

from asset_tracker.logger import get_logger
from asset_tracker.prompts import read_item
from asset_tracker.registry import AssetRegistry
from asset_tracker.report import build_text_report

logger = get_logger(__name__)

CLEAR_SCREEN = os.getenv("TRACKER_CLEAR_SCREEN", "true").lower() == "true"

MENU = "Menu:\n1. Display List\n2. Add new item\n3. Exit\nEnter your choice:"
KIND_MENU = (
    "Is it a Computer or Phone you would like to add? :\n"
    "1. Computer\n2. Phone\nEnter your choice:"
)


def clear_screen(output_fn: Callable[[str], None]) -> None:
    if CLEAR_SCREEN and output_fn is print and sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)


def wait_for_return(input_fn: Callable[[], str], output_fn: Callable[[str], None]) -> None:
    output_fn("\nPress Enter to return to the main menu...")
    input_fn()


def display_list(registry: AssetRegistry, input_fn, output_fn) -> None:
    output_fn(build_text_report(registry.list()))
    wait_for_return(input_fn, output_fn)


def add_new_item(registry: AssetRegistry, input_fn, output_fn) -> None:
    output_fn(KIND_MENU)
    kind_choice = input_fn()
    clear_screen(output_fn)

    try:
        item = read_item(kind_choice, input_fn, output_fn)
    except ValueError as e:
        logger.info("Item not added: invalid kind choice %r.", kind_choice)
        output_fn(str(e))
    else:
        registry.add(item)
        output_fn(f"{item.kind.display_name} added successfully.")

    wait_for_return(input_fn, output_fn)


def run(registry: AssetRegistry, input_fn=None, output_fn=None) -> int:
    input_fn = input_fn or input
    output_fn = output_fn or print
    logger.info("Starting asset tracker with %d items.", len(registry))

    redraw = True
    while True:
        if redraw:
            clear_screen(output_fn)
        redraw = True
        output_fn(MENU)
        choice = input_fn().strip()

        if choice == "1":
            clear_screen(output_fn)
            display_list(registry, input_fn, output_fn)
        elif choice == "2":
            clear_screen(output_fn)
            add_new_item(registry, input_fn, output_fn)
        elif choice == "3":
            output_fn("Exiting the application...")
            logger.info("Exiting with %d items.", len(registry))
            return 0
        else:
            logger.debug("Invalid menu choice %r.", choice)
            redraw = False
            output_fn("Invalid choice. Please enter a valid option (1, 2, or 3).")


def main() -> int:
    try:
        return run(AssetRegistry.with_presets())
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed; exiting.")
        print()
        return 0


def cli() -> None:
    try:
        raise SystemExit(main())
    except Exception as e:
        logger.exception("Fatal tracker error: %s", e)
        raise SystemExit(2)


if __name__ == "__main__":
    cli()

# cli/main.py

"""
Entry point for the grade roster CLI.

Provides explicit start-up wiring (storage, notifier, store, renderer, controller) and the
main menu for adding, deleting, and viewing student records.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.notifier import ConsoleNotifier
from cli.renderer import TableRenderer
from core import config
from core.controller import RosterController
from core.notifications import KeyValueStorage
from core.storage import JsonFileStorage
from models.record_store import RecordStore

logger = logging.getLogger(__name__)


class RosterApp(NamedTuple):
    controller: RosterController
    renderer: TableRenderer
    notifier: ConsoleNotifier


def bootstrap(
    storage: KeyValueStorage | None = None,
    notifier: ConsoleNotifier | None = None,
    renderer: TableRenderer | None = None,
) -> RosterApp:
    """
    Builds the application and performs the initial load and render.

    Args:
        storage (KeyValueStorage | None): The persistence backend. Defaults to a
            `JsonFileStorage` in the configured storage directory.
        notifier (ConsoleNotifier | None): Defaults to a `ConsoleNotifier` with the
            configured timings.
        renderer (TableRenderer | None): Defaults to a `TableRenderer` on stdout.

    Returns:
        RosterApp: The wired controller, renderer, and notifier.
    """
    if storage is None:
        storage = JsonFileStorage(config.get_storage_dir())
        logger.info("Using storage directory %s", storage.dir_path)
    if notifier is None:
        notifier = ConsoleNotifier()
    if renderer is None:
        renderer = TableRenderer()

    store = RecordStore(storage, notifier)
    store.load()

    controller = RosterController(store, notifier, renderer)
    controller.refresh()

    return RosterApp(controller, renderer, notifier)


def run_cli(app: RosterApp | None = None) -> None:
    """
    Top-level loop with dispatch for the main menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    if app is None:
        logging.basicConfig(
            level=config.get_log_level(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        app = bootstrap()

    title = formatters.format_banner_text("GRADE ROSTER")
    options = [
        ("Add Student", add_record),
        ("Remove Student", delete_record),
        ("View Students", view_records),
    ]
    zero_option = "Exit Program"

    try:
        while True:
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                menu_response(app)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        app.notifier.close()

    exit_program()


# === add record ===


def add_record(app: RosterApp) -> None:
    """
    Prompts for a name and three scores and submits them to the controller.

    Notes:
        - A blank name cancels the entry without submitting.
        - Blank scores are submitted as-is and rejected by validation.
        - Success and failure are both reported by the notifier.
    """
    name = helpers.prompt_user_input_or_cancel(
        "Enter the student's name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    name = cast(str, name)

    bounds = formatters.format_bounds(config.MIN_SCORE, config.MAX_SCORE)
    scores = [
        helpers.prompt_user_input(f"Enter score {i} (between {bounds}):")
        for i in (1, 2, 3)
    ]

    app.controller.submit(name, *scores)


# === delete record ===


def delete_record(app: RosterApp) -> None:
    """
    Shows the roster, prompts for a row, and removes it after confirmation.

    Notes:
        - Rows are resolved through the renderer's delete actions, so the position
          deleted is the one that was displayed.
    """
    app.controller.refresh()

    if not app.renderer.actions:
        return

    choice = helpers.prompt_user_input_or_cancel(
        "Enter the row number to remove (leave blank to cancel):"
    )

    if choice is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    choice = cast(str, choice)

    try:
        action = app.renderer.action_for_row(int(choice))
    except ValueError:
        action = None

    if action is None:
        print("\nInvalid selection.")
        helpers.returning_without_changes()
        return

    record = app.controller.store.all()[action.position]
    print(f"\n{model_formatters.format_record_multiline(record)}")

    if not helpers.confirm_action("Remove this record?"):
        helpers.returning_without_changes()
        return

    app.controller.delete_record(action.position, action.name)


# === view records ===


def view_records(app: RosterApp) -> None:
    app.controller.refresh()


def exit_program() -> None:
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()

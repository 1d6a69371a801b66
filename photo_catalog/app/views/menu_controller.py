"""MenuController: runs the interactive menu loop."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from photo_catalog.app.viewmodels.catalog_vm import CatalogVM
from photo_catalog.app.views import constants as c
from photo_catalog.app.views.console import Console


class MenuController:
    """Shows the numbered menu and dispatches selections to the view-model.

    Operations run one at a time. An unexpected exception inside an
    operation is reported and the menu is shown again.
    """

    def __init__(self, vm: CatalogVM, console: Console) -> None:
        """Initialize with the view-model and the console to talk through.

        Args:
            vm: View-model providing the catalog operations
            console: Prompt/echo primitives
        """
        self.vm = vm
        self.console = console
        self.actions: dict[str, Callable[[], bool]] = {
            c.MENU_FIND: vm.find_photo,
            c.MENU_UPDATE: vm.update_photo_details,
            c.MENU_ALBUM_LIST: vm.album_photo_list,
            c.MENU_TAG: vm.tag_photo,
        }

    def show_menu(self) -> None:
        self.console.echo("")
        for key, label in c.MENU_ITEMS:
            self.console.echo(f"{key}. {label}")

    def dispatch(self, selection: str) -> bool:
        """Handle one menu selection.

        Returns:
            False when the user chose to exit, True otherwise.
        """
        if selection == c.MENU_EXIT:
            return False
        action = self.actions.get(selection)
        if action is None:
            self.console.echo(c.MSG_INVALID_SELECTION)
            return True
        try:
            action()
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.exception("Operation {} failed", selection)
            self.console.echo(c.MSG_UNEXPECTED.format(error=ex))
        return True

    def run(self) -> int:
        """Loop until Exit is selected or input ends; returns the exit status."""
        self.console.echo(c.BANNER)
        while True:
            self.show_menu()
            try:
                selection = self.console.prompt(c.PROMPT_SELECTION).strip()
            except (EOFError, KeyboardInterrupt):
                self.console.echo("")
                break
            if not self.dispatch(selection):
                break
        self.console.echo(c.MSG_GOODBYE)
        return 0

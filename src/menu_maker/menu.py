"""Menu structure and the interactive display loop."""
import logging
from dataclasses import dataclass, field
from typing import Callable

from .console import Console
from .errors import (
    InvalidActionError,
    InvalidSubmenuError,
    MalformedSelection,
    MenuCycleError,
    OutOfRangeSelection,
)

logger = logging.getLogger(__name__)

EXIT_CHOICE = 0
PROMPT = "Choice: "


@dataclass(frozen=True)
class ActionItem:
    """A menu line that calls a zero-argument function when selected."""
    name: str
    action: Callable[[], None] = field(repr=False)
    description: str = ""

    @property
    def is_submenu(self):
        return False

    def select(self, console):
        """Call the action; `console` is unused, kept to match SubmenuItem.select."""
        self.action()


@dataclass(frozen=True)
class SubmenuItem:
    """A menu line that opens another Menu when selected."""
    name: str
    submenu: "Menu" = field(repr=False)
    description: str = ""

    @property
    def is_submenu(self):
        return True

    def select(self, console):
        self.submenu.display(console)


class Menu:
    """One level of a menu tree: a title, a description and numbered items.

    Items are shown as 1..N in the order they were added; 0 always means
    "Exit" and returns to whoever called display(). A Menu can be used as
    a submenu of several parents, but never of itself or its descendants.
    """

    def __init__(self, title="Menu", description=""):
        self._title = title
        self._description = description
        self._items = []

    @property
    def title(self):
        return self._title

    @property
    def description(self):
        return self._description

    @property
    def items(self):
        return tuple(self._items)

    def __repr__(self):
        return f"Menu({self._title!r}, items={len(self._items)})"

    def add_action(self, name, action, description=""):
        """Append an item that calls `action` with no arguments."""
        if not callable(action):
            raise InvalidActionError(f"Action for {name!r} is not callable: {action!r}")
        self._items.append(ActionItem(name, action, description))

    def add_submenu(self, name, submenu, description=""):
        """Append an item that displays `submenu`.

        Raises:
            InvalidSubmenuError: submenu is not a Menu
            MenuCycleError: this menu is reachable from submenu
        """
        if not isinstance(submenu, Menu):
            raise InvalidSubmenuError(f"Submenu for {name!r} must be a Menu, got {submenu!r}")
        if submenu.reaches(self):
            raise MenuCycleError(
                f"Adding {submenu.title!r} under {self._title!r} would create a cycle"
            )
        self._items.append(SubmenuItem(name, submenu, description))

    def reaches(self, target):
        """Return True if `target` is this menu or one of its descendants."""
        seen = set()
        stack = [self]
        while stack:
            node = stack.pop()
            if node is target:
                return True
            if id(node) in seen:
                continue
            seen.add(id(node))
            stack.extend(item.submenu for item in node._items if item.is_submenu)
        return False

    def render(self):
        """Return the menu text up to and including the prompt."""
        lines = [f"\n=== {self._title} ===\n"]
        if self._description:
            lines.append(f"\n{self._description}\n\n")
        for index, item in enumerate(self._items, start=1):
            line = f"{index}. {item.name}"
            if item.description:
                line += f" - {item.description}"
            lines.append(line + "\n")
        lines.append(f"{EXIT_CHOICE}. Exit\n")
        lines.append(PROMPT)
        return "".join(lines)

    def display(self, console=None):
        """Show the menu and dispatch selections until the user enters 0.

        Args:
            console: Console to read from and write to; a Console over
                sys.stdin/sys.stdout is created when omitted.

        Returns when 0 is entered or the input runs out. Exceptions raised
        by action callbacks propagate to the caller.
        """
        if console is None:
            console = Console()
        logger.debug(f"Entering menu {self._title!r}")
        while True:
            console.write(self.render())
            try:
                choice = self._read_choice(console)
            except EOFError:
                logger.debug(f"Input exhausted in menu {self._title!r}")
                break
            if choice == EXIT_CHOICE:
                break
            try:
                item = self._item_for(choice)
            except OutOfRangeSelection as e:
                console.write(f"{e}\n")
                continue
            logger.debug(f"Selected {choice}. {item.name} in {self._title!r}")
            item.select(console)
        logger.debug(f"Leaving menu {self._title!r}")

    def _read_choice(self, console):
        while True:
            try:
                return console.read_int()
            except MalformedSelection as e:
                console.discard_line()
                console.write(f"{e}\n")
                console.write(PROMPT)

    def _item_for(self, choice):
        if not 1 <= choice <= len(self._items):
            raise OutOfRangeSelection(choice, len(self._items))
        return self._items[choice - 1]

"""Exceptions raised by menu_maker.

- MenuError: base class for everything below
- MalformedSelection / OutOfRangeSelection: bad input at a menu prompt,
  recovered inside Menu.display()
- InvalidActionError / InvalidSubmenuError / MenuCycleError: rejected
  while building a menu tree
- ConfigError: a YAML menu file could not be loaded
"""


class MenuError(Exception):
    """Base exception for all menu_maker errors."""

    pass


class MalformedSelection(MenuError):
    """The token read at a prompt is not an integer."""

    def __init__(self, token):
        super().__init__("Invalid input! Please enter a number.")
        self.token = token


class OutOfRangeSelection(MenuError):
    """The selection is an integer outside 0..item_count.

    Attributes:
        choice: The number the user entered
        item_count: Number of items in the menu that was displayed
    """

    def __init__(self, choice, item_count):
        super().__init__(
            f"Invalid choice! Please select a number between 0 and {item_count}."
        )
        self.choice = choice
        self.item_count = item_count


class InvalidActionError(MenuError):
    """An action item was given something that cannot be called."""

    pass


class InvalidSubmenuError(MenuError):
    """A submenu item was given something that is not a Menu."""

    pass


class MenuCycleError(MenuError):
    """Adding the submenu would make a menu reachable from itself."""

    pass


class ConfigError(MenuError):
    """A menu config file is missing, unreadable or malformed."""

    pass

"""Menu Maker - hierarchical numbered menus for console programs."""

from .console import Console
from .demo import build_demo_menu
from .errors import (
    ConfigError,
    InvalidActionError,
    InvalidSubmenuError,
    MalformedSelection,
    MenuCycleError,
    MenuError,
    OutOfRangeSelection,
)
from .main import MenuApp, main
from .menu import ActionItem, Menu, SubmenuItem

__all__ = [
    'Menu', 'ActionItem', 'SubmenuItem', 'Console', 'MenuApp', 'main', 'build_demo_menu',
    'MenuError', 'MalformedSelection', 'OutOfRangeSelection', 'InvalidActionError',
    'InvalidSubmenuError', 'MenuCycleError', 'ConfigError',
]

"""Sample "Record Management System" menu tree.

Main Menu
  Start Game
  View Records
  Add Record
  Settings
    Audio: Adjust Volume, Toggle Mute
    Video: Change Resolution, Toggle Fullscreen
  Help
    View Help
    About
"""
from .console import Console
from .menu import Menu


def build_demo_menu(console=None):
    """Build the demo tree; actions write to `console`."""
    if console is None:
        console = Console()

    def say(text):
        return lambda: console.write(f"{text}\n")

    main_menu = Menu(
        "Record Management System",
        "Welcome to the Record Management System. Please select an option to continue.",
    )

    audio_menu = Menu("Audio Settings")
    audio_menu.add_action("Adjust Volume", say("Adjusting volume..."))
    audio_menu.add_action("Toggle Mute", say("Toggling mute..."))

    video_menu = Menu("Video Settings")
    video_menu.add_action("Change Resolution", say("Changing resolution..."))
    video_menu.add_action("Toggle Fullscreen", say("Toggling fullscreen..."))

    settings_menu = Menu("Settings", "Configure system preferences")
    settings_menu.add_submenu("Audio", audio_menu)
    settings_menu.add_submenu("Video", video_menu)

    help_menu = Menu("Help & Information", "Get help and system information")
    help_menu.add_action("View Help", say("Displaying help documentation..."), "Access user documentation")
    help_menu.add_action("About", say("Record Management System v1.0"), "View system information")

    main_menu.add_action("Start Game", say("Starting game..."))
    main_menu.add_action("View Records", say("Viewing records..."), "Browse existing records")
    main_menu.add_action("Add Record", say("Adding new record..."), "Create a new record entry")
    main_menu.add_submenu("Settings", settings_menu, "Configure system preferences")
    main_menu.add_submenu("Help", help_menu, "Get help and system information")
    return main_menu

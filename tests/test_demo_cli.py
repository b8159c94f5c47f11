"""Tests for the demo menu and the command line entry point."""
import io
import os
import tempfile
from unittest.mock import patch

import pytest
import yaml

from menu_maker import Console, build_demo_menu
from menu_maker.main import main


class TestDemoMenu:
    """Test the sample Record Management System tree."""

    def test_top_level_items(self):
        """Test the main menu entries and their kinds."""
        menu = build_demo_menu(Console(io.StringIO(), io.StringIO()))
        assert menu.title == "Record Management System"
        assert [(item.name, item.is_submenu) for item in menu.items] == [
            ("Start Game", False),
            ("View Records", False),
            ("Add Record", False),
            ("Settings", True),
            ("Help", True),
        ]

    def test_settings_tree(self):
        """Test settings holds the audio and video submenus."""
        menu = build_demo_menu(Console(io.StringIO(), io.StringIO()))
        settings = menu.items[3].submenu
        assert [item.submenu.title for item in settings.items] == ["Audio Settings", "Video Settings"]

    def test_walk_to_audio_and_back(self):
        """Test Settings -> Audio -> Toggle Mute, then exit every level."""
        out = io.StringIO()
        console = Console(io.StringIO("4\n1\n2\n0\n0\n0\n"), out)
        build_demo_menu(console).display(console)
        text = out.getvalue()
        assert "Toggling mute...\n" in text
        titles = [line for line in text.splitlines() if line.startswith("===")]
        assert titles == [
            "=== Record Management System ===",
            "=== Settings ===",
            "=== Audio Settings ===",
            "=== Audio Settings ===",
            "=== Settings ===",
            "=== Record Management System ===",
        ]

    def test_item_descriptions_rendered(self):
        """Test described items show ' - description'."""
        out = io.StringIO()
        console = Console(io.StringIO("0\n"), out)
        build_demo_menu(console).display(console)
        assert "2. View Records - Browse existing records\n" in out.getvalue()
        assert "1. Start Game\n" in out.getvalue()


class TestMain:
    """Test the menu-maker command."""

    def test_runs_demo_without_config(self, capsys):
        """Test the demo is shown when no config is passed."""
        with patch('sys.stdin', io.StringIO("2\n0\n")):
            main([])
        captured = capsys.readouterr()
        assert "=== Record Management System ===" in captured.out
        assert "Viewing records...\n" in captured.out

    def test_runs_config(self, capsys):
        """Test a YAML config is loaded and displayed."""
        config = {'menus': {'main': {'title': 'From YAML', 'items': [
            {'name': 'Hello', 'message': 'Hello there'},
        ]}}}
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.dump(config, f)
            path = f.name
        try:
            with patch('sys.stdin', io.StringIO("1\n0\n")):
                main(['--config', path])
        finally:
            os.unlink(path)
        captured = capsys.readouterr()
        assert "=== From YAML ===" in captured.out
        assert "Hello there\n" in captured.out

    def test_bad_config_exits_1(self):
        """Test config errors end the process with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--config', '/nonexistent/menu.yaml'])
        assert exc_info.value.code == 1

    def test_keyboard_interrupt_exits_130(self):
        """Test Ctrl-C ends the process with status 130."""
        with patch('menu_maker.menu.Menu.display', side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main([])
        assert exc_info.value.code == 130

import sys
import yaml
import argparse
import logging
import subprocess
import importlib
from pathlib import Path

# Local imports
from .console import Console
from .demo import build_demo_menu
from .errors import ConfigError, MenuError
from .menu import Menu

logger = logging.getLogger(__name__)

ITEM_KINDS = ('message', 'command', 'call', 'submenu')
DEFAULT_COMMAND_TIMEOUT = 30.0


class MenuApp:
    """Builds a Menu tree from a YAML config and runs it on a Console."""

    def __init__(self, config_path, console=None):
        self.console = console if console is not None else Console()
        self.config = self._load_config(config_path)

        settings = self.config.get('settings') or {}
        if not isinstance(settings, dict):
            raise ConfigError("'settings' must be a mapping")
        self.command_timeout = settings.get('command_timeout', DEFAULT_COMMAND_TIMEOUT)
        if (isinstance(self.command_timeout, bool)
                or not isinstance(self.command_timeout, (int, float))
                or self.command_timeout <= 0):
            raise ConfigError(
                f"'command_timeout' must be a positive number, got {self.command_timeout!r}"
            )

        self.menus = self._parse_menus(self.config.get('menus'))
        root_id = self.config.get('root', 'main')
        if not isinstance(root_id, str) or root_id not in self.menus:
            raise ConfigError(f"Root menu '{root_id}' is not defined")
        self.root = self.menus[root_id]

    def _load_config(self, path):
        try:
            with open(path, 'r') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config {path}: {e}") from e
        if not isinstance(config, dict):
            raise ConfigError(f"Config {path} must be a mapping")
        return config

    def _parse_menus(self, raw_menus):
        if not isinstance(raw_menus, dict) or not raw_menus:
            raise ConfigError("Config needs a non-empty 'menus' mapping")

        # Create every node first so items can refer to menus defined later
        menus = {}
        for menu_id, raw in raw_menus.items():
            raw = raw or {}
            if not isinstance(raw, dict):
                raise ConfigError(f"Menu '{menu_id}' must be a mapping")
            menus[menu_id] = Menu(
                title=str(raw.get('title', menu_id)),
                description=str(raw.get('description', '')),
            )

        for menu_id, raw in raw_menus.items():
            items = (raw or {}).get('items') or []
            if not isinstance(items, list):
                raise ConfigError(f"Menu '{menu_id}': 'items' must be a list")
            for item in items:
                try:
                    self._add_item(menus, menus[menu_id], item)
                except ConfigError:
                    raise
                except MenuError as e:
                    raise ConfigError(f"Menu '{menu_id}': {e}") from e
        logger.info(f"Loaded {len(menus)} menu(s)")
        return menus

    def _add_item(self, menus, menu, item):
        if not isinstance(item, dict) or 'name' not in item:
            raise ConfigError(f"Menu item needs a 'name': {item!r}")
        name = str(item['name'])
        description = str(item.get('description', ''))

        kinds = [kind for kind in ITEM_KINDS if kind in item]
        if len(kinds) != 1:
            raise ConfigError(
                f"Item '{name}' needs exactly one of {', '.join(ITEM_KINDS)}"
            )
        kind = kinds[0]
        value = item[kind]

        if kind == 'submenu':
            if not isinstance(value, str) or value not in menus:
                raise ConfigError(f"Item '{name}' refers to unknown menu '{value}'")
            menu.add_submenu(name, menus[value], description)
        elif kind == 'message':
            menu.add_action(name, self._message_action(str(value)), description)
        elif kind == 'command':
            menu.add_action(name, self._command_action(str(value)), description)
        else:
            menu.add_action(name, self._resolve_callable(str(value)), description)

    def _message_action(self, text):
        return lambda: self.console.write(f"{text}\n")

    def _command_action(self, command):
        return lambda: self._execute_command(command)

    def _resolve_callable(self, target):
        """Import a callable from a 'package.module:function' string."""
        module_name, sep, attr = target.partition(':')
        if not sep or not module_name or not attr:
            raise ConfigError(f"Invalid call target '{target}', expected 'module:function'")
        try:
            obj = importlib.import_module(module_name)
            for part in attr.split('.'):
                obj = getattr(obj, part)
        except (ImportError, AttributeError) as e:
            raise ConfigError(f"Cannot resolve call target '{target}': {e}") from e
        return obj

    def _execute_command(self, command):
        logger.debug(f"Running command: {command}")
        try:
            result = subprocess.run(
                command, shell=True, capture_output=True, text=True,
                timeout=self.command_timeout
            )
            output = result.stdout.strip() if result.stdout.strip() else result.stderr.strip()
            if result.returncode != 0:
                logger.warning(f"Command '{command}' exited with {result.returncode}")
            if not output:
                output = "Done." if result.returncode == 0 else f"Error (exit {result.returncode})"
        except subprocess.TimeoutExpired:
            logger.warning(f"Command '{command}' timed out after {self.command_timeout}s")
            output = f"Err: timed out after {self.command_timeout}s"
        except OSError as e:
            logger.warning(f"Command '{command}' failed: {e}")
            output = f"Err: {e}"
        self.console.write(f"{output}\n")

    def run(self):
        self.root.display(self.console)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Menu Maker")
    parser.add_argument("--config", help="Path to a YAML menu file (runs the demo when omitted)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (logs go to stderr)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    console = Console()
    try:
        if args.config:
            MenuApp(Path(args.config), console).run()
        else:
            build_demo_menu(console).display(console)
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        console.write("\n")
        sys.exit(130)


if __name__ == "__main__":
    main()

"""A minimal Serverless-style host: service config, hook registry and logging.

Plugins receive a ``Serverless`` instance and register hooks named
``before:<command>``, ``<command>`` and ``after:<command>``.
"""

from typing import Callable

import click

Hook = Callable[[], object]


class PluginManager:
    """Holds lifecycle hooks and runs them in before/command/after order."""

    def __init__(self):
        self.hooks: dict[str, list[Hook]] = {}

    def register(self, event: str, hook: Hook) -> None:
        self.hooks.setdefault(event, []).append(hook)

    def add_plugin(self, plugin) -> None:
        for event, hook in (getattr(plugin, "hooks", None) or {}).items():
            self.register(event, hook)

    def run(self, command: str) -> None:
        for event in (f"before:{command}", command, f"after:{command}"):
            for hook in self.hooks.get(event, []):
                hook()


class Serverless:
    """Service configuration plus the plugin manager that acts on it."""

    def __init__(self, service: dict, options: dict | None = None, log: Callable[[str], None] | None = None):
        self.service = service
        self.options = options or {}
        self.plugin_manager = PluginManager()
        self._echo = log or click.echo

    @property
    def service_name(self) -> str:
        return self.service.get("service", "")

    @property
    def custom(self) -> dict:
        return self.service.setdefault("custom", {})

    @property
    def functions(self) -> dict:
        return self.service.get("functions") or {}

    def log(self, msg: str) -> None:
        self._echo(f"Serverless: {msg}")

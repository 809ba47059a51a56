"""Registering felines from plugins named in an INI file."""

from __future__ import annotations

import configparser
import sys
from collections.abc import Sequence
from pathlib import Path

from kata.factory import Creator, FelineFactory
from kata.felines import Lion, Lynx
from kata.reader import load_from_ini_file
from kata.stringutil import string_to_int

PLUGIN_KEYWORD = "_plugin_"
DEFAULT_CONFIG_FILE = "../../data/29_plugin_based_cats.ini"

AVAILABLE_PLUGINS: dict[str, Creator] = {
    "lion": Lion.create,
    "lynx": Lynx.create,
}


class PluginError(Exception):
    """Raised when a plugin cannot be loaded."""


def plugin_name_from_file_name(file_name: str) -> str:
    """Derive the feline type from a plugin file name.

    ``<anything>_plugin_<name>.<extension>`` gives ``<name>``; a file name
    without the plugin keyword is returned unchanged.
    """
    _, keyword, rest = file_name.partition(PLUGIN_KEYWORD)
    if not keyword:
        return file_name
    return rest.partition(".")[0]


def plugin_files_from_ini_file(ini_file_name: str | Path) -> list[str]:
    """List the plugin files named by ``[plugins] plugin.N`` entries."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str
    if not parser.read(ini_file_name, encoding="utf-8"):
        raise FileNotFoundError(f"Cannot read INI file {ini_file_name}")
    count = string_to_int(parser.get("plugins", "num_plugins", fallback="0"))
    return [
        parser.get("plugins", f"plugin.{index}", fallback="")
        for index in range(1, count + 1)
    ]


def _load_plugin(file_name: str) -> tuple[str, Creator]:
    name = plugin_name_from_file_name(file_name)
    creator = AVAILABLE_PLUGINS.get(name) if file_name else None
    if creator is None:
        raise PluginError("Could not load a library")
    return name, creator


def load_plugins_from_ini_file(ini_file_name: str | Path, factory: FelineFactory) -> list[str]:
    """Register the creator of every loadable plugin; return the types registered."""
    registered = []
    for file_name in plugin_files_from_ini_file(ini_file_name):
        try:
            name, creator = _load_plugin(file_name)
        except PluginError as exc:
            print(f"exception {exc}")
            continue
        print(f"Loaded library: {file_name}")
        if factory.register_cat(name, creator):
            registered.append(name)
    return registered


def main(argv: Sequence[str] | None = None) -> int:
    """Load the plugins, then the felines, from one configuration file."""
    args = list(sys.argv[1:] if argv is None else argv)
    config_file = args[0] if args else DEFAULT_CONFIG_FILE
    print("-=== Shared cats ===-")
    print(f"Will try to load plugins from file: {config_file}")

    factory = FelineFactory()
    try:
        load_plugins_from_ini_file(config_file, factory)
        felines = load_from_ini_file(config_file, factory)
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1

    for feline in felines:
        feline.speak()
    return 0
#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Settings: which attributes are localizable and which files to touch."""

import gettext
import json
import os
from dataclasses import asdict, dataclass, field, fields

XAML_NS = "http://schemas.microsoft.com/winfx/2006/xaml"
XML_NS = "http://www.w3.org/XML/1998/namespace"

UID = "{%s}Uid" % XAML_NS
SPACE = "{%s}space" % XML_NS

TEXT_DOMAIN = "resw-sync"

DEFAULT_LOCALIZABLE = [
    "Header",
    "Content",
    "ToolTipService.ToolTip",
    "Text",
    "PlaceholderText",
]


def _(message):
    return gettext.dgettext(TEXT_DOMAIN, message)


def ngettext(singular, plural, n):
    return gettext.dngettext(TEXT_DOMAIN, singular, plural, n)


@dataclass
class Settings:
    """Configuration shared by the extractor, merger and orchestrator."""
    identifier_attribute: str = UID
    localizable_attributes: list = field(
        default_factory=lambda: list(DEFAULT_LOCALIZABLE))
    markup_patterns: list = field(default_factory=lambda: ["*.xaml"])
    resource_patterns: list = field(default_factory=lambda: ["*Resources.resw"])
    indent: str = "  "

    def is_localizable(self, name):
        return name in self.localizable_attributes


def settings_path():
    xdg = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(xdg, "resw-sync", "settings.json")


def load_settings(path=None):
    """Load settings from a JSON file, falling back to defaults.

    Unknown keys are ignored so older settings files keep working.
    """
    path = path or settings_path()
    if not os.path.exists(path):
        return Settings()
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    known = {fld.name for fld in fields(Settings)}
    return Settings(**{k: v for k, v in data.items() if k in known})


def save_settings(settings, path=None):
    path = path or settings_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2)
    return path

#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Result data model."""

from dataclasses import dataclass, field

from resw_sync.config import _, ngettext


@dataclass
class Diagnostic:
    """A recoverable problem tied to one file (and optionally one element)."""
    path: str = ""
    reason: str = ""
    error: Exception = None

    @property
    def kind(self):
        return type(self.error).__name__ if self.error is not None else ""


@dataclass
class MergeResult:
    """Entries added to one resource file."""
    path: str = ""
    added: int = 0

    @property
    def changed(self):
        return self.added > 0


@dataclass
class Report:
    """Outcome of one batch run."""
    changed_files: list = field(default_factory=list)
    failures: list = field(default_factory=list)
    keywords: dict = field(default_factory=dict)
    nothing_to_do: bool = False

    @property
    def total_added(self):
        return sum(r.added for r in self.changed_files)

    def add_result(self, result):
        """Record a merge result. Files that were not written are left out."""
        if result.changed:
            self.changed_files.append(result)

    def summary(self):
        """Short human readable message for the host to show."""
        if self.nothing_to_do:
            return _("No x:Uid strings found, nothing to do")
        msg = ngettext(
            "You added {} string to Resources",
            "You added {} strings to Resources",
            self.total_added).format(self.total_added)
        if self.failures:
            msg += "\n" + ngettext(
                "{} problem reported", "{} problems reported",
                len(self.failures)).format(len(self.failures))
        return msg

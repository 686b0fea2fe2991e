#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Exceptions raised while extracting and merging resource strings."""


class ReswSyncError(Exception):
    """Base class for all recoverable resw-sync errors."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        return self.message


class ParseError(ReswSyncError):
    """Markup or resource document is not well-formed XML."""


class StructuralError(ReswSyncError):
    """Resource document does not have the expected root element."""


class ValidationError(ReswSyncError):
    """A single identifier/attribute pair was rejected."""

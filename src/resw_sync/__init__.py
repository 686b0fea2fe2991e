#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Keep Resources.resw string tables in sync with x:Uid markup."""

from resw_sync.config import Settings, load_settings, save_settings
from resw_sync.errors import (
    ParseError, ReswSyncError, StructuralError, ValidationError
)
from resw_sync.extractor import extract, extract_text, parse_markup
from resw_sync.merger import load_resources, merge, merge_file
from resw_sync.model import Diagnostic, MergeResult, Report
from resw_sync.orchestrator import classify, read_sources, run, sync_paths, walk

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "MergeResult",
    "ParseError",
    "Report",
    "ReswSyncError",
    "Settings",
    "StructuralError",
    "ValidationError",
    "classify",
    "extract",
    "extract_text",
    "load_resources",
    "load_settings",
    "merge",
    "merge_file",
    "parse_markup",
    "read_sources",
    "run",
    "save_settings",
    "sync_paths",
    "walk",
]

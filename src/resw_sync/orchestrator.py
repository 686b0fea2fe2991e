#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Batch orchestrator — extract from all markup, merge into all resources."""

import fnmatch
import logging
import os

from resw_sync.config import Settings, _
from resw_sync.errors import ParseError, StructuralError
from resw_sync.extractor import extract, parse_markup
from resw_sync.merger import merge_file
from resw_sync.model import Diagnostic, Report

logger = logging.getLogger(__name__)


def _children(node):
    return getattr(node, "children", None)


def walk(nodes, children=_children):
    """Flatten a project tree into a list of candidates.

    Every node is yielded, intermediate ones included, in visiting order.
    Nodes reached twice are yielded twice; filtering is up to the caller.
    """
    for node in nodes:
        yield node
        kids = children(node)
        if kids:
            yield from walk(kids, children)


def _matches(path, patterns):
    name = os.path.basename(str(path)).lower()
    return any(fnmatch.fnmatch(name, p.lower()) for p in patterns)


def classify(paths, settings=None):
    """Split candidate paths into ``(markup_paths, resource_paths)``."""
    settings = settings or Settings()
    markup, resources = [], []
    for path in paths:
        if _matches(path, settings.markup_patterns):
            markup.append(path)
        elif _matches(path, settings.resource_patterns):
            resources.append(path)
    return markup, resources


def read_sources(paths):
    """Read markup files. Returns ``(sources, failures)``."""
    sources, failures = [], []
    for path in paths:
        try:
            with open(path, encoding="utf-8-sig") as f:
                sources.append((str(path), f.read()))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", path, e)
            failures.append(Diagnostic(
                str(path), _("Could not read {}: {}").format(path, e), e))
    return sources, failures


def run(markup_sources, resource_targets, settings=None):
    """Sync every resource target with the strings found in the markup.

    ``markup_sources`` is a sequence of ``(id, text)`` pairs and
    ``resource_targets`` a sequence of paths. Per-file problems end up in
    ``Report.failures``; anything else propagates.
    """
    settings = settings or Settings()
    report = Report()
    keywords = {}

    for source_id, text in markup_sources:
        try:
            doc = parse_markup(text, source_id)
        except ParseError as e:
            logger.warning("%s", e)
            report.failures.append(Diagnostic(source_id, str(e), e))
            continue
        keywords, diagnostics = extract(doc, settings, keywords, source_id)
        report.failures.extend(diagnostics)

    report.keywords = keywords
    if not keywords:
        logger.info("No x:Uid strings found")
        report.nothing_to_do = True
        return report

    for target in resource_targets:
        try:
            result = merge_file(target, keywords, settings)
        except (ParseError, StructuralError) as e:
            logger.warning("%s", e)
            report.failures.append(Diagnostic(str(target), str(e), e))
            continue
        except OSError as e:
            logger.warning("Could not update %s: %s", target, e)
            report.failures.append(Diagnostic(
                str(target), _("Could not update {}: {}").format(target, e), e))
            continue
        report.add_result(result)

    logger.info("Added %d strings to %d files",
                report.total_added, len(report.changed_files))
    return report


def sync_paths(paths, settings=None):
    """Classify a flat candidate list, read the markup and run."""
    settings = settings or Settings()
    markup_paths, resource_paths = classify(paths, settings)
    sources, failures = read_sources(markup_paths)
    report = run(sources, resource_paths, settings)
    report.failures[:0] = failures
    return report

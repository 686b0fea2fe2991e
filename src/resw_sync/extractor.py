#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Key extractor — collect x:Uid strings from XAML markup."""

import logging

from lxml import etree

from resw_sync.config import Settings, _
from resw_sync.errors import ParseError, ValidationError
from resw_sync.model import Diagnostic

logger = logging.getLogger(__name__)


def _markup_parser():
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        recover=False,
    )


def parse_markup(text, path="<markup>"):
    """Parse raw markup text into an element tree.

    The text is already decoded, so any encoding named in the XML
    declaration is ignored.
    """
    data = text.lstrip("\ufeff").encode("utf-8")
    try:
        root = etree.fromstring(data, _markup_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(
            _("Could not parse {}: {}").format(path, e),
            {"path": path}) from e
    return root.getroottree()


def resource_key(identifier, attribute):
    """Build the resource key for one attribute, e.g. ``Greeting.Text``."""
    return "{}.{}".format(identifier, etree.QName(attribute).localname)


def _check_pair(keywords, node, identifier, key, value):
    """Return True if the pair should be added, False if already present.

    Raises ValidationError if the pair must be rejected.
    """
    tag = etree.QName(node).localname
    if not identifier.strip():
        raise ValidationError(
            _("x:Uid value in node {} can't be empty").format(tag),
            {"element": tag, "line": node.sourceline})
    if key in keywords:
        if keywords[key] == value:
            return False
        raise ValidationError(
            _("Key collision: {} is already \"{}\", not adding \"{}\"").format(
                key, keywords[key], value),
            {"key": key, "element": tag, "line": node.sourceline})
    return True


def extract(doc, settings=None, keywords=None, path=None):
    """Collect (resource key, value) pairs from a parsed markup document.

    If ``keywords`` is given it is extended in place, so several documents
    can be collected into one mapping. Returns ``(keywords, diagnostics)``.
    """
    settings = settings or Settings()
    if keywords is None:
        keywords = {}
    diagnostics = []
    root = doc.getroot() if hasattr(doc, "getroot") else doc

    for node in root.iter(etree.Element):
        identifier = node.get(settings.identifier_attribute)
        if identifier is None:
            continue
        for name, value in node.attrib.items():
            if not settings.is_localizable(name):
                continue
            key = resource_key(identifier, name)
            try:
                if not _check_pair(keywords, node, identifier, key, value):
                    logger.debug("Skipping duplicate %s in %s", key, path)
                    continue
            except ValidationError as e:
                logger.debug("Rejected %s in %s: %s", key, path, e)
                diagnostics.append(Diagnostic(path or "", str(e), e))
                continue
            keywords[key] = value

    return keywords, diagnostics


def extract_text(text, settings=None, keywords=None, path="<markup>"):
    """Parse and extract in one step. Raises ParseError on bad markup."""
    return extract(parse_markup(text, path), settings, keywords, path)

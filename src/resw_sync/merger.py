#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Key merger — add missing entries to a Resources.resw file.

New ``data`` elements are spliced into the original file text just before
the closing ``</root>`` tag, so everything already in the file (XML
declaration, schema header, comments, existing entries) is written back
unchanged.
"""

import logging
import re
from dataclasses import dataclass, field

from lxml import etree

from resw_sync.config import SPACE, Settings, _
from resw_sync.errors import ParseError, StructuralError
from resw_sync.model import MergeResult

logger = logging.getLogger(__name__)

ROOT = "root"
DATA = "data"
NAME = "name"
VALUE = "value"
COMMENT = "comment"

_CLOSE_ROOT = re.compile(r"</root\s*>\Z")
_EMPTY_ROOT = re.compile(r"<root(\s[^>]*)?/>\Z")
_INDENT = re.compile(r"\n([ \t]+)$")


@dataclass
class ResourceFile:
    """A parsed resource document together with its original bytes."""
    path: str
    raw: bytes
    tree: object
    encoding: str = "utf-8"
    pending: list = field(default_factory=list)

    @property
    def root(self):
        return self.tree.getroot()


def _resource_parser():
    return etree.XMLParser(
        remove_blank_text=False,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def parse_resources(raw, path="<resources>"):
    """Parse resource bytes. Raises ParseError or StructuralError."""
    try:
        root = etree.fromstring(raw, _resource_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(
            _("Could not parse {}: {}").format(path, e),
            {"path": path}) from e
    if root.tag != ROOT:
        raise StructuralError(
            _("{} has no <root> element (found <{}>)").format(path, root.tag),
            {"path": path, "tag": root.tag})
    tree = root.getroottree()
    return ResourceFile(path, raw, tree, tree.docinfo.encoding or "utf-8")


def load_resources(path):
    with open(path, "rb") as f:
        raw = f.read()
    return parse_resources(raw, str(path))


def existing_names(resource):
    """Names of all ``data`` entries already in the document."""
    return {node.get(NAME) for node in resource.root.iter(DATA)}


def _detect_indent(root, default):
    for node in root.iter(DATA):
        prev = node.getprevious()
        space = prev.tail if prev is not None else node.getparent().text
        m = _INDENT.search(space or "")
        if m:
            return m.group(1)
    return default


def _data_element(key, value, indent):
    entry = etree.Element(DATA)
    entry.set(NAME, key)
    entry.set(SPACE, "preserve")
    entry.text = "\n" + indent * 2
    val = etree.SubElement(entry, VALUE)
    val.text = value
    val.tail = "\n" + indent * 2
    comment = etree.SubElement(entry, COMMENT)
    comment.text = ""
    comment.tail = "\n" + indent
    return entry


def merge(resource, keywords, settings=None):
    """Append a ``data`` entry for every key the document does not have yet.

    Returns ``(resource, MergeResult)``. Nothing is written here; see
    save_resources() and merge_file().
    """
    settings = settings or Settings()
    names = existing_names(resource)
    indent = _detect_indent(resource.root, settings.indent)
    added = 0
    for key, value in keywords.items():
        if key in names:
            continue
        entry = _data_element(key, value, indent)
        resource.pending.append(
            "\n" + indent + etree.tostring(entry, encoding="unicode"))
        resource.root.append(entry)
        names.add(key)
        added += 1
        logger.debug("Adding %s to %s", key, resource.path)
    return resource, MergeResult(resource.path, added)


def _root_end(text):
    """Index just past the root element, before any trailing comments/PIs."""
    end = len(text)
    while True:
        while end and text[end - 1].isspace():
            end -= 1
        if text.endswith("-->", 0, end):
            start = text.rfind("<!--", 0, end)
        elif text.endswith("?>", 0, end):
            start = text.rfind("<?", 0, end)
        else:
            return end
        if start < 0:
            return end
        end = start


def to_bytes(resource):
    """Serialize the document, keeping untouched bytes as they were.

    Characters the file's encoding cannot hold are written as character
    references.
    """
    if not resource.pending:
        return resource.raw
    text = resource.raw.decode(resource.encoding)
    fragment = "".join(resource.pending)
    end = _root_end(text)
    head, rest = text[:end], text[end:]

    closing = _CLOSE_ROOT.search(head)
    if closing is not None:
        # Insert after the last entry, before the whitespace that precedes
        # </root>, so the closing tag keeps its own indentation.
        pos = closing.start()
        while pos > 0 and head[pos - 1].isspace():
            pos -= 1
        if pos == closing.start():
            fragment += "\n"
        head = head[:pos] + fragment + head[pos:]
    else:
        m = _EMPTY_ROOT.search(head)
        if m is None:
            raise StructuralError(
                _("{} has no <root> element").format(resource.path),
                {"path": resource.path})
        head = "{}<root{}>{}\n</root>".format(
            head[:m.start()], m.group(1) or "", fragment)
    return (head + rest).encode(resource.encoding, "xmlcharrefreplace")


def save_resources(resource):
    data = to_bytes(resource)
    with open(resource.path, "wb") as f:
        f.write(data)
    resource.raw = data
    resource.pending = []


def merge_file(path, keywords, settings=None):
    """Load, merge and (only if something was added) write one file."""
    resource = load_resources(path)
    resource, result = merge(resource, keywords, settings)
    if result.added:
        save_resources(resource)
        logger.info("Added %d strings to %s", result.added, path)
    else:
        logger.debug("%s already has every key", path)
    return result

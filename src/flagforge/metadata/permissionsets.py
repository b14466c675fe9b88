#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Merging custom permission references into existing permission sets.

The merge edits the document text instead of re-serializing parsed XML, so an
existing file keeps its formatting and only gains one ``customPermissions``
block, placed where the Metadata API would put it: among the other
``customPermissions`` entries ordered by name, before the first element that
sorts after them.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from xml.sax.saxutils import unescape

from flagforge.exceptions import ProvisioningError
from flagforge.metadata.generator import custom_permission_block

_ROOT_TAG = "PermissionSet"
_BLOCK_TAG = "customPermissions"
_ELEMENT_OPEN = re.compile(r"^(?P<indent>[ \t]*)<(?P<tag>\w+)[ >/]", re.MULTILINE)
_BLOCK_NAME = re.compile(r"<name>(.*?)</name>", re.DOTALL)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def referenced_custom_permissions(content: str) -> list[str]:
    """Names of the custom permissions a permission set document references."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ProvisioningError(f"Permission set is not valid XML: {e}") from e

    names = []
    for element in root:
        if _local(element.tag) != _BLOCK_TAG:
            continue
        for child in element:
            if _local(child.tag) == "name" and child.text:
                names.append(child.text.strip())
    return names


def add_custom_permission(content: str, name: str) -> str:
    """Return ``content`` with an enabled reference to custom permission ``name``.

    Returns the document unchanged when it already references ``name``.
    """
    if name in referenced_custom_permissions(content):
        return content

    close_at = content.rfind(f"</{_ROOT_TAG}>")
    root_at = content.find(f"<{_ROOT_TAG}")
    if close_at < 0 or root_at < 0:
        raise ProvisioningError("Document is not a permission set")
    body_start = content.find(">", root_at) + 1

    insert_at = close_at
    top_indent: str | None = None
    for match in _ELEMENT_OPEN.finditer(content, body_start, close_at):
        if top_indent is None:
            top_indent = match["indent"]
        if match["indent"] != top_indent:
            continue
        tag = match["tag"]
        if tag == _BLOCK_TAG:
            block_end = content.find(f"</{_BLOCK_TAG}>", match.end())
            existing = _BLOCK_NAME.search(content, match.end(), block_end)
            if existing and unescape(existing.group(1).strip()) > name:
                insert_at = match.start()
                break
        elif tag > _BLOCK_TAG:
            insert_at = match.start()
            break

    return content[:insert_at] + custom_permission_block(name) + content[insert_at:]


# 🚩🧩🔚

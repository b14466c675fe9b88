#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for merging custom permissions into permission set documents."""

from __future__ import annotations

import pytest

from flagforge.exceptions import ProvisioningError
from flagforge.metadata.permissionsets import add_custom_permission, referenced_custom_permissions

NAMESPACE = "http://soap.sforce.com/2006/04/metadata"
HEADER = f'<?xml version="1.0" encoding="UTF-8"?>\n<PermissionSet xmlns="{NAMESPACE}">\n'
TAIL = "    <hasActivationRequired>false</hasActivationRequired>\n    <label>Ops</label>\n</PermissionSet>\n"


def block(name: str) -> str:
    return (
        "    <customPermissions>\n"
        "        <enabled>true</enabled>\n"
        f"        <name>{name}</name>\n"
        "    </customPermissions>\n"
    )


@pytest.mark.unit
class TestAddCustomPermission:
    def test_insert_into_set_without_permissions(self) -> None:
        merged = add_custom_permission(HEADER + TAIL, "MyFlag")
        assert merged == HEADER + block("MyFlag") + TAIL
        assert referenced_custom_permissions(merged) == ["MyFlag"]

    def test_keeps_entries_ordered_by_name(self) -> None:
        content = HEADER + block("Alpha") + block("Gamma") + "    <label>Ops</label>\n</PermissionSet>\n"
        merged = add_custom_permission(content, "Beta")
        assert referenced_custom_permissions(merged) == ["Alpha", "Beta", "Gamma"]

    def test_appends_after_last_entry(self) -> None:
        content = HEADER + block("Alpha") + "    <label>Ops</label>\n</PermissionSet>\n"
        merged = add_custom_permission(content, "Zulu")
        assert referenced_custom_permissions(merged) == ["Alpha", "Zulu"]
        assert merged.index("<name>Zulu</name>") < merged.index("<label>Ops</label>")

    def test_elements_sorting_before_block_stay_first(self) -> None:
        content = HEADER + "    <applicationVisibilities>\n        <application>App</application>\n" + (
            "    </applicationVisibilities>\n    <label>Ops</label>\n</PermissionSet>\n"
        )
        merged = add_custom_permission(content, "MyFlag")
        assert merged.index("</applicationVisibilities>") < merged.index("<customPermissions>")
        assert merged.index("<customPermissions>") < merged.index("<label>")

    def test_empty_root_gets_entry_before_close(self) -> None:
        merged = add_custom_permission(HEADER + "</PermissionSet>\n", "MyFlag")
        assert referenced_custom_permissions(merged) == ["MyFlag"]

    def test_idempotent(self) -> None:
        content = HEADER + block("MyFlag") + "    <label>Ops</label>\n</PermissionSet>\n"
        assert add_custom_permission(content, "MyFlag") == content
        once = add_custom_permission(HEADER + "</PermissionSet>\n", "Other")
        assert add_custom_permission(once, "Other") == once

    def test_rejects_other_documents(self) -> None:
        content = f'<?xml version="1.0"?>\n<Profile xmlns="{NAMESPACE}">\n</Profile>\n'
        with pytest.raises(ProvisioningError):
            add_custom_permission(content, "MyFlag")

    def test_rejects_malformed_xml(self) -> None:
        with pytest.raises(ProvisioningError, match="not valid XML"):
            add_custom_permission("<PermissionSet>", "MyFlag")


# 🚩🧩🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Metadata document generation.

Every generator is pure: it only formats its arguments into a fixed-shape
XML document and computes where that document lives below a package source
directory. Nothing here touches the disk.
"""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape

from flagforge.config.defaults import (
    CUSTOM_METADATA_DIR,
    CUSTOM_METADATA_SUFFIX,
    CUSTOM_PERMISSION_SUFFIX,
    CUSTOM_PERMISSIONS_DIR,
    CUSTOM_SUFFIX,
    FEATURE_FLAG_TYPE,
    FIELD_SUFFIX,
    FIELDS_DIR,
    METADATA_NAMESPACE,
    OBJECT_SUFFIX,
    OBJECTS_DIR,
    PERMISSION_SET_SUFFIX,
    PERMISSION_SETS_DIR,
    SETTINGS_TYPE_HIERARCHY,
)
from flagforge.models import FlagType, MetadataFile, SettingsObject

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def setting_reference(flag_name: str, settings_object: SettingsObject | None) -> str:
    """Value of the flag record's ``Setting__c`` field.

    Settings-backed flags point at their checkbox field, permission-backed
    flags at the custom permission itself.
    """
    if settings_object is None:
        return flag_name
    return f"{settings_object.api_name}.{flag_name}{CUSTOM_SUFFIX}"


def generate_custom_setting_field(object_name: str, name: str, label: str, package_dir: Path) -> MetadataFile:
    """Checkbox field on a settings object, defaulting to false."""
    content = XML_DECLARATION
    content += f'<CustomField xmlns="{METADATA_NAMESPACE}">\n'
    content += f"    <fullName>{name}{CUSTOM_SUFFIX}</fullName>\n"
    content += "    <defaultValue>false</defaultValue>\n"
    content += "    <externalId>false</externalId>\n"
    content += f"    <label>{escape(label)}</label>\n"
    content += "    <trackTrending>false</trackTrending>\n"
    content += "    <type>Checkbox</type>\n"
    content += "</CustomField>\n"
    dir_path = package_dir / OBJECTS_DIR / f"{object_name}{CUSTOM_SUFFIX}" / FIELDS_DIR
    file_path = dir_path / f"{name}{CUSTOM_SUFFIX}{FIELD_SUFFIX}"
    return MetadataFile(content=content, dir_path=dir_path, file_path=file_path)


def generate_custom_settings_object(object_name: str, package_dir: Path) -> MetadataFile:
    """Hierarchy custom settings object definition."""
    content = XML_DECLARATION
    content += f'<CustomObject xmlns="{METADATA_NAMESPACE}">\n'
    content += f"    <customSettingsType>{SETTINGS_TYPE_HIERARCHY}</customSettingsType>\n"
    content += "    <enableFeeds>false</enableFeeds>\n"
    content += f"    <label>{escape(object_name)}</label>\n"
    content += "    <visibility>Public</visibility>\n"
    content += "</CustomObject>\n"
    dir_path = package_dir / OBJECTS_DIR / f"{object_name}{CUSTOM_SUFFIX}"
    file_path = dir_path / f"{object_name}{CUSTOM_SUFFIX}{OBJECT_SUFFIX}"
    return MetadataFile(content=content, dir_path=dir_path, file_path=file_path)


def generate_custom_metadata_record(
    label: str,
    category: str,
    flag_type: FlagType,
    setting: str,
    name: str,
    package_dir: Path,
) -> MetadataFile:
    """The ``Feature_Flag`` custom metadata record describing a flag."""
    content = XML_DECLARATION
    content += (
        f'<CustomMetadata xmlns="{METADATA_NAMESPACE}" '
        'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
        'xmlns:xsd="http://www.w3.org/2001/XMLSchema">\n'
    )
    content += f"    <label>{escape(label)}</label>\n"
    content += "    <protected>false</protected>\n"
    for field_name, value in (
        ("Category__c", category),
        ("Setting__c", setting),
        ("Type__c", flag_type.value),
    ):
        content += "    <values>\n"
        content += f"        <field>{field_name}</field>\n"
        content += f'        <value xsi:type="xsd:string">{escape(value)}</value>\n'
        content += "    </values>\n"
    content += "</CustomMetadata>\n"
    dir_path = package_dir / CUSTOM_METADATA_DIR
    file_path = dir_path / f"{FEATURE_FLAG_TYPE}.{name}{CUSTOM_METADATA_SUFFIX}"
    return MetadataFile(content=content, dir_path=dir_path, file_path=file_path)


def generate_custom_permission(label: str, name: str, package_dir: Path) -> MetadataFile:
    """Unlicensed custom permission."""
    content = XML_DECLARATION
    content += f'<CustomPermission xmlns="{METADATA_NAMESPACE}">\n'
    content += "    <isLicensed>false</isLicensed>\n"
    content += f"    <label>{escape(label)}</label>\n"
    content += "</CustomPermission>\n"
    dir_path = package_dir / CUSTOM_PERMISSIONS_DIR
    file_path = dir_path / f"{name}{CUSTOM_PERMISSION_SUFFIX}"
    return MetadataFile(content=content, dir_path=dir_path, file_path=file_path)


def generate_permission_set(
    ps_name: str, ps_label: str, custom_permission: str, package_dir: Path
) -> MetadataFile:
    """Permission set granting exactly one custom permission."""
    content = XML_DECLARATION
    content += f'<PermissionSet xmlns="{METADATA_NAMESPACE}">\n'
    content += custom_permission_block(custom_permission)
    content += "    <hasActivationRequired>false</hasActivationRequired>\n"
    content += f"    <label>{escape(ps_label)}</label>\n"
    content += "    <license>Salesforce</license>\n"
    content += "</PermissionSet>\n"
    dir_path = package_dir / PERMISSION_SETS_DIR
    file_path = dir_path / f"{ps_name}{PERMISSION_SET_SUFFIX}"
    return MetadataFile(content=content, dir_path=dir_path, file_path=file_path)


def custom_permission_block(name: str) -> str:
    """An enabled ``customPermissions`` entry at permission set nesting depth."""
    return (
        "    <customPermissions>\n"
        "        <enabled>true</enabled>\n"
        f"        <name>{escape(name)}</name>\n"
        "    </customPermissions>\n"
    )


def build_object_deploy_bundle(full_name: str, label: str, api_version: str) -> dict[str, str]:
    """Metadata API bundle (relative path -> content) that creates a settings object."""
    package_xml = XML_DECLARATION
    package_xml += f'<Package xmlns="{METADATA_NAMESPACE}">\n'
    package_xml += "    <types>\n"
    package_xml += f"        <members>{escape(full_name)}</members>\n"
    package_xml += "        <name>CustomObject</name>\n"
    package_xml += "    </types>\n"
    package_xml += f"    <version>{escape(api_version)}</version>\n"
    package_xml += "</Package>\n"

    object_xml = XML_DECLARATION
    object_xml += f'<CustomObject xmlns="{METADATA_NAMESPACE}">\n'
    object_xml += f"    <customSettingsType>{SETTINGS_TYPE_HIERARCHY}</customSettingsType>\n"
    object_xml += "    <enableFeeds>false</enableFeeds>\n"
    object_xml += f"    <label>{escape(label)}</label>\n"
    object_xml += "    <visibility>Public</visibility>\n"
    object_xml += "</CustomObject>\n"

    return {
        "package.xml": package_xml,
        f"{OBJECTS_DIR}/{full_name}.object": object_xml,
    }


# 🚩🧩🔚

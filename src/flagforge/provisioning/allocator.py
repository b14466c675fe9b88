#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Capacity-aware allocation of custom settings objects."""

from __future__ import annotations

from provide.foundation import logger

from flagforge.config.defaults import CUSTOM_SUFFIX, DEFAULT_SETTINGS_CAPACITY, SETTINGS_OBJECT_PREFIX
from flagforge.exceptions import RemoteOperationError
from flagforge.models import SettingsObject
from flagforge.remote.base import CustomObjectDefinition, ObjectDescription, RemoteOrg


def count_custom_fields(description: ObjectDescription) -> int:
    return sum(1 for name in description.fields if name.endswith(CUSTOM_SUFFIX))


class CapacityAllocator:
    """Finds the first settings object with room for another flag field.

    Objects are probed in order (``Feature1__c``, ``Feature2__c``, ...). The
    first one that exists and holds fewer than ``capacity`` custom fields is
    used. The first index that cannot be described gets a new object.

    Probing and creating are separate remote calls, so two concurrent runs can
    both decide to create the same object.
    """

    def __init__(
        self,
        remote: RemoteOrg,
        capacity: int = DEFAULT_SETTINGS_CAPACITY,
        prefix: str = SETTINGS_OBJECT_PREFIX,
    ) -> None:
        self.remote = remote
        self.capacity = capacity
        self.prefix = prefix

    def allocate(self) -> SettingsObject:
        index = 0
        while True:
            index += 1
            candidate = SettingsObject(name=f"{self.prefix}{index}")
            try:
                description = self.remote.describe_object(candidate.api_name)
            except RemoteOperationError as e:
                logger.debug("Settings object not found", object=candidate.api_name, reason=str(e))
                return self._create(candidate)

            candidate.field_count = count_custom_fields(description)
            if candidate.field_count < self.capacity:
                logger.info(
                    "🗃️ Settings object selected",
                    object=candidate.api_name,
                    field_count=candidate.field_count,
                    capacity=self.capacity,
                )
                return candidate
            logger.debug("Settings object full", object=candidate.api_name, field_count=candidate.field_count)

    def _create(self, candidate: SettingsObject) -> SettingsObject:
        definition = CustomObjectDefinition(full_name=candidate.api_name, label=candidate.name)
        try:
            self.remote.create_object(definition)
        except RemoteOperationError as e:
            # Flag metadata is still generated; the object deploys with the batch.
            logger.error("Settings object creation failed", object=candidate.api_name, error=str(e))
        else:
            candidate.created = True
            logger.info("🆕 Settings object created", object=candidate.api_name)
        return candidate


# 🚩🧩🔚

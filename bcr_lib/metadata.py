# -*- coding: utf-8 -*-
"""Ordered key/value store for header and trailer entries."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from collections.abc import Mapping
from types import MappingProxyType

from bcr_lib.enums import DuplicateKeyPolicy
from bcr_lib.errors import BcrDuplicateKeyError
from bcr_lib.errors import SourceLocation

logger = logging.getLogger(__name__)


class MetadataMap(Mapping[str, str]):
    """Insertion-ordered metadata with a configurable duplicate-key policy.

    Keys are stored exactly as written in the file.
    """

    def __init__(
        self,
        policy: DuplicateKeyPolicy = DuplicateKeyPolicy.OVERWRITE,
    ) -> None:
        self.policy = policy
        self._entries: dict[str, str] = {}

    def add(
        self,
        key: str,
        value: str,
        location: SourceLocation | None = None,
    ) -> None:
        """Insert an entry, applying the duplicate-key policy.

        Raises:
            BcrDuplicateKeyError: If the key exists and the policy is ERROR
        """
        if key in self._entries:
            match self.policy:
                case DuplicateKeyPolicy.ERROR:
                    raise BcrDuplicateKeyError(
                        f"duplicate metadata key: {key}", location
                    )
                case DuplicateKeyPolicy.KEEP_FIRST:
                    logger.debug("Ignoring repeated metadata key `%s`", key)
                    return
                case DuplicateKeyPolicy.OVERWRITE:
                    logger.debug("Overwriting metadata key `%s`", key)
                    del self._entries[key]
        self._entries[key] = value

    def as_mapping(self) -> Mapping[str, str]:
        """Read-only live view of the entries."""
        return MappingProxyType(self._entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MetadataMap({self._entries!r}, policy={self.policy.value})"

"""Enumerations for the dictionary file format."""

from __future__ import annotations

from enum import StrEnum

from gboard_dictionary.utils.constants import FILE_HEADER, FILE_WITH_CATEGORIES_HEADER


class FileVariant(StrEnum):
    """The two dictionary file layouts, told apart by their header line."""

    PLAIN = "plain"
    WITH_CATEGORIES = "with_categories"

    @property
    def header(self) -> str:
        """Exact first line of a file in this variant."""
        if self is FileVariant.WITH_CATEGORIES:
            return FILE_WITH_CATEGORIES_HEADER
        return FILE_HEADER

    @property
    def field_count(self) -> int:
        """Number of tab-separated fields on each record line."""
        return 4 if self is FileVariant.WITH_CATEGORIES else 3

    @classmethod
    def from_header(cls, line: str | None) -> FileVariant | None:
        """Detect the variant of a header line.

        Args:
            line: First line of a file, without its line terminator.

        Returns:
            The matching ``FileVariant`` or ``None`` for an unknown header.
        """
        for variant in cls:
            if line == variant.header:
                return variant
        return None

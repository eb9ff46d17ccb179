"""Domain model: DictionaryRecord and record-list helpers."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence

from gboard_dictionary.models.enums import FileVariant
from gboard_dictionary.utils.constants import (
    LANGUAGE_CODE_PATTERN,
    MAX_FIELD_LENGTH,
    SEPARATOR,
)
from gboard_dictionary.utils.exceptions import (
    EmptyKeyError,
    EmptyValueError,
    FieldTooLongError,
    IllegalCharacterError,
    InvalidLanguageCodeError,
    MalformedLineError,
)

_FORBIDDEN_CHARS = (SEPARATOR, "\n", "\r")


@dataclass(slots=True)
class DictionaryRecord:
    """One entry of a Gboard dictionary.

    Attributes:
        key: The typed word (shortcut) looked up by the keyboard.
        value: Text inserted when the word is chosen.
        language_code: ISO 639-1 code, optionally with a region (``es-ES``),
            or empty for every language.
        category: Extra grouping label, only stored in the
            with-categories variant.
    """

    key: str
    value: str
    language_code: str = ""
    category: str = ""

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the record invariants.

        Fields are settable, so call this again after editing a record in
        memory.

        Raises:
            EmptyKeyError: If ``key`` is empty.
            EmptyValueError: If ``value`` is empty.
            InvalidLanguageCodeError: If ``language_code`` is malformed.
            FieldTooLongError: If ``key`` or ``value`` is too long.
            IllegalCharacterError: If a field holds a tab or line break.
        """
        if not self.key:
            raise EmptyKeyError(self.value)
        if not self.value:
            raise EmptyValueError(self.key)
        if self.language_code and not LANGUAGE_CODE_PATTERN.fullmatch(self.language_code):
            raise InvalidLanguageCodeError(self.language_code)
        for name in ("key", "value"):
            length = len(getattr(self, name))
            if length > MAX_FIELD_LENGTH:
                raise FieldTooLongError(name, length, MAX_FIELD_LENGTH)
        for name in ("key", "value", "category"):
            text = getattr(self, name)
            if any(ch in text for ch in _FORBIDDEN_CHARS):
                raise IllegalCharacterError(name, text)

    # --- Serialization ---

    def to_line(self) -> str:
        """Plain form: ``key<TAB>value<TAB>language_code``."""
        return SEPARATOR.join((self.key, self.value, self.language_code))

    def to_line_with_category(self) -> str:
        """With-categories form: plain form plus ``<TAB>category``."""
        return SEPARATOR.join((self.key, self.value, self.language_code, self.category))

    def serialize(self, variant: FileVariant) -> str:
        if variant is FileVariant.WITH_CATEGORIES:
            return self.to_line_with_category()
        return self.to_line()

    @classmethod
    def from_fields(
        cls,
        fields: Sequence[str],
        variant: FileVariant = FileVariant.PLAIN,
        path: str | PathLike[str] = "<memory>",
        line_number: int = 0,
    ) -> DictionaryRecord:
        """Build a record from a line already split on the separator.

        Args:
            fields: ``[key, value, language_code]`` plus ``category`` for
                the with-categories variant.
            variant: Layout the fields come from.
            path: Source file, only used in error messages.
            line_number: 1-based line in *path*, only used in error messages.

        Raises:
            MalformedLineError: If the field count does not match *variant*.
        """
        if len(fields) != variant.field_count:
            raise MalformedLineError(path, line_number, SEPARATOR.join(fields))
        category = fields[3] if variant is FileVariant.WITH_CATEGORIES else ""
        return cls(fields[0], fields[1], fields[2], category)

    @classmethod
    def parse(
        cls,
        line: str,
        variant: FileVariant = FileVariant.PLAIN,
        path: str | PathLike[str] = "<memory>",
        line_number: int = 0,
    ) -> DictionaryRecord:
        """Split a raw line (without terminator) and build a record from it."""
        return cls.from_fields(line.split(SEPARATOR), variant, path, line_number)


def sort_by_value(records: Iterable[DictionaryRecord]) -> list[DictionaryRecord]:
    """Return records stably sorted by ``value``, the order Gboard stores them in.

    Values compare by UTF-16 code unit, as on Android: a character outside
    the BMP (an emoji) sorts before U+E000..U+FFFF.
    """
    return sorted(records, key=lambda r: r.value.encode("utf-16-be"))


def group_by_category(
    records: Iterable[DictionaryRecord],
) -> dict[str, list[DictionaryRecord]]:
    """Group records by category, keeping encounter order inside each group.

    Records without a category end up under the ``""`` key.
    """
    groups: dict[str, list[DictionaryRecord]] = {}
    for record in records:
        groups.setdefault(record.category, []).append(record)
    return groups

"""Path-based dictionary operations over the Gboard text format.

Every function opens, reads or rewrites the file at *path* and returns; no
state is kept between calls. Mutations are full read-modify-write round
trips and assume a single writer per file: callers that share a path
between threads or processes must serialize access themselves.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from gboard_dictionary.config.settings import AppSettings, SettingsManager
from gboard_dictionary.data.text_adapter import GBoardTextAdapter, read_header
from gboard_dictionary.models.enums import FileVariant
from gboard_dictionary.models.record import DictionaryRecord, group_by_category
from gboard_dictionary.utils.exceptions import WrongFileVariantError
from gboard_dictionary.utils.logging_config import get_logger

logger = get_logger("core.dictionary_store")

StrPath = Union[str, PathLike[str]]
RecordOrKey = Union[DictionaryRecord, str]

__all__ = [
    "read_all",
    "read_all_with_category",
    "read_one",
    "read_one_with_category",
    "write_all",
    "write_all_with_category",
    "insert",
    "insert_with_category",
    "delete",
    "delete_with_category",
    "list_categories",
    "list_language_codes",
    "group_by_category",
    "detect_variant",
    "create",
]


def _adapter(variant: FileVariant, settings: AppSettings | None) -> GBoardTextAdapter:
    settings = settings or SettingsManager().settings
    return GBoardTextAdapter(
        variant,
        encoding=settings.storage.encoding,
        atomic_writes=settings.storage.atomic_writes,
    )


# --- Reading ---

def read_all(path: StrPath, settings: AppSettings | None = None) -> list[DictionaryRecord]:
    """Read every record of a plain dictionary file, in file order.

    Raises:
        NotADictionaryFileError: If the first line is not the plain header.
        MalformedLineError: If a line does not have exactly three fields.
        RecordError: If a line holds an invalid record.
        StorageError: On I/O failures.
    """
    return _adapter(FileVariant.PLAIN, settings).load(Path(path))


def read_all_with_category(
    path: StrPath, settings: AppSettings | None = None
) -> list[DictionaryRecord]:
    """Read every record of a dictionary-with-categories file, in file order.

    Raises:
        NotADictionaryWithCategoriesFileError: If the header does not match.
        MalformedLineError: If a line does not have exactly four fields.
    """
    return _adapter(FileVariant.WITH_CATEGORIES, settings).load(Path(path))


def read_one(
    key: str, path: StrPath, settings: AppSettings | None = None
) -> DictionaryRecord | None:
    """Return the first record with *key* in a plain file, or ``None``."""
    return _adapter(FileVariant.PLAIN, settings).find(key, Path(path))


def read_one_with_category(
    key: str, path: StrPath, settings: AppSettings | None = None
) -> DictionaryRecord | None:
    """Return the first record with *key* in a with-categories file, or ``None``."""
    return _adapter(FileVariant.WITH_CATEGORIES, settings).find(key, Path(path))


# --- Writing ---

def write_all(
    records: Iterable[DictionaryRecord], path: StrPath, settings: AppSettings | None = None
) -> None:
    """Replace *path* with a plain dictionary holding *records* sorted by value.

    Categories are not written; the result only reads back with
    :func:`read_all`.
    """
    _adapter(FileVariant.PLAIN, settings).save(list(records), Path(path))


def write_all_with_category(
    records: Iterable[DictionaryRecord], path: StrPath, settings: AppSettings | None = None
) -> None:
    """Replace *path* with a dictionary-with-categories holding *records*.

    The header differs from the plain one, so the result can't be read with
    :func:`read_all` (nor imported by Gboard as a plain dictionary).
    """
    _adapter(FileVariant.WITH_CATEGORIES, settings).save(list(records), Path(path))


def insert(record: DictionaryRecord, path: StrPath, settings: AppSettings | None = None) -> None:
    """Add *record* to a plain file, keeping the records sorted by value."""
    _insert(record, Path(path), _adapter(FileVariant.PLAIN, settings))


def insert_with_category(
    record: DictionaryRecord, path: StrPath, settings: AppSettings | None = None
) -> None:
    """Add *record* to a with-categories file, keeping the records sorted by value."""
    _insert(record, Path(path), _adapter(FileVariant.WITH_CATEGORIES, settings))


def delete(target: RecordOrKey, path: StrPath, settings: AppSettings | None = None) -> int:
    """Remove every record sharing *target*'s key from a plain file.

    Args:
        target: A record or a bare key.
        path: Dictionary file.

    Returns:
        Number of records removed; ``0`` when the key is absent.
    """
    return _delete(target, Path(path), _adapter(FileVariant.PLAIN, settings))


def delete_with_category(
    target: RecordOrKey, path: StrPath, settings: AppSettings | None = None
) -> int:
    """Remove every record sharing *target*'s key from a with-categories file."""
    return _delete(target, Path(path), _adapter(FileVariant.WITH_CATEGORIES, settings))


# --- Enumeration ---

def list_categories(path: StrPath, settings: AppSettings | None = None) -> set[str]:
    """Distinct categories of a with-categories file (``""`` included if used)."""
    return {r.category for r in read_all_with_category(path, settings)}


def list_language_codes(path: StrPath, settings: AppSettings | None = None) -> set[str]:
    """Distinct language codes of a with-categories file."""
    return {r.language_code for r in read_all_with_category(path, settings)}


# --- File helpers ---

def detect_variant(path: StrPath, settings: AppSettings | None = None) -> FileVariant:
    """Tell which dictionary variant *path* holds from its header.

    Raises:
        WrongFileVariantError: If the first line is neither header
            (``expected`` is ``None``).
        StorageError: On I/O failures.
        DictionaryFormatError: If the header is not valid text in the
            configured encoding.
    """
    settings = settings or SettingsManager().settings
    path = Path(path)
    first_line = read_header(path, settings.storage.encoding)
    variant = FileVariant.from_header(first_line)
    if variant is None:
        raise WrongFileVariantError(path, None, first_line)
    return variant


def create(
    path: StrPath,
    variant: FileVariant = FileVariant.PLAIN,
    settings: AppSettings | None = None,
) -> bool:
    """Write an empty dictionary (header only) unless *path* already exists.

    Returns:
        ``True`` if a file was created.
    """
    adapter = _adapter(variant, settings)
    path = Path(path)
    if adapter.exists(path):
        return False
    adapter.save([], path)
    return True


# --- Internal ---

def _insert(record: DictionaryRecord, path: Path, adapter: GBoardTextAdapter) -> None:
    records = adapter.load(path)
    records.append(record)
    adapter.save(records, path)
    logger.info("Inserted '%s' into %s", record.key, path)


def _delete(target: RecordOrKey, path: Path, adapter: GBoardTextAdapter) -> int:
    key = target.key if isinstance(target, DictionaryRecord) else target
    records = adapter.load(path)
    kept = [r for r in records if r.key != key]
    adapter.save(kept, path)
    removed = len(records) - len(kept)
    logger.info("Deleted %d record(s) with key '%s' from %s", removed, key, path)
    return removed

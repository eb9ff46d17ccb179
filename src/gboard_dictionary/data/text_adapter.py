"""Gboard text file persistence adapter."""

from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import closing
from pathlib import Path
from typing import Iterator, TextIO

from gboard_dictionary.data.repository import DictionaryRepository
from gboard_dictionary.models.enums import FileVariant
from gboard_dictionary.models.record import DictionaryRecord, sort_by_value
from gboard_dictionary.utils.constants import DEFAULT_ENCODING
from gboard_dictionary.utils.exceptions import (
    DictionaryFormatError,
    NotADictionaryFileError,
    NotADictionaryWithCategoriesFileError,
    StorageError,
)
from gboard_dictionary.utils.logging_config import get_logger

logger = get_logger("data.text")


def read_first_line(fh: TextIO) -> str | None:
    """Read the header line of an open file, ``None`` for an empty file."""
    line = fh.readline()
    if not line:
        return None
    return line.rstrip("\n")


def storage_error(exc: OSError, message: str, path: Path) -> StorageError:
    """Wrap a platform error, keeping its ``errno``, ``strerror`` and ``filename``."""
    if exc.errno is None:
        return StorageError(f"{message}: {exc}")
    return StorageError(exc.errno, f"{message}: {exc.strerror}", str(path))


def decode_error(exc: UnicodeDecodeError, path: Path, encoding: str) -> DictionaryFormatError:
    return DictionaryFormatError(f"'{path}' is not valid {encoding} text: {exc}")


def read_header(path: Path, encoding: str = DEFAULT_ENCODING) -> str | None:
    """Return the first line of *path*, ``None`` for an empty file.

    Raises:
        StorageError: If the file cannot be opened or read.
        DictionaryFormatError: If the first line is not valid *encoding* text.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding) as fh:
            return read_first_line(fh)
    except OSError as exc:
        raise storage_error(exc, f"Failed to read {path}", path) from exc
    except UnicodeDecodeError as exc:
        raise decode_error(exc, path, encoding) from exc


class GBoardTextAdapter(DictionaryRepository):
    """Persist records as a Gboard dictionary text file.

    One adapter handles one :class:`FileVariant`: it only reads files that
    start with that variant's header and always writes that header.
    """

    def __init__(
        self,
        variant: FileVariant = FileVariant.PLAIN,
        encoding: str = DEFAULT_ENCODING,
        atomic_writes: bool = True,
    ) -> None:
        self.variant = variant
        self.encoding = encoding
        self.atomic_writes = atomic_writes

    def save(self, records: list[DictionaryRecord], path: Path) -> None:
        """Write records to *path*, sorted by value, under the variant header.

        The content is staged in a temporary file next to *path* and moved
        over it once complete, unless atomic writes are disabled.

        Raises:
            StorageError: On file write failures.
        """
        path = Path(path)
        sorted_records = sort_by_value(records)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if self.atomic_writes:
                self._write_staged(sorted_records, path)
            else:
                with open(path, "w", encoding=self.encoding, newline="\n") as fh:
                    self._write_records(sorted_records, fh)
        except OSError as exc:
            raise storage_error(exc, f"Failed to write dictionary to {path}", path) from exc
        logger.info(
            "Dictionary saved to %s (%d records, %s)",
            path, len(sorted_records), self.variant,
        )

    def load(self, path: Path) -> list[DictionaryRecord]:
        """Read every record of *path* in file order.

        Raises:
            StorageError: If the file cannot be opened or read.
            WrongFileVariantError: If the header is not this variant's.
            MalformedLineError: On a line with the wrong number of fields.
            RecordError: On a line holding an invalid record.
        """
        path = Path(path)
        records = list(self._scan(path))
        logger.debug("Loaded %d records from %s", len(records), path)
        return records

    def find(self, key: str, path: Path) -> DictionaryRecord | None:
        """Return the first record with *key*, stopping the scan there."""
        path = Path(path)
        with closing(self._scan(path)) as records:
            for record in records:
                if record.key == key:
                    logger.debug("Found '%s' in %s", key, path)
                    return record
        logger.debug("Key '%s' not found in %s", key, path)
        return None

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    # --- Internal ---

    def _scan(self, path: Path) -> Iterator[DictionaryRecord]:
        """Yield records line by line after checking the header.

        The file stays open only while the generator runs; closing or
        abandoning the generator releases it.
        """
        try:
            with open(path, "r", encoding=self.encoding) as fh:
                self._check_header(read_first_line(fh), path)
                # Header is line 1
                for line_number, line in enumerate(fh, start=2):
                    yield DictionaryRecord.parse(
                        line.rstrip("\n"), self.variant, path, line_number
                    )
        except OSError as exc:
            raise storage_error(exc, f"Failed to read {path}", path) from exc
        except UnicodeDecodeError as exc:
            raise decode_error(exc, path, self.encoding) from exc

    def _check_header(self, first_line: str | None, path: Path) -> None:
        if first_line == self.variant.header:
            return
        error_cls = (
            NotADictionaryWithCategoriesFileError
            if self.variant is FileVariant.WITH_CATEGORIES
            else NotADictionaryFileError
        )
        raise error_cls(path, self.variant.header, first_line, expected=self.variant)

    def _write_records(self, records: list[DictionaryRecord], fh: TextIO) -> None:
        fh.write(self.variant.header)
        fh.write("\n")
        for record in records:
            fh.write(record.serialize(self.variant))
            fh.write("\n")

    def _write_staged(self, records: list[DictionaryRecord], path: Path) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="\n") as fh:
                self._write_records(records, fh)
                fh.flush()
                os.fsync(fh.fileno())
            # mkstemp creates the file 0600; keep the permissions of the file it replaces
            if path.exists():
                shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

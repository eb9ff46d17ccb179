"""Иерархия исключений библиотеки словаря."""

from __future__ import annotations

from os import PathLike
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gboard_dictionary.models.enums import FileVariant


class GBoardDictionaryError(Exception):
    """Базовое исключение для всех ошибок библиотеки."""


# Ошибки проверки записей

class RecordError(GBoardDictionaryError):
    """Базовый класс ошибок некорректных записей словаря."""


class EmptyKeyError(RecordError):
    """Вызывается при создании записи с пустым ключом."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"The key with value '{value}' can't be empty.")


class EmptyValueError(RecordError):
    """Вызывается при создании записи с пустым значением."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"The value with key '{key}' can't be empty.")


class InvalidLanguageCodeError(RecordError):
    """Вызывается, если непустой код языка не имеет вида ``xx`` или ``xx-YY``."""

    def __init__(self, language_code: str) -> None:
        self.language_code = language_code
        super().__init__(
            f"The language code '{language_code}' is not in the correct format"
        )


class FieldTooLongError(RecordError):
    """Вызывается, если ключ или значение длиннее допустимого."""

    def __init__(self, field: str, length: int, limit: int) -> None:
        self.field = field
        self.length = length
        self.limit = limit
        super().__init__(
            f"The {field} is {length} characters long (maximum is {limit})"
        )


class IllegalCharacterError(RecordError):
    """Вызывается, если поле содержит разделитель или перевод строки."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"The {field} {value!r} contains a tab or line break"
        )


# Ошибки формата файла

class DictionaryFormatError(GBoardDictionaryError):
    """Базовый класс ошибок файлов, не соответствующих формату словаря."""


class MalformedLineError(DictionaryFormatError):
    """Вызывается, если в строке данных не то число полей, что требует вариант файла."""

    def __init__(
        self, path: str | PathLike[str], line_number: int, line: str = ""
    ) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed line {line_number} in '{path}': {line!r}")


class WrongFileVariantError(DictionaryFormatError):
    """Вызывается, если первая строка не является заголовком запрошенного варианта.

    ``expected`` хранит запрошенный :class:`FileVariant` или ``None``, если
    подошёл бы любой известный заголовок.
    """

    def __init__(
        self,
        path: str | PathLike[str],
        expected_header: str | None,
        actual_first_line: str | None,
        expected: FileVariant | None = None,
    ) -> None:
        self.path = path
        self.expected_header = expected_header
        self.actual_first_line = actual_first_line
        self.expected = expected
        msg = f"'{path}' starts with {actual_first_line!r}"
        if expected_header is not None:
            msg += f", expected {expected_header!r}"
        super().__init__(msg)


class NotADictionaryFileError(WrongFileVariantError):
    """Файл не является обычным словарём Gboard."""


class NotADictionaryWithCategoriesFileError(WrongFileVariantError):
    """Файл не является словарём Gboard с категориями."""


# Ошибки сохранения

class PersistenceError(GBoardDictionaryError):
    """Базовый класс ошибок сохранения данных."""


class StorageError(PersistenceError, OSError):
    """Вызывается при ошибках файлового ввода-вывода.

    Остаётся :class:`OSError` с исходными ``errno`` и ``filename``.
    """


# Ошибки конфигурации

class ConfigurationError(GBoardDictionaryError):
    """Вызывается при ошибках загрузки или сохранения конфигурации."""

"""Read, edit and write Gboard personal dictionary files."""

from gboard_dictionary.core.dictionary_store import (
    create,
    delete,
    delete_with_category,
    detect_variant,
    insert,
    insert_with_category,
    list_categories,
    list_language_codes,
    read_all,
    read_all_with_category,
    read_one,
    read_one_with_category,
    write_all,
    write_all_with_category,
)
from gboard_dictionary.models import DictionaryRecord, FileVariant, group_by_category, sort_by_value
from gboard_dictionary.utils.constants import (
    APP_VERSION as __version__,
    FILE_HEADER,
    FILE_WITH_CATEGORIES_HEADER,
    SEPARATOR,
)
from gboard_dictionary.utils.exceptions import (
    DictionaryFormatError,
    EmptyKeyError,
    EmptyValueError,
    FieldTooLongError,
    GBoardDictionaryError,
    IllegalCharacterError,
    InvalidLanguageCodeError,
    MalformedLineError,
    NotADictionaryFileError,
    NotADictionaryWithCategoriesFileError,
    RecordError,
    StorageError,
    WrongFileVariantError,
)

__all__ = [
    "DictionaryRecord",
    "FileVariant",
    "group_by_category",
    "sort_by_value",
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
    "detect_variant",
    "create",
    "FILE_HEADER",
    "FILE_WITH_CATEGORIES_HEADER",
    "SEPARATOR",
    "GBoardDictionaryError",
    "RecordError",
    "EmptyKeyError",
    "EmptyValueError",
    "InvalidLanguageCodeError",
    "FieldTooLongError",
    "IllegalCharacterError",
    "DictionaryFormatError",
    "MalformedLineError",
    "WrongFileVariantError",
    "NotADictionaryFileError",
    "NotADictionaryWithCategoriesFileError",
    "StorageError",
]

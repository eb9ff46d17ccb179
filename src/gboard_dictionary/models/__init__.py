"""Domain models of the dictionary library."""

from gboard_dictionary.models.enums import FileVariant
from gboard_dictionary.models.record import DictionaryRecord, group_by_category, sort_by_value

__all__ = [
    "FileVariant",
    "DictionaryRecord",
    "group_by_category",
    "sort_by_value",
]

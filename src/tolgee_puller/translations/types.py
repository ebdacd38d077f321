"""Type aliases for the in-memory resource structures."""

from typing import TypeAlias

LanguageTag: TypeAlias = str
Namespace: TypeAlias = str
MessageKey: TypeAlias = str

# A leaf translation or a nested group of messages
Message: TypeAlias = "str | dict[MessageKey, Message]"

# language -> namespace -> messages, except that messages of the default
# namespace sit directly at the language level
ResourceTree: TypeAlias = dict[LanguageTag, dict[str, Message]]

# flattened message key -> variables missing from at least one language
Outliers: TypeAlias = dict[MessageKey, set[str]]

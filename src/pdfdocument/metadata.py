"""
Metadata Store - Immutable document metadata.

Holds the info dictionary entries (author, creator, subject, title,
keywords) and custom properties. Every setter returns a new store.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, FrozenSet, Mapping, Union

from .encoding import decode_pdf_text, encode_pdf_text

FIELDS = ("author", "creator", "subject", "title", "keywords")

KEYWORD_SEPARATOR = ", "


def _freeze(properties: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(properties))


@dataclass(frozen=True)
class MetadataStore:
    """Document metadata snapshot."""

    author: str = ""
    creator: str = ""
    subject: str = ""
    title: str = ""
    keywords: str = ""
    custom_properties: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    is_utf8: bool = False
    encoded: FrozenSet[str] = frozenset()
    transcoder: Callable[[str], str] = field(
        default=encode_pdf_text, compare=False, repr=False
    )
    decoder: Callable[[str], str] = field(
        default=decode_pdf_text, compare=False, repr=False
    )

    def __post_init__(self):
        if not isinstance(self.custom_properties, MappingProxyType):
            object.__setattr__(
                self, "custom_properties", _freeze(self.custom_properties)
            )

    def __hash__(self):
        return hash((
            tuple(getattr(self, key) for key in FIELDS),
            tuple(self.custom_properties.items()),
            self.is_utf8,
            self.encoded,
        ))

    def get(self, name: str = "") -> Union[str, dict]:
        """
        Get a metadata value.

        Args:
            name: Field name. Empty returns every field.

        Returns:
            The field text, or a dict of all fields and custom properties

        Raises:
            KeyError: If the field is unknown
        """
        if not name:
            values = {key: getattr(self, key) for key in FIELDS}
            values["custom_properties"] = dict(self.custom_properties)
            return values

        key = name.lower()
        if key not in FIELDS:
            raise KeyError(name)
        return getattr(self, key)

    def set(self, name: str, value: str, is_utf8: bool = False) -> "MetadataStore":
        """Return a store with one field replaced, transcoded when is_utf8."""
        key = name.lower()
        if key not in FIELDS:
            raise KeyError(name)

        if is_utf8:
            value = self.transcoder(value)
            encoded = self.encoded | {key}
        else:
            encoded = self.encoded - {key}
        return replace(self, **{key: value, "is_utf8": is_utf8, "encoded": encoded})

    def with_keywords(self, *keywords: str, is_utf8: bool = False) -> "MetadataStore":
        return self.set("keywords", KEYWORD_SEPARATOR.join(keywords), is_utf8)

    def with_custom_properties(self, properties: Mapping[str, str]) -> "MetadataStore":
        # Replaces the whole mapping; existing properties are dropped
        return replace(self, custom_properties=_freeze(properties))

    def text(self, name: str) -> str:
        """The field as plain text, decoded only if it was stored transcoded."""
        key = name.lower()
        value = self.get(key)
        if key in self.encoded:
            return self.decoder(value)
        return value

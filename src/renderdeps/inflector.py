"""Inflection service used to guess object-template paths.

``render @post`` renders ``posts/_post``: the extractor pluralizes the
object name for the directory and singularizes it for the partial. The
rules live outside the extractor behind the ``Inflector`` protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import inflection


@runtime_checkable
class Inflector(Protocol):
    """Anything that can pluralize and singularize an English word."""

    def pluralize(self, word: str) -> str: ...

    def singularize(self, word: str) -> str: ...


class DefaultInflector:
    """Inflector backed by the ``inflection`` package (ActiveSupport rules).

    Example:
        >>> inflector = DefaultInflector()
        >>> inflector.pluralize("person"), inflector.singularize("people")
        ('people', 'person')
    """

    __slots__ = ()

    def pluralize(self, word: str) -> str:
        return inflection.pluralize(word)

    def singularize(self, word: str) -> str:
        return inflection.singularize(word)

# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from collections.abc import Callable
from typing import Protocol, Self, cast, runtime_checkable

__all__ = 'TextAdapter', 'TextAdapterType', 'TextConverter', 'text_builder'


@runtime_checkable
class TextConverter(Protocol):
    """A protocol for data types that know how to render themselves as text"""

    def to_text(self: Self) -> str: ...


@runtime_checkable
class TextAdapter[T](Protocol):
    """A protocol for an external object that renders values of type T as text"""

    @staticmethod
    def to_text(value: T, /) -> str: ...


type TextAdapterType[T] = type[TextAdapter[T]]


def text_builder[D](data_type: type[D], adapter: TextAdapterType[D] | None = None) -> Callable[[D], str]:
    """
    Return the function that renders values of data_type as text.

    An explicit adapter wins, then the type's own to_text() if it is a
    TextConverter. Anything else (str, int, ...) is rendered with str().
    """

    if adapter is not None:
        return adapter.to_text
    if issubclass(data_type, TextConverter):
        return cast(TextAdapterType[D], data_type).to_text  # a TextConverter is its own adapter
    return str

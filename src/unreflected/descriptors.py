# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from io import StringIO
from typing import Protocol
from weakref import ReferenceType
from weakref import ref as wref

from lxml import etree

from .adapters import TextAdapterType, text_builder
from .escaping import Escaping, close_tag, open_tag
from .exceptions import MissingInstanceError

__all__ = (  # noqa: RUF022
    'TextSink',

    'Field',
    'LeafField',
    'RawField',
    'TextField',
    'DataField',
    'MarkupField',
    'ElementField',

    'TypeDescriptor',
)


log = logging.getLogger(__name__)


# noinspection PyProtectedMember
type ETreeElement = etree._Element  # noqa: SLF001


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


class Field[T](ABC):
    """
    A rule that extracts one piece of text from an instance of T.

    Fields are immutable once constructed. The only attribute that is ever
    assigned after construction is the owner, which is set when the field is
    registered with a type descriptor and cannot change while that descriptor
    is alive.
    """

    __slots__ = '__weakref__', '_owner_'

    _owner_: ReferenceType['TypeDescriptor[T]']

    def __setattr__(self, name: str, value: object, /) -> None:
        if name != '_owner_' and hasattr(self, name):
            raise AttributeError(f'{self.__class__.__name__} object attribute {name!r} is read-only')
        super().__setattr__(name, value)

    def __delattr__(self, name: str, /) -> None:
        raise AttributeError(f'{self.__class__.__name__} object attribute {name!r} cannot be deleted')

    @property
    def owner(self) -> 'TypeDescriptor[T] | None':
        try:
            reference = self._owner_
        except AttributeError:
            return None
        return reference()

    @abstractmethod
    def extract(self, instance: T, /) -> str:
        """Return the text for this field taken from the given instance"""
        raise NotImplementedError


class LeafField[T](Field[T], ABC):
    """A field that is escaped and wrapped in its own tags when rendered"""

    __slots__ = ()

    name: str


class RawField[T](Field[T], ABC):
    """A field whose text is written verbatim, without a tag of its own"""

    __slots__ = ()


class TextField[T](LeafField[T]):
    __slots__ = 'extractor', 'name'

    extractor: Callable[[T], str]

    def __init__(self, name: str, extractor: Callable[[T], str], /) -> None:
        self.name = name
        self.extractor = extractor

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.name!r})'

    def extract(self, instance: T, /) -> str:
        return self.extractor(instance)


class DataField[T, D](LeafField[T]):
    __slots__ = 'adapter', 'getter', 'name', 'to_text', 'type'

    type: type[D]
    getter: Callable[[T], D]
    adapter: TextAdapterType[D] | None
    to_text: Callable[[D], str]

    def __init__(self, data_type: type[D], name: str, getter: Callable[[T], D], /, *, adapter: TextAdapterType[D] | None = None) -> None:
        self.type = data_type
        self.name = name
        self.getter = getter
        self.adapter = adapter
        self.to_text = text_builder(data_type, adapter)

    def __repr__(self) -> str:
        adapter_name = self.adapter.__qualname__ if self.adapter else None
        return f'{self.__class__.__name__}({self.type.__qualname__}, {self.name!r}, adapter={adapter_name})'

    def extract(self, instance: T, /) -> str:
        value = self.getter(instance)
        # bool is a subclass of int, but a bool is not an acceptable int value
        if not isinstance(value, self.type) or (isinstance(value, bool) and not issubclass(self.type, bool)):
            raise TypeError(f'the {self.name!r} field value must be of type {self.type.__qualname__}, not {type(value).__qualname__}')
        return self.to_text(value)


class MarkupField[T](RawField[T]):
    __slots__ = ('extractor',)

    extractor: Callable[[T], str]

    def __init__(self, extractor: Callable[[T], str], /) -> None:
        self.extractor = extractor

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.extractor!r})'

    def extract(self, instance: T, /) -> str:
        return self.extractor(instance)


class ElementField[T, N](RawField[T]):
    """
    A composite field that renders a nested object with its own type descriptor.

    The nested element is tagged with the field name instead of the nested
    descriptor's default name, which allows the same descriptor to be used
    for several differently named fields.
    """

    __slots__ = 'descriptor', 'getter', 'name'

    name: str
    descriptor: 'TypeDescriptor[N]'
    getter: Callable[[T], N]

    def __init__(self, name: str, descriptor: 'TypeDescriptor[N]', getter: Callable[[T], N], /) -> None:
        if not isinstance(descriptor, TypeDescriptor):
            raise TypeError(f"descriptor must be a TypeDescriptor, not '{type(descriptor).__qualname__}'")
        self.name = name
        self.descriptor = descriptor
        self.getter = getter

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.name!r}, {self.descriptor!r})'

    def extract(self, instance: T, /) -> str:
        return self.descriptor.serialize_to_string(self.getter(instance), name=self.name)


class TypeDescriptor[T]:
    """
    Describes how instances of T are serialized, as an ordered list of fields.

    The fields are rendered in the order in which they were registered. The
    descriptor is not tied to any instance and it holds no state that changes
    while serializing, so the same descriptor can be shared between parents,
    used recursively and used from multiple threads.
    """

    def __init__(self, name: str, /, *, escaping: Escaping = Escaping.MARKUP, newline: str = '\n') -> None:
        if not isinstance(escaping, Escaping):
            raise TypeError(f"escaping must be an Escaping member, not '{type(escaping).__qualname__}'")
        self._name = name
        self._fields: list[LeafField[T] | RawField[T]] = []
        self.escaping = escaping
        self.newline = newline

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._name!r}, escaping={self.escaping!r}, fields={len(self._fields)})'

    def __iter__(self) -> Iterator[LeafField[T] | RawField[T]]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def name(self) -> str:
        return self._name

    @property
    def fields(self) -> tuple[LeafField[T] | RawField[T], ...]:
        return tuple(self._fields)

    def register_field(self, field: LeafField[T] | RawField[T]) -> None:
        if not isinstance(field, LeafField | RawField):
            raise TypeError(f"field must be a LeafField or a RawField, not '{type(field).__qualname__}'")
        owner = field.owner
        if owner is None:
            field._owner_ = wref(self)  # noqa: SLF001
        elif owner is not self:
            raise ValueError(f'field {field!r} already belongs to {owner!r}')
        self._fields.append(field)
        log.debug('Registered %r with the %r descriptor', field, self._name)

    def serialize(self, sink: TextSink, instance: T, /, *, name: str | None = None) -> None:
        """
        Write the element for the given instance to sink.

        The element is tagged with name if provided, else with the descriptor's
        own name. Output is written as it is produced, so if a field fails, the
        text written before the failure remains in the sink.
        """
        if instance is None:
            raise MissingInstanceError(f'cannot serialize a missing instance for the {self._name!r} descriptor')
        tag = self._name if name is None else name
        newline = self.newline
        log.debug('Serializing <%s> with %d fields', tag, len(self._fields))
        sink.write(open_tag(tag) + newline)
        for field in self._fields:
            match field:
                case LeafField(name=field_tag):
                    sink.write(open_tag(field_tag) + self.escaping.escape(field.extract(instance)) + close_tag(field_tag) + newline)
                case RawField():
                    sink.write(field.extract(instance))
                case _:
                    raise TypeError(f'cannot render {field!r}: a LeafField must have a name')
        sink.write(close_tag(tag) + newline)

    def serialize_to_string(self, instance: T, /, name: str | None = None) -> str:
        with StringIO() as buffer:
            self.serialize(buffer, instance, name=name)
            return buffer.getvalue()

    def to_element(self, instance: T, /, *, name: str | None = None) -> ETreeElement:
        """
        Build an lxml element tree with the same structure as the serialized text.

        Leaf fields become child elements holding the unescaped field text and
        element fields are built recursively. Other raw fields are expected to
        produce a single well-formed XML element, which is parsed and attached.
        """
        if instance is None:
            raise MissingInstanceError(f'cannot build a missing instance for the {self._name!r} descriptor')
        element = etree.Element(self._name if name is None else name)
        for field in self._fields:
            match field:
                case LeafField(name=field_tag):
                    etree.SubElement(element, field_tag).text = field.extract(instance)
                case ElementField(name=field_tag, descriptor=descriptor, getter=getter):
                    element.append(descriptor.to_element(getter(instance), name=field_tag))
                case RawField():
                    element.append(etree.fromstring(field.extract(instance)))
                case _:
                    raise TypeError(f'cannot build {field!r}: a LeafField must have a name')
        return element

# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from enum import Enum

__all__ = 'Escaping', 'close_tag', 'escape', 'open_tag'


class Escaping(Enum):
    """
    Text escaping policy for leaf field values.

    MARKUP only replaces the angle brackets, leaving '&' and '"' untouched,
    so the output is XML-like text rather than strictly well-formed XML.
    XML escapes everything that is significant in XML character data and
    should be used when the output is fed to an XML parser.
    """

    MARKUP = 'markup'
    XML = 'xml'

    def __repr__(self) -> str:
        return f'{self.__class__.__qualname__}.{self.name}'

    def escape(self, text: str) -> str:
        match self:
            case Escaping.MARKUP:
                return text.replace('<', '&lt;').replace('>', '&gt;')
            case Escaping.XML:
                # the ampersand must go first, or it will mangle the other entities
                return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;').replace('"', '&quot;')


def escape(text: str) -> str:
    return Escaping.MARKUP.escape(text)


def open_tag(name: str) -> str:
    return f'<{name}>'


def close_tag(name: str) -> str:
    return f'</{name}>'

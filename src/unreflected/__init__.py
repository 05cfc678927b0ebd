# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from .__info__ import __version__
from .adapters import TextAdapter, TextConverter
from .descriptors import DataField, ElementField, Field, LeafField, MarkupField, RawField, TextField, TextSink, TypeDescriptor
from .escaping import Escaping, escape
from .exceptions import MissingInstanceError

__all__ = (  # noqa: RUF022
    '__version__',

    'TypeDescriptor',
    'Field',
    'LeafField',
    'RawField',
    'TextField',
    'DataField',
    'MarkupField',
    'ElementField',
    'TextSink',

    'TextAdapter',
    'TextConverter',

    'Escaping',
    'escape',

    'MissingInstanceError',
)

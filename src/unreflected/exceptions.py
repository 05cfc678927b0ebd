# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later


__all__ = 'MissingInstanceError',  # noqa: COM818


class MissingInstanceError(ValueError):
    """Raised when a type descriptor is asked to serialize None instead of an instance."""

# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import sys

from .samples import person_descriptor, sample_person


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s %(name)s: %(message)s')
    person_descriptor().serialize(sys.stdout, sample_person())


if __name__ == '__main__':
    main()

# -*- coding: utf-8 -*-
# Tint: Generic color values and the conversion graph between them.
#
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Project metadata for the opticsWolf Tint.
"""

from typing import Final

# Metadata Definitions
__title__: Final[str] = "Tint"
__description__: Final[str] = (
    "Generic color values over numpy component types, with a conversion "
    "graph pivoting through CIE XYZ and Numba batch kernels."
)
__version__: Final[str] = "0.1.0"
__author__: Final[str] = "opticsWolf"
__license__: Final[str] = "LGPL-3.0-or-later"
__copyright__: Final[str] = "Copyright (c) 2026 opticsWolf"
__homepage__: Final[str] = "https://github.com/opticsWolf/tint"

def metadata_summary() -> dict[str, str]:
    """Returns a dictionary of project metadata for introspection."""
    return {
        "title": __title__,
        "version": __version__,
        "license": __license__,
        "description": __description__,
        "copyright": __copyright__,
        "homepage": __homepage__,
    }

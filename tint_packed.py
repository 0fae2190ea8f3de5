# -*- coding: utf-8 -*-
"""
Tint: Generic color values and the conversion graph between them
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Packed Channels
===============
Four 8-bit channels packed into one 32-bit integer.

The member name of ``ChannelOrder`` spells the channels from the most
significant byte to the least significant one, e.g. ``ARGB`` stores alpha in
bits 24-31 and blue in bits 0-7.
"""

from enum import Enum
from typing import Final

__all__ = ["ChannelOrder"]

_BYTE: Final[int] = 0xFF


class ChannelOrder(Enum):
    ARGB = ("alpha", "red", "green", "blue")
    RGBA = ("red", "green", "blue", "alpha")
    ABGR = ("alpha", "blue", "green", "red")
    BGRA = ("blue", "green", "red", "alpha")

    def pack(self, red: int, green: int, blue: int, alpha: int) -> int:
        """Packs four 8-bit channel values into a u32."""
        channels = {"red": red, "green": green, "blue": blue, "alpha": alpha}
        packed = 0
        for name in self.value:
            value = int(channels[name])
            if not 0 <= value <= _BYTE:
                raise ValueError(f"{name} channel {value} does not fit in 8 bits")
            packed = (packed << 8) | value
        return packed

    def unpack(self, packed: int) -> tuple[int, int, int, int]:
        """Splits a u32 into ``(red, green, blue, alpha)``."""
        packed = int(packed)
        if not 0 <= packed <= 0xFFFFFFFF:
            raise ValueError(f"{packed:#x} is not a 32-bit unsigned value")
        channels = {}
        for shift, name in zip((24, 16, 8, 0), self.value):
            channels[name] = (packed >> shift) & _BYTE
        return channels["red"], channels["green"], channels["blue"], channels["alpha"]

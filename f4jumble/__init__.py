"""Reversible, length-preserving byte jumbling (F4Jumble).

Usage:
    from f4jumble import jumble, unjumble

    jumbled = jumble(raw)          # before Base64 / Bech32 encoding
    raw = unjumble(jumbled)        # after decoding
"""

from .cipher.feistel import f4jumble, f4jumble_inv, jumble, unjumble
from .cipher.params import LEN_H, MAX_LEN_M, MIN_LEN_M
from .errors import F4JumbleError, InternalHashError, InvalidLength

__all__ = [
    "jumble",
    "unjumble",
    "f4jumble",
    "f4jumble_inv",
    "MIN_LEN_M",
    "MAX_LEN_M",
    "LEN_H",
    "F4JumbleError",
    "InvalidLength",
    "InternalHashError",
]
__version__ = "0.1.0"

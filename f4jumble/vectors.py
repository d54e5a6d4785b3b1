"""Known-answer vectors for F4Jumble."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .cipher.feistel import jumble, unjumble


@dataclass(frozen=True)
class JumbleVector:
    normal_hex: str
    jumbled_hex: str

    @property
    def normal(self) -> bytes:
        return bytes.fromhex(self.normal_hex)

    @property
    def jumbled(self) -> bytes:
        return bytes.fromhex(self.jumbled_hex)


TEST_VECTORS: List[JumbleVector] = [
    JumbleVector(
        normal_hex=(
            "5d7a8f739a2d9e945b0ce152a8049e294c4d6e66b164939daffa2ef6ee692148"
            "1cdd86b3cc4318d9614fc820905d042b"
        ),
        jumbled_hex=(
            "0304d029141b995da5387c1259706735"
            "04d6c764d91ea6c0821237"
            "70c7139ccd88ee27368cd0c0921a0444c8e5858d22"
        ),
    ),
]


def check_vectors() -> Tuple[bool, List[str]]:
    errs: List[str] = []
    for idx, tv in enumerate(TEST_VECTORS):
        got = jumble(tv.normal)
        if got != tv.jumbled:
            errs.append(f"vector {idx}: jumble mismatch, got {got.hex()}")
        back = unjumble(tv.jumbled)
        if back != tv.normal:
            errs.append(f"vector {idx}: unjumble mismatch, got {back.hex()}")
    return (len(errs) == 0), errs

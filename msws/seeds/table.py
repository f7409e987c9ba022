"""
The fixed table of seed anchors used by seed().

Each entry is odd and was chosen to give 100 million unique outputs.
The table is part of the public contract: changing, adding or reordering
an entry changes every derived seed.
"""

from __future__ import annotations

from typing import Sequence

BUCKET_SIZE = 100_000_000

SEEDS: tuple[int, ...] = (
    0x8B5AD4CE914ECDF7,
    0xDBC8915F4B1CD961,
    0x3A16E0C51FA593D9,
    0x1794DA529EC6D70B,
    0x8FC49B2A752F643B,
    0xDE07A518FBA03571,
    0xB1D2E4762D58906B,
    0x478F6219DA719B05,
    0x41857DC34A2FDC05,
    0xB9425ED8E351A06F,
    0x9235EB64C35EAB7D,
    0x91F0E7B8E0536AF7,
    0x4F0581ABB194F75B,
    0xDAB4E53C95408D1F,
    0xF23BA0C5410CEB3B,
    0x912A0B4CE102A36D,
    0x92A73B40B46A2E71,
    0x46CA273B5FDE168D,
    0xF9B8AD61743910B5,
    0x490CEB3D865E4BC9,
    0xA12E0DCFBF6471CF,
    0xA54C91DB6DC0FE37,
    0x08C3564A5C031727,
    0xE3296D17C14795BD,
    0x5387014DB793F24F,
    0x6D47AF052931FE47,
    0xD138C9EF735C0E8F,
    0xA790FBC8EBF02D3B,
    0x4A1B027867C953FB,
    0x49A180DE9567182D,
)

TABLE_SIZE = 30


def check_table(table: Sequence[int]) -> None:
    """
    Verify the anchor table invariants.

    seed() builds its generator without a parity check, so every entry
    must be an odd 64-bit value.

    Raises:
        RuntimeError: If the table has the wrong length or an entry is
            even or out of the 64-bit range.
    """
    if len(table) != TABLE_SIZE:
        raise RuntimeError(
            f"seed table must hold {TABLE_SIZE} entries, found {len(table)}"
        )
    for i, s in enumerate(table):
        if not 0 <= s < 1 << 64:
            raise RuntimeError(f"seed table entry {i} is not a 64-bit value: {s:#x}")
        if s & 1 == 0:
            raise RuntimeError(f"seed table entry {i} is even: {s:#018x}")


check_table(SEEDS)

"""Partitioning options and the enumerations they are built from."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Optional


class PType(IntEnum):
    """Partitioning method."""

    RB = 0
    KWAY = 1


class ObjType(IntEnum):
    """Objective to minimise."""

    CUT = 0
    VOL = 1


class CType(IntEnum):
    """Matching scheme used during coarsening."""

    RM = 0
    SHEM = 1


class IpType(IntEnum):
    """Initial partitioning algorithm."""

    GROW = 0
    RANDOM = 1
    EDGE = 2
    NODE = 3


class RType(IntEnum):
    """Refinement algorithm."""

    FM = 0
    GREEDY = 1
    SEP2SIDED = 2
    SEP1SIDED = 3


class Numbering(IntEnum):
    """Index base of the input arrays."""

    C = 0
    FORTRAN = 1


_DBG_BITS = {
    "info": 1,
    "time": 2,
    "coarsen": 4,
    "refine": 8,
    "ipart": 16,
    "move_info": 32,
    "sep_info": 64,
    "conn_info": 128,
    "contig_info": 256,
}


@dataclass(frozen=True)
class DbgLvl:
    """Set of debug output flags."""

    info: bool = False
    time: bool = False
    coarsen: bool = False
    refine: bool = False
    ipart: bool = False
    move_info: bool = False
    sep_info: bool = False
    conn_info: bool = False
    contig_info: bool = False

    def to_int(self) -> int:
        """Return the flags packed into a bit mask."""
        mask = 0
        for field in fields(self):
            if getattr(self, field.name):
                mask |= _DBG_BITS[field.name]
        return mask


@dataclass
class Options:
    """User options; ``None`` means the default for the chosen method."""

    obj_type: Optional[ObjType] = None
    coarsen_type: Optional[CType] = None
    init_part_type: Optional[IpType] = None
    refine_type: Optional[RType] = None
    debug_level: Optional[DbgLvl] = None
    num_iter: Optional[int] = None
    num_cuts: Optional[int] = None
    seed: Optional[int] = None
    minimize_connectivity: Optional[bool] = None
    force_contiguous: Optional[bool] = None
    compress: Optional[bool] = None
    cc_order: Optional[bool] = None
    prune_factor: Optional[int] = None
    num_separators: Optional[int] = None
    imbalance_factor: Optional[int] = None
    disable_2hop: Optional[bool] = None
    numbering: Optional[Numbering] = None
"""
Scratch record describing a protein change before it is rendered as HGVS.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hgvsp.models import MutationType

# Terminator value when no stop codon is reached
NO_STOP_FOUND = -1


class Kind(str, Enum):
    """Reading frame effect of the change."""
    FRAMESHIFT = 'frameshift'
    INFRAME = 'inframe'


@dataclass
class BuildingComponents:
    """Pieces the formatter needs to render one HGVS protein description.

    Positions are 1-based residue numbers. ``reference_start`` and
    ``reference_end`` hold one-letter residues, ``alternate`` the new residue(s).
    ``terminator`` is the codon count to the new stop for frameshifts and
    extensions, or ``NO_STOP_FOUND`` when translation ran off the sequence.
    """
    protein_id: Optional[str] = None
    kind: Kind = Kind.INFRAME
    mutation_type: Optional[MutationType] = None
    start: int = 0
    end: int = 0
    reference_start: str = ''
    reference_end: str = ''
    alternate: str = ''
    terminator: int = NO_STOP_FOUND

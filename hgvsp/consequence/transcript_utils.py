"""
Coordinate helpers mapping genomic positions onto a transcript's coding sequence.
"""
import logging
from typing import List, Optional

from hgvsp.models import Transcript, SWISSPROT_LABEL
from .cds import UNKNOWN_AMINOACID, is_mitochondrial

_logger = logging.getLogger(__name__)


class TranscriptSequenceHelper:
    """Read-only view over a Transcript answering CDS coordinate questions.

    All CDS positions are 1-based; ``cdna_index`` converts them into 0-based
    offsets of ``transcript.cdna_sequence``.
    """

    def __init__(self, transcript: Transcript):
        self.transcript = transcript
        self._segments = transcript.coding_segments()

    def coding_sequence_offset(self, genomic_position: int) -> int:
        """Return the 1-based CDS position of a genomic base, or 0 if it is not coding."""
        accumulated = 0
        for start, end in self._segments:
            if start <= genomic_position <= end:
                if self.transcript.strand == '+':
                    return accumulated + genomic_position - start + 1
                return accumulated + end - genomic_position + 1
            accumulated += end - start + 1
        return 0

    def has_unconfirmed_start(self) -> bool:
        protein = self.transcript.protein_sequence or ''
        return protein.startswith(UNKNOWN_AMINOACID)

    def first_codon_phase(self) -> int:
        """Nucleotides preceding the first complete codon; 0 unless the start is unconfirmed."""
        if not self.has_unconfirmed_start():
            return 0
        first_coding = self._first_coding_exon()
        if first_coding is None or first_coding.phase < 0:
            return 0
        return first_coding.phase

    def _first_coding_exon(self):
        if not self._segments:
            return None
        start, end = self._segments[0]
        for exon in self.transcript.exons:
            if exon.start <= start and end <= exon.end:
                return exon
        return None

    def _frame_adjustment(self) -> int:
        return (3 - self.first_codon_phase()) % 3

    def codon_index_for(self, cds_position: int) -> int:
        """1-based codon (residue) number holding the given CDS position."""
        return ((cds_position + self._frame_adjustment() - 1) // 3) + 1

    def position_within_codon(self, cds_position: int) -> int:
        """1, 2 or 3 depending on where the CDS position falls inside its codon."""
        return ((cds_position + self._frame_adjustment() - 1) % 3) + 1

    def cdna_index(self, cds_position: int) -> int:
        """0-based cDNA offset of a 1-based CDS position."""
        return self.transcript.cdna_coding_start + cds_position - 2

    def codon_start(self, codon_index: int) -> int:
        """0-based cDNA offset of the first base of a codon."""
        return (self.transcript.cdna_coding_start - 1
                + (codon_index - 1) * 3
                - self._frame_adjustment())

    def translation_start(self) -> int:
        """0-based cDNA offset of the first complete codon."""
        return self.transcript.cdna_coding_start - 1 + self.first_codon_phase()

    def codon_at(self, codon_index: int, sequence: Optional[str] = None) -> Optional[str]:
        """
        Return the codon of the given residue.

        Args:
            codon_index: 1-based residue number.
            sequence: cDNA to read from, defaults to the reference cDNA.

        Returns:
            The 3-nt codon, or None when the codon is incomplete.
        """
        if sequence is None:
            sequence = self.transcript.cdna_sequence
        start = self.codon_start(codon_index)
        if codon_index < 1 or start < self.translation_start() or start + 3 > len(sequence):
            return None
        return sequence[start:start + 3]

    def cross_reference_id(self, db_name: str) -> Optional[str]:
        return self.transcript.xref_id(db_name)

    def protein_ids(self) -> List[str]:
        """Protein ID followed by the SwissProt accession, skipping missing ones."""
        ids = [self.transcript.protein_id, self.cross_reference_id(SWISSPROT_LABEL)]
        return [i for i in ids if i]

    def is_mitochondrial(self) -> bool:
        return is_mitochondrial(self.transcript.chromosome)

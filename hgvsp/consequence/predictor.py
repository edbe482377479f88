"""
Translation of the edited cDNA and classification of the resulting protein change.
"""
import logging
from typing import List, Optional, Tuple

from hgvsp.models import MutationType, Transcript, Variant, VariantType
from hgvsp.apply import single
from .cds import STOP, UNKNOWN_AMINOACID, translate_codon, translate_sequence
from .components import BuildingComponents, Kind, NO_STOP_FOUND
from .transcript_utils import TranscriptSequenceHelper

_logger = logging.getLogger(__name__)


class ProteinConsequencePredictor:
    """Predicts the alternate protein of a variant and describes how it differs.

    ``predict`` returns the components for the formatter, or None when no
    prediction is possible. Components with no ``mutation_type`` mean the
    change could not be described (e.g. it hits an unknown residue). After a
    call, ``alternate_protein_sequence`` holds the predicted protein without
    its stop.
    """

    def __init__(self, variant: Variant, transcript: Transcript,
                 helper: Optional[TranscriptSequenceHelper] = None):
        self.variant = variant
        self.transcript = transcript
        self.helper = helper or TranscriptSequenceHelper(transcript)
        self.protein = transcript.protein_sequence or ''
        self.mitochondrial = self.helper.is_mitochondrial()
        self.alternate_protein_sequence: Optional[str] = None

    def is_frameshift(self) -> bool:
        allele = self.variant.alternate if self.variant.is_insertion else self.variant.reference
        return len(allele) % 3 != 0

    def predict(self) -> Optional[BuildingComponents]:
        self.alternate_protein_sequence = None

        alternate_cdna = single.mutate_cdna(self.variant, self.transcript, self.helper)
        if alternate_cdna is None:
            return None
        position = single.cds_position(self.variant, self.helper)

        if self.variant.edit_type == VariantType.SNV:
            return self._substitution(position, alternate_cdna)
        if self.variant.edit_type == VariantType.INSERTION:
            return self._insertion(position, alternate_cdna)
        return self._deletion(position, alternate_cdna)

    def _components(self, mutation_type: Optional[MutationType], start: int = 0, end: int = 0,
                    reference_start: str = '', reference_end: str = '', alternate: str = '',
                    kind: Kind = Kind.INFRAME, terminator: int = NO_STOP_FOUND) -> BuildingComponents:
        return BuildingComponents(
            protein_id=self.transcript.protein_id,
            kind=kind,
            mutation_type=mutation_type,
            start=start,
            end=end or start,
            reference_start=reference_start,
            reference_end=reference_end or reference_start,
            alternate=alternate,
            terminator=terminator,
        )

    def _reference_residue(self, position: int) -> Optional[str]:
        """Reference residue at a 1-based position; the stop follows the last residue."""
        if position <= len(self.protein):
            return self.protein[position - 1]
        if position == len(self.protein) + 1:
            return STOP
        return None

    def _substitution(self, position: int, alternate_cdna: str) -> Optional[BuildingComponents]:
        codon_index = self.helper.codon_index_for(position)
        if codon_index == 1 and self.helper.first_codon_phase() > 0:
            _logger.debug(f"{self.variant} hits the incomplete first codon of {self.transcript.id}")
            return self._components(None)

        reference_codon = self.helper.codon_at(codon_index)
        alternate_codon = self.helper.codon_at(codon_index, alternate_cdna)
        reference_aa = self._reference_residue(codon_index)
        if reference_codon is None or alternate_codon is None or reference_aa is None:
            return None
        if 'N' in alternate_codon:
            _logger.debug(f"Alternate codon {alternate_codon} of {self.variant} is ambiguous")
            return None

        alternate_aa = translate_codon(alternate_codon, self.mitochondrial)

        if alternate_aa == reference_aa:
            self.alternate_protein_sequence = self.protein
            return self._components(MutationType.SILENT, codon_index, reference_start=reference_aa)

        if reference_aa == UNKNOWN_AMINOACID:
            return self._components(None)

        if codon_index == 1 and reference_aa == 'M':
            return self._components(MutationType.START_LOSS, 1, reference_start='M')

        if reference_aa == STOP:
            return self._translate_and_compare(alternate_cdna)

        if alternate_aa == STOP:
            self.alternate_protein_sequence = self.protein[:codon_index - 1]
            return self._components(MutationType.STOP_GAIN, codon_index, reference_start=reference_aa,
                                    alternate=STOP)

        self.alternate_protein_sequence = (self.protein[:codon_index - 1] + alternate_aa
                                           + self.protein[codon_index:])
        return self._components(MutationType.SUBSTITUTION, codon_index, reference_start=reference_aa,
                                alternate=alternate_aa)

    def _insertion(self, position: int, alternate_cdna: str) -> Optional[BuildingComponents]:
        inserted = single.orient_allele(self.variant.alternate, self.transcript.strand)
        if self.helper.position_within_codon(position) != 1 or len(inserted) % 3 != 0:
            return self._translate_and_compare(alternate_cdna)

        codon_index = self.helper.codon_index_for(position)
        if codon_index > len(self.protein) + 1:
            return None
        residues = translate_sequence(inserted, self.mitochondrial)

        if residues.startswith(STOP):
            if codon_index == len(self.protein) + 1:
                self.alternate_protein_sequence = self.protein
                return self._components(MutationType.SILENT)
            self.alternate_protein_sequence = self.protein[:codon_index - 1]
            return self._components(MutationType.STOP_GAIN, codon_index,
                                    reference_start=self.protein[codon_index - 1], alternate=STOP)

        if STOP in residues:
            self.alternate_protein_sequence = self.protein[:codon_index - 1] + residues[:residues.index(STOP)]
            return self._inserted_between(codon_index, residues)

        # Shift to the most 3' equivalent position
        while codon_index <= len(self.protein) and self.protein[codon_index - 1] == residues[0]:
            residues = residues[1:] + residues[0]
            codon_index += 1

        self.alternate_protein_sequence = (self.protein[:codon_index - 1] + residues
                                           + self.protein[codon_index - 1:])

        length = len(residues)
        if codon_index - 1 - length >= 0 and self.protein[codon_index - 1 - length:codon_index - 1] == residues:
            start = codon_index - length
            return self._components(MutationType.DUPLICATION, start, codon_index - 1,
                                    reference_start=self.protein[start - 1],
                                    reference_end=self.protein[codon_index - 2],
                                    alternate=residues)

        return self._inserted_between(codon_index, residues)

    def _inserted_between(self, codon_index: int, residues: str) -> BuildingComponents:
        """Insertion of residues between residue codon_index - 1 and codon_index."""
        if codon_index < 2 or self.protein[codon_index - 2] == UNKNOWN_AMINOACID:
            return self._components(None)
        return self._components(MutationType.INSERTION, codon_index - 1, codon_index,
                                reference_start=self.protein[codon_index - 2],
                                reference_end=self._reference_residue(codon_index),
                                alternate=residues)

    def _deletion(self, position: int, alternate_cdna: str) -> Optional[BuildingComponents]:
        deleted = self.variant.reference
        if self.helper.position_within_codon(position) != 1 or len(deleted) % 3 != 0:
            return self._translate_and_compare(alternate_cdna)

        codon_index = self.helper.codon_index_for(position)
        length = len(deleted) // 3
        if codon_index + length - 1 > len(self.protein):
            return self._translate_and_compare(alternate_cdna)
        if UNKNOWN_AMINOACID in self.protein[codon_index - 1:codon_index - 1 + length]:
            return self._components(None)

        if codon_index == 1:
            if length < len(self.protein) and self.protein[length] == 'M':
                self.alternate_protein_sequence = self.protein[length:]
                return self._components(MutationType.DELETION, 2, length + 1,
                                        reference_start=self.protein[1], reference_end='M')
            return self._components(MutationType.START_LOSS, 1, reference_start='M')

        while (codon_index - 1 + length < len(self.protein)
               and self.protein[codon_index - 1 + length] == self.protein[codon_index - 1]):
            codon_index += 1

        self.alternate_protein_sequence = (self.protein[:codon_index - 1]
                                           + self.protein[codon_index - 1 + length:])
        return self._components(MutationType.DELETION, codon_index, codon_index + length - 1,
                                reference_start=self.protein[codon_index - 1],
                                reference_end=self.protein[codon_index + length - 2])

    def _translate(self, cdna: str) -> Tuple[List[str], bool]:
        """Translate from the first complete codon to the first stop (included)."""
        residues = [UNKNOWN_AMINOACID] if self.helper.first_codon_phase() > 0 else []
        index = self.helper.translation_start()
        while index + 3 <= len(cdna):
            aa = translate_codon(cdna[index:index + 3], self.mitochondrial)
            residues.append(aa)
            if aa == STOP:
                return residues, True
            index += 3
        return residues, False

    def _translate_and_compare(self, alternate_cdna: str) -> Optional[BuildingComponents]:
        """Translate the whole edited cDNA and describe the first difference from the reference."""
        residues, stop_found = self._translate(alternate_cdna)
        self.alternate_protein_sequence = ''.join(residues).rstrip(STOP)

        start = None
        for i, aa in enumerate(residues):
            reference = self._reference_residue(i + 1)
            if reference is None or (reference != UNKNOWN_AMINOACID and reference != aa):
                start = i + 1
                break

        if start is None:
            return self._components(MutationType.SILENT)

        if start == 1 and self.protein[:1] == 'M':
            self.alternate_protein_sequence = None
            return self._components(MutationType.START_LOSS, 1, reference_start='M')

        alternate = residues[start - 1]
        stop_position = len(residues) if stop_found else None

        if start == len(self.protein) + 1:
            terminator = stop_position - start if stop_position else NO_STOP_FOUND
            return self._components(MutationType.EXTENSION, start, reference_start=STOP,
                                    alternate=alternate, terminator=terminator)

        if start > len(self.protein) + 1:
            return None

        reference = self.protein[start - 1]
        if alternate == STOP:
            return self._components(MutationType.STOP_GAIN, start, reference_start=reference, alternate=STOP)

        if self.is_frameshift():
            terminator = stop_position - start + 1 if stop_position else NO_STOP_FOUND
            return self._components(MutationType.FRAMESHIFT, start, reference_start=reference,
                                    alternate=alternate, kind=Kind.FRAMESHIFT, terminator=terminator)

        if not stop_found:
            _logger.debug(f"No stop codon after in-frame change {self.variant} on {self.transcript.id}")
            return self._components(None)
        return self._inframe_difference(''.join(residues))

    def _inframe_difference(self, alternate: str) -> BuildingComponents:
        """Trim the shared flanks of both proteins and describe what is left."""
        reference = self.protein + STOP
        prefix = 0
        limit = min(len(reference), len(alternate))
        while prefix < limit and (reference[prefix] == alternate[prefix]
                                  or reference[prefix] == UNKNOWN_AMINOACID):
            prefix += 1
        suffix = 0
        while (suffix < limit - prefix
               and reference[len(reference) - 1 - suffix] == alternate[len(alternate) - 1 - suffix]):
            suffix += 1

        deleted = reference[prefix:len(reference) - suffix]
        inserted = alternate[prefix:len(alternate) - suffix]
        start = prefix + 1

        if not deleted:
            length = len(inserted)
            if prefix - length >= 0 and reference[prefix - length:prefix] == inserted:
                return self._components(MutationType.DUPLICATION, prefix - length + 1, prefix,
                                        reference_start=reference[prefix - length],
                                        reference_end=reference[prefix - 1], alternate=inserted)
            return self._inserted_between(start, inserted)

        if deleted[0] == UNKNOWN_AMINOACID:
            return self._components(None)

        end = start + len(deleted) - 1
        if not inserted:
            return self._components(MutationType.DELETION, start, end,
                                    reference_start=deleted[0], reference_end=deleted[-1])
        if len(deleted) == 1 and len(inserted) == 1:
            return self._components(MutationType.SUBSTITUTION, start, reference_start=deleted[0],
                                    alternate=inserted)
        return self._components(MutationType.DELINS, start, end, reference_start=deleted[0],
                                reference_end=deleted[-1], alternate=inserted)

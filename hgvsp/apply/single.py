"""
Applies a single genomic variant to a transcript's cDNA.
This is the core engine for sequence manipulation.
"""
import logging
from typing import Optional

from ..models import Transcript, Variant, VariantType
from ..consequence.cds import COMPLEMENTARY_NT, reverse_complement
from ..consequence.transcript_utils import TranscriptSequenceHelper

_logger = logging.getLogger(__name__)

VALID_NUCLEOTIDES = set(COMPLEMENTARY_NT)


def orient_allele(allele: str, strand: str) -> Optional[str]:
    """
    Express a genomic allele in transcript orientation.

    Args:
        allele: Allele on the forward genomic strand.
        strand: Transcript strand, '+' or '-'.

    Returns:
        The allele as read on the transcript, or None if it holds characters
        other than A, C, G, T or N.
    """
    invalid = set(allele) - VALID_NUCLEOTIDES
    if invalid:
        _logger.warning(f"Allele '{allele}' contains invalid nucleotides {sorted(invalid)}")
        return None
    if strand == '-':
        return reverse_complement(allele)
    return allele


def cds_position(variant: Variant, helper: TranscriptSequenceHelper) -> Optional[int]:
    """
    Locate the 5'-most CDS position touched by a variant, in transcript orientation.

    For insertions this is the CDS position of the base immediately 3' of the
    insertion point. Returns None when the variant falls outside the CDS.
    """
    transcript = helper.transcript
    minus = transcript.strand == '-'

    if variant.edit_type == VariantType.SNV:
        position = helper.coding_sequence_offset(variant.start)

    elif variant.edit_type == VariantType.INSERTION:
        offset = helper.coding_sequence_offset(variant.start)
        if offset == 0:
            return None
        position = offset + 1 if minus else offset
        # Inserting before the first coding base lands in the 5' UTR
        if position == 1:
            return None

    elif variant.edit_type == VariantType.DELETION:
        first = helper.coding_sequence_offset(variant.start)
        last = helper.coding_sequence_offset(variant.end)
        if minus:
            first, last = last, first
        if first == 0 or last == 0 or last - first != len(variant.reference) - 1:
            _logger.debug(f"Deletion {variant} is not fully contained in one coding block of {transcript.id}")
            return None
        position = first

    else:
        return None

    if position < 1 or position > transcript.cds_length:
        return None
    return position


def mutate_cdna(variant: Variant, transcript: Transcript,
                helper: Optional[TranscriptSequenceHelper] = None) -> Optional[str]:
    """
    Apply a variant to the transcript's cDNA.

    Args:
        variant: SNV, insertion or deletion in genomic coordinates.
        transcript: The transcript whose cDNA is edited.
        helper: Coordinate helper for the transcript, built if not given.

    Returns:
        The edited cDNA, or None when the variant type is unsupported, the
        alleles are invalid or the variant falls outside the CDS.
    """
    if variant.edit_type not in (VariantType.SNV, VariantType.INSERTION, VariantType.DELETION):
        _logger.debug(f"Variant type {variant.type} of {variant} is not supported")
        return None

    if helper is None:
        helper = TranscriptSequenceHelper(transcript)

    reference = orient_allele(variant.reference, transcript.strand)
    alternate = orient_allele(variant.alternate, transcript.strand)
    if reference is None or alternate is None:
        return None

    position = cds_position(variant, helper)
    if position is None:
        _logger.debug(f"Variant {variant} falls outside the coding sequence of {transcript.id}")
        return None

    cdna = transcript.cdna_sequence
    index = helper.cdna_index(position)
    if index < 0 or index + len(reference) > len(cdna):
        raise ValueError(
            f"cDNA index {index} for {variant} is outside the cDNA of {transcript.id} (length {len(cdna)})"
        )

    observed = cdna[index:index + len(reference)]
    if observed != reference:
        _logger.warning(
            f"Reference allele mismatch for {variant} on {transcript.id}: expected {reference}, found {observed}"
        )

    if variant.edit_type == VariantType.INSERTION:
        return cdna[:index] + alternate + cdna[index:]
    return cdna[:index] + alternate + cdna[index + len(reference):]

"""
Annotates a batch of variants against a set of transcripts.
"""
import logging
from typing import Dict, List, Optional
from collections import defaultdict

from .. import __version__
from ..models import AnnotationBundle, ProteinAnnotation, Transcript, Variant
from ..consequence.calculator import calculate

_logger = logging.getLogger(__name__)


def overlaps_coding_region(variant: Variant, transcript: Transcript) -> bool:
    """True if the variant touches the coding region of the transcript."""
    if not transcript.is_coding or variant.chromosome != transcript.chromosome:
        return False
    # Insertions cover the gap between start - 1 and start
    first = variant.start - 1 if variant.is_insertion else variant.start
    last = max(variant.start, variant.end)
    return first <= transcript.genomic_coding_end and last >= transcript.genomic_coding_start


def annotate_variants(
    variants: List[Variant],
    transcripts: List[Transcript],
    provenance: Optional[Dict] = None
) -> AnnotationBundle:
    """
    Computes the HGVS protein change of every variant on every overlapping transcript.

    Args:
        variants: Variants to annotate, in the order they should be reported.
        transcripts: Candidate transcripts.
        provenance: Extra provenance entries to store in the bundle.

    Returns:
        An AnnotationBundle with one annotation per overlapping variant/transcript pair.
    """
    by_chromosome = defaultdict(list)
    for transcript in transcripts:
        by_chromosome[transcript.chromosome].append(transcript)

    _logger.info(f"Annotating {len(variants)} variant(s) against {len(transcripts)} transcript(s).")

    annotations = []
    warnings = []

    for variant in variants:
        candidates = [t for t in by_chromosome[variant.chromosome] if overlaps_coding_region(variant, t)]
        if not candidates:
            warnings.append(f"{variant}: no overlapping coding transcript")
            continue

        for transcript in candidates:
            try:
                hgvs_protein = calculate(variant, transcript)
            except ValueError as e:
                _logger.error(f"Failed to annotate {variant} on {transcript.id}: {e}")
                raise

            if hgvs_protein is None or hgvs_protein.hgvs is None:
                warnings.append(f"{variant}: no HGVS protein description on {transcript.id}")

            annotations.append(ProteinAnnotation(
                variant=str(variant),
                transcript_id=transcript.id,
                hgvs_protein=hgvs_protein,
            ))

    _logger.info(f"Produced {len(annotations)} annotation(s) with {len(warnings)} warning(s).")

    return AnnotationBundle(
        annotations=annotations,
        provenance={
            "tool_version": __version__,
            "variant_count": len(variants),
            "transcript_count": len(transcripts),
            **(provenance or {}),
        },
        warnings=warnings,
    )

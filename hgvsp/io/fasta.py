"""
Handles generation of FASTA formatted outputs.
"""
import logging
from textwrap import wrap
from ..models import AnnotationBundle

_logger = logging.getLogger(__name__)

def _format_fasta_entry(header: str, sequence: str, line_length: int = 60) -> str:
    """Formats a single sequence into a FASTA entry."""
    wrapped_sequence = "\n".join(wrap(sequence, line_length))
    return f">{header}\n{wrapped_sequence}\n"

def generate_fasta_output(bundle: AnnotationBundle, line_length: int = 60) -> str:
    """
    Generates a FASTA-formatted string of the predicted protein sequences.

    Annotations without a predicted protein (e.g. start loss) are skipped.

    Args:
        bundle: The AnnotationBundle holding the annotations.
        line_length: Number of residues per sequence line.

    Returns:
        A string in FASTA format.
    """
    fasta_entries = []

    for annotation in bundle.annotations:
        protein = annotation.hgvs_protein
        if protein is None or not protein.alternate_protein_sequence:
            continue
        protein_id = protein.ids[0] if protein.ids else ""
        header = f"{protein_id}|{annotation.transcript_id}|{annotation.variant}|{protein.hgvs or ''}"
        fasta_entries.append(
            _format_fasta_entry(header, protein.alternate_protein_sequence, line_length)
        )

    _logger.info(f"Generated FASTA output with {len(fasta_entries)} entries.")
    return "".join(fasta_entries)

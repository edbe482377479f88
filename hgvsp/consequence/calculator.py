"""
Entry point computing the HGVS protein description of a variant on a transcript.
"""
import logging
from typing import Optional

from hgvsp.models import HgvsProtein, Transcript, Variant, VariantType
from .formatter import HgvsProteinFormatter
from .predictor import ProteinConsequencePredictor
from .transcript_utils import TranscriptSequenceHelper

_logger = logging.getLogger(__name__)

SUPPORTED_TYPES = (VariantType.SNV, VariantType.INSERTION, VariantType.DELETION)


class HgvsProteinCalculator:
    """Computes the HGVS protein change of one variant on one transcript."""

    def __init__(self, variant: Variant, transcript: Transcript):
        self.variant = variant
        self.transcript = transcript
        self.helper = TranscriptSequenceHelper(transcript)
        self.formatter = HgvsProteinFormatter()

    def calculate(self) -> Optional[HgvsProtein]:
        """
        Predict the protein change.

        Returns:
            An HgvsProtein, whose ``hgvs`` is None when the change cannot be
            described, or None when the transcript is not coding, the variant
            type is unsupported, or the variant misses the coding sequence.
        """
        if not self.transcript.is_coding or not self.transcript.protein_sequence:
            _logger.debug(f"Transcript {self.transcript.id} has no coding sequence")
            return None
        if self.variant.edit_type not in SUPPORTED_TYPES:
            _logger.debug(f"Skipping {self.variant}: variant type {self.variant.type} is not supported")
            return None

        predictor = ProteinConsequencePredictor(self.variant, self.transcript, self.helper)
        components = predictor.predict()
        if components is None:
            return None

        hgvs = None
        if components.mutation_type is not None:
            hgvs = self.formatter.format(components)

        return HgvsProtein(
            ids=self.helper.protein_ids(),
            hgvs=hgvs,
            alternate_protein_sequence=predictor.alternate_protein_sequence,
            mutation_type=components.mutation_type,
        )


def calculate(variant: Variant, transcript: Transcript) -> Optional[HgvsProtein]:
    """Compute the HgvsProtein of a variant on a transcript, or None if not computable."""
    return HgvsProteinCalculator(variant, transcript).calculate()

"""
Renders BuildingComponents as HGVS protein strings.
"""
from hgvsp.models import MutationType
from .cds import STOP, to_three_letter
from .components import BuildingComponents, Kind

PROTEIN_PREFIX = 'p.'
TERMINATION = 'Ter'
UNKNOWN_STOP_POSITION = '?'
MAX_SPELLED_INSERTION = 5


class HgvsProteinFormatter:
    """Turns the components of a classified protein change into its HGVS description."""

    @staticmethod
    def _range(components: BuildingComponents) -> str:
        first = f"{to_three_letter(components.reference_start)}{components.start}"
        if components.start == components.end:
            return first
        return f"{first}_{to_three_letter(components.reference_end)}{components.end}"

    @staticmethod
    def _inserted(residues: str) -> str:
        if STOP in residues:
            stop_at = residues.index(STOP) + 1
            if stop_at > MAX_SPELLED_INSERTION:
                return f"{STOP}{stop_at}"
            return to_three_letter(residues[:stop_at])
        if len(residues) > MAX_SPELLED_INSERTION:
            return str(len(residues))
        return to_three_letter(residues)

    @staticmethod
    def _terminator(components: BuildingComponents) -> str:
        if components.terminator > 0:
            return str(components.terminator)
        return UNKNOWN_STOP_POSITION

    def format(self, components: BuildingComponents) -> str:
        """
        Build the HGVS protein string for a classified change.

        Args:
            components: Output of the consequence predictor.

        Returns:
            The HGVS description, e.g. 'p.Leu757AlafsTer79'.

        Raises:
            ValueError: If the mutation type has no HGVS rendering.
        """
        mutation_type = components.mutation_type
        reference = components.reference_start
        position = components.start

        if components.kind == Kind.FRAMESHIFT:
            return (f"{PROTEIN_PREFIX}{to_three_letter(reference)}{position}"
                    f"{to_three_letter(components.alternate)}fs{TERMINATION}{self._terminator(components)}")

        if mutation_type == MutationType.SILENT:
            if position == 0:
                return f"{PROTEIN_PREFIX}="
            return f"{PROTEIN_PREFIX}{to_three_letter(reference)}{position}="

        if mutation_type == MutationType.SUBSTITUTION:
            return f"{PROTEIN_PREFIX}{to_three_letter(reference)}{position}{to_three_letter(components.alternate)}"

        if mutation_type == MutationType.STOP_GAIN:
            return f"{PROTEIN_PREFIX}{to_three_letter(reference)}{position}{TERMINATION}"

        if mutation_type == MutationType.START_LOSS:
            return f"{PROTEIN_PREFIX}Met1?"

        if mutation_type == MutationType.DUPLICATION:
            return f"{PROTEIN_PREFIX}{self._range(components)}dup"

        if mutation_type == MutationType.INSERTION:
            return (f"{PROTEIN_PREFIX}{to_three_letter(reference)}{components.start}_"
                    f"{to_three_letter(components.reference_end)}{components.end}"
                    f"ins{self._inserted(components.alternate)}")

        if mutation_type == MutationType.DELETION:
            return f"{PROTEIN_PREFIX}{self._range(components)}del"

        if mutation_type == MutationType.DELINS:
            return f"{PROTEIN_PREFIX}{self._range(components)}delins{to_three_letter(components.alternate)}"

        if mutation_type == MutationType.EXTENSION:
            terminator = components.terminator
            tail = f"{TERMINATION}{terminator}" if terminator > 0 else f"{STOP}{UNKNOWN_STOP_POSITION}"
            return f"{PROTEIN_PREFIX}{TERMINATION}{position}{to_three_letter(components.alternate)}ext{tail}"

        raise ValueError(f"Cannot format mutation type {mutation_type!r}")

"""Data models for hgvsp using Pydantic."""
from enum import Enum
from typing import List, Optional, Literal, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


PROTEIN_CODING_BIOTYPES = {
    'protein_coding',
    'nonsense_mediated_decay',
    'non_stop_decay',
    'polymorphic_pseudogene',
    'IG_C_gene', 'IG_D_gene', 'IG_J_gene', 'IG_V_gene',
    'TR_C_gene', 'TR_D_gene', 'TR_J_gene', 'TR_V_gene',
}

SWISSPROT_LABEL = 'uniprotkb/swissprot'


class VariantType(str, Enum):
    """Variant types as reported by the annotation pipeline."""
    SNV = 'SNV'
    MNV = 'MNV'
    INSERTION = 'INSERTION'
    DELETION = 'DELETION'
    INDEL = 'INDEL'
    SV = 'SV'


class MutationType(str, Enum):
    """Classification of a protein level change."""
    SILENT = 'silent'
    SUBSTITUTION = 'substitution'
    STOP_GAIN = 'stop_gain'
    START_LOSS = 'start_loss'
    INSERTION = 'insertion'
    DUPLICATION = 'duplication'
    DELETION = 'deletion'
    DELINS = 'delins'
    EXTENSION = 'extension'
    FRAMESHIFT = 'frameshift'


def _normalize_allele(allele: Optional[str]) -> str:
    if allele is None or allele == '-':
        return ''
    return allele.strip().upper()


class Variant(BaseModel):
    """A genomic variant. Insertions are anchored on the base to the right of the insertion point."""
    model_config = ConfigDict(frozen=True)

    chromosome: str = Field(..., description="Chromosome name (e.g., 17, X, MT)")
    start: int = Field(..., ge=1, description="Genomic start position (1-based)")
    reference: str = Field("", description="Reference allele, empty for insertions")
    alternate: str = Field("", description="Alternate allele, empty for deletions")
    type: Optional[VariantType] = Field(None, description="Variant type, inferred from the alleles if omitted")

    @field_validator('reference', 'alternate', mode='before')
    @classmethod
    def normalize_allele(cls, v: Optional[str]) -> str:
        """Map '-' and None to the empty allele and upper-case the rest."""
        return _normalize_allele(v)

    @model_validator(mode='after')
    def infer_type(self) -> 'Variant':
        if not self.reference and not self.alternate:
            raise ValueError("At least one of reference or alternate must be provided")
        if self.type is None:
            object.__setattr__(self, 'type', infer_variant_type(self.reference, self.alternate))
        return self

    @classmethod
    def from_string(cls, variant: str) -> 'Variant':
        """
        Parse a variant in 'chromosome:position:reference:alternate' notation.

        Args:
            variant: e.g. '17:18173905:-:A'

        Returns:
            A Variant with its type inferred from the alleles.

        Raises:
            ValueError: If the string does not have four fields or the position is not an integer.
        """
        fields = variant.strip().split(':')
        if len(fields) != 4:
            raise ValueError(f"Invalid variant '{variant}'. Expected format: 'chrom:pos:ref:alt'")
        chromosome, position, reference, alternate = fields
        try:
            start = int(position)
        except ValueError as e:
            raise ValueError(f"Invalid position '{position}' in variant '{variant}'") from e
        return cls(chromosome=chromosome, start=start, reference=reference, alternate=alternate)

    @property
    def end(self) -> int:
        """Last genomic base covered by the reference allele (start - 1 for insertions)."""
        return self.start + len(self.reference) - 1

    @property
    def edit_type(self) -> VariantType:
        """
        The type that decides how the variant edits a sequence.

        An INDEL with an empty reference or alternate allele is an insertion or
        a deletion. Every other type is returned unchanged.
        """
        if self.type == VariantType.INDEL:
            if self.is_insertion:
                return VariantType.INSERTION
            if self.is_deletion:
                return VariantType.DELETION
        return self.type

    @property
    def is_insertion(self) -> bool:
        return not self.reference and bool(self.alternate)

    @property
    def is_deletion(self) -> bool:
        return bool(self.reference) and not self.alternate

    def __str__(self) -> str:
        return f"{self.chromosome}:{self.start}:{self.reference or '-'}:{self.alternate or '-'}"


def infer_variant_type(reference: str, alternate: str) -> VariantType:
    """Infer the variant type from a pair of normalized alleles."""
    if len(reference) == 1 and len(alternate) == 1:
        return VariantType.SNV
    if not reference:
        return VariantType.INSERTION
    if not alternate:
        return VariantType.DELETION
    if len(reference) == len(alternate):
        return VariantType.MNV
    return VariantType.INDEL


class Exon(BaseModel):
    """An exon in genomic coordinates (1-based, inclusive)."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=1, description="Genomic start position")
    end: int = Field(..., ge=1, description="Genomic end position")
    phase: int = Field(0, ge=-1, le=2, description="Leading nucleotides before the first complete codon, -1 if non-coding")

    @model_validator(mode='after')
    def check_bounds(self) -> 'Exon':
        if self.end < self.start:
            raise ValueError(f"Exon end {self.end} is before its start {self.start}")
        return self


class Xref(BaseModel):
    """External cross reference of a transcript or its protein."""
    model_config = ConfigDict(frozen=True)

    db_name: str = Field(..., description="Source database label, e.g. uniprotkb/swissprot")
    id: str = Field(..., description="Identifier within the source database")


class Transcript(BaseModel):
    """A protein coding transcript with the sequences the calculator works on."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Transcript ID (e.g., ENST...)")
    protein_id: Optional[str] = Field(None, description="Protein ID (e.g., ENSP...)")
    biotype: str = Field('protein_coding', description="Transcript biotype")
    chromosome: str = Field(..., description="Chromosome name")
    strand: Literal['+', '-'] = Field(..., description="Strand of the transcript")

    genomic_coding_start: int = Field(0, ge=0, description="Genomic position of the lowest coding base, 0 if non-coding")
    genomic_coding_end: int = Field(0, ge=0, description="Genomic position of the highest coding base, 0 if non-coding")
    cdna_coding_start: int = Field(0, ge=0, description="1-based position of the first coding base in the cDNA")
    cds_length: Optional[int] = Field(None, ge=0, description="Coding sequence length including the stop codon")

    cdna_sequence: str = Field("", description="Transcript cDNA in transcript orientation")
    protein_sequence: Optional[str] = Field(None, description="Reference protein, one-letter code, no trailing stop")

    exons: List[Exon] = Field(..., description="Exons in genomic coordinates")
    xrefs: List[Xref] = Field([], description="External cross references")

    @field_validator('exons')
    @classmethod
    def validate_exons(cls, v: List[Exon]) -> List[Exon]:
        """Ensure exons are properly ordered and non-overlapping."""
        if not v:
            raise ValueError("At least one exon must be provided")

        sorted_exons = sorted(v, key=lambda exon: exon.start)
        for i in range(1, len(sorted_exons)):
            if sorted_exons[i].start <= sorted_exons[i - 1].end:
                raise ValueError(
                    f"Exons must be non-overlapping. "
                    f"Found overlap between {sorted_exons[i - 1]} and {sorted_exons[i]}"
                )
        return sorted_exons

    @field_validator('cdna_sequence', mode='before')
    @classmethod
    def upper_sequence(cls, v: Optional[str]) -> str:
        return (v or '').upper()

    @model_validator(mode='after')
    def derive_cds_length(self) -> 'Transcript':
        if self.genomic_coding_start > self.genomic_coding_end:
            raise ValueError("genomic_coding_start must not be greater than genomic_coding_end")
        if self.cds_length is None:
            object.__setattr__(self, 'cds_length', sum(end - start + 1 for start, end in self.coding_segments()))
        return self

    def coding_segments(self) -> List[tuple]:
        """Coding part of each exon as (start, end) genomic pairs, in transcript order."""
        if self.genomic_coding_start == 0:
            return []
        segments = []
        for exon in self.exons:
            start = max(exon.start, self.genomic_coding_start)
            end = min(exon.end, self.genomic_coding_end)
            if start <= end:
                segments.append((start, end))
        if self.strand == '-':
            segments.reverse()
        return segments

    @property
    def is_coding(self) -> bool:
        """Check if this transcript has coding sequence."""
        return self.biotype in PROTEIN_CODING_BIOTYPES and self.genomic_coding_start > 0

    def xref_id(self, db_name: str) -> Optional[str]:
        for xref in self.xrefs:
            if xref.db_name == db_name:
                return xref.id
        return None


class HgvsProtein(BaseModel):
    """HGVS protein description predicted for a variant on a transcript."""
    ids: List[str] = Field([], description="Protein identifiers: transcript protein ID, then SwissProt accession")
    hgvs: Optional[str] = Field(None, description="HGVS protein string, e.g. p.Val428Met")
    alternate_protein_sequence: Optional[str] = Field(None, description="Predicted protein sequence, no trailing stop")
    mutation_type: Optional[MutationType] = Field(None, description="Classification of the protein change")

    def qualified_hgvs(self) -> Optional[str]:
        """HGVS string prefixed with the primary protein ID, e.g. ENSP00000365439:p.Lys411_Gln412insSer."""
        if self.hgvs is None:
            return None
        if not self.ids:
            return self.hgvs
        return f"{self.ids[0]}:{self.hgvs}"


class ProteinAnnotation(BaseModel):
    """Result of annotating one variant against one transcript."""
    variant: str = Field(..., description="Variant in chrom:pos:ref:alt notation")
    transcript_id: str = Field(..., description="Transcript ID")
    hgvs_protein: Optional[HgvsProtein] = Field(None, description="Predicted protein change, None if not computable")


class AnnotationBundle(BaseModel):
    """Final output bundle containing all annotations."""
    annotations: List[ProteinAnnotation] = Field([], description="Annotations in input order")
    provenance: Dict[str, Any] = Field({}, description="Provenance information (versions, inputs, etc.)")
    warnings: List[str] = Field([], description="List of warnings from the entire process")

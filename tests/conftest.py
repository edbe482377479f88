"""Pytest configuration and fixtures for tests."""
import pytest

from hgvsp.models import Exon, Transcript, Variant, Xref
from hgvsp.consequence.cds import is_mitochondrial, reverse_complement, translate_sequence

UTR5 = "GCCACC"
# In frame after the stop: GGT TAA; shifted by -1 nt: AAG GTT AAG TAG
UTR3 = "GGTTAAGTAGC"

# Codons: M A K E E E L S G *
SMALL_CDS = "ATGGCTAAAGAAGAAGAACTGTCTGGCTAA"
SMALL_PROTEIN = "MAKEEELSG"

BACK_TRANSLATION = {
    'M': 'ATG', 'A': 'GCT', 'V': 'GTG', 'R': 'CGC', 'L': 'CTG', 'K': 'AAA',
    'E': 'GAA', 'S': 'TCT', 'Q': 'CAG', 'G': 'GGC', 'W': 'TGG', '*': 'TAA',
}


def back_translate(protein: str) -> str:
    """Encode a protein with one fixed codon per residue, stop codon appended."""
    return "".join(BACK_TRANSLATION[aa] for aa in protein + "*")


def scenario_protein() -> str:
    """An 840 residue protein with landmarks at fixed positions."""
    residues = ["A"] * 840
    landmarks = {1: "M", 71: "K", 75: "E", 76: "E", 77: "E", 297: "S", 411: "K",
                 412: "Q", 428: "V", 750: "R", 757: "L", 835: "K"}
    for position, aa in landmarks.items():
        residues[position - 1] = aa
    return "".join(residues)


class SyntheticTranscript:
    """Builds a Transcript from a CDS and creates variants in CDS coordinates.

    Exons are laid out 100 bp apart, ascending from position 1000 on the
    plus strand and descending from 100000 on the minus strand.
    """

    def __init__(self, cds, utr5=UTR5, utr3=UTR3, strand="+", exon_lengths=None,
                 chromosome="1", protein=None, phase=0, biotype="protein_coding",
                 transcript_id="ENST00000000001", protein_id="ENSP00000000001", xrefs=None):
        self.cds = cds
        self.strand = strand
        self.chromosome = chromosome
        self.utr5 = utr5
        self.utr3 = utr3
        cdna = utr5 + cds + utr3
        exon_lengths = exon_lengths or [len(cdna)]
        assert sum(exon_lengths) == len(cdna)

        self._genomic = []
        exons = []
        first_coding, last_coding = len(utr5), len(utr5) + len(cds) - 1
        position = 1000 if strand == "+" else 100000
        consumed = 0
        for length in exon_lengths:
            if strand == "+":
                start, end = position, position + length - 1
                self._genomic.extend(range(start, end + 1))
                position = end + 101
            else:
                start, end = position - length + 1, position
                self._genomic.extend(range(end, start - 1, -1))
                position = start - 101
            exon_phase = phase if consumed <= first_coding < consumed + length else 0
            exons.append(Exon(start=start, end=end, phase=exon_phase))
            consumed += length

        coding = (self._genomic[first_coding], self._genomic[last_coding])
        if protein is None:
            protein = translate_sequence(cds[phase:], is_mitochondrial(chromosome), to_stop=True)
            if phase:
                protein = "X" + protein

        self.transcript = Transcript(
            id=transcript_id,
            protein_id=protein_id,
            biotype=biotype,
            chromosome=chromosome,
            strand=strand,
            genomic_coding_start=min(coding),
            genomic_coding_end=max(coding),
            cdna_coding_start=len(utr5) + 1,
            cdna_sequence=cdna,
            protein_sequence=protein,
            exons=exons,
            xrefs=xrefs or [],
        )

    def genomic(self, cds_position: int) -> int:
        return self._genomic[len(self.utr5) + cds_position - 1]

    def _on_genome(self, seq: str) -> str:
        return reverse_complement(seq) if self.strand == "-" else seq

    def snv(self, cds_position: int, alternate: str) -> Variant:
        """Substitution of one CDS base; alleles given in transcript orientation."""
        return Variant(chromosome=self.chromosome, start=self.genomic(cds_position),
                       reference=self._on_genome(self.cds[cds_position - 1]),
                       alternate=self._on_genome(alternate))

    def insertion(self, cds_position: int, inserted: str) -> Variant:
        """Insertion immediately 5' of the given CDS position."""
        if self.strand == "+":
            start = self.genomic(cds_position)
        else:
            start = self.genomic(cds_position - 1)
        return Variant(chromosome=self.chromosome, start=start, reference="-",
                       alternate=self._on_genome(inserted))

    def deletion(self, cds_position: int, length: int) -> Variant:
        """Deletion of `length` CDS bases starting at the given CDS position."""
        deleted = self.cds[cds_position - 1:cds_position - 1 + length]
        if self.strand == "+":
            start = self.genomic(cds_position)
        else:
            start = self.genomic(cds_position + length - 1)
        return Variant(chromosome=self.chromosome, start=start,
                       reference=self._on_genome(deleted), alternate="-")


@pytest.fixture(params=["+", "-"])
def small(request):
    """The 9 residue test transcript on either strand."""
    return SyntheticTranscript(SMALL_CDS, strand=request.param,
                               xrefs=[Xref(db_name="uniprotkb/swissprot", id="P00001")])


@pytest.fixture
def small_plus():
    return SyntheticTranscript(SMALL_CDS)


@pytest.fixture(params=["+", "-"])
def scenario(request):
    """The 840 residue landmark transcript on either strand."""
    return SyntheticTranscript(back_translate(scenario_protein()), strand=request.param)


@pytest.fixture
def small_cds():
    """CDS of the 9 residue test transcript, M A K E E E L S G and a TAA stop."""
    return SMALL_CDS


@pytest.fixture
def scenario_cds():
    return back_translate(scenario_protein())


@pytest.fixture
def make_transcript():
    """Create synthetic transcripts, built on the small CDS unless another CDS is given."""
    def _make_transcript(cds=SMALL_CDS, **kwargs):
        return SyntheticTranscript(cds, **kwargs)
    return _make_transcript

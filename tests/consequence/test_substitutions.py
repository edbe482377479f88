"""Tests for single nucleotide substitutions."""
import logging

import pytest

from hgvsp.consequence.calculator import calculate
from hgvsp.models import MutationType, Variant


@pytest.mark.parametrize("cds_position, alternate, expected_hgvs, expected_type, expected_protein", [
    (5, "T", "p.Ala2Val", MutationType.SUBSTITUTION, "MVKEEELSG"),
    (6, "C", "p.Ala2=", MutationType.SILENT, "MAKEEELSG"),
    (2, "C", "p.Met1?", MutationType.START_LOSS, None),
    (7, "T", "p.Lys3Ter", MutationType.STOP_GAIN, "MA"),
    (28, "C", "p.Ter10GlnextTer2", MutationType.EXTENSION, "MAKEEELSGQG"),
    (30, "G", "p.Ter10=", MutationType.SILENT, "MAKEEELSG"),
    (21, "A", "p.Leu7=", MutationType.SILENT, "MAKEEELSG"),
])
def test_substitution_outcomes(small, cds_position, alternate, expected_hgvs, expected_type, expected_protein):
    """Each SNV class gives the expected HGVS string on both strands."""
    result = calculate(small.snv(cds_position, alternate), small.transcript)

    assert result is not None
    assert result.hgvs == expected_hgvs
    assert result.mutation_type == expected_type
    assert result.alternate_protein_sequence == expected_protein


def test_protein_ids_include_swissprot(small):
    result = calculate(small.snv(5, "T"), small.transcript)
    assert result.ids == ["ENSP00000000001", "P00001"]
    assert result.qualified_hgvs() == "ENSP00000000001:p.Ala2Val"


def test_protein_ids_without_xrefs(small_plus):
    result = calculate(small_plus.snv(5, "T"), small_plus.transcript)
    assert result.ids == ["ENSP00000000001"]


def test_extension_without_new_stop(make_transcript):
    """Losing the stop with no downstream stop gives an open-ended extension."""
    synthetic = make_transcript(utr3="GGTGGC")
    result = calculate(synthetic.snv(28, "C"), synthetic.transcript)
    assert result.hgvs == "p.Ter10Glnext*?"
    assert result.alternate_protein_sequence == "MAKEEELSGQGG"


def test_mitochondrial_code(make_transcript):
    """AGA is arginine in the nuclear code but a stop codon in mitochondria."""
    nuclear = make_transcript()
    mitochondrial = make_transcript(chromosome="MT")

    assert calculate(nuclear.snv(8, "G"), nuclear.transcript).hgvs == "p.Lys3Arg"
    assert calculate(mitochondrial.snv(8, "G"), mitochondrial.transcript).hgvs == "p.Lys3Ter"


def test_substitution_across_exons(make_transcript):
    """Positions are counted over the coding parts of all exons."""
    for strand in ("+", "-"):
        synthetic = make_transcript(strand=strand, exon_lengths=[15, 32])
        assert synthetic.transcript.cds_length == 30
        assert calculate(synthetic.snv(5, "T"), synthetic.transcript).hgvs == "p.Ala2Val"
        assert calculate(synthetic.snv(13, "T"), synthetic.transcript).hgvs == "p.Glu5Ter"


def test_invalid_allele_returns_none(small_plus):
    variant = Variant(chromosome="1", start=small_plus.genomic(5), reference="C", alternate="S")
    assert calculate(variant, small_plus.transcript) is None


@pytest.mark.parametrize("reference, alternate", [("CT", "TA"), ("CT", "A")])
def test_unsupported_variant_types(small_plus, reference, alternate):
    variant = Variant(chromosome="1", start=small_plus.genomic(5), reference=reference, alternate=alternate)
    assert calculate(variant, small_plus.transcript) is None


def test_variant_in_utr_returns_none(small_plus):
    variant = Variant(chromosome="1", start=1000, reference="G", alternate="A")
    assert calculate(variant, small_plus.transcript) is None


def test_non_coding_transcript_returns_none(make_transcript):
    synthetic = make_transcript(biotype="lncRNA")
    assert calculate(synthetic.snv(5, "T"), synthetic.transcript) is None


def test_missing_protein_returns_none(make_transcript):
    synthetic = make_transcript(protein="")
    assert calculate(synthetic.snv(5, "T"), synthetic.transcript) is None


def test_reference_mismatch_is_logged(small_plus, caplog):
    """A wrong reference base is reported but the alternate is still applied."""
    variant = Variant(chromosome="1", start=small_plus.genomic(5), reference="G", alternate="T")
    with caplog.at_level(logging.WARNING):
        result = calculate(variant, small_plus.transcript)
    assert result.hgvs == "p.Ala2Val"
    assert "Reference allele mismatch" in caplog.text


def test_unconfirmed_start(make_transcript, small_cds):
    """A protein starting with X keeps the numbering of its leading partial codon."""
    synthetic = make_transcript("G" + small_cds[3:], phase=1)
    assert synthetic.transcript.protein_sequence == "XAKEEELSG"

    assert calculate(synthetic.snv(3, "T"), synthetic.transcript).hgvs == "p.Ala2Val"

    partial = calculate(synthetic.snv(1, "A"), synthetic.transcript)
    assert partial is not None
    assert partial.hgvs is None

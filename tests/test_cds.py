import pytest

from hgvsp.consequence.cds import (
    GENETIC_CODE,
    MITOCHONDRIAL_CODE,
    is_mitochondrial,
    reverse_complement,
    to_three_letter,
    translate_codon,
    translate_sequence,
)


def test_genetic_code_is_complete():
    assert len(GENETIC_CODE) == 64
    assert len(MITOCHONDRIAL_CODE) == 64
    assert sorted(k for k, v in GENETIC_CODE.items() if v == '*') == ['TAA', 'TAG', 'TGA']


@pytest.mark.parametrize("codon, nuclear, mitochondrial", [
    ("AGA", "R", "*"),
    ("AGG", "R", "*"),
    ("ATA", "I", "M"),
    ("TGA", "*", "W"),
    ("ATG", "M", "M"),
    ("tgg", "W", "W"),
])
def test_translate_codon(codon, nuclear, mitochondrial):
    assert translate_codon(codon) == nuclear
    assert translate_codon(codon, mitochondrial=True) == mitochondrial


def test_translate_codon_with_ambiguous_base():
    assert translate_codon("ANG") == "X"


def test_translate_codon_rejects_wrong_length():
    with pytest.raises(ValueError):
        translate_codon("AT")


def test_translate_sequence():
    assert translate_sequence("ATGGCTTAAGGC") == "MA*G"
    assert translate_sequence("ATGGCTTAAGGC", to_stop=True) == "MA"
    # Incomplete trailing codon is ignored
    assert translate_sequence("ATGGC") == "M"
    assert translate_sequence("ATGTGAAGA", mitochondrial=True) == "MW*"


@pytest.mark.parametrize("chromosome, expected", [
    ("MT", True), ("M", True), ("chrM", True), ("1", False), ("chrX", False),
])
def test_is_mitochondrial(chromosome, expected):
    assert is_mitochondrial(chromosome) is expected


def test_to_three_letter():
    assert to_three_letter("LK*") == "LeuLysTer"
    assert to_three_letter("UOX") == "SecPylXaa"
    assert to_three_letter("") == ""


def test_to_three_letter_unknown_symbol():
    with pytest.raises(ValueError, match="Unknown amino acid"):
        to_three_letter("J")


def test_reverse_complement():
    assert reverse_complement("ATGCN") == "NGCAT"
    assert reverse_complement("acg") == "CGT"
    assert reverse_complement("") == ""


def test_reverse_complement_invalid_base():
    assert reverse_complement("ACS") is None

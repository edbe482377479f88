"""
Genetic code tables and amino acid naming used by the protein calculator.
"""
import logging
from typing import Dict, Iterable

_logger = logging.getLogger(__name__)

STOP = '*'
UNKNOWN_AMINOACID = 'X'

# Standard DNA codon table
GENETIC_CODE = {
    'ATA':'I', 'ATC':'I', 'ATT':'I', 'ATG':'M',
    'ACA':'T', 'ACC':'T', 'ACG':'T', 'ACT':'T',
    'AAC':'N', 'AAT':'N', 'AAA':'K', 'AAG':'K',
    'AGC':'S', 'AGT':'S', 'AGA':'R', 'AGG':'R',
    'CTA':'L', 'CTC':'L', 'CTG':'L', 'CTT':'L',
    'CCA':'P', 'CCC':'P', 'CCG':'P', 'CCT':'P',
    'CAC':'H', 'CAT':'H', 'CAA':'Q', 'CAG':'Q',
    'CGA':'R', 'CGC':'R', 'CGG':'R', 'CGT':'R',
    'GTA':'V', 'GTC':'V', 'GTG':'V', 'GTT':'V',
    'GCA':'A', 'GCC':'A', 'GCG':'A', 'GCT':'A',
    'GAC':'D', 'GAT':'D', 'GAA':'E', 'GAG':'E',
    'GGA':'G', 'GGC':'G', 'GGG':'G', 'GGT':'G',
    'TCA':'S', 'TCC':'S', 'TCG':'S', 'TCT':'S',
    'TTC':'F', 'TTT':'F', 'TTA':'L', 'TTG':'L',
    'TAC':'Y', 'TAT':'Y', 'TAA':'*', 'TAG':'*',
    'TGC':'C', 'TGT':'C', 'TGA':'*', 'TGG':'W',
}

# Vertebrate mitochondrial code (NCBI table 2)
MITOCHONDRIAL_CODE = dict(GENETIC_CODE)
MITOCHONDRIAL_CODE.update({
    'AGA': '*', 'AGG': '*',
    'ATA': 'M',
    'TGA': 'W',
})

MITOCHONDRIAL_CHROMOSOMES = {'MT', 'M', 'chrM', 'chrMT'}

THREE_LETTER_AMINOACIDS = {
    'A': 'Ala', 'R': 'Arg', 'N': 'Asn', 'D': 'Asp', 'C': 'Cys',
    'Q': 'Gln', 'E': 'Glu', 'G': 'Gly', 'H': 'His', 'I': 'Ile',
    'L': 'Leu', 'K': 'Lys', 'M': 'Met', 'F': 'Phe', 'P': 'Pro',
    'S': 'Ser', 'T': 'Thr', 'W': 'Trp', 'Y': 'Tyr', 'V': 'Val',
    'U': 'Sec', 'O': 'Pyl', 'X': 'Xaa', '*': 'Ter',
}

COMPLEMENTARY_NT = {'A': 'T', 'T': 'A', 'C': 'G', 'G': 'C', 'N': 'N'}


def is_mitochondrial(chromosome: str) -> bool:
    """Return True if the chromosome name denotes the mitochondrial genome."""
    return chromosome in MITOCHONDRIAL_CHROMOSOMES


def codon_table(mitochondrial: bool = False) -> Dict[str, str]:
    """Return the codon table for nuclear or mitochondrial transcripts."""
    return MITOCHONDRIAL_CODE if mitochondrial else GENETIC_CODE


def translate_codon(codon: str, mitochondrial: bool = False) -> str:
    """
    Translate a single codon into a one-letter amino acid.

    Args:
        codon: A three nucleotide string.
        mitochondrial: Use the vertebrate mitochondrial code.

    Returns:
        The one-letter amino acid, '*' for stop codons or 'X' when the codon
        contains ambiguous bases.
    """
    if len(codon) != 3:
        raise ValueError(f"Codon must have 3 nucleotides, got '{codon}'")
    return codon_table(mitochondrial).get(codon.upper(), UNKNOWN_AMINOACID)


def translate_sequence(seq: str, mitochondrial: bool = False, to_stop: bool = False) -> str:
    """
    Translate a DNA sequence into a protein sequence.

    Trailing nucleotides that do not complete a codon are ignored.

    Args:
        seq: DNA sequence to translate, already in frame
        mitochondrial: Use the vertebrate mitochondrial code
        to_stop: Stop translating at the first stop codon (not included)

    Returns:
        Translated protein sequence with '*' for stop codons
    """
    table = codon_table(mitochondrial)
    protein = []
    for i in range(0, len(seq) - 2, 3):
        aa = table.get(seq[i:i + 3].upper(), UNKNOWN_AMINOACID)
        if aa == STOP and to_stop:
            break
        protein.append(aa)
    return ''.join(protein)


def to_three_letter(aminoacids: Iterable[str]) -> str:
    """
    Convert one-letter amino acids to concatenated three-letter codes.

    >>> to_three_letter('LK*')
    'LeuLysTer'
    """
    try:
        return ''.join(THREE_LETTER_AMINOACIDS[aa] for aa in aminoacids)
    except KeyError as e:
        raise ValueError(f"Unknown amino acid symbol {e.args[0]!r}") from e


def reverse_complement(seq: str):
    """
    Computes the reverse complement of a DNA sequence.

    Returns None when the sequence holds a character with no complement, e.g.
    IUPAC codes such as 'S' found in some ClinVar alleles.
    """
    complement = []
    for nt in reversed(seq.upper()):
        if nt not in COMPLEMENTARY_NT:
            _logger.warning(f"Cannot complement nucleotide '{nt}' in allele '{seq}'")
            return None
        complement.append(COMPLEMENTARY_NT[nt])
    return ''.join(complement)

__version__ = "0.1.0"

# Import key functions/classes to make them available at the package level
from .models import (
    Variant,
    VariantType,
    Exon,
    Xref,
    Transcript,
    HgvsProtein,
    MutationType,
    ProteinAnnotation,
    AnnotationBundle
)
from .consequence.calculator import HgvsProteinCalculator, calculate
from .apply.batch import annotate_variants
from .config import load_transcripts, load_variants

__all__ = [
    'Variant',
    'VariantType',
    'Exon',
    'Xref',
    'Transcript',
    'HgvsProtein',
    'MutationType',
    'ProteinAnnotation',
    'AnnotationBundle',
    'HgvsProteinCalculator',
    'calculate',
    'annotate_variants',
    'load_transcripts',
    'load_variants'
]

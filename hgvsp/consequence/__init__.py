from .calculator import HgvsProteinCalculator, calculate
from .components import BuildingComponents, Kind
from .formatter import HgvsProteinFormatter
from .predictor import ProteinConsequencePredictor
from .transcript_utils import TranscriptSequenceHelper

__all__ = [
    'HgvsProteinCalculator',
    'calculate',
    'BuildingComponents',
    'Kind',
    'HgvsProteinFormatter',
    'ProteinConsequencePredictor',
    'TranscriptSequenceHelper',
]

"""
Handles loading and validation of transcript and variant inputs.
"""
import json
import logging
from typing import List, TextIO
from pydantic import ValidationError

from .models import Transcript, Variant

_logger = logging.getLogger(__name__)


def load_transcripts(transcripts_path: str) -> List[Transcript]:
    """
    Loads transcripts from a JSON file and validates them.

    The file holds either a single transcript object or a list of them.

    Args:
        transcripts_path: The path to the JSON file.

    Returns:
        A list of validated Transcript objects.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or fails validation.
    """
    _logger.info(f"Loading transcripts from {transcripts_path}")
    try:
        with open(transcripts_path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        _logger.error(f"Transcripts file not found at {transcripts_path}")
        raise
    except json.JSONDecodeError as e:
        _logger.error(f"Invalid JSON in transcripts file: {transcripts_path}")
        raise ValueError(f"Invalid JSON in {transcripts_path}: {e}") from e

    if isinstance(data, dict):
        data = [data]

    try:
        transcripts = [Transcript(**entry) for entry in data]
    except (ValidationError, TypeError) as e:
        _logger.error("Transcript validation failed.")
        raise ValueError(f"Transcript validation failed: {e}") from e

    _logger.info(f"Successfully loaded {len(transcripts)} transcript(s)")
    return transcripts


def load_variants(file: TextIO) -> List[Variant]:
    """
    Parses a file with one variant per line.

    Lines are either 'chrom:pos:ref:alt' or tab separated 'chrom pos ref alt'.
    Blank lines and lines starting with '#' are skipped.

    Raises:
        ValueError: If a line cannot be parsed, naming its line number.
    """
    variants = []
    for line_number, line in enumerate(file, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "\t" in line:
            line = ":".join(field.strip() for field in line.split("\t"))
        try:
            variants.append(Variant.from_string(line))
        except (ValueError, ValidationError) as e:
            raise ValueError(f"Invalid variant on line {line_number}: {e}") from e
    return variants

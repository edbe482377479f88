"""
JSON rendering of protein annotation results.

The document holds one entry per variant/transcript pair with its HGVS
protein description, predicted protein and mutation type, followed by the
run warnings and provenance.
"""
import logging
from ..models import AnnotationBundle

_logger = logging.getLogger(__name__)


def generate_json_output(bundle: AnnotationBundle, indent: int = 2, exclude_none: bool = False) -> str:
    """
    Serialize the HGVS protein annotations of a run.

    Args:
        bundle: Annotations, warnings and provenance of the run.
        indent: The indentation level for pretty-printing the JSON.
        exclude_none: Drop unset fields, e.g. the predicted protein of a start loss.

    Returns:
        A JSON formatted string.

    Raises:
        TypeError: If the bundle holds values that cannot be serialized.
    """
    _logger.info(
        f"Writing {len(bundle.annotations)} HGVS protein annotation(s) "
        f"and {len(bundle.warnings)} warning(s) as JSON"
    )
    try:
        return bundle.model_dump_json(indent=indent, exclude_none=exclude_none)
    except Exception as e:
        _logger.error(f"Failed to serialize protein annotations to JSON: {e}")
        raise TypeError(f"Error during JSON serialization: {e}") from e

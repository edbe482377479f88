import logging
from typing import Optional, TextIO

import click

from hgvsp import annotate_variants, load_transcripts, load_variants
from hgvsp.io.fasta import generate_fasta_output
from hgvsp.io.jsonio import generate_json_output

# Set up basic logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

@click.command()
@click.option(
    "--transcripts",
    "transcripts_path",
    type=click.Path(dir_okay=False),
    required=True,
    help="Path to a JSON file with one transcript or a list of transcripts.",
)
@click.option(
    "--variants",
    "variants_file",
    type=click.File("r"),
    required=True,
    help="Path to a file with one 'chrom:pos:ref:alt' variant per line.",
)
@click.option(
    "--out",
    "out_json_file",
    type=click.File("w"),
    help="Path to write the output JSON AnnotationBundle. Defaults to stdout.",
)
@click.option(
    "--fasta",
    "out_fasta_file",
    type=click.File("w"),
    help="Path to write the predicted protein sequences as FASTA.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
def main(
    transcripts_path: str,
    variants_file: TextIO,
    out_json_file: Optional[TextIO],
    out_fasta_file: Optional[TextIO],
    verbose: bool,
):
    """
    Computes HGVS protein descriptions of genomic variants on coding transcripts.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # --- Input Parsing ---
    try:
        transcripts = load_transcripts(transcripts_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load transcripts from {transcripts_path}: {e}")
        raise click.Abort()

    try:
        variants = load_variants(variants_file)
    except ValueError as e:
        logger.error(f"Failed to parse variants from {variants_file.name}: {e}")
        raise click.Abort()
    logger.info(f"Loaded {len(variants)} variants from {variants_file.name}")

    # --- Core Logic ---
    try:
        bundle = annotate_variants(
            variants,
            transcripts,
            provenance={"transcripts_file": transcripts_path, "variants_file": variants_file.name},
        )
    except ValueError as e:
        logger.error(f"An error occurred during annotation: {e}")
        raise click.Abort()

    # --- Output Generation ---
    json_output = generate_json_output(bundle)
    if out_json_file:
        logger.info(f"Writing JSON output to {out_json_file.name}")
        out_json_file.write(json_output)
    else:
        click.echo(json_output)

    if out_fasta_file:
        logger.info(f"Writing FASTA output to {out_fasta_file.name}")
        out_fasta_file.write(generate_fasta_output(bundle))

    logger.info("Processing complete.")

if __name__ == "__main__":
    main()

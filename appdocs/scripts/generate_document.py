"""Generate an application document from a JSON data file.

Usage:
    python -m appdocs.scripts.generate_document \
        --data applications.json --id <uuid> --output document.pdf

Exit status:
    0  document written
    1  data file unreadable or invalid, application not found, or its
       state has no document
    2  invalid arguments (argparse)
"""

import argparse
import logging
import sys
import uuid
from pathlib import Path

from appdocs.core.config import settings
from appdocs.providers.data.json_file_adapter import JsonFileApplicationProvider
from appdocs.providers.errors import ProviderError
from appdocs.providers.factory import build_document_generator

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the PDF document for an application."
    )
    parser.add_argument(
        "--data", type=Path, required=True, help="JSON application data file"
    )
    parser.add_argument(
        "--id",
        type=uuid.UUID,
        required=True,
        dest="application_id",
        help="Application id",
    )
    parser.add_argument(
        "--output", type=Path, required=True, help="Where to write the PDF"
    )
    parser.add_argument(
        "--base-uri",
        default=settings.template_base_uri,
        help="Template base URI, ending with its separator",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the script.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        data_provider = JsonFileApplicationProvider(args.data)
    except ProviderError as e:
        logger.error("Cannot load application data: %s", e)
        return 1

    generator = build_document_generator(settings, data_provider=data_provider)
    result = generator.generate(args.application_id, args.base_uri)

    if not result.found or result.pdf_bytes is None:
        logger.error(
            "No document written for application %s (%s)",
            args.application_id,
            result.outcome.value,
        )
        return 1

    args.output.write_bytes(result.pdf_bytes)
    logger.info(
        "Wrote %d bytes for application %s to %s",
        len(result.pdf_bytes),
        args.application_id,
        args.output,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

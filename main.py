#!/usr/bin/env python3
"""
Invoice Field Extraction System - Main Entry Point.

Extracts header fields (company, invoice number, dates, amounts, VAT
breakdown, description) from Spanish invoices and emits them as JSON.

Usage:
    Command Line:
        python main.py --input factura.pdf
        python main.py --input ./facturas/ --output outputs/results.json

    Python:
        from main import run_extraction
        results = run_extraction("factura.pdf")
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, List, Dict, Any

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import project modules
from config import ConfigurationManager, get_config
from invoice_fields import FieldExtractor, TextLoader
from invoice_fields.utils.exceptions import InvoiceExtractionError
from invoice_fields.utils.helpers import ensure_directory
from invoice_fields.utils.logger import setup_logger_from_config, get_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list. Defaults to ``sys.argv[1:]``.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Invoice Field Extraction System",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Process single invoice:
        python main.py --input factura.pdf

    Process directory and save results:
        python main.py --input ./facturas/ --output outputs/results.json
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Input file or directory containing invoices"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output JSON file (default: print to stdout)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Search input directory recursively"
    )

    # Logging options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize the extraction system with configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config()

    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = None

    if level is not None:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    logger.info("=" * 60)
    logger.info("INVOICE FIELD EXTRACTION SYSTEM")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Input: {args.input}")
    logger.info(f"Output: {args.output or 'stdout'}")

    return config


def collect_files(loader: TextLoader, input_path: str, recursive: bool = False) -> List[Path]:
    """
    Resolve the input argument into the list of files to process.

    Args:
        loader: TextLoader used to validate and list files.
        input_path: File or directory path.
        recursive: Whether to search subdirectories.

    Returns:
        List of file paths.

    Raises:
        InvoiceExtractionError: If the path is missing or unsupported.
    """
    path = Path(input_path)

    if path.is_dir():
        return loader.find_files(path, recursive=recursive)

    return [loader.validate_file(path)]


def run_extraction(
    input_path: str,
    output_path: Optional[str] = None,
    config_path: Optional[str] = None,
    recursive: bool = False
) -> List[Dict[str, Any]]:
    """
    Run the invoice extraction pipeline.

    Each file is processed independently: a file that cannot be read is
    reported with its error and the remaining files are still processed.

    Args:
        input_path: Path to input file or directory.
        output_path: JSON file to write. If None, nothing is written.
        config_path: Optional custom configuration file path.
        recursive: Whether to search subdirectories.

    Returns:
        One entry per file: ``{"file", "fields"}`` on success,
        ``{"file", "error"}`` on failure.

    Raises:
        InvoiceExtractionError: If the input path itself is invalid.

    Example:
        >>> results = run_extraction("facturas/")
        >>> for r in results:
        ...     print(r['fields'].get('invoiceNumber'))
    """
    logger = get_logger(__name__)

    ConfigurationManager(config_path)

    loader = TextLoader()
    extractor = FieldExtractor.from_config()
    threshold = get_config("output.confidence_warning_threshold", 0.5)

    files_to_process = collect_files(loader, input_path, recursive)
    logger.info(f"Processing {len(files_to_process)} files...")

    results = []
    for file_path in files_to_process:
        logger.info(f"Processing: {file_path.name}")

        try:
            text = loader.load(file_path)
        except InvoiceExtractionError as e:
            logger.error(f"Error processing {file_path.name}: {e}")
            results.append({'file': str(file_path), 'error': str(e)})
            continue

        fields = extractor.extract(text)

        if fields.confidence < threshold:
            logger.warning(
                f"Low confidence for {file_path.name}: {fields.confidence:.2f} "
                f"(missing: {', '.join(fields.missing_fields)})"
            )

        logger.info(
            f"  Extracted: Invoice #{fields.invoice_number or 'N/A'}, "
            f"Confidence: {fields.confidence:.2f}"
        )
        results.append({'file': str(file_path), 'fields': fields.to_dict()})

    if output_path:
        save_results(results, output_path)
        logger.info(f"JSON output: {output_path}")

    return results


def save_results(results: List[Dict[str, Any]], output_path: str) -> Path:
    """
    Write results as JSON.

    Args:
        results: Entries returned by run_extraction().
        output_path: Destination file.

    Returns:
        Path of the written file.
    """
    path = Path(output_path)
    ensure_directory(path.parent)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(results, f, indent=get_config("output.json_indent", 2), ensure_ascii=False)

    return path


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code: 0 if at least one file was processed, 1 on input
        errors, 130 when interrupted.
    """
    try:
        args = parse_arguments(argv)

        initialize_system(args)
        logger = get_logger(__name__)

        results = run_extraction(
            input_path=args.input,
            output_path=args.output,
            config_path=args.config,
            recursive=args.recursive
        )

        if not args.output:
            print(json.dumps(results, indent=get_config("output.json_indent", 2), ensure_ascii=False))

        succeeded = sum(1 for r in results if 'fields' in r)

        logger.info("=" * 60)
        logger.info(f"Extraction complete. {succeeded}/{len(results)} files processed.")
        logger.info("=" * 60)

        if not succeeded:
            logger.error("No files were processed")
            return 1

        return 0

    except InvoiceExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())

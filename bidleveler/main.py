import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from bidleveler.config.settings import Settings
from bidleveler.documents.file_loader import FileLoader
from bidleveler.logging.logger import Log
from bidleveler.pdf.factory import PdfExtractorFactory
from bidleveler.preprocessing.budget import budget_for_batch
from bidleveler.preprocessing.models import ProcessingBudget
from bidleveler.preprocessing.preprocessor import build_preprocessor
from bidleveler.usage.pricing import estimate_cost, format_usd
from bidleveler.usage.recorder import InMemoryUsageRecorder


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bidleveler",
        description="Preprocess bid documents and print the results as JSON.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="bid files (.pdf, .txt, .md, .csv)")
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="per-document character budget (default: split the combined budget across files)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load files -> preprocess -> print JSON results.

    Returns 1 when any document came back with an error, 0 otherwise.
    """
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    loader = FileLoader(PdfExtractorFactory.create(settings))
    documents = [loader.load(path) for path in args.files]

    budget = ProcessingBudget.from_settings(settings)
    if args.max_length is not None:
        budget = replace(budget, max_content_length=args.max_length)
    elif len(documents) > 1:
        budget = budget_for_batch(budget, len(documents), settings.combined_content_budget)

    recorder = InMemoryUsageRecorder(settings.usage_log_max_entries)
    preprocessor = build_preprocessor(settings, usage_recorder=recorder)
    results = preprocessor.preprocess(documents, budget)

    # Processed tokens become the analysis prompt's input tokens.
    prompt_tokens = recorder.stats().total_output_tokens
    projected = estimate_cost(
        prompt_tokens,
        0,
        settings.input_price_per_1k_tokens,
        settings.output_price_per_1k_tokens,
    )
    Log.info(f"Projected analysis input: ~{prompt_tokens} tokens, {format_usd(projected)}")

    json.dump([result.to_dict() for result in results], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 1 if any(result.error for result in results) else 0


if __name__ == "__main__":
    sys.exit(main())

from collections.abc import Sequence
from dataclasses import dataclass, field

from bidleveler.analysis.analyzer import BidAnalyzer
from bidleveler.analysis.exceptions import InvalidBidInputError
from bidleveler.analysis.models import BidAnalysis
from bidleveler.logging.logger import Log
from bidleveler.preprocessing.budget import budget_for_batch
from bidleveler.preprocessing.models import Document, ProcessingBudget, ProcessingResult
from bidleveler.preprocessing.preprocessor import Preprocessor
from bidleveler.preprocessing.tokens import estimate_tokens, reduction_percent

MIN_BID_CONTENT_LENGTH = 100
BID_INDICATORS = ("cost", "price", "bid", "estimate")


def is_valid_bid_content(content: object) -> bool:
    """Cheap sanity check that *content* looks like a bid and not a stray file."""
    if not isinstance(content, str) or len(content) < MIN_BID_CONTENT_LENGTH:
        return False
    lowered = content.lower()
    return any(indicator in lowered for indicator in BID_INDICATORS)


@dataclass(frozen=True)
class ComparisonOutcome:
    analysis: BidAnalysis
    results: list[ProcessingResult] = field(default_factory=list)


class BidComparisonService:
    """Multi-bid flow: validate, split the budget, preprocess, analyze."""

    def __init__(
        self,
        preprocessor: Preprocessor,
        analyzer: BidAnalyzer,
        combined_budget: int = 12000,
        base_budget: ProcessingBudget | None = None,
    ) -> None:
        self._preprocessor = preprocessor
        self._analyzer = analyzer
        self._combined_budget = combined_budget
        self._base_budget = base_budget or ProcessingBudget()

    def compare(self, documents: Sequence[Document]) -> ComparisonOutcome:
        """Compare at least two bids.

        Raises:
            InvalidBidInputError: fewer than two documents, or any document
                that does not look like a bid.
            AnalysisError: if the analysis call or its validation fails.
        """
        if len(documents) < 2:
            raise InvalidBidInputError("At least two valid bid documents are required")
        invalid = [doc.name for doc in documents if not is_valid_bid_content(doc.content)]
        if invalid:
            raise InvalidBidInputError(
                f"{len(invalid)} bid(s) appear to be invalid or incomplete: {invalid}"
            )

        budget = budget_for_batch(self._base_budget, len(documents), self._combined_budget)
        original_chars = sum(len(doc.content or "") for doc in documents)
        Log.info(
            f"Original content: ~{estimate_tokens(original_chars)} tokens across "
            f"{len(documents)} files, {budget.max_content_length} chars each after preprocessing"
        )

        results = self._preprocessor.preprocess(documents, budget)
        processed_chars = sum(len(r.content) for r in results)
        Log.info(
            f"Processed content: ~{estimate_tokens(processed_chars)} tokens "
            f"({reduction_percent(estimate_tokens(original_chars), estimate_tokens(processed_chars))}% reduction)"
        )
        return ComparisonOutcome(analysis=self._analyzer.analyze(results), results=results)

from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from bidleveler.config.settings import Settings
from bidleveler.logging.logger import Log
from bidleveler.preprocessing.base import BaseTruncator
from bidleveler.preprocessing.cleaner import TextCleaner
from bidleveler.preprocessing.exceptions import InvalidDocumentError
from bidleveler.preprocessing.extractor import CostExtractor
from bidleveler.preprocessing.models import (
    CostFinding,
    Document,
    ProcessingBudget,
    ProcessingResult,
    ProcessingStats,
)
from bidleveler.preprocessing.patterns import PATTERN_SET_VERSION
from bidleveler.preprocessing.pipeline import PipelineContext, PipelineStep
from bidleveler.preprocessing.sections import KeySectionSelector, ParagraphSummarizer
from bidleveler.preprocessing.steps import (
    CleanStep,
    ExtractCostsStep,
    SelectKeySectionsStep,
    StripBoilerplateStep,
    SummarizeStep,
    TruncateStep,
)
from bidleveler.preprocessing.stripper import BoilerplateStripper
from bidleveler.preprocessing.tokens import estimate_tokens, reduction_percent
from bidleveler.preprocessing.truncator import ContextTruncator
from bidleveler.usage.base import BaseUsageRecorder
from bidleveler.usage.models import UsageEvent

_BUDGET_KEYS = {
    "maxContentLength": "max_content_length",
    "removeBoilerplate": "remove_boilerplate",
    "extractKeyInfo": "extract_key_info",
    "summarizeLongSections": "summarize_long_sections",
    "preserveCosts": "preserve_costs",
}


class Preprocessor:
    """Runs every document through the step pipeline, one result per input.

    Pipeline: clean -> extract costs -> strip boilerplate -> select key
    sections -> summarize -> truncate. Documents never share state, so a
    failure in one is converted into an error-flagged result and the rest
    of the batch carries on. Failed documents are still fitted to the budget
    by the fallback truncator, keeping any costs found before the failure.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        usage_recorder: BaseUsageRecorder | None = None,
        max_workers: int = 1,
        fallback_truncator: BaseTruncator | None = None,
    ) -> None:
        self._steps = list(steps)
        self._usage_recorder = usage_recorder
        self._max_workers = max(1, max_workers)
        self._fallback_truncator = fallback_truncator or ContextTruncator.cost_aware()

    def preprocess(
        self,
        documents: Sequence[Document],
        budget: ProcessingBudget | None = None,
    ) -> list[ProcessingResult]:
        """Preprocess *documents*; output index i always matches input index i."""
        budget = budget or ProcessingBudget()
        if self._max_workers > 1 and len(documents) > 1:
            # executor.map yields in submission order regardless of completion order.
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                results = list(
                    executor.map(lambda doc: self._process_document(doc, budget), documents)
                )
        else:
            results = [self._process_document(doc, budget) for doc in documents]

        self._record_usage(results)
        return results

    def _process_document(
        self,
        document: Document,
        budget: ProcessingBudget,
    ) -> ProcessingResult:
        content = document.content if isinstance(document.content, str) else ""
        original_size = len(content)
        context: PipelineContext | None = None
        try:
            if not content:
                raise InvalidDocumentError("Invalid input: expected non-empty string content")
            context = PipelineContext(
                document=document,
                budget=budget,
                text=content,
                original_size=original_size,
            )
            for step in self._steps:
                context = step.run(context)
            if not context.text:
                raise InvalidDocumentError("Preprocessing resulted in empty text")
        except Exception as exc:
            cost_finding = context.cost_finding if context is not None else None
            return self._failed_result(document, content, budget, cost_finding, exc)

        result = _build_result(document.name, context.text, original_size)
        Log.info(
            f"Preprocessed {document.name}: {original_size} -> {len(context.text)} chars "
            f"({result.stats.reduction_percent}% token reduction)"
        )
        Log.metric(
            "preprocessing_metrics",
            bid_name=document.name,
            original_tokens=result.stats.original_tokens,
            processed_tokens=result.stats.processed_tokens,
            reduction_percent=result.stats.reduction_percent,
        )
        return result

    def _failed_result(
        self,
        document: Document,
        content: str,
        budget: ProcessingBudget,
        cost_finding: CostFinding | None,
        exc: Exception,
    ) -> ProcessingResult:
        Log.error(f"Preprocessing failed for {document.name}: {exc}")
        Log.metric(
            "errors",
            bid_name=document.name,
            error_message=str(exc),
            error_phase="preprocessing",
        )
        fallback = self._fallback_truncator.truncate(
            content, budget.max_content_length, cost_finding
        )
        return _build_result(document.name, fallback, len(content), error=str(exc))

    def _record_usage(self, results: list[ProcessingResult]) -> None:
        if self._usage_recorder is None or not results:
            return
        self._usage_recorder.record(
            UsageEvent(
                endpoint="preprocess",
                input_tokens=sum(r.stats.original_tokens for r in results),
                output_tokens=sum(r.stats.processed_tokens for r in results),
                success=all(r.error is None for r in results),
            )
        )


def _build_result(
    name: str,
    content: str,
    original_size: int,
    error: str | None = None,
) -> ProcessingResult:
    original_tokens = estimate_tokens(original_size)
    processed_tokens = estimate_tokens(content)
    return ProcessingResult(
        name=name,
        content=content,
        original_size=original_size,
        stats=ProcessingStats(
            original_tokens=original_tokens,
            processed_tokens=processed_tokens,
            reduction_percent=reduction_percent(original_tokens, processed_tokens),
        ),
        error=error,
    )


def default_steps() -> list[PipelineStep]:
    """The standard step order with the stock strategy implementations."""
    truncator = ContextTruncator.cost_aware()
    return [
        CleanStep(TextCleaner()),
        ExtractCostsStep(CostExtractor()),
        StripBoilerplateStep(BoilerplateStripper()),
        SelectKeySectionsStep(KeySectionSelector()),
        SummarizeStep(ParagraphSummarizer(truncator)),
        TruncateStep(truncator),
    ]


def build_preprocessor(
    settings: Settings,
    usage_recorder: BaseUsageRecorder | None = None,
) -> Preprocessor:
    """Build a Preprocessor with the stock steps and configured worker count."""
    Log.debug(f"Building preprocessor with pattern set {PATTERN_SET_VERSION}")
    return Preprocessor(
        steps=default_steps(),
        usage_recorder=usage_recorder,
        max_workers=settings.preprocess_max_workers,
    )


def preprocess(
    documents: Iterable[Document | Mapping[str, object]],
    budget: ProcessingBudget | Mapping[str, object] | None = None,
) -> list[ProcessingResult]:
    """Preprocess plain ``{name, content}`` dicts or Documents with default steps.

    *budget* may be a ProcessingBudget or a mapping using either the
    camelCase request keys (``maxContentLength``) or snake_case names.
    """
    docs = [coerce_document(item) for item in documents]
    return Preprocessor(default_steps()).preprocess(docs, coerce_budget(budget))


def coerce_document(item: Document | Mapping[str, object]) -> Document:
    if isinstance(item, Document):
        return item
    content = item.get("content")
    return Document(
        name=str(item.get("name") or ""),
        content=content if isinstance(content, str) else None,
    )


def coerce_budget(
    budget: ProcessingBudget | Mapping[str, object] | None,
) -> ProcessingBudget:
    if budget is None:
        return ProcessingBudget()
    if isinstance(budget, ProcessingBudget):
        return budget
    options = {_BUDGET_KEYS.get(key, key): value for key, value in budget.items()}
    unknown = set(options) - set(_BUDGET_KEYS.values())
    if unknown:
        raise ValueError(f"Unknown budget options: {sorted(unknown)}")
    return ProcessingBudget(**options)  # type: ignore[arg-type]

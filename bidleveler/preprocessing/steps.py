from bidleveler.logging.logger import Log
from bidleveler.preprocessing.base import (
    BaseCostExtractor,
    BaseSectionSelector,
    BaseStripper,
    BaseSummarizer,
    BaseTruncator,
)
from bidleveler.preprocessing.cleaner import TextCleaner, normalize_whitespace
from bidleveler.preprocessing.pipeline import PipelineContext, PipelineStep


class CleanStep(PipelineStep):
    def __init__(self, cleaner: TextCleaner) -> None:
        self._cleaner = cleaner

    def run(self, context: PipelineContext) -> PipelineContext:
        context.text = self._cleaner.clean(context.text)
        return context


class StripBoilerplateStep(PipelineStep):
    def __init__(self, stripper: BaseStripper) -> None:
        self._stripper = stripper

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.budget.remove_boilerplate:
            return context
        before = len(context.text)
        context.text = self._stripper.strip(context.text)
        Log.debug(
            f"Stripped boilerplate from {context.document.name}: "
            f"{before} -> {len(context.text)} chars"
        )
        return context


class ExtractCostsStep(PipelineStep):
    def __init__(self, extractor: BaseCostExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.budget.preserve_costs:
            return context
        finding = self._extractor.extract_costs(context.text)
        context.cost_finding = finding
        if finding.total_cost:
            Log.info(f"Found total cost in {context.document.name}: {finding.total_cost}")
        else:
            Log.warning(f"No total cost found in {context.document.name}")
        return context


class SelectKeySectionsStep(PipelineStep):
    """Narrows the text to key sections, or leaves it whole when none match."""

    def __init__(self, selector: BaseSectionSelector) -> None:
        self._selector = selector

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.budget.extract_key_info:
            return context
        sections = self._selector.select_key_sections(context.text)
        if not sections:
            Log.debug(f"No key sections in {context.document.name}, keeping full text")
            return context
        selected = normalize_whitespace("\n\n".join(sections))
        # Joining adds separators; only swap when it actually dropped something.
        if len(selected) < len(context.text):
            context.text = selected
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, summarizer: BaseSummarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        max_length = context.budget.max_content_length
        if not context.budget.summarize_long_sections or len(context.text) <= max_length:
            return context
        context.text = self._summarizer.summarize(
            context.text, max_length, context.cost_finding
        )
        return context


class TruncateStep(PipelineStep):
    def __init__(self, truncator: BaseTruncator) -> None:
        self._truncator = truncator

    def run(self, context: PipelineContext) -> PipelineContext:
        max_length = context.budget.max_content_length
        if len(context.text) <= max_length:
            return context
        context.text = self._truncator.truncate(
            context.text, max_length, context.cost_finding
        )
        return context

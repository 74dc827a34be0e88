from bidleveler.analysis.analyzer import BidAnalyzer
from bidleveler.analysis.comparison import BidComparisonService
from bidleveler.analysis.example_client_adapter import ExampleClientAdapter
from bidleveler.analysis.openai_client_adapter import OpenAIClientAdapter
from bidleveler.config.settings import Settings
from bidleveler.preprocessing.models import ProcessingBudget
from bidleveler.preprocessing.preprocessor import build_preprocessor
from bidleveler.usage.base import BaseUsageRecorder


class AnalyzerFactory:
    """Creates the configured bid analyzer."""

    PROVIDERS = ("example", "openai")

    @classmethod
    def create(
        cls,
        settings: Settings,
        usage_recorder: BaseUsageRecorder | None = None,
    ) -> BidAnalyzer:
        provider = settings.analysis_provider.strip().lower()
        if provider == "example":
            return BidAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                usage_recorder=usage_recorder,
            )
        if provider == "openai":
            client = OpenAIClientAdapter(
                api_key=settings.analysis_openai_api_key,
                timeout_seconds=settings.analysis_openai_timeout_seconds,
                max_attempts=settings.analysis_max_retries,
            )
            return BidAnalyzer(
                client=client,
                model=settings.analysis_openai_model_name,
                temperature=settings.analysis_temperature,
                max_tokens=settings.analysis_max_tokens,
                usage_recorder=usage_recorder,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )


def build_comparison_service(
    settings: Settings,
    usage_recorder: BaseUsageRecorder | None = None,
) -> BidComparisonService:
    """Wire preprocessor and analyzer from settings, sharing one usage recorder."""
    return BidComparisonService(
        preprocessor=build_preprocessor(settings, usage_recorder=usage_recorder),
        analyzer=AnalyzerFactory.create(settings, usage_recorder=usage_recorder),
        combined_budget=settings.combined_content_budget,
        base_budget=ProcessingBudget.from_settings(settings),
    )

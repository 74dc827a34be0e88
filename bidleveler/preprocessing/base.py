from abc import ABC, abstractmethod

from bidleveler.preprocessing.models import CostFinding


class BaseStripper(ABC):
    """Contract for boilerplate removal strategies."""

    @abstractmethod
    def strip(self, text: str) -> str:
        """Remove non-substantive text and normalize whitespace.

        Never raises on string input; text without boilerplate comes back
        whitespace-normalized only.
        """


class BaseCostExtractor(ABC):
    """Contract for cost extraction strategies."""

    @abstractmethod
    def extract_costs(self, text: str) -> CostFinding:
        """Find the total project cost and every currency-like token.

        Returns:
            CostFinding; empty when nothing matched.
        """


class BaseSectionSelector(ABC):
    """Contract for key-section selection."""

    @abstractmethod
    def select_key_sections(self, text: str) -> list[str]:
        """Return the sections worth keeping, possibly none."""


class BaseTruncator(ABC):
    """Contract for budget enforcement."""

    @abstractmethod
    def truncate(
        self,
        text: str,
        max_length: int,
        cost_finding: CostFinding | None = None,
    ) -> str:
        """Fit *text* into *max_length* characters.

        Returns *text* unchanged when it already fits.
        """


class BaseSummarizer(ABC):
    """Contract for long-content summarization."""

    @abstractmethod
    def summarize(
        self,
        text: str,
        max_length: int,
        cost_finding: CostFinding | None = None,
    ) -> str:
        """Shrink *text* toward *max_length*; unchanged when already short."""

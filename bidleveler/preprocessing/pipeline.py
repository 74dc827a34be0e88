from abc import ABC, abstractmethod
from dataclasses import dataclass

from bidleveler.preprocessing.models import CostFinding, Document, ProcessingBudget


@dataclass(slots=True)
class PipelineContext:
    document: Document
    budget: ProcessingBudget
    text: str = ""
    original_size: int = 0
    cost_finding: CostFinding | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

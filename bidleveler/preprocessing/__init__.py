from bidleveler.preprocessing.budget import allocate_budget, budget_for_batch
from bidleveler.preprocessing.models import (
    CostFinding,
    CostItem,
    Document,
    ProcessingBudget,
    ProcessingResult,
    ProcessingStats,
)
from bidleveler.preprocessing.preprocessor import Preprocessor, build_preprocessor, preprocess

__all__ = [
    "CostFinding",
    "CostItem",
    "Document",
    "Preprocessor",
    "ProcessingBudget",
    "ProcessingResult",
    "ProcessingStats",
    "allocate_budget",
    "budget_for_batch",
    "build_preprocessor",
    "preprocess",
]

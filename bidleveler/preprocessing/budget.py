from dataclasses import replace

from bidleveler.preprocessing.models import ProcessingBudget


def allocate_budget(total_chars: int, document_count: int) -> int:
    """Split a combined character budget evenly across a batch.

    Each document gets ``floor(total_chars / document_count)`` so the
    concatenated prompt still fits one context window.
    """
    if document_count < 1:
        raise ValueError(f"document_count must be at least 1, got {document_count}")
    if total_chars < document_count:
        raise ValueError(
            f"total_chars {total_chars} is too small for {document_count} documents"
        )
    return total_chars // document_count


def budget_for_batch(
    budget: ProcessingBudget,
    document_count: int,
    total_chars: int,
) -> ProcessingBudget:
    """Return *budget* with its per-document length set to the batch share."""
    return replace(
        budget,
        max_content_length=allocate_budget(total_chars, document_count),
    )

def estimate_cost(
    input_tokens: int,
    output_tokens: int,
    input_price_per_1k: float = 0.03,
    output_price_per_1k: float = 0.06,
) -> float:
    """Estimated USD cost of a request at per-1K-token prices."""
    return (input_tokens / 1000) * input_price_per_1k + (
        output_tokens / 1000
    ) * output_price_per_1k


def format_usd(amount: float) -> str:
    return f"${amount:.2f}"

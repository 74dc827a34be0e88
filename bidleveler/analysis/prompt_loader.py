from pathlib import Path

from bidleveler.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the analyst system prompt (bundled system_prompt.txt by default).

    Raises:
        AnalysisError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "system_prompt.txt", "system prompt")


def load_comparison_template(path: Path | None = None) -> str:
    """Load the comparison template with ``{bid_count}`` and ``{bid_documents}``.

    Literal braces in the template are doubled for ``str.format``.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    return _read(
        path or _DEFAULT_PROMPT_DIR / "comparison_prompt.txt", "comparison template"
    )


def _read(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {label}: {exc}") from exc

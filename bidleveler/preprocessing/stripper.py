from bidleveler.logging.logger import Log
from bidleveler.preprocessing.base import BaseStripper
from bidleveler.preprocessing.cleaner import normalize_whitespace
from bidleveler.preprocessing.patterns import (
    BOILERPLATE_PATTERNS,
    LEGAL_BOILERPLATE_PATTERNS,
    Rule,
)


class BoilerplateStripper(BaseStripper):
    """Deletes headers, footers, notices and metadata lines by pattern.

    Every rule is applied before whitespace is collapsed, so a deleted line
    never leaves a gap of more than one blank line behind.
    """

    def __init__(
        self,
        include_legal: bool = True,
        rules: list[Rule] | None = None,
        legal_rules: list[Rule] | None = None,
    ) -> None:
        self._rules = list(rules if rules is not None else BOILERPLATE_PATTERNS)
        if include_legal:
            self._rules.extend(
                legal_rules if legal_rules is not None else LEGAL_BOILERPLATE_PATTERNS
            )

    def strip(self, text: str) -> str:
        if not text:
            return ""
        result = text
        removed: dict[str, int] = {}
        for label, pattern in self._rules:
            result, count = pattern.subn("", result)
            if count:
                removed[label] = count
        if removed:
            Log.debug(f"Boilerplate removed: {removed}")
        return normalize_whitespace(result)

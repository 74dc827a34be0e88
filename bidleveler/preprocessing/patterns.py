"""Pattern configuration for bid document preprocessing.

Bid documents have no formal grammar, so recognition is heuristic. The
patterns live here as data, each rule tagged with the class of text it
removes, so they can be extended and tested without touching the pipeline.
Bump PATTERN_SET_VERSION whenever a rule changes behaviour.

All patterns are compiled ``re`` objects; they hold no match state between
calls and are safe to share across threads.
"""

import re

PATTERN_SET_VERSION = "1.4.0"

Rule = tuple[str, re.Pattern[str]]

BOILERPLATE_PATTERNS: list[Rule] = [
    (
        "CONFIDENTIALITY",
        re.compile(r"This document is confidential and proprietary\.[^\n]*?\.", re.I),
    ),
    ("CONFIDENTIAL_HEADER", re.compile(r"CONFIDENTIAL DOCUMENT[ \t]*-*[ \t]*[^\n]*")),
    (
        "COPYRIGHT",
        re.compile(
            r"Copyright[ \t]*(?:©|\(c\))[ \t]*\d{4}[^\n]*?\.[ \t]*All rights reserved\.",
            re.I,
        ),
    ),
    ("INTERNAL_USE", re.compile(r"For internal use only\.", re.I)),
    ("TERMS_NOTICE", re.compile(r"Please read the terms and conditions\.", re.I)),
    ("DISCLAIMER", re.compile(r"Disclaimer:[^\n]*\n?", re.I)),
    ("URL", re.compile(r"(?:https?://)?www\.[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+(?:/\S*)?")),
    ("PAGINATION", re.compile(r"Page \d+ of \d+", re.I)),
    ("DOCUMENT_ID", re.compile(r"^[ \t]*Document ID:?[ \t]*[A-Za-z0-9-]+", re.M)),
    ("REVISION", re.compile(r"^[ \t]*Revision:[ \t]*[A-Za-z0-9.-]+", re.M)),
    ("VERSION", re.compile(r"^[ \t]*Version:?[ \t]*\d+\.\d+", re.M)),
    ("DATE", re.compile(r"^[ \t]*Date:?[ \t]*\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4}", re.M)),
]

# Kept apart from BOILERPLATE_PATTERNS so legal phrasing can be stripped
# (or kept) independently of document furniture.
LEGAL_BOILERPLATE_PATTERNS: list[Rule] = [
    ("STANDARD_PRACTICE", re.compile(r"In accordance with standard construction practices", re.I)),
    ("SPEC_REFERENCE", re.compile(r"as per the specifications outlined in", re.I)),
    ("CONTRACT_REFERENCE", re.compile(r"as defined in the contract documents", re.I)),
    ("TERMS_REFERENCE", re.compile(r"subject to the terms and conditions", re.I)),
]

BLANK_LINE_RUN = re.compile(r"\n[ \t]*(?:\n[ \t]*){2,}")
HORIZONTAL_WHITESPACE_RUN = re.compile(r"[ \t]{2,}")

# Matched against the upper-cased section text.
KEY_SECTIONS: tuple[str, ...] = (
    "PRICING",
    "COST BREAKDOWN",
    "SCOPE OF WORK",
    "SCHEDULE",
    "MATERIALS",
    "LABOR",
    "EQUIPMENT",
)

# Matched against the lower-cased paragraph text.
SUMMARY_KEY_TERMS: tuple[str, ...] = (
    "price",
    "cost",
    "bid",
    "timeline",
    "schedule",
    "materials",
    "labor",
    "total",
    "proposal",
    "offer",
    "payment",
    "quality",
    "warranty",
)

# A newline followed by an ALL-CAPS header line ending in a colon.
SECTION_BOUNDARY_PATTERN = re.compile(r"\n(?=[A-Z][A-Z \t]+:)")
PARAGRAPH_BOUNDARY_PATTERN = re.compile(r"\n\s*\n")

_NUMBER = r"(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?"
_SCALE = r"(?:(?:million|billion)(?:\s+dollars)?|dollars)"

TOTAL_COST_PATTERN = re.compile(
    rf"Total\s+Project\s+(?:Estimated\s+)?Cost:?\s*\$?\s?{_NUMBER}(?:\s*(?:million|billion)\b)?",
    re.I,
)

# Either a dollar sign in front or a scale word behind; bare numbers
# (years, page counts, quantities) are not currency.
CURRENCY_PATTERN = re.compile(
    rf"\$\s?{_NUMBER}(?:\s*{_SCALE}\b)?"
    rf"|(?<![\w$.,]){_NUMBER}\s*{_SCALE}\b",
    re.I,
)

COST_CONTEXT_RADIUS = 30

DURATION_PATTERN = re.compile(
    r"(?:total construction duration|project duration|total duration|completion timeline)"
    r":?[ \t]*\d+[ \t]*(?:months|years)\b",
    re.I,
)

# One schedule phase per line, kept verbatim: "Phase 2 (months 4-9): Framing".
PHASE_PATTERN = re.compile(r"^[ \t]*(?:[-•*][ \t]*)?(phase[ \t]*\d+\b[^\n]*)", re.I | re.M)

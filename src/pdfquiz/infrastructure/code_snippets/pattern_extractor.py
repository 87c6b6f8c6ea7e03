"""Heuristic extraction of source-code snippets from document text."""

import re

from pdfquiz.domain.entities import CodeSnippet

MIN_SNIPPET_LENGTH = 20

_FENCED_BLOCK = re.compile(r"```(?:\w*\n)?([\s\S]*?)```", re.ASCII)
# Two or more lines indented by 4+ spaces, the first starting with a word char or "("
_INDENTED_RUN = re.compile(r"(?:^|\n)( {4,}[\w(].+(?:\n {4,}.+)+)", re.ASCII)
_KEYWORD_LINE = re.compile(
    r"^((?:function|def|class|import|from|public|private|var|let|const)[ \t].*[{:].*)$",
    re.MULTILINE,
)

_CODE_PATTERNS = (_FENCED_BLOCK, _INDENTED_RUN, _KEYWORD_LINE)

CODE_KEYWORDS = (
    "function",
    "return",
    "if",
    "else",
    "for",
    "while",
    "class",
    "import",
    "export",
    "from",
    "def",
    "print",
    "var",
    "let",
    "const",
    "= function",
    "=>",
    "public",
    "private",
    "static",
)

_ASSIGNMENT = re.compile(r"[a-zA-Z0-9]+=")
_BRACKETS = re.compile(r"[\[\]<>]")


def is_likely_code(text: str) -> bool:
    """Keyword, brace/paren, assignment or bracket present."""
    if any(keyword in text for keyword in CODE_KEYWORDS):
        return True
    if any(char in text for char in "{}()"):
        return True
    return bool(_ASSIGNMENT.search(text) or _BRACKETS.search(text))


def extract_code_snippets(text: str) -> list[CodeSnippet]:
    """Return code-like snippets found in text, deduplicated by trimmed text."""
    found: dict[CodeSnippet, None] = {}
    for pattern in _CODE_PATTERNS:
        for match in pattern.finditer(text):
            candidate = match.group(1) or match.group(0)
            if len(candidate) > MIN_SNIPPET_LENGTH and is_likely_code(candidate):
                found.setdefault(CodeSnippet(candidate), None)
    return list(found)

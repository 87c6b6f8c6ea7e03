"""Code snippet entity - text span flagged as likely source code."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeSnippet:
    """Code snippet; equality and hashing use the trimmed text."""

    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", self.text.strip())

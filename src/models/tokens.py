"""
Class-token data models

Type-safe structures for the classifier and rewriter.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ClassToken:
    """
    One whitespace-delimited unit of a class-list string

    Produced by UtilityRegistry.classify(). A token is recognized exactly
    when a stem was found; an unrecognized token is opaque and is emitted
    byte-identical to its input text.

    Attributes:
        text: The token exactly as it appeared in the class list
        negative: Token started with a '-' sign
        modifier: Responsive/state qualifier without its ':' (e.g., "hover")
        stem: Recognized utility stem (e.g., "bg-"), None when opaque
        suffix: Value text after the stem (e.g., "red-500", "[#123456]")
        tail: Characters after the suffix that are not value characters,
              kept verbatim (usually empty)

    Example:
        "-md:mt-8" -> ClassToken(text="-md:mt-8", negative=True,
                                 modifier="md", stem="mt-", suffix="8")
        "custom-class" -> ClassToken(text="custom-class")
    """
    text: str
    negative: bool = False
    modifier: Optional[str] = None
    stem: Optional[str] = None
    suffix: Optional[str] = None
    tail: str = ""

    @property
    def recognized(self) -> bool:
        return self.stem is not None

"""
Parser-specific data models

Type-safe structures for tree builder operations and return values.
"""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class TagMatch:
    """
    Result of finding an opening tag in the token stream

    Returned by TreeBuilder.tag_find() when '<' is followed by a tag name.

    Attributes:
        name: Tag name (e.g., "div", "Icon")
        offset: Source offset of the '<'
        index: Token index of the tag name

    Example:
        For source '<div class="p-4">' the match is
        TagMatch(name="div", offset=0, index=1)
    """
    name: str
    offset: int
    index: int


@dataclass
class ExpressionScan:
    """
    Result of scanning a braced attribute expression

    Returned by TreeBuilder.expression_scan() after consuming everything up
    to and including the matching '}'.

    Attributes:
        start: Source offset of the opening '{'
        end: Source offset one past the closing '}'
        significant: Non-blank parts of the expression in order. String
                     literals appear as StringLiteral, elements as Element,
                     and any other token as its raw text.

    Example:
        For '{"p-4"}' significant is [StringLiteral(original="p-4", ...)]
        For '{cn("p-4", x)}' significant is ["cn", "(", StringLiteral, ",", "x", ")"]
    """
    start: int
    end: int
    significant: List[Any] = field(default_factory=list)

"""
Syntax tree models

The tree is deliberately small: it records only what the site traversal
policy needs (elements, their attributes, and every string literal) plus
the source offsets the emitter uses to splice rewritten values back.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Union


class Grammar(Enum):
    """Grammar family used to lex a file, chosen from its extension"""
    MARKUP = "markup"            # .html, .htm
    JAVASCRIPT = "javascript"    # .js, .jsx, .mjs, .cjs
    TYPESCRIPT = "typescript"    # .ts, .tsx


class SiteKind(Enum):
    """
    Kinds of string-valued locations the traversal policy dispatches on
    """
    MARKUP_ATTRIBUTE_LITERAL = "markup-attribute-literal"        # class="..."
    EXPRESSION_WRAPPED_LITERAL = "expression-wrapped-literal"    # className={"..."}
    NESTED_ELEMENT_ATTRIBUTE_LIST = "nested-element-attributes"  # icon={<i className="..."/>}
    GENERIC_LITERAL = "generic-literal"                          # any "..." or '...'
    OTHER_EXPRESSION = "other-expression"                        # className={cn(a, b)}


@dataclass
class StringLiteral:
    """
    A quoted string located in the source

    Attributes:
        start: Offset of the opening quote (or first character if unquoted)
        end: Offset one past the closing quote
        quote: Quote character, empty for unquoted markup attribute values
        original: Body text between the quotes, as written in the source
        line_number: 1-based source line of the opening quote
        value: Current body text; starts equal to original and is replaced
               by the traversal policy

    Example:
        For source 'x = "bg-red-500";' the literal is
        StringLiteral(start=4, end=16, quote='"', original="bg-red-500", ...)
    """
    start: int
    end: int
    quote: str
    original: str
    line_number: int = 1
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = self.original

    @property
    def changed(self) -> bool:
        return self.value != self.original

    @property
    def body_start(self) -> int:
        return self.start + len(self.quote)

    @property
    def body_end(self) -> int:
        return self.end - len(self.quote)


@dataclass
class PlainLiteral:
    """Attribute value written as a bare string: class="..." """
    literal: StringLiteral
    kind: ClassVar[SiteKind] = SiteKind.MARKUP_ATTRIBUTE_LITERAL


@dataclass
class WrappedLiteral:
    """Attribute value that is a single string inside braces: className={"..."}"""
    literal: StringLiteral
    kind: ClassVar[SiteKind] = SiteKind.EXPRESSION_WRAPPED_LITERAL


@dataclass
class NestedElement:
    """Attribute value that is itself an element: icon={<Icon className="..."/>}"""
    element: 'Element'
    kind: ClassVar[SiteKind] = SiteKind.NESTED_ELEMENT_ATTRIBUTE_LIST


@dataclass
class OtherExpression:
    """Any other braced value (call, identifier, template, conditional)"""
    text: str
    kind: ClassVar[SiteKind] = SiteKind.OTHER_EXPRESSION


AttributeValue = Union[PlainLiteral, WrappedLiteral, NestedElement, OtherExpression]


@dataclass
class Attribute:
    """One attribute of an element; value is None for boolean attributes"""
    name: str
    value: Optional[AttributeValue] = None


@dataclass
class Element:
    """
    An opening tag with its attribute list

    Attributes:
        tag: Tag name (e.g., "div", "Button")
        attributes: Attributes in source order
        start: Offset of the '<'
        line_number: 1-based source line of the '<'
        nested: True when the element is the value of another element's
                attribute
    """
    tag: str
    attributes: List[Attribute] = field(default_factory=list)
    start: int = 0
    line_number: int = 1
    nested: bool = False

    def attribute_get(self, name: str) -> Optional[Attribute]:
        """Get the first attribute with this name"""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None


@dataclass
class SourceTree:
    """
    Parsed view of one source file

    Attributes:
        source: Original source text
        grammar: Grammar family the file was lexed with
        path: File path the grammar was chosen from (may be empty)
        elements: Every element in document order, nested ones included
        literals: Every string literal in document order
    """
    source: str
    grammar: Grammar
    path: str = ""
    elements: List[Element] = field(default_factory=list)
    literals: List[StringLiteral] = field(default_factory=list)

    @property
    def changed_literals(self) -> List[StringLiteral]:
        return [literal for literal in self.literals if literal.changed]


@dataclass
class TransformResult:
    """
    Outcome of rewriting one source text

    Attributes:
        output: Rewritten source text
        grammar: Grammar family the source was lexed with
        literals_changed: Number of string literals whose value changed
        sites: Number of sites visited, keyed by SiteKind value
    """
    output: str
    grammar: Grammar
    literals_changed: int = 0
    sites: Dict[str, int] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return self.literals_changed > 0

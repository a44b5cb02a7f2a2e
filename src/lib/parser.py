"""
Tree builder for class-list rewriting

Turns the positioned token stream of a source file into a SourceTree: the
elements (with their attribute lists) and every string literal, each with
the offsets the emitter needs to splice rewritten values back.

The builder operates in one pass over the tokens:
1. Scanning: '<' followed by a tag name opens an element
2. Attributes: each attribute value is classified as a plain literal,
   a braced single literal, a nested element, or another expression
3. Literals: every string token anywhere is registered on the tree

The builder is total. Malformed input never raises; an opening tag that is
never closed simply ends at the first token that cannot belong to a tag.

Example:
    >>> tree = TreeBuilder('<div className="p-4" />', "a.jsx").build()
    >>> tree.elements[0].tag
    'div'
    >>> tree.literals[0].original
    'p-4'
"""

from bisect import bisect_right
from typing import List, Optional

from pygments.token import Comment, Name, Operator, Punctuation, String, Text

from ..config import appsettings
from ..models.parser import ExpressionScan, TagMatch
from ..models.tree import (
    Attribute,
    AttributeValue,
    Element,
    Grammar,
    NestedElement,
    OtherExpression,
    PlainLiteral,
    SourceTree,
    StringLiteral,
    WrappedLiteral,
)
from .lexer import LexToken, tokens_lex
from .log import LOG


class TreeBuilder:
    """
    Builds a SourceTree from source text

    Handles:
    - JSX/TSX elements, including elements passed as attribute values
    - HTML elements and <script> bodies
    - JavaScript string literals anywhere in the file
    """

    def __init__(self, source: str, path: str = "", grammar: Optional[Grammar] = None):
        """
        Initialize builder with source text

        Args:
            source: Raw source text
            path: File path; its extension selects the grammar
            grammar: Explicit grammar, overriding the path's extension

        Attributes:
            source: Source text being parsed
            grammar: Grammar family used for lexing
            tokens: Positioned tokens, filled by build()
            position: Current token index
            line_starts: Offsets at which each source line starts
            tree: Tree being built
        """
        self.source = source
        self.grammar = grammar or appsettings.grammar_forPath(path)
        self.tokens: List[LexToken] = []
        self.position = 0
        self.line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == '\n']
        self.tree = SourceTree(source=source, grammar=self.grammar, path=path)

    def build(self) -> SourceTree:
        """
        Parse the whole source into a SourceTree

        Returns:
            SourceTree with elements and literals in document order
        """
        self.tokens = list(tokens_lex(self.source, self.grammar))
        self.position = 0

        while self.position < len(self.tokens):
            self.token_visit()

        LOG(
            f"Built tree: {len(self.tree.elements)} elements, "
            f"{len(self.tree.literals)} string literals ({self.grammar.value})",
            level=3,
        )
        return self.tree

    def token_visit(self) -> None:
        """Handle the token at the current position at document level"""
        match = self.tag_find(self.position)
        if match:
            self.element_parse(match)
            return

        if self.literal_is(self.position):
            self.literal_register(self.position)
        self.position += 1

    def tag_find(self, index: int) -> Optional[TagMatch]:
        """
        Check for an opening tag starting at a token index

        An opening tag is Punctuation '<', optionally followed by blank
        Text, followed by Name.Tag. Closing tags ('</' or '<' '/') and
        fragments ('<>') do not match.

        Args:
            index: Token index to check

        Returns:
            TagMatch, or None if no opening tag starts here
        """
        if index >= len(self.tokens):
            return None
        offset, ttype, value = self.tokens[index]
        if ttype not in Punctuation or value != '<':
            return None

        index += 1
        while index < len(self.tokens) and self.blank_is(index):
            index += 1
        if index < len(self.tokens) and self.tokens[index][1] in Name.Tag:
            return TagMatch(name=self.tokens[index][2], offset=offset, index=index)
        return None

    def element_parse(self, match: TagMatch) -> Element:
        """
        Parse an opening tag and its attribute list

        Consumes tokens from the tag name up to and including the closing
        '>' or '/>'. Registers the element on the tree before its attribute
        values are parsed, so elements stay in document order.

        Args:
            match: Opening tag located by tag_find()

        Returns:
            The parsed Element
        """
        element = Element(
            tag=match.name,
            start=match.offset,
            line_number=self.line_get(match.offset),
        )
        self.tree.elements.append(element)
        self.position = match.index + 1

        while self.position < len(self.tokens):
            offset, ttype, value = self.tokens[self.position]

            if self.blank_is(self.position):
                self.position += 1
                continue

            if ttype in Name.Attribute:
                self.position += 1
                element.attributes.append(self.attribute_parse(value.strip()))
                continue

            if ttype in Punctuation and value == '{':
                # spread attributes carry no class-list sites of their own
                self.expression_scan()
                continue

            if ttype in Punctuation and value in ('/', '.'):
                self.position += 1
                continue

            if ttype in Punctuation and value in ('>', '/>'):
                self.position += 1
                break

            # not part of a tag; leave it for the enclosing scan
            LOG(f"Unclosed <{element.tag}> at line {element.line_number}", level=3)
            break

        return element

    def attribute_parse(self, name: str) -> Attribute:
        """
        Parse an attribute after its name token

        Args:
            name: Attribute name

        Returns:
            Attribute; value is None for boolean attributes
        """
        index = self.blank_skip(self.position)
        if index >= len(self.tokens):
            return Attribute(name=name)

        _, ttype, value = self.tokens[index]
        if ttype not in Operator or value != '=':
            return Attribute(name=name)

        self.position = self.blank_skip(index + 1)
        return Attribute(name=name, value=self.attributeValue_parse())

    def attributeValue_parse(self) -> Optional[AttributeValue]:
        """
        Classify and consume the attribute value at the current position

        Returns:
            PlainLiteral for a quoted string; WrappedLiteral for a braced
            single string; NestedElement for a braced element;
            OtherExpression for any other braced value; None if no value
            follows the '='.
        """
        if self.position >= len(self.tokens):
            return None

        _, ttype, value = self.tokens[self.position]

        if self.literal_is(self.position):
            literal = self.literal_register(self.position)
            self.position += 1
            return PlainLiteral(literal=literal)

        if ttype in Punctuation and value == '{':
            scan = self.expression_scan()
            significant = scan.significant
            if len(significant) == 1 and isinstance(significant[0], StringLiteral):
                return WrappedLiteral(literal=significant[0])
            if significant and isinstance(significant[0], Element):
                significant[0].nested = True
                return NestedElement(element=significant[0])
            return OtherExpression(text=self.source[scan.start:scan.end])

        return None

    def expression_scan(self) -> ExpressionScan:
        """
        Consume a braced expression starting at '{'

        Tracks brace depth over Punctuation tokens. String literals inside
        the expression are registered on the tree (they are generic literal
        sites), and elements inside it are parsed. An element that opens the
        expression becomes the attribute's NestedElement value.

        Returns:
            ExpressionScan with the expression's span and significant parts
        """
        start = self.tokens[self.position][0]
        scan = ExpressionScan(start=start, end=len(self.source))
        depth = 1
        self.position += 1

        while self.position < len(self.tokens):
            offset, ttype, value = self.tokens[self.position]

            if ttype in Punctuation and ('{' in value or '}' in value):
                depth += value.count('{') - value.count('}')
                if depth <= 0:
                    scan.end = offset + len(value)
                    self.position += 1
                    break

            match = self.tag_find(self.position)
            if match:
                scan.significant.append(self.element_parse(match))
                continue

            if self.literal_is(self.position):
                scan.significant.append(self.literal_register(self.position))
            elif not self.blank_is(self.position):
                scan.significant.append(value)
            self.position += 1

        return scan

    def literal_is(self, index: int) -> bool:
        """
        Check whether the token at an index is a string literal

        Literals are JavaScript double/single quoted strings and quoted or
        unquoted attribute values. Template strings, regular expressions
        and interpolation markers are not.
        """
        ttype = self.tokens[index][1]
        return ttype is String or ttype in String.Double or ttype in String.Single

    def literal_register(self, index: int) -> StringLiteral:
        """
        Create a StringLiteral from a token and add it to the tree

        Args:
            index: Token index of a string token

        Returns:
            The registered StringLiteral
        """
        offset, _, value = self.tokens[index]
        quote = value[0] if len(value) >= 2 and value[0] in '"\'' and value[-1] == value[0] else ''
        body = value[len(quote):len(value) - len(quote)]

        literal = StringLiteral(
            start=offset,
            end=offset + len(value),
            quote=quote,
            original=body,
            line_number=self.line_get(offset),
        )
        self.tree.literals.append(literal)
        return literal

    def blank_is(self, index: int) -> bool:
        """Check whether the token at an index is whitespace, a comment, or empty"""
        _, ttype, value = self.tokens[index]
        if not value or ttype in Comment:
            return True
        return ttype in Text and not value.strip()

    def blank_skip(self, index: int) -> int:
        """Return the first index at or after `index` that is not blank"""
        while index < len(self.tokens) and self.blank_is(index):
            index += 1
        return index

    def line_get(self, offset: int) -> int:
        """Get the 1-based source line of an offset"""
        return bisect_right(self.line_starts, offset)

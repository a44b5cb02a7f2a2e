"""
Site traversal policy

Decides which string-valued locations of a SourceTree are class lists and
rewrites them in place:

- class / className attributes: a plain string value, or a single string
  wrapped in braces. Any other braced value (call, identifier, template,
  conditional) is skipped; its final string is only known at runtime.
- An attribute whose value is an element: recurse into that element's
  attributes with the same rules.
- Every string literal anywhere in the tree, unless the policy runs with
  attributes_only. Opaque tokens pass through unchanged, so literals that
  are not class lists survive untouched.

Each rewrite is computed from the literal's original text, so a literal
reached by more than one rule ends up with the same value.
"""

from collections import Counter
from typing import Optional

from ..models.tree import Element, SiteKind, SourceTree, StringLiteral
from .classifier import UtilityRegistry
from .log import LOG
from .rewriter import classList_transform


CLASS_ATTRIBUTES = ('className', 'class')


class SitePolicy:
    """
    Applies the class-list transform to the eligible sites of a tree

    Attributes:
        prefix: Namespace prefix inserted before recognized stems
        attributes_only: Skip the generic string-literal rule
        registry: Utility vocabulary (default: built-in)
        visits: Count of sites visited per SiteKind
    """

    def __init__(
        self,
        prefix: str,
        attributes_only: bool = False,
        registry: Optional[UtilityRegistry] = None,
    ) -> None:
        self.prefix = prefix
        self.attributes_only = attributes_only
        self.registry = registry
        self.visits: Counter = Counter()

    def tree_transform(self, tree: SourceTree) -> SourceTree:
        """
        Rewrite every eligible site of a tree in place

        Args:
            tree: Tree built by TreeBuilder

        Returns:
            The same tree, with literal values rewritten
        """
        for element in tree.elements:
            # nested elements are reached through their parent's attribute
            if not element.nested:
                self.attributes_transform(element)

        if not self.attributes_only:
            for literal in tree.literals:
                self.literal_rewrite(literal, SiteKind.GENERIC_LITERAL)

        LOG(
            f"Rewrote {len(tree.changed_literals)} of {len(tree.literals)} literals "
            f"with prefix '{self.prefix}'",
            level=2,
        )
        return tree

    def attributes_transform(self, element: Element) -> None:
        """
        Apply the attribute rules to one element's attribute list

        Args:
            element: Element whose attributes are visited
        """
        for attribute in element.attributes:
            value = attribute.value
            if value is None:
                continue

            if value.kind is SiteKind.NESTED_ELEMENT_ATTRIBUTE_LIST:
                self.visits[value.kind.value] += 1
                self.attributes_transform(value.element)
                continue

            if attribute.name not in CLASS_ATTRIBUTES:
                continue

            if value.kind in (
                SiteKind.MARKUP_ATTRIBUTE_LITERAL,
                SiteKind.EXPRESSION_WRAPPED_LITERAL,
            ):
                self.literal_rewrite(value.literal, value.kind)
            elif value.kind is SiteKind.OTHER_EXPRESSION:
                self.visits[value.kind.value] += 1
                LOG(
                    f"Skipped dynamic {attribute.name} on <{element.tag}> "
                    f"at line {element.line_number}: {value.text}",
                    level=3,
                )

    def literal_rewrite(self, literal: StringLiteral, kind: SiteKind) -> None:
        """
        Rewrite one literal's value from its original text

        Args:
            literal: Literal to rewrite
            kind: Site kind it was reached through (for reporting)
        """
        self.visits[kind.value] += 1
        literal.value = classList_transform(literal.original, self.prefix, self.registry)
        if literal.changed:
            LOG(
                f"line {literal.line_number} [{kind.value}]: "
                f"'{literal.original}' -> '{literal.value}'",
                level=3,
            )

"""
Codemod entry point

Public API for rewriting one source text:

    transform(source, path, prefix)  ->  rewritten text

The path's extension only selects the grammar (markup vs. JavaScript /
TypeScript with JSX); once the tree is built the rewrite rules are the
same for every grammar.
"""

from typing import Optional

from ..models.tree import TransformResult
from .emitter import tree_emit
from .log import LOG
from .parser import TreeBuilder
from .traversal import SitePolicy


DEFAULT_PREFIX = "mw-"


def source_transform(
    source: str,
    path: str = "",
    prefix: Optional[str] = None,
    attributes_only: bool = False,
) -> TransformResult:
    """
    Rewrite one source text and report what changed

    Args:
        source: Source text
        path: File path used to choose the grammar (may be empty)
        prefix: Namespace prefix; "mw-" when None or empty
        attributes_only: Only rewrite class/className attributes, not
                         every string literal

    Returns:
        TransformResult with the rewritten text and site counts
    """
    prefix = prefix or DEFAULT_PREFIX

    tree = TreeBuilder(source, path).build()
    policy = SitePolicy(prefix, attributes_only=attributes_only)
    policy.tree_transform(tree)

    result = TransformResult(
        output=tree_emit(tree),
        grammar=tree.grammar,
        literals_changed=len(tree.changed_literals),
        sites=dict(policy.visits),
    )
    LOG(f"{path or '<source>'}: {result.literals_changed} literals changed", level=2)
    return result


def transform(
    source: str,
    path: str = "",
    prefix: Optional[str] = None,
    attributes_only: bool = False,
) -> str:
    """
    Rewrite utility classes in one source text

    Args:
        source: Source text
        path: File path used to choose the grammar (may be empty)
        prefix: Namespace prefix; "mw-" when None or empty
        attributes_only: Only rewrite class/className attributes

    Returns:
        Rewritten source text

    Example:
        >>> transform('const c = "bg-red-500 custom";', "a.ts")
        'const c = "mw-bg-red-500 custom";'
    """
    return source_transform(source, path, prefix, attributes_only).output

"""
mwprefix - Utility-class namespace codemod

Prefixes recognized utility classes in source text.
"""

__version__ = "1.0.0"

from .classifier import UtilityRegistry, classify
from .rewriter import token_rewrite, classList_transform
from .parser import TreeBuilder
from .traversal import SitePolicy
from .emitter import tree_emit
from .codemod import transform, source_transform, DEFAULT_PREFIX
from .log import LOG, state_connectToLogger

__all__ = [
    "UtilityRegistry",
    "classify",
    "token_rewrite",
    "classList_transform",
    "TreeBuilder",
    "SitePolicy",
    "tree_emit",
    "transform",
    "source_transform",
    "DEFAULT_PREFIX",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

"""
mwprefix - Utility-class namespace codemod

Rewrites utility-class tokens in source text so recognized class names
carry a namespace prefix (default "mw-").
"""

from .lib import transform, source_transform, classList_transform, classify, LOG, state_connectToLogger, __version__

__all__ = [
    "transform",
    "source_transform",
    "classList_transform",
    "classify",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

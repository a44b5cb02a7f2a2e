"""
Models package for mwprefix

Contains data structures and type definitions for the codemod and its
command-line pipeline.
"""

from .state import ProgramState, pipeline
from .utilities import UtilitySpec, UtilityCategory, MODIFIERS
from .tokens import ClassToken
from .tree import (
    Grammar,
    SiteKind,
    StringLiteral,
    PlainLiteral,
    WrappedLiteral,
    NestedElement,
    OtherExpression,
    Attribute,
    Element,
    SourceTree,
    TransformResult,
)
from .parser import TagMatch, ExpressionScan

__all__ = [
    "ProgramState",
    "pipeline",
    "UtilitySpec",
    "UtilityCategory",
    "MODIFIERS",
    "ClassToken",
    "Grammar",
    "SiteKind",
    "StringLiteral",
    "PlainLiteral",
    "WrappedLiteral",
    "NestedElement",
    "OtherExpression",
    "Attribute",
    "Element",
    "SourceTree",
    "TransformResult",
    "TagMatch",
    "ExpressionScan",
]

"""
Pygments lexers for locating class-list sites in source files

The stock JSX lexers stop tracking markup after each opening tag, so text
between tags is lexed as JavaScript (an apostrophe in "Don't" opens a
string) and any `a<b` is taken for a tag. The lexers here:

- recognize an element only where an expression may start (the
  JavaScript lexer's 'slashstartsregex' state, i.e. after `=`, `(`,
  `return`, `=>`, `?`, `&&`, ...), so TypeScript generics such as
  `useState<string>()` stay operators;
- in TypeScript, take `<T>(` and `<T extends U>(` at an expression
  start for type parameter lists;
- lex element children as plain Text until the matching closing tag;
- emit quoted attribute values as a single `String` token.

Token types the tree builder relies on:
- Punctuation '<' followed by Name.Tag: start of an opening tag
- Name.Attribute, Operator '=': attribute name and separator
- String: quoted attribute value (markup and JSX)
- String.Double / String.Single: JavaScript string literals
- Punctuation '{' / '}': attribute expression braces
- Punctuation '>' / '/>': end of an opening tag
"""

from typing import Iterator, Tuple

from pygments.lexer import Lexer, bygroups, default, include, inherit
from pygments.lexers.html import HtmlLexer
from pygments.lexers.javascript import JavascriptLexer, TypeScriptLexer
from pygments.token import (
    Name,
    Operator,
    Punctuation,
    String,
    Text,
    Whitespace,
    _TokenType,
)

from ..models.tree import Grammar


LexToken = Tuple[int, _TokenType, str]

_TAG_NAME = r'[A-Za-z_$][\w$.:-]*'

# Type parameters of a generic signature up to the call parens: `T>(`,
# `T extends object>(`, `T extends Array<U>, U>(`, `U>>(`. One level of
# nested `<...>`; no quotes or '=', so attributes never match.
_TYPE_PARAMETERS = r'[A-Za-z_$](?:[^<>"\'=]|<[^<>"\'=]*>)*>+\s*\('

_JSX_RULES = {
    'jsx-open': [
        (r'<>', Punctuation, 'jsx-children'),
        (r'(<)(' + _TAG_NAME + r')', bygroups(Punctuation, Name.Tag), 'jsx-tag'),
    ],
    'jsx-tag': [
        (r'\s+', Whitespace),
        # spread attributes: {...props}
        (r'\{', Punctuation, ('jsx-expression', 'slashstartsregex')),
        (r'([\w$:-]+)(\s*)(=)(\s*)',
         bygroups(Name.Attribute, Whitespace, Operator, Whitespace), 'jsx-attr'),
        (r'[\w$:-]+', Name.Attribute),
        (r'/>', Punctuation, '#pop'),
        (r'>', Punctuation, ('#pop', 'jsx-children')),
        # not a tag after all (e.g. `<T,>() => ...`), give it back to JavaScript
        default('#pop'),
    ],
    'jsx-attr': [
        (r'\{', Punctuation, ('#pop', 'jsx-expression', 'slashstartsregex')),
        (r'"[^"]*"', String, '#pop'),
        (r"'[^']*'", String, '#pop'),
        default('#pop'),
    ],
    'jsx-expression': [
        (r'\}', Punctuation, '#pop'),
        (r'\{', Punctuation, ('jsx-expression', 'slashstartsregex')),
        include('root'),
    ],
    'jsx-children': [
        (r'</>', Punctuation, '#pop'),
        (r'(</)(\s*)(' + _TAG_NAME + r')?(\s*)(>)',
         bygroups(Punctuation, Whitespace, Name.Tag, Whitespace, Punctuation), '#pop'),
        (r'\{', Punctuation, ('jsx-expression', 'slashstartsregex')),
        include('jsx-open'),
        (r'[^<{]+', Text),
        (r'<', Text),
    ],
}

_JSX_ENTRY = {
    'root': [
        # arrow bodies may be elements: () => <div/>
        (r'=>', Punctuation, 'slashstartsregex'),
        # element at the start of a line
        (r'^(?=<[A-Za-z_$])', Text, 'slashstartsregex'),
        inherit,
    ],
    'slashstartsregex': [
        include('jsx-open'),
        inherit,
    ],
}


class JsxSourceLexer(JavascriptLexer):
    """
    JavaScript lexer with element tracking

    Example:
        const el = <div className="p-4">Don't</div>;

    Tokens:
        <         → Punctuation
        div       → Name.Tag
        className → Name.Attribute
        "p-4"     → String
        Don't     → Text
    """

    name = 'JSX source'
    aliases = ['mwprefix-jsx']
    filenames = []

    tokens = {**_JSX_ENTRY, **_JSX_RULES}


class TsxSourceLexer(TypeScriptLexer):
    """
    TypeScript lexer with the same element tracking as JsxSourceLexer

    A `<...>` at an expression start whose `>` is followed by `(` opens a
    type parameter list, not an element:

        type Fn = <T>(x: T) => T;
        const id = <T extends object>(x: T) => x;

    Its '<' is an Operator, and lexing carries on as TypeScript.
    """

    name = 'TSX source'
    aliases = ['mwprefix-tsx']
    filenames = []

    tokens = {
        **_JSX_ENTRY,
        **_JSX_RULES,
        'slashstartsregex': [
            (r'<(?=' + _TYPE_PARAMETERS + r')', Operator, '#pop'),
            include('jsx-open'),
            inherit,
        ],
    }


class MarkupLexer(HtmlLexer):
    """
    HTML lexer whose <style> bodies are opaque Text

    CSS strings are not class lists, so the CSS lexer the stock HTML lexer
    delegates to is replaced by a single Text token. <script> bodies are
    still lexed as JavaScript.
    """

    name = 'Markup source'
    aliases = ['mwprefix-html']
    filenames = []

    tokens = {
        'style-content': [
            (r'(<)(\s*)(/)(\s*)(style)(\s*)(>)',
             bygroups(Punctuation, Text, Punctuation, Text, Name.Tag, Text,
                      Punctuation), '#pop'),
            (r'.+?(?=<\s*/\s*style\s*>)', Text),
            (r'.+', Text, '#pop'),
        ],
    }


_LEXERS = {
    Grammar.MARKUP: MarkupLexer,
    Grammar.JAVASCRIPT: JsxSourceLexer,
    Grammar.TYPESCRIPT: TsxSourceLexer,
}


def lexer_forGrammar(grammar: Grammar) -> Lexer:
    """
    Get a lexer instance for a grammar family

    Args:
        grammar: Grammar family

    Returns:
        Lexer instance ready for get_tokens_unprocessed()
    """
    return _LEXERS[grammar]()


def tokens_lex(source: str, grammar: Grammar) -> Iterator[LexToken]:
    """
    Lex source into positioned tokens

    Uses get_tokens_unprocessed() so offsets index the untouched source
    (get_tokens() would normalize newlines and tabs first).

    Args:
        source: Source text
        grammar: Grammar family to lex with

    Yields:
        (offset, token type, text) tuples covering the whole source
    """
    lexer = lexer_forGrammar(grammar)
    yield from lexer.get_tokens_unprocessed(source)

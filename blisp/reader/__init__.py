from blisp.reader.parser import lex, parse, SyntaxNode, Token
from blisp.reader.reader import read, escape, unescape

__all__ = ["lex", "parse", "SyntaxNode", "Token", "read", "escape", "unescape"]

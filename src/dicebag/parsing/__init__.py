from __future__ import annotations

from dicebag.parsing.lexer import GroupToken, Modifier, ModifierKind, tokenize
from dicebag.parsing.parser import parse
from dicebag.parsing.resolver import resolve_modifiers

__all__ = [
    "GroupToken",
    "Modifier",
    "ModifierKind",
    "parse",
    "resolve_modifiers",
    "tokenize",
]

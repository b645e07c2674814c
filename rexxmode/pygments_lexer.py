# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Pygments lexer for REXX with embedded CMS Pipelines

Wraps L{rexxmode.lexer.RexxLexer} so that any Pygments formatter can be used
to render REXX source.
"""

from pygments.lexer import Lexer
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    String,
    Text,
)

from rexxmode.lexer import Category, RexxLexer

__all__ = ['RexxPygmentsLexer', 'token_map']


token_map = {
    Category.PLAIN_TEXT: Text,
    Category.KEYWORD: Keyword,
    Category.BUILTIN: Name.Builtin,
    Category.LABEL: Name.Label,
    Category.NUMBER: Number,
    Category.COMMENT: Comment,
    Category.STRING: String,
    Category.PIPE_OPERATOR: Operator,
    Category.PIPE_STAGE_LABEL: Name.Label,
    Category.PIPE_STAGE_NAME: Name.Function,
    Category.ADDRESS_TARGET: Name.Namespace,
}


class RexxPygmentsLexer(Lexer):
    """
    A lexer for REXX source, including CMS Pipelines stages
    """

    name = 'REXX'
    aliases = ['rexx', 'rex']
    filenames = ['*.rexx', '*.rex', '*.cmd', '*.exec']
    mimetypes = ['text/x-rexx']

    def __init__(self, **options):
        # leading blank lines are part of the source
        options.setdefault('stripnl', False)
        Lexer.__init__(self, **options)
        self.pipelines_in_strings = options.get('pipelines_in_strings', False)
        self.rexx = RexxLexer(pipelines_in_strings=self.pipelines_in_strings)

    def get_tokens_unprocessed(self, text):
        for start, end, category in self.rexx.iterTokens(text):
            yield start, token_map[category], text[start:end]

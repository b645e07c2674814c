#-----------------------------------------------------------------------------
# Name:        lexer.py
# Purpose:     REXX and CMS Pipelines lexer for STC-style text controls
#
# Author:      Rob McMullen
#
# Created:     2009
# RCS-ID:      $Id: $
# Copyright:   (c) 2009 Rob McMullen
# License:     wxWidgets
#-----------------------------------------------------------------------------
"""REXX and CMS Pipelines lexer

The lexer splits text into a contiguous sequence of L{Token}s.  Comments and
strings may span lines, so every pass starts from a lexical state (one of the
L{LexState} values) and reports the state at the end of the text, which is
the state the next line must be started with.

When the same text is styled in a text control, the state at the end of each
line is stored using the control's line state so styling can restart at any
line.  See L{RexxLexer.iterStyles}.

Where several rules could claim the same span, the first of these wins:

 1. a pipeline stage name right after C{|} or C{||}
 2. a pipeline stage label, C{| name:}
 3. the pipe operator itself
 4. a reserved keyword
 5. a built-in function name
 6. a label, C{name:} at the start of a line
 7. a number
 8. the target of an C{address} instruction

Comments and strings are recognized before any of the above and everything
inside them is comment or string text.
"""

import re
from collections import namedtuple

from rexxmode.debug import *
from rexxmode.syntax import rexx


class Category(object):
    """Token categories.

    The values double as the STC style numbers used when styling a text
    control.
    """
    PLAIN_TEXT = 0
    KEYWORD = 1
    BUILTIN = 2
    LABEL = 3
    NUMBER = 4
    COMMENT = 5
    STRING = 6
    PIPE_OPERATOR = 7
    PIPE_STAGE_LABEL = 8
    PIPE_STAGE_NAME = 9
    ADDRESS_TARGET = 10

    @classmethod
    def getName(cls, category):
        for name, _ in rexx.SYNTAX_ITEMS:
            if getattr(cls, name) == category:
                return name
        raise KeyError(category)


class LexState(object):
    """Lexical state at a line boundary."""
    NORMAL = 0
    COMMENT = 1
    SINGLE_QUOTED = 2
    DOUBLE_QUOTED = 3


Token = namedtuple('Token', ['start', 'end', 'category'])


_symbol = r"[A-Za-z_@#$!?][\w@#$!?.]*"
_symbol_char = r"[\w@#$!?.]"

_normal_re = re.compile(r"""
 (?P<block>/\*)
|(?P<line>(?:--|\#)(?=\s|$))
|(?P<quote>['"])
|(?P<pipe>\|\|?)
|(?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?![\w@\#$!?.]))
|(?P<symbol>%s)
|(?P<other>\d[\w@\#$!?.]*|.)
""" % _symbol, re.VERBOSE | re.MULTILINE | re.DOTALL)

_stage_re = re.compile(r"[ \t]*(?P<stage>[<>]{1,2}[A-Za-z]*|%s)(?!%s)" % (_symbol, _symbol_char))
_stage_label_re = re.compile(r"[ \t]*(?P<label>%s)[ \t]*:" % _symbol)
_label_colon_re = re.compile(r"[ \t]*:")
_address_target_re = re.compile(r"[ \t]+(?P<target>%s)" % _symbol)
_pipe_re = re.compile(r"\|\|?")


class BaseLexer(debugmixin):
    """Base class for custom lexers.

    This lexer does nothing on its own except provide the interface to the
    custom lexers.
    """
    def styleText(self, stc, start, end):
        self.dprint("Styling text from %d - %d" % (start, end))
        start = self.adjustStart(stc, start)

        for pos, count, style in self.iterStyles(stc, start, end):
            if count > 0:
                stc.StartStyling(pos)
                stc.SetStyling(count, style)

    def adjustStart(self, stc, start):
        """Utility method in case subclass needs to adjust the start of the
        text range.

        Some lexers may fail if the text range starts in the middle of a word.
        This method is provided to move the starting point backward if
        necessary.
        """
        return start

    def iterStyles(self, stc, start, end):
        """Splits the text into ranges based on similar styles.

        This method is a generator to provide the means to style the text
        by breaking the text range up into styling groups where each group
        contains the same style.

        Should be overridden in subclasses to provide custom styling.

        @returns: generator where each item is a tuple containing the start
        position, the number of characters to style, and the style ID number.
        """
        text = stc.GetTextRange(start, end)
        yield start, len(text), 0

    def getEditraStyleSpecs(self):
        """Return the Editra style specs for this lexer.

        Editra style specs are a list of 2-tuples, where each tuple maps an
        integer style value to an Edtira style name.

        @returns: list of 2-tuples, where each tuple maps an integer style
        value to an Editra style name.
        """
        return [(0, "default_style")]


class RexxLexer(BaseLexer):
    """Lexer for REXX source with embedded CMS Pipelines.

    Instances hold only their configuration, so a single instance can be
    shared between any number of documents.
    """
    debuglevel = 0

    def __init__(self, pipelines_in_strings=False):
        """Create a lexer.

        @param pipelines_in_strings: if True, pipe operators, stage labels
        and stage names are also recognized inside string literals, where
        CMS Pipelines specifications are usually written.
        """
        self.pipelines_in_strings = pipelines_in_strings

    def getEditraStyleSpecs(self):
        return [(getattr(Category, name), style) for name, style in rexx.SyntaxSpec()]

    def classify(self, text, state=LexState.NORMAL):
        """Classify the text.

        @param text: source text, starting at a line boundary
        @param state: lexical state in effect at the start of the text
        @return: tuple of the list of L{Token}s and the lexical state at the
        end of the text
        """
        tokens = []
        for token, state in self.iterTokensWithState(text, state):
            tokens.append(token)
        return tokens, state

    def iterTokens(self, text, state=LexState.NORMAL):
        """Generator over the tokens of the text, without the state."""
        for token, state in self.iterTokensWithState(text, state):
            yield token

    def iterTokensWithState(self, text, state=LexState.NORMAL):
        """Generator over the tokens of the text.

        The tokens are contiguous and cover the whole text; runs of text that
        no rule claims come out as L{Category.PLAIN_TEXT} tokens.

        @return: generator of tuples containing the token and the lexical
        state after the token
        """
        plain = 0
        for start, end, category, state in self._iterSpans(text, state):
            if start > plain:
                yield Token(plain, start, Category.PLAIN_TEXT), LexState.NORMAL
            if end > start:
                yield Token(start, end, category), state
            plain = end
        if plain < len(text):
            yield Token(plain, len(text), Category.PLAIN_TEXT), state

    def _iterSpans(self, text, state):
        """Generator over the classified spans of the text.

        Unclassified text between the spans is left for the caller to fill.
        """
        pos = 0
        length = len(text)

        # Finish up a comment or string left open by the previous line
        if state == LexState.COMMENT:
            pos, state = self._findCommentEnd(text, 0)
            yield 0, pos, Category.COMMENT, state
        elif state in (LexState.SINGLE_QUOTED, LexState.DOUBLE_QUOTED):
            pos, state = self._findStringEnd(text, 0, state)
            for span in self._iterStringSpans(text, 0, pos, state):
                yield span

        while pos < length:
            match = _normal_re.match(text, pos)
            kind = match.lastgroup
            if kind == 'block':
                end, state = self._findCommentEnd(text, match.end())
                yield pos, end, Category.COMMENT, state
                pos = end
            elif kind == 'line':
                end = text.find('\n', pos)
                if end < 0:
                    end = length
                yield pos, end, Category.COMMENT, LexState.NORMAL
                pos = end
            elif kind == 'quote':
                if match.group(kind) == "'":
                    state = LexState.SINGLE_QUOTED
                else:
                    state = LexState.DOUBLE_QUOTED
                end, state = self._findStringEnd(text, match.end(), state)
                for span in self._iterStringSpans(text, pos, end, state):
                    yield span
                pos = end
            elif kind == 'pipe':
                for span in self._iterPipeSpans(text, match, length, LexState.NORMAL):
                    yield span
                    pos = span[1]
            elif kind == 'number':
                yield pos, match.end(), Category.NUMBER, LexState.NORMAL
                pos = match.end()
            elif kind == 'symbol':
                for span in self._iterSymbolSpans(text, match):
                    yield span
                    pos = span[1]
                pos = max(pos, match.end())
            else:
                pos = match.end()

    def _findCommentEnd(self, text, pos):
        """Find the end of a block comment, the first C{*/} at or after pos.

        @return: tuple of the position after the comment and the new state
        """
        end = text.find('*/', pos)
        if end < 0:
            return len(text), LexState.COMMENT
        return end + 2, LexState.NORMAL

    def _findStringEnd(self, text, pos, state):
        """Find the closing quote of a string.

        A doubled quote character is an embedded quote and doesn't close the
        string.

        @param pos: position just after the opening quote, or the start of
        the text if continuing a string from a previous line
        @return: tuple of the position after the string and the new state
        """
        if state == LexState.SINGLE_QUOTED:
            quote = "'"
        else:
            quote = '"'
        while True:
            end = text.find(quote, pos)
            if end < 0:
                return len(text), state
            if text.startswith(quote, end + 1):
                pos = end + 2
                continue
            return end + 1, LexState.NORMAL

    def _iterStringSpans(self, text, start, end, state):
        if not self.pipelines_in_strings:
            yield start, end, Category.STRING, state
            return

        pos = start
        while pos < end:
            match = _pipe_re.search(text, pos, end)
            if not match:
                break
            if match.start() > pos:
                yield pos, match.start(), Category.STRING, state
            pos = match.start()
            for span in self._iterPipeSpans(text, match, end, state):
                # whitespace between the pipe parts is still string text
                if span[0] > pos:
                    yield pos, span[0], Category.STRING, state
                yield span
                pos = span[1]
        if pos < end:
            yield pos, end, Category.STRING, state

    def _iterPipeSpans(self, text, match, endpos, state):
        """Generate the spans for a pipe operator and the stage label and
        stage name that may follow it.
        """
        pos = match.end()
        yield match.start(), pos, Category.PIPE_OPERATOR, state

        stage = _stage_re.match(text, pos, endpos)
        if stage and rexx.isStageName(stage.group('stage')):
            yield stage.start('stage'), stage.end('stage'), Category.PIPE_STAGE_NAME, state
            return

        label = _stage_label_re.match(text, pos, endpos)
        if label:
            yield label.start('label'), label.end('label'), Category.PIPE_STAGE_LABEL, state
            stage = _stage_re.match(text, label.end(), endpos)
            if stage and rexx.isStageName(stage.group('stage')):
                yield stage.start('stage'), stage.end('stage'), Category.PIPE_STAGE_NAME, state

    def _iterSymbolSpans(self, text, match):
        """Generate the span for a symbol and, after the C{address} keyword,
        the span for the environment name.
        """
        start, end = match.span()
        word = match.group('symbol')
        if rexx.isKeyword(word):
            yield start, end, Category.KEYWORD, LexState.NORMAL
            if word.lower() == 'address':
                target = _address_target_re.match(text, end)
                if target and self._getSymbolCategory(text, target.start('target'), target.group('target')) is None:
                    yield target.start('target'), target.end('target'), Category.ADDRESS_TARGET, LexState.NORMAL
            return
        category = self._getSymbolCategory(text, start, word)
        if category is not None:
            yield start, end, category, LexState.NORMAL

    def _getSymbolCategory(self, text, start, word):
        """Return the category of a symbol from rules 4 to 6, or None if it
        isn't claimed by any of them.
        """
        if rexx.isKeyword(word):
            return Category.KEYWORD
        if rexx.isBuiltin(word):
            return Category.BUILTIN
        if self.isLineStart(text, start) and _label_colon_re.match(text, start + len(word)):
            return Category.LABEL
        return None

    def isLineStart(self, text, pos):
        """Return True if only whitespace precedes pos on its line"""
        linestart = text.rfind('\n', 0, pos) + 1
        return not text[linestart:pos].strip()

    def adjustStart(self, stc, start):
        """Move the start back to the beginning of its line, because the
        lexical state is only known at line boundaries.
        """
        return stc.PositionFromLine(stc.LineFromPosition(start))

    def iterStyles(self, stc, start, end):
        """Style whole lines from the line containing start through the line
        containing end.

        The lexical state at the end of each line is saved with
        C{SetLineState}.  If the state at the end of the requested range is
        different from what was saved before, the following lines are styled
        as well until the states agree again, because a comment or string
        opened or closed in the range changes their styling.
        """
        line = stc.LineFromPosition(start)
        last = stc.LineFromPosition(end)
        count = stc.GetLineCount()
        if line > 0:
            state = stc.GetLineState(line - 1)
        else:
            state = LexState.NORMAL
        while line < count:
            old = stc.GetLineState(line)
            text = stc.GetLine(line)
            linestart = stc.PositionFromLine(line)
            for token, state in self.iterTokensWithState(text, state):
                yield linestart + token.start, token.end - token.start, token.category
            stc.SetLineState(line, state)
            self.dprint("line %d: state %d -> %d" % (line, old, state))
            line += 1
            if line > last and state == old:
                break


_default_lexer = RexxLexer()

def classify(text, state=LexState.NORMAL):
    """Classify the text with the default lexer configuration.

    @param text: source text, starting at a line boundary
    @param state: lexical state in effect at the start of the text
    @return: tuple of the list of L{Token}s and the lexical state at the end
    of the text
    """
    return _default_lexer.classify(text, state)

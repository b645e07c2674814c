# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Autoindent code for REXX

The autoindenters work on anything that provides the methods of
L{rexxmode.stcinterface.STCInterface}: a wx.stc.StyledTextCtrl wrapped in an
L{rexxmode.stcinterface.STCProxy}, or the in-memory
L{rexxmode.stcinterface.TextSTC}.

The indentation of a line is determined by the nearest line above it that
contains code, plus the first word of the line itself.  No brackets are
tracked, so a block that is closed by an C{end} on the same line that opened
it still indents the following line.
"""

import re

from rexxmode.debug import *
from rexxmode.lexer import Category, LexState, classify
from rexxmode.stcinterface import iterLinesBackward
from rexxmode.syntax import rexx

# characters that continue a REXX symbol
symbol_char = r"[\w@#$!?.]"


def hasCode(text, state=LexState.NORMAL):
    """Return True if the text has something other than whitespace and
    comments.
    """
    tokens, state = classify(text, state)
    for token in tokens:
        if token.category == Category.COMMENT:
            continue
        if token.category == Category.PLAIN_TEXT and not text[token.start:token.end].strip():
            continue
        return True
    return False

def getCodeText(text, state=LexState.NORMAL):
    """Get a version of the text with comments and strings blanked out.

    The returned string has the same length as the text, so columns in it
    match the columns in the original.
    """
    out = []
    tokens, state = classify(text, state)
    for start, end, category in tokens:
        if category in (Category.COMMENT, Category.STRING):
            out.append(' ' * (end - start))
        else:
            out.append(text[start:end])
    return ''.join(out)

def getEntryStates(stc, linenum):
    """Return the lexical state at the start of each line above linenum.

    The states come from lexing forward from the top of the buffer, so a
    line in the middle of a block comment is known to be comment even when
    nothing on the line itself says so.
    """
    states = []
    state = LexState.NORMAL
    for ln in range(min(linenum, stc.GetLineCount())):
        states.append(state)
        tokens, state = classify(stc.GetLine(ln), state)
    return states

def iterLinesWithStates(stc, linenum, states=None):
    """Generator over the lines above linenum, nearest first, along with
    the lexical state at the start of each line.

    @param states: entry states of the lines above linenum as returned by
    L{getEntryStates}, or None to compute them
    """
    if states is None:
        states = getEntryStates(stc, linenum)
    for ln, text in iterLinesBackward(stc, linenum):
        yield ln, text, states[ln]

def findPrevCodeLine(lines):
    """Find the first line with code in a backward sequence of lines.

    Blank lines and lines with only comments are skipped.  Because each line
    is judged from the state it starts in, every line of a block comment is
    skipped, including an opening line or a closing line that has more
    comment text on it.  Code before the opening C{/*} or after the closing
    C{*/} still counts as code.

    @param lines: iterator over tuples of line number, line text and lexical
    state at the start of the line, nearest line first, e.g. from
    L{iterLinesWithStates}
    @return: tuple of the line number, the text of the line, and the lexical
    state at the start of the line; the line number is -1 if no line has code
    """
    for ln, text, state in lines:
        if hasCode(text, state):
            return ln, text, state
    return -1, '', LexState.NORMAL


class BasicAutoindent(debugmixin):
    """Editing operations shared by the autoindenters.

    Subclasses supply L{findIndent}; the Tab, Return and region operations
    here only use it to learn the column each line belongs at.
    """
    def findIndent(self, stc, linenum, states=None):
        """Find proper indention of the line.

        @param linenum: line number
        @param states: entry lexical states of the lines above linenum, or
        None to compute them
        @return: integer indicating number of columns to indent the line
        """
        raise NotImplementedError

    def reindentLine(self, stc, linenum=None, dedent_only=False, states=None):
        """Reindent the specified line to the correct level.

        Changes the indentation of the given line by inserting or deleting
        whitespace as required.

        @param stc: the stc of interest
        @param linenum: the line number, or None to use the current line
        @param dedent_only: flag to indicate that indentation should only be
        removed, not added
        @param states: passed through to L{findIndent}
        @return: the new cursor position, in case the cursor has moved as a
        result of the indention.
        """
        if linenum is None:
            linenum = stc.GetCurrentLine()

        linestart = stc.PositionFromLine(linenum)

        # actual indention of current line
        indcol = stc.GetLineIndentation(linenum) # columns
        pos = stc.GetCurrentPos()
        indpos = stc.GetLineIndentPosition(linenum) # absolute character position
        self.dprint("linestart=%d indpos=%d pos=%d indcol=%d" % (linestart, indpos, pos, indcol))

        newind = self.findIndent(stc, linenum, states)
        if newind is None:
            return pos
        if dedent_only and newind > indcol:
            return pos

        # the target to be replaced is the leading indention of the
        # current line
        indstr = stc.GetIndentString(newind)
        self.dprint("linenum=%d indstr='%s'" % (linenum, indstr))
        stc.SetTargetStart(linestart)
        stc.SetTargetEnd(indpos)
        stc.ReplaceTarget(indstr)

        # recalculate cursor position, because it may have moved if it
        # was within the target
        after = stc.GetLineIndentPosition(linenum)
        self.dprint("after: indent=%d cursor=%d" % (after, stc.GetCurrentPos()))
        if pos < linestart:
            return pos
        newpos = pos - indpos + after
        if newpos < linestart:
            # we were in the indent region, but the region was made smaller
            return after
        elif pos < indpos:
            # in the indent region
            return after
        return newpos

    def processReturn(self, stc):
        """Add a newline and indent to the proper tab level.

        This uses the findIndent method to determine the proper indentation
        of the line about to be added, inserts the appropriate end-of-line
        characters, and indents the new line to that indentation level.  Any
        whitespace that followed the cursor is replaced by the new
        indentation.

        @param stc: stc of interest
        """
        linesep = stc.getLinesep()

        stc.BeginUndoAction()
        linenum = stc.GetCurrentLine()
        pos = stc.GetCurrentPos()
        col = stc.GetColumn(pos)

        #get info about the current line's indentation
        ind = stc.GetLineIndentation(linenum)

        self.dprint("format = %s col=%d ind = %d" % (repr(linesep), col, ind))

        stc.SetTargetStart(pos)
        stc.SetTargetEnd(pos)
        if col <= ind:
            newline = linesep + stc.GetIndentString(col)
        elif not pos:
            newline = linesep
        else:
            stc.ReplaceTarget(linesep)
            pos += len(linesep)
            ind = self.findIndent(stc, linenum + 1)
            self.dprint("pos=%d ind=%d" % (pos, ind))
            stc.SetTargetStart(pos)
            stc.SetTargetEnd(stc.GetLineIndentPosition(linenum + 1))
            newline = stc.GetIndentString(ind)
        stc.ReplaceTarget(newline)
        stc.GotoPos(pos + len(newline))
        stc.EndUndoAction()

    def processTab(self, stc):
        stc.BeginUndoAction()
        self.dprint()
        pos = self.reindentLine(stc)
        stc.GotoPos(pos)
        stc.EndUndoAction()

    def reindentRegion(self, stc, first=0, last=-1):
        """Reindent a range of lines, top to bottom.

        Lines that start inside a block comment or a string are left alone,
        as are lines that have nothing but whitespace, which are emptied.
        Because each line is reindented after the lines above it, the result
        doesn't depend on the indentation the lines had before.

        @param first: first line number to reindent
        @param last: last line number to reindent, or -1 for the last line
        of the document
        """
        count = stc.GetLineCount()
        if last < 0 or last >= count:
            last = count - 1
        pos = stc.GetCurrentPos()
        stc.BeginUndoAction()
        states = []
        state = LexState.NORMAL
        for linenum in range(0, last + 1):
            if linenum >= first and state == LexState.NORMAL:
                linestart = stc.PositionFromLine(linenum)
                indpos = stc.GetLineIndentPosition(linenum)
                if indpos == stc.GetLineEndPosition(linenum):
                    if indpos > linestart:
                        stc.GotoPos(pos)
                        stc.SetTargetStart(linestart)
                        stc.SetTargetEnd(indpos)
                        stc.ReplaceTarget('')
                        pos = stc.GetCurrentPos()
                else:
                    stc.GotoPos(pos)
                    pos = self.reindentLine(stc, linenum, states=states)
            states.append(state)
            text = stc.GetLine(linenum)
            tokens, state = classify(text, state)
            self.dprint("line %d: exit state %d" % (linenum, state))
        stc.GotoPos(pos)
        stc.EndUndoAction()


class RexxAutoindent(BasicAutoindent):
    """Keyword based autoindenter for REXX

    The previous code line determines the base indentation.  A line that
    starts with C{end} closes a block and one that starts with C{when} or
    C{otherwise} sits at the level of its C{select}, so both are moved out
    one level.  Any other line is moved in one level if the previous code
    line opens a block, which is the case if it contains C{do}, C{loop},
    C{select} or C{then} as a word, or begins with C{else}.
    """
    debuglevel = 0

    # words are bounded by the characters that can't continue a symbol, so
    # compound symbols like x.do never match
    reUnindent = re.compile(r"\s*(%s)(?!%s)" % ("|".join(sorted(rexx.BLOCK_CLOSERS)), symbol_char), re.IGNORECASE)
    reMiddle = re.compile(r"\s*(%s)(?!%s)" % ("|".join(sorted(rexx.BLOCK_MIDDLES)), symbol_char), re.IGNORECASE)
    reIndentAfter = re.compile(r"(?<!%s)(%s)(?!%s)|^\s*else(?!%s)" % (symbol_char, "|".join(sorted(rexx.BLOCK_OPENERS)), symbol_char, symbol_char), re.IGNORECASE)

    def __init__(self, offset=None):
        """Create a REXX autoindenter.

        @param offset: number of columns per block level, or None to use
        the indent size of the stc
        """
        self.offset = offset

    def getOffset(self, stc):
        if self.offset is None:
            return stc.GetIndent()
        return self.offset

    def findIndent(self, stc, linenum, states=None):
        """Determine the correct indentation for the line.

        @param linenum: current line number
        @param states: entry lexical states of the lines above linenum, or
        None to lex them from the top of the buffer
        @param return: the number of columns to indent
        """
        if linenum < 1:
            return 0
        offset = self.getOffset(stc)

        ln, above, state = findPrevCodeLine(iterLinesWithStates(stc, linenum, states))
        if ln < 0:
            prevind = 0
        else:
            prevind = stc.GetLineIndentation(ln)
        self.dprint("prev code line=%d indent=%d text=-->%s<--" % (ln, prevind, above))

        if linenum < stc.GetLineCount():
            text = stc.GetLine(linenum)
        else:
            text = ''
        if self.reUnindent.match(text) or self.reMiddle.match(text):
            self.dprint("unindent: %s" % text.strip())
            return max(0, prevind - offset)

        match = self.reIndentAfter.search(getCodeText(above, state))
        if match:
            self.dprint("reIndentAfter: found %s at %d" % (match.group(0), match.start(0)))
            return prevind + offset
        return prevind


def computeIndent(stc, linenum, offset=2):
    """Return the indentation column of a line of REXX source.

    @param stc: object providing the L{rexxmode.stcinterface.STCInterface}
    methods
    @param linenum: line number of interest
    @param offset: number of columns per block level
    """
    return RexxAutoindent(offset).findIndent(stc, linenum)

# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Host adapter for the lexer and autoindenter.

The lexer and the autoindenters only ever talk to a text buffer through the
small subset of the wx.stc.StyledTextCtrl API that is described by
L{STCInterface}.  A real StyledTextCtrl already provides all of these
methods; L{TextSTC} provides them for a plain string so the same code can be
used without a GUI, e.g. in tests or from the command line.
"""

import bisect

from rexxmode.debug import *


#### STC Interface

class STCInterface(object):
    """
    Methods that a text buffer must implement in order to be usable by the
    lexer and the autoindenters.

    See U{the Yellowbrain guide to the
    STC<http://www.yellowbrain.com/stc/index.html>} for more info on
    the rest of the STC methods.
    """
    def GetText(self):
        return ''

    def GetLength(self):
        return 0

    GetTextLength = GetLength

    def GetLineCount(self):
        return 1

    def GetLine(self, line):
        """Return the text of the line including the line ending"""
        return ''

    def GetTextRange(self, start, end):
        return ''

    def PositionFromLine(self, line):
        return 0

    def LineFromPosition(self, pos):
        return 0

    def GetLineEndPosition(self, line):
        return 0

    def GetLineIndentation(self, line):
        """Return the number of columns of indentation of the line"""
        return 0

    def GetLineIndentPosition(self, line):
        """Return the position of the first non-blank character of the line"""
        return 0

    def GetCurrentPos(self):
        return 0

    def GetCurrentLine(self):
        return 0

    def GetColumn(self, pos):
        return 0

    def GotoPos(self, pos):
        """Move the cursor to the specified position and scroll the
        position into the view if necessary.
        """
        pass

    def GetIndent(self):
        return 2

    def GetTabWidth(self):
        return 8

    def GetUseTabs(self):
        return False

    def SetTargetStart(self, pos):
        pass

    def SetTargetEnd(self, pos):
        pass

    def ReplaceTarget(self, text):
        pass

    def InsertText(self, pos, text):
        pass

    def BeginUndoAction(self):
        pass

    def EndUndoAction(self):
        pass

    def StartStyling(self, pos):
        pass

    def SetStyling(self, count, style):
        pass

    def GetStyleAt(self, pos):
        return 0

    def GetLineState(self, line):
        return 0

    def SetLineState(self, line, state):
        pass

    def getLinesep(self):
        return '\n'

    def GetIndentString(self, ind):
        if self.GetUseTabs():
            return (ind*' ').replace(self.GetTabWidth()*' ', '\t')
        else:
            return ind*' '

    def addLinePrefixAndSuffix(self, start, end, prefix='', suffix=''):
        """Add a prefix and/or suffix to the line specified by start and end.

        @param start: first character in line
        @param end: last character in line before line ending
        @param prefix: optional prefix for the line
        @param suffix: optional suffix for the line

        @returns: new position of last character before line ending
        """
        self.InsertText(start, prefix)
        end += len(prefix)
        if suffix:
            self.InsertText(end, suffix)
            end += len(suffix)
        return end

    def removeLinePrefixAndSuffix(self, start, end, prefix='', suffix=''):
        """Remove the specified prefix and suffix of the line.

        If the prefix or suffix doesn't match the characters in the line,
        nothing is removed.

        @returns: new position of last character before line ending
        """
        slen = len(prefix)
        if slen > 0 and self.GetTextRange(start, min(start+slen, end)) == prefix:
            self.SetTargetStart(start)
            self.SetTargetEnd(start+slen)
            self.ReplaceTarget("")
            end -= slen

        elen = len(suffix)
        if elen > 0 and end - elen >= start and self.GetTextRange(end-elen, end) == suffix:
            self.SetTargetStart(end-elen)
            self.SetTargetEnd(end)
            self.ReplaceTarget("")
            end -= elen
        return end


class STCProxy(object):
    """Proxy object to defer requests to a real STC.

    Used to wrap a real STC but supply some custom methods.  This is used
    to give a StyledTextCtrl the convenience methods from L{STCInterface}
    that Scintilla doesn't have itself, like L{STCInterface.getLinesep} and
    L{STCInterface.GetIndentString}.
    """
    def __init__(self, stc):
        self.stc = stc

    def __getattr__(self, name):
        # can't use self.stc.__dict__ because the stc is a swig object
        # and apparently swig attributes don't show up in __dict__.
        if name != 'stc' and hasattr(self.stc, name):
            return getattr(self.stc, name)
        if hasattr(STCInterface, name):
            return getattr(STCInterface, name).__get__(self)
        raise AttributeError(name)

    def getLinesep(self):
        mode = self.stc.GetEOLMode()
        # wx.stc.STC_EOL_CRLF, STC_EOL_CR, STC_EOL_LF
        return {0: '\r\n', 1: '\r', 2: '\n'}.get(mode, '\n')


class TextSTC(STCInterface, debugmixin):
    """Memory-resident version of the STC without any user interface.

    Holds the text as a single string with C{\\n} line endings, along with
    the per-character style information and per-line lexer state that a
    real StyledTextCtrl would keep.  Positions and line numbers outside the
    document raise IndexError.
    """
    debuglevel = 0

    def __init__(self, text='', indent=2, tab_width=8, use_tabs=False):
        self.indent = indent
        self.tab_width = tab_width
        self.use_tabs = use_tabs
        self.lexer = None
        self.SetText(text)

    def __str__(self):
        return self.text

    def SetText(self, text):
        self.text = text
        self.styles = [0] * len(text)
        self.line_states = {}
        self.end_styled = 0
        self.styling_pos = 0
        self.pos = 0
        self.target_start = self.target_end = 0
        self._computeLineStarts()

    def _computeLineStarts(self):
        starts = [0]
        index = self.text.find('\n')
        while index >= 0:
            starts.append(index + 1)
            index = self.text.find('\n', index + 1)
        self.line_starts = starts

    def _checkLine(self, line):
        if line < 0 or line >= len(self.line_starts):
            raise IndexError("line %d outside document of %d lines" % (line, len(self.line_starts)))

    def _checkPos(self, pos):
        if pos < 0 or pos > len(self.text):
            raise IndexError("position %d outside document of length %d" % (pos, len(self.text)))

    def GetText(self):
        return self.text

    def GetLength(self):
        return len(self.text)

    GetTextLength = GetLength

    def GetLineCount(self):
        return len(self.line_starts)

    def GetLine(self, line):
        self._checkLine(line)
        start = self.line_starts[line]
        if line + 1 < len(self.line_starts):
            return self.text[start:self.line_starts[line + 1]]
        return self.text[start:]

    def GetTextRange(self, start, end):
        self._checkPos(start)
        self._checkPos(end)
        return self.text[start:end]

    def PositionFromLine(self, line):
        self._checkLine(line)
        return self.line_starts[line]

    def LineFromPosition(self, pos):
        self._checkPos(pos)
        return bisect.bisect_right(self.line_starts, pos) - 1

    def GetLineEndPosition(self, line):
        return self.PositionFromLine(line) + len(self.GetLine(line).rstrip('\r\n'))

    def GetLineIndentation(self, line):
        text = self.GetLine(line).rstrip('\r\n')
        body = text.lstrip(' \t')
        return len(text[:len(text) - len(body)].expandtabs(self.tab_width))

    def GetLineIndentPosition(self, line):
        text = self.GetLine(line).rstrip('\r\n')
        return self.PositionFromLine(line) + len(text) - len(text.lstrip(' \t'))

    def GetCurrentPos(self):
        return self.pos

    def GetCurrentLine(self):
        return self.LineFromPosition(self.pos)

    def GetColumn(self, pos):
        line = self.LineFromPosition(pos)
        return len(self.text[self.line_starts[line]:pos].expandtabs(self.tab_width))

    def GotoPos(self, pos):
        self._checkPos(pos)
        self.pos = pos

    def GetIndent(self):
        return self.indent

    def SetIndent(self, indent):
        self.indent = indent

    def GetTabWidth(self):
        return self.tab_width

    def SetTabWidth(self, width):
        self.tab_width = width

    def GetUseTabs(self):
        return self.use_tabs

    def SetUseTabs(self, use_tabs):
        self.use_tabs = use_tabs

    # --- modification

    def SetTargetStart(self, pos):
        self._checkPos(pos)
        self.target_start = pos

    def SetTargetEnd(self, pos):
        self._checkPos(pos)
        self.target_end = pos

    def ReplaceTarget(self, text):
        """Replace the target range with the text.

        The cursor follows the text after the target.  Line states are kept
        for the lines outside the replaced range, moving along with their
        lines, and everything from the start of the changed line onward
        needs to be styled again.
        """
        start, end = self.target_start, self.target_end
        line = self.LineFromPosition(start)
        oldlast = self.LineFromPosition(end)
        self.text = self.text[:start] + text + self.text[end:]
        self.styles[start:end] = [0] * len(text)
        delta = len(text) - (end - start)
        if self.pos >= end:
            self.pos += delta
        elif self.pos > start:
            self.pos = start
        self.target_end = start + len(text)
        self._computeLineStarts()

        linedelta = text.count('\n') - (oldlast - line)
        states = {}
        for l, state in self.line_states.items():
            if l <= line:
                states[l] = state
            elif l > oldlast:
                states[l + linedelta] = state
        self.line_states = states
        self.end_styled = min(self.end_styled, self.line_starts[line])
        return len(text)

    def InsertText(self, pos, text):
        self.SetTargetStart(pos)
        self.SetTargetEnd(pos)
        self.ReplaceTarget(text)

    def addLinePrefixAndSuffix(self, start, end, prefix='', suffix=''):
        self.dprint("commenting %d - %d: '%s'" % (start, end, self.GetTextRange(start,end)))
        return STCInterface.addLinePrefixAndSuffix(self, start, end, prefix, suffix)

    def removeLinePrefixAndSuffix(self, start, end, prefix='', suffix=''):
        self.dprint("uncommenting %d - %d: '%s'" % (start, end, self.GetTextRange(start,end)))
        return STCInterface.removeLinePrefixAndSuffix(self, start, end, prefix, suffix)

    # --- styling

    def setLexer(self, lexer):
        """Register the lexer that L{Colourise} will call"""
        self.lexer = lexer
        self.styles = [0] * len(self.text)
        self.line_states = {}
        self.end_styled = 0

    def Colourise(self, start=0, end=-1):
        if self.lexer is None:
            return
        if end < 0:
            end = len(self.text)
        self.lexer.styleText(self, start, end)

    def GetEndStyled(self):
        return self.end_styled

    def StartStyling(self, pos):
        self._checkPos(pos)
        self.styling_pos = pos

    def SetStyling(self, count, style):
        pos = self.styling_pos
        self.styles[pos:pos + count] = [style] * count
        self.styling_pos = pos + count
        self.end_styled = max(self.end_styled, self.styling_pos)

    def GetStyleAt(self, pos):
        self._checkPos(pos)
        if pos == len(self.text):
            return 0
        return self.styles[pos]

    def GetLineState(self, line):
        return self.line_states.get(line, 0)

    def SetLineState(self, line, state):
        self.line_states[line] = state


def iterLinesBackward(stc, linenum):
    """Generator over the lines above linenum, nearest first.

    @return: generator of tuples containing the line number and the text of
    the line without its line ending
    """
    ln = min(linenum, stc.GetLineCount())
    while ln > 0:
        ln -= 1
        yield ln, stc.GetLine(ln).rstrip('\r\n')

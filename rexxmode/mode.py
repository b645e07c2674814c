# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""REXX programming language editing support.

Major mode object for REXX source with embedded CMS Pipelines.  It doesn't
depend on any GUI: the text lives in a L{TextSTC} unless another object
providing the L{STCInterface} methods is supplied.
"""

from rexxmode.debug import *
from rexxmode.lib.userparams import *
from rexxmode.lexer import RexxLexer
from rexxmode.autoindent import RexxAutoindent
from rexxmode.stcinterface import TextSTC
from rexxmode.funclist import getRoutineList


class RexxMode(ClassPrefs, debugmixin):
    """Major mode for editing REXX files.

    Configuration comes from the class preferences, so changing the
    preferences (e.g. with L{GlobalPrefs.readConfig}) affects all
    L{RexxMode} instances created afterwards.
    """
    keyword = 'REXX'

    #: Comment characters used by L{commentRegion}
    start_line_comment = '/* '
    end_line_comment = ' */'

    default_classprefs = (
        StrParam('extensions', 'rexx rex cmd exec', 'File extensions recognized as REXX source'),
        IntParam('indent_size', 2, 'Number of spaces in each indent level'),
        IntParam('tab_size', 8, 'Number of spaces in each expanded tab'),
        BoolParam('use_tab_characters', False,
                  'True: indent with tab characters.  False: indent with the equivalent number of spaces instead.'),
        BoolParam('pipelines_in_strings', False,
                  'Also highlight CMS Pipelines stages inside quoted strings'),
        )

    def __init__(self, text='', stc=None):
        if stc is None:
            stc = TextSTC(text, indent=self.classprefs.indent_size,
                          tab_width=self.classprefs.tab_size,
                          use_tabs=self.classprefs.use_tab_characters)
        self.stc = stc
        self.lexer = RexxLexer(pipelines_in_strings=self.classprefs.pipelines_in_strings)
        self.autoindent = RexxAutoindent(self.classprefs.indent_size)
        if hasattr(self.stc, 'setLexer'):
            self.stc.setLexer(self.lexer)
        self.dprint("indent=%d tab=%d" % (self.classprefs.indent_size, self.classprefs.tab_size))

    @classmethod
    def verifyFilename(cls, filename):
        """Return True if the filename has one of the REXX extensions"""
        if '.' not in filename:
            return False
        ext = filename.rsplit('.', 1)[1].lower()
        return ext in cls.classprefs.extensions.lower().split()

    def getText(self):
        return self.stc.GetText()

    def classifyBuffer(self):
        """Return the list of tokens for the whole buffer"""
        tokens, state = self.lexer.classify(self.stc.GetText())
        self.dprint("%d tokens, final state %d" % (len(tokens), state))
        return tokens

    def colourise(self):
        """Style the whole buffer through the stc's styling interface"""
        self.lexer.styleText(self.stc, 0, self.stc.GetLength())

    def findIndent(self, linenum):
        return self.autoindent.findIndent(self.stc, linenum)

    def reindentLine(self, linenum=None):
        pos = self.autoindent.reindentLine(self.stc, linenum)
        self.stc.GotoPos(pos)
        return pos

    def processReturn(self):
        self.autoindent.processReturn(self.stc)

    def processTab(self):
        self.autoindent.processTab(self.stc)

    def reindentBuffer(self):
        """Reindent every line of the buffer"""
        self.autoindent.reindentRegion(self.stc)

    def getRoutineList(self):
        return getRoutineList(self.stc)

    def commentRegion(self, first, last=None, add=True):
        """Comment or uncomment a range of lines

        Lines are commented by adding the comment string at the beginning of
        the line and the closing comment string at the end of each line in
        the block.

        @param first: first line number
        @param last: last line number, or None for just the first line
        @param add: True to add comments, False to remove them
        """
        if last is None:
            last = first
        if add:
            func = self.stc.addLinePrefixAndSuffix
        else:
            func = self.stc.removeLinePrefixAndSuffix

        self.stc.BeginUndoAction()
        try:
            for line in range(first, last + 1):
                start = self.stc.PositionFromLine(line)
                end = self.stc.GetLineEndPosition(line)
                func(start, end, self.start_line_comment, self.end_line_comment)
        finally:
            self.stc.EndUndoAction()


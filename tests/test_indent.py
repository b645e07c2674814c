import os, sys, re

from rexxmode.autoindent import *
from rexxmode.lexer import LexState
from rexxmode.debug import *

from stc_helpers import *

import pytest


basic_return_tests = splittests("""\
line at column zero|
--
line at column zero
|
--------
    line at column 4|
--
    line at column 4
    |
--------
line at column zero
    line at column 4|
--
line at column zero
    line at column 4
    |
--------
    line at column 4

back at column zero|
--
    line at column 4

back at column zero
|""")

rexx_return_tests = splittests("""\
do i = 1 to 3|
--
do i = 1 to 3
  |
--------
do
  say 'x'|end
--
do
  say 'x'
|end
--------
do|   x
--
do
  |x
--------
  |x
--
  
  |x
--------
select|
--
select
  |
--------
if a > 1 then|
--
if a > 1 then
  |
--------
say 'do not indent'|
--
say 'do not indent'
|
--------
say 'a'
/* This routine will
   do the work|
--
say 'a'
/* This routine will
   do the work
|""")

rexx_tab_tests = splittests("""\
do
say 'x'|
--
do
  say 'x'|
--------
do
|say
--
do
  |say
--------
do
  x
    |end
--
do
  x
|end
--------
do
 |  x
--
do
  |x
--------
select
  when a then|
--
select
when a then|
--------
  x = 1
|
--
  x = 1
  |""")


class TestRexxIndent(object):
    def setup_method(self, method):
        self.stc = getSTC()
        self.autoindent = RexxAutoindent()

    def checkIndents(self, text, indents):
        self.stc.SetText(text)
        found = [self.autoindent.findIndent(self.stc, i) for i in range(self.stc.GetLineCount())]
        assert found == indents

    @pytest.mark.parametrize("pair", basic_return_tests + rexx_return_tests)
    def testReturn(self, pair):
        prepareSTC(self.stc, pair[0])
        self.autoindent.processReturn(self.stc)
        assert checkSTC(self.stc, pair[0], pair[1])

    @pytest.mark.parametrize("pair", rexx_tab_tests)
    def testTab(self, pair):
        prepareSTC(self.stc, pair[0])
        self.autoindent.processTab(self.stc)
        assert checkSTC(self.stc, pair[0], pair[1])

    def testDoBlock(self):
        self.checkIndents("do i = 1 to 3\n  say i\nend", [0, 2, 0])

    def testSelect(self):
        self.checkIndents("select\nwhen 1 then\n  say 'one'", [0, 0, 2])

    def testOtherwiseDoesNotOpen(self):
        self.checkIndents("select\nwhen 1 then\n  nop\notherwise\nsay 'x'", [0, 0, 2, 0, 0])

    def testElse(self):
        # else stays at the level of the line above but opens a block
        self.checkIndents("if a then\n  say 'y'\nelse\nsay 'n'", [0, 2, 2, 2])

    def testCaseInsensitive(self):
        self.checkIndents("DO\n  x\n  End", [0, 2, 0])

    def testUnindentIsWordBounded(self):
        self.checkIndents("do\n  x\n  endpoint = 1", [0, 2, 2])

    def testOpenerAnywhereInLine(self):
        self.checkIndents("if x > 1 then say 'y'\nz", [0, 2])
        self.checkIndents("call foo; do forever\nz", [0, 2])

    def testLoop(self):
        self.checkIndents("loop i = 1 to 3\nsay i", [0, 2])

    def testUnindentFloor(self):
        self.checkIndents("say 'x'\nend", [0, 0])

    def testKeywordInCommentOrString(self):
        self.checkIndents("say 'do it' /* then */\nx", [0, 0])
        self.checkIndents('x = "select"\ny', [0, 0])

    def testSkipBlankAndCommentLines(self):
        self.checkIndents("do\n\n/* note */\n-- another\nx", [0, 2, 2, 2, 2])

    def testSkipBlockComment(self):
        text = "do\n  /* a comment\n     spanning lines */\nx"
        self.stc.SetText(text)
        assert self.autoindent.findIndent(self.stc, 3) == 2

    def testCodeAfterCommentClose(self):
        self.stc.SetText("  /* x\n  */ do\nfoo")
        assert self.autoindent.findIndent(self.stc, 2) == 4

    def testCodeBeforeCommentOpen(self):
        self.stc.SetText("do /* start\n   more */\nx")
        assert self.autoindent.findIndent(self.stc, 2) == 2

    def testInsideOpenComment(self):
        self.stc.SetText("say 'a'\n/* This routine will\n   do the work\n")
        assert computeIndent(self.stc, 3) == 0
        assert computeIndent(self.stc, 2) == 0

    def testCommentTextThatLooksLikeOpen(self):
        self.stc.SetText("do\n/* start\n   then more\n   see /* x */\nsay x")
        assert self.autoindent.findIndent(self.stc, 4) == 2

    def testCompoundSymbols(self):
        self.checkIndents("x.do = 1\ny", [0, 0])
        self.checkIndents("call list.select\ny", [0, 0])
        self.checkIndents("do\n  end.x = 1", [0, 2])
        self.checkIndents("else.1 = 0\ny", [0, 0])

    def testTabsInPreviousLine(self):
        self.stc.SetText("\tdo\nx")
        assert self.autoindent.findIndent(self.stc, 1) == 10

    def testOffsetFromSTC(self):
        self.stc.SetIndent(4)
        self.checkIndents("do\nx", [0, 4])
        self.autoindent = RexxAutoindent(3)
        self.checkIndents("do\nx", [0, 3])

    def testComputeIndent(self):
        self.stc.SetText("select\nx")
        assert computeIndent(self.stc, 1) == 2
        assert computeIndent(self.stc, 1, offset=4) == 4

    def testOutOfRange(self):
        self.stc.SetText("do")
        assert self.autoindent.findIndent(self.stc, -1) == 0
        assert self.autoindent.findIndent(self.stc, 10) == 2


class TestReindentRegion(object):
    def setup_method(self, method):
        self.stc = getSTC()
        self.autoindent = RexxAutoindent()

    def reindent(self, text, *args):
        self.stc.SetText(text)
        self.autoindent.reindentRegion(self.stc, *args)
        return self.stc.GetText()

    def testBlock(self):
        text = "do i = 1 to 3\nsay i\n/* comment\n   keep this */\nend"
        assert self.reindent(text) == "do i = 1 to 3\n  say i\n  /* comment\n   keep this */\nend"

    def testBlankLinesEmptied(self):
        assert self.reindent("do\n   \nx") == "do\n\n  x"

    def testIdempotent(self):
        text = "select\nwhen a then\ndo\nsay 'a'\nend\notherwise\nnop\nend\n"
        once = self.reindent(text)
        assert once == "select\nwhen a then\n  do\n    say 'a'\n  end\notherwise\nnop\nend\n"
        assert self.reindent(once) == once

    def testRange(self):
        assert self.reindent("do\nx\ny", 1, 1) == "do\n  x\ny"

    def testTabs(self):
        self.stc.SetText("do\ndo\nx")
        self.stc.SetIndent(4)
        self.stc.SetTabWidth(4)
        self.stc.SetUseTabs(True)
        self.autoindent.reindentRegion(self.stc)
        assert self.stc.GetText() == "do\n\tdo\n\t\tx"

    def testCursorFollowsText(self):
        self.stc.SetText("do\nsay 'x'\nend")
        self.stc.GotoPos(self.stc.GetText().index("'x'"))
        self.autoindent.reindentRegion(self.stc)
        assert self.stc.GetCurrentPos() == self.stc.GetText().index("'x'")


class TestPrevCodeLine(object):
    def findPrev(self, text, linenum):
        stc = getSTC(text)
        return findPrevCodeLine(iterLinesWithStates(stc, linenum))

    def testNone(self):
        assert self.findPrev("/* only */\n\nx", 2) == (-1, '', LexState.NORMAL)

    def testPlain(self):
        assert self.findPrev("a\n\n-- c\nx", 3) == (0, 'a', LexState.NORMAL)

    def testAfterClose(self):
        assert self.findPrev("/* a\n*/ b\nx", 2) == (1, '*/ b', LexState.COMMENT)

    def testInsideComment(self):
        assert self.findPrev("x\n/* a\n do", 3) == (0, 'x', LexState.NORMAL)
        assert self.findPrev("x\n/* a /* b\n c */", 3) == (0, 'x', LexState.NORMAL)

    def testEntryStates(self):
        stc = getSTC("a /* b\nc\nd */ e\nf")
        assert getEntryStates(stc, 4) == [LexState.NORMAL, LexState.COMMENT, LexState.COMMENT, LexState.NORMAL]
        assert getEntryStates(stc, 10) == getEntryStates(stc, 4)
        assert getEntryStates(stc, 0) == []

    def testHelpers(self):
        assert hasCode("  x /* c */")
        assert not hasCode("  /* c */ -- d")
        assert getCodeText("say 'do' x") == "say " + "    " + " x"
        assert hasCode(" end */ x", LexState.COMMENT)
        assert not hasCode("still comment", LexState.COMMENT)

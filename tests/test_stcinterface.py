import os, sys, re

from rexxmode.stcinterface import *

import pytest


class FakeControl(object):
    """Just enough of a StyledTextCtrl to check the proxy"""
    def __init__(self, eol_mode=2):
        self.eol_mode = eol_mode

    def GetEOLMode(self):
        return self.eol_mode

    def GetLineCount(self):
        return 3

    def GetLineIndentPosition(self, line):
        return [0, 10, 20][line]

    def GetLineEndPosition(self, line):
        return [5, 10, 28][line]

    def GetLineIndentation(self, line):
        return [0, 0, 8][line]

    def GetUseTabs(self):
        return True

    def GetTabWidth(self):
        return 4


class TestTextSTC(object):
    def setup_method(self, method):
        self.stc = TextSTC("do\n\tsay 'x'\n  end")

    def testLines(self):
        stc = self.stc
        assert stc.GetLineCount() == 3
        assert stc.GetLine(0) == "do\n"
        assert stc.GetLine(2) == "  end"
        assert stc.PositionFromLine(1) == 3
        assert stc.LineFromPosition(3) == 1
        assert stc.LineFromPosition(2) == 0
        assert stc.LineFromPosition(stc.GetLength()) == 2
        assert stc.GetLineEndPosition(0) == 2
        assert stc.GetTextRange(3, 5) == "\ts"

    def testTrailingNewline(self):
        stc = TextSTC("x\n")
        assert stc.GetLineCount() == 2
        assert stc.GetLine(1) == ""
        assert TextSTC().GetLineCount() == 1

    def testIndentation(self):
        stc = self.stc
        assert stc.GetLineIndentation(1) == 8
        assert stc.GetLineIndentPosition(1) == 4
        assert stc.GetLineIndentation(2) == 2
        assert stc.GetColumn(5) == 9
        stc.SetTabWidth(4)
        assert stc.GetLineIndentation(1) == 4

    def testOutOfRange(self):
        with pytest.raises(IndexError):
            self.stc.GetLine(3)
        with pytest.raises(IndexError):
            self.stc.PositionFromLine(-1)
        with pytest.raises(IndexError):
            self.stc.GotoPos(self.stc.GetLength() + 1)
        self.stc.GotoPos(self.stc.GetLength())

    def testReplaceTarget(self):
        stc = self.stc
        stc.GotoPos(stc.GetLength())
        stc.SetTargetStart(3)
        stc.SetTargetEnd(4)
        assert stc.ReplaceTarget("    ") == 4
        assert stc.GetText() == "do\n    say 'x'\n  end"
        assert stc.GetCurrentPos() == stc.GetLength()
        assert stc.PositionFromLine(2) == 15

    def testCursorInsideTarget(self):
        stc = self.stc
        stc.GotoPos(6)
        stc.SetTargetStart(4)
        stc.SetTargetEnd(8)
        stc.ReplaceTarget("")
        assert stc.GetCurrentPos() == 4

    def testLineStatesFollowLines(self):
        stc = self.stc
        stc.SetLineState(0, 1)
        stc.SetLineState(2, 3)
        stc.InsertText(0, "x\ny\n")
        assert stc.GetLineState(0) == 1
        assert stc.GetLineState(2) == 0
        assert stc.GetLineState(4) == 3

    def testIndentString(self):
        assert self.stc.GetIndentString(10) == " " * 10
        self.stc.SetUseTabs(True)
        assert self.stc.GetIndentString(10) == "\t  "

    def testLinePrefixAndSuffix(self):
        stc = TextSTC("say 'x'\n")
        end = stc.addLinePrefixAndSuffix(0, 7, "/* ", " */")
        assert stc.GetText() == "/* say 'x' */\n"
        assert end == 13
        end = stc.removeLinePrefixAndSuffix(0, end, "/* ", " */")
        assert stc.GetText() == "say 'x'\n"
        assert end == 7

    def testRemoveOnlyMatching(self):
        stc = TextSTC("say 'x'")
        assert stc.removeLinePrefixAndSuffix(0, 7, "/* ", " */") == 7
        assert stc.GetText() == "say 'x'"

    def testStyling(self):
        stc = self.stc
        stc.StartStyling(3)
        stc.SetStyling(4, 2)
        assert stc.GetStyleAt(2) == 0
        assert stc.GetStyleAt(3) == 2
        assert stc.GetStyleAt(6) == 2
        assert stc.GetStyleAt(stc.GetLength()) == 0
        assert stc.GetEndStyled() == 7


class TestSTCProxy(object):
    def testDelegates(self):
        proxy = STCProxy(FakeControl())
        assert proxy.GetLineCount() == 3
        assert proxy.GetTabWidth() == 4

    def testInterfaceMethods(self):
        proxy = STCProxy(FakeControl())
        assert proxy.GetIndentString(10) == "\t\t  "

    def testLinesep(self):
        assert STCProxy(FakeControl(0)).getLinesep() == "\r\n"
        assert STCProxy(FakeControl(1)).getLinesep() == "\r"
        assert STCProxy(FakeControl(2)).getLinesep() == "\n"

    def testMissing(self):
        with pytest.raises(AttributeError):
            STCProxy(FakeControl()).NotAnSTCMethod()


class TestIterLinesBackward(object):
    def testOrder(self):
        stc = TextSTC("a\r\nb\nc")
        assert list(iterLinesBackward(stc, 2)) == [(1, "b"), (0, "a")]

    def testPastEnd(self):
        stc = TextSTC("a\nb")
        assert list(iterLinesBackward(stc, 10)) == [(1, "b"), (0, "a")]
        assert list(iterLinesBackward(stc, 0)) == []

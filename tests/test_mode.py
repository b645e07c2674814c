import os, sys, re

from rexxmode.mode import *
from rexxmode.lexer import Category

from stc_helpers import savePrefs, restorePrefs

import pytest


class TestRexxMode(object):
    def setup_method(self, method):
        self.saved = savePrefs()

    def teardown_method(self, method):
        restorePrefs(self.saved)

    def testVerifyFilename(self):
        assert RexxMode.verifyFilename("profile.rexx")
        assert RexxMode.verifyFilename("PROFILE.EXEC")
        assert RexxMode.verifyFilename("/tmp/dir.d/build.cmd")
        assert not RexxMode.verifyFilename("setup.py")
        assert not RexxMode.verifyFilename("README")

    def testExtensionsFromPrefs(self):
        RexxMode.classprefs.extensions = "rexx orx"
        assert RexxMode.verifyFilename("test.orx")
        assert not RexxMode.verifyFilename("test.exec")

    def testClassifyBuffer(self):
        mode = RexxMode("say 'hi' /* greet */")
        categories = [t.category for t in mode.classifyBuffer()]
        assert categories == [Category.KEYWORD, Category.PLAIN_TEXT, Category.STRING,
                              Category.PLAIN_TEXT, Category.COMMENT]

    def testColourise(self):
        mode = RexxMode("do\n  x = length(y)\nend\n")
        mode.colourise()
        text = mode.getText()
        assert mode.stc.GetStyleAt(text.index("do")) == Category.KEYWORD
        assert mode.stc.GetStyleAt(text.index("length")) == Category.BUILTIN

    def testPipelinesInStrings(self):
        text = "'PIPE < in | console'"
        mode = RexxMode(text)
        assert [t.category for t in mode.classifyBuffer()] == [Category.STRING]

        RexxMode.classprefs.pipelines_in_strings = True
        mode = RexxMode(text)
        categories = [t.category for t in mode.classifyBuffer()]
        assert Category.PIPE_OPERATOR in categories
        assert Category.PIPE_STAGE_NAME in categories

    def testReindentBuffer(self):
        mode = RexxMode("do i = 1 to 3\nsay i\nend\n")
        mode.reindentBuffer()
        assert mode.getText() == "do i = 1 to 3\n  say i\nend\n"

    def testIndentPrefs(self):
        RexxMode.classprefs.indent_size = 4
        mode = RexxMode("do\nx")
        mode.reindentBuffer()
        assert mode.getText() == "do\n    x"

        RexxMode.classprefs.use_tab_characters = True
        RexxMode.classprefs.tab_size = 4
        mode = RexxMode("do\nx")
        mode.reindentBuffer()
        assert mode.getText() == "do\n\tx"

    def testFindIndent(self):
        mode = RexxMode("select\nwhen a then\nx")
        assert mode.findIndent(1) == 0
        assert mode.findIndent(2) == 2

    def testReindentLine(self):
        mode = RexxMode("do\nx")
        mode.stc.GotoPos(4)
        assert mode.reindentLine(1) == 6
        assert mode.getText() == "do\n  x"
        assert mode.stc.GetCurrentPos() == 6

    def testProcessReturn(self):
        mode = RexxMode("do")
        mode.stc.GotoPos(2)
        mode.processReturn()
        assert mode.getText() == "do\n  "
        assert mode.stc.GetCurrentPos() == 5

    def testProcessTab(self):
        mode = RexxMode("do\nx")
        mode.stc.GotoPos(3)
        mode.processTab()
        assert mode.getText() == "do\n  x"
        assert mode.stc.GetCurrentPos() == 5

    def testRoutineList(self):
        mode = RexxMode("call main\nexit\nmain:\n  return\n")
        assert [(r.name, r.line) for r in mode.getRoutineList()] == [("main", 2)]

    def testCommentRegion(self):
        mode = RexxMode("say 'a'\nsay 'b'\nsay 'c'\n")
        mode.commentRegion(0, 1)
        assert mode.getText() == "/* say 'a' */\n/* say 'b' */\nsay 'c'\n"
        mode.commentRegion(0, 2, add=False)
        assert mode.getText() == "say 'a'\nsay 'b'\nsay 'c'\n"
        mode.commentRegion(2)
        assert mode.getText() == "say 'a'\nsay 'b'\n/* say 'c' */\n"

# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""wx.stc.StyledTextCtrl support

Hooks the REXX lexer and autoindenter into a StyledTextCtrl.  Scintilla has
no REXX lexer of its own, so the control is switched to the container lexer
and styles text on demand through EVT_STC_STYLENEEDED.  Requires wxPython.

Positions reported by Scintilla are byte offsets, which match the character
offsets used by the lexer only for text that is plain ASCII.
"""

import wx
import wx.stc

from rexxmode.debug import *
from rexxmode.lexer import Category, RexxLexer
from rexxmode.autoindent import RexxAutoindent
from rexxmode.stcinterface import STCProxy
from rexxmode.syntax import rexx


#: StyleSetSpec strings for each token category
style_specs = {
    'PLAIN_TEXT': "fore:#000000",
    'KEYWORD': "fore:#00007F,bold",
    'BUILTIN': "fore:#007F7F",
    'LABEL': "fore:#7F0000,bold",
    'NUMBER': "fore:#007F00",
    'COMMENT': "fore:#7F7F7F,italic",
    'STRING': "fore:#7F007F",
    'PIPE_OPERATOR': "fore:#FF0000,bold",
    'PIPE_STAGE_LABEL': "fore:#7F3F00",
    'PIPE_STAGE_NAME': "fore:#0000FF",
    'ADDRESS_TARGET': "fore:#3F3F7F,underline",
    }


class RexxSTCMixin(debugmixin):
    """Mixin for a StyledTextCtrl that edits REXX source.

    The class that uses the mixin must also inherit from
    wx.stc.StyledTextCtrl, and must call L{setupRexx} after the control has
    been created.
    """
    debuglevel = 0

    def setupRexx(self, lexer=None, autoindent=None):
        if lexer is None:
            lexer = RexxLexer()
        if autoindent is None:
            autoindent = RexxAutoindent()
        self.rexx_lexer = lexer
        self.rexx_autoindent = autoindent
        self.rexx_proxy = STCProxy(self)

        self.SetLexer(wx.stc.STC_LEX_CONTAINER)
        self.setupRexxStyles()
        self.Bind(wx.stc.EVT_STC_STYLENEEDED, self.OnStyleNeeded)
        self.Bind(wx.EVT_KEY_DOWN, self.OnRexxKeyDown)

    def setupRexxStyles(self):
        for name, editra_style in rexx.SYNTAX_ITEMS:
            style = getattr(Category, name)
            self.StyleSetSpec(style, style_specs[name])
            self.dprint("style %d (%s): %s" % (style, name, style_specs[name]))

    def OnStyleNeeded(self, evt):
        """Event handler for custom lexer

        """
        self.rexx_lexer.styleText(self, self.GetEndStyled(), evt.GetPosition())

    def OnRexxKeyDown(self, evt):
        key = evt.GetKeyCode()
        if evt.HasModifiers():
            evt.Skip()
        elif key == wx.WXK_TAB:
            self.rexx_autoindent.processTab(self.rexx_proxy)
        elif key in (wx.WXK_RETURN, wx.WXK_NUMPAD_ENTER):
            self.rexx_autoindent.processReturn(self.rexx_proxy)
        else:
            evt.Skip()


class RexxSTC(wx.stc.StyledTextCtrl, RexxSTCMixin):
    """StyledTextCtrl set up for REXX editing"""
    def __init__(self, parent, id=-1, lexer=None, autoindent=None, **kwargs):
        wx.stc.StyledTextCtrl.__init__(self, parent, id, **kwargs)
        self.setupRexx(lexer, autoindent)

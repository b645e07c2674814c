"""rexxmode - REXX and CMS Pipelines editing support for STC-style editors.

Syntax classification and autoindenting for the REXX scripting language and
the CMS Pipelines notation that is usually embedded in it.  The code is
independent of any particular editor: everything talks to the editor through
the small STC-shaped host adapter defined in L{rexxmode.stcinterface}, so it
can drive a wx.stc.StyledTextCtrl, an in-memory buffer, or a command line
filter equally well.

Classifier
==========

L{rexxmode.lexer} turns text into a contiguous sequence of tokens, each
tagged with one of the categories in L{rexxmode.lexer.Category}: keywords,
built-in functions, labels, numbers, comments, strings, and the pipeline
operator, stage label and stage name categories.  Block comments and strings
may cross line boundaries, so the lexer takes the lexical state that was
active at the start of the text and returns the state at its end.

Autoindenter
============

L{rexxmode.autoindent} computes the indentation of a line from the keywords
on the nearest line of code above it, in the same spirit as the regex
autoindenter that Anders Lund wrote for KDE's kate editor.

Preferences
===========

Preferences are class attributes, handled by L{rexxmode.lib.userparams}.
The user can override them with an INI-style configuration file in which the
section name is the class name, e.g.::

  [RexxMode]
  indent_size = 3
  pipelines_in_strings = yes
"""

# setup.py requires that these be defined, and the OnceAndOnlyOnce
# principle is used here.  This is the only place where these values
# are defined in the source distribution, and everything else that
# needs this should grab it from here.
__author__ = "Rob McMullen"
__author_email__ = "robm@users.sourceforge.net"
__url__ = "http://peppy.flipturn.org/"
__download_url__ = "http://peppy.flipturn.org/download.html"
__description__ = "REXX and CMS Pipelines syntax classification and autoindent"
__keywords__ = "text editor, rexx, cms pipelines, scintilla, syntax highlighting"
__license__ = "GPL"
__version__ = "0.9.0"

# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Routine index for REXX source

Internal routines in REXX are just labels that are the target of a C{call}
or a function invocation, so there's no syntax that marks the start of a
routine.  A label is taken to start a routine if nothing but a comment or a
C{procedure} instruction follows it on its line; labels used as C{signal}
targets in the middle of code, e.g. C{error: say 'failed'; exit 1}, are not
listed.
"""

import re

from rexxmode.lexer import LexState, classify
from rexxmode.autoindent import getCodeText
from rexxmode.syntax import rexx


_routine_re = re.compile(r"[ \t]*(?P<name>[A-Za-z_@#$!?][\w@#$!?.]*)[ \t]*:(?P<rest>.*)$", re.DOTALL)
_procedure_re = re.compile(r"\s*procedure\b", re.IGNORECASE)


class RoutineEntry(object):
    def __init__(self, name, line, end=-1, text=''):
        """Routine entry for an outline or navigation list.

        @param name: name of the routine, as written in the source
        @param line: line number of the label
        @param end: line number of the start of the next routine, or the
        number of lines in the source for the last routine
        @param text: text of the label's line
        """
        self.name = name
        self.line = line
        self.end = end
        self.text = text

    def __str__(self):
        return "%s s%d e%d" % (self.name, self.line, self.end)

    def __repr__(self):
        return "RoutineEntry(%r, %d)" % (self.name, self.line)

    def __eq__(self, other):
        return isinstance(other, RoutineEntry) and (self.name, self.line) == (other.name, other.line)

    def __hash__(self):
        return hash((self.name, self.line))


def getRoutineName(text):
    """Return the name of the routine declared on the line, or None.

    @param text: text of a line that starts outside of any comment or string
    """
    match = _routine_re.match(text.rstrip('\r\n'))
    if not match:
        return None
    name = match.group('name')
    if rexx.isKeyword(name):
        return None
    rest = getCodeText(match.group('rest'))
    if rest.strip() and not _procedure_re.match(rest):
        return None
    return name

def iterRoutines(lines):
    """Generator over the routines declared in the source.

    The end line of each entry is filled in when the following routine is
    found, so entries are generated one routine behind the scan.

    @param lines: iterable of the lines of the source
    @return: generator of L{RoutineEntry}s in source order
    """
    state = LexState.NORMAL
    entry = None
    linenum = -1
    for linenum, text in enumerate(lines):
        if state == LexState.NORMAL:
            name = getRoutineName(text)
            if name is not None:
                if entry is not None:
                    entry.end = linenum
                    yield entry
                entry = RoutineEntry(name, linenum, text=text.rstrip('\r\n'))
        tokens, state = classify(text, state)
    if entry is not None:
        entry.end = linenum + 1
        yield entry

def getRoutineList(stc):
    """Return the list of routines in the stc.

    @param stc: object providing the L{rexxmode.stcinterface.STCInterface}
    methods
    @return: list of L{RoutineEntry}s
    """
    lines = (stc.GetLine(i) for i in range(stc.GetLineCount()))
    return list(iterRoutines(lines))

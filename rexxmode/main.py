# rexxmode Copyright (c) 2006-2009 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Command line front end

Reindents, highlights, or lists the routines and tokens of REXX source
files, using the same code that an editor would.  Output goes to stdout;
errors go through the error log, which is stderr unless redirected.
"""

import os, sys
from optparse import OptionParser

from pygments import highlight
from pygments.formatters import TerminalFormatter

from rexxmode import __version__
import rexxmode.debug
from rexxmode.debug import *
from rexxmode.lib.userparams import *
from rexxmode.lexer import Category
from rexxmode.mode import RexxMode
from rexxmode.pygments_lexer import RexxPygmentsLexer


def getOptionParser():
    usage="usage: %prog [options] file [files...]"
    parser=OptionParser(usage=usage, version="%prog " + __version__)
    parser.add_option("--reindent", action="store_true", dest="reindent", default=False, help="Print the source reindented (the default if no other output is requested)")
    parser.add_option("--highlight", action="store_true", dest="highlight", default=False, help="Print the source with terminal colors")
    parser.add_option("--routines", action="store_true", dest="routines", default=False, help="List the routines declared in the source")
    parser.add_option("--tokens", action="store_true", dest="tokens", default=False, help="Dump the token list of the source")
    parser.add_option("-i", "--indent", action="store", type="int", dest="indent", default=None, help="Number of spaces in each indent level")
    parser.add_option("-c", "--config", action="store", dest="config", default="", help="Read preferences from this configuration file")
    parser.add_option("--show-config", action="store_true", dest="show_config", default=False, help="Print the effective configuration and exit")
    parser.add_option("-l", "--log", action="store", dest="logfile", default="", help="Send debug and error messages to this file instead of stderr")
    parser.add_option("-v", action="count", dest="verbose", default=0, help="Increase verbosity level.  -vv lots, -vvv insane")
    return parser

def setVerbosity(level):
    """Set the debuglevel of every class that uses the debugmixin"""
    debuggable=getAllSubclassesOf(debugmixin)
    debuggable.sort(key=lambda s:s.__name__)
    for kls in debuggable:
        kls.debuglevel=level

def loadConfig(filename):
    """Read the user configuration file into the class preferences.

    @return: True if the file was read
    """
    try:
        fh = open(filename)
    except (IOError, OSError) as e:
        eprint("Can't read configuration file %s: %s" % (filename, e))
        return False
    with fh:
        GlobalPrefs.readConfig(fh)
    GlobalPrefs.convertConfig()
    return True

def readSource(filename):
    if filename == '-':
        return sys.stdin.read()
    with open(filename) as fh:
        return fh.read()

def printTokens(mode, out):
    text = mode.getText()
    for start, end, category in mode.classifyBuffer():
        out.write("%d-%d %s %r%s" % (start, end, Category.getName(category), text[start:end], os.linesep))

def printRoutines(mode, out):
    for routine in mode.getRoutineList():
        out.write("%d: %s%s" % (routine.line + 1, routine.name, os.linesep))

def printHighlighted(mode, out):
    lexer = RexxPygmentsLexer(pipelines_in_strings=RexxMode.classprefs.pipelines_in_strings)
    out.write(highlight(mode.getText(), lexer, TerminalFormatter()))

def printReindented(mode, out):
    mode.reindentBuffer()
    out.write(mode.getText())

def processFile(filename, options, out, header=False):
    """Run the requested operations on a single file.

    @return: True if the file was processed
    """
    try:
        text = readSource(filename)
    except (IOError, OSError, UnicodeDecodeError) as e:
        eprint("Can't read %s: %s" % (filename, e))
        return False

    mode = RexxMode(text)
    if header:
        out.write("==> %s <==%s" % (filename, os.linesep))
    if options.tokens:
        printTokens(mode, out)
    if options.routines:
        printRoutines(mode, out)
    if options.highlight:
        printHighlighted(mode, out)
    if options.reindent or not (options.tokens or options.routines or options.highlight):
        printReindented(mode, out)
    return True

def main(argv=None, out=None):
    """Main entry point for the command line tool.

    @param argv: argument list not including the program name, or None to
    use sys.argv
    @param out: file-like object for the output, or None for stdout
    @return: exit status
    """
    if argv is None:
        argv = sys.argv[1:]
    if out is None:
        out = sys.stdout

    parser = getOptionParser()
    options, args = parser.parse_args(argv)
    if not options.logfile:
        return run(parser, options, args, out)

    saved = (rexxmode.debug.dlogfh, rexxmode.debug.elogfh)
    fh = open(options.logfile, "w")
    debuglog(fh)
    errorlog(fh)
    try:
        return run(parser, options, args, out)
    finally:
        debuglog(saved[0])
        errorlog(saved[1])
        fh.close()

def run(parser, options, args, out):
    """Process the files named on the command line

    @return: exit status
    """
    setVerbosity(options.verbose)

    if options.config and not loadConfig(options.config):
        return 1
    if options.indent is not None:
        if options.indent < 1:
            parser.error("indent must be a positive number")
        RexxMode.classprefs.indent_size = options.indent

    if options.show_config:
        out.write(GlobalPrefs.configToText())
        out.write(os.linesep)
        return 0

    if not args:
        args = ['-']
    status = 0
    for filename in args:
        if not processFile(filename, options, out, header=len(args) > 1):
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())

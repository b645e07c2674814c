###############################################################################
# Name: rexx.py                                                               #
# Purpose: Define REXX and CMS Pipelines syntax for highlighting              #
# Author: Rob McMullen                                                        #
# Copyright: (c) 2009 Rob McMullen                                            #
# Licence: wxWindows Licence                                                  #
###############################################################################

"""
#-----------------------------------------------------------------------------#
# FILE: rexx.py                                                               #
#                                                                             #
# SUMMARY:                                                                    #
# Vocabulary tables for classic (TSO/CMS) REXX, the Object REXX additions     #
# that show up in the same source files, and the CMS Pipelines stage names.   #
# All words are stored lowercase; REXX is case-insensitive so callers must    #
# lowercase a word before looking it up, or use the is* helpers below.        #
#                                                                             #
#-----------------------------------------------------------------------------#
"""

#---- Keyword Specifications ----#

# Instructions and the sub-keywords that are only meaningful inside them
REXX_KEYWORDS = (0, "address arg by call digits do drop else end engineering "
                    "error exit expose failure for forever form forward fuzz "
                    "halt if interpret iterate leave loop lostdigits name nop "
                    "notready novalue numeric off on options otherwise parse "
                    "procedure pull push queue return say scientific select "
                    "signal source syntax then to trace until upper value var "
                    "version when while with")

# Object REXX instructions that classic interpreters treat as plain symbols
OOREXX_KEYWORDS = (1, "class guard method raise reply requires routine use")

REXX_BUILTINS = (2, "abbrev abs addr b2c b2x bitand bitor bitxor c2b c2d c2x "
                    "center centre changestr charin charout chars cmsflag "
                    "compare condition copies countstr d2c d2x datatype date "
                    "delstr delword diag diagrc errortext externals find form "
                    "format index insert justify lastpos left length linein "
                    "lineout lines linesize max min overlay pos queued random "
                    "reverse right sign sourceline space storage stream strip "
                    "substr subword symbol time translate trunc userid verify "
                    "word wordindex wordlength wordpos words x2b x2c x2d "
                    "xrange")

PIPE_STAGES = (3, "< > >> >mdsk abbrev addpipe addrdw aggrc all append asatomc "
                  "asmcont asmfind asmnfind asmxpnd beat between block "
                  "buffer casei change chop cipher cms collate combine "
                  "command configure console copy count cp dam deal deblock "
                  "delay diskback diskfast diskr diskrandom diskslow "
                  "diskupdate diskw diskwrite drop duplicate elastic emsg "
                  "eofback escape fanin faninany fanintwo fanout fanoutwo "
                  "fblock fillup filetoken find fmtfst frlabel frtarget "
                  "gate gather getfiles help hfs hfsdirectory hfsquery "
                  "hfsreplace hfsstate hole hostbyaddr hostbyname hostid "
                  "hostname immcmd insert inside instore ip2socka iebcopy "
                  "join joincont juxtapose ldrtbls listcat listdsi literal "
                  "locate lookup maclib mapmdisk mctoasa mdiskblk mdsk "
                  "merge mqsc nfind nlocate noeofback not notinside nucext "
                  "outside outstore overlay overstr pack pad parcel pdsdirect "
                  "pick pipcmd pipestop polish predselect preface qsam "
                  "qpdecode qpencode query random readpds reader retab "
                  "reverse rexx rexxvars runpipe scm sec2greg sfsback sfsdirectory "
                  "sfsrandom sfsupdate snake sort space specs spill split "
                  "spool sql sqlcodes sqlselect stack starmon starmsg "
                  "starsys state stem stfle storage strasmfind strasmnfind "
                  "strfind strfrlabel strip strliteral strnfind strtolabel "
                  "strwhilelabel subcom synchronise synchronize sysdsn "
                  "sysout sysvar tackle take tcpclient tcpdata tcplisten "
                  "testpipe timestamp tolabel tokenize totarget trackblock "
                  "trackdeblock trackread trackverify trackwrite trfread "
                  "trfsend trfsendall udp unique unpack untab update "
                  "urldeblock utf var vardrop varfetch varload varset "
                  "vchar verify vmc vmclient vmclisten whilelabel wildcard "
                  "writepds xab xedit xlate xmsg xpndhi xrange zone")

#---- Lookup tables ----#

def _words(spec):
    return frozenset(spec[1].lower().split())

KEYWORDS = _words(REXX_KEYWORDS) | _words(OOREXX_KEYWORDS)
BUILTINS = _words(REXX_BUILTINS)
STAGE_NAMES = _words(PIPE_STAGES)

# Keywords that open a block whose body is indented one level
BLOCK_OPENERS = frozenset(["do", "loop", "select", "then"])
# Keywords that close the innermost block
BLOCK_CLOSERS = frozenset(["end"])
# Keywords that sit at the level of the enclosing select
BLOCK_MIDDLES = frozenset(["when", "otherwise"])

def isKeyword(word):
    """Returns True if the word is a reserved word, in any case"""
    return word.lower() in KEYWORDS

def isBuiltin(word):
    """Returns True if the word names a built-in function, in any case"""
    return word.lower() in BUILTINS

def isStageName(word):
    """Returns True if the word names a CMS Pipelines stage, in any case"""
    return word.lower() in STAGE_NAMES

#---- Language Styling Specs ----#
SYNTAX_ITEMS = [ ('PLAIN_TEXT', "default_style"),
                 ('KEYWORD', "keyword_style"),
                 ('BUILTIN', "funct_style"),
                 ('LABEL', "class_style"),
                 ('NUMBER', "number_style"),
                 ('COMMENT', "comment_style"),
                 ('STRING', "string_style"),
                 ('PIPE_OPERATOR', "operator_style"),
                 ('PIPE_STAGE_LABEL', "class2_style"),
                 ('PIPE_STAGE_NAME', "keyword2_style"),
                 ('ADDRESS_TARGET', "scalar_style") ]

#-----------------------------------------------------------------------------#

#---- Required Module Functions ----#
def SyntaxSpec(lang_id=0):
    """Syntax Specifications
    @param lang_id: used for selecting a specific subset of syntax specs

    """
    return SYNTAX_ITEMS

#---- End Required Functions ----#

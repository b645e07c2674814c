#-----------------------------------------------------------------------------
# Name:        userparams.py
# Purpose:     class attribute preferences and serialization
#
# Author:      Rob McMullen
#
# Created:     2007
# RCS-ID:      $Id: $
# Copyright:   (c) 2007 Rob McMullen
# License:     wxWidgets
#-----------------------------------------------------------------------------
"""Helpers to create user preferences for class attribute defaults.

This module is used to create preferences that can be easily saved to
configuration files.  It is designed to be class-based, not instance
based.

Classes need to inherit from ClassPrefs and then define a class
attribute called default_classprefs that is a tuple of Param objects.
Subclasses will inherit the preferences of their parent classes, and
can either redefine the defaults or add new parameters.  For example:

  class Indenter(ClassPrefs):
      default_classprefs = (
          IntParam('indent_size', 4, 'Columns per indent level'),
          BoolParam('use_tab_characters', False, 'Indent with tabs?'),
          )

  class RexxIndenter(Indenter):
      default_classprefs = (
          IntParam('indent_size', 2),
          StrParam('comment_start', '/* '),
          )

The metaclass for ClassPrefs processes the default_classprefs and adds
another class attribute called classprefs that is a proxy object into
a global preferences object.

The global preferences object GlobalPrefs uses the configparser module
to unserialize user preferences.  Since the user preferences are stored
in text files, the Param objects turn the user text into the expected
type of the Param so that your python code only has to deal with the
expected type and doesn't have to do any conversion itself.

The user configuration for the above example could look like this:

  [Indenter]
  use_tab_characters = yes

  [RexxIndenter]
  indent_size = 3

and the GlobalPrefs.readConfig method will parse the file,
interpreting the section name as the class.  It will set
RexxIndenter.classprefs.indent_size to the integer value 3, and
RexxIndenter.classprefs.use_tab_characters will find the boolean True
by searching up the class hierarchy.
"""

import os, copy
from configparser import ConfigParser

from rexxmode.debug import *


__all__ = ['Param', 'BoolParam', 'IntParam', 'StrParam', 'GlobalPrefs',
           'PrefsProxy', 'ClassPrefs', 'getClassHierarchy', 'getAllSubclassesOf']


class Param(debugmixin):
    """Generic param interface.

    Param objects follow the lifetime of the class, and so are not
    typically destroyed until the end of the program.  That also means
    that they operate as flyweight objects with their state stored
    extrinsically in L{GlobalPrefs}.

    It's important to understand the two representations of the param.
    What I call "text" is the textual representation that is stored in
    the user configuration file, and what I call "value" is the result
    of the conversion into the correct python type.  The value is what
    the python code operates on, and doesn't need to know anything about
    the textual representation.  These conversions are handled by the
    textToValue and valueToText methods.

    The default Param is a string param, and no restriction on the
    value of the string is imposed.
    """

    # class default to be used as the instance default if no other
    # default is provided.
    default = None

    def __init__(self, keyword, default=None, help='', save_to_file=True):
        self.keyword = keyword
        if default is not None:
            self.default = default
        self.help = help
        self.save_to_file = save_to_file

    def __str__(self):
        return "keyword=%s, default=%s, help=%s" % (self.keyword,
        self.default, self.help)

    def textToValue(self, text):
        """Convert the user's config text to the type expected by the
        python code.

        Subclasses should return the type expected by the user code.
        """
        # The default implementation just returns a string with any
        # delimiting quotation marks removed.
        if text.startswith("'") or text.startswith('"'):
            text = text[1:]
        if text.endswith("'") or text.endswith('"'):
            text = text[:-1]
        return text

    def valueToText(self, value):
        """Convert the user value to a string suitable to be written
        to the config file.

        Subclasses should convert the value to a string that is
        acceptable to textToValue.
        """
        # The default string implementation adds quotation characters
        # to the string.
        if isinstance(value, str):
            value = '"%s"' % value
        return value


class BoolParam(Param):
    """Boolean parameter.

    Text uses one of 'yes', 'true', or '1' to represent the bool True,
    and anything else to represent False.
    """
    default = False

    yes_values = ["yes", "true", "1", "on"]
    no_values = ["no", "false", "0", "off"]

    def textToValue(self, text):
        """Return True if one of the yes values, otherwise False"""
        text = Param.textToValue(self, text).lower()
        if text in self.yes_values:
            return True
        return False

    def valueToText(self, value):
        """Convert the boolean value to a string"""
        if value:
            return self.yes_values[0]
        return self.no_values[0]


class IntParam(Param):
    """Int parameter.

    The text is converted through float first so that values like '4.0'
    in a hand-edited config file are still accepted, then cast to an
    integer.
    """
    default = 0

    def textToValue(self, text):
        text = Param.textToValue(self, text)
        tmp = float(text)
        val = int(tmp)
        return val

    def valueToText(self, value):
        return str(value)


class StrParam(Param):
    """String parameter.

    This is an alias to the Param class.
    """
    default = ""


parentclasses={}
skipclasses=['debugmixin','ClassPrefs','object']

def getClassHierarchy(klass,debug=0):
    """Get class hierarchy of a class using global class cache.

    If the class has already been seen, it will be pulled from the
    cache and the results will be immediately returned.  If not, the
    hierarchy is generated, stored for future reference, and returned.

    @param klass: class of interest
    @returns: list of parent classes
    """
    if klass in parentclasses:
        hierarchy=parentclasses[klass]
        if debug: dprint("Found class hierarchy: %s" % hierarchy)
    else:
        hierarchy=[k for k in klass.__mro__ if k.__name__ not in skipclasses and not k.__module__.startswith('wx.')]
        if debug: dprint("Created class hierarchy: %s" % hierarchy)
        parentclasses[klass]=hierarchy
    return hierarchy

class GlobalPrefs(debugmixin):
    debuglevel = 0

    default={}
    params = {}
    seen = {} # has the default_classprefs been seen for the class?
    convert_already_seen = {}

    # configuration has been loaded from text for this class, but not
    # converted yet.
    needs_conversion = {}

    user={}
    name_hierarchy={}

    @classmethod
    def addHierarchy(cls, leaf, namehier):
        if leaf not in cls.name_hierarchy:
            cls.name_hierarchy[leaf]=namehier

    @classmethod
    def setupHierarchyDefaults(cls, klasshier):
        for klass in klasshier:
            if klass.__name__ not in cls.default:
                defs={}
                params = {}
                if hasattr(klass,'default_classprefs'):
                    cls.seen[klass.__name__] = True
                    for p in klass.default_classprefs:
                        defs[p.keyword] = p.default
                        params[p.keyword] = p
                cls.default[klass.__name__]=defs
                cls.params[klass.__name__] = params
            else:
                # we've loaded application-specified defaults for this
                # class before, but haven't actually checked the
                # class.  Merge them in without overwriting the
                # existing prefs.
                if hasattr(klass,'default_classprefs'):
                    cls.seen[klass.__name__] = True
                    gd = cls.default[klass.__name__]
                    gp = cls.params[klass.__name__]
                    for p in klass.default_classprefs:
                        if p.keyword not in gd:
                            gd[p.keyword] = p.default
                        if p.keyword not in gp:
                            gp[p.keyword] = p

            if klass.__name__ not in cls.user:
                cls.user[klass.__name__]={}
        if cls.debuglevel > 1: dprint("default: %s" % cls.default)
        if cls.debuglevel > 1: dprint("user: %s" % cls.user)

    @classmethod
    def findParam(cls, section, option):
        params = cls.params
        param = None
        if section in params and option in params[section]:
            param = params[section][option]
        elif section in cls.name_hierarchy:
            # Need to march up the class hierarchy to find the correct
            # Param
            klasses=cls.name_hierarchy[section]
            for name in klasses[1:]:
                if name in params and option in params[name]:
                    param = params[name][option]
                    break
        else:
            dprint("Unknown configuration %s[%s]" % (section, option))
            return None
        if cls.debuglevel > 0 and param is not None: dprint("Found %s for %s in class %s" % (param.__class__.__name__, option, section))
        return param

    @classmethod
    def readConfig(cls, fh):
        cfg=ConfigParser(interpolation=None)
        cfg.optionxform=str
        cfg.read_file(fh)
        for section in cfg.sections():
            cls.needs_conversion[section] = True
            cls.convert_already_seen.pop(section, None)
            d={}
            for option, text in cfg.items(section):
                # NOTE! text will be converted later, after all
                # classes are loaded and we know what type each
                # parameter is supposed to be
                d[option]=text
            if section in cls.user:
                cls.user[section].update(d)
            else:
                cls.user[section]=d

    @classmethod
    def convertSection(cls, section):
        if section not in cls.params or section in cls.convert_already_seen or section not in cls.seen:
            # Don't process values before the param definition for
            # the class is loaded.  Copy the existing text values
            # and defer the conversion till the next time
            # convertConfig is called.
            if cls.debuglevel > 0:
                if section not in cls.params:
                    dprint("haven't loaded class %s" % section)
                elif section in cls.convert_already_seen:
                    dprint("already converted class %s" % section)
                elif section not in cls.seen:
                    dprint("only defaults loaded, haven't loaded Params for class %s" % section)
            return

        cls.convert_already_seen[section] = True
        if section in cls.needs_conversion:
            options = cls.user[section]
            d = {}
            for option, text in options.items():
                param = cls.findParam(section, option)
                try:
                    if param is not None and isinstance(text, str):
                        val = param.textToValue(text)
                        if cls.debuglevel > 0: dprint("Converted %s to %s(%s) for %s[%s]" % (text, val, type(val), section, option))
                    else:
                        val = text
                    d[option] = val
                except ValueError as e:
                    eprint("Error converting %s in section %s: %s" % (option, section, str(e)))
            cls.user[section] = d
            del cls.needs_conversion[section]

    @classmethod
    def convertConfig(cls):
        if cls.debuglevel > 0: dprint("before: %s" % cls.user)
        sections = list(cls.user.keys())
        for section in sections:
            cls.convertSection(section)
        if cls.debuglevel > 0: dprint("after: %s" % cls.user)

    @classmethod
    def configToText(cls):
        """Return the effective configuration in the same INI format that
        L{readConfig} accepts.

        Every class that has declared default_classprefs gets a section
        listing all of its settable params, with user values taking
        precedence over the defaults.
        """
        cls.convertConfig()
        lines = []
        for section in sorted(cls.seen.keys()):
            values = dict(cls.default.get(section, {}))
            values.update(cls.user.get(section, {}))
            printed_section = False # flag to indicate if need to print header
            for option in sorted(values.keys()):
                param = cls.findParam(section, option)
                if param is not None and not param.save_to_file:
                    continue
                if not printed_section:
                    lines.append("[%s]" % section)
                    printed_section = True
                if param is None:
                    lines.append("%s = %s" % (option, values[option]))
                else:
                    lines.append("%s = %s" % (option, param.valueToText(values[option])))
            if printed_section:
                lines.append("")
        text = os.linesep.join(lines)
        if cls.debuglevel > 0: dprint(text)
        return text


class PrefsProxy(debugmixin):
    """Dictionary-like object to provide global prefs to a class.

    Implements a dictionary that returns a value for a keyword based
    on the class hierarchy.  Each class will define a group of
    prefs and default values for each of those prefs.  The class
    hierarchy then defines the search order if a setting is not found
    in a child class -- the search proceeds up the class hierarchy
    looking for the desired keyword.
    """
    debuglevel=0

    def __init__(self,hier):
        names=[k.__name__ for k in hier]
        self.__dict__['_startSearch']=names[0]
        GlobalPrefs.addHierarchy(names[0], names)
        GlobalPrefs.setupHierarchyDefaults(hier)

    def __getattr__(self,name):
        if name.startswith('__'):
            raise AttributeError(name)
        return self._get(name)

    def __call__(self, name):
        return self._get(name)

    def _get(self, name, user=True, default=True):
        klasses=GlobalPrefs.name_hierarchy[self.__dict__['_startSearch']]
        if user:
            for klass in klasses:
                d=GlobalPrefs.user
                if klass in d and name in d[klass]:
                    if klass not in GlobalPrefs.convert_already_seen:
                        self.dprint("warning: GlobalPrefs[%s] not converted yet." % klass)
                        GlobalPrefs.convertSection(klass)
                        d = GlobalPrefs.user
                    # conversion drops values that can't be converted
                    if name in d[klass]:
                        return d[klass][name]
        if default:
            d=GlobalPrefs.default
            for klass in klasses:
                if klass in d and name in d[klass]:
                    return d[klass][name]
        raise AttributeError("%s not found in %s.classprefs" % (name, self.__dict__['_startSearch']))

    def __setattr__(self,name,value):
        GlobalPrefs.user[self.__dict__['_startSearch']][name]=value


class ClassPrefsMetaClass(type):
    def __init__(cls, name, bases, attributes):
        """Add prefs attribute to class attributes.

        All classes of the created type will point to the same
        prefs object.  Perhaps that's a 'duh', since prefs is a
        class attribute, but it is worth the reminder.  Everything
        accessed through self.prefs changes the class prefs.
        """
        super(ClassPrefsMetaClass, cls).__init__(name, bases, attributes)
        expanded = [cls]
        for base in bases:
            expanded.extend(getClassHierarchy(base))
        # Add the prefs class attribute
        cls.classprefs = PrefsProxy(expanded)


class ClassPrefs(object, metaclass=ClassPrefsMetaClass):
    """Base class to extend in order to support class prefs.

    Uses the L{ClassPrefsMetaClass} to provide automatic support
    for the prefs class attribute.
    """


def getAllSubclassesOf(parent=debugmixin, subclassof=None):
    """
    Recursive call to get all classes that have a specified class
    in their ancestry.  The call to __subclasses__ only finds the
    direct, child subclasses of an object, so to find
    grandchildren and objects further down the tree, we have to go
    recursively down each subclasses hierarchy to see if the
    subclasses are of the type we want.

    @param parent: class used to find subclasses
    @type parent: class
    @param subclassof: class used to verify type during recursive calls
    @type subclassof: class
    @returns: list of classes
    """
    if subclassof is None:
        subclassof=parent
    subclasses={}

    # this call only returns immediate (child) subclasses, not
    # grandchild subclasses where there is an intermediate class
    # between the two.
    classes=parent.__subclasses__()
    for kls in classes:
        if issubclass(kls,subclassof):
            subclasses[kls] = 1
        # for each subclass, recurse through its subclasses to
        # make sure we're not missing any descendants.
        for sub in getAllSubclassesOf(parent=kls):
            subclasses[sub] = 1
    return list(subclasses.keys())

#!/usr/bin/env python

# Relatively generic setup.py that should be easily tailorable to
# other python modules.  It gets most of the parameters from the
# packaged module itself, so this file shouldn't have to be changed
# much.

import os, sys
from setuptools import setup

if sys.version_info < (3, 6):
    raise SystemExit('Sorry, rexxmode requires at least Python 3.6.')

# Load the root module that contains the version info and descriptive text
prog = 'rexxmode'
module = __import__(prog)

version = module.__version__


# Find the long description based on the doc string of the root module
def findLongDescription():
    # skip the opening one-line description and grab the first paragraph
    # out of the module's docstring to use as the long description.
    long_description = ''
    lines = module.__doc__.splitlines()
    for firstline in range(len(lines)):
        # skip until we reach a blank line
        if len(lines[firstline])==0 or lines[firstline].isspace():
            break
    if firstline<len(lines):
        firstline+=1
    for lastline in range(firstline,len(lines)):
        # stop when we reach a blank line
        if len(lines[lastline])==0 or lines[lastline].isspace():
            break
    return " ".join(lines[firstline:lastline])
long_description = findLongDescription()


# Determine the list of pure-python packages
def findPackages(name):
    packages = []
    # find packages to be installed
    path = os.path.abspath(name)
    for dirname, subdirs, names in os.walk(path):
        if '__init__.py' in names:
            prefix = os.path.commonprefix((path, dirname))
            mod = "%s%s" % (name, dirname[len(prefix):].replace(os.sep,'.'))
            if mod not in packages:
                packages.append(mod)
    return packages
packages = findPackages(prog)


setup(name = prog,
      version = version,
      description = module.__description__,
      long_description = long_description,
      keywords = module.__keywords__,
      license = module.__license__,
      author = module.__author__,
      author_email = module.__author_email__,
      url = module.__url__,
      download_url = module.__download_url__,
      platforms = 'any',
      zip_safe = False,
      packages = packages,
      python_requires = '>=3.6',
      install_requires = ['pygments'],
      extras_require = {
          'wx': ['wxPython'],
          'test': ['pytest'],
          },
      entry_points = {
          'console_scripts': ['rexxmode = rexxmode.main:main'],
          'pygments.lexers': ['rexx = rexxmode.pygments_lexer:RexxPygmentsLexer'],
          },
      classifiers=['Development Status :: 3 - Alpha',
                   'Intended Audience :: Developers',
                   'License :: OSI Approved :: GNU General Public License (GPL)',
                   'Operating System :: OS Independent',
                   'Programming Language :: Python',
                   'Programming Language :: Python :: 3',
                   'Topic :: Software Development :: Libraries :: Python Modules',
                   'Topic :: Text Editors',
                   ]
      )

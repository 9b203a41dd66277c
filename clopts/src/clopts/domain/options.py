# This file is part of clopts (command line options), a library for parsing command line arguments.
# Copyright 2018 Patrick Plagwitz
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from clopts.domain.option import Option

def stripLeadingHyphens(name):
  if name.startswith("--"):
    return name[2:]
  if name.startswith("-"):
    return name[1:]
  return name

class Options(object):
  """Catalog of the options and option groups known to a parse.

  Options are indexed by their key (short name, else long name) and by long
  name. Parsing never modifies a catalog.
  """
  def __init__(self):
    self._shortOpts = dict()
    self._longOpts = dict()
    self._requiredOpts = []
    self._groups = []
    self._keysToGroups = dict()

  def addOption(self, optionOrShortName, longName=None, hasArg=False,
      description=""):
    option = optionOrShortName
    if not isinstance(option, Option):
      option = Option(optionOrShortName, longName,
          argCount=1 if hasArg else 0, description=description)

    key = option.key
    if option.hasLongName:
      self._longOpts[option.longName] = option

    if key in self._requiredOpts:
      self._requiredOpts.remove(key)
    if option.required:
      self._requiredOpts.append(key)

    self._shortOpts[key] = option
    return self

  def addOptionGroup(self, group):
    if group.required:
      self._requiredOpts.append(group)

    for option in group.options:
      self.addOption(option.withRequired(False))
      self._keysToGroups[option.key] = group

    if not any(existing is group for existing in self._groups):
      self._groups.append(group)
    return self

  def helpOptions(self):
    return list(self._shortOpts.values())

  def getOptionGroups(self):
    return list(self._groups)

  def getRequiredOptions(self):
    return list(self._requiredOpts)

  def getOption(self, name):
    name = stripLeadingHyphens(name)
    if name in self._shortOpts:
      return self._shortOpts[name]
    return self._longOpts.get(name, None)

  def hasOption(self, name):
    return self.getOption(name) is not None

  def getMatchingOptions(self, prefix):
    prefix = stripLeadingHyphens(prefix)
    return [longName for longName in self._longOpts if
        longName.startswith(prefix)]

  def getOptionGroup(self, option):
    return self._keysToGroups.get(option.key, None)

  def __len__(self):
    return len(self._shortOpts)

  def __repr__(self):
    return "Options{0}".format((self.helpOptions(), self._groups))

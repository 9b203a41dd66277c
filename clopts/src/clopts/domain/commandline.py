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

from clopts.infrastructure.caseclassequalityhashcode import \
    CaseClassEqualityHashCode
from clopts.domain.options import stripLeadingHyphens

class ParsedOption(CaseClassEqualityHashCode):
  """One occurrence of an option on a command line and the values it got."""
  def __init__(self, option, values=None):
    self.option = option
    self.values = [] if values is None else list(values)

  @property
  def isFull(self):
    return not self.option.acceptsValues(len(self.values))

  def addValueForProcessing(self, value):
    if not self.option.hasArg:
      raise Exception("option ‘{0}’ takes no values".format(self.option.key))

    if self.option.hasValueSeparator:
      separator = self.option.valueSeparator
      index = value.find(separator)
      # the last free slot takes the unsplit rest
      while index != -1 and self.option.acceptsValues(len(self.values) + 1):
        self._add(value[:index])
        value = value[index + 1:]
        index = value.find(separator)

    self._add(value)

  def _add(self, value):
    if self.isFull:
      raise Exception("cannot add value ‘{0}’ to option ‘{1}’, list full".format(
          value, self.option.key))
    self.values.append(value)

  def isNamed(self, name):
    return name in [self.option.shortName, self.option.longName]

  def __repr__(self):
    return "ParsedOption{0}".format((self.option, self.values))

class CommandLine(CaseClassEqualityHashCode):
  _identityAttributes = ("parsedOptions", "positionalArgs")

  def __init__(self, parsedOptions=[], positionalArgs=[], selections=dict()):
    self.parsedOptions = list(parsedOptions)
    self.positionalArgs = list(positionalArgs)
    self._selections = dict(selections)

  def _entriesNamed(self, name):
    name = stripLeadingHyphens(name)
    return [entry for entry in self.parsedOptions if entry.isNamed(name)]

  def hasOption(self, name):
    return len(self._entriesNamed(name)) > 0

  def getValues(self, name):
    ret = [value for entry in self._entriesNamed(name) for value in
        entry.values]
    return ret if len(ret) > 0 else None

  def getValue(self, name, default=None):
    values = self.getValues(name)
    return default if values is None else values[0]

  def getValuesAsMap(self, name):
    ret = dict()
    for entry in self._entriesNamed(name):
      values = entry.values
      for i in range(0, len(values), 2):
        ret[values[i]] = values[i + 1] if i + 1 < len(values) else "true"
    return ret

  def getPositionalArgs(self):
    return list(self.positionalArgs)

  def getOptions(self):
    return list(self.parsedOptions)

  def getSelected(self, group):
    return self._selections.get(group, None)

  def __iter__(self):
    return iter(self.parsedOptions)

  def __repr__(self):
    return "CommandLine{0}".format((self.parsedOptions, self.positionalArgs))

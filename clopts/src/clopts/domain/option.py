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

import copy
from clopts.infrastructure.caseclassequalityhashcode import \
    CaseClassEqualityHashCode
from clopts.domain.exceptions import InvalidOptionNameException

Unlimited = -2

def validateOptionName(name):
  if name is None:
    return
  if len(name) == 0:
    raise InvalidOptionNameException(name, "is empty")
  if name.startswith("-"):
    raise InvalidOptionNameException(name, "starts with a hyphen")
  if "=" in name:
    raise InvalidOptionNameException(name, "contains ‘=’")
  for c in name:
    if c.isspace() or not c.isprintable():
      raise InvalidOptionNameException(name,
          "contains whitespace or an unprintable character")

class Option(CaseClassEqualityHashCode):
  """Description of one recognized switch.

  `argCount` is 0 for flags, a positive number for a fixed maximum of values,
  or `Unlimited`. Options are compared by their names only.
  """
  _identityAttributes = ("shortName", "longName")

  def __init__(self, shortName=None, longName=None, argCount=0, required=False,
      optionalArg=False, valueSeparator=None, argName="arg", description=""):
    if shortName is None and longName is None:
      raise InvalidOptionNameException(None,
          "missing: an option needs a short or a long name")
    validateOptionName(shortName)
    validateOptionName(longName)
    if valueSeparator is not None and len(valueSeparator) != 1:
      raise ValueError("value separator must be a single character, got " +
          repr(valueSeparator))
    if argCount < 0 and argCount != Unlimited:
      raise ValueError("invalid number of arguments: {0}".format(argCount))

    self.shortName = shortName
    self.longName = longName
    self.argCount = argCount
    self.required = required
    self.optionalArg = optionalArg
    self.valueSeparator = valueSeparator
    self.argName = argName
    self.description = description

  @property
  def key(self):
    return self.shortName if self.shortName is not None else self.longName

  @property
  def hasLongName(self):
    return self.longName is not None

  @property
  def hasArg(self):
    return self.argCount > 0 or self.argCount == Unlimited

  @property
  def hasArgs(self):
    return self.argCount > 1 or self.argCount == Unlimited

  @property
  def hasValueSeparator(self):
    return self.valueSeparator is not None

  def acceptsValues(self, numberOfValues):
    return self.argCount == Unlimited or numberOfValues < self.argCount

  def withRequired(self, required):
    ret = copy.copy(self)
    ret.required = required
    return ret

  def __str__(self):
    return "-" + self.shortName if self.shortName is not None else \
        "--" + self.longName

  def __repr__(self):
    return "Option{0}".format((self.shortName, self.longName, self.argCount))

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

from clopts.domain.option import Option, Unlimited

class OptionBuilder(object):
  """Describes an option step by step.

  Every method returns a new builder; a builder can be used as a template for
  any number of options:

    fileOpt = OptionBuilder().hasArg().withArgName("file")
    options.addOption(fileOpt.withLongOpt("input").create("i"))
    options.addOption(fileOpt.withLongOpt("output").create("o"))
  """
  def __init__(self, longName=None, description="", argName="arg",
      required=False, argCount=0, optionalArg=False, valueSeparator=None):
    self.longName = longName
    self.description = description
    self.argName = argName
    self.required = required
    self.argCount = argCount
    self.optionalArg = optionalArg
    self.valueSeparator = valueSeparator

  def _with(self, **changes):
    attributes = dict(vars(self))
    attributes.update(changes)
    return OptionBuilder(**attributes)

  def withLongOpt(self, longName):
    return self._with(longName=longName)
  def withDescription(self, description):
    return self._with(description=description)
  def withArgName(self, argName):
    return self._with(argName=argName)
  def withValueSeparator(self, separator="="):
    return self._with(valueSeparator=separator)

  def isRequired(self, required=True):
    return self._with(required=required)

  def hasArg(self, hasArg=True):
    return self._with(argCount=1 if hasArg else 0)
  def hasArgs(self, numberOfArgs=Unlimited):
    return self._with(argCount=numberOfArgs)
  def hasOptionalArg(self):
    return self._with(argCount=1, optionalArg=True)
  def hasOptionalArgs(self, numberOfArgs=Unlimited):
    return self._with(argCount=numberOfArgs, optionalArg=True)

  def create(self, shortName=None):
    return Option(shortName, self.longName,
        argCount=self.argCount,
        required=self.required,
        optionalArg=self.optionalArg,
        valueSeparator=self.valueSeparator,
        argName=self.argName,
        description=self.description)

  def __repr__(self):
    return "OptionBuilder{0}".format((self.longName, self.argCount,
      self.required))

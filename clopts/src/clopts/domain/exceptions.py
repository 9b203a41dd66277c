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

class InvalidOptionNameException(Exception):
  def __init__(self, name, problem):
    self.name = name
    self.problem = problem

  def __str__(self):
    if self.name is None:
      return "option name " + self.problem
    return "option name ‘{0}’ {1}".format(self.name, self.problem)

class ParseException(Exception):
  pass

class UnrecognizedOptionException(ParseException):
  def __init__(self, option):
    self.option = option

  def __str__(self):
    return "Unrecognized option: {0}".format(self.option)

class MissingArgumentException(ParseException):
  def __init__(self, option):
    self.option = option

  def __str__(self):
    return "Missing argument for option: {0}".format(self.option.key)

class MissingOptionException(ParseException):
  def __init__(self, missingOptions):
    self.missingOptions = list(missingOptions)

  def __str__(self):
    return "Missing required option{0}: {1}".format(
        "" if len(self.missingOptions) == 1 else "s",
        ", ".join(str(missing) for missing in self.missingOptions))

class AlreadySelectedException(ParseException):
  def __init__(self, group, option, selected):
    self.group = group
    self.option = option
    self.selected = selected

  def __str__(self):
    return ("The option ‘{0}’ was specified but an option from this group " +
        "has already been selected: ‘{1}’").format(self.option.key,
        self.selected)

class AmbiguousOptionException(UnrecognizedOptionException):
  def __init__(self, option, matchingOptions):
    super().__init__(option)
    self.matchingOptions = list(matchingOptions)

  def __str__(self):
    return "Ambiguous option: ‘{0}’ (could be: {1})".format(self.option,
        ", ".join("‘{0}’".format(name) for name in self.matchingOptions))

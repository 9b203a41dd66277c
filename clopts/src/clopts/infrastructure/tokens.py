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

class OptionToken(CaseClassEqualityHashCode):
  def __init__(self, option, value=None):
    self.option = option
    self.value = value

  @property
  def hasValue(self):
    return self.value is not None

  def __repr__(self):
    return "OptionToken{0}".format((self.option, self.value))

class PositionalToken(CaseClassEqualityHashCode):
  def __init__(self, value):
    self.value = value

  def __repr__(self):
    return "PositionalToken{0}".format((self.value,))

class UnrecognizedToken(CaseClassEqualityHashCode):
  def __init__(self, text):
    self.text = text

  def __repr__(self):
    return "UnrecognizedToken{0}".format((self.text,))

class StopToken(CaseClassEqualityHashCode):
  def __init__(self, remainder):
    self.remainder = remainder

  def __repr__(self):
    return "StopToken{0}".format((self.remainder,))

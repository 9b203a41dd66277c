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

from clopts.domain.exceptions import AmbiguousOptionException

class OptionLookup(object):
  def __init__(self, options, allowAbbreviations=False):
    self.options = options
    self.allowAbbreviations = allowAbbreviations

  def byName(self, name):
    if len(name) == 0:
      return None
    return self.options.getOption(name)

  def candidatesForLongName(self, name):
    exactMatch = self.byName(name)
    if exactMatch is not None:
      return [exactMatch]
    if not self.allowAbbreviations or len(name) == 0:
      return []
    return [self.options.getOption(longName) for longName in
        self.options.getMatchingOptions(name)]

  def byLongName(self, token, name):
    candidates = self.candidatesForLongName(name)
    if len(candidates) > 1:
      raise AmbiguousOptionException(token,
          [candidate.longName for candidate in candidates])
    return candidates[0] if len(candidates) == 1 else None

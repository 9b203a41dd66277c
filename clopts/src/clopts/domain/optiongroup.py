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

from clopts.domain.exceptions import AlreadySelectedException

class OptionGroup(object):
  def __init__(self, *options, required=False):
    self.required = required
    self._optionsByKey = dict()
    for option in options:
      self.addOption(option)

  def addOption(self, option):
    self._optionsByKey[option.key] = option
    return self

  @property
  def names(self):
    return list(self._optionsByKey.keys())

  @property
  def options(self):
    return list(self._optionsByKey.values())

  def __contains__(self, option):
    return option.key in self._optionsByKey

  def __str__(self):
    return "[{0}]".format(", ".join(
        "{0} {1}".format(option, option.description) for option in
        self.options))

  def __repr__(self):
    return "OptionGroup{0}".format((self.names, self.required))

class GroupSelection(object):
  """Which member of a group one parse has chosen; at most one may be."""
  def __init__(self, group):
    self.group = group
    self.selected = None

  @property
  def isSelected(self):
    return self.selected is not None

  def allows(self, option):
    return self.selected is None or self.selected == option.key

  def select(self, option):
    if not self.allows(option):
      raise AlreadySelectedException(self.group, option, self.selected)
    self.selected = option.key

  def __repr__(self):
    return "GroupSelection{0}".format((self.group, self.selected))

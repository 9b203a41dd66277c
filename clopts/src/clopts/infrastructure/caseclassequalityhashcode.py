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

class CaseClassEqualityHashCode(object):
  """Equality and hashing over a chosen set of attributes.

  Subclasses may set `_identityAttributes` to restrict the comparison;
  by default all instance attributes not starting with an underscore count.
  """
  _identityAttributes = None

  def _identity(self):
    if self._identityAttributes is not None:
      return tuple(getattr(self, name) for name in self._identityAttributes)
    return tuple(sorted((key, value) for key, value in vars(self).items() if
        not key.startswith("_")))

  def __eq__(self, other):
    return type(self) == type(other) and self._identity() == other._identity()

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash(self._identity())

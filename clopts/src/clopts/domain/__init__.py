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

from clopts.domain.options import Options
from clopts.domain.optiongroup import OptionGroup

def constructOptions(*optionsAndGroups):
  ret = Options()
  for item in optionsAndGroups:
    if isinstance(item, OptionGroup):
      ret.addOptionGroup(item)
    else:
      ret.addOption(item)
  return ret

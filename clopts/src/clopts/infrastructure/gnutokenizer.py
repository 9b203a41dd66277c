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

from clopts.infrastructure.tokenizer import Tokenizer
from clopts.infrastructure.tokens import OptionToken, UnrecognizedToken

class GnuTokenizer(Tokenizer):
  """Accepts `-name=value` and `-nvalue` but never clusters options."""

  def _splitAttachedValue(self, arg, lookup):
    name, equalsSign, value = arg[1:].partition("=")
    if equalsSign:
      option = lookup.byName(name)
      if option is not None:
        return option, value

    option = lookup.byName(arg[1])
    if option is not None:
      return option, arg[2:]
    return None, None

  def _leadingOption(self, arg, lookup):
    return self._splitAttachedValue(arg, lookup)[0]

  def _tokenizeShort(self, arg, lookup, stopAtNonOption):
    option, value = self._splitAttachedValue(arg, lookup)
    if option is None:
      return [UnrecognizedToken(arg)]
    return [OptionToken(option, value)]

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
from clopts.infrastructure.tokens import OptionToken, UnrecognizedToken, \
    StopToken

class PosixTokenizer(Tokenizer):
  """Bursts clustered short options: `-acbtoast` is `-a -c -b toast`."""

  def _leadingOption(self, arg, lookup):
    return lookup.byName(arg[1])

  def _tokenizeShort(self, arg, lookup, stopAtNonOption):
    ret = []
    for i in range(1, len(arg)):
      option = lookup.byName(arg[i])
      if option is None:
        if len(ret) > 0 and stopAtNonOption:
          ret.append(StopToken(arg[i:]))
        else:
          ret.append(UnrecognizedToken(arg))
        return ret

      rest = arg[i + 1:]
      if option.hasArg and len(rest) > 0:
        ret.append(OptionToken(option, rest[1:] if rest.startswith("=") else
          rest))
        return ret
      ret.append(OptionToken(option))

    return ret

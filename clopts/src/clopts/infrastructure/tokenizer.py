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

from clopts.infrastructure.tokens import OptionToken, PositionalToken, \
    UnrecognizedToken

def isOptionSyntax(arg):
  return arg.startswith("-") and len(arg) > 1 and arg != "--"

class Tokenizer(object):
  """Turns single arguments into tokens.

  `--` and `-` never reach a tokenizer. Subclasses decide how an argument with
  a single leading hyphen is decomposed by implementing `_tokenizeShort` and
  `_leadingOption`.
  """
  def tokenize(self, arg, lookup, stopAtNonOption):
    if not isOptionSyntax(arg):
      return [PositionalToken(arg)]
    if arg.startswith("--"):
      return self._tokenizeLong(arg, lookup)

    exactMatch = lookup.byName(arg)
    if exactMatch is not None:
      return [OptionToken(exactMatch)]
    return self._tokenizeShort(arg, lookup, stopAtNonOption)

  def resolvesToOption(self, arg, lookup):
    if not isOptionSyntax(arg):
      return False
    if arg.startswith("--"):
      name = arg[2:].partition("=")[0]
      return len(lookup.candidatesForLongName(name)) > 0
    return lookup.byName(arg) is not None or \
        self._leadingOption(arg, lookup) is not None

  def _tokenizeLong(self, arg, lookup):
    name, equalsSign, value = arg[2:].partition("=")
    option = lookup.byLongName(arg, name)
    if option is None:
      return [UnrecognizedToken(arg)]
    return [OptionToken(option, value if equalsSign else None)]

  def _tokenizeShort(self, arg, lookup, stopAtNonOption):
    raise NotImplementedError()

  def _leadingOption(self, arg, lookup):
    raise NotImplementedError()

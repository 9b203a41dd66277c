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

from clopts.domain.exceptions import ParseException, \
    UnrecognizedOptionException, MissingArgumentException, \
    MissingOptionException, AmbiguousOptionException, \
    InvalidOptionNameException
from clopts.domain.optiongroup import OptionGroup
from test.common.builders import flag, withArg

def test_shouldNameTheOffendingTokenOrOption():
  assert str(UnrecognizedOptionException("-z")) == "Unrecognized option: -z"
  assert str(MissingArgumentException(withArg("b", "bfile"))) == \
      "Missing argument for option: b"
  assert str(MissingArgumentException(withArg(None, "bfile"))) == \
      "Missing argument for option: bfile"

def test_shouldListAllMissingOptionsAndUseThePluralIfNeeded():
  assert str(MissingOptionException(["b"])) == \
      "Missing required option: b"
  assert str(MissingOptionException(["b", "c"])) == \
      "Missing required options: b, c"

  group = OptionGroup(flag("l", description="go left"),
      flag("r", description="go right"))
  assert str(MissingOptionException(["f", group])) == \
      "Missing required options: f, [-l go left, -r go right]"

def test_shouldListTheCandidatesOfAnAmbiguousOption():
  ex = AmbiguousOptionException("--ver", ["verbose", "version"])
  assert isinstance(ex, UnrecognizedOptionException)
  assert str(ex) == "Ambiguous option: ‘--ver’ (could be: ‘verbose’, " \
      "‘version’)"

def test_shouldSeparateParseErrorsFromCatalogErrors():
  assert isinstance(MissingOptionException([]), ParseException)
  assert not isinstance(InvalidOptionNameException("", "is empty"),
      ParseException)
  assert str(InvalidOptionNameException(None, "missing")) == \
      "option name missing"

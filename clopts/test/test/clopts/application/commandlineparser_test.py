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

import pytest
from clopts.application.commandlineparser import CommandLineParser, parse
from clopts.application.prefixingerrorlogger import PrefixingErrorLogger
from clopts.infrastructure.gnutokenizer import GnuTokenizer
from clopts.domain import constructOptions
from clopts.domain.optionbuilder import OptionBuilder
from clopts.domain.optiongroup import OptionGroup
from clopts.domain.exceptions import AlreadySelectedException, \
    MissingOptionException, UnrecognizedOptionException, \
    AmbiguousOptionException, MissingArgumentException
from test.common.builders import flag, withArg, abcOptions, \
    directionOptions, propertyOptions
from test.common.bufferingoutput import BufferingOutput
from test.common.assertutil import iterToTest

class Fixture(object):
  def __init__(self):
    self.parser = CommandLineParser()
    self.requiredOptions = constructOptions(
        flag("a", "enable-a"),
        OptionBuilder().withLongOpt("bfile").hasArg().isRequired().create("b"),
        OptionBuilder().withLongOpt("cfile").hasArg().isRequired().create("c"))

  def parse(self, options, args, **kwargs):
    return self.parser.parse(options, args, **kwargs)

@pytest.fixture
def fixture():
  return Fixture()

def test_shouldRecordWhichMemberOfAGroupWasSelected(fixture):
  options = directionOptions()
  commandLine = fixture.parse(options, ["-f", "-r", "--up", "x"])

  left, up = options.getOptionGroups()
  assert commandLine.getSelected(left) == "r"
  assert commandLine.getSelected(up) == "u"
  assert commandLine.hasOption("file")
  iterToTest(commandLine.getPositionalArgs()).shouldContain("x")

def test_shouldAllowTheSameGroupMemberSeveralTimes(fixture):
  commandLine = fixture.parse(directionOptions(), ["-l", "--left"])
  assert len(commandLine.getOptions()) == 2

def test_shouldFailIfTwoMembersOfAGroupAreGiven(fixture):
  options = directionOptions()
  with pytest.raises(AlreadySelectedException) as ex:
    fixture.parse(options, ["-f", "--left", "-u", "--right"])

  assert ex.value.group is options.getOptionGroups()[0]
  assert ex.value.option == options.getOption("r")
  assert ex.value.selected == "l"

def test_shouldNotRememberSelectionsFromEarlierParses(fixture):
  options = directionOptions()
  fixture.parse(options, ["-l"])
  assert fixture.parse(options, ["-r"]).hasOption("right")

def test_shouldFailIfRequiredOptionsAreMissing(fixture):
  with pytest.raises(MissingOptionException) as ex:
    fixture.parse(fixture.requiredOptions, ["-a", "-c", "file"])
  iterToTest(ex.value.missingOptions).shouldContain("b")
  assert str(ex.value) == "Missing required option: b"

  with pytest.raises(MissingOptionException) as ex:
    fixture.parse(fixture.requiredOptions, ["-a"])
  assert str(ex.value) == "Missing required options: b, c"

def test_shouldAcceptCommandLinesWithAllRequiredOptions(fixture):
  commandLine = fixture.parse(fixture.requiredOptions, ["-b", "file",
    "--cfile", "other"])
  assert commandLine.getValue("bfile") == "file"
  assert commandLine.getValue("c") == "other"

def test_shouldFailIfNoMemberOfARequiredGroupIsGiven(fixture):
  options = directionOptions(required=True)
  options.addOption(flag("s", required=True))

  with pytest.raises(MissingOptionException) as ex:
    fixture.parse(options, ["-u"])
  iterToTest(ex.value.missingOptions).shouldContain(
      options.getOptionGroups()[0], "s")

  assert fixture.parse(options, ["-s", "-r"]).hasOption("r")

def test_shouldUsePropertiesAsDefaultsForOptionsNotGiven(fixture):
  commandLine = fixture.parse(abcOptions(), ["-b", "given"],
      properties={ "a": "true", "bfile": "default", "c": "no" })

  assert commandLine.hasOption("a")
  assert commandLine.getValue("b") == "given"
  iterToTest(commandLine.getValues("b")).shouldContain("given")
  assert not commandLine.hasOption("c")

def test_shouldOnlySetFlagsForAffirmativePropertyValues(fixture):
  for value in ["yes", "TRUE", "1"]:
    assert fixture.parse(abcOptions(), [], properties=dict(a=value)).\
        hasOption("a")
  for value in ["no", "false", "0", ""]:
    assert not fixture.parse(abcOptions(), [], properties=dict(a=value)).\
        hasOption("a")

def test_shouldPutDefaultsBeforeGivenOptions(fixture):
  commandLine = fixture.parse(abcOptions(), ["-a"],
      properties=dict(b="value"))

  iterToTest(commandLine.getOptions()).shouldContainMatching(
      lambda entry: entry.option.key == "b" and entry.values == ["value"],
      lambda entry: entry.option.key == "a")

def test_shouldSplitPropertyValuesAtTheSeparator(fixture):
  commandLine = fixture.parse(propertyOptions(), [],
      properties=dict(J="source=1.5"))
  assert commandLine.getValuesAsMap("J") == { "source": "1.5" }

def test_shouldNotLetPropertiesConflictWithGivenGroupMembers(fixture):
  options = directionOptions()
  commandLine = fixture.parse(options, ["-l"], properties=dict(r="yes",
    d="yes"))

  assert not commandLine.hasOption("r")
  assert commandLine.hasOption("down")
  assert commandLine.getSelected(options.getOptionGroups()[1]) == "d"

def test_shouldLetPropertiesSatisfyRequiredOptions(fixture):
  commandLine = fixture.parse(fixture.requiredOptions, ["-b", "x"],
      properties=dict(cfile="y"))
  assert commandLine.getValue("c") == "y"

  options = directionOptions(required=True)
  assert fixture.parse(options, [], properties=dict(left="true")).\
      hasOption("l")

def test_shouldFailOnPropertiesNamingUnknownOptions(fixture):
  with pytest.raises(UnrecognizedOptionException) as ex:
    fixture.parse(abcOptions(), [], properties=dict(z="1"))
  assert ex.value.option == "z"

def test_shouldResolveAbbreviatedLongOptionsIfAllowed(fixture):
  options = constructOptions(flag(None, "verbose"), flag(None, "version"),
      withArg("o", "output"))
  parser = CommandLineParser(allowAbbreviations=True)

  commandLine = parser.parse(options, ["--verb", "--out=file"])
  assert commandLine.hasOption("verbose")
  assert commandLine.getValue("o") == "file"

  with pytest.raises(AmbiguousOptionException) as ex:
    parser.parse(options, ["--ver"])
  iterToTest(ex.value.matchingOptions).shouldContainInAnyOrder("verbose",
      "version")

  with pytest.raises(UnrecognizedOptionException):
    fixture.parse(options, ["--verb"])

def test_shouldNotTakeAbbreviatedOptionsAsValues(fixture):
  options = constructOptions(withArg(None, "define"), flag(None, "quiet"))
  parser = CommandLineParser(allowAbbreviations=True)

  with pytest.raises(MissingArgumentException) as ex:
    parser.parse(options, ["--define", "--qu"])
  assert ex.value.option == options.getOption("define")

def test_shouldLogTokensAndTheOutcomeOfTheRequiredOptionsCheck(fixture):
  output = BufferingOutput()
  parser = CommandLineParser(logger=PrefixingErrorLogger(output, "clopts",
    2))
  parser.parse(abcOptions(), ["-ab", "toast", "--", "x"])

  output.string.shouldIncludeInOrder("‘-ab’", "‘toast’", "‘--’",
      "all required options present")

def test_shouldOnlyLogTheOutcomeOfTheCheckWithLowerVerbosity(fixture):
  output = BufferingOutput()
  parser = CommandLineParser(logger=PrefixingErrorLogger(output, "clopts",
    1))
  with pytest.raises(MissingOptionException):
    parser.parse(fixture.requiredOptions, ["-a"])

  assert len(output.printedLines) == 1
  output.string.shouldInclude("missing required options", "b", "c")

def test_shouldUsePosixBurstingUnlessToldOtherwise():
  commandLine = parse(abcOptions(), ["-ac"])
  assert commandLine.hasOption("c")

  commandLine = parse(abcOptions(), ["-ac"], tokenizer=GnuTokenizer())
  assert not commandLine.hasOption("c")
  iterToTest(commandLine.getPositionalArgs()).shouldContain("c")

def test_shouldPassOnStopAndPropertiesThroughTheShortcut():
  commandLine = parse(abcOptions(), ["x", "-a"], stopAtNonOption=True,
      properties=dict(c="yes"))
  assert commandLine.hasOption("c")
  assert not commandLine.hasOption("a")
  iterToTest(commandLine.getPositionalArgs()).shouldContain("x", "-a")

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

from clopts.domain.commandline import CommandLine, ParsedOption
from clopts.domain.exceptions import UnrecognizedOptionException, \
    MissingArgumentException, MissingOptionException
from clopts.domain.optiongroup import OptionGroup, GroupSelection
from clopts.infrastructure.optionlookup import OptionLookup
from clopts.infrastructure.posixtokenizer import PosixTokenizer
from clopts.infrastructure.tokens import OptionToken, PositionalToken, \
    UnrecognizedToken, StopToken

Terminator = "--"
TrueValues = ["yes", "true", "1"]

def _stripQuotes(value):
  if value.startswith("\""):
    value = value[1:]
  if value.endswith("\""):
    value = value[:-1]
  return value

class ParseState(object):
  def __init__(self, arguments):
    self.args = list(arguments)
    self.index = 0
    self.parsedOptions = []
    self.positionalArgs = []
    self.selections = dict()
    self.stopped = False

  @property
  def hasMoreArgs(self):
    return self.index < len(self.args)

  def peekArg(self):
    return self.args[self.index]
  def popArg(self):
    self.index += 1
    return self.args[self.index - 1]

  def eatRest(self):
    self.positionalArgs.extend(self.args[self.index:])
    self.index = len(self.args)
    self.stopped = True

  def selectionOf(self, group):
    if group not in self.selections:
      self.selections[group] = GroupSelection(group)
    return self.selections[group]

  def isPresent(self, option):
    return any(entry.option == option for entry in self.parsedOptions)

class CommandLineParser(object):
  """Turns argument lists into `CommandLine`s.

  How a single argument is decomposed is left to the tokenizer (POSIX
  bursting by default, see `GnuTokenizer` for the alternative); everything
  else, i.e. pulling values, group exclusivity, defaults from properties and
  the check for required options, is common to all dialects.
  """
  def __init__(self, tokenizer=None, allowAbbreviations=False, logger=None):
    self.tokenizer = PosixTokenizer() if tokenizer is None else tokenizer
    self.allowAbbreviations = allowAbbreviations
    self.logger = logger

  def _log(self, messageFormat, *args, verbosity):
    if self.logger is not None:
      self.logger.log(messageFormat, *args, verbosity=verbosity)

  def parse(self, options, arguments, stopAtNonOption=False, properties=None):
    lookup = OptionLookup(options, self.allowAbbreviations)
    state = ParseState(arguments)

    while state.hasMoreArgs:
      arg = state.popArg()
      if arg == Terminator:
        self._log("‘{0}’ ends options", arg, verbosity=2)
        state.eatRest()
        continue

      tokens = [PositionalToken(arg)] if arg == "-" else \
          self.tokenizer.tokenize(arg, lookup, stopAtNonOption)
      self._log("‘{0}’ read as {1}", arg, tokens, verbosity=2)
      for token in tokens:
        if state.stopped:
          break
        self._processToken(state, lookup, token, stopAtNonOption)

    if properties is not None:
      self._processProperties(state, options, properties)
    self._checkRequiredOptions(state, options)

    return CommandLine(state.parsedOptions, state.positionalArgs,
        dict((group, selection.selected) for group, selection in
        state.selections.items()))

  def _processToken(self, state, lookup, token, stopAtNonOption):
    if isinstance(token, OptionToken):
      self._processOption(state, lookup, token, stopAtNonOption)
    elif isinstance(token, UnrecognizedToken):
      if not stopAtNonOption:
        raise UnrecognizedOptionException(token.text)
      self._processPositional(state, token.text, True)
    elif isinstance(token, StopToken):
      self._processPositional(state, token.remainder, True)
    elif isinstance(token, PositionalToken):
      self._processPositional(state, token.value, stopAtNonOption)
    else:
      raise TypeError("unknown token {0}".format(token))

  def _processPositional(self, state, value, stop):
    state.positionalArgs.append(value)
    if stop:
      state.eatRest()

  def _select(self, state, option, lookup):
    group = lookup.options.getOptionGroup(option)
    if group is not None:
      state.selectionOf(group).select(option)

  def _processOption(self, state, lookup, token, stopAtNonOption):
    option = token.option
    self._select(state, option, lookup)
    entry = ParsedOption(option)

    if not option.hasArg:
      state.parsedOptions.append(entry)
      if token.hasValue:
        self._processPositional(state, token.value, stopAtNonOption)
      return

    if token.hasValue:
      entry.addValueForProcessing(_stripQuotes(token.value))
    else:
      self._processArgs(state, lookup, entry)

    if len(entry.values) == 0 and not option.optionalArg:
      raise MissingArgumentException(option)
    state.parsedOptions.append(entry)

  def _processArgs(self, state, lookup, entry):
    while state.hasMoreArgs and not entry.isFull:
      arg = state.peekArg()
      if arg == Terminator or self.tokenizer.resolvesToOption(arg, lookup):
        break
      entry.addValueForProcessing(_stripQuotes(state.popArg()))
      self._log("‘{0}’ taken as value of {1}", arg, entry.option,
          verbosity=2)

  def _processProperties(self, state, options, properties):
    defaults = []
    for name, value in properties.items():
      option = options.getOption(name)
      if option is None:
        raise UnrecognizedOptionException(name)
      if state.isPresent(option):
        continue

      group = options.getOptionGroup(option)
      if group is not None and not state.selectionOf(group).allows(option):
        continue

      entry = ParsedOption(option)
      if option.hasArg:
        entry.addValueForProcessing(value)
      elif value.lower() not in TrueValues:
        continue

      if group is not None:
        state.selectionOf(group).select(option)
      defaults.append(entry)
      self._log("{0} defaulted to ‘{1}’", option, value, verbosity=2)

    state.parsedOptions[0:0] = defaults

  def _checkRequiredOptions(self, state, options):
    missing = []
    for required in options.getRequiredOptions():
      if isinstance(required, OptionGroup):
        if not state.selectionOf(required).isSelected:
          missing.append(required)
      elif not state.isPresent(options.getOption(required)):
        missing.append(required)

    if len(missing) > 0:
      self._log("missing required options: {0}", missing, verbosity=1)
      raise MissingOptionException(missing)
    self._log("all required options present", verbosity=1)

def parse(options, arguments, stopAtNonOption=False, properties=None,
    tokenizer=None):
  return CommandLineParser(tokenizer).parse(options, arguments,
      stopAtNonOption, properties)

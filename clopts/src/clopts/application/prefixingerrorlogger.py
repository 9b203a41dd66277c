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

class PrefixingErrorLogger(object):
  """Writes messages to an output, each headed by the program name.

  Lines after the first of a message, and all lines of a `continued` message,
  are aligned below the text of the first line. Messages more verbose than
  `maximumVerbosity` are dropped.
  """
  def __init__(self, output, prefix, maximumVerbosity):
    self.output = output
    self.header = prefix + ": "
    self.maximumVerbosity = maximumVerbosity

  @property
  def indentation(self):
    return " " * len(self.header)

  def _formatLines(self, message, continued):
    lines = message.split("\n")
    firstLineStart = self.indentation if continued else self.header
    return [firstLineStart + lines[0]] + [self.indentation + line for line in
        lines[1:]]

  def log(self, messageFormat, *args, verbosity=0, continued=False):
    if verbosity > self.maximumVerbosity:
      return

    message = messageFormat.format(*args) if len(args) > 0 else messageFormat
    self.output.println("\n".join(self._formatLines(message, continued)))

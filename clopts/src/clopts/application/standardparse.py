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

from clopts.application.prefixingerrorlogger import PrefixingErrorLogger
from clopts.domain.exceptions import ParseException

def standardParse(parser, options, progName, args, stderr, properties=None,
    stopAtNonOption=False):
  """Parses args, reporting failures to stderr instead of raising.

  :returns: `(None, commandLine)` on success, `(2, None)` otherwise.
  """
  try:
    return None, parser.parse(options, args, stopAtNonOption=stopAtNonOption,
        properties=properties)
  except ParseException as ex:
    PrefixingErrorLogger(stderr, progName, 0).log(str(ex))
    return 2, None

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

from clopts.domain import constructOptions
from clopts.domain.option import Option, Unlimited
from clopts.domain.options import Options
from clopts.domain.optiongroup import OptionGroup
from clopts.domain.optionbuilder import OptionBuilder
from clopts.domain.commandline import CommandLine, ParsedOption
from clopts.domain.exceptions import ParseException, \
    UnrecognizedOptionException, MissingArgumentException, \
    MissingOptionException, AlreadySelectedException, \
    AmbiguousOptionException, InvalidOptionNameException
from clopts.infrastructure.posixtokenizer import PosixTokenizer
from clopts.infrastructure.gnutokenizer import GnuTokenizer
from clopts.infrastructure.fileobjoutput import FileObjOutput
from clopts.application.commandlineparser import CommandLineParser, parse
from clopts.application.prefixingerrorlogger import PrefixingErrorLogger
from clopts.application.standardparse import standardParse
from clopts.configuration.inipropertiesreader import IniPropertiesReader

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

import os.path
import configparser
from clopts.configuration.exceptions import ConfigSyntaxException, \
    NotReadableException

class IniPropertiesReader(object):
  """Reads option defaults from one section of INI files.

  The result can be passed as `properties` to a parse. Files later in the list
  override earlier ones; files that do not exist are skipped.
  """
  def __init__(self, section):
    self.section = section

  def _makeParser(self):
    ret = configparser.ConfigParser(empty_lines_in_values=False,
        interpolation=configparser.BasicInterpolation())
    ret.optionxform = lambda key: key
    return ret

  def _parseFileWithParser(self, filePath, parser):
    try:
      with open(filePath, "r") as file:
        parser.read_file(file, source=filePath)
    except PermissionError as ex:
      raise NotReadableException(filePath) from ex
    except configparser.Error as ex:
      raise ConfigSyntaxException(filePath, "wrong syntax") from ex

  def _sectionOf(self, parser, filePath):
    if not parser.has_section(self.section):
      return dict()
    try:
      return dict(parser.items(self.section))
    except configparser.InterpolationError as ex:
      raise ConfigSyntaxException(filePath, "could not interpolate: " +
          str(ex)) from ex

  def propertiesFromFiles(self, paths):
    ret = dict()
    for path in paths:
      if not os.path.isfile(path):
        continue
      parser = self._makeParser()
      self._parseFileWithParser(path, parser)
      ret.update(self._sectionOf(parser, path))
    return ret

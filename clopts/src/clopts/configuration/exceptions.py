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

class ConfigSyntaxException(Exception):
  def __init__(self, file, message):
    self.file = file
    self.message = message

  def __str__(self):
    return "error in option defaults file ‘{0}’: {1}".format(self.file,
        self.message)

class NotReadableException(Exception):
  def __init__(self, filePath):
    self.filePath = filePath

  def __str__(self):
    return "permission denied when trying to read file ‘{0}’".format(
        self.filePath) + "; set appropriate mode to make it readable"

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

import os
import io
import sys

def encode(string):
  return string.encode(sys.getdefaultencoding(), errors="surrogateescape")

class FileObjOutput(object):
  """Line output to a file object; binary streams get encoded text."""
  def __init__(self, fileObject):
    self.fileObject = fileObject
    self.isText = isinstance(fileObject, io.TextIOBase)

  def println(self, x, lineSeparator=os.linesep):
    text = x + lineSeparator
    self.fileObject.write(text if self.isText else encode(text))
    self.fileObject.flush()

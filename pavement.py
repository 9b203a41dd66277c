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

from paver.easy import *
from paver.setuputils import install_distutils_tasks, find_packages
import sys

import pytest
import os
from py.path import local

Root = (local(os.path.abspath(".")) / __file__).dirpath()
PreviousCwd = local(os.getcwd())
options(setup=dict(
    name="clopts",
    author="Patrick Plagwitz",
    author_email="patrick_plagwitz@web.de",
    license="GNU General Public License v3 (GPLv3)",
    description="Library for parsing command line arguments in POSIX and " +
        "GNU style",

    version="0.1.0",

    packages=find_packages("clopts/src"),
    package_dir={"clopts": "clopts/src/clopts"}
    ))
install_distutils_tasks()

def runPyTest(testFiles):
  return pytest.main(["--color=yes", "-v"] + testFiles)

def prependToPythonPath(newPath):
  envVarName = "PYTHONPATH"

  if envVarName in os.environ:
    os.environ[envVarName] = newPath + ":" + os.environ[envVarName]
  else:
    os.environ[envVarName] = newPath

  sys.path = [newPath] + sys.path

@task
def setup_testing():
  prependToPythonPath(os.path.abspath("clopts/src"))
  prependToPythonPath(os.path.abspath("clopts/test"))

@task
@needs(["setup_testing"])
def unit_test():
  runPyTest([str(Root / "clopts/test/test/clopts")])

@task
@needs(["setup_testing"])
@consume_args
def test_only(args):
  testFiles = [str(PreviousCwd / arg) for arg in args]
  if len(args) > 0 and args[0] == "--pdb":
    import pdb
    pdb.runcall(runPyTest, testFiles[1:])
  else:
    runPyTest(testFiles)

@task
@needs(["unit_test"])
def test():
  pass

@task
@needs("generate_setup", "minilib", "setuptools.command.sdist")
def sdist():
  pass

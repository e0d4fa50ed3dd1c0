# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *mmtfwriter*.
It does not provide the structure encoding itself, which lives in the
:mod:`mmtfwriter.structure` subpackage, but it provides the file base
class and the errors used by the file classes of the subpackages.
"""

__version__ = "0.3.0"
__name__ = "mmtfwriter"
__author__ = "The mmtfwriter contributors"

from .file import *

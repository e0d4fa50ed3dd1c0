# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for encoding a :class:`Structure` into the
binary MMTF format.

:func:`write_structure()` traverses a structure and passes its content
to a :class:`StructureSink`.
The :class:`MMTFEncoder` is a sink that lays out the content in the
fields of an :class:`MMTFFile`.
"""

__name__ = "mmtfwriter.structure.io.mmtf"
__author__ = "The mmtfwriter contributors"

from .file import *
from .sink import *
from .encoder import *
from .writer import *

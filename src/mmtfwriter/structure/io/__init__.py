# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for writing structure related data.

Currently the binary MMTF format is supported via the
:mod:`mmtfwriter.structure.io.mmtf` subpackage.
"""

__name__ = "mmtfwriter.structure.io"
__author__ = "The mmtfwriter contributors"

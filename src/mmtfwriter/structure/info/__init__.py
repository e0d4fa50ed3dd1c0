# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for obtaining chemical information about residues, i.e.
the component type and the one-letter code.

The information is extracted from a subset of the
*Chemical Component Dictionary* of the
`wwPDB <https://files.wwpdb.org/pub/pdb/data/monomers/components.cif>`_.
"""

__name__ = "mmtfwriter.structure.info"
__author__ = "The mmtfwriter contributors"

from .chemcomp import *

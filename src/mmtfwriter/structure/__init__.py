# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for handling hierarchical molecular structures.

A :class:`Structure` consists of :class:`Model` objects, each
containing :class:`Chain` objects, which contain residues
(:class:`Group`), which contain :class:`Atom` objects.
Atoms are connected by :class:`Bond` objects.
Entities (:class:`EntityInfo`) and biological assemblies
(:class:`BioAssemblyInfo`) refer to chains of the structure.

Before a structure is encoded, it is normalized via :func:`normalize()`:
Alternate locations with a different residue name are split into
separate residues, chemical components and secondary structure are
resolved and structure-wide chain and atom lists are built.
The input structure is never modified.

During encoding, object references are replaced by indices:

    - Entities and assemblies refer to chains by their position in the
      structure-wide chain list
      (:func:`resolve_entities()`, :func:`resolve_assemblies()`).
    - Bonds refer to atoms by their position in the residue or by their
      position in the structure-wide atom list (:class:`BondIndexer`).

The following sentinel conventions are used:

===========================  ======================================
Value                        Representation
===========================  ======================================
Absent insertion code        ``UNAVAILABLE_CHAR`` (``'\\x00'``)
Absent alternate location    ``UNAVAILABLE_CHAR`` (``'\\x00'``)
Residue not in sequence      ``-1``
Undetermined sec. structure  ``SecondaryStructure.UNDETERMINED``
===========================  ======================================
"""

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"

from .error import *
from .model import *
from .sse import *
from .normalize import *
from .entity import *
from .assembly import *
from .bonds import *

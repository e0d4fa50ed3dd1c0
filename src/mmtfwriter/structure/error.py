# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors and warnings of the
`structure` subpackage.
"""

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = [
    "BadStructureError",
    "ChainReferenceError",
    "UnexpectedStructureWarning",
    "UnknownResidueWarning",
]


class BadStructureError(Exception):
    """
    Indicates that a structure is not suitable for a certain operation.
    """

    pass


class ChainReferenceError(BadStructureError):
    """
    Indicates that an entity or a biological assembly refers to a chain
    that is not part of the structure.
    """

    pass


class UnexpectedStructureWarning(Warning):
    """
    Indicates that a structure contains data that cannot be encoded,
    e.g. a bond to an atom outside of the structure.
    """

    pass


class UnknownResidueWarning(Warning):
    """
    Indicates that a residue name is not part of the chemical component
    dictionary and default values are used for it.
    """

    pass

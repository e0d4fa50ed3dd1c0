# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module defines the secondary structure labels of residues and the
interface for the secondary structure assignment used during encoding.
"""

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = [
    "SecondaryStructure",
    "SecondaryStructureAssigner",
    "PresetSecondaryStructure",
    "sse_from_dssp",
]

import abc
from enum import IntEnum


class SecondaryStructure(IntEnum):
    """
    This enum type represents the secondary structure of a residue.

    The integer values are the codes used in the *MMTF*
    ``secStructList``.

    - `PI_HELIX` : :math:`\\pi`-helix (DSSP ``I``)
    - `BEND` : bend (DSSP ``S``)
    - `ALPHA_HELIX` : :math:`\\alpha`-helix (DSSP ``H``)
    - `EXTENDED` : strand in a :math:`\\beta`-ladder (DSSP ``E``)
    - `HELIX_3_10` : :math:`3_{10}`-helix (DSSP ``G``)
    - `BRIDGE` : isolated :math:`\\beta`-bridge (DSSP ``B``)
    - `TURN` : hydrogen bonded turn (DSSP ``T``)
    - `COIL` : none of the above
    - `UNDETERMINED` : no secondary structure is defined for the
      residue, e.g. for ligands
    """

    PI_HELIX = 0
    BEND = 1
    ALPHA_HELIX = 2
    EXTENDED = 3
    HELIX_3_10 = 4
    BRIDGE = 5
    TURN = 6
    COIL = 7
    UNDETERMINED = -1


_DSSP_TO_SSE = {
    "I": SecondaryStructure.PI_HELIX,
    "S": SecondaryStructure.BEND,
    "H": SecondaryStructure.ALPHA_HELIX,
    "E": SecondaryStructure.EXTENDED,
    "G": SecondaryStructure.HELIX_3_10,
    "B": SecondaryStructure.BRIDGE,
    "T": SecondaryStructure.TURN,
    "C": SecondaryStructure.COIL,
    "-": SecondaryStructure.COIL,
    " ": SecondaryStructure.COIL,
    "": SecondaryStructure.COIL,
}


def sse_from_dssp(code):
    """
    Convert a *DSSP* secondary structure letter into a
    :class:`SecondaryStructure`.

    Parameters
    ----------
    code : str
        The *DSSP* letter.
        Blank, ``'-'`` and ``'C'`` denote coil.

    Returns
    -------
    sse : SecondaryStructure
        The corresponding secondary structure.

    Examples
    --------

    >>> print(repr(sse_from_dssp("H")))
    <SecondaryStructure.ALPHA_HELIX: 2>
    """
    try:
        return _DSSP_TO_SSE[code.upper()]
    except KeyError:
        raise ValueError(f"'{code}' is not a valid DSSP code")


class SecondaryStructureAssigner(metaclass=abc.ABCMeta):
    """
    Base class for a secondary structure assignment, e.g. a *DSSP*
    implementation.

    The encoder calls :meth:`assign()` once per structure.
    Exceptions raised by the assignment are not handled by the encoder.
    """

    @abc.abstractmethod
    def assign(self, structure):
        """
        Assign a secondary structure to the residues of a structure.

        The structure must not be modified.

        Parameters
        ----------
        structure : Structure
            The structure to assign the secondary structure for.

        Returns
        -------
        sse : Mapping of (Group -> SecondaryStructure)
            The secondary structure for each residue.
            Missing residues obtain
            :attr:`SecondaryStructure.UNDETERMINED`.
        """
        pass


class PresetSecondaryStructure(SecondaryStructureAssigner):
    """
    Use the secondary structure labels that are already stored in
    the :attr:`Group.sec_struct` of each residue, e.g. from the
    ``HELIX``/``SHEET`` records of the source file.
    """

    def assign(self, structure):
        sse = {}
        for model in structure.models:
            for chain in model.chains:
                for group in chain.groups:
                    _add_preset(sse, group)
                    for alt_loc in group.alt_locs:
                        _add_preset(sse, alt_loc)
        return sse


def _add_preset(sse, group):
    if group.sec_struct is not None:
        sse[group] = SecondaryStructure(group.sec_struct)

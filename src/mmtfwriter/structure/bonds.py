# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module converts the bonds between :class:`Atom` objects into
bonds between atom indices.
"""

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = ["BondScope", "BondIndexer", "get_local_positions"]

from enum import IntEnum
import warnings
from .error import UnexpectedStructureWarning


class BondScope(IntEnum):
    """
    This enum type represents whether both atoms of a bond are part of
    the same residue.

    - `INTRA_RESIDUE` : The bond is given by indices within the residue.
    - `INTER_RESIDUE` : The bond is given by structure-wide indices.
    """

    INTRA_RESIDUE = 0
    INTER_RESIDUE = 1


def get_local_positions(atoms):
    """
    Map atoms to their position within a residue.

    Parameters
    ----------
    atoms : list of Atom
        The atoms of a residue.

    Returns
    -------
    positions : dict of (Atom -> int)
        The position of each atom in `atoms`.
        If an atom appears multiple times, its first position is used.
    """
    positions = {}
    for i, atom in enumerate(atoms):
        positions.setdefault(atom, i)
    return positions


class BondIndexer:
    """
    Convert the bonds of atoms into index based bonds.

    Each bond is visited from both of its atoms during a traversal of
    all atoms.
    To report each bond only once, a bond is reported

        - within a residue, from the atom with the *higher* position
          in the residue,
        - between residues, from the atom with the *lower*
          structure-wide position.

    Parameters
    ----------
    atoms : list of Atom
        The atoms of the entire structure in document order.
        The position of an atom in this list is its structure-wide
        index.

    Examples
    --------

    >>> n = Atom("N", 1, [0, 0, 0], "N")
    >>> ca = Atom("CA", 2, [1.5, 0, 0], "C")
    >>> bond = Bond(n, ca)
    >>> indexer = BondIndexer([n, ca])
    >>> local_positions = get_local_positions([n, ca])
    >>> print(list(indexer.iter_bonds(n, local_positions)))
    []
    >>> print(list(indexer.iter_bonds(ca, local_positions)))
    [(<BondScope.INTRA_RESIDUE: 0>, 1, 0, 1)]
    """

    def __init__(self, atoms):
        self._atom_count = len(atoms)
        self._positions = get_local_positions(atoms)

    def get_atom_count(self):
        return self._atom_count

    def get_position(self, atom):
        """
        Get the structure-wide index of an atom.

        Parameters
        ----------
        atom : Atom
            The atom.

        Returns
        -------
        position : int
            The index of the atom.
            -1 if the atom is not part of the structure.
        """
        return self._positions.get(atom, -1)

    def iter_bonds(self, atom, local_positions):
        """
        Iterate over the bonds that are reported for the given atom.

        Parameters
        ----------
        atom : Atom
            The atom, whose bonds are reported.
        local_positions : dict of (Atom -> int)
            The positions of the atoms in the residue of `atom`
            (see :func:`get_local_positions()`).

        Yields
        ------
        scope : BondScope
            Whether the bond is given by residue-local or by
            structure-wide indices.
        index_a, index_b : int
            The index of `atom` and of its bond partner, respectively.
        order : int
            The bond order.
        """
        for bond in self._classify(atom, local_positions):
            if _is_reported(*bond[:3]):
                yield bond

    def count_group_bonds(self, atoms):
        """
        Count the bonds within a residue.

        Parameters
        ----------
        atoms : list of Atom
            The atoms of the residue.

        Returns
        -------
        count : int
            The number of bonds where both atoms are part of the
            residue.
        """
        local_positions = get_local_positions(atoms)
        return sum(
            1 for atom in atoms
            for scope, _, _, _ in self.iter_bonds(atom, local_positions)
            if scope == BondScope.INTRA_RESIDUE
        )

    def count_bonds(self, residues):
        """
        Count all bonds that are reported for a structure.

        If bonds to atoms outside of the structure are found, an
        :class:`UnexpectedStructureWarning` is issued.
        These bonds are not counted.

        Parameters
        ----------
        residues : iterable of list of Atom
            The atoms of each residue of the structure.

        Returns
        -------
        count : int
            The number of intra-residue and inter-residue bonds.
        """
        count = 0
        dangling_count = 0
        for atoms in residues:
            local_positions = get_local_positions(atoms)
            for atom in atoms:
                for scope, index_a, index_b, _ in self._classify(
                    atom, local_positions
                ):
                    if _is_reported(scope, index_a, index_b):
                        count += 1
                    elif index_b == -1:
                        dangling_count += 1
        if dangling_count > 0:
            warnings.warn(
                f"{dangling_count} bond(s) to atoms outside of the "
                f"structure are ignored",
                UnexpectedStructureWarning,
            )
        return count

    def _classify(self, atom, local_positions):
        for bond in atom.bonds:
            other = bond.get_other(atom)
            if other in local_positions:
                yield (
                    BondScope.INTRA_RESIDUE,
                    local_positions[atom], local_positions[other],
                    bond.order,
                )
            else:
                yield (
                    BondScope.INTER_RESIDUE,
                    self.get_position(atom), self.get_position(other),
                    bond.order,
                )


def _is_reported(scope, index_a, index_b):
    if scope == BondScope.INTRA_RESIDUE:
        return index_a > index_b
    # The partner of an inter-residue bond is -1,
    # if it is not part of the structure
    return index_b != -1 and index_a < index_b

# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the hierarchical structure model that is encoded
by the :mod:`mmtfwriter.structure.io.mmtf` writer:
:class:`Structure` → :class:`Model` → :class:`Chain` →
:class:`Group` → :class:`Atom`, with :class:`Bond` objects connecting
atoms.

All classes compare by identity.
This is required, as atoms, groups and chains are referenced from
multiple places (bonds, sequence groups, entities) and must be looked
up by identity during encoding.
"""

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = [
    "BondOrder",
    "Atom",
    "Bond",
    "ChemComp",
    "Group",
    "Chain",
    "Model",
    "EntityInfo",
    "SymmetryOperation",
    "BioAssemblyInfo",
    "PDBHeader",
    "CrystallographicInfo",
    "Structure",
]

from enum import IntEnum
import numpy as np
from .error import BadStructureError


# Values of "_chem_comp.type" for peptide and nucleotide monomers
_PEPTIDE_LINKING_TYPES = {
    "D-BETA-PEPTIDE, C-GAMMA LINKING",
    "D-GAMMA-PEPTIDE, C-DELTA LINKING",
    "D-PEPTIDE LINKING",
    "D-PEPTIDE NH3 AMINO TERMINUS",
    "L-BETA-PEPTIDE, C-GAMMA LINKING",
    "L-GAMMA-PEPTIDE, C-DELTA LINKING",
    "L-PEPTIDE COOH CARBOXY TERMINUS",
    "L-PEPTIDE LINKING",
    "L-PEPTIDE NH3 AMINO TERMINUS",
    "PEPTIDE LINKING",
}
_NUCLEOTIDE_LINKING_TYPES = {
    "DNA LINKING",
    "DNA OH 3 PRIME TERMINUS",
    "DNA OH 5 PRIME TERMINUS",
    "L-DNA LINKING",
    "L-RNA LINKING",
    "RNA LINKING",
    "RNA OH 3 PRIME TERMINUS",
    "RNA OH 5 PRIME TERMINUS",
}
_POLYMER_TYPES = _PEPTIDE_LINKING_TYPES | _NUCLEOTIDE_LINKING_TYPES


class BondOrder(IntEnum):
    """
    This enum type represents common bond orders.

    Any other integer is accepted as bond order as well.
    """

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    QUADRUPLE = 4


class Atom:
    """
    A single atom of a :class:`Group`.

    Parameters
    ----------
    name : str
        The atom name, e.g. ``'CA'``.
    serial : int
        The atom serial number from the source file.
    coord : array-like, shape=(3,), dtype=float
        The x, y and z coordinates.
    element : str, optional
        The element symbol, e.g. ``'C'``.
    alt_loc : str, optional
        The alternate location identifier.
        ``None`` if the atom has no alternate location.
    occupancy : float, optional
        The occupancy.
    b_factor : float, optional
        The temperature factor.
    charge : int, optional
        The formal charge.

    Attributes
    ----------
    bonds : list of Bond
        The bonds this atom participates in.
        Bonds are added automatically when a :class:`Bond` is created.

    Examples
    --------

    >>> atom = Atom("CA", 2, [1, 2, 3], element="C")
    >>> print(atom.coord)
    [1. 2. 3.]
    """

    def __init__(self, name, serial, coord, element=None, alt_loc=None,
                 occupancy=1.0, b_factor=0.0, charge=0):
        coord = np.array(coord, dtype=np.float32)
        if coord.shape != (3,):
            raise ValueError("Position must be ndarray with shape (3,)")
        self.name = name
        self.serial = serial
        self.coord = coord
        self.element = element
        self.alt_loc = alt_loc
        self.occupancy = occupancy
        self.b_factor = b_factor
        self.charge = charge
        self.bonds = []

    @property
    def x(self):
        return float(self.coord[0])

    @property
    def y(self):
        return float(self.coord[1])

    @property
    def z(self):
        return float(self.coord[2])

    def __repr__(self):
        alt_loc = "" if self.alt_loc is None else self.alt_loc
        return f"Atom({self.name!r}, {self.serial}{alt_loc})"


class Bond:
    """
    An undirected bond between two atoms.

    On creation the bond registers itself in the :attr:`Atom.bonds`
    of both atoms.

    Parameters
    ----------
    atom_a, atom_b : Atom
        The bonded atoms.
    order : int or BondOrder, optional
        The bond order.
    """

    def __init__(self, atom_a, atom_b, order=BondOrder.SINGLE):
        self.atom_a = atom_a
        self.atom_b = atom_b
        self.order = int(order)
        atom_a.bonds.append(self)
        if atom_b is not atom_a:
            atom_b.bonds.append(self)

    def get_other(self, atom):
        """
        Get the bond partner of the given atom.

        Parameters
        ----------
        atom : Atom
            One of the two atoms of this bond.

        Returns
        -------
        other : Atom
            The other atom of this bond.
        """
        if atom is self.atom_a:
            return self.atom_b
        if atom is self.atom_b:
            return self.atom_a
        raise ValueError(f"{atom!r} is not part of this bond")

    def __repr__(self):
        return f"Bond({self.atom_a!r}, {self.atom_b!r}, {self.order})"


class ChemComp:
    """
    The chemical component information of a residue, as taken from the
    *Chemical Component Dictionary*.

    Parameters
    ----------
    type : str
        The component type, e.g. ``'L-PEPTIDE LINKING'``.
    one_letter_code : str, optional
        The one-letter code.
        ``None`` if no such code is defined for the component.
    """

    def __init__(self, type, one_letter_code=None):
        self.type = type
        self.one_letter_code = one_letter_code

    @property
    def is_polymer(self):
        """
        Whether the component is a peptide or nucleotide monomer.

        The component type must be one of the peptide or nucleotide
        linking types of the *Chemical Component Dictionary*
        (case insensitive).
        Hence, e.g. `PEPTIDE-LIKE` ligands are not polymer components.
        """
        if self.type is None:
            return False
        return self.type.upper() in _POLYMER_TYPES

    def __repr__(self):
        return f"ChemComp({self.type!r}, {self.one_letter_code!r})"


class Group:
    """
    A residue (amino acid, nucleotide, ligand, water, ...) in a
    :class:`Chain`.

    Parameters
    ----------
    name : str
        The residue name, e.g. ``'ALA'``.
    res_id : int
        The residue sequence number.
    ins_code : str, optional
        The insertion code.
        ``None`` if the residue has no insertion code.
    atoms : iterable of Atom, optional
        The atoms of the residue.
    chem_comp : ChemComp, optional
        The chemical component information.
        If omitted, it is looked up from the chemical component
        dictionary during encoding.
    sec_struct : SecondaryStructure, optional
        A precomputed secondary structure label.
    alt_locs : iterable of Group, optional
        Alternate location conformers of this residue.
        They share the residue sequence number and the insertion code,
        but may have a different residue name (microheterogeneity).
    """

    def __init__(self, name, res_id, ins_code=None, atoms=(), chem_comp=None,
                 sec_struct=None, alt_locs=()):
        self.name = name
        self.res_id = res_id
        self.ins_code = ins_code
        self.atoms = list(atoms)
        self.chem_comp = chem_comp
        self.sec_struct = sec_struct
        self.alt_locs = list(alt_locs)

    def add_atom(self, atom):
        self.atoms.append(atom)

    def add_alt_loc(self, group):
        self.alt_locs.append(group)

    def has_alt_loc(self):
        return len(self.alt_locs) > 0

    def __repr__(self):
        ins_code = "" if self.ins_code is None else self.ins_code
        return f"Group({self.name!r}, {self.res_id}{ins_code})"


class Chain:
    """
    A chain of a :class:`Model`.

    Parameters
    ----------
    name : str
        The public (author) chain name.
    asym_id : str
        The internal (label asym) chain identifier.
    groups : iterable of Group, optional
        All residues of the chain with atoms, in file order.
    seqres_groups : iterable of Group, optional
        The residues of the polymer sequence.
        Observed residues are the same :class:`Group` objects as in
        `groups`.
    """

    def __init__(self, name, asym_id, groups=(), seqres_groups=()):
        if name is None:
            raise BadStructureError("The chain name must not be None")
        if asym_id is None:
            raise BadStructureError(
                f"The internal chain ID of chain '{name}' must not be None"
            )
        self.name = name
        self.asym_id = asym_id
        self.groups = list(groups)
        self.seqres_groups = list(seqres_groups)

    def add_group(self, group):
        self.groups.append(group)

    @property
    def sequence(self):
        """
        The one-letter sequence of the polymer sequence residues.
        Residues without one-letter code are represented by ``'X'``.
        """
        # Avoid circular import
        from .info.chemcomp import get_chem_comp

        codes = []
        for group in self.seqres_groups:
            chem_comp = group.chem_comp
            if chem_comp is None:
                chem_comp = get_chem_comp(group.name)
            code = chem_comp.one_letter_code
            codes.append(code[0] if code and code != "?" else "X")
        return "".join(codes)

    def __repr__(self):
        return f"Chain({self.name!r}, {self.asym_id!r})"


class Model:
    """
    A model of a :class:`Structure`.
    Multiple models represent e.g. the conformers of an NMR ensemble.

    Parameters
    ----------
    chains : iterable of Chain, optional
        The chains of the model.
    """

    def __init__(self, chains=()):
        self.chains = list(chains)

    def add_chain(self, chain):
        self.chains.append(chain)


class EntityInfo:
    """
    A distinct molecule type that is instantiated by one or multiple
    chains.

    Parameters
    ----------
    chains : iterable of Chain, optional
        The chains that instantiate this entity.
    description : str, optional
        The entity description, e.g. the molecule name.
    details : str, optional
        Additional details, e.g. the entity type.
    """

    def __init__(self, chains=(), description=None, details=None):
        self.chains = list(chains)
        self.description = description
        self.details = details


class SymmetryOperation:
    """
    A transformation that is part of a biological assembly.

    Parameters
    ----------
    matrix : array-like, shape=(4,4) or shape=(3,4), dtype=float
        The transformation matrix.
        The rotation is given by the upper left *3x3* part and the
        translation by the last column.
    chain_ids : iterable of str
        The internal IDs of the chains the transformation applies to.
    """

    def __init__(self, matrix, chain_ids):
        matrix = np.array(matrix, dtype=np.float64)
        if matrix.shape == (3, 4):
            matrix = np.vstack([matrix, [0, 0, 0, 1]])
        elif matrix.shape != (4, 4):
            raise ValueError(
                f"Expected a (4,4) or (3,4) matrix, but got {matrix.shape}"
            )
        self.matrix = matrix
        self.chain_ids = list(chain_ids)


class BioAssemblyInfo:
    """
    A biological assembly, described by its symmetry operations.

    Parameters
    ----------
    operations : iterable of SymmetryOperation, optional
        The operations that build the assembly from the asymmetric unit.
    """

    def __init__(self, operations=()):
        self.operations = list(operations)


class PDBHeader:
    """
    General metadata of a structure.

    Parameters
    ----------
    title : str, optional
    resolution : float, optional
    r_free, r_work : float, optional
    deposition_date : datetime.date, optional
    experimental_methods : iterable of str, optional
        E.g. ``['X-RAY DIFFRACTION']``.
    """

    def __init__(self, title=None, resolution=None, r_free=None, r_work=None,
                 deposition_date=None, experimental_methods=()):
        self.title = title
        self.resolution = resolution
        self.r_free = r_free
        self.r_work = r_work
        self.deposition_date = deposition_date
        self.experimental_methods = list(experimental_methods)


class CrystallographicInfo:
    """
    Crystallographic metadata of a structure.

    Parameters
    ----------
    space_group : str, optional
        The Hermann-Mauguin space group symbol, e.g. ``'P 21 21 21'``.
    unit_cell : tuple of float, optional
        The unit cell parameters *(a, b, c, alpha, beta, gamma)*.
        Lengths are given in Å, angles in degrees.
    """

    def __init__(self, space_group=None, unit_cell=None):
        if unit_cell is not None and len(unit_cell) != 6:
            raise ValueError(
                f"Expected 6 unit cell parameters, but got {len(unit_cell)}"
            )
        self.space_group = space_group
        self.unit_cell = None if unit_cell is None else tuple(unit_cell)


class Structure:
    """
    The root of the structure model.

    Parameters
    ----------
    pdb_code : str
        The 4-character identifier of the structure.
    models : iterable of Model, optional
        The models of the structure.
    header : PDBHeader, optional
        General metadata.
        By default an empty header is used.
    xtal_info : CrystallographicInfo, optional
        Crystallographic metadata.
        ``None`` for structures without crystallographic data.
    entity_infos : iterable of EntityInfo, optional
        The entities of the structure.
    bio_assemblies : dict of (str or int -> BioAssemblyInfo), optional
        The biological assemblies, mapped by their assembly ID.
    """

    def __init__(self, pdb_code, models=(), header=None, xtal_info=None,
                 entity_infos=(), bio_assemblies=None):
        self.pdb_code = pdb_code
        self.models = list(models)
        self.header = PDBHeader() if header is None else header
        self.xtal_info = xtal_info
        self.entity_infos = list(entity_infos)
        self.bio_assemblies = {} if bio_assemblies is None \
                              else dict(bio_assemblies)

    def model_count(self):
        return len(self.models)

    def get_chains(self, model_index=0):
        """
        Get the chains of a model.

        Parameters
        ----------
        model_index : int, optional
            The index of the model (starting at 0).

        Returns
        -------
        chains : list of Chain
            The chains of the model.
        """
        return self.models[model_index].chains

    def __repr__(self):
        return f"Structure({self.pdb_code!r})"

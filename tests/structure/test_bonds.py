# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import warnings
import pytest
import mmtfwriter.structure as struc
from .util import SerialCounter, make_peptide, make_residue


def _all_reported_bonds(indexer, residues):
    reported = []
    for atoms in residues:
        local_positions = struc.get_local_positions(atoms)
        for atom in atoms:
            reported.extend(indexer.iter_bonds(atom, local_positions))
    return reported


def test_intra_residue_direction():
    """
    An intra-residue bond is reported from the atom with the higher
    position in the residue.
    """
    serials = SerialCounter()
    group = make_residue("GLY", 1, serials)
    indexer = struc.BondIndexer(group.atoms)
    local_positions = struc.get_local_positions(group.atoms)
    n, ca, c, o = group.atoms
    assert list(indexer.iter_bonds(n, local_positions)) == []
    assert list(indexer.iter_bonds(ca, local_positions)) \
        == [(struc.BondScope.INTRA_RESIDUE, 1, 0, 1)]
    assert list(indexer.iter_bonds(o, local_positions)) \
        == [(struc.BondScope.INTRA_RESIDUE, 3, 2, 1)]


def test_inter_residue_direction():
    """
    An inter-residue bond is reported from the atom with the lower
    structure-wide position.
    """
    chain = make_peptide(["GLY", "GLY"])
    first, second = chain.groups
    atoms = first.atoms + second.atoms
    indexer = struc.BondIndexer(atoms)
    carbon = first.atoms[2]
    nitrogen = second.atoms[0]
    inter_bonds = [
        bond for bond in indexer.iter_bonds(
            carbon, struc.get_local_positions(first.atoms)
        )
        if bond[0] == struc.BondScope.INTER_RESIDUE
    ]
    assert inter_bonds == [(struc.BondScope.INTER_RESIDUE, 2, 4, 1)]
    assert list(indexer.iter_bonds(
        nitrogen, struc.get_local_positions(second.atoms)
    )) == []


def test_bond_totality():
    """
    Each bond of the structure is reported exactly once.
    """
    chain = make_peptide(["ALA", "SER", "ASP", "GLY", "GLU"])
    residues = [group.atoms for group in chain.groups]
    atoms = [atom for residue in residues for atom in residue]
    indexer = struc.BondIndexer(atoms)
    reported = _all_reported_bonds(indexer, residues)

    # 4 + 5 + 7 + 3 + 8 intra-residue bonds, 4 peptide bonds
    assert len(reported) == 27 + 4
    assert indexer.count_bonds(residues) == len(reported)
    intra = [b for b in reported if b[0] == struc.BondScope.INTRA_RESIDUE]
    inter = [b for b in reported if b[0] == struc.BondScope.INTER_RESIDUE]
    assert len(intra) == 27
    assert len(inter) == 4
    assert sum(indexer.count_group_bonds(res) for res in residues) == 27

    # Index validity
    for _, index_a, index_b, _ in inter:
        assert index_a < index_b < len(atoms)
    for residue in residues:
        local_positions = struc.get_local_positions(residue)
        for atom in residue:
            for scope, index_a, index_b, _ in indexer.iter_bonds(
                atom, local_positions
            ):
                if scope == struc.BondScope.INTRA_RESIDUE:
                    assert index_b < index_a < len(residue)


def test_bond_order():
    serials = SerialCounter()
    group = make_residue("GLY", 1, serials, atom_names=["C", "O"])
    group.atoms[0].bonds.clear()
    group.atoms[1].bonds.clear()
    struc.Bond(group.atoms[0], group.atoms[1], struc.BondOrder.DOUBLE)
    indexer = struc.BondIndexer(group.atoms)
    reported = _all_reported_bonds(indexer, [group.atoms])
    assert reported == [(struc.BondScope.INTRA_RESIDUE, 1, 0, 2)]


def test_atoms_without_bonds():
    atom = struc.Atom("ZN", 1, [0, 0, 0], "ZN")
    indexer = struc.BondIndexer([atom])
    assert _all_reported_bonds(indexer, [[atom]]) == []
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert indexer.count_bonds([[atom]]) == 0


def test_dangling_bond():
    """
    A bond to an atom outside of the structure is not reported and
    a warning is issued.
    """
    atom = struc.Atom("C", 1, [0, 0, 0], "C")
    outside = struc.Atom("O", 2, [1, 0, 0], "O")
    struc.Bond(atom, outside)
    indexer = struc.BondIndexer([atom])
    assert indexer.get_position(outside) == -1
    assert _all_reported_bonds(indexer, [[atom]]) == []
    with pytest.warns(struc.UnexpectedStructureWarning):
        assert indexer.count_bonds([[atom]]) == 0


def test_get_position():
    chain = make_peptide(["GLY", "ALA"])
    atoms = chain.groups[0].atoms + chain.groups[1].atoms
    indexer = struc.BondIndexer(atoms)
    assert indexer.get_atom_count() == 9
    assert [indexer.get_position(atom) for atom in atoms] \
        == list(range(9))

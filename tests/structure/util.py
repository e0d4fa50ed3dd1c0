# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Functions for building small synthetic structures and a sink that
records the calls made by the encoder.
"""

import numpy as np
import mmtfwriter.structure as struc
from mmtfwriter.structure.io.mmtf import StructureSink


# Atom names and the bonds between them, given by positions
RESIDUE_TEMPLATES = {
    "ALA": (["N", "CA", "C", "O", "CB"], [(0, 1), (1, 2), (2, 3), (1, 4)]),
    "GLY": (["N", "CA", "C", "O"], [(0, 1), (1, 2), (2, 3)]),
    "SER": (
        ["N", "CA", "C", "O", "CB", "OG"],
        [(0, 1), (1, 2), (2, 3), (1, 4), (4, 5)]
    ),
    "CYS": (
        ["N", "CA", "C", "O", "CB", "SG"],
        [(0, 1), (1, 2), (2, 3), (1, 4), (4, 5)]
    ),
    "ASP": (
        ["N", "CA", "C", "O", "CB", "CG", "OD1", "OD2"],
        [(0, 1), (1, 2), (2, 3), (1, 4), (4, 5), (5, 6), (5, 7)]
    ),
    "GLU": (
        ["N", "CA", "C", "O", "CB", "CG", "CD", "OE1", "OE2"],
        [(0, 1), (1, 2), (2, 3), (1, 4), (4, 5), (5, 6), (6, 7), (6, 8)]
    ),
}


class SerialCounter:
    """
    Hand out consecutive atom serial numbers.
    """

    def __init__(self, start=1):
        self._next = start

    def __call__(self):
        serial = self._next
        self._next += 1
        return serial


def make_residue(res_name, res_id, serials, ins_code=None,
                 atom_names=None, alt_loc=None, sec_struct=None):
    """
    Create a residue with bonded atoms.

    If `atom_names` is given, the atoms are connected linearly,
    otherwise the atoms and bonds are taken from
    :data:`RESIDUE_TEMPLATES`.
    """
    if atom_names is None:
        atom_names, bond_positions = RESIDUE_TEMPLATES[res_name]
    else:
        bond_positions = [(i, i + 1) for i in range(len(atom_names) - 1)]
    atoms = []
    for name in atom_names:
        serial = serials()
        atoms.append(struc.Atom(
            name, serial, [serial * 1.5, 0.5, -serial * 0.25],
            element=name[0], alt_loc=alt_loc,
        ))
    for i, j in bond_positions:
        struc.Bond(atoms[i], atoms[j])
    return struc.Group(
        res_name, res_id, ins_code, atoms, sec_struct=sec_struct
    )


def make_peptide(res_names, chain_name="A", asym_id=None, first_res_id=1,
                 serials=None, sec_structs=None):
    """
    Create a chain of residues that are linked by peptide bonds.
    All residues are part of the polymer sequence.
    """
    if asym_id is None:
        asym_id = chain_name
    if serials is None:
        serials = SerialCounter()
    if sec_structs is None:
        sec_structs = [None] * len(res_names)
    groups = [
        make_residue(name, first_res_id + i, serials, sec_struct=sse)
        for i, (name, sse) in enumerate(zip(res_names, sec_structs))
    ]
    link_residues(groups)
    return struc.Chain(chain_name, asym_id, groups, groups)


def link_residues(groups):
    for prev_group, next_group in zip(groups[:-1], groups[1:]):
        struc.Bond(_get_atom(prev_group, "C"), _get_atom(next_group, "N"))


def make_water(res_id, serials):
    oxygen = struc.Atom("O", serials(), [0, 0, 0], element="O")
    return struc.Group("HOH", res_id, atoms=[oxygen])


def make_structure(chains, pdb_code="1ABC", **kwargs):
    return struc.Structure(pdb_code, [struc.Model(chains)], **kwargs)


def count_input_bonds(structure):
    """
    Count the distinct bonds of all atoms in a structure.
    """
    bonds = set()
    for model in structure.models:
        for chain in model.chains:
            for group in chain.groups:
                for member in [group] + group.alt_locs:
                    for atom in member.atoms:
                        bonds.update(id(bond) for bond in atom.bonds)
    return len(bonds)


def _get_atom(group, name):
    for atom in group.atoms:
        if atom.name == name:
            return atom
    raise KeyError(f"{group!r} has no atom '{name}'")


class RecordingSink(StructureSink):
    """
    A sink that records each call as tuple of the method name and the
    arguments.
    """

    def __init__(self):
        self.events = []

    def _record(self, name, *args):
        self.events.append((name,) + tuple(
            arg.tolist() if isinstance(arg, np.ndarray) else arg
            for arg in args
        ))

    def get_events(self, name):
        return [event for event in self.events if event[0] == name]

    def init_structure(self, bond_count, atom_count, group_count,
                       chain_count, model_count, structure_id):
        self._record(
            "init_structure", bond_count, atom_count, group_count,
            chain_count, model_count, structure_id
        )

    def set_header_info(self, r_free, r_work, resolution, title,
                        deposition_date, experimental_methods):
        self._record(
            "set_header_info", r_free, r_work, resolution, title,
            deposition_date, tuple(experimental_methods)
        )

    def set_xtal_info(self, space_group, unit_cell):
        self._record("set_xtal_info", space_group, unit_cell)

    def set_bio_assembly_trans(self, assembly_index, chain_indices, matrix):
        self._record(
            "set_bio_assembly_trans", assembly_index, tuple(chain_indices),
            matrix
        )

    def set_entity_info(self, chain_indices, sequence, description,
                        details):
        self._record(
            "set_entity_info", tuple(chain_indices), sequence, description,
            details
        )

    def set_model_info(self, model_index, chain_count):
        self._record("set_model_info", model_index, chain_count)

    def set_chain_info(self, chain_name, chain_id, group_count):
        self._record("set_chain_info", chain_name, chain_id, group_count)

    def set_group_info(self, group_name, group_number, ins_code,
                       chem_comp_type, atom_count, bond_count,
                       single_letter_code, sequence_index, sec_struct):
        self._record(
            "set_group_info", group_name, group_number, ins_code,
            chem_comp_type, atom_count, bond_count, single_letter_code,
            sequence_index, sec_struct
        )

    def set_atom_info(self, atom_name, serial, alt_loc, x, y, z,
                      occupancy, b_factor, element, charge):
        self._record(
            "set_atom_info", atom_name, serial, alt_loc, x, y, z,
            occupancy, b_factor, element, charge
        )

    def set_group_bond(self, index_a, index_b, order):
        self._record("set_group_bond", index_a, index_b, order)

    def set_inter_group_bond(self, index_a, index_b, order):
        self._record("set_inter_group_bond", index_a, index_b, order)

    def finalize_structure(self):
        self._record("finalize_structure")


def make_variant_sharing_backbone(group, res_name, serials, alt_loc="B"):
    """
    Create an alternate location of `group` with a different residue
    name, that shares the *N* and *CA* atoms with `group`.
    """
    n, ca = group.atoms[:2]
    atoms = [n, ca]
    for name in RESIDUE_TEMPLATES[res_name][0][2:]:
        serial = serials()
        atoms.append(struc.Atom(
            name, serial, [serial * 1.5, 0.5, -serial * 0.25],
            element=name[0], alt_loc=alt_loc,
        ))
    for i, j in RESIDUE_TEMPLATES[res_name][1]:
        # The N-CA bond already exists in the parent residue
        if (i, j) != (0, 1):
            struc.Bond(atoms[i], atoms[j])
    return struc.Group(res_name, group.res_id, group.ins_code, atoms)

# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module prepares a :class:`Structure` for encoding.
The result is a :class:`NormalizedStructure`, a flat view on the input
structure that resolves alternate locations, chemical components and
secondary structure, without modifying the input structure.
"""

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = [
    "GroupRecord",
    "ChainRecord",
    "NormalizedStructure",
    "normalize",
    "get_atoms_for_group",
    "fix_microheterogeneity",
    "get_all_chains",
    "get_chain_id_to_index_map",
]

from .info.chemcomp import get_chem_comp
from .sse import PresetSecondaryStructure, SecondaryStructure


class GroupRecord:
    """
    A residue as it is encoded.

    Parameters
    ----------
    group : Group
        The residue in the input structure.
    atoms : list of Atom
        The atoms of the residue, including the atoms of alternate
        locations with the same residue name.
    chem_comp : ChemComp
        The resolved chemical component information.
    sec_struct : SecondaryStructure
        The resolved secondary structure.
    """

    def __init__(self, group, atoms, chem_comp, sec_struct):
        self.group = group
        self.atoms = atoms
        self.chem_comp = chem_comp
        self.sec_struct = sec_struct


class ChainRecord:
    """
    A chain as it is encoded, i.e. with its residues after resolving
    microheterogeneity.
    """

    def __init__(self, chain, groups):
        self.chain = chain
        self.groups = groups


class NormalizedStructure:
    """
    A flat view on a :class:`Structure` that is used for encoding.

    Attributes
    ----------
    structure : Structure
        The input structure.
    models : list of list of ChainRecord
        The chains of each model.
    all_chains : list of Chain
        The chains of all models in document order.
    all_atoms : list of Atom
        The atoms of all models in document order.
        The position of an atom in this list is its structure-wide
        index.
    chain_id_to_index : dict of (str -> int)
        Maps the internal chain ID to the position of the chain in
        `all_chains`.
    """

    def __init__(self, structure, models):
        self.structure = structure
        self.models = models
        self.all_chains = get_all_chains(structure)
        self.all_atoms = [
            atom for chain_records in models
            for chain_record in chain_records
            for group_record in chain_record.groups
            for atom in group_record.atoms
        ]
        self.chain_id_to_index = get_chain_id_to_index_map(self.all_chains)

    def group_count(self):
        return sum(
            len(chain_record.groups) for chain_records in self.models
            for chain_record in chain_records
        )

    def group_records(self):
        """
        Iterate over all residues of all models in document order.

        Yields
        ------
        group_record : GroupRecord
        """
        for chain_records in self.models:
            for chain_record in chain_records:
                yield from chain_record.groups


def normalize(structure, sse_assigner=None):
    """
    Create the view of a structure that is used for encoding.

    The following steps are performed:

        1. The secondary structure is assigned via the given
           `sse_assigner`.
           Residues that are not part of a polymer are always
           :attr:`SecondaryStructure.UNDETERMINED`.
        2. Alternate locations with a different residue name than
           their parent residue are split into separate residues
           (see :func:`fix_microheterogeneity()`).
        3. The chemical component of each residue is resolved.
        4. The structure-wide chain and atom lists are built.

    Parameters
    ----------
    structure : Structure
        The structure to be normalized.
        It is not modified.
    sse_assigner : SecondaryStructureAssigner, optional
        The secondary structure assignment.
        By default, the labels stored in the residues are used.

    Returns
    -------
    normalized : NormalizedStructure
        The normalized view.
    """
    if sse_assigner is None:
        sse_assigner = PresetSecondaryStructure()
    sse = sse_assigner.assign(structure)

    models = []
    for model in structure.models:
        chain_records = []
        for chain in model.chains:
            group_records = []
            for group, atoms in fix_microheterogeneity(chain.groups):
                chem_comp = group.chem_comp
                if chem_comp is None:
                    chem_comp = get_chem_comp(group.name)
                if chem_comp.is_polymer:
                    sec_struct = SecondaryStructure(
                        sse.get(group, SecondaryStructure.UNDETERMINED)
                    )
                else:
                    sec_struct = SecondaryStructure.UNDETERMINED
                group_records.append(
                    GroupRecord(group, atoms, chem_comp, sec_struct)
                )
            chain_records.append(ChainRecord(chain, group_records))
        models.append(chain_records)
    return NormalizedStructure(structure, models)


def get_atoms_for_group(group):
    """
    Get the atoms of a residue including the atoms of its alternate
    locations, that have the same residue name.

    Parameters
    ----------
    group : Group
        The residue.

    Returns
    -------
    atoms : list of Atom
        The atoms of the residue followed by the atoms of the
        alternate locations that are not already included.
    """
    return _merge_atoms([group] + _get_same_name_alt_locs(group))


def fix_microheterogeneity(groups):
    """
    Split alternate locations with a different residue name
    (microheterogeneity) into separate residues.

    Residues are never merged: Each input residue and each distinct
    residue name among its alternate locations results in one residue.

    Parameters
    ----------
    groups : iterable of Group
        The residues of a chain.

    Returns
    -------
    fixed : list of tuple(Group, list of Atom)
        The residues with their atoms.
        Each input residue is directly followed by its alternate
        locations, that have a different residue name.
        Multiple alternate locations with the same different name are
        combined into a single residue represented by the first of
        these alternate locations.
        An atom that is shared by multiple residues is only part of
        the first of these residues, so that each atom and each bond
        appears only once.
    """
    fixed = []
    included = set()
    for group in groups:
        fixed.append((group, _merge_atoms(
            [group] + _get_same_name_alt_locs(group), included
        )))
        variants = {}
        for alt_loc in group.alt_locs:
            if alt_loc.name != group.name:
                variants.setdefault(alt_loc.name, []).append(alt_loc)
        for variant_groups in variants.values():
            fixed.append(
                (variant_groups[0], _merge_atoms(variant_groups, included))
            )
    return fixed


def get_all_chains(structure):
    """
    Get the chains of all models in document order.

    Parameters
    ----------
    structure : Structure
        The structure.

    Returns
    -------
    chains : list of Chain
        The chains.
    """
    return [chain for model in structure.models for chain in model.chains]


def get_chain_id_to_index_map(chains):
    """
    Map the internal chain IDs to the position of the chains.

    Parameters
    ----------
    chains : list of Chain
        The chains, usually of all models.

    Returns
    -------
    chain_id_to_index : dict of (str -> int)
        The position for each internal chain ID.
        If multiple chains share the same ID, e.g. in different models,
        the position of the last chain is used.
    """
    return {chain.asym_id: i for i, chain in enumerate(chains)}


def _get_same_name_alt_locs(group):
    return [
        alt_loc for alt_loc in group.alt_locs if alt_loc.name == group.name
    ]


def _merge_atoms(groups, included=None):
    if included is None:
        included = set()
    atoms = []
    for group in groups:
        for atom in group.atoms:
            if atom not in included:
                included.add(atom)
                atoms.append(atom)
    return atoms

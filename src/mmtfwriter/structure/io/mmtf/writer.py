# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure.io.mmtf"
__author__ = "The mmtfwriter contributors"
__all__ = ["write_structure", "set_structure", "DEFAULT_PRODUCER"]

import datetime
from ...assembly import resolve_assemblies
from ...bonds import BondIndexer, BondScope, get_local_positions
from ...entity import resolve_entities
from ...normalize import normalize
from .encoder import MMTFEncoder
from .sink import NO_SEQUENCE_INDEX, UNAVAILABLE_CHAR

DEFAULT_PRODUCER = "mmtfwriter"


def write_structure(structure, sink, sse_assigner=None):
    """
    Encode a :class:`Structure` by passing its content to a
    :class:`StructureSink`.

    The structure is traversed depth-first in document order:
    models, chains, residues, atoms.
    Each bond is passed to the sink exactly once, when its second atom
    is visited.
    Bonds within a residue are given by residue-local atom positions,
    all other bonds by structure-wide atom indices.

    Parameters
    ----------
    structure : Structure
        The structure to be encoded.
        It is not modified.
    sink : StructureSink
        The receiver of the encoded data.
    sse_assigner : SecondaryStructureAssigner, optional
        The secondary structure assignment.
        By default, the labels stored in the residues are used.

    Raises
    ------
    ChainReferenceError
        If an entity or a biological assembly refers to a chain, that
        is not part of the structure.
        In this case no method of the sink is called.
    """
    normalized = normalize(structure, sse_assigner)
    indexer = BondIndexer(normalized.all_atoms)
    # Resolve chain references before anything is passed to the sink
    transforms = resolve_assemblies(
        structure.bio_assemblies, normalized.chain_id_to_index
    )
    entities = resolve_entities(normalized.all_chains, structure.entity_infos)
    bond_count = indexer.count_bonds(
        record.atoms for record in normalized.group_records()
    )

    sink.init_structure(
        bond_count,
        len(normalized.all_atoms),
        normalized.group_count(),
        len(normalized.all_chains),
        structure.model_count(),
        structure.pdb_code,
    )
    header = structure.header
    sink.set_header_info(
        header.r_free,
        header.r_work,
        header.resolution,
        header.title,
        _date_to_iso_string(header.deposition_date),
        [str(method) for method in header.experimental_methods],
    )
    xtal_info = structure.xtal_info
    if xtal_info is None:
        sink.set_xtal_info(None, None)
    else:
        sink.set_xtal_info(
            xtal_info.space_group, _unit_cell_as_list(xtal_info.unit_cell)
        )
    for transform in transforms:
        sink.set_bio_assembly_trans(
            transform.assembly_index, transform.chain_indices,
            transform.matrix
        )
    for entity in entities:
        sink.set_entity_info(
            entity.chain_indices, entity.sequence,
            entity.description, entity.details
        )

    for model_index, chain_records in enumerate(normalized.models):
        sink.set_model_info(model_index, len(chain_records))
        for chain_record in chain_records:
            chain = chain_record.chain
            sink.set_chain_info(
                chain.name, chain.asym_id, len(chain_record.groups)
            )
            sequence_positions = _get_sequence_positions(chain)
            for group_record in chain_record.groups:
                _write_group(
                    sink, indexer, group_record,
                    sequence_positions.get(
                        id(group_record.group), NO_SEQUENCE_INDEX
                    )
                )
    sink.finalize_structure()


def set_structure(file, structure, sse_assigner=None,
                  producer=DEFAULT_PRODUCER):
    """
    Set the content of an :class:`MMTFFile` from a :class:`Structure`.

    Parameters
    ----------
    file : MMTFFile
        The file object.
    structure : Structure
        The structure to be written.
    sse_assigner : SecondaryStructureAssigner, optional
        The secondary structure assignment.
        By default, the labels stored in the residues are used.
    producer : str, optional
        The value of the ``mmtfProducer`` field.

    Examples
    --------

    >>> atom = Atom("O", 1, [0, 0, 0], element="O")
    >>> water = Group("HOH", 1, atoms=[atom])
    >>> structure = Structure("1ABC", [Model([Chain("A", "A", [water])])])
    >>> file = MMTFFile()
    >>> set_structure(file, structure)
    >>> print(file["numModels"])
    1
    >>> print(file["groupList"][0]["groupName"])
    HOH
    """
    write_structure(structure, MMTFEncoder(file), sse_assigner)
    file["mmtfProducer"] = producer


def _write_group(sink, indexer, group_record, sequence_index):
    group = group_record.group
    atoms = group_record.atoms
    chem_comp = group_record.chem_comp
    single_letter_code = chem_comp.one_letter_code
    if not single_letter_code:
        single_letter_code = "?"
    sink.set_group_info(
        group.name,
        group.res_id,
        _char_or_unavailable(group.ins_code),
        chem_comp.type,
        len(atoms),
        indexer.count_group_bonds(atoms),
        single_letter_code[0],
        sequence_index,
        int(group_record.sec_struct),
    )
    local_positions = get_local_positions(atoms)
    for atom in atoms:
        sink.set_atom_info(
            atom.name,
            atom.serial,
            _char_or_unavailable(atom.alt_loc),
            atom.x,
            atom.y,
            atom.z,
            atom.occupancy,
            atom.b_factor,
            atom.element,
            atom.charge,
        )
        bonds = indexer.iter_bonds(atom, local_positions)
        for scope, index_a, index_b, order in bonds:
            if scope == BondScope.INTRA_RESIDUE:
                sink.set_group_bond(index_a, index_b, order)
            else:
                sink.set_inter_group_bond(index_a, index_b, order)


def _get_sequence_positions(chain):
    positions = {}
    for i, group in enumerate(chain.seqres_groups):
        positions.setdefault(id(group), i)
    return positions


def _char_or_unavailable(char):
    # Parsers may represent a missing value as empty string
    if char is None or char == "":
        return UNAVAILABLE_CHAR
    return char


def _date_to_iso_string(date):
    if date is None:
        return None
    if isinstance(date, datetime.datetime):
        date = date.date()
    return date.isoformat()


def _unit_cell_as_list(unit_cell):
    if unit_cell is None:
        return None
    return [float(value) for value in unit_cell]

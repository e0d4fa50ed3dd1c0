# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure.io.mmtf"
__author__ = "The mmtfwriter contributors"
__all__ = ["MMTFEncoder"]

import numpy as np
from ...error import BadStructureError
from .file import MMTFFile
from .sink import StructureSink


class MMTFEncoder(StructureSink):
    """
    A :class:`StructureSink` that lays out the received structure in
    the fields of an :class:`MMTFFile`.

    Residues with equal name, atoms and bonds share the same entry in
    the ``groupList``.

    Parameters
    ----------
    file : MMTFFile, optional
        The file the structure is written into, when
        :meth:`finalize_structure()` is called.
        By default, a new file is created.

    Attributes
    ----------
    file : MMTFFile
        The file the structure is written into.
    """

    def __init__(self, file=None):
        self.file = MMTFFile() if file is None else file
        self._counts = None

    def init_structure(self, bond_count, atom_count, group_count,
                       chain_count, model_count, structure_id):
        self._counts = {
            "numBonds": bond_count,
            "numAtoms": atom_count,
            "numGroups": group_count,
            "numChains": chain_count,
            "numModels": model_count,
        }
        self._structure_id = structure_id
        self._fields = {}
        self._arrays = {key: [] for key in [
            "chainsPerModel", "chainNameList", "chainIdList",
            "groupsPerChain", "groupTypeList", "groupIdList",
            "insCodeList", "sequenceIndexList", "secStructList",
            "atomIdList", "altLocList", "xCoordList", "yCoordList",
            "zCoordList", "bFactorList", "occupancyList",
            "bondAtomList", "bondOrderList",
        ]}
        self._bio_assemblies = []
        self._entities = []
        self._group_types = []
        self._group_type_indices = {}
        self._current_group = None

    def set_header_info(self, r_free, r_work, resolution, title,
                        deposition_date, experimental_methods):
        self._fields["rFree"] = r_free
        self._fields["rWork"] = r_work
        self._fields["resolution"] = resolution
        self._fields["title"] = title
        self._fields["depositionDate"] = deposition_date
        self._fields["experimentalMethods"] = list(experimental_methods)

    def set_xtal_info(self, space_group, unit_cell):
        if space_group is not None:
            self._fields["spaceGroup"] = space_group
        if unit_cell is not None:
            self._fields["unitCell"] = [float(value) for value in unit_cell]

    def set_bio_assembly_trans(self, assembly_index, chain_indices, matrix):
        while len(self._bio_assemblies) <= assembly_index:
            self._bio_assemblies.append({
                "name": str(len(self._bio_assemblies) + 1),
                "transformList": [],
            })
        self._bio_assemblies[assembly_index]["transformList"].append({
            "chainIndexList": [int(i) for i in chain_indices],
            # Row-major order
            "matrix": np.asarray(matrix, dtype=np.float64).flatten().tolist(),
        })

    def set_entity_info(self, chain_indices, sequence, description,
                        details):
        self._entities.append({
            "chainIndexList": [int(i) for i in chain_indices],
            "sequence": sequence,
            "description": description,
            "type": details,
        })

    def set_model_info(self, model_index, chain_count):
        self._arrays["chainsPerModel"].append(chain_count)

    def set_chain_info(self, chain_name, chain_id, group_count):
        self._arrays["chainNameList"].append(chain_name)
        self._arrays["chainIdList"].append(chain_id)
        self._arrays["groupsPerChain"].append(group_count)

    def set_group_info(self, group_name, group_number, ins_code,
                       chem_comp_type, atom_count, bond_count,
                       single_letter_code, sequence_index, sec_struct):
        self._flush_group()
        self._current_group = {
            "groupName": group_name,
            "singleLetterCode": single_letter_code,
            "chemCompType": chem_comp_type,
            "atomNameList": [],
            "elementList": [],
            "formalChargeList": [],
            "bondAtomList": [],
            "bondOrderList": [],
        }
        self._arrays["groupIdList"].append(group_number)
        self._arrays["insCodeList"].append(ins_code)
        self._arrays["sequenceIndexList"].append(sequence_index)
        self._arrays["secStructList"].append(sec_struct)

    def set_atom_info(self, atom_name, serial, alt_loc, x, y, z,
                      occupancy, b_factor, element, charge):
        group = self._get_current_group()
        group["atomNameList"].append(atom_name)
        group["elementList"].append(element)
        group["formalChargeList"].append(charge)
        self._arrays["atomIdList"].append(serial)
        self._arrays["altLocList"].append(alt_loc)
        self._arrays["xCoordList"].append(x)
        self._arrays["yCoordList"].append(y)
        self._arrays["zCoordList"].append(z)
        self._arrays["occupancyList"].append(occupancy)
        self._arrays["bFactorList"].append(b_factor)

    def set_group_bond(self, index_a, index_b, order):
        group = self._get_current_group()
        group["bondAtomList"].extend([index_a, index_b])
        group["bondOrderList"].append(order)

    def set_inter_group_bond(self, index_a, index_b, order):
        self._arrays["bondAtomList"].extend([index_a, index_b])
        self._arrays["bondOrderList"].append(order)

    def finalize_structure(self):
        """
        Write the received structure into :attr:`file`.

        Raises
        ------
        BadStructureError
            If the received number of bonds, atoms, residues, chains or
            models differs from the numbers given in
            :meth:`init_structure()`.
        """
        if self._counts is None:
            raise BadStructureError("'init_structure()' was not called")
        self._flush_group()
        self._check_counts()

        file = self.file
        file["structureId"] = self._structure_id
        for key, count in self._counts.items():
            file[key] = count
        for key, value in self._fields.items():
            file[key] = value
        file["bioAssemblyList"] = self._bio_assemblies
        file["entityList"] = self._entities
        file["groupList"] = self._group_types
        for key in ["xCoordList", "yCoordList", "zCoordList",
                    "bFactorList", "occupancyList"]:
            file.set_array(
                key, np.array(self._arrays.pop(key), dtype=np.float32)
            )
        for key, array in self._arrays.items():
            file[key] = array
        self._counts = None

    def _get_current_group(self):
        if self._current_group is None:
            raise BadStructureError(
                "Atoms and bonds must follow 'set_group_info()'"
            )
        return self._current_group

    def _flush_group(self):
        if self._current_group is None:
            return
        key = _as_hashable(self._current_group)
        group_type = self._group_type_indices.get(key)
        if group_type is None:
            group_type = len(self._group_types)
            self._group_type_indices[key] = group_type
            self._group_types.append(self._current_group)
        self._arrays["groupTypeList"].append(group_type)
        self._current_group = None

    def _check_counts(self):
        group_bond_count = sum(
            len(self._group_types[group_type]["bondOrderList"])
            for group_type in self._arrays["groupTypeList"]
        )
        received = {
            "numBonds": group_bond_count + len(self._arrays["bondOrderList"]),
            "numAtoms": len(self._arrays["xCoordList"]),
            "numGroups": len(self._arrays["groupIdList"]),
            "numChains": len(self._arrays["chainIdList"]),
            "numModels": len(self._arrays["chainsPerModel"]),
        }
        for key, count in self._counts.items():
            if received[key] != count:
                raise BadStructureError(
                    f"Expected {count} for '{key}', "
                    f"but {received[key]} were received"
                )


def _as_hashable(group):
    return tuple(
        (key, tuple(value) if isinstance(value, list) else value)
        for key, value in sorted(group.items())
    )

# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure.io.mmtf"
__author__ = "The mmtfwriter contributors"
__all__ = ["StructureSink", "UNAVAILABLE_CHAR", "NO_SEQUENCE_INDEX"]

import abc

# Used for absent insertion codes and absent alternate locations
UNAVAILABLE_CHAR = "\x00"
# Used for residues that are not part of the polymer sequence
NO_SEQUENCE_INDEX = -1


class StructureSink(metaclass=abc.ABCMeta):
    """
    Base class for all receivers of an encoded structure.

    :func:`write_structure()` calls the methods of a sink in a fixed
    order:

        1. :meth:`init_structure()`
        2. :meth:`set_header_info()`
        3. :meth:`set_xtal_info()`
        4. :meth:`set_bio_assembly_trans()` for each assembly
           transformation
        5. :meth:`set_entity_info()` for each entity
        6. For each model :meth:`set_model_info()`, followed for each
           chain by :meth:`set_chain_info()`, followed for each residue
           by :meth:`set_group_info()`, followed for each atom by
           :meth:`set_atom_info()` and the bonds completed by this atom
           (:meth:`set_group_bond()` and :meth:`set_inter_group_bond()`)
        7. :meth:`finalize_structure()`

    A subclass decides how the received data is laid out, e.g. in an
    *MMTF* file.
    """

    @abc.abstractmethod
    def init_structure(self, bond_count, atom_count, group_count,
                       chain_count, model_count, structure_id):
        """
        Start receiving a structure.

        Parameters
        ----------
        bond_count, atom_count, group_count, chain_count, model_count : int
            The total number of bonds, atoms, residues, chains and models
            that will be received.
            Residue and chain counts are summed over all models.
        structure_id : str
            The identifier of the structure.
        """
        pass

    @abc.abstractmethod
    def set_header_info(self, r_free, r_work, resolution, title,
                        deposition_date, experimental_methods):
        """
        Receive the header information.

        Parameters
        ----------
        r_free, r_work, resolution : float or None
        title : str or None
        deposition_date : str or None
            The deposition date in ISO-8601 format (``YYYY-MM-DD``).
        experimental_methods : list of str
        """
        pass

    @abc.abstractmethod
    def set_xtal_info(self, space_group, unit_cell):
        """
        Receive the crystallographic information.

        Parameters
        ----------
        space_group : str or None
            The space group.
            ``None`` if the structure has no crystallographic data.
        unit_cell : list of float or None
            The unit cell parameters *(a, b, c, alpha, beta, gamma)*.
            ``None`` if the structure has no crystallographic data.
        """
        pass

    @abc.abstractmethod
    def set_bio_assembly_trans(self, assembly_index, chain_indices, matrix):
        """
        Receive a transformation of a biological assembly.

        Parameters
        ----------
        assembly_index : int
            The sequential index of the assembly.
        chain_indices : list of int
            The indices of the chains the transformation applies to.
        matrix : ndarray, shape=(4,4), dtype=float
            The transformation matrix.
        """
        pass

    @abc.abstractmethod
    def set_entity_info(self, chain_indices, sequence, description,
                        details):
        """
        Receive an entity.

        Parameters
        ----------
        chain_indices : list of int
            The indices of the chains of the entity.
        sequence : str
            The one-letter sequence of the entity.
        description, details : str or None
        """
        pass

    @abc.abstractmethod
    def set_model_info(self, model_index, chain_count):
        pass

    @abc.abstractmethod
    def set_chain_info(self, chain_name, chain_id, group_count):
        """
        Receive a chain.

        Parameters
        ----------
        chain_name : str
            The public chain name.
        chain_id : str
            The internal chain identifier.
        group_count : int
            The number of residues in the chain.
        """
        pass

    @abc.abstractmethod
    def set_group_info(self, group_name, group_number, ins_code,
                       chem_comp_type, atom_count, bond_count,
                       single_letter_code, sequence_index, sec_struct):
        """
        Receive a residue.

        Parameters
        ----------
        group_name : str
            The residue name.
        group_number : int
            The residue sequence number.
        ins_code : str
            The insertion code, :const:`UNAVAILABLE_CHAR` if absent.
        chem_comp_type : str
            The chemical component type.
        atom_count, bond_count : int
            The number of atoms and of bonds within the residue.
        single_letter_code : str
            The one-letter code.
        sequence_index : int
            The position of the residue in the polymer sequence,
            :const:`NO_SEQUENCE_INDEX` if the residue is not part of it.
        sec_struct : int
            The secondary structure code
            (see :class:`SecondaryStructure`).
        """
        pass

    @abc.abstractmethod
    def set_atom_info(self, atom_name, serial, alt_loc, x, y, z,
                      occupancy, b_factor, element, charge):
        """
        Receive an atom of the current residue.

        Parameters
        ----------
        atom_name : str
        serial : int
        alt_loc : str
            The alternate location, :const:`UNAVAILABLE_CHAR` if absent.
        x, y, z : float
        occupancy, b_factor : float
        element : str or None
        charge : int
        """
        pass

    @abc.abstractmethod
    def set_group_bond(self, index_a, index_b, order):
        """
        Receive a bond within the current residue, given by the
        positions of the atoms in the residue.
        """
        pass

    @abc.abstractmethod
    def set_inter_group_bond(self, index_a, index_b, order):
        """
        Receive a bond between residues, given by the structure-wide
        atom indices.
        """
        pass

    @abc.abstractmethod
    def finalize_structure(self):
        pass

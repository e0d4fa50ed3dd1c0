# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure"
__author__ = "The mmtfwriter contributors"
__all__ = ["AssemblyTransform", "resolve_assemblies"]

import numpy as np
from .error import ChainReferenceError


class AssemblyTransform:
    """
    A transformation of a biological assembly as it is encoded, i.e.
    with chain indices instead of chain IDs.

    Parameters
    ----------
    assembly_index : int
        The sequential index of the assembly (starting at 0).
    chain_indices : list of int
        The positions of the affected chains in the structure-wide
        chain list.
    matrix : ndarray, shape=(4,4), dtype=float
        The transformation matrix.
    """

    def __init__(self, assembly_index, chain_indices, matrix):
        self.assembly_index = assembly_index
        self.chain_indices = chain_indices
        self.matrix = matrix


def resolve_assemblies(bio_assemblies, chain_id_to_index):
    """
    Expand biological assemblies into transformations with chain
    indices.

    Operations of the same assembly with equal matrices are merged into
    a single transformation.

    Parameters
    ----------
    bio_assemblies : dict of (str or int -> BioAssemblyInfo)
        The biological assemblies, mapped by their assembly ID.
    chain_id_to_index : dict of (str -> int)
        Maps internal chain IDs to the positions of the chains
        (see :func:`get_chain_id_to_index_map()`).

    Returns
    -------
    transforms : list of AssemblyTransform
        The transformations.
        The assemblies are indexed sequentially in the iteration order
        of `bio_assemblies`, independent of their assembly ID.
        Within an assembly the transformations appear in the order of
        the first occurrence of each matrix.

    Raises
    ------
    ChainReferenceError
        If an operation refers to a chain ID that is not part of
        `chain_id_to_index`.
    """
    transforms = []
    for assembly_index, assembly_id in enumerate(bio_assemblies):
        assembly = bio_assemblies[assembly_id]
        assembly_transforms = []
        for operation in assembly.operations:
            chain_indices = []
            for chain_id in operation.chain_ids:
                try:
                    chain_indices.append(chain_id_to_index[chain_id])
                except KeyError:
                    raise ChainReferenceError(
                        f"Chain '{chain_id}' of assembly '{assembly_id}' "
                        f"is not part of the structure"
                    )
            transform = _find_transform(assembly_transforms, operation.matrix)
            if transform is None:
                transform = AssemblyTransform(
                    assembly_index, [], operation.matrix.copy()
                )
                assembly_transforms.append(transform)
            for chain_index in chain_indices:
                if chain_index not in transform.chain_indices:
                    transform.chain_indices.append(chain_index)
        transforms.extend(assembly_transforms)
    return transforms


def _find_transform(transforms, matrix):
    for transform in transforms:
        if np.array_equal(transform.matrix, matrix):
            return transform
    return None

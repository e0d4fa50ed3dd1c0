# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import mmtfwriter.structure as struc


ROTATION = np.array([
    [0, -1, 0, 0],
    [1,  0, 0, 0],
    [0,  0, 1, 0],
    [0,  0, 0, 1],
], dtype=float)


def test_sequential_assembly_indices():
    """
    Assemblies are indexed in iteration order starting at 0,
    independent of their ID.
    """
    bio_assemblies = {
        "5": struc.BioAssemblyInfo([
            struc.SymmetryOperation(np.identity(4), ["A"])
        ]),
        "2": struc.BioAssemblyInfo([
            struc.SymmetryOperation(np.identity(4), ["B"]),
            struc.SymmetryOperation(ROTATION, ["A", "B"]),
        ]),
    }
    transforms = struc.resolve_assemblies(bio_assemblies, {"A": 0, "B": 1})
    assert [t.assembly_index for t in transforms] == [0, 1, 1]
    assert [t.chain_indices for t in transforms] == [[0], [1], [0, 1]]
    assert np.array_equal(transforms[2].matrix, ROTATION)


def test_equal_matrices_are_merged():
    """
    Operations of the same assembly with equal matrices result in a
    single transformation with the union of chain indices.
    """
    bio_assemblies = {
        "1": struc.BioAssemblyInfo([
            struc.SymmetryOperation(np.identity(4), ["A"]),
            struc.SymmetryOperation(ROTATION, ["A"]),
            struc.SymmetryOperation(np.identity(4), ["C", "A"]),
        ])
    }
    transforms = struc.resolve_assemblies(
        bio_assemblies, {"A": 0, "B": 1, "C": 2}
    )
    assert len(transforms) == 2
    assert transforms[0].chain_indices == [0, 2]
    assert np.array_equal(transforms[0].matrix, np.identity(4))
    assert transforms[1].chain_indices == [0]


def test_equal_matrices_of_different_assemblies_are_kept():
    bio_assemblies = {
        1: struc.BioAssemblyInfo([
            struc.SymmetryOperation(np.identity(4), ["A"])
        ]),
        2: struc.BioAssemblyInfo([
            struc.SymmetryOperation(np.identity(4), ["A"])
        ]),
    }
    transforms = struc.resolve_assemblies(bio_assemblies, {"A": 0})
    assert [t.assembly_index for t in transforms] == [0, 1]


def test_unknown_chain_id():
    bio_assemblies = {
        "1": struc.BioAssemblyInfo([
            struc.SymmetryOperation(np.identity(4), ["A", "Z"])
        ])
    }
    with pytest.raises(struc.ChainReferenceError):
        struc.resolve_assemblies(bio_assemblies, {"A": 0})


def test_input_matrix_is_not_shared():
    operation = struc.SymmetryOperation(np.identity(4), ["A"])
    bio_assemblies = {"1": struc.BioAssemblyInfo([operation])}
    transform = struc.resolve_assemblies(bio_assemblies, {"A": 0})[0]
    transform.matrix[0, 0] = 5
    assert operation.matrix[0, 0] == 1

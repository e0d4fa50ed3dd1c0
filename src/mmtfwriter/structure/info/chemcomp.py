# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure.info"
__author__ = "The mmtfwriter contributors"
__all__ = [
    "get_component_dictionary",
    "set_dictionary_path",
    "get_chem_comp",
    "link_type",
    "one_letter_code",
    "UNKNOWN_CHEM_COMP_TYPE",
    "UNKNOWN_ONE_LETTER_CODE",
]

import functools
import json
import warnings
from pathlib import Path
from ..error import UnknownResidueWarning
from ..model import ChemComp

# Data is taken from
# https://files.wwpdb.org/pub/pdb/data/monomers/components.cif
# and reduced to the '_chem_comp.type' and
# '_chem_comp.one_letter_code' items of standard amino acids,
# nucleotides, water and frequent ligands
_DICTIONARY_FILE = Path(__file__).parent / "components.json"

UNKNOWN_CHEM_COMP_TYPE = "NON-POLYMER"
UNKNOWN_ONE_LETTER_CODE = "?"


@functools.cache
def get_component_dictionary():
    """
    Get the internal subset of the PDB
    *Chemical Component Dictionary* (CCD).

    Returns
    -------
    dictionary : dict of (str -> dict)
        The CCD, mapping residue names to a dictionary with the
        ``'type'`` and ``'one_letter_code'`` of the component.

    Warnings
    --------

    Consider the return value as read-only.
    As other functions cache data from it, changing data may lead to
    undefined behavior.
    """
    try:
        with open(_DICTIONARY_FILE, "r") as file:
            return json.load(file)
    except FileNotFoundError:
        raise RuntimeError(
            f"Chemical component dictionary '{_DICTIONARY_FILE}' not found"
        )


def set_dictionary_path(path):
    """
    Replace the internal *Chemical Component Dictionary* (CCD) with a
    custom one.

    This function also clears the cache of functions depending on the
    CCD to ensure that the new CCD is used.

    Parameters
    ----------
    path : path-like
        The path to the custom CCD in JSON format.
        The JSON object maps residue names to objects with a ``type``
        and a ``one_letter_code`` member.
    """
    global _DICTIONARY_FILE
    _DICTIONARY_FILE = Path(path)

    get_component_dictionary.cache_clear()
    get_chem_comp.cache_clear()


@functools.cache
def get_chem_comp(res_name):
    """
    Get the chemical component information for a residue.

    Parameters
    ----------
    res_name : str
        The up to 3-letter residue name.

    Returns
    -------
    chem_comp : ChemComp
        The chemical component information.
        If the residue is unknown to the dictionary, a component of type
        ``'NON-POLYMER'`` with one-letter code ``'?'`` is returned and
        an :class:`UnknownResidueWarning` is issued.

    Notes
    -----
    As the return value is cached, the same :class:`ChemComp` object is
    returned for repeated calls.

    Examples
    --------

    >>> print(get_chem_comp("ALA"))
    ChemComp('L-PEPTIDE LINKING', 'A')
    >>> print(get_chem_comp("HOH"))
    ChemComp('NON-POLYMER', None)
    """
    entry = get_component_dictionary().get(res_name.upper())
    if entry is None:
        warnings.warn(
            f"Residue '{res_name}' is not part of the chemical component "
            f"dictionary, it is treated as non-polymer",
            UnknownResidueWarning,
        )
        return ChemComp(UNKNOWN_CHEM_COMP_TYPE, UNKNOWN_ONE_LETTER_CODE)
    return ChemComp(entry["type"], entry.get("one_letter_code"))


def link_type(res_name):
    """
    Get the linking type of a residue/compound.

    Parameters
    ----------
    res_name : str
        The up to 3-letter residue name.

    Returns
    -------
    link_type : str
        The link type.

    Examples
    --------

    >>> print(link_type("TRP"))
    L-PEPTIDE LINKING
    >>> print(link_type("HOH"))
    NON-POLYMER
    """
    return get_chem_comp(res_name).type


def one_letter_code(res_name):
    """
    Get the one-letter code of a residue/compound.

    Parameters
    ----------
    res_name : str
        The up to 3-letter residue name.

    Returns
    -------
    one_letter_code : str or None
        The one-letter code.
        ``None`` if no one-letter code is defined for this compound.

    Examples
    --------

    >>> print(one_letter_code("ALA"))
    A
    >>> print(one_letter_code("MSE"))
    M
    """
    return get_chem_comp(res_name).one_letter_code

# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "mmtfwriter.structure.io.mmtf"
__author__ = "The mmtfwriter contributors"
__all__ = ["MMTFFile"]

import copy
from collections.abc import MutableMapping
import numpy as np
import msgpack
from ....file import File, InvalidFileError, is_binary, is_open_compatible


class MMTFFile(File, MutableMapping):
    """
    This class represents a MMTF file.

    When reading a file, the *MessagePack* unpacker is used to create
    a dictionary of the file content.
    This dictionary is accessed by indexing the :class:`MMTFFile`
    instance directly with the dictionary keys.

    Arrays are stored as plain *MessagePack* arrays, i.e. without the
    binary *MMTF* codecs.

    Examples
    --------

    >>> file = MMTFFile()
    >>> file["title"] = "Trp-Cage Miniprotein"
    >>> file.set_array("groupIdList", np.arange(1, 4))
    >>> print(file["groupIdList"])
    [1, 2, 3]
    """

    def __init__(self):
        super().__init__()
        self._content = {}
        self._content["mmtfVersion"] = "1.0.0"
        self._content["mmtfProducer"] = "UNKNOWN"

    @classmethod
    def read(cls, file):
        """
        Read a MMTF file.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file_object : MMTFFile
            The parsed file.
        """
        mmtf_file = cls()
        # File name
        if is_open_compatible(file):
            with open(file, "rb") as f:
                content = msgpack.unpackb(f.read(), use_list=True, raw=False)
        # File object
        else:
            if not is_binary(file):
                raise TypeError("A file opened in 'binary' mode is required")
            content = msgpack.unpackb(file.read(), use_list=True, raw=False)
        if not isinstance(content, dict):
            raise InvalidFileError("The file does not contain a MMTF map")
        mmtf_file._content = content
        return mmtf_file

    def write(self, file):
        """
        Write contents into a MMTF file.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively, a file path can be supplied.
        """
        packed_bytes = msgpack.packb(
            self._content, use_bin_type=True, default=_encode_numpy
        )
        if is_open_compatible(file):
            with open(file, "wb") as f:
                f.write(packed_bytes)
        else:
            if not is_binary(file):
                raise TypeError("A file opened in 'binary' mode is required")
            file.write(packed_bytes)

    def copy(self):
        clone = type(self)()
        clone._content = copy.deepcopy(self._content)
        return clone

    def set_array(self, key, array):
        """
        Set an array value.

        Parameters
        ----------
        key : str
            The field name.
        array : array-like
            The array, it is stored as list.
        """
        self._content[key] = np.asarray(array).tolist()

    def get_array(self, key, dtype=None):
        """
        Get an array value as :class:`ndarray`.

        Parameters
        ----------
        key : str
            The field name.
        dtype : dtype, optional
            The data type of the returned array.

        Returns
        -------
        array : ndarray
            The array.
        """
        return np.array(self._content[key], dtype=dtype)

    def __getitem__(self, key):
        return self._content[key]

    def __setitem__(self, key, item):
        if isinstance(item, np.ndarray):
            raise TypeError(
                "Arrays must be added via 'set_array()'"
            )
        self._content[key] = item

    def __delitem__(self, key):
        del self._content[key]

    def __iter__(self):
        return self._content.__iter__()

    def __len__(self):
        return len(self._content)

    def __contains__(self, item):
        return item in self._content


def _encode_numpy(item):
    """
    Convert NumPy types to native Python types,
    as *Msgpack* cannot handle NumPy types (e.g. float32).

    The function is given to the Msgpack packer as value for the
    `default` parameter.
    """
    if isinstance(item, (np.generic, np.ndarray)):
        return item.tolist()
    else:
        raise TypeError(f"can not serialize '{type(item).__name__}' object")

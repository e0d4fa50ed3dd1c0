# This source code is part of the mmtfwriter package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the base class for the file classes of
*mmtfwriter*, i.e. the binary :class:`MMTFFile` container, and the
error raised when a file does not contain the expected data.
"""

__name__ = "mmtfwriter"
__author__ = "The mmtfwriter contributors"
__all__ = ["File", "InvalidFileError"]

import abc
import io
from os import PathLike


class File(metaclass=abc.ABCMeta):
    """
    Base class for all file classes.
    The constructor creates an empty file, that can be filled with data
    using the class specific setter methods.
    Conversely, the class method :func:`read()` reads a file from disk
    (or a file-like object from other sources).
    In order to write the instance content into a file the
    :func:`write()` method is used.
    """

    @classmethod
    @abc.abstractmethod
    def read(cls, file):
        """
        Parse a file (or file-like object).

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file : File
            An instance from the respective :class:`File` subclass
            representing the parsed file.
        """
        pass

    @abc.abstractmethod
    def write(self, file):
        """
        Write the contents of this :class:`File` object into a file.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        pass


class InvalidFileError(Exception):
    """
    Indicates that the file is not suitable for the requested action,
    either because the file does not contain the required data or
    because the file is malformed.
    """

    pass


def is_binary(file):
    if isinstance(file, io.BufferedIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.BufferedIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))

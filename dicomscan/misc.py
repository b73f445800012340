# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Miscellaneous helper functions"""

from pathlib import Path
from typing import Union


def is_dicom(file_path: Union[str, Path]) -> bool:
    """Return ``True`` if the file at `file_path` has the DICOM prefix.

    This function is a pared down version of
    :func:`~dicomscan.filereader.read_preamble` meant for a fast return. The
    file is read for a conformant preamble ('DICM'), returning ``True`` if
    so, and ``False`` otherwise. Files without the prefix may still be
    readable as legacy files by :func:`~dicomscan.filereader.dcmscan`.

    Parameters
    ----------
    file_path : str
        The path to the file.

    See Also
    --------
    filereader.read_preamble
    filereader.dcmscan
    """
    with open(file_path, 'rb') as fp:
        fp.read(128)  # preamble
        return fp.read(4) == b"DICM"

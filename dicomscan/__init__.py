# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""dicomscan package -- list the elements of DICOM files and decode their
pixel data.

-----------
Quick Start
-----------

1. Scan a file, print its tag listing and look at the image::

    from dicomscan import dcmscan
    parsed = dcmscan("file1.dcm")
    parsed.raise_for_status()
    for line in parsed.tag_lines:
        print(line)
    print(parsed.rows, parsed.columns, parsed.pixel_array.dtype)

2. Turn on debug logging with :func:`dicomscan.config.debug` to see each
   element's position, header bytes and length as it's read.

"""

from dicomscan.dataset import ByteOrder, FileKind, ParsedFile, TagEntry
from dicomscan.filereader import dcmscan
from dicomscan.misc import is_dicom
from dicomscan.tag import Tag

from ._version import __version__, __version_info__

__all__ = [
    "ByteOrder",
    "FileKind",
    "ParsedFile",
    "TagEntry",
    "Tag",
    "dcmscan",
    "is_dicom",
    "__version__",
    "__version_info__",
]

# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Access dicom dictionary information"""
from typing import Optional, Tuple, Union

# the actual dict of {tag: (VR, name), ...}
from dicomscan._dicom_dict import DicomDictionary
from dicomscan.tag import Tag, BaseTag


TagType = Union[int, str, Tuple[int, int], BaseTag]


def get_entry(tag: TagType) -> Optional[Tuple[str, str]]:
    """Return the ``(VR, name)`` entry for `tag` or ``None`` if the tag
    isn't in the dictionary.

    Parameters
    ----------
    tag : int or str or 2-tuple
        The tag to look up, in any form accepted by
        :func:`~dicomscan.tag.Tag`, including the 8 digit hex code used in
        the tag listing (``'00100010'``).
    """
    return DicomDictionary.get(Tag(tag))


def dictionary_has_tag(tag: TagType) -> bool:
    """Return ``True`` if `tag` is in the DICOM dictionary, ``False``
    otherwise.
    """
    return get_entry(tag) is not None


def dictionary_VR(tag: TagType) -> str:
    """Return the VR used for `tag` when the file doesn't state one.

    Raises
    ------
    KeyError
        If the tag is not present in the DICOM data dictionary.
    """
    entry = get_entry(tag)
    if entry is None:
        raise KeyError(f"Tag {Tag(tag)} not found in DICOM dictionary")

    return entry[0]


def dictionary_description(tag: TagType) -> str:
    """Return the name used for `tag` in the tag listing.

    Raises
    ------
    KeyError
        If the tag is not present in the DICOM data dictionary.
    """
    entry = get_entry(tag)
    if entry is None:
        raise KeyError(f"Tag {Tag(tag)} not found in DICOM dictionary")

    return entry[1]

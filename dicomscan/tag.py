# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Define Tag class to hold a DICOM (group, element) tag and related functions.

The 4 bytes of the DICOM tag are stored as an 'int'. Tags are
stored as a single number and separated to (group, element) as required.
"""
from typing import Tuple, Any, Union, Optional


def Tag(
    arg: Union[int, str, Tuple[int, int]], arg2: Optional[int] = None
) -> "BaseTag":
    """Create a :class:`BaseTag`.

    General function for creating a :class:`BaseTag` in any of the standard
    forms:

    * ``Tag(0x00100010)``
    * ``Tag('00100010')``
    * ``Tag((0x10, 0x10))``
    * ``Tag(0x0010, 0x0010)``

    Parameters
    ----------
    arg : int or str or 2-tuple
        If :class:`int` or :class:`str`, then either the group or the combined
        group/element number of the DICOM tag. A :class:`str` is read as
        hexadecimal, the way tags are listed by the scanner. If
        :class:`tuple` then the (group, element) numbers as :class:`int`.
    arg2 : int, optional
        The element number of the DICOM tag, required when `arg` only contains
        the group number of the tag.

    Returns
    -------
    BaseTag
    """
    if isinstance(arg, BaseTag):
        return arg

    if arg2 is not None:
        # act as if was passed a single tuple
        arg = (arg, arg2)  # type: ignore

    if isinstance(arg, (tuple, list)):
        if len(arg) != 2:
            raise ValueError("Tag must be created using an int or 2-tuple")
        if arg[0] > 0xFFFF or arg[1] > 0xFFFF:
            raise OverflowError(
                "Groups and elements of tags must each be <=2 byte integers"
            )
        long_value = (arg[0] << 16) | arg[1]
    elif isinstance(arg, str):
        try:
            long_value = int(arg, 16)
        except ValueError:
            raise ValueError(f"'{arg}' is not a valid hexadecimal tag")
    else:
        long_value = arg

    if long_value > 0xFFFFFFFF:
        raise OverflowError(
            f"Tags are limited to 32-bit length; tag {long_value!r}"
        )
    if long_value < 0:
        raise ValueError("Tags must be positive.")

    return BaseTag(long_value)


class BaseTag(int):
    """Represents a DICOM element (group, element) tag.

    Tags are represented as an :class:`int`.

    Attributes
    ----------
    element : int
        The element number of the tag.
    group : int
        The group number of the tag.
    is_private : bool
        Returns ``True`` if the corresponding element is private, ``False``
        otherwise.
    """
    def __eq__(self, other: Any) -> bool:
        """Return ``True`` if `self` equals `other`."""
        # Check if comparing with another Tag object; if not, create a temp one
        if not isinstance(other, int):
            try:
                other = Tag(other)
            except Exception:
                raise TypeError("Cannot compare Tag with non-Tag item")

        return int(self) == int(other)

    def __ne__(self, other: Any) -> bool:
        """Return ``True`` if `self` does not equal `other`."""
        return not self == other

    # any override of __eq__ requires explicit redirect of the hash function
    # to the parent class
    __hash__ = int.__hash__

    def __str__(self) -> str:
        """Return the tag value as a hex string '(gggg, eeee)'."""
        return "({0:04x}, {1:04x})".format(self.group, self.element)

    __repr__ = __str__

    @property
    def code(self) -> str:
        """Return the tag as the 8 digit upper case hex string used in the
        tag listing, e.g. ``'00100010'``.
        """
        return "{0:08X}".format(int(self))

    @property
    def group(self) -> int:
        """Return the tag's group number as :class:`int`."""
        return self >> 16

    @property
    def element(self) -> int:
        """Return the tag's element number as :class:`int`."""
        return self & 0xffff

    elem = element  # alternate syntax

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the tag is private (has an odd group number)."""
        return self.group % 2 == 1


def TupleTag(group_elem: Tuple[int, int]) -> BaseTag:
    """Fast factory for :class:`BaseTag` object with known safe (group, elem)
    :class:`tuple`
    """
    long_value = group_elem[0] << 16 | group_elem[1]
    return BaseTag(long_value)


# Define some special tags:
# See DICOM Standard Part 5, Section 7.5

# start of Sequence Item
ItemTag = TupleTag((0xFFFE, 0xE000))

# end of Sequence Item
ItemDelimiterTag = TupleTag((0xFFFE, 0xE00D))

# end of Sequence of undefined length
SequenceDelimiterTag = TupleTag((0xFFFE, 0xE0DD))


# Elements whose values set fields of the parsed file
TransferSyntaxUIDTag = TupleTag((0x0002, 0x0010))
ContentDateTag = TupleTag((0x0008, 0x0023))
ContentTimeTag = TupleTag((0x0008, 0x0033))
ModalityTag = TupleTag((0x0008, 0x0060))
PatientNameTag = TupleTag((0x0010, 0x0010))
PatientIDTag = TupleTag((0x0010, 0x0020))
SliceThicknessTag = TupleTag((0x0018, 0x0050))
SpacingBetweenSlicesTag = TupleTag((0x0018, 0x0088))
SamplesPerPixelTag = TupleTag((0x0028, 0x0002))
PhotometricInterpretationTag = TupleTag((0x0028, 0x0004))
PlanarConfigurationTag = TupleTag((0x0028, 0x0006))
NumberOfFramesTag = TupleTag((0x0028, 0x0008))
RowsTag = TupleTag((0x0028, 0x0010))
ColumnsTag = TupleTag((0x0028, 0x0011))
PixelSpacingTag = TupleTag((0x0028, 0x0030))
BitsAllocatedTag = TupleTag((0x0028, 0x0100))
PixelRepresentationTag = TupleTag((0x0028, 0x0103))
WindowCenterTag = TupleTag((0x0028, 0x1050))
WindowWidthTag = TupleTag((0x0028, 0x1051))
RescaleInterceptTag = TupleTag((0x0028, 0x1052))
RescaleSlopeTag = TupleTag((0x0028, 0x1053))
RedPaletteTag = TupleTag((0x0028, 0x1201))
GreenPaletteTag = TupleTag((0x0028, 0x1202))
BluePaletteTag = TupleTag((0x0028, 0x1203))
IconImageSequenceTag = TupleTag((0x0088, 0x0200))
PixelDataTag = TupleTag((0x7FE0, 0x0010))

# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Define the ParsedFile class and the records produced while scanning.

Overview
--------
ParsedFile
  The result of scanning one file: the ordered :class:`TagEntry` list (one
  per listed element, in stream order), the image fields picked up along
  the way and, once decoded, the pixel buffer.
"""
from enum import Enum, unique
from typing import (
    TYPE_CHECKING, Any, List, NamedTuple, Optional, Tuple, Union
)

from dicomscan.errors import (
    InvalidDicomError, UnsupportedTransferSyntaxError
)
from dicomscan.tag import (
    BaseTag, Tag, ItemTag, PatientNameTag, PatientIDTag, ContentDateTag,
    ContentTimeTag
)

if TYPE_CHECKING:  # pragma: no cover
    import numpy as np


@unique
class FileKind(str, Enum):
    """How the scanner classified a file."""
    NOT_RECOGNIZED = "NotRecognized"
    MODERN_CONTAINER = "ModernContainer"
    LEGACY_CONTAINER = "LegacyContainer"
    UNSUPPORTED_ENCODING = "UnsupportedEncoding"

    def __str__(self) -> str:
        return str.__str__(self)


@unique
class ByteOrder(str, Enum):
    """Byte order of the values in the stream."""
    LITTLE = "Little"
    BIG = "Big"

    def __str__(self) -> str:
        return str.__str__(self)


class TagEntry(NamedTuple):
    """One listed element.

    ``value`` is ``None`` for elements whose bytes are not shown as text
    (binary, sequence and oversized implicit values), and ``name`` is
    ``None`` for tags that aren't in the dictionary.
    """
    tag: BaseTag
    VR: str
    name: Optional[str]
    value: Optional[str]
    in_sequence: bool

    @property
    def code(self) -> str:
        """The tag as an 8 digit hex string, e.g. ``'00100010'``."""
        return self.tag.code

    def render(self) -> str:
        """Return the line for the tag listing.

        Lines have the form ``'00100010//Patient\\'s Name: DOE^JOHN'``, with
        ``>`` in front of the name for elements found inside a sequence and
        ``Private Tag`` as the name for tags not in the dictionary.
        """
        if self.name is None:
            info = f"Private Tag: {self.value}"
        elif self.tag == ItemTag:
            info = self.name
        else:
            info = f"{self.name}: {self.value or ''}"

        if self.in_sequence:
            info = ">" + info

        return f"{self.code}//{info}"


class ParsedFile:
    """The metadata and pixel data read from one DICOM file.

    A new instance is created for every file scanned so there is no state
    carried over between files.

    Attributes
    ----------
    filename : str or None
        The path of the scanned file or ``None`` if read from a file-like.
    file_kind : FileKind
        The result of recognising the file.
    dicm_found : bool
        ``True`` if the file has the 128 byte preamble and "DICM" prefix.
    byte_order : ByteOrder
        The byte order in use when the *Pixel Data* was reached.
    transfer_syntax_uid : str
        The (0002,0010) *Transfer Syntax UID*, ``''`` if absent.
    rows, columns : int
        The image size, ``1`` until the (0028,0010) *Rows* and (0028,0011)
        *Columns* elements are found.
    bits_allocated : int
        (0028,0100) *Bits Allocated*, default ``16``.
    samples_per_pixel : int
        (0028,0002) *Samples per Pixel*, default ``1``.
    pixel_representation : int
        ``0`` for unsigned and ``1`` for two's complement pixel data.
    photometric_interpretation : str
        The trimmed (0028,0004) *Photometric Interpretation*.
    rescale_slope, rescale_intercept : float
        Applied to every monochrome sample, default ``1.0`` and ``0.0``.
    pixel_spacing_mm : tuple of float
        The (width, height) of a pixel, default ``(1.0, 1.0)``. Only set
        from *Pixel Spacing* when its backslash is at index 1, i.e. the first
        value is a single character, otherwise the default is kept.
    pixel_depth : float
        The slice thickness or spacing between slices, default ``1.0``.
    window_center, window_width : float
        The last value of the multi-valued window elements.
    frame_count : int
        (0028,0008) *Number of Frames*, default ``1``.
    pixel_data_offset : int or None
        The position of the first pixel sample in the file.
    entries : list of TagEntry
        The listed elements in stream order.
    signed_image : bool
        ``True`` if the decoded 16-bit samples contained negative values.
    pixel_array : numpy.ndarray or None
        The decoded pixel buffer, see
        :func:`~dicomscan.pixel_data_handlers.numpy_handler.get_pixeldata`.
    """

    def __init__(self, filename: Optional[str] = None) -> None:
        self.filename = filename
        self.file_kind = FileKind.NOT_RECOGNIZED
        self.dicm_found = False
        self.byte_order = ByteOrder.LITTLE
        self.transfer_syntax_uid = ''
        self.modality = ''

        self.rows = 1
        self.columns = 1
        self.rows_found = False
        self.columns_found = False
        self.bits_allocated = 16
        self.samples_per_pixel = 1
        self.pixel_representation = 0
        self.photometric_interpretation = ''
        self.planar_configuration = 0
        self.rescale_slope = 1.0
        self.rescale_intercept = 0.0
        self.pixel_spacing_mm: Tuple[float, float] = (1.0, 1.0)
        self.pixel_depth = 1.0
        self.unit = 'mm'
        self.window_center = 0.0
        self.window_width = 0.0
        self.frame_count = 1
        self.red_palette: Optional[bytes] = None
        self.green_palette: Optional[bytes] = None
        self.blue_palette: Optional[bytes] = None

        self.pixel_data_found = False
        self.pixel_data_offset: Optional[int] = None
        self.entries: List[TagEntry] = []

        self.signed_image = False
        self.pixel_array: Optional["np.ndarray"] = None

    def __repr__(self) -> str:
        name = self.filename or '<file-like>'
        return (
            f"<ParsedFile {name!r} {self.file_kind}: "
            f"{len(self.entries)} elements>"
        )

    @property
    def tag_lines(self) -> List[str]:
        """Return the tag listing, one line per element in stream order."""
        return [entry.render() for entry in self.entries]

    @property
    def is_valid(self) -> bool:
        """Return ``True`` if the file was recognised and scanned."""
        return self.file_kind in (
            FileKind.MODERN_CONTAINER, FileKind.LEGACY_CONTAINER
        )

    @property
    def has_pixel_geometry(self) -> bool:
        """Return ``True`` if the rows, columns and pixel data offset are all
        known, which is required before the pixel data can be decoded.
        """
        return (
            self.rows_found
            and self.columns_found
            and self.pixel_data_offset is not None
        )

    def raise_for_status(self) -> None:
        """Raise an exception if the file couldn't be scanned.

        Raises
        ------
        UnsupportedTransferSyntaxError
            If the file uses a transfer syntax that can't be read.
        InvalidDicomError
            If the file wasn't recognised as DICOM.
        """
        if self.file_kind == FileKind.UNSUPPORTED_ENCODING:
            raise UnsupportedTransferSyntaxError(
                f"Unsupported transfer syntax '{self.transfer_syntax_uid}'"
            )
        if self.file_kind == FileKind.NOT_RECOGNIZED:
            raise InvalidDicomError()

    def get_entry(self, tag: Union[int, str, Tuple[int, int]]
                  ) -> Optional[TagEntry]:
        """Return the first listed :class:`TagEntry` for `tag`, or ``None``.
        """
        tag = Tag(tag)
        for entry in self.entries:
            if entry.tag == tag:
                return entry

        return None

    def get_value(self, tag: Union[int, str, Tuple[int, int]],
                  default: Any = "Undefined") -> Any:
        """Return the stripped text value of `tag` or `default`.

        Parameters
        ----------
        tag : int or str or 2-tuple
            The tag, in any form accepted by :func:`~dicomscan.tag.Tag`.
        default : optional
            Returned when the element wasn't listed or has no text value.
            Default ``'Undefined'``.
        """
        entry = self.get_entry(tag)
        if entry is None or entry.value is None:
            return default

        return entry.value.rstrip(" \x00")

    @property
    def patient_name(self) -> str:
        """(0010,0010) *Patient's Name* or ``'Undefined'``."""
        return self.get_value(PatientNameTag)

    @property
    def patient_id(self) -> str:
        """(0010,0020) *Patient ID* or ``'Undefined'``."""
        return self.get_value(PatientIDTag)

    @property
    def study_date(self) -> str:
        """(0008,0023) *Content Date* or ``'Undefined'``."""
        return self.get_value(ContentDateTag)

    @property
    def study_time(self) -> str:
        """(0008,0033) *Content Time* or ``'Undefined'``."""
        return self.get_value(ContentTimeTag)

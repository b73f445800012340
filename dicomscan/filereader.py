# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Read the metadata and pixel data of a DICOM file.

The scanner walks the file one element at a time without building a
dataset: each element is listed as a line of text and the handful of
elements needed to decode the pixel data are picked up on the way. Reading
stops as soon as the (7FE0,0010) *Pixel Data* value is reached.
"""
from enum import Enum, unique
import math
import os
from struct import unpack
from typing import BinaryIO, Callable, Dict, Optional, Union

from dicomscan import config
from dicomscan.config import logger
from dicomscan.datadict import get_entry
from dicomscan.dataset import ByteOrder, FileKind, ParsedFile, TagEntry
from dicomscan.errors import DicomScanError, InvalidValueError
from dicomscan.filebase import DicomFileLike, DicomIO
from dicomscan.pixel_data_handlers import numpy_handler
from dicomscan.tag import (
    BaseTag, TupleTag, ItemTag, ItemDelimiterTag, SequenceDelimiterTag,
    TransferSyntaxUIDTag, ModalityTag, NumberOfFramesTag, SamplesPerPixelTag,
    PhotometricInterpretationTag, PlanarConfigurationTag, RowsTag,
    ColumnsTag, PixelSpacingTag, SliceThicknessTag, SpacingBetweenSlicesTag,
    BitsAllocatedTag, PixelRepresentationTag, WindowCenterTag,
    WindowWidthTag, RescaleInterceptTag, RescaleSlopeTag, RedPaletteTag,
    GreenPaletteTag, BluePaletteTag, IconImageSequenceTag, PixelDataTag
)
from dicomscan.util.hexutil import bytes2hex
from dicomscan.vr import (
    VR, extra_length_VRs, short_length_VRs, text_VRs, float_VRs,
    vr_from_bytes
)


UNDEFINED_LENGTH = 0xFFFFFFFF

# Some generators write a length of 13 for 10 byte values
_BAD_LENGTH = 13
_CORRECTED_LENGTH = 10

# Transfer syntaxes containing these can't be read (JPEG, RLE)
_UNSUPPORTED_SYNTAXES = ("1.2.4", "1.2.5")
_BIG_ENDIAN_SYNTAX = "1.2.840.10008.1.2.2"

# The group word of (0008,xxxx) when read with the wrong byte order
_SWAPPED_GROUP_0008 = 0x0800


@unique
class ScanState(str, Enum):
    """States of the :class:`TagScanner`."""
    READING_TOP_LEVEL = "ReadingTopLevel"
    INSIDE_SEQUENCE = "InsideSequence"
    # Stopped at the start of the pixel samples
    DONE = "Done"
    # The file ended cleanly on an element boundary
    END_OF_DATA = "EndOfData"
    UNSUPPORTED_ENCODING = "UnsupportedEncoding"

    def __str__(self) -> str:
        return str.__str__(self)


HandlerType = Callable[["TagScanner", BaseTag], Optional[ScanState]]


class TagScanner:
    """Walk the elements of a DICOM stream, filling in a
    :class:`~dicomscan.dataset.ParsedFile`.

    The VR of each element is read from the stream when present and taken
    from the dictionary when the encoding is implicit. Nesting isn't
    tracked: a single flag records whether the scanner is inside any
    undefined length sequence, and it's cleared by the first item or
    sequence delimiter that follows.

    Parameters
    ----------
    fp : dicomscan.filebase.DicomIO
        The stream, positioned at the first element.
    parsed : dicomscan.dataset.ParsedFile
        Receives the tag listing and image fields.
    """

    def __init__(self, fp: DicomIO, parsed: ParsedFile) -> None:
        self.fp = fp
        self.parsed = parsed
        self.in_sequence = False
        self.odd_locations = False
        self.big_endian_syntax = False
        self.element_length = 0
        self.VR = VR.IMPLICIT
        self.finished: Optional[ScanState] = None

    @property
    def state(self) -> ScanState:
        """Return the current :class:`ScanState`."""
        if self.finished is not None:
            return self.finished
        if self.in_sequence:
            return ScanState.INSIDE_SEQUENCE

        return ScanState.READING_TOP_LEVEL

    def scan(self) -> ScanState:
        """Read elements until the *Pixel Data* or the end of the stream.

        Returns
        -------
        ScanState
            ``DONE`` if stopped at the pixel samples, ``END_OF_DATA`` if the
            stream ended between two elements or ``UNSUPPORTED_ENCODING``
            if the transfer syntax can't be read.

        Raises
        ------
        TruncatedDataError
            If the stream ends part way through an element.
        InvalidValueError
            If an image element has a value that can't be parsed and
            :attr:`~dicomscan.config.enforce_valid_values` is ``True``.
        """
        fp = self.fp
        while self.finished is None:
            if not fp.read(1):
                logger.debug("%04x: End of data", fp.tell())
                self.finished = ScanState.END_OF_DATA
                break
            fp.seek(-1, 1)

            tag = self.read_tag()
            if fp.tell() & 1:
                self.odd_locations = True

            if self.in_sequence:
                self.add_entry(tag)
                continue

            handler = self.handlers.get(tag)
            if handler is None:
                self.add_entry(tag)
            else:
                self.finished = handler(self, tag)

        return self.finished

    def read_tag(self) -> BaseTag:
        """Read the next element's tag and length.

        The length is left in :attr:`element_length` and the VR found in
        the stream, or ``VR.IMPLICIT``, in :attr:`VR`.
        """
        fp = self.fp
        tag_tell = fp.tell()
        group = fp.read_US()
        if group == _SWAPPED_GROUP_0008 and self.big_endian_syntax:
            if fp.is_little_endian:
                logger.debug(
                    "%04x: Switching to big endian byte order", tag_tell
                )
                fp.is_little_endian = False
                self.parsed.byte_order = ByteOrder.BIG
            group = 0x0008
        elem = fp.read_US()
        tag = TupleTag((group, elem))

        length = self.read_length()
        if length == _BAD_LENGTH and not self.odd_locations:
            logger.debug(
                "%04x: Length of %s changed from 13 to 10", tag_tell, tag
            )
            length = _CORRECTED_LENGTH

        if config.debugging:
            self._log_header(tag_tell, tag, length)

        # An undefined length brackets the elements of a sequence
        if length == UNDEFINED_LENGTH:
            logger.debug("%04x: Start of sequence %s", tag_tell, tag)
            length = 0
            self.in_sequence = True

        self.element_length = length
        return tag

    def read_length(self) -> int:
        """Return the length of the element whose tag was just read.

        Without a dictionary covering every tag, implicit and explicit VR
        can only be told apart by whether the next 2 bytes look like a VR.
        """
        fp = self.fp
        length_bytes = fp.read(4, need_exact_length=True)
        self.VR = vr_from_bytes(length_bytes[:2])
        endian_chr = "<" if fp.is_little_endian else ">"

        if self.VR in extra_length_VRs:
            # Explicit VR with 32-bit length if other two bytes are zero
            if length_bytes[2] == 0 or length_bytes[3] == 0:
                return fp.read_UL()
            # Implicit VR, the 4 bytes are the 32-bit length
            self.VR = VR.IMPLICIT
            return unpack(endian_chr + "L", length_bytes)[0]

        if self.VR in short_length_VRs:
            return unpack(endian_chr + "H", length_bytes[2:])[0]

        self.VR = VR.IMPLICIT
        return unpack(endian_chr + "L", length_bytes)[0]

    def _log_header(self, tag_tell: int, tag: BaseTag, length: int) -> None:
        fp = self.fp
        value_tell = fp.tell()
        fp.seek(tag_tell)
        header = fp.read(value_tell - tag_tell)
        msg = "{0:08x}: {1:<47} {2} {3} ".format(
            tag_tell, bytes2hex(header), tag, self.VR
        )
        if length == UNDEFINED_LENGTH:
            msg += "Length: Undefined length (FFFFFFFF)"
        else:
            msg += "Length: %d" % length
        logger.debug(msg)

    def read_value(self, tag: BaseTag) -> Optional[str]:
        """Read the value of an element that has no handler.

        Returns
        -------
        str or None
            The value as it appears in the listing, ``None`` if the value
            isn't shown.
        """
        fp = self.fp
        length = self.element_length
        VR_ = self.VR

        if VR_ in float_VRs:
            fp.skip(length)
            return None
        if VR_ in text_VRs:
            return fp.read_string(length)
        if VR_ == VR.US:
            if length == 2:
                return str(fp.read_US())
            return " ".join(str(fp.read_US()) for _ in range(length // 2))
        if VR_ == VR.IMPLICIT:
            value = fp.read_string(length)
            if length > config.implicit_text_limit:
                return None
            return value
        if VR_ == VR.SQ:
            # The items of other sequences are listed as the next elements
            if tag == IconImageSequenceTag or tag.is_private:
                fp.skip(length)
            return ""

        fp.skip(length)
        return ""

    def add_entry(self, tag: BaseTag, value: Optional[str] = None) -> None:
        """Add the listing entry for `tag`.

        If `value` is ``None`` the value is read from the stream according
        to the element's VR.
        """
        if tag in (ItemDelimiterTag, SequenceDelimiterTag):
            if self.in_sequence:
                logger.debug("%04x: End of sequence", self.fp.tell())
            self.in_sequence = False
            return

        name = None
        entry = get_entry(tag)
        if entry is not None:
            if self.VR == VR.IMPLICIT:
                self.VR = VR(entry[0])
            name = entry[1]

        if tag == ItemTag:
            if name is not None:
                self.parsed.entries.append(
                    TagEntry(tag, self.VR, name, None, self.in_sequence)
                )
            return

        if value is None:
            value = self.read_value(tag)

        if name is None and not value:
            return

        self.parsed.entries.append(
            TagEntry(
                tag,
                self.VR,
                name,
                value,
                self.in_sequence and self.VR != VR.SQ,
            )
        )

    def _parse_float(self, tag: BaseTag, value: str) -> Optional[float]:
        """Return `value` as a float, or ``None`` if it can't be parsed."""
        try:
            number = float(value.strip(" \x00"))
        except ValueError:
            number = None

        # 'inf', 'nan' and out of range values like '1e400'
        if number is not None and math.isfinite(number):
            return number

        msg = f"Invalid value '{value}' for element {tag}"
        if config.enforce_valid_values:
            raise InvalidValueError(msg)
        logger.warning(msg)

        return None

    def _read_lut(self) -> Optional[bytes]:
        """Return the high bytes of a palette color lookup table."""
        length = self.element_length
        if length & 1:
            logger.warning(
                "Ignoring palette color lookup table with odd length %d",
                length
            )
            self.fp.skip(length)
            return None

        return bytes(self.fp.read_US() >> 8 for _ in range(length // 2))

    # Element handlers: called with the tag once its length has been read,
    #   they consume the value and return a ScanState to stop scanning
    def _on_transfer_syntax(self, tag: BaseTag) -> Optional[ScanState]:
        value = self.fp.read_string(self.element_length)
        self.parsed.transfer_syntax_uid = value.rstrip(" \x00")
        self.add_entry(tag, value)
        if any(uid in value for uid in _UNSUPPORTED_SYNTAXES):
            logger.debug("Unsupported transfer syntax '%s'", value)
            self.parsed.file_kind = FileKind.UNSUPPORTED_ENCODING
            return ScanState.UNSUPPORTED_ENCODING

        if _BIG_ENDIAN_SYNTAX in value:
            self.big_endian_syntax = True

        return None

    def _on_modality(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length)
        self.parsed.modality = value.strip(" \x00")
        self.add_entry(tag, value)

    def _on_number_of_frames(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length)
        self.add_entry(tag, value)
        frames = self._parse_float(tag, value)
        if frames is not None and frames > 1.0:
            self.parsed.frame_count = int(frames)

    def _on_samples_per_pixel(self, tag: BaseTag) -> None:
        self.parsed.samples_per_pixel = self.fp.read_US()
        self.add_entry(tag, str(self.parsed.samples_per_pixel))

    def _on_photometric_interpretation(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length).strip(" \x00")
        self.parsed.photometric_interpretation = value
        self.add_entry(tag, value)

    def _on_planar_configuration(self, tag: BaseTag) -> None:
        self.parsed.planar_configuration = self.fp.read_US()
        self.add_entry(tag, str(self.parsed.planar_configuration))

    def _on_rows(self, tag: BaseTag) -> None:
        self.parsed.rows = self.fp.read_US()
        self.parsed.rows_found = True
        self.add_entry(tag, str(self.parsed.rows))

    def _on_columns(self, tag: BaseTag) -> None:
        self.parsed.columns = self.fp.read_US()
        self.parsed.columns_found = True
        self.add_entry(tag, str(self.parsed.columns))

    def _on_pixel_spacing(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length)
        # Only a single digit row spacing is accepted
        index = value.find("\\")
        if index == 1:
            y_scale = self._parse_float(tag, value[:index])
            x_scale = self._parse_float(tag, value[index + 1:])
            if x_scale and y_scale:
                self.parsed.pixel_spacing_mm = (x_scale, y_scale)
                self.parsed.unit = "mm"

        self.add_entry(tag, value)

    def _on_slice_spacing(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length)
        depth = self._parse_float(tag, value)
        if depth is not None:
            self.parsed.pixel_depth = depth
        self.add_entry(tag, value)

    def _on_bits_allocated(self, tag: BaseTag) -> None:
        self.parsed.bits_allocated = self.fp.read_US()
        self.add_entry(tag, str(self.parsed.bits_allocated))

    def _on_pixel_representation(self, tag: BaseTag) -> None:
        self.parsed.pixel_representation = self.fp.read_US()
        self.add_entry(tag, str(self.parsed.pixel_representation))

    def _read_last_value(self) -> str:
        value = self.fp.read_string(self.element_length)
        return value[value.rfind("\\") + 1:]

    def _on_window_center(self, tag: BaseTag) -> None:
        value = self._read_last_value()
        center = self._parse_float(tag, value)
        if center is not None:
            self.parsed.window_center = center
        self.add_entry(tag, value)

    def _on_window_width(self, tag: BaseTag) -> None:
        value = self._read_last_value()
        width = self._parse_float(tag, value)
        if width is not None:
            self.parsed.window_width = width
        self.add_entry(tag, value)

    def _on_rescale_intercept(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length)
        intercept = self._parse_float(tag, value)
        if intercept is not None:
            self.parsed.rescale_intercept = intercept
        self.add_entry(tag, value)

    def _on_rescale_slope(self, tag: BaseTag) -> None:
        value = self.fp.read_string(self.element_length)
        slope = self._parse_float(tag, value)
        if slope is not None:
            self.parsed.rescale_slope = slope
        self.add_entry(tag, value)

    def _on_red_palette(self, tag: BaseTag) -> None:
        self.parsed.red_palette = self._read_lut()
        self.add_entry(tag, str(self.element_length // 2))

    def _on_green_palette(self, tag: BaseTag) -> None:
        self.parsed.green_palette = self._read_lut()
        self.add_entry(tag, str(self.element_length // 2))

    def _on_blue_palette(self, tag: BaseTag) -> None:
        self.parsed.blue_palette = self._read_lut()
        self.add_entry(tag, str(self.element_length // 2))

    def _on_pixel_data(self, tag: BaseTag) -> Optional[ScanState]:
        self.parsed.pixel_data_found = True
        if self.element_length == 0:
            # Data follows in an undefined length item, which isn't read
            self.add_entry(tag)
            return None

        offset = self.fp.tell()
        self.parsed.pixel_data_offset = offset
        self.add_entry(tag, str(offset))
        logger.debug("%04x: Start of pixel data", offset)

        return ScanState.DONE

    handlers: Dict[int, HandlerType]
    handlers = {
        TransferSyntaxUIDTag: _on_transfer_syntax,
        ModalityTag: _on_modality,
        NumberOfFramesTag: _on_number_of_frames,
        SamplesPerPixelTag: _on_samples_per_pixel,
        PhotometricInterpretationTag: _on_photometric_interpretation,
        PlanarConfigurationTag: _on_planar_configuration,
        RowsTag: _on_rows,
        ColumnsTag: _on_columns,
        PixelSpacingTag: _on_pixel_spacing,
        SliceThicknessTag: _on_slice_spacing,
        SpacingBetweenSlicesTag: _on_slice_spacing,
        BitsAllocatedTag: _on_bits_allocated,
        PixelRepresentationTag: _on_pixel_representation,
        WindowCenterTag: _on_window_center,
        WindowWidthTag: _on_window_width,
        RescaleInterceptTag: _on_rescale_intercept,
        RescaleSlopeTag: _on_rescale_slope,
        RedPaletteTag: _on_red_palette,
        GreenPaletteTag: _on_green_palette,
        BluePaletteTag: _on_blue_palette,
        PixelDataTag: _on_pixel_data,
    }


def read_preamble(fp: DicomIO) -> bool:
    """Return ``True`` if the file has the 128 byte preamble followed by
    "DICM", leaving `fp` at the first element.

    If the prefix isn't found `fp` is rewound to the start of the file,
    as files written before DICOM 3.0 start directly with the elements.
    Files shorter than 132 bytes simply have no preamble.
    """
    fp.seek(0x80)
    if fp.read(4) == b"DICM":
        logger.debug("Found DICM prefix at position 0x80")
        return True

    logger.debug("No DICM prefix found, reading from the start of the file")
    fp.seek(0)
    return False


def read_partial(
    fileobj: BinaryIO,
    parsed: ParsedFile,
    stop_before_pixels: bool = False
) -> ParsedFile:
    """Scan the open file `fileobj` into `parsed`.

    Parameters
    ----------
    fileobj : file-like
        The opened file, positioned anywhere.
    parsed : dicomscan.dataset.ParsedFile
        A new :class:`~dicomscan.dataset.ParsedFile` to fill in.
    stop_before_pixels : bool, optional
        If ``True`` don't decode the pixel data. Default ``False``.

    Returns
    -------
    dicomscan.dataset.ParsedFile
        `parsed`, with :attr:`~dicomscan.dataset.ParsedFile.file_kind` set.

    Raises
    ------
    TruncatedDataError
        If a file with the DICM prefix ends part way through an element or
        before the end of the pixel data.
    """
    fp = DicomFileLike(fileobj)
    parsed.dicm_found = read_preamble(fp)
    scanner = TagScanner(fp, parsed)

    if parsed.dicm_found:
        state = scanner.scan()
    else:
        try:
            state = scanner.scan()
        except (DicomScanError, EOFError) as exc:
            logger.debug("Not a DICOM file: %s", exc)
            parsed.file_kind = FileKind.NOT_RECOGNIZED
            return parsed

    if state == ScanState.UNSUPPORTED_ENCODING:
        return parsed

    if not parsed.dicm_found:
        found = (
            parsed.rows_found and parsed.columns_found
            and parsed.pixel_data_found
        )
        if not found:
            logger.debug(
                "No DICM prefix and no Rows, Columns and Pixel Data "
                "elements found"
            )
            parsed.file_kind = FileKind.NOT_RECOGNIZED
            return parsed

    parsed.file_kind = (
        FileKind.MODERN_CONTAINER if parsed.dicm_found
        else FileKind.LEGACY_CONTAINER
    )
    logger.debug("Read %d elements from a %s", len(parsed.entries),
                 parsed.file_kind)

    if not stop_before_pixels and parsed.has_pixel_geometry:
        parsed.pixel_array = numpy_handler.get_pixeldata(parsed, fp)

    return parsed


def dcmscan(
    fp: Union[str, "os.PathLike[str]", BinaryIO],
    stop_before_pixels: bool = False
) -> ParsedFile:
    """Scan a DICOM file, returning its tag listing, image fields and
    pixel data.

    Parameters
    ----------
    fp : str or PathLike or file-like
        Either a file-like object, or a string or :class:`os.PathLike`
        containing the file name. A file-like object must be opened in
        binary mode and is left open; a named file is always closed before
        returning.
    stop_before_pixels : bool, optional
        If ``False`` (default), the pixel data is decoded into
        :attr:`~dicomscan.dataset.ParsedFile.pixel_array` when the rows,
        columns and pixel data have all been found. If ``True`` only the
        metadata is read.

    Returns
    -------
    dicomscan.dataset.ParsedFile
        The scan result. Files that aren't DICOM and files using a
        compressed transfer syntax are reported through
        :attr:`~dicomscan.dataset.ParsedFile.file_kind` rather than raising.

    Raises
    ------
    TruncatedDataError
        If a file with the DICM prefix ends part way through an element.
    InvalidValueError
        If an image element's value can't be parsed and
        :attr:`~dicomscan.config.enforce_valid_values` is ``True``.

    Examples
    --------
    >>> parsed = dicomscan.dcmscan("CT_small.dcm")
    >>> parsed.file_kind
    <FileKind.MODERN_CONTAINER: 'ModernContainer'>
    >>> parsed.patient_name
    'CompressedSamples^CT1'
    """
    caller_owns_file = True
    if isinstance(fp, (str, os.PathLike)):
        filename = os.fspath(fp)
        logger.debug("Reading file '{0}'".format(filename))
        fp = open(filename, 'rb')
        caller_owns_file = False
    else:
        filename = getattr(fp, 'name', None)

    parsed = ParsedFile(filename)
    try:
        read_partial(fp, parsed, stop_before_pixels=stop_before_pixels)
    finally:
        if not caller_owns_file:
            fp.close()

    return parsed

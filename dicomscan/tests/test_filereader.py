# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Unit tests for the dicomscan.filereader module."""

from io import BytesIO
import logging
from struct import pack

import numpy as np
import pytest

from dicomscan import dcmscan
from dicomscan.dataset import ByteOrder, FileKind, ParsedFile
from dicomscan.errors import (
    InvalidDicomError, InvalidValueError, TruncatedDataError,
    UnsupportedTransferSyntaxError
)
from dicomscan.filebase import DicomBytesIO
from dicomscan.filereader import ScanState, TagScanner, read_preamble
from dicomscan.tests._build import (
    PREAMBLE, UNDEFINED, delimiter, element, image_elements, pixel_data,
    text, transfer_syntax, uid, us
)
from dicomscan.util.hexutil import hex2bytes
from dicomscan.vr import VR


EXPLICIT_LE = "1.2.840.10008.1.2.1"
IMPLICIT_LE = "1.2.840.10008.1.2"
EXPLICIT_BE = "1.2.840.10008.1.2.2"
JPEG_BASELINE = "1.2.840.10008.1.2.4.50"
RLE_LOSSLESS = "1.2.840.10008.1.2.5"


def scan(data, **kwargs):
    return dcmscan(BytesIO(data), **kwargs)


def modern(*elements, syntax=EXPLICIT_LE):
    return PREAMBLE + transfer_syntax(syntax) + b"".join(elements)


def scanner_for(data, little=True):
    fp = DicomBytesIO(data)
    fp.is_little_endian = little
    return TagScanner(fp, ParsedFile())


class TestReadPreamble:
    def test_prefix(self):
        """Test the stream is left after the DICM prefix"""
        fp = DicomBytesIO(PREAMBLE + b"\x08\x00")
        assert read_preamble(fp)
        assert fp.tell() == 132

    def test_no_prefix(self):
        """Test the stream is rewound without the prefix"""
        fp = DicomBytesIO(b"\x00" * 200)
        assert not read_preamble(fp)
        assert fp.tell() == 0

    def test_short(self):
        """Test a stream shorter than the preamble"""
        fp = DicomBytesIO(b"\x08\x00\x60\x00")
        assert not read_preamble(fp)
        assert fp.tell() == 0


class TestReadLength:
    """Tests for TagScanner.read_length()"""
    def test_long_explicit(self):
        """Test an explicit VR with reserved bytes and a 32-bit length"""
        scanner = scanner_for(b"OB\x00\x00" + pack("<L", 300))
        assert scanner.read_length() == 300
        assert scanner.VR == VR.OB

    def test_long_one_reserved_zero(self):
        """Test either reserved byte being zero is enough"""
        scanner = scanner_for(b"OW\x00\x05" + pack("<L", 6))
        assert scanner.read_length() == 6
        assert scanner.VR == VR.OW

        scanner = scanner_for(b"UN\x05\x00" + pack("<L", 8))
        assert scanner.read_length() == 8

    def test_long_nonzero_reserved_is_implicit(self):
        """Test a 32-bit length that looks like a VR"""
        # Little endian 0x0102424F is b'OB\x02\x01'
        scanner = scanner_for(pack("<L", 0x0102424F))
        assert scanner.read_length() == 0x0102424F
        assert scanner.VR == VR.IMPLICIT
        assert scanner.fp.tell() == 4

    def test_short_explicit(self):
        """Test an explicit VR with a 16-bit length"""
        scanner = scanner_for(b"US" + pack("<H", 2))
        assert scanner.read_length() == 2
        assert scanner.VR == VR.US

        scanner = scanner_for(b"??" + pack("<H", 4))
        assert scanner.read_length() == 4
        assert scanner.VR == VR.QQ

    def test_implicit(self):
        """Test a 32-bit implicit length"""
        scanner = scanner_for(pack("<L", 10))
        assert scanner.read_length() == 10
        assert scanner.VR == VR.IMPLICIT

    def test_big_endian(self):
        """Test lengths follow the stream byte order"""
        scanner = scanner_for(b"US\x00\x02", little=False)
        assert scanner.read_length() == 2

        scanner = scanner_for(pack(">L", 10), little=False)
        assert scanner.read_length() == 10

        scanner = scanner_for(b"SQ\x00\x00" + pack(">L", 20), little=False)
        assert scanner.read_length() == 20


class TestReadTag:
    """Tests for TagScanner.read_tag()"""
    def test_explicit(self):
        """Test reading an explicit VR header"""
        scanner = scanner_for(element(0x00100010, "PN", text("DOE^JOHN")))
        tag = scanner.read_tag()
        assert tag == 0x00100010
        assert scanner.element_length == 8
        assert scanner.VR == VR.PN
        assert scanner.fp.tell() == 8

    def test_undefined_length(self):
        """Test an undefined length starts a sequence"""
        scanner = scanner_for(element(0x00081140, "SQ", length=UNDEFINED))
        assert scanner.state == ScanState.READING_TOP_LEVEL
        scanner.read_tag()
        assert scanner.element_length == 0
        assert scanner.in_sequence
        assert scanner.state == ScanState.INSIDE_SEQUENCE

    def test_bad_length_corrected(self):
        """Test a length of 13 is read as 10"""
        data = element(0x00080070, "LO", b"ACME MEDIC", length=13)
        scanner = scanner_for(data)
        scanner.read_tag()
        assert scanner.element_length == 10

    def test_bad_length_kept_after_odd_location(self):
        """Test a length of 13 is kept once odd positions were seen"""
        data = element(0x00080070, "LO", b"ACME MEDIC", length=13)
        scanner = scanner_for(data)
        scanner.odd_locations = True
        scanner.read_tag()
        assert scanner.element_length == 13

    def test_big_endian_switch(self):
        """Test the byte order switches at a swapped group 0008"""
        data = element(0x00080060, "CS", text("MR"), little=False)
        scanner = scanner_for(data)
        scanner.big_endian_syntax = True
        tag = scanner.read_tag()
        assert tag == 0x00080060
        assert not scanner.fp.is_little_endian
        assert scanner.parsed.byte_order == ByteOrder.BIG
        assert scanner.element_length == 2

    def test_no_switch_without_syntax(self):
        """Test the byte order is kept without a big endian syntax"""
        data = element(0x00080060, "CS", text("MR"), little=False)
        scanner = scanner_for(data)
        tag = scanner.read_tag()
        assert tag == 0x08006000
        assert scanner.fp.is_little_endian
        assert scanner.parsed.byte_order == ByteOrder.LITTLE


class TestRecognition:
    @pytest.mark.parametrize(
        'data',
        [
            b"",
            b"\x00" * 10,
            b"\x01" * 50,
            b"DICM",
            b"not a dicom file",
            b"\x00" * 131,
        ]
    )
    def test_short_input(self, data):
        """Test short input is not recognised and doesn't raise"""
        parsed = scan(data)
        assert parsed.file_kind == FileKind.NOT_RECOGNIZED
        assert not parsed.dicm_found
        assert parsed.pixel_array is None
        with pytest.raises(InvalidDicomError, match="not a valid DICOM"):
            parsed.raise_for_status()

    def test_not_dicom(self):
        """Test a file of arbitrary bytes"""
        parsed = scan(bytes(range(256)) * 4)
        assert parsed.file_kind == FileKind.NOT_RECOGNIZED

    def test_legacy_without_image(self):
        """Test a file without prefix needs rows, columns and pixel data"""
        data = (
            element(0x00100010, None, text("DOE^JOHN"))
            + element(0x00280010, None, us(2))
        )
        parsed = scan(data)
        assert parsed.file_kind == FileKind.NOT_RECOGNIZED
        assert parsed.rows_found
        assert not parsed.columns_found

    def test_legacy_implicit(self):
        """Test reading a file without the DICM prefix"""
        data = (
            element(0x00080060, None, text("MR"))
            + image_elements(1, 2, bits_allocated=8, vr=None)
            + element(0x7FE00010, None, bytes([10, 20]))
        )
        parsed = scan(data)
        assert parsed.file_kind == FileKind.LEGACY_CONTAINER
        assert not parsed.dicm_found
        assert parsed.modality == "MR"
        assert parsed.tag_lines[0] == "00080060//Modality: MR"
        assert parsed.tag_lines[2] == "00280010//Rows: 1"
        assert parsed.pixel_data_offset == len(data) - 2
        assert parsed.pixel_array.dtype == np.uint8
        assert parsed.pixel_array.tolist() == [[10, 20]]

    def test_modern_without_pixel_data(self):
        """Test a file with the prefix and no pixel data is still valid"""
        parsed = scan(modern(element(0x00100010, "PN", text("DOE^JOHN"))))
        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert parsed.is_valid
        assert not parsed.has_pixel_geometry
        assert parsed.pixel_array is None
        assert parsed.patient_name == "DOE^JOHN"

    def test_modern_without_rows(self):
        """Test the pixel data isn't decoded without the image size"""
        parsed = scan(modern(pixel_data(us(1, 2, 3, 4))))
        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert parsed.pixel_data_found
        assert parsed.pixel_data_offset is not None
        assert parsed.pixel_array is None


class TestTransferSyntax:
    @pytest.mark.parametrize('syntax', [JPEG_BASELINE, RLE_LOSSLESS])
    def test_unsupported(self, syntax):
        """Test compressed syntaxes stop the scan"""
        data = modern(
            image_elements(2, 2), pixel_data(us(1, 2, 3, 4)), syntax=syntax
        )
        parsed = scan(data)
        assert parsed.file_kind == FileKind.UNSUPPORTED_ENCODING
        assert parsed.transfer_syntax_uid == syntax
        assert not parsed.rows_found
        assert not parsed.columns_found
        assert parsed.pixel_array is None
        assert len(parsed.entries) == 1
        assert parsed.tag_lines[0].startswith(
            "00020010//Transfer Syntax UID: " + syntax
        )
        with pytest.raises(UnsupportedTransferSyntaxError):
            parsed.raise_for_status()

    def test_implicit_little(self):
        """Test an implicit VR dataset after the explicit meta group"""
        data = modern(
            element(0x00280010, None, us(1)),
            element(0x00280011, None, us(1)),
            element(0x7FE00010, None, us(5)),
            syntax=IMPLICIT_LE,
        )
        parsed = scan(data)
        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert parsed.transfer_syntax_uid == IMPLICIT_LE
        assert parsed.pixel_array.tolist() == [[5]]

    def test_big_endian(self):
        """Test the byte order switches after the meta group"""
        data = modern(
            element(0x00080060, "CS", text("MR"), little=False),
            image_elements(2, 1, little=False),
            pixel_data(us(256, 1, little=False), little=False),
            syntax=EXPLICIT_BE,
        )
        parsed = scan(data)
        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert parsed.byte_order == ByteOrder.BIG
        assert parsed.modality == "MR"
        assert (parsed.rows, parsed.columns) == (2, 1)
        assert "00080060//Modality: MR" in parsed.tag_lines
        assert parsed.pixel_array.tolist() == [[256], [1]]


class TestDcmscan:
    def setup_method(self):
        self.data = modern(
            element(0x00080060, "CS", text("CT")),
            element(0x00100010, "PN", text("DOE^JOHN")),
            element(0x00100020, "LO", text("ID1")),
            image_elements(2, 2),
            pixel_data(us(1, 2, 3, 4)),
        )

    def test_listing(self):
        """Test the tag listing of a simple file"""
        parsed = scan(self.data)
        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert parsed.dicm_found
        assert parsed.byte_order == ByteOrder.LITTLE
        offset = len(self.data) - 8
        assert parsed.tag_lines[1:] == [
            "00080060//Modality: CT",
            "00100010//Patient's Name: DOE^JOHN",
            "00100020//Patient ID: ID1 ",
            "00280002//Samples per Pixel: 1",
            "00280010//Rows: 2",
            "00280011//Columns: 2",
            "00280100//Bits Allocated: 16",
            f"7FE00010//Pixel Data: {offset}",
        ]
        assert parsed.pixel_data_offset == offset

    def test_summary(self):
        """Test the summary fields"""
        parsed = scan(self.data)
        assert parsed.patient_name == "DOE^JOHN"
        assert parsed.patient_id == "ID1"
        assert parsed.study_date == "Undefined"
        assert parsed.modality == "CT"
        assert parsed.transfer_syntax_uid == EXPLICIT_LE

    def test_pixel_array(self):
        """Test the pixel data is decoded"""
        parsed = scan(self.data)
        arr = parsed.pixel_array
        assert arr.dtype == np.uint16
        assert arr.shape == (2, 2)
        assert arr.tolist() == [[1, 2], [3, 4]]
        assert not parsed.signed_image

    def test_stop_before_pixels(self):
        """Test only the metadata is read"""
        parsed = scan(self.data, stop_before_pixels=True)
        assert parsed.pixel_array is None
        assert parsed.has_pixel_geometry

    def test_path(self, tmp_path):
        """Test reading from a path"""
        path = tmp_path / "ct.dcm"
        path.write_bytes(self.data)
        parsed = dcmscan(path)
        assert parsed.filename == str(path)
        assert parsed.pixel_array.tolist() == [[1, 2], [3, 4]]
        assert dcmscan(str(path)).patient_name == "DOE^JOHN"

    def test_file_like_left_open(self):
        """Test a caller's file-like isn't closed"""
        fp = BytesIO(self.data)
        parsed = dcmscan(fp)
        assert not fp.closed
        assert parsed.filename is None

    def test_truncated(self):
        """Test a file with the prefix that ends part way through"""
        data = PREAMBLE + element(0x00100010, "PN", text("DOE^JOHN"))[:11]
        with pytest.raises(TruncatedDataError):
            scan(data)

        with pytest.raises(EOFError):
            scan(PREAMBLE + b"\x10\x00")

    def test_truncated_pixel_data(self):
        """Test pixel data shorter than the image size"""
        data = modern(image_elements(2, 2), pixel_data(us(1, 2, 3, 4)))
        with pytest.raises(TruncatedDataError):
            scan(data[:-2])

    def test_path_closed_on_error(self, tmp_path):
        """Test a named file is closed when the scan raises"""
        path = tmp_path / "bad.dcm"
        path.write_bytes(PREAMBLE + b"\x10\x00")
        with pytest.raises(TruncatedDataError):
            dcmscan(path)
        # Windows can't remove open files
        path.unlink()


class TestListing:
    def lines(self, *elements):
        return scan(modern(*elements)).tag_lines[1:]

    def test_patient_name(self):
        """Test the line of a dictionary element"""
        bytestream = hex2bytes(
            "10 00 10 00"     # (0010,0010) Patient's Name
            " 50 4e 08 00"    # PN, length 8
            " 44 4f 45 5e"    # DOE^
            " 4a 4f 48 4e"    # JOHN
        )
        parsed = scan(modern(bytestream))
        assert parsed.tag_lines[1] == "00100010//Patient's Name: DOE^JOHN"
        assert not parsed.entries[1].in_sequence
        assert parsed.entries[1].VR == VR.PN

    def test_bad_length(self):
        """Test an element with a length of 13 for a 10 byte value"""
        lines = self.lines(
            element(0x00080070, "LO", b"ACME MEDIC", length=13),
            element(0x00100010, "PN", text("DOE^JOHN")),
        )
        assert lines == [
            "00080070//Manufacturer: ACME MEDIC",
            "00100010//Patient's Name: DOE^JOHN",
        ]

    def test_private(self):
        """Test tags that aren't in the dictionary"""
        lines = self.lines(
            element(0x00091001, "LO", text("ACME")),
            element(0x00091002, "OB", b"\x01\x02"),
        )
        assert lines == ["00091001//Private Tag: ACME"]

    def test_float_skipped(self):
        """Test binary floats are listed without a value"""
        lines = self.lines(
            element(0x00181628, "FD", pack("<d", 1.5)),
            element(0x00100010, "PN", text("DOE^JOHN")),
        )
        assert lines == [
            "00181628//Reference Pixel Physical Value X: ",
            "00100010//Patient's Name: DOE^JOHN",
        ]

    def test_us_multiple(self):
        """Test multi-valued US elements"""
        lines = self.lines(element(0x00181310, "US", us(0, 256, 256, 0)))
        assert lines == ["00181310//Acquisition Matrix: 0 256 256 0"]

    def test_binary_skipped(self):
        """Test other binary values are skipped"""
        lines = self.lines(
            element(0x00280101, "OW", b"\x01\x02\x03\x04"),
            element(0x00100010, "PN", text("DOE^JOHN")),
        )
        assert lines == [
            "00280101//Bits Stored: ",
            "00100010//Patient's Name: DOE^JOHN",
        ]

    def test_implicit_dictionary_vr(self):
        """Test implicit elements use the dictionary VR"""
        name = "A" * 50
        lines = self.lines(
            element(0x00080070, None, text(name)),
            element(0x00280010, None, us(64)),
        )
        assert lines == [
            f"00080070//Manufacturer: {name}",
            "00280010//Rows: 64",
        ]

    def test_implicit_long_unknown(self, long_implicit_text):
        """Test the limit on implicit values without a dictionary VR"""
        value = "B" * 50
        lines = self.lines(element(0x00091003, None, text(value)))
        assert lines == [f"00091003//Private Tag: {value}"]

    def test_implicit_long_unknown_hidden(self):
        """Test long implicit values without a dictionary VR are hidden"""
        lines = self.lines(
            element(0x00091003, None, text("B" * 50)),
            element(0x00091004, None, text("short")),
        )
        assert lines == ["00091004//Private Tag: short "]

    def test_undefined_length_sequence(self):
        """Test elements inside a sequence are marked"""
        data = modern(
            element(0x00081140, "SQ", length=UNDEFINED),
            delimiter(0xFFFEE000),
            element(0x00081150, "UI", uid("1.2.34")),
            element(0x00280010, "US", us(64)),
            delimiter(0xFFFEE00D),
            delimiter(0xFFFEE0DD),
            element(0x00100010, "PN", text("DOE^JOHN")),
        )
        parsed = scan(data)
        assert parsed.tag_lines[1:] == [
            "00081140//Referenced Image Sequence: ",
            "FFFEE000//>Item",
            "00081150//>Referenced SOP Class UID: 1.2.34",
            "00280010//>Rows: 64",
            "00100010//Patient's Name: DOE^JOHN",
        ]
        # Image elements inside sequences are only listed
        assert not parsed.rows_found
        assert parsed.rows == 1
        assert parsed.entries[2].in_sequence

    def test_icon_sequence_skipped(self):
        """Test the icon image sequence isn't read"""
        icon = element(0x00280010, "US", us(16))
        data = modern(
            element(0x00880200, "SQ", icon),
            element(0x00091010, "SQ", icon),
            element(0x00280010, "US", us(512)),
        )
        parsed = scan(data)
        assert parsed.tag_lines[1:] == ["00280010//Rows: 512"]
        assert parsed.rows == 512

    def test_defined_length_sequence(self):
        """Test the items of other sequences are listed"""
        item = element(0x00081150, "UI", uid("1.2.34"))
        data = modern(
            element(
                0x00081140, "SQ",
                pack("<HHL", 0xFFFE, 0xE000, len(item)) + item
            ),
        )
        assert scan(data).tag_lines[1:] == [
            "00081140//Referenced Image Sequence: ",
            "FFFEE000//Item",
            "00081150//Referenced SOP Class UID: 1.2.34",
        ]

    def test_zero_length_pixel_data(self):
        """Test empty pixel data doesn't stop the scan"""
        parsed = scan(modern(
            element(0x7FE00010, "OB", b""),
            element(0x00100010, "PN", text("DOE^JOHN")),
        ))
        assert parsed.tag_lines[1:] == [
            "7FE00010//Pixel Data: ",
            "00100010//Patient's Name: DOE^JOHN",
        ]
        assert parsed.pixel_data_found
        assert parsed.pixel_data_offset is None


class TestImageElements:
    def scan(self, *elements):
        return scan(modern(*elements))

    def test_pixel_spacing(self):
        """Test the pixel spacing is (column, row) spacing"""
        parsed = self.scan(element(0x00280030, "DS", text("2\\3")))
        assert parsed.pixel_spacing_mm == (3.0, 2.0)
        assert parsed.unit == "mm"
        assert parsed.tag_lines[1] == "00280030//Pixel Spacing: 2\\3 "

    def test_pixel_spacing_not_applied(self):
        """Test spacings with more than one leading character are ignored"""
        parsed = self.scan(element(0x00280030, "DS", text("0.5\\0.5")))
        assert parsed.pixel_spacing_mm == (1.0, 1.0)

        parsed = self.scan(element(0x00280030, "DS", text("0\\3")))
        assert parsed.pixel_spacing_mm == (1.0, 1.0)

    def test_slice_spacing(self):
        """Test the slice thickness and spacing give the pixel depth"""
        parsed = self.scan(element(0x00180050, "DS", text("2.5")))
        assert parsed.pixel_depth == 2.5

        parsed = self.scan(
            element(0x00180050, "DS", text("2.5")),
            element(0x00180088, "DS", text("3")),
        )
        assert parsed.pixel_depth == 3.0

    def test_window(self):
        """Test the last window value is used"""
        parsed = self.scan(
            element(0x00281050, "DS", text("100\\60")),
            element(0x00281051, "DS", text("400")),
        )
        assert parsed.window_center == 60.0
        assert parsed.window_width == 400.0
        assert parsed.tag_lines[1:] == [
            "00281050//Window Center: 60",
            "00281051//Window Width: 400 ",
        ]

    def test_rescale(self):
        """Test the rescale slope and intercept"""
        parsed = self.scan(
            element(0x00281052, "DS", text("-1024")),
            element(0x00281053, "DS", text("2")),
        )
        assert parsed.rescale_intercept == -1024.0
        assert parsed.rescale_slope == 2.0

    def test_frames(self):
        """Test the number of frames"""
        parsed = self.scan(element(0x00280008, "IS", text("3")))
        assert parsed.frame_count == 3

        parsed = self.scan(element(0x00280008, "IS", text("1")))
        assert parsed.frame_count == 1

    @pytest.mark.parametrize("value", ["1e400", "inf", "Infinity", "nan"])
    def test_frames_not_finite(self, value, allow_invalid_values, caplog):
        """Test a non-finite number of frames keeps the default"""
        with caplog.at_level(logging.WARNING, logger='dicomscan'):
            parsed = self.scan(
                element(0x00280008, "IS", text(value)),
                image_elements(1, 1),
                pixel_data(us(5)),
            )

        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert parsed.frame_count == 1
        assert parsed.pixel_array.tolist() == [[5]]
        assert "for element (0028, 0008)" in caplog.text

    def test_frames_not_finite_no_prefix(self, allow_invalid_values):
        """Test a non-finite number of frames in a file without the prefix"""
        parsed = scan(
            element(0x00280008, None, text("inf"))
            + image_elements(1, 1, vr=None)
            + element(0x7FE00010, None, us(5))
        )
        assert parsed.file_kind == FileKind.LEGACY_CONTAINER
        assert parsed.frame_count == 1
        assert parsed.pixel_array.tolist() == [[5]]

    def test_frames_not_finite_raises(self, enforce_valid_values):
        """Test a non-finite number of frames raises if values are enforced"""
        msg = r"Invalid value '1e400 ' for element \(0028, 0008\)"
        with pytest.raises(InvalidValueError, match=msg):
            self.scan(element(0x00280008, "IS", text("1e400")))

        parsed = scan(
            element(0x00280008, None, text("inf"))
            + image_elements(1, 1, vr=None)
            + element(0x7FE00010, None, us(5))
        )
        assert parsed.file_kind == FileKind.NOT_RECOGNIZED

    def test_rescale_not_finite(self, allow_invalid_values):
        """Test a non-finite rescale slope and intercept keep the defaults"""
        parsed = self.scan(
            element(0x00281052, "DS", text("nan")),
            element(0x00281053, "DS", text("-inf")),
            image_elements(1, 1),
            pixel_data(us(5)),
        )
        assert parsed.rescale_intercept == 0.0
        assert parsed.rescale_slope == 1.0
        assert parsed.pixel_array.tolist() == [[5]]

    def test_photometric(self):
        """Test the photometric interpretation is trimmed"""
        parsed = self.scan(element(0x00280004, "CS", text("MONOCHROME1")))
        assert parsed.photometric_interpretation == "MONOCHROME1"
        assert parsed.tag_lines[1] == (
            "00280004//Photometric Interpretation: MONOCHROME1"
        )

    def test_us_elements(self):
        """Test the US image elements"""
        parsed = self.scan(
            element(0x00280006, "US", us(1)),
            element(0x00280103, "US", us(1)),
            image_elements(3, 4, bits_allocated=8, samples_per_pixel=3),
        )
        assert parsed.planar_configuration == 1
        assert parsed.pixel_representation == 1
        assert parsed.samples_per_pixel == 3
        assert (parsed.rows, parsed.columns) == (3, 4)
        assert parsed.rows_found and parsed.columns_found
        assert parsed.bits_allocated == 8

    def test_palettes(self):
        """Test the palette lookup tables keep the high bytes"""
        parsed = self.scan(
            element(0x00281201, "OW", us(0x1234, 0xFF00)),
            element(0x00281202, "OW", b"\x01\x02\x03", length=3),
            element(0x00281203, "OW", us(0x0100, 0x0200, 0x0300)),
            element(0x00100010, "PN", text("DOE^JOHN")),
        )
        assert parsed.red_palette == b"\x12\xff"
        assert parsed.green_palette is None
        assert parsed.blue_palette == b"\x01\x02\x03"
        assert parsed.tag_lines[1:] == [
            "00281201//Red Palette Color Lookup Table Data: 2",
            "00281202//Green Palette Color Lookup Table Data: 1",
            "00281203//Blue Palette Color Lookup Table Data: 3",
            "00100010//Patient's Name: DOE^JOHN",
        ]

    def test_invalid_value_warns(self, allow_invalid_values, caplog):
        """Test an invalid value keeps the default"""
        with caplog.at_level(logging.WARNING, logger='dicomscan'):
            parsed = self.scan(element(0x00281053, "DS", text("abc")))

        assert parsed.rescale_slope == 1.0
        assert parsed.file_kind == FileKind.MODERN_CONTAINER
        assert (
            "Invalid value 'abc ' for element (0028, 1053)" in caplog.text
        )

    def test_invalid_value_raises(self, enforce_valid_values):
        """Test an invalid value raises if values are enforced"""
        msg = r"Invalid value 'abc ' for element \(0028, 1053\)"
        with pytest.raises(InvalidValueError, match=msg):
            self.scan(element(0x00281053, "DS", text("abc")))

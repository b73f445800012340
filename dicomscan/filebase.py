# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Hold the DicomIO classes, which do basic I/O for a dicom file."""

from io import BytesIO
from struct import unpack

from dicomscan.errors import TruncatedDataError


class DicomIO:
    """File object which holds the current byte order and reads the fixed
    width values of a DICOM stream.

    The ``read_US``, ``read_UL``, ``read_SV`` and ``read_FL`` methods are
    rebound whenever :attr:`is_little_endian` is set, so the byte order can
    be switched part way through a file.
    """

    # number of times to read if don't get requested bytes
    max_read_attempts = 3

    # reads longer than this check the bytes left in the stream first
    large_read_size = 0x10000

    def __init__(self, *args, **kwargs):
        # start with this by default
        self.is_little_endian = True

    def read_leUS(self) -> int:
        """Return an unsigned short from the file with little endian byte order
        """
        return unpack(b"<H", self.read(2, need_exact_length=True))[0]

    def read_beUS(self) -> int:
        """Return an unsigned short from the file with big endian byte order"""
        return unpack(b">H", self.read(2, need_exact_length=True))[0]

    def read_leUL(self) -> int:
        """Return an unsigned long read with little endian byte order"""
        return unpack(b"<L", self.read(4, need_exact_length=True))[0]

    def read_beUL(self) -> int:
        """Return an unsigned long read with big endian byte order"""
        return unpack(b">L", self.read(4, need_exact_length=True))[0]

    def read_leSV(self) -> float:
        """Return a signed 64-bit integer, as a float, read with little
        endian byte order
        """
        return float(unpack(b"<q", self.read(8, need_exact_length=True))[0])

    def read_beSV(self) -> float:
        """Return a signed 64-bit integer, as a float, read with big endian
        byte order
        """
        return float(unpack(b">q", self.read(8, need_exact_length=True))[0])

    def read_leFL(self) -> float:
        """Return a 32-bit float read with little endian byte order"""
        return unpack(b"<f", self.read(4, need_exact_length=True))[0]

    def read_beFL(self) -> float:
        """Return a 32-bit float read with big endian byte order"""
        return unpack(b">f", self.read(4, need_exact_length=True))[0]

    def read_string(self, length: int) -> str:
        """Return `length` bytes decoded as ASCII.

        Bytes outside the ASCII range are replaced rather than raising, and a
        `length` of 0 returns an empty string.
        """
        if length <= 0:
            return ''
        return self.read(length, need_exact_length=True).decode(
            'ascii', 'replace'
        )

    def skip(self, length: int) -> None:
        """Move forward `length` bytes without decoding them."""
        if length > 0:
            self.read(length, need_exact_length=True)

    def read(self, length=None, need_exact_length=False) -> bytes:
        """Reads the required length, raises TruncatedDataError if gets less

        If length is ``None``, then read all bytes
        """
        parent_read = self.parent_read
        if length is None:
            return parent_read()  # get all of it
        if need_exact_length and length > self.large_read_size:
            # a corrupt length must not allocate a huge buffer
            available = self.bytes_remaining()
            if available < length:
                raise TruncatedDataError(
                    "Unexpected end of file. {0} bytes requested but only "
                    "{1} remain at position 0x{2:x}".format(
                        length, available, self.tell()))
        bytes_read = parent_read(length)
        if len(bytes_read) < length and need_exact_length:
            # Didn't get all the desired bytes. Keep trying to get the rest.
            # If reading across network, might want to add a delay here
            attempts = 0
            max_reads = self.max_read_attempts
            while attempts < max_reads and len(bytes_read) < length:
                bytes_read += parent_read(length - len(bytes_read))
                attempts += 1
            num_bytes = len(bytes_read)
            if num_bytes < length:
                start_pos = self.tell() - num_bytes
                msg = ("Unexpected end of file. Read {0} bytes of {1} "
                       "expected starting at position 0x{2:x}".format(
                           len(bytes_read), length, start_pos))
                raise TruncatedDataError(msg)
        return bytes_read

    def bytes_remaining(self) -> int:
        """Return the number of bytes between the current position and the
        end of the stream.
        """
        position = self.tell()
        self.seek(0, 2)
        end = self.tell()
        self.seek(position)
        return end - position

    # Big/Little Endian changes functions to read unsigned
    # short or long, e.g. length fields etc
    @property
    def is_little_endian(self) -> bool:
        return self._little_endian

    @is_little_endian.setter
    def is_little_endian(self, value: bool) -> None:
        self._little_endian = value
        if value:  # Little Endian
            self.read_US = self.read_leUS
            self.read_UL = self.read_leUL
            self.read_SV = self.read_leSV
            self.read_FL = self.read_leFL
        else:  # Big Endian
            self.read_US = self.read_beUS
            self.read_UL = self.read_beUL
            self.read_SV = self.read_beSV
            self.read_FL = self.read_beFL


class DicomFileLike(DicomIO):
    def __init__(self, file_like_obj, *args, **kwargs):
        super(DicomFileLike, self).__init__(*args, **kwargs)
        self.parent = file_like_obj
        self.parent_read = getattr(file_like_obj, "read", self.no_read)
        self.seek = getattr(file_like_obj, "seek", self.no_seek)
        self.tell = file_like_obj.tell
        self.close = file_like_obj.close
        self.name = getattr(file_like_obj, 'name', '<no filename>')

    def no_read(self, bytes_read):
        """Used for file-like objects where no read is available"""
        raise IOError("This DicomFileLike object has no read() method")

    def no_seek(self, offset, from_what):
        """Used for file-like objects where no seek is available"""
        raise IOError("This DicomFileLike object has no seek() method")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class DicomBytesIO(DicomFileLike):
    def __init__(self, *args, **kwargs):
        super(DicomBytesIO, self).__init__(BytesIO(*args, **kwargs))

    def getvalue(self):
        return self.parent.getvalue()

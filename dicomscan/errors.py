# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Module for dicomscan exception classes"""


class DicomScanError(Exception):
    """Base class for all exceptions raised while scanning a file."""


class InvalidDicomError(DicomScanError):
    """Exception that is raised when the file does not appear to be DICOM.

    Files without the "DICM" prefix at position 128 are still scanned as
    legacy files; this is raised by
    :meth:`~dicomscan.dataset.ParsedFile.raise_for_status` when that scan
    did not find the *Rows*, *Columns* and *Pixel Data* elements either.
    """

    def __init__(self, *args):
        if not args:
            args = ('The specified file is not a valid DICOM file.', )
        Exception.__init__(self, *args)


class InvalidValueError(InvalidDicomError):
    """Raised when the value of an image element can't be parsed and
    :attr:`~dicomscan.config.enforce_valid_values` is ``True``.
    """


class UnsupportedTransferSyntaxError(DicomScanError):
    """Raised for a file encoded with a compressed (JPEG) transfer syntax."""

    def __init__(self, *args):
        if not args:
            args = ('The transfer syntax of the file is not supported.', )
        Exception.__init__(self, *args)


class TruncatedDataError(DicomScanError, EOFError):
    """Raised when the file ends before a value could be read in full."""

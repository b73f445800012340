# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Use the `numpy <https://numpy.org/>`_ package to convert uncompressed
pixel data to a :class:`numpy.ndarray`.

**Supported transfer syntaxes**

* 1.2.840.10008.1.2 : Implicit VR Little Endian
* 1.2.840.10008.1.2.1 : Explicit VR Little Endian
* 1.2.840.10008.1.2.2 : Explicit VR Big Endian

and files without a *Transfer Syntax UID*, which are read as little endian.

**Supported data**

Only the first frame is converted, and only for the layouts in the table
below. Other layouts leave
:attr:`~dicomscan.dataset.ParsedFile.pixel_array` as ``None``.

+-----------------+----------------+-----------------------+-------------+
| SamplesPerPixel | BitsAllocated  | Output                | Shape       |
+=================+================+=======================+=============+
| 1               | 8              | uint8, rescaled,      | (rows,      |
|                 |                | inverted if           | columns)    |
|                 |                | MONOCHROME1           |             |
+-----------------+----------------+-----------------------+-------------+
| 1               | 16             | uint16, rescaled,     | (rows,      |
|                 |                | inverted if           | columns)    |
|                 |                | MONOCHROME1, offset   |             |
|                 |                | by 32768 if negative  |             |
+-----------------+----------------+-----------------------+-------------+
| 3               | 8              | uint8, as stored      | (rows,      |
|                 |                |                       | columns, 3) |
+-----------------+----------------+-----------------------+-------------+

"""

from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from dicomscan.config import logger

if TYPE_CHECKING:  # pragma: no cover
    from dicomscan.dataset import ParsedFile
    from dicomscan.filebase import DicomIO

HANDLER_NAME = 'Numpy'

DEPENDENCIES = {
    'numpy': ('http://www.numpy.org/', 'NumPy'),
}

SUPPORTED_LAYOUTS = [(1, 8), (1, 16), (3, 8)]

# Added to 16-bit samples when any rescaled value is negative
SIGNED_OFFSET = 32768


def is_supported(parsed: "ParsedFile") -> bool:
    """Return ``True`` if the handler can convert the pixel data of
    `parsed`.
    """
    layout = (parsed.samples_per_pixel, parsed.bits_allocated)
    return layout in SUPPORTED_LAYOUTS


def pixel_dtype(parsed: "ParsedFile", byteorder: str = '<') -> np.dtype:
    """Return a :class:`numpy.dtype` for the stored samples of `parsed`.

    Parameters
    ----------
    parsed : dicomscan.dataset.ParsedFile
        The scan result with *Bits Allocated* and *Pixel Representation*.
    byteorder : str, optional
        ``'<'`` (default) for little endian or ``'>'`` for big endian.
    """
    if parsed.bits_allocated == 8:
        return np.dtype('uint8')

    kind = 'i' if parsed.pixel_representation == 1 else 'u'
    return np.dtype(
        '{}{}{}'.format(byteorder, kind, parsed.bits_allocated // 8)
    )


def get_expected_length(parsed: "ParsedFile") -> int:
    """Return the length in bytes of the first frame of `parsed`."""
    return (
        parsed.rows * parsed.columns * parsed.samples_per_pixel
        * (parsed.bits_allocated // 8)
    )


def _rescale(parsed: "ParsedFile", arr: "np.ndarray") -> "np.ndarray":
    """Apply the modality rescale, truncating towards zero."""
    out = arr.astype('float64') * parsed.rescale_slope
    out += parsed.rescale_intercept
    return np.trunc(out).astype('int64')


def _convert_8bit(parsed: "ParsedFile", arr: "np.ndarray") -> "np.ndarray":
    values = _rescale(parsed, arr)
    if parsed.photometric_interpretation == 'MONOCHROME1':
        values = 255 - values

    return (values & 0xFF).astype('uint8')


def _convert_16bit(
    parsed: "ParsedFile", arr: "np.ndarray"
) -> Tuple["np.ndarray", bool]:
    values = _rescale(parsed, arr)
    if parsed.photometric_interpretation == 'MONOCHROME1':
        values = 65535 - values

    signed = bool(values.size) and bool(values.min() < 0)
    if signed:
        values = values + SIGNED_OFFSET

    return (values & 0xFFFF).astype('uint16'), signed


def get_pixeldata(
    parsed: "ParsedFile", fp: "DicomIO"
) -> Optional["np.ndarray"]:
    """Return a :class:`numpy.ndarray` of the first frame of pixel data.

    Monochrome data has the *Rescale Slope* and *Rescale Intercept* applied
    and is inverted for ``MONOCHROME1`` so that 0 is always black. 16-bit
    data with negative values after rescaling is offset by 32768 and
    :attr:`~dicomscan.dataset.ParsedFile.signed_image` is set.

    Parameters
    ----------
    parsed : dicomscan.dataset.ParsedFile
        The scan result, with the *Rows*, *Columns* and pixel data offset
        found.
    fp : dicomscan.filebase.DicomIO
        The file that was scanned, using the byte order in effect at the
        *Pixel Data* element.

    Returns
    -------
    numpy.ndarray or None
        The pixel data shaped as (rows, columns) or (rows, columns, 3), or
        ``None`` if the layout isn't supported.

    Raises
    ------
    TruncatedDataError
        If the file ends before the end of the first frame.
    """
    if not is_supported(parsed):
        logger.debug(
            "Unable to convert pixel data with %d samples per pixel and "
            "%d bits allocated", parsed.samples_per_pixel,
            parsed.bits_allocated
        )
        return None

    fp.seek(parsed.pixel_data_offset)
    pixel_data = fp.read(
        get_expected_length(parsed), need_exact_length=True
    )

    byteorder = '<' if fp.is_little_endian else '>'
    arr = np.frombuffer(pixel_data, dtype=pixel_dtype(parsed, byteorder))

    if parsed.samples_per_pixel == 3:
        # Planar configuration isn't applied, samples are copied as stored
        return arr.reshape(parsed.rows, parsed.columns, 3).copy()

    if parsed.bits_allocated == 8:
        arr = _convert_8bit(parsed, arr)
    else:
        arr, parsed.signed_image = _convert_16bit(parsed, arr)

    return arr.reshape(parsed.rows, parsed.columns)

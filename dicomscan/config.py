# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""dicomscan configuration options."""

# doc strings following items are picked up by sphinx for documentation

import logging


enforce_valid_values = False
"""Raise :class:`~dicomscan.errors.InvalidValueError` if the value of one
of the image elements (e.g. *Rescale Slope*, *Window Center*) can't be
parsed. If ``False`` a warning is logged and the default is kept instead.

Default ``False``.
"""

implicit_text_limit = 44
"""The longest implicit VR value without a dictionary VR that will be
rendered as text in the tag listing. Longer values are usually binary and
are listed without a value.

Default ``44``.
"""

debugging: bool
"""``True`` while :func:`debug` has turned on debug logging."""


# Logging system and debug function to change logging level
logger = logging.getLogger('dicomscan')
logger.addHandler(logging.NullHandler())


def debug(debug_on=True, default_handler=True):
    """Turn on/off debugging of DICOM file scanning.

    When debugging is on, file location and details about the elements read
    at that location are logged to the 'dicomscan' logger using Python's
    :mod:`logging` module.

    Parameters
    ----------
    debug_on : bool, optional
        If ``True`` (default) then turn on debugging, ``False`` to turn off.
    default_handler : bool, optional
        If ``True`` (default) then use :class:`logging.StreamHandler` as the
        handler for log messages.
    """
    global logger, debugging

    if default_handler:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if debug_on:
        logger.setLevel(logging.DEBUG)
        debugging = True
    else:
        logger.setLevel(logging.WARNING)
        debugging = False


# force level=WARNING, in case logging default is set differently
debug(False, False)

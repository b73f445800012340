# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Decoders for the pixel data found by the scanner."""

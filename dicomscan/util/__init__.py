# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Tools for debugging and for building test streams."""

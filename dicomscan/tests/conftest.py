# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""Fixtures used in different tests."""

import pytest

from dicomscan import config


@pytest.fixture
def enforce_valid_values():
    value = config.enforce_valid_values
    config.enforce_valid_values = True
    yield
    config.enforce_valid_values = value


@pytest.fixture
def allow_invalid_values():
    value = config.enforce_valid_values
    config.enforce_valid_values = False
    yield
    config.enforce_valid_values = value


@pytest.fixture
def long_implicit_text():
    value = config.implicit_text_limit
    config.implicit_text_limit = 1000
    yield
    config.implicit_text_limit = value

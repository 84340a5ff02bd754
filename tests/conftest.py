"""Shared fixtures for license-check tests."""

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's LICENSE_CHECK_LOG_LEVEL out of the tests."""
    monkeypatch.delenv("LICENSE_CHECK_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Iterator[None]:
    """Drop handlers bound to streams captured during a test."""
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


MIT_TEXT = """MIT License

Copyright (c) 2024 Example Author

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction.
"""

BSD_2_TEXT = """Copyright (c) 2024, Example Author
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice, this
   list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS".
"""

BSD_3_TEXT = BSD_2_TEXT.replace(
    "THIS SOFTWARE",
    "3. Neither the name of the copyright holder nor the names of its\n"
    "   contributors may be used to endorse or promote products derived from\n"
    "   this software without specific prior written permission.\n\n"
    "THIS SOFTWARE",
)

APACHE_TEXT = """
                                 Apache License
                           Version 2.0, January 2004
                        http://www.apache.org/licenses/
"""

GPL_3_TEXT = """                    GNU GENERAL PUBLIC LICENSE
                       Version 3, 29 June 2007

 Copyright (C) 2007 Free Software Foundation, Inc. <https://fsf.org/>

  13. Use with the GNU Affero General Public License.

  Notwithstanding any other provision of this License, you have
permission to link or combine any covered work with a work licensed
under version 3 of the GNU Affero General Public License into a single
combined work.
"""


@pytest.fixture
def mit_text() -> str:
    """Standard MIT license text."""
    return MIT_TEXT


@pytest.fixture
def bsd_2_text() -> str:
    """Standard BSD 2-Clause license body without a title."""
    return BSD_2_TEXT


@pytest.fixture
def bsd_3_text() -> str:
    """Standard BSD 3-Clause license body without a title."""
    return BSD_3_TEXT


@pytest.fixture
def apache_text() -> str:
    """Apache License 2.0 header."""
    return APACHE_TEXT


@pytest.fixture
def gpl_3_text() -> str:
    """GPL-3.0 header plus the section that mentions the Affero license."""
    return GPL_3_TEXT

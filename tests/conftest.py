#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pytest configuration and shared fixtures for the orglens test suite."""

import os
from pathlib import Path
from textwrap import dedent

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")


@pytest.fixture
def sample_note() -> str:
    """A note exercising metadata, blocks, inline markup and a logbook drawer."""
    return dedent(
        """\
        :PROPERTIES:
        :ID: 4f9c2a1e-note
        :END:
        #+title: Project Ideas
        #+category: work
        #+tags: planning  emacs
        #+author: Sam
        #+startup: overview

        * Next steps
        SCHEDULED: <2024-01-20 Sat>
        Write the *draft* and check /typos/.
        - read =parser.py=
        - see [[https://orgmode.org][Org manual]]

        #+BEGIN_SRC python
        print("hi")
        #+END_SRC
        -----
        ** Logbook
        :LOGBOOK:
        CLOCK: [2024-01-15 Mon 10:00]--[2024-01-15 Mon 12:00] =>  2:00
        - State "DONE"       from "TODO"       [2024-01-15 Mon 12:05]
        :END:
        """
    )


@pytest.fixture
def note_file(tmp_path: Path, sample_note: str) -> Path:
    """The sample note written to a temporary .org file."""
    path = tmp_path / "note.org"
    path.write_text(sample_note, encoding="utf-8")
    return path

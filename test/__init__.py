"""Test suite for the CIFMark package.

This package contains tests for all CIFMark functionality including:
- Line tokenization and token classification
- Block parsing (highlight tokens and loop blocks)
- JSON serialization
- Host facade, reader, and DataFrame views

Run tests with pytest:
    pytest                  # Run all tests
    pytest -v              # Verbose output
    pytest -m unit         # Run only unit tests
    pytest -m parser       # Run only tokenizer/parser tests
    pytest -m integration  # Run only integration tests
"""

__version__ = "0.1.0"

"""Unit tests for reading CIF files from different inputs."""

from pathlib import Path

import pytest

import cifmark


@pytest.mark.unit
class TestRead:
    """Test suite for `cifmark.read`."""

    def test_read_string(self, sample_mmcif_content: str) -> None:
        """Test reading a CIF file from a string."""
        assert cifmark.read(sample_mmcif_content) == cifmark.parse(sample_mmcif_content)

    def test_read_bytes(self, sample_mmcif_content: str) -> None:
        """Test reading a CIF file from bytes."""
        content = sample_mmcif_content.encode("utf-8")

        assert cifmark.read(content) == cifmark.parse(sample_mmcif_content)

    def test_read_bytes_with_encoding(self) -> None:
        """Test decoding bytes with a given encoding."""
        content = "_a.b Å".encode("latin-1")

        result = cifmark.read(content, encoding="latin-1", offset_unit="utf-8")

        assert result.tokens[-1].length == 2

    def test_read_path(self, temp_cif_file: Path, sample_mmcif_content: str) -> None:
        """Test reading a CIF file from a path."""
        assert cifmark.read(temp_cif_file) == cifmark.parse(sample_mmcif_content)

    def test_read_missing_path(self, tmp_path: Path) -> None:
        """Test that reading a missing file raises."""
        with pytest.raises(FileNotFoundError):
            cifmark.read(tmp_path / "missing.cif")

    def test_read_invalid_type(self) -> None:
        """Test that unsupported input types raise a `ValueError`."""
        with pytest.raises(ValueError, match="Parameter `file`"):
            cifmark.read(123)  # type: ignore[arg-type]

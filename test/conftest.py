"""Fixtures for the CIFMark test suite."""

from typing import Generator
import tempfile
from pathlib import Path

import pytest


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def single_item_content() -> str:
    """A single bare data item."""
    return "_entry.id TEST"


@pytest.fixture
def atom_site_loop_content() -> str:
    """A loop with two fields and two rows."""
    return """loop_
_atom_site.id
_atom_site.type_symbol
1 C
2 N
"""


@pytest.fixture
def text_field_loop_content() -> str:
    """A loop with two fields, whose fourth value is a text field.

    The text field starts at line 5 and ends at line 8.
    """
    return """loop_
_x.a
_x.b
1 A
2
;
line one
line two
;
"""


@pytest.fixture
def sample_mmcif_content() -> str:
    """Sample mmCIF content with bare items, loops, comments, and a text field."""
    return """data_test_structure
# Entry information
_entry.id  'TEST'
_entry.title  'Test Structure'
_struct.pdbx_descriptor
;
Hypothetical protein
  with a multi-line description
;

loop_
_atom_site.id
_atom_site.type_symbol
_atom_site.label_atom_id
_atom_site.Cartn_x
_atom_site.Cartn_y
_atom_site.Cartn_z
1  C  "C1'"  10.0  20.0  30.0
2  N  O5'    11.0  21.0
31.0
3  O  O  12.0  22.0  32.0
#
loop_
_cell.length_a
_cell.length_b
_cell.length_c
10.5  20.5  30.5
"""


@pytest.fixture
def sample_dict_file_content() -> str:
    """Sample CIF dictionary content with save frames."""
    return """data_test_dictionary

save_test_category
    _category.description  'Test category description'
    _category.id  test_category
    _category.mandatory_code  no

    loop_
    _category_key.name
    'test_category.id'
save_

save_test_category.id
    _item.name  'test_category.id'
    _item.category_id  test_category
save_
"""


@pytest.fixture
def sample_cif1_content() -> str:
    """Sample CIF 1.1 content, whose data names have no category."""
    return """data_test_block
_single_item_1  'value1'
_single_item_2  10.5

loop_
_loop_item_1
_loop_item_2
'row1_col1'  1.0
'row2_col1'  2.0
"""


@pytest.fixture
def malformed_content() -> str:
    """Irregular content that must still be parsed without errors."""
    return """loop_
loop_
1 2 3
_a.b-c 1
_bad.
'unterminated value
_a.x 'it's' here
1 2 3 4 5
;
# comment inside a text field
global_
_z.z
"""


@pytest.fixture(
    params=[
        "single_item_content",
        "atom_site_loop_content",
        "text_field_loop_content",
        "sample_mmcif_content",
        "sample_dict_file_content",
        "sample_cif1_content",
        "malformed_content",
    ]
)
def any_content(request: pytest.FixtureRequest) -> str:
    """Each of the sample contents above."""
    return request.getfixturevalue(request.param)


@pytest.fixture
def temp_cif_file(sample_mmcif_content: str) -> Generator[Path, None, None]:
    """Create a temporary CIF file for testing file I/O.

    Yields
    ------
    Path
        Path to the temporary CIF file.
    """
    with tempfile.NamedTemporaryFile(mode='w', suffix='.cif', delete=False, encoding="utf-8") as f:
        f.write(sample_mmcif_content)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()

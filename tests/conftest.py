# tests/conftest.py

import pytest

from snowcut.parse import parse_adjacency

SAMPLE = """
jqt: rhn xhk nvd
rsh: frs pzl lsr
xhk: hfx
cmg: qnr nvd lhk bvb
rhn: xhk bvb hfx
bvb: xhk hfx
pzl: lsr hfx nvd
qnr: nvd
ntq: jqt hfx bvb xhk
nvd: lhk
lsr: lhk
rzs: qnr cmg lsr rsh
frs: qnr lhk lsr
"""

@pytest.fixture
def sample_text():
    return SAMPLE

@pytest.fixture
def sample_adjacency():
    return parse_adjacency(SAMPLE)

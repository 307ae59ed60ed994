from dspf.model import Attribute
from dspf.subfile import adapt_position, is_subfile


def test_is_subfile_needs_exact_keyword():
    assert is_subfile([Attribute(value="SFL")])
    assert is_subfile([Attribute(value="sfl")])
    assert not is_subfile([Attribute(value="SFLCTL(SFL01)")])
    assert not is_subfile([Attribute(value="SFL SFLNXTCHG")])
    assert not is_subfile([])


def test_adapt_position_swaps_only_for_subfiles():
    assert adapt_position(10, 3, subfile=True) == (3, 10)
    assert adapt_position(10, 3, subfile=False) == (10, 3)
    assert adapt_position(None, None, subfile=True) == (None, None)

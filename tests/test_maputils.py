from tcutils.maputils import map_get_value, multimap_erase_pair


def test_map_get_value_present():
    assert map_get_value({"a": 1, "b": 2}, "b") == 2


def test_map_get_value_missing():
    assert map_get_value({"a": 1}, "z") is None


def test_multimap_erase_pair_removes_all_matches():
    multimap = {1: ["x", "y", "x"], 2: ["x"]}
    assert multimap_erase_pair(multimap, 1, "x") == 2
    assert multimap == {1: ["y"], 2: ["x"]}


def test_multimap_erase_pair_drops_empty_key():
    multimap = {1: ["x"], 2: ["y"]}
    assert multimap_erase_pair(multimap, 1, "x") == 1
    assert multimap == {2: ["y"]}


def test_multimap_erase_pair_no_match():
    multimap = {1: ["x"]}
    assert multimap_erase_pair(multimap, 1, "q") == 0
    assert multimap_erase_pair(multimap, 5, "x") == 0
    assert multimap == {1: ["x"]}
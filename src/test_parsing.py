import pytest

from parsing import normalize_sex, parse_layout, parse_pedigree_records, parse_variant_calls


@pytest.mark.parametrize(
    "value, expected",
    [("male", "male"), ("M", "male"), (1, "male"), ("F", "female"), ("2", "female"), (0, "unknown"), (None, "unknown")],
)
def test_normalize_sex(value, expected):
    assert normalize_sex(value) == expected


def test_pedigree_records():
    records = parse_pedigree_records(
        [{"individualId": 1, "sex": "1", "sampleIds": {"name": "S1", "children": []}}, {"individualId": 2}]
    )
    assert records[0]["sex"] == "male"
    assert records[1] == {"individualId": 2, "sex": "unknown", "sampleIds": None}


def test_pedigree_record_without_id():
    with pytest.raises(ValueError):
        parse_pedigree_records([{"sex": "male"}])


def test_sample_tree_without_name():
    with pytest.raises(ValueError):
        parse_pedigree_records([{"individualId": 1, "sampleIds": {"children": [{}]}}])


def test_layout_missing_keys(trio_layout):
    del trio_layout["layout"]["spouse"]
    del trio_layout["pedigree"]["mindex"]
    with pytest.raises(ValueError, match="spouse, mindex"):
        parse_layout(trio_layout)


def test_layout_ragged_rows(trio_layout):
    trio_layout["layout"]["pos"].append([0])
    with pytest.raises(ValueError):
        parse_layout(trio_layout)


def test_layout_scalar_parent_index():
    data = {
        "layout": {"nid": [[1]], "n": [1], "pos": [[0]], "spouse": [[0]]},
        "pedigree": {"findex": 0, "mindex": 0},
    }
    assert parse_layout(data)["pedigree"] == {"findex": [0], "mindex": [0]}


def test_variant_calls(trio_variants):
    parsed = parse_variant_calls(trio_variants)
    assert parsed["header"]["sampleNames"][0] == "GL-1"
    assert len(parsed["records"]) == 1

    assert parse_variant_calls({}) == {"header": {"sampleNames": []}, "records": []}
    with pytest.raises(ValueError):
        parse_variant_calls({"records": {}})


def test_variant_record_without_info():
    with pytest.raises(ValueError):
        parse_variant_calls({"records": [{"INFO": None}]})
    with pytest.raises(ValueError):
        parse_variant_calls({"records": ["GL-1"]})

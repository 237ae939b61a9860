"""Pytest fixtures shared by the test modules."""

import pytest

from graph import build_graph_from_pedigree


@pytest.fixture
def trio_records():
    """Father 1, mother 2 and their son 3; the son's sample has one library."""
    return [
        {"individualId": 1, "sex": "male", "sampleIds": {"name": "S1"}},
        {"individualId": 2, "sex": "female", "sampleIds": {"name": "S2"}},
        {
            "individualId": 3,
            "sex": "male",
            "sampleIds": {"name": "S3", "children": [{"name": "L3"}]},
        },
    ]


@pytest.fixture
def trio_layout():
    return {
        "layout": {
            "nid": [[1, 2], [3]],
            "n": [2, 1],
            "pos": [[0, 1], [0.5]],
            "spouse": [[1, 0], [0]],
        },
        "pedigree": {"findex": [0, 0, 1], "mindex": [0, 0, 2]},
    }


@pytest.fixture
def trio_graph(trio_records):
    return build_graph_from_pedigree(trio_records)


@pytest.fixture
def three_generation_records():
    sexes = ["male", "female", "male", "female", "male", "female", "male", "female"]
    return [
        {"individualId": i, "sex": sex, "sampleIds": {"name": f"S{i}"}}
        for i, sex in enumerate(sexes, start=1)
    ]


@pytest.fixture
def three_generation_layout():
    """Two founder couples, their children married to each other, two grandchildren."""
    return {
        "layout": {
            "nid": [[1, 2, 3, 4], [5, 6, 0, 0], [7, 8, 0, 0]],
            "n": [4, 2, 2],
            "pos": [[0, 1, 2, 3], [0.5, 2.5, 0, 0], [1, 2, 0, 0]],
            "spouse": [[1, 0, 1, 0], [1, 0, 0, 0], [0, 0, 0, 0]],
        },
        "pedigree": {
            "findex": [0, 0, 0, 0, 1, 3, 5, 5],
            "mindex": [0, 0, 0, 0, 2, 4, 6, 6],
        },
    }


@pytest.fixture
def trio_variants():
    """A de-novo call on the son's library, with one column unknown to the pedigree."""
    return {
        "header": {"sampleNames": ["GL-1", "GL-2", "GL-3", "LB-L3", "LB-X9"]},
        "records": [
            {
                "INFO": {"DNL": "LB-L3", "DNT": "A>T"},
                "GL-1": {"GT": "0/0"},
                "GL-2": {"GT": "0/0"},
                "GL-3": {"GT": "0/1"},
                "LB-L3": {"GT": "0/1", "AD": [10, 8]},
                "LB-X9": {"GT": "0/0"},
            }
        ],
    }

import numpy as np
import pandas as pd
import pytest

from emranking.pathways import explode_pathways, pathway_indicator, split_pathway


@pytest.fixture
def checklist():
    return pd.DataFrame({
        "taxonKey": [1, 2, 3, 4],
        "pathway": [
            "cbd_2014_pathway:escape_pet|cbd_2014_pathway:escape_horticulture",
            "cbd_2014_pathway:escape_pet",
            "cbd_2014_pathway:contaminant_nursery",
            np.nan,
        ],
        "first_observed": [2000, 2010, 2015, np.nan],
    })


@pytest.mark.parametrize("value, expected", [
    ("cbd_2014_pathway:escape_pet", ("escape", "pet")),
    ("cbd_2014_pathway:stowaway_ballast_water", ("stowaway", "ballast_water")),
    ("cbd_2014_pathway:unaided", ("unaided", "unknown")),
    ("horticulture", ("unknown", "unknown")),
    (None, ("unknown", "unknown")),
])
def test_split_pathway(value, expected):
    assert split_pathway(value) == expected


def test_explode_one_row_per_pathway(checklist):
    out = explode_pathways(checklist)
    assert len(out) == 5
    assert out.loc[out["taxonKey"] == 1, "pathway_level2"].tolist() == ["pet", "horticulture"]
    assert out.loc[out["taxonKey"] == 4, "pathway_level1"].tolist() == ["unknown"]


def test_level1_counts_distinct_taxa(checklist):
    out = pathway_indicator(checklist)
    assert out["pathway_level1"].tolist() == ["escape", "contaminant", "unknown"]
    assert out["n"].tolist() == [2, 1, 1]


def test_level2_within_category(checklist):
    out = pathway_indicator(checklist, level=2, category="escape")
    assert out["pathway_level2"].tolist() == ["pet", "horticulture"]
    assert out["n"].tolist() == [2, 1]


def test_year_filter_drops_undated_taxa(checklist):
    out = pathway_indicator(checklist, from_year=2005)
    assert out["pathway_level1"].tolist() == ["contaminant", "escape"]
    assert out["n"].tolist() == [1, 1]


def test_invalid_arguments(checklist):
    with pytest.raises(ValueError):
        pathway_indicator(checklist, level=3)
    with pytest.raises(ValueError):
        pathway_indicator(checklist, level=2, category="teleport")
    with pytest.raises(ValueError):
        pathway_indicator(checklist, level=1, category="escape")

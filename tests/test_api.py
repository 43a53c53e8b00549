import flowspan
from flowspan import AugmentationRecord, WeightedEdge, calc_max_flow, calc_mst


def test_public_names_are_exported():
    for name in flowspan.__all__:
        assert hasattr(flowspan, name), name


def test_readme_examples():
    assert calc_max_flow(3, [(0, 1, 3), (1, 2, 5)], 0, 2) == 3

    flow, summary = calc_max_flow(3, [(0, 1, 3), (1, 2, 5)], 0, 2, return_summary=True)
    assert flow == 3
    assert summary.iterations == [AugmentationRecord(1, (0, 1, 2), 3)]
    assert summary.min_cut == [(0, 1)]

    result = calc_mst(3, [(0, 1, 2), (1, 2, 1), (0, 2, 5)], undirected=True)
    assert result.cost == 3
    assert result.edges == [WeightedEdge(0, 1, 2), WeightedEdge(1, 2, 1)]


def test_version():
    assert flowspan.__version__ == "0.1.0"

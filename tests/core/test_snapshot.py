import logging

from simscope.core.snapshot import SnapshotAggregator, group_label


def test_label_has_footprint_and_types(group_factory, stats_factory) -> None:
    label = group_label(group_factory(memory_per_entity=48, types=("Position", "Energy")))

    assert "48 B" in label
    assert label.rstrip().endswith("Position Energy")


def test_rebuilds_only_when_group_count_changes(group_factory, stats_factory, caplog) -> None:
    agg = SnapshotAggregator()
    caplog.set_level(logging.DEBUG, logger="simscope")

    assert agg.update(stats_factory(groups=[group_factory()])) is True
    first = agg.snapshots

    # Same count, different contents: labels are kept
    assert agg.update(stats_factory(groups=[group_factory(memory_per_entity=99)])) is False
    assert agg.snapshots == first
    assert agg.rebuild_count == 1

    assert agg.update(stats_factory(groups=[group_factory(), group_factory(types=("Energy",))])) is True
    assert agg.rebuild_count == 2
    assert [s.index for s in agg.snapshots] == [0, 1]
    assert "Rebuilt group snapshot" in caplog.text


def test_rows_join_live_numbers(group_factory, stats_factory) -> None:
    agg = SnapshotAggregator()
    agg.update(stats_factory(groups=[group_factory(size=1, capacity=32)]))

    stats = stats_factory(groups=[group_factory(size=20, capacity=64, is_relation=True,
                                             tables_used=3, tables_free=2)])
    rows = agg.rows(stats)

    assert len(rows) == 1
    assert rows[0].size == 20
    assert rows[0].capacity == 64
    assert rows[0].is_relation
    assert rows[0].tables_used == 3
    assert rows[0].tables_total == 5
    assert agg.max_capacity(stats) == 64


def test_rows_skip_groups_no_longer_present(group_factory, stats_factory) -> None:
    agg = SnapshotAggregator()
    agg.update(stats_factory(groups=[group_factory(), group_factory()]))

    rows = agg.rows(stats_factory(groups=[group_factory()]))

    assert [r.index for r in rows] == [0]


def test_empty_aggregator(stats_factory) -> None:
    agg = SnapshotAggregator()

    assert agg.update(stats_factory()) is False
    assert len(agg) == 0
    assert agg.max_capacity(stats_factory()) == 0

"""
Test the example views built over 1..10.
"""

from strideview.examples import build_example_sequence, build_example_views


def test_example_sequence():
    assert build_example_sequence() == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert build_example_sequence(3) == [1, 2, 3]


def test_example_views():
    data = build_example_sequence()
    views = build_example_views(data)

    assert list(views["stride_1"]) == data
    assert list(views["stride_2"]) == [1, 3, 5, 7, 9]
    assert list(views["stride_3"]) == [1, 4, 7, 10]
    assert list(views["stride_4"]) == [1, 5, 9]
    assert list(views["stride_5"]) == [1, 6]
    assert list(views["stride_9"]) == [1, 10]
    assert list(views["stride_10"]) == [1]

    # Composition: same elements as a single stride of 4
    assert list(views["stride_2_twice"]) == list(views["stride_4"])


def test_example_views_share_data():
    data = build_example_sequence()
    views = build_example_views(data)
    for view in views.values():
        assert view.base is data

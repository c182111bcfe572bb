"""Label generator tests."""

from sl.labels import LabelGenerator


def test_counter_is_shared_across_prefixes():
    labels = LabelGenerator()
    assert labels.fresh("L_then_") == "L_then_0"
    assert labels.fresh("L_end_") == "L_end_1"
    assert labels.fresh("L_then_") == "L_then_2"


def test_labels_are_never_reused():
    labels = LabelGenerator()
    made = [labels.fresh(prefix) for prefix in ["L_then_", "L_end_"] * 20]
    assert len(set(made)) == len(made)


def test_reset():
    labels = LabelGenerator()
    labels.fresh("a")
    labels.fresh("a")
    labels.reset()
    assert labels.fresh("a") == "a0"

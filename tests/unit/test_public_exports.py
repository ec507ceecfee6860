from __future__ import annotations

import infinite_selection
import infinite_selection.selection as selection


def test_package_exports_clients_and_config():
    assert set(infinite_selection.__all__) == {
        "InfiniteListClient",
        "AsyncInfiniteListClient",
        "InfiniteListConfig",
    }


def test_selection_package_exports_models_only():
    expected = {
        "Item",
        "SelectedEntry",
        "ScrollSample",
        "GateState",
        "StatusFlags",
        "ListSnapshot",
    }
    assert expected == set(selection.__all__)
    assert "SelectionSession" not in selection.__all__
    assert "ItemStore" not in selection.__all__

import pytest

from quickseat import config
from quickseat.data import menu_item
from quickseat.models import MenuItem


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch):
    """Keep debug logs out of /tmp and never touch a real printer."""
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(tmp_path / "debug.log"))
    monkeypatch.setattr(config, "PRINT_KITCHEN_TICKETS", False)
    return tmp_path


@pytest.fixture
def masala_dosa() -> MenuItem:
    return menu_item("b1")


@pytest.fixture
def item_a() -> MenuItem:
    return MenuItem(
        item_id="a",
        name="Item A",
        price=120,
        image="",
        available=True,
        prep_time=10,
        is_veg=True,
        description="",
    )


@pytest.fixture
def item_b() -> MenuItem:
    return MenuItem(
        item_id="b",
        name="Item B",
        price=80,
        image="",
        available=True,
        prep_time=5,
        is_veg=False,
        description="",
    )

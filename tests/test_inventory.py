"""
Tests for the paged inventory feed and its summary
"""
import pytest

from services.inventory import (
    fetch_all_rows,
    get_inventory_summary,
    list_inventory,
    summarize_inventory,
)
from services.supabase_client import DataAccessError


def _rows(count):
    return [{"id": str(i), "serial_number": f"SN{i}"} for i in range(count)]


def test_fetch_all_rows_walks_pages_until_short_page(fake_supabase):
    client = fake_supabase(rows={"inventory": _rows(2500)})

    rows = fetch_all_rows(client, "inventory", page_size=1000)

    assert len(rows) == 2500
    assert rows[-1]["id"] == "2499"
    assert client.ranges == [(0, 999), (1000, 1999), (2000, 2999)]


def test_fetch_all_rows_stops_on_empty_page(fake_supabase):
    client = fake_supabase(rows={"inventory": _rows(2000)})

    rows = fetch_all_rows(client, "inventory", page_size=1000)

    assert len(rows) == 2000
    assert client.ranges == [(0, 999), (1000, 1999), (2000, 2999)]


def test_fetch_all_rows_of_empty_table(fake_supabase):
    client = fake_supabase()

    assert fetch_all_rows(client, "inventory") == []
    assert client.ranges == [(0, 999)]


def test_fetch_all_rows_applies_order(fake_supabase):
    client = fake_supabase(rows={"leads": _rows(3)})

    fetch_all_rows(client, "leads", order_by="created_at", descending=False, page_size=2)

    assert client.orders == [("created_at", False), ("created_at", False)]
    assert client.ranges == [(0, 1), (2, 3)]


def test_fetch_all_rows_wraps_backend_errors(fake_supabase):
    client = fake_supabase(error=RuntimeError("connection reset"))

    with pytest.raises(DataAccessError):
        fetch_all_rows(client, "inventory")


def test_fetch_all_rows_rejects_bad_page_size(fake_supabase):
    with pytest.raises(ValueError):
        fetch_all_rows(fake_supabase(), "inventory", page_size=0)


def test_list_inventory_orders_by_last_update(fake_supabase):
    client = fake_supabase(rows={"inventory": _rows(5)})

    items = list_inventory(client)

    assert len(items) == 5
    assert client.tables == ["inventory"]
    assert client.orders == [("updated_at", True)]


def test_summarize_inventory(inventory_rows):
    summary = summarize_inventory(inventory_rows)

    assert summary.total_items == 6
    assert summary.in_stock == 3
    assert summary.dispatched == 1
    assert summary.qc_pending == 3
    assert summary.qc_pass == 2
    assert summary.qc_fail == 1

    dashcam = summary.by_product["Dashcam"]
    assert (dashcam.total, dashcam.in_stock, dashcam.dispatched) == (3, 2, 1)
    mdvr = summary.by_product["MDVR"]
    assert (mdvr.total, mdvr.in_stock, mdvr.dispatched) == (2, 2, 0)
    assert summary.by_product["Unknown"].total == 1


def test_summarize_empty_inventory():
    summary = summarize_inventory([])

    assert summary.to_dict() == {
        "total_items": 0,
        "in_stock": 0,
        "dispatched": 0,
        "qc_pending": 0,
        "qc_pass": 0,
        "qc_fail": 0,
        "by_product": {},
    }


def test_get_inventory_summary_reads_whole_table(fake_supabase, inventory_rows):
    client = fake_supabase(rows={"inventory": inventory_rows})

    summary = get_inventory_summary(client)

    assert summary.total_items == 6
    assert client.orders == []

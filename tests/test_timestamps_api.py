"""
updated_at moves forward whenever a row is written, including rows that a
rebalance renumbers, and stays put when nothing changed.
"""
from datetime import datetime

import pytest


def stamp(row):
    return datetime.fromisoformat(row["updated_at"])


@pytest.fixture
def todo(make_column):
    return make_column("To Do")


def test_rename_board_bumps_updated_at(client, board):
    res = client.patch(f"/api/boards/{board['id']}", json={"name": "Renamed"})
    assert stamp(res.json()) > stamp(board)
    assert res.json()["created_at"] == board["created_at"]


def test_rename_column_bumps_updated_at(client, todo):
    res = client.put(f"/api/columns/{todo['id']}", json={"name": "Backlog"})
    assert stamp(res.json()) > stamp(todo)


def test_card_edits_bump_updated_at(client, todo, make_card):
    card = make_card(todo["id"], "A")

    edited = client.patch(f"/api/cards/{card['id']}", json={"title": "B"}).json()
    assert stamp(edited) > stamp(card)

    moved = client.patch(f"/api/cards/{card['id']}/position", json={"position": 5000}).json()
    assert stamp(moved) > stamp(edited)

    archived = client.post(f"/api/cards/{card['id']}/archive").json()
    assert stamp(archived) > stamp(moved)

    restored = client.post(f"/api/cards/{card['id']}/restore").json()
    assert stamp(restored) > stamp(archived)


def test_empty_patch_leaves_updated_at(client, todo, make_card):
    card = make_card(todo["id"], "A")
    res = client.patch(f"/api/cards/{card['id']}", json={})
    assert res.json()["updated_at"] == card["updated_at"]


def test_rebalance_bumps_renumbered_siblings(client, todo, make_card):
    a = make_card(todo["id"], "A")
    b = make_card(todo["id"], "B")
    c = make_card(todo["id"], "C")

    # C lands right after A, so the column becomes A, C, B and B moves to 3000
    client.patch(f"/api/cards/{c['id']}/position", json={"position": 1003})

    after = {row["id"]: row for row in client.get(f"/api/cards?columnId={todo['id']}").json()}
    assert after[b["id"]]["position"] == 3000
    assert stamp(after[b["id"]]) > stamp(b)
    # A kept position 1000, so its row was not rewritten
    assert after[a["id"]]["updated_at"] == a["updated_at"]


def test_column_rebalance_bumps_renumbered_siblings(client, board, make_column):
    a = make_column("A")
    b = make_column("B")
    c = make_column("C")

    client.patch(f"/api/columns/{c['id']}/position", json={"position": 1003})

    after = {row["id"]: row for row in client.get(f"/api/boards/{board['id']}/columns").json()}
    assert after[b["id"]]["position"] == 3000
    assert stamp(after[b["id"]]) > stamp(b)

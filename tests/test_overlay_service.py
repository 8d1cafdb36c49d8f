"""Tests for the overlay service."""

from uuid import uuid4

import pytest

from reeleats.domain.errors import InvalidArgumentError
from reeleats.domain.overlays import VisitStatus
from reeleats.services.events import ChangeEvent
from tests.conftest import RecordingListener


def test_missing_overlay_is_not_an_error(overlays) -> None:
    restaurant_id = uuid4()

    assert overlays.get_overlay(restaurant_id) is None
    default = overlays.overlay_or_default(restaurant_id)
    assert default.status is VisitStatus.UNVISITED
    assert default.rating == 0.0
    assert default.visited_at is None


def test_rating_creates_visited_overlay_then_unvisit_clears(overlays, clock) -> None:
    restaurant_id = uuid4()

    rated = overlays.set_rating(restaurant_id, 4.5)

    assert rated.status is VisitStatus.VISITED
    assert rated.rating == 4.5
    assert rated.visited_at == clock.now

    reverted = overlays.set_visit_status(restaurant_id, VisitStatus.UNVISITED)

    assert reverted.status is VisitStatus.UNVISITED
    assert reverted.rating == 0.0
    assert reverted.visited_at is None
    assert overlays.get_overlay(restaurant_id) == reverted


@pytest.mark.parametrize(
    "status", [VisitStatus.UNVISITED, VisitStatus.WANT_TO_VISIT]
)
def test_non_visited_status_always_clears(overlays, status) -> None:
    restaurant_id = uuid4()
    overlays.set_visit_status(restaurant_id, VisitStatus.VISITED)
    overlays.set_rating(restaurant_id, 3.0)

    overlay = overlays.set_visit_status(restaurant_id, status)

    assert overlay.rating == 0.0
    assert overlay.visited_at is None


def test_visited_keeps_first_visit_date(overlays, clock) -> None:
    restaurant_id = uuid4()
    first = overlays.set_visit_status(restaurant_id, VisitStatus.VISITED)
    clock.advance(3600)

    again = overlays.set_visit_status(restaurant_id, VisitStatus.VISITED)
    rated = overlays.set_rating(restaurant_id, 5)

    assert again.visited_at == first.visited_at
    assert rated.visited_at == first.visited_at


def test_rating_marks_want_to_visit_as_visited(overlays, clock) -> None:
    restaurant_id = uuid4()
    overlays.set_visit_status(restaurant_id, VisitStatus.WANT_TO_VISIT)

    overlay = overlays.set_rating(restaurant_id, 2.5)

    assert overlay.status is VisitStatus.VISITED
    assert overlay.visited_at == clock.now


@pytest.mark.parametrize("rating", [-0.1, 5.01, 10])
def test_rating_out_of_range_rejected(overlays, rating) -> None:
    restaurant_id = uuid4()

    with pytest.raises(InvalidArgumentError):
        overlays.set_rating(restaurant_id, rating)

    assert overlays.get_overlay(restaurant_id) is None


def test_rating_bounds_are_inclusive(overlays) -> None:
    restaurant_id = uuid4()

    assert overlays.set_rating(restaurant_id, 0).rating == 0.0
    assert overlays.set_rating(restaurant_id, 5).rating == 5.0


def test_toggle_visited_flips_status(overlays) -> None:
    restaurant_id = uuid4()

    assert overlays.toggle_visited(restaurant_id).status is VisitStatus.VISITED
    overlays.set_rating(restaurant_id, 4)
    toggled = overlays.toggle_visited(restaurant_id)

    assert toggled.status is VisitStatus.WANT_TO_VISIT
    assert toggled.rating == 0.0


def test_catalog_removal_cascades_to_overlay(overlays) -> None:
    restaurant_id = uuid4()
    overlays.set_rating(restaurant_id, 4)

    overlays.handle_catalog_change(
        ChangeEvent("restaurants", "removed", restaurant_id)
    )
    overlays.handle_catalog_change(ChangeEvent("collections", "updated", uuid4()))

    assert overlays.get_overlay(restaurant_id) is None


def test_overlay_changes_are_published(overlays) -> None:
    listener = RecordingListener()
    overlays.subscribe(listener)
    restaurant_id = uuid4()

    overlays.set_visit_status(restaurant_id, VisitStatus.WANT_TO_VISIT)
    overlays.delete_overlay(restaurant_id)
    overlays.delete_overlay(restaurant_id)

    assert [e.action for e in listener.events] == ["updated", "deleted"]

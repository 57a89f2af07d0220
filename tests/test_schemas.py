import pytest
from pydantic import ValidationError

from library_workers_api.app.schemas.book import BookCreate
from library_workers_api.app.schemas.user import User
from library_workers_api.app.schemas.worker import Coordinates, WorkerCreate, WorkerDetailedCreate


def test_detailed_worker_reads_wire_names():
    worker = WorkerDetailedCreate.model_validate(
        {
            "name": "Jo",
            "workName": "plumbing",
            "imgUrl": "x",
            "coordinatesOfWorker": {"latitude": 1, "longitude": 2.5},
            "costPerHour": 50,
        }
    )
    assert worker.work_name == "plumbing"
    assert worker.to_document()["coordinatesOfWorker"] == {"latitude": 1.0, "longitude": 2.5}
    assert list(worker.to_document()) == ["name", "workName", "imgUrl", "coordinatesOfWorker", "costPerHour"]


def test_worker_accepts_attribute_names():
    worker = WorkerCreate(img_url="x", name_of_worker="Jo")
    assert worker.to_document() == {"imgUrl": "x", "nameOfWorker": "Jo"}


@pytest.mark.parametrize("value", ["1.5", "north", None])
def test_coordinates_require_numbers(value):
    with pytest.raises(ValidationError):
        Coordinates.model_validate({"latitude": value, "longitude": 0.0})


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), 10**400])
def test_coordinates_must_be_finite(value):
    with pytest.raises(ValidationError):
        Coordinates.model_validate({"latitude": value, "longitude": 0.0})


@pytest.mark.parametrize("cost", [2**63, -(2**63) - 1])
def test_cost_per_hour_fits_in_64_bits(cost):
    with pytest.raises(ValidationError):
        WorkerDetailedCreate.model_validate(
            {
                "name": "Jo",
                "workName": "plumbing",
                "imgUrl": "x",
                "coordinatesOfWorker": {"latitude": 1.0, "longitude": 2.0},
                "costPerHour": cost,
            }
        )


def test_book_fields_are_required_strings():
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"isbn": "1", "title": "T"})
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"isbn": 1, "title": "T", "author": "A"})


def test_user_keeps_booked_workers_in_order():
    user = User.model_validate(
        {
            "nameOfUser": "Kim",
            "coordinatesOfUser": {"latitude": 48.1, "longitude": 11.6},
            "adress": "Main St 1",
            "recentBookedWorker": [
                {"imgUrl": "a", "nameOfWorker": "Ann"},
                {"imgUrl": "b", "nameOfWorker": "Ben"},
            ],
        }
    )
    assert user.address == "Main St 1"
    assert [w.name_of_worker for w in user.recent_booked_worker] == ["Ann", "Ben"]
    assert User.model_validate(
        {"nameOfUser": "Kim", "coordinatesOfUser": {"latitude": 0, "longitude": 0}, "adress": ""}
    ).recent_booked_worker == []

"""YAML loading and saving utilities for fleet snapshot files."""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .calculations import calc_next_apk_date
from .reservation import Reservation, STATUS_PENDING, TYPE_STANDARD
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class FleetLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as text for parse_date to check."""


FleetLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_scalar
)


class Fleet:
    """A snapshot of all vehicles and reservations from one data file."""

    def __init__(self, vehicles: List[Vehicle], reservations: List[Reservation]):
        self.vehicles = vehicles
        self.reservations = reservations

    @property
    def maintenance_blocks(self) -> List[Reservation]:
        return [r for r in self.reservations if r.is_maintenance_block]

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        raise KeyError(f"Unknown vehicle id {vehicle_id}")


def _parse_vehicle(dct: Dict[str, Any]) -> Vehicle:
    return Vehicle(
        dct["id"],
        dct.get("licensePlate", ""),
        dct.get("brand", ""),
        dct.get("model", ""),
        dct.get("fuel"),
        dct.get("productionDate"),
        dct.get("apkDate"),
        dct.get("warrantyEndDate"),
        dct.get("vehicleType"),
    )


def _parse_reservation(dct: Dict[str, Any]) -> Reservation:
    return Reservation(
        dct["id"],
        dct["vehicleId"],
        dct.get("startDate"),
        dct.get("endDate"),
        dct.get("status") or STATUS_PENDING,
        dct.get("type") or TYPE_STANDARD,
        dct.get("notes"),
    )


def _read(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        return yaml.load(fp, Loader=FleetLoader) or {}


def _write(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def load_fleet(filename: Union[str, Path]) -> Fleet:
    """Load vehicles and reservations from a YAML file."""
    data = _read(filename)
    vehicles = [_parse_vehicle(v) for v in data.get("vehicles") or []]
    reservations = [_parse_reservation(r) for r in data.get("reservations") or []]
    logger.debug(
        "Loaded %d vehicles and %d reservations from %s",
        len(vehicles),
        len(reservations),
        filename,
    )
    return Fleet(vehicles, reservations)


def _find_vehicle_dict(data: Dict[str, Any], vehicle_id: int) -> Dict[str, Any]:
    for entry in data.get("vehicles") or []:
        if entry.get("id") == vehicle_id:
            return entry
    raise KeyError(f"Unknown vehicle id {vehicle_id}")


def save_apk_completion(
    filename: Union[str, Path], vehicle_id: int, completion_date: date
) -> date:
    """
    Record a completed APK inspection in a fleet YAML file.

    Loads the raw YAML, sets the vehicle's apkDate to the next inspection
    date for that completion, writes back to the file and returns the new
    date.
    """
    data = _read(filename)
    entry = _find_vehicle_dict(data, vehicle_id)

    next_date = calc_next_apk_date(_parse_vehicle(entry), completion_date)
    entry["apkDate"] = next_date.isoformat()

    _write(filename, data)
    logger.info("Vehicle %s: next APK inspection %s", vehicle_id, next_date)
    return next_date


def save_warranty_end_date(
    filename: Union[str, Path], vehicle_id: int, end_date: date
) -> None:
    """Update a vehicle's warrantyEndDate in a fleet YAML file."""
    data = _read(filename)
    entry = _find_vehicle_dict(data, vehicle_id)
    entry["warrantyEndDate"] = end_date.isoformat()
    _write(filename, data)

"""
Vehicle rental API endpoints

Transport concerns only: parse identifiers, call the services, map results
to payloads. Status codes for failures come from handle_api_errors.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from constants import ErrorReason, HTTPStatus
from dependencies import get_fleet_service, get_rental_service
from domain.value_objects import VehicleId, VehicleStatus
from dtos.request.vehicle_request import (
    RegisterVehicleRequest,
    RentVehicleRequest,
    ReturnVehicleRequest,
    UpdateVehicleStatusRequest,
)
from dtos.response.vehicle_response import VehicleResponse
from services.interfaces import IFleetService, IRentalService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/available", response_model=List[VehicleResponse])
@handle_api_errors("List available vehicles")
def get_available_vehicles(rental_service: IRentalService = Depends(get_rental_service)):
    """
    List all vehicles that can be rented now.

    No pagination; order is whatever the store returns.
    """
    vehicles = rental_service.get_available_vehicles()
    return VehicleResponse.from_entities(vehicles)


@router.get("/customer/{customer_id}/rental", response_model=VehicleResponse)
@handle_api_errors("Get customer rental")
def get_customer_rented_vehicle(
    customer_id: str,
    rental_service: IRentalService = Depends(get_rental_service)
):
    """
    Get the vehicle a customer is currently renting.

    Returns:
        200 with the vehicle, 404 if the customer has no active rental,
        400 if the customer id is blank
    """
    vehicle = rental_service.get_customer_rented_vehicle(customer_id)
    if vehicle is None:
        raise HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail={
                "message": f"No active rental found for customer {customer_id}",
                "reason": ErrorReason.NO_ACTIVE_RENTAL.value,
            },
        )
    return VehicleResponse.from_entity(vehicle)


@router.post("/rent", response_model=VehicleResponse)
@handle_api_errors("Rent vehicle")
def rent_vehicle(
    request: RentVehicleRequest,
    rental_service: IRentalService = Depends(get_rental_service)
):
    """
    Rent a vehicle to a customer.

    Returns:
        200 with the rented vehicle; 400 malformed input; 404 unknown
        vehicle; 409 vehicle unavailable or customer already renting
    """
    vehicle_id = VehicleId.from_string(request.vehicle_id)
    vehicle = rental_service.rent_vehicle(vehicle_id, request.customer_id)
    return VehicleResponse.from_entity(vehicle)


@router.post("/return", response_model=VehicleResponse)
@handle_api_errors("Return vehicle")
def return_vehicle(
    request: ReturnVehicleRequest,
    rental_service: IRentalService = Depends(get_rental_service)
):
    """
    Return a rented vehicle.

    Returns:
        200 with the returned vehicle; 400 malformed input; 404 unknown
        vehicle; 409 vehicle not rented by this customer
    """
    vehicle_id = VehicleId.from_string(request.vehicle_id)
    vehicle = rental_service.return_vehicle(vehicle_id, request.customer_id)
    return VehicleResponse.from_entity(vehicle)


@router.post("", response_model=VehicleResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Register vehicle")
def register_vehicle(
    request: RegisterVehicleRequest,
    fleet_service: IFleetService = Depends(get_fleet_service)
):
    """Add a vehicle to the fleet. 409 if the plate is already registered."""
    vehicle = fleet_service.register_vehicle(
        request.license_plate,
        request.manufacturing_date,
        request.model,
        request.brand,
    )
    return VehicleResponse.from_entity(vehicle)


@router.get("/{vehicle_id}", response_model=VehicleResponse)
@handle_api_errors("Get vehicle")
def get_vehicle(vehicle_id: str, fleet_service: IFleetService = Depends(get_fleet_service)):
    """Get a vehicle by id."""
    vehicle = fleet_service.get_vehicle(VehicleId.from_string(vehicle_id))
    return VehicleResponse.from_entity(vehicle)


@router.put("/{vehicle_id}/status", response_model=VehicleResponse)
@handle_api_errors("Update vehicle status")
def update_vehicle_status(
    vehicle_id: str,
    request: UpdateVehicleStatusRequest,
    fleet_service: IFleetService = Depends(get_fleet_service)
):
    """
    Administrative status override.

    Sending a rented vehicle to Maintenance or Retired ends its rental.
    Rented cannot be set here; use POST /rent.
    """
    status = VehicleStatus.from_name(request.status)
    vehicle = fleet_service.set_vehicle_status(VehicleId.from_string(vehicle_id), status)
    logger.info(f"Vehicle {vehicle_id} status set to {status.label}")
    return VehicleResponse.from_entity(vehicle)

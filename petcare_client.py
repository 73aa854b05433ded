"""Pet Care API client.

This module defines a thin client around the Pet Care REST API.  Every
operation of the service has a method here; each method returns a
tuple ``(data, error)``:

* on success ``data`` holds the decoded JSON (a record or a list of
  records) and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or an empty list for list
  operations) and ``error`` is a dictionary with the keys
  ``status_code``, ``kind`` (``InvalidPayload``, ``NotFound``,
  ``Unauthorized`` or ``None`` for transport problems) and
  ``message``.

Payloads are plain dictionaries using the API's camelCase field names,
for example::

    api = PetCareAPI(base_url="http://localhost:8000")
    user, error = api.create_user(
        {"username": "jdoe", "email": "j@x.com", "phoneNumber": "+12345678901", "role": "PetOwner"}
    )

The client uses the ``requests`` library internally.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Record = Dict[str, Any]


class PetCareAPI:
    """Client for interacting with the Pet Care API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the API version to talk to.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/pets/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "kind": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        kind = None
        message = ""
        if response is not None:
            try:
                body = response.json()
                if isinstance(body, dict):
                    kind = body.get("error")
                    message = body.get("detail") or body.get("message") or str(body)
                else:
                    message = str(body)
            except ValueError:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s %s): %s", status, kind, message)
        return {"status_code": status, "kind": kind, "message": message}

    def _create(self, path: str, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", path, json_body=payload)

    def _get(self, path: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", path)

    def _list(self, path: str) -> Tuple[List[Record], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        """Register a user (``username``, ``email``, ``phoneNumber``, ``role``)."""
        return self._create("/users/", payload)

    def get_users(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/users/")

    def get_user(self, user_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._get(f"/users/{user_id}")

    def get_user_pets(self, user_id: str) -> Tuple[List[Record], Optional[Error]]:
        return self._list(f"/users/{user_id}/pets")

    def get_user_appointments(self, user_id: str) -> Tuple[List[Record], Optional[Error]]:
        return self._list(f"/users/{user_id}/appointments")

    def get_user_health_records(self, user_id: str) -> Tuple[List[Record], Optional[Error]]:
        return self._list(f"/users/{user_id}/health-records")

    # ------------------------------------------------------------------
    # Pets
    # ------------------------------------------------------------------
    def add_pet(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        """Add a pet (``ownerId``, ``name``, ``species``, ``breed``, ``age``)."""
        return self._create("/pets/", payload)

    def get_pets(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/pets/")

    def get_pet(self, pet_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._get(f"/pets/{pet_id}")

    def get_pet_prescriptions(self, pet_id: str) -> Tuple[List[Record], Optional[Error]]:
        return self._list(f"/pets/{pet_id}/prescriptions")

    # ------------------------------------------------------------------
    # Care: appointments, health records, prescriptions
    # ------------------------------------------------------------------
    def schedule_appointment(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        """Schedule an appointment (``petId``, ``veterinarianId``, ``date``)."""
        return self._create("/appointments/", payload)

    def get_appointments(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/appointments/")

    def get_appointment(self, appointment_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._get(f"/appointments/{appointment_id}")

    def add_health_record(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        return self._create("/health-records/", payload)

    def get_health_records(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/health-records/")

    def get_health_record(self, record_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._get(f"/health-records/{record_id}")

    def add_prescription(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        return self._create("/prescriptions/", payload)

    def get_prescriptions(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/prescriptions/")

    def get_prescription(self, prescription_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._get(f"/prescriptions/{prescription_id}")

    # ------------------------------------------------------------------
    # Communication
    # ------------------------------------------------------------------
    def send_message(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        """Send a message (``senderId``, ``recipientId``, ``content``)."""
        return self._create("/messages/", payload)

    def get_messages(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/messages/")

    def send_notification(self, user_id: str, message: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._create("/notifications/", {"userId": user_id, "message": message})

    def get_notifications(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/notifications/")

    # ------------------------------------------------------------------
    # Payments and adoptions
    # ------------------------------------------------------------------
    def make_payment(self, payload: Dict[str, Any]) -> Tuple[Optional[Record], Optional[Error]]:
        """Record a payment (``userId``, ``appointmentId``, ``amount``)."""
        return self._create("/payments/", payload)

    def get_payments(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/payments/")

    def adopt_pet(self, pet_id: str, adopter_id: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._create("/adoptions/", {"petId": pet_id, "adopterId": adopter_id})

    def get_pet_adoptions(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/adoptions/")

    def get_info(self) -> Tuple[Optional[Record], Optional[Error]]:
        return self._get("/info/")

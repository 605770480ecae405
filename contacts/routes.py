"""
HTTP routes for the contacts API.

Missing records and store failures both come back as an empty response;
the cause is only visible in the service logs.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from contacts.dependencies import get_contact_service
from contacts.results import ContactResult, Failed, Found, Listed
from contacts.schemas import ContactSchema
from contacts.service import ContactService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


def _render(result: ContactResult):
    if isinstance(result, Found):
        return ContactSchema.from_contact(result.contact)
    if isinstance(result, Failed):
        logger.warning("%s failed, returning empty response", result.operation)
    return Response(status_code=200)


@router.get(
    "", response_model=list[ContactSchema], response_model_exclude_none=True
)
def get_all(service: ContactService = Depends(get_contact_service)):
    result = service.find_all()
    if isinstance(result, Listed):
        return [ContactSchema.from_contact(contact) for contact in result.contacts]
    logger.warning("%s failed, returning empty list", result.operation)
    return []


@router.get(
    "/{contact_id}", response_model=ContactSchema, response_model_exclude_none=True
)
def get_contact(
    contact_id: str, service: ContactService = Depends(get_contact_service)
):
    return _render(service.find_one(contact_id))


@router.post("", response_model=ContactSchema, response_model_exclude_none=True)
def create(
    payload: ContactSchema, service: ContactService = Depends(get_contact_service)
):
    return _render(service.upsert(payload.to_contact()))


@router.put(
    "/{contact_id}", response_model=ContactSchema, response_model_exclude_none=True
)
def update(
    contact_id: str,
    payload: ContactSchema,
    service: ContactService = Depends(get_contact_service),
):
    contact = payload.model_copy(update={"contactId": contact_id}).to_contact()
    return _render(service.upsert(contact))


@router.delete("/{contact_id}", status_code=204, response_class=Response)
def delete(contact_id: str, service: ContactService = Depends(get_contact_service)):
    result = service.delete_one(contact_id)
    if isinstance(result, Failed):
        logger.warning("%s failed for %s", result.operation, contact_id)
    return Response(status_code=204)

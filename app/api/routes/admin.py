import json
import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import ValidationError as PydanticValidationError

from app.api.deps import get_admin_session, get_registration_submitter
from app.api.schemas.admin import (
    AddSlotRequest,
    RegistrationResponse,
    RemoveSlotRequest,
    SlotListResponse,
)
from app.core.errors import CollaboratorRejection, TransportFailure
from app.core.session import AdminSession
from app.models.provider import Address, Experience, Speciality
from app.models.registration import ProviderRegistration, RegistrationImage
from app.services.registration_service import ProviderRegistrationSubmitter
from app.services.slot_label_service import add_label, remove_label

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/slots", response_model=SlotListResponse)
async def add_slot(body: AddSlotRequest) -> SlotListResponse:
    return SlotListResponse(slots=add_label(body.slots, body.candidate))


@router.post("/slots/remove", response_model=SlotListResponse)
async def remove_slot(body: RemoveSlotRequest) -> SlotListResponse:
    return SlotListResponse(slots=remove_label(body.slots, body.index))


def _validation_detail(e: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in e.errors()
    )


@router.post("/providers", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def add_provider(
    image: UploadFile | None = File(None),
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    experience: Experience = Form(Experience.ONE),
    fees: float = Form(...),
    about: str = Form(""),
    speciality: Speciality = Form(Speciality.WILDLIFE),
    degree: str = Form(""),
    address: str = Form("{}"),  # JSON {"line1", "line2"}
    slots: str = Form("[]"),  # JSON array of slot labels
    session: AdminSession = Depends(get_admin_session),
    submitter: ProviderRegistrationSubmitter = Depends(get_registration_submitter),
) -> RegistrationResponse:
    try:
        registration = ProviderRegistration(
            name=name,
            email=email,
            password=password,
            experience=experience,
            fee=fees,
            about=about,
            speciality=speciality,
            degree=degree,
            address=Address.model_validate(json.loads(address)),
            slots=json.loads(slots),
        )
    except json.JSONDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"address and slots must be JSON: {e}",
        ) from e
    except PydanticValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_validation_detail(e),
        ) from e

    upload = None
    if image is not None and image.filename:
        upload = RegistrationImage(
            filename=image.filename,
            content=await image.read(),
            content_type=image.content_type or "application/octet-stream",
        )
    outcome = await submitter.submit(session, registration, upload)
    if outcome.error == "rejected":
        raise CollaboratorRejection(outcome.message)
    if outcome.error == "transport":
        raise TransportFailure(outcome.message)
    return RegistrationResponse(message=outcome.message)

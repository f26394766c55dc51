from fastapi import APIRouter, Depends, HTTPException
from api.deps import get_ward
from core.ward import Ward
from docs.patients.operations import (
    admit_patient_description,
    move_patient_description,
    switch_patients_description,
    set_vip_description,
    mark_infected_description,
    unmark_infected_description,
    discharge_patient_description,
)
from schemas.patients.operations import (
    AdmitRequest,
    MoveRequest,
    SwitchRequest,
    VipRequest,
    PatientLocation,
    OperationResult,
)
from schemas.patients.patient import PatientRecord
from utils.logger import logger

router = APIRouter(prefix="/patients", tags=["Patients"])


def locate(ward: Ward, clinical_record: int) -> PatientLocation:
    found = ward.find_patient(clinical_record)
    if found is None:
        raise HTTPException(status_code=404, detail=f"Patient not found: {clinical_record}")
    bed_number, patient = found
    return PatientLocation(bedNumber=bed_number, patient=PatientRecord.from_patient(patient))


@router.post(
    "/admit",
    response_model=PatientLocation,
    status_code=201,
    description=admit_patient_description,
    summary="Admit Patient",
)
def admit_patient(request: AdmitRequest, ward: Ward = Depends(get_ward)):
    logger.info(
        "API admit: patient %s -> bed %s",
        request.patient.clinicalRecordNumber,
        request.bedNumber,
    )
    ward.admit(request.patient.to_patient(), request.bedNumber)
    return locate(ward, request.patient.clinicalRecordNumber)


@router.post(
    "/switch",
    response_model=OperationResult,
    description=switch_patients_description,
    summary="Switch Patients",
)
def switch_patients(request: SwitchRequest, ward: Ward = Depends(get_ward)):
    logger.info("API switch: %s <-> %s", request.firstRecord, request.secondRecord)
    ward.switch(request.firstRecord, request.secondRecord)
    return OperationResult(
        message=f"Patients {request.firstRecord} and {request.secondRecord} switched beds"
    )


@router.get("/{clinical_record}", response_model=PatientLocation, summary="Find Patient")
def find_patient(clinical_record: int, ward: Ward = Depends(get_ward)):
    return locate(ward, clinical_record)


@router.post(
    "/{clinical_record}/move",
    response_model=PatientLocation,
    description=move_patient_description,
    summary="Move Patient",
)
def move_patient(clinical_record: int, request: MoveRequest, ward: Ward = Depends(get_ward)):
    logger.info("API move: patient %s -> bed %s", clinical_record, request.bedNumber)
    ward.move(clinical_record, request.bedNumber)
    return locate(ward, clinical_record)


@router.put(
    "/{clinical_record}/vip",
    response_model=PatientLocation,
    description=set_vip_description,
    summary="Set VIP",
)
def set_vip(clinical_record: int, request: VipRequest, ward: Ward = Depends(get_ward)):
    logger.info("API vip: patient %s -> %s", clinical_record, request.isVip)
    ward.set_vip(clinical_record, request.isVip)
    return locate(ward, clinical_record)


@router.post(
    "/{clinical_record}/infection",
    response_model=PatientLocation,
    description=mark_infected_description,
    summary="Mark Infectious",
)
def mark_infected(clinical_record: int, ward: Ward = Depends(get_ward)):
    logger.info("API infection: mark patient %s", clinical_record)
    ward.mark_infected(clinical_record)
    return locate(ward, clinical_record)


@router.delete(
    "/{clinical_record}/infection",
    response_model=PatientLocation,
    description=unmark_infected_description,
    summary="Unmark Infectious",
)
def unmark_infected(clinical_record: int, ward: Ward = Depends(get_ward)):
    logger.info("API infection: unmark patient %s", clinical_record)
    ward.unmark_infected(clinical_record)
    return locate(ward, clinical_record)


@router.delete(
    "/{clinical_record}",
    response_model=PatientRecord,
    description=discharge_patient_description,
    summary="Discharge Patient",
)
def discharge_patient(clinical_record: int, ward: Ward = Depends(get_ward)):
    logger.info("API discharge: patient %s", clinical_record)
    return PatientRecord.from_patient(ward.discharge(clinical_record))

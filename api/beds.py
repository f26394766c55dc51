from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from api.deps import get_ward
from core.ward import Ward
from docs.beds.census import list_beds_description, available_beds_description
from schemas.beds.census import BedView, BedSummary, AvailableBeds
from schemas.patients.patient import PatientRecord

router = APIRouter(prefix="/beds", tags=["Beds"])


@router.get(
    "",
    response_model=List[BedView],
    description=list_beds_description,
    summary="List Beds",
)
def list_beds(unit: Optional[int] = Query(default=None), ward: Ward = Depends(get_ward)):
    return [BedView.from_bed(bed) for bed in ward.iter_beds(unit)]


@router.get("/summary", response_model=BedSummary, summary="Count Beds by State")
def bed_summary(ward: Ward = Depends(get_ward)):
    counts = ward.count_beds_by_state()
    return BedSummary(**counts._asdict(), total=ward.config.total_beds)


@router.post(
    "/available",
    response_model=AvailableBeds,
    description=available_beds_description,
    summary="Available Beds for Patient",
)
def available_beds(patient: PatientRecord, ward: Ward = Depends(get_ward)):
    bed_numbers = ward.available_beds_for(patient.to_patient())
    return AvailableBeds(count=len(bed_numbers), bedNumbers=bed_numbers)


@router.get("/{bed_number}", response_model=BedView, summary="Get Bed")
def get_bed(bed_number: int, ward: Ward = Depends(get_ward)):
    return BedView.from_bed(ward.get_bed(bed_number))

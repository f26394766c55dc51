from pydantic import BaseModel, Field, ConfigDict
from core.patient import Patient, Gender
from utils.constants import MIN_CLINICAL_RECORD, MAX_CLINICAL_RECORD


class PatientRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    clinicalRecordNumber: int = Field(ge=MIN_CLINICAL_RECORD, le=MAX_CLINICAL_RECORD)  # 5 digits
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    gender: Gender
    isInfected: bool = False
    isVip: bool = False

    def to_patient(self) -> Patient:
        return Patient(
            clinical_record_number=self.clinicalRecordNumber,
            name=self.name,
            age=self.age,
            gender=self.gender,
            is_infected=self.isInfected,
            is_vip=self.isVip,
        )

    @classmethod
    def from_patient(cls, patient: Patient) -> "PatientRecord":
        return cls(
            clinicalRecordNumber=patient.clinical_record_number,
            name=patient.name,
            age=patient.age,
            gender=patient.gender,
            isInfected=patient.is_infected,
            isVip=patient.is_vip,
        )

from pydantic import BaseModel, ConfigDict, model_validator
from schemas.patients.patient import PatientRecord


class AdmitRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    bedNumber: int  # UXX, e.g. 205
    patient: PatientRecord


class MoveRequest(BaseModel):
    bedNumber: int  # destination bed


class SwitchRequest(BaseModel):
    firstRecord: int
    secondRecord: int

    @model_validator(mode="after")
    def check_distinct(self) -> "SwitchRequest":
        if self.firstRecord == self.secondRecord:
            raise ValueError("firstRecord and secondRecord must refer to different patients.")
        return self


class VipRequest(BaseModel):
    isVip: bool


class PatientLocation(BaseModel):
    bedNumber: int
    patient: PatientRecord


class OperationResult(BaseModel):
    status: str = "ok"
    message: str

from typing import Dict

from pydantic import BaseModel


class MeasurementRecord(BaseModel):
    # field names are the JSON keys the frontend and the ML service use
    pregnancies:              int = 0
    glucose:                  float = 0.0
    bloodPressure:            float = 0.0
    skinThickness:            float = 0.0
    insulin:                  float = 0.0
    bmi:                      float = 0.0
    diabetesPedigreeFunction: float = 0.0
    age:                      int = 0


class PredictionResult(BaseModel):
    prediction: str


class ExtractionResult(BaseModel):
    extracted: Dict[str, float]


class ErrorResponse(BaseModel):
    error: str

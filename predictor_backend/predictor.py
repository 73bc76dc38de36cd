import logging
from typing import Optional, Protocol

import requests

from .errors import UpstreamError, UpstreamUnreachable
from .models import MeasurementRecord

logger = logging.getLogger(__name__)


class Predictor(Protocol):
    def predict(self, record: MeasurementRecord) -> str:
        ...


class HttpPredictor:
    """
    Relays a measurement record to the remote ML service's `POST /predict`.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def predict_url(self) -> str:
        return self.base_url + "/predict"

    def predict(self, record: MeasurementRecord) -> str:
        try:
            resp = requests.post(self.predict_url, json=record.model_dump(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"ML server unreachable at {self.predict_url}: {e}")
            raise UpstreamUnreachable(f"Failed to connect to ML server: {e}") from e

        if resp.status_code != 200:
            logger.error(f"ML server answered {resp.status_code} for {self.predict_url}")
            raise UpstreamError(f"ML server error: status {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise UpstreamError("ML server returned an invalid response") from e

        prediction = body.get("prediction", "") if isinstance(body, dict) else None
        if not isinstance(prediction, str):
            raise UpstreamError("ML server returned an invalid response")
        return prediction

from pydantic import BaseModel


class RssiReading(BaseModel):
    rssi: int | None
    distance: float | None
    unit: str | None = None
    raw_distance: float | None = None
    error: str | None = None

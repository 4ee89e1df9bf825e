"""
Storage records for trains.json - Pydantic models mapping JSON documents to entities
"""

from pydantic import BaseModel, ConfigDict, Field

from src.service.train_booking.domain.entity.train_entity import Train


class TrainRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    train_id: str
    train_no: str = ''
    stations: list[str] = Field(default_factory=list)
    station_times: dict[str, str] = Field(default_factory=dict)
    seats: list[list[int]] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, train: Train) -> 'TrainRecord':
        return cls(
            train_id=train.train_id,
            train_no=train.train_no,
            stations=list(train.stations),
            station_times=dict(train.station_times),
            seats=[list(row) for row in train.seats],
        )

    def to_entity(self) -> Train:
        return Train(
            train_id=self.train_id,
            train_no=self.train_no,
            stations=list(self.stations),
            station_times=dict(self.station_times),
            seats=[list(row) for row in self.seats],
        )

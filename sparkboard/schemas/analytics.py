from sparkboard.schemas.base import APIModel


class StatusCount(APIModel):
    status: str
    count: int

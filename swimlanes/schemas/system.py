from pydantic import BaseModel

class SystemStats(BaseModel):
    boards: int
    columns: int
    cards: int
    archived_cards: int

from pydantic import BaseModel


class UtilisationReport(BaseModel):
    input_file: str
    output_file: str
    trigger_level: float
    readings: int
    triggered: int
    skipped_tokens: int = 0
    percentage: float

"""Pipeline configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    column_spacing: float = 80
    row_spacing: float = 100

    # Sample column naming: 3-character prefix, then the person or sample id
    person_prefix: str = "GL-"
    prefix_length: int = 3

    # INFO fields of the de-novo record
    location_field: str = "DNL"
    descriptor_field: str = "DNT"


DEFAULT_CONFIG = PipelineConfig()

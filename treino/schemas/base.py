from __future__ import annotations

from datetime import time
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from treino.utils.time import fmt_hhmm


class CamelModel(BaseModel):
    """Atributos em snake_case no Python, JSON em camelCase (contrato do cliente)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# entrada aceita "HH:MM" ou "HH:MM:SS"; saída JSON sempre "HH:MM",
# model_dump() em modo python mantém datetime.time para as models
Hora = Annotated[time, PlainSerializer(fmt_hhmm, return_type=str, when_used="json")]


class MessageOut(BaseModel):
    message: str

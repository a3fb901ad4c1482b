from __future__ import annotations

from collections.abc import Sequence

from treino.models.evolucao import Evolucao
from treino.schemas.evolucoes import EvolucaoStatsOut


def _delta(a: float | None, b: float | None) -> float | None:
    if a is None or b is None:
        return None
    return round(a - b, 2)


def compute_stats(registros: Sequence[Evolucao]) -> EvolucaoStatsOut:
    """Compara o primeiro e o último registro (por data) do aluno."""
    if not registros:
        return EvolucaoStatsOut(total_registros=0)

    ordenados = sorted(registros, key=lambda e: (e.data, e.created_at))
    primeiro, ultimo = ordenados[0], ordenados[-1]
    return EvolucaoStatsOut(
        total_registros=len(ordenados),
        primeiro_registro=primeiro.data,
        ultimo_registro=ultimo.data,
        peso_inicial=primeiro.peso,
        peso_atual=ultimo.peso,
        peso_perdido=_delta(primeiro.peso, ultimo.peso),
        gordura_inicial=primeiro.gordura_corporal,
        gordura_atual=ultimo.gordura_corporal,
        gordura_reduzida=_delta(primeiro.gordura_corporal, ultimo.gordura_corporal),
        musculo_inicial=primeiro.massa_muscular,
        musculo_atual=ultimo.massa_muscular,
        musculo_ganho=_delta(ultimo.massa_muscular, primeiro.massa_muscular),
    )

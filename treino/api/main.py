"""API router setup."""
from fastapi import APIRouter

from treino.api.routes import (
    agendamentos,
    aluno_agenda,
    alunos,
    assinaturas,
    auth,
    blocos_horarios,
    evolucoes,
    fichas_treino,
    fotos_progresso,
    pagamentos,
    planos_alimentares,
    slots,
    students,
    treinos_pdf,
    treinos_realizados,
    treinos_video,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(agendamentos.router)
api_router.include_router(aluno_agenda.router)
api_router.include_router(slots.router)
api_router.include_router(blocos_horarios.router)
api_router.include_router(pagamentos.router)
api_router.include_router(pagamentos.webhook_router)
api_router.include_router(assinaturas.router)
api_router.include_router(students.router)
api_router.include_router(alunos.router)
api_router.include_router(treinos_realizados.router)
api_router.include_router(evolucoes.router)
api_router.include_router(treinos_pdf.router)
api_router.include_router(fotos_progresso.router)
api_router.include_router(treinos_video.router)
api_router.include_router(treinos_video.admin_router)
api_router.include_router(fichas_treino.router)
api_router.include_router(fichas_treino.aluno_router)
api_router.include_router(planos_alimentares.admin_router)
api_router.include_router(planos_alimentares.router)
api_router.include_router(planos_alimentares.aluno_router)

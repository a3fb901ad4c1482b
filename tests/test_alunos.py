import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from treino.models.aluno import Aluno
from treino.models.user import User
from treino.models.user_profile import UserProfile
from treino.services import provisioning

FALTANDO = "Dados obrigatórios faltando: nome, email e senha são necessários"


def _count(db, model):
    return db.scalar(select(func.count()).select_from(model))


def test_provision_creates_identity_profile_and_aluno(client, db_session):
    r = client.post(
        "/api/alunos",
        json={
            "nome": "Ana Souza",
            "email": "Ana@Academia.com",
            "senha": "Senha123!",
            "dataNascimento": "1990-05-10",
            "altura": 168,
            "genero": "feminino",
        },
    )
    assert r.status_code == 201
    data = r.json()
    assert data["email"] == "ana@academia.com"
    assert data["status"] == "ativo"
    assert data["altura"] == 168
    assert set(data) >= {"id", "nome", "dataNascimento", "fotoUrl", "createdAt", "updatedAt"}

    assert _count(db_session, User) == 1
    assert _count(db_session, UserProfile) == 1
    assert _count(db_session, Aluno) == 1
    user = db_session.scalars(select(User)).one()
    assert user.password_hash != "Senha123!"


@pytest.mark.parametrize(
    "body",
    [
        {"email": "x@academia.com", "senha": "s"},
        {"nome": "X", "senha": "s"},
        {"nome": "X", "email": "x@academia.com"},
        {"nome": "   ", "email": "x@academia.com", "senha": "s"},
    ],
)
def test_missing_required_fields(client, body):
    r = client.post("/api/alunos", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": FALTANDO}


def test_duplicate_email_is_400_and_leaves_nothing_behind(client, db_session, aluno):
    r = client.post(
        "/api/alunos",
        json={"nome": "Outra", "email": aluno["email"], "senha": "Senha123!"},
    )
    assert r.status_code == 400
    assert r.json()["error"]
    assert _count(db_session, User) == 1
    assert _count(db_session, UserProfile) == 1


@pytest.mark.parametrize("step", ["_create_profile", "_create_aluno"])
def test_failed_step_rolls_back_everything(client, db_session, monkeypatch, step):
    def _boom(*args, **kwargs):
        raise SQLAlchemyError("falha simulada")

    monkeypatch.setattr(provisioning, step, _boom)

    r = client.post(
        "/api/alunos",
        json={"nome": "Ana", "email": "ana@academia.com", "senha": "Senha123!"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "falha simulada"}
    assert _count(db_session, User) == 0
    assert _count(db_session, UserProfile) == 0
    assert _count(db_session, Aluno) == 0

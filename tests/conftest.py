from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import treino.db.base  # noqa: F401  registra todas as tabelas
from treino.db.base_class import Base
from treino.db.session import get_db
from treino.deps import get_now, get_storage
from treino.main import app

SP = ZoneInfo("America/Sao_Paulo")
# quarta-feira
AGORA = datetime(2026, 10, 21, 10, 0, tzinfo=SP)


class FakeStorage:
    """Substitui o Supabase Storage: só registra remoções e assinaturas."""

    def __init__(self):
        self.removed: list[tuple[str, list[str]]] = []
        self.signed: list[tuple[str, str, int]] = []

    def remove(self, bucket: str, names: list[str]) -> bool:
        self.removed.append((bucket, list(names)))
        return True

    def create_signed_url(self, bucket: str, name: str, expires_in: int) -> str:
        self.signed.append((bucket, name, expires_in))
        return f"https://storage.test/{bucket}/{name}?token=t&expires={expires_in}"

    def close(self) -> None:
        pass


# Create an in-memory SQLite database for testing
@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="session")
def TestingSessionLocal(engine):
    return sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )


@pytest.fixture(autouse=True)
def _clean_tables(engine):
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db_session(TestingSessionLocal):
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(TestingSessionLocal, storage):
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_now] = lambda: AGORA

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_aluno(client):
    """Provisiona um aluno pela API e devolve o JSON de resposta."""
    counter = {"n": 0}

    def _make(nome: str = "Ana Souza", senha: str = "Senha123!", **extra):
        counter["n"] += 1
        email = extra.pop("email", f"aluno{counter['n']}@academia.com")
        r = client.post(
            "/api/alunos", json={"nome": nome, "email": email, "senha": senha, **extra}
        )
        assert r.status_code == 201, r.text
        return r.json()

    return _make


@pytest.fixture
def aluno(make_aluno):
    return make_aluno()


@pytest.fixture
def bloco(client):
    # quarta 08:00-10:00, slots de 60 min
    r = client.post(
        "/api/admin/blocos-horarios",
        json={"diaSemana": 3, "horaInicio": "08:00", "horaFim": "10:00"},
    )
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def auth_headers(client, aluno):
    r = client.post(
        "/api/auth/login", json={"email": aluno["email"], "senha": "Senha123!"}
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['accessToken']}"}
